from __future__ import annotations

import os
import sys
import argparse
import json as _json
import getpass as _getpass

from pathlib import Path
from typing import List, Optional, Union

from strongbox.codec import decode, encode
from strongbox.constants import DEFAULT_DIGEST, KEY_ENV_VAR
from strongbox.errors import StrongboxError
from strongbox.hashutil import HEX_DIGESTS
from strongbox.transform import json_dumps, json_loads


def _resolve_key(key: Optional[str]) -> str:
    """Pick the passphrase from --key, then the environment, then a prompt."""
    if key is not None:
        return key
    env_key = os.environ.get(KEY_ENV_VAR)
    if env_key is not None:
        return env_key
    return _getpass.getpass("Key: ")


def _read_text_arg(value: Optional[str]) -> str:
    """Return ``value`` or, when omitted, stdin minus one trailing newline."""
    if value is not None:
        return value
    text = sys.stdin.read()
    for ending in ("\r\n", "\n"):
        if text.endswith(ending):
            return text[: -len(ending)]
    return text


def _emit(result: Union[str, bytes], output: Optional[str], *, quiet: bool, newline: bool = True) -> None:
    """Write ``result`` to stdout or ``output``.

    Text written to a file gets a trailing newline only when ``newline`` is
    set; decrypted plaintext is written byte-for-byte.
    """
    if output is None:
        if isinstance(result, bytes):
            sys.stdout.buffer.write(result)
            sys.stdout.buffer.flush()
        else:
            print(result)
        return
    if isinstance(result, bytes):
        data = result
    else:
        data = (result + "\n" if newline else result).encode("utf-8")
    Path(output).write_bytes(data)
    if not quiet:
        print(f"Wrote {len(data)} bytes to {output}", file=sys.stderr)


def cmd_encrypt(
    value: Optional[str],
    *,
    key: str,
    input_path: Optional[str] = None,
    output: Optional[str] = None,
    as_json: bool = False,
    quiet: bool = False,
) -> Union[str, bytes]:
    """Encrypt text, JSON or a file's bytes and write the frame.

    Args:
        value: Text to encrypt (stdin when None and no input_path).
        key: Passphrase.
        input_path: Encrypt this file's raw bytes; the frame is binary.
        output: Write the frame here instead of stdout.
        as_json: Parse ``value`` as JSON and encrypt its serialized form.
        quiet: Suppress informational lines on stderr.
    """
    if input_path is not None:
        result = encode(key, Path(input_path).read_bytes())
    elif as_json:
        result = encode(key, _json.loads(_read_text_arg(value)), json_dumps)
    else:
        result = encode(key, _read_text_arg(value))
    _emit(result, output, quiet=quiet)
    return result


def cmd_decrypt(
    blob: Optional[str],
    *,
    key: str,
    input_path: Optional[str] = None,
    output: Optional[str] = None,
    as_json: bool = False,
    quiet: bool = False,
) -> Union[str, bytes]:
    """Decrypt a hex frame (argument/stdin) or a binary frame file."""
    if input_path is not None:
        result = decode(key, Path(input_path).read_bytes())
    elif as_json:
        result = json_dumps(decode(key, _read_text_arg(blob), json_loads))
    else:
        result = decode(key, _read_text_arg(blob))
    _emit(result, output, quiet=quiet, newline=False)
    return result


def cmd_digest(value: Optional[str], *, algorithm: str = DEFAULT_DIGEST, input_path: Optional[str] = None) -> str:
    data: Union[str, bytes]
    if input_path is not None:
        data = Path(input_path).read_bytes()
    else:
        data = _read_text_arg(value)
    result = HEX_DIGESTS[algorithm](data)
    print(result)
    return result


def main(argv: List[str] | None = None):
    ap = argparse.ArgumentParser(
        prog="strongbox",
        description="Strongbox passphrase encryption tool",
        epilog=(
            f"The key is taken from --key, then ${KEY_ENV_VAR}, then an interactive prompt. "
            "Frames are not authenticated: a wrong key decrypts to garbage rather than failing."
        ),
    )
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_encrypt = sub.add_parser("encrypt", help="Encrypt text (hex output) or a file (binary output)")
    ap_encrypt.add_argument("value", nargs="?", help="Text to encrypt (default: read stdin)")
    ap_encrypt.add_argument("--input", "-i", dest="input_path", help="Encrypt the raw bytes of this file")
    ap_encrypt.add_argument("--output", "-o", help="Write the frame to this path")
    ap_encrypt.add_argument("--json", action="store_true", help="Treat the value as JSON")
    ap_encrypt.add_argument("--key", help="Passphrase")
    ap_encrypt.add_argument("--quiet", help="limit outputs to results only", action="store_true")

    ap_decrypt = sub.add_parser("decrypt", help="Decrypt a hex frame or a binary frame file")
    ap_decrypt.add_argument("blob", nargs="?", help="Hex frame to decrypt (default: read stdin)")
    ap_decrypt.add_argument("--input", "-i", dest="input_path", help="Decrypt the binary frame stored in this file")
    ap_decrypt.add_argument("--output", "-o", help="Write the plaintext to this path")
    ap_decrypt.add_argument("--json", action="store_true", help="Parse the plaintext as JSON")
    ap_decrypt.add_argument("--key", help="Passphrase")
    ap_decrypt.add_argument("--quiet", help="limit outputs to results only", action="store_true")

    ap_digest = sub.add_parser("digest", help="Print a hex digest of text or a file")
    ap_digest.add_argument("value", nargs="?", help="Text to hash (default: read stdin)")
    ap_digest.add_argument("--input", "-i", dest="input_path", help="Hash the raw bytes of this file")
    ap_digest.add_argument(
        "--algorithm",
        "-a",
        choices=sorted(HEX_DIGESTS),
        default=DEFAULT_DIGEST,
        help=f"Digest algorithm (default: {DEFAULT_DIGEST})",
    )

    args = ap.parse_args(argv)
    if args.cmd in ("encrypt", "decrypt") and args.json and args.input_path is not None:
        ap.error("--json cannot be combined with --input")
    try:
        if args.cmd == "encrypt":
            cmd_encrypt(
                args.value,
                key=_resolve_key(args.key),
                input_path=args.input_path,
                output=args.output,
                as_json=args.json,
                quiet=args.quiet,
            )
        elif args.cmd == "decrypt":
            cmd_decrypt(
                args.blob,
                key=_resolve_key(args.key),
                input_path=args.input_path,
                output=args.output,
                as_json=args.json,
                quiet=args.quiet,
            )
        elif args.cmd == "digest":
            cmd_digest(args.value, algorithm=args.algorithm, input_path=args.input_path)
        else:
            raise RuntimeError("Unknown command")
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except StrongboxError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except ValueError as e:
        # json.JSONDecodeError lands here
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except (RuntimeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
