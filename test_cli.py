from __future__ import annotations

import os
import json
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path

from strongbox.codec import decode, encode
from strongbox.constants import KEY_ENV_VAR


class CLIIntegrationTests(unittest.TestCase):
    def run_cli(self, args, *, expect: int | None = 0, key: str | None = "secret", stdin: str | None = None):
        cmd = [sys.executable, "-m", "strongbox.cli"] + list(args)
        env = os.environ.copy()
        repo_root = Path(__file__).resolve().parent
        existing = env.get("PYTHONPATH", "")
        env["PYTHONPATH"] = str(repo_root) if not existing else f"{repo_root}{os.pathsep}{existing}"
        env["PYTHONIOENCODING"] = "utf-8"
        env.pop(KEY_ENV_VAR, None)
        if key is not None:
            env[KEY_ENV_VAR] = key
        proc = subprocess.run(
            cmd,
            input=stdin if stdin is not None else "",
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            env=env,
        )
        if expect is not None and proc.returncode != expect:
            raise AssertionError(
                f"CLI exited {proc.returncode}, expected {expect}\nCommand: {' '.join(cmd)}\nSTDOUT:\n{proc.stdout}\nSTDERR:\n{proc.stderr}"
            )
        return proc

    def tmpdir(self) -> Path:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        return Path(tmp.name)

    def test_text_roundtrip(self):
        blob = self.run_cli(["encrypt", "hello world"]).stdout.strip()
        self.assertEqual(len(blob), 54)
        self.assertEqual(decode("secret", blob), "hello world")
        out = self.run_cli(["decrypt", blob]).stdout
        self.assertEqual(out, "hello world\n")

    def test_key_flag_overrides_environment(self):
        blob = self.run_cli(["encrypt", "value", "--key", "flag-key"]).stdout.strip()
        self.assertEqual(decode("flag-key", blob), "value")

    def test_stdin(self):
        blob = self.run_cli(["encrypt"], stdin="from stdin\n").stdout.strip()
        self.assertEqual(decode("secret", blob), "from stdin")
        out = self.run_cli(["decrypt"], stdin=blob + "\n").stdout
        self.assertEqual(out, "from stdin\n")

    def test_stdin_keeps_all_but_one_trailing_newline(self):
        blob = self.run_cli(["encrypt"], stdin="line1\n\n").stdout.strip()
        self.assertEqual(decode("secret", blob), "line1\n")
        blob = self.run_cli(["encrypt"], stdin="\n\n").stdout.strip()
        self.assertEqual(decode("secret", blob), "\n")
        blob = self.run_cli(["encrypt"], stdin="no newline").stdout.strip()
        self.assertEqual(decode("secret", blob), "no newline")

    def test_decrypted_text_file_is_exact(self):
        root = self.tmpdir()
        restored = root / "plain.txt"
        for value in ["abc", "two\nlines\n", "ünïcödé"]:
            blob = encode("secret", value)
            self.run_cli(["decrypt", blob, "--output", str(restored), "--quiet"])
            self.assertEqual(restored.read_bytes(), value.encode("utf-8"))

    def test_hex_frame_file_ends_with_newline(self):
        sealed = self.tmpdir() / "frame.hex"
        self.run_cli(["encrypt", "abc", "--output", str(sealed), "--quiet"])
        text = sealed.read_text(encoding="utf-8")
        self.assertTrue(text.endswith("\n"))
        self.assertEqual(decode("secret", text.strip()), "abc")

    def test_json_roundtrip(self):
        value = {"a": ["x", "y"], "b": 2}
        blob = self.run_cli(["encrypt", "--json", json.dumps(value)]).stdout.strip()
        out = self.run_cli(["decrypt", "--json", blob]).stdout
        self.assertEqual(json.loads(out), value)

    def test_binary_file_roundtrip(self):
        root = self.tmpdir()
        src = root / "data.bin"
        payload = os.urandom(1024)
        src.write_bytes(payload)
        sealed = root / "data.sealed"
        restored = root / "data.out"

        proc = self.run_cli(["encrypt", "--input", str(src), "--output", str(sealed)])
        self.assertIn("Wrote", proc.stderr)
        self.assertEqual(len(sealed.read_bytes()), 16 + len(payload))
        self.assertEqual(decode("secret", sealed.read_bytes()), payload)

        proc = self.run_cli(["decrypt", "--input", str(sealed), "--output", str(restored), "--quiet"])
        self.assertEqual(proc.stderr, "")
        self.assertEqual(restored.read_bytes(), payload)

    def test_wrong_key_does_not_fail(self):
        blob = encode("secret", "hello world")
        out = self.run_cli(["decrypt", blob], key="wrong").stdout
        self.assertNotEqual(out, "hello world\n")

    def test_invalid_input_errors(self):
        proc = self.run_cli(["encrypt", ""], expect=2)
        self.assertIn("Error:", proc.stderr)
        proc = self.run_cli(["decrypt", "00" * 16], expect=2)
        self.assertIn("Error:", proc.stderr)
        proc = self.run_cli(["decrypt", "not hex at all!"], expect=2)
        self.assertIn("Error:", proc.stderr)
        proc = self.run_cli(["decrypt", "--input", str(self.tmpdir() / "missing.bin")], expect=2)
        self.assertIn("Error:", proc.stderr)

    def test_json_with_input_is_rejected(self):
        proc = self.run_cli(["encrypt", "--json", "--input", "x"], expect=2)
        self.assertIn("--json cannot be combined with --input", proc.stderr)

    def test_digest(self):
        out = self.run_cli(["digest", "The Grid. A digital frontier.", "-a", "md5"], key=None).stdout
        self.assertEqual(out.strip(), "f1692f68b3c08a7d37be7eed8f7aff42")
        out = self.run_cli(["digest", "End of line, man"], key=None).stdout
        self.assertEqual(out.strip(), "d6ad67774024d5c6d0ec089b0e24d1ed010fb58ee3c5e6be0ff1a3ee804b083d")


if __name__ == "__main__":
    unittest.main()
