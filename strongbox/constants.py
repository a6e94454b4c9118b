import string


# Frame layout: IV(16) || ciphertext(N), N >= 1
IV_SIZE = 16
KEY_SIZE = 32  # AES-256
MIN_CIPHERTEXT_SIZE = 1
MIN_FRAME_SIZE = IV_SIZE + MIN_CIPHERTEXT_SIZE

# Text plaintexts are UTF-8 on the wire; text frames are lowercase hex
TEXT_ENCODING = "utf-8"
HEX_DIGITS = frozenset(string.hexdigits)

# CLI configuration
KEY_ENV_VAR = "STRONGBOX_KEY"
DEFAULT_DIGEST = "sha256"
