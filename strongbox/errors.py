class StrongboxError(Exception):
    """Base class for Strongbox-specific errors."""


# Raised synchronously, before any cryptographic work, for malformed
# keys, transforms, plaintexts and frames.
class InvalidArgumentError(StrongboxError, TypeError):
    pass


InvalidInputError = InvalidArgumentError
