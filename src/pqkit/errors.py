"""Error hierarchy for pqkit."""

from __future__ import annotations


class PqkitError(Exception):
    """Base exception for all pqkit errors."""

    pass


class SeedLengthError(PqkitError):
    """Deterministic key-generation seed has the wrong length.

    Attributes:
        field: Name of the seed that failed validation.
        expected: Required length in bytes.
        actual: Length that was supplied.
    """

    def __init__(self, field: str, expected: int, actual: int) -> None:
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid {field} length: {actual} bytes, expected {expected}")


class EncodingError(PqkitError):
    """Key, signature, ciphertext or digest bytes could not be decoded.

    Attributes:
        field: Name of the value that failed to decode.
        expected: Required length in bytes, if the failure is a length mismatch.
        actual: Supplied length in bytes, if known.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        expected: int | None = None,
        actual: int | None = None,
    ) -> None:
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class ContextLengthError(EncodingError):
    """Signing context exceeds the 255-byte limit of ML-DSA."""

    pass


class KeypairMismatchError(EncodingError):
    """Private key does not belong to the public key it was paired with."""

    pass


class SignatureDecodeError(PqkitError):
    """Signature bytes decode to no valid signature structure.

    Distinct from a well-formed signature that does not verify, which is
    reported as ``False`` by ``verify``.
    """

    pass


class SigningError(PqkitError):
    """Signing primitive failed to produce a signature."""

    pass


class EncapsulationError(PqkitError):
    """Encapsulation primitive rejected the encapsulation key."""

    pass


class DecapsulationError(PqkitError):
    """Decapsulation primitive rejected the decapsulation key or ciphertext."""

    pass
