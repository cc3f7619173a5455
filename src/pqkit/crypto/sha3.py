"""SHA-3 family hashing for pqkit (FIPS 202)."""

from __future__ import annotations

from cryptography.hazmat.primitives import hashes

from .codec import as_bytes, decode_digest


def _digest(algorithm: hashes.HashAlgorithm, data: bytes) -> bytes:
    hasher = hashes.Hash(algorithm)
    hasher.update(data)
    return hasher.finalize()


def sha3_512(data: bytes) -> bytes:
    """Compute the SHA3-512 digest of ``data``.

    Accepts input of any length, including zero bytes.

    Args:
        data: The bytes to hash.

    Returns:
        The 64-byte digest.
    """
    return decode_digest(_digest(hashes.SHA3_512(), as_bytes("data", data)))


def sha3_256(data: bytes) -> bytes:
    return _digest(hashes.SHA3_256(), data)


def shake256(data: bytes, length: int) -> bytes:
    return _digest(hashes.SHAKE256(digest_size=length), data)


class Sha3_512:
    """SHA3-512 as a stateless namespace."""

    @staticmethod
    def hash(data: bytes) -> bytes:
        """Compute a SHA3-512 digest. See :func:`sha3_512`."""
        return sha3_512(data)
