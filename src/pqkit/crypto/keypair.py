"""Key pair and encapsulation value types, and key pair consistency checks."""

from __future__ import annotations

from dataclasses import dataclass, field

from .codec import decode_decapsulation_key
from .constants import (
    MLDSA87_PUBLIC_KEY_SIZE,
    MLDSA87_RHO_SIZE,
    MLDSA87_SECRET_KEY_SIZE,
    MLDSA87_TR_OFFSET,
    MLDSA87_TR_SIZE,
    MLKEM1024_CPA_PRIVATE_KEY_SIZE,
    MLKEM1024_PUBLIC_KEY_HASH_SIZE,
    MLKEM1024_PUBLIC_KEY_SIZE,
    MLKEM1024_SECRET_KEY_SIZE,
)
from .sha3 import sha3_256, shake256
from .utils import to_base64url


@dataclass(frozen=True)
class MlDsaKeypair:
    """ML-DSA-87 key pair.

    Attributes:
        verifying_key: The public key bytes (2592 bytes).
        signing_key: The private key bytes (4896 bytes).
    """

    verifying_key: bytes
    signing_key: bytes = field(repr=False)

    @property
    def verifying_key_b64(self) -> str:
        """Base64url-encoded verifying key."""
        return to_base64url(self.verifying_key)


@dataclass(frozen=True)
class MlKemKeypair:
    """ML-KEM-1024 key pair.

    Attributes:
        encapsulation_key: The public key bytes (1568 bytes).
        decapsulation_key: The private key bytes (3168 bytes).
    """

    encapsulation_key: bytes
    decapsulation_key: bytes = field(repr=False)

    @property
    def encapsulation_key_b64(self) -> str:
        """Base64url-encoded encapsulation key."""
        return to_base64url(self.encapsulation_key)


@dataclass(frozen=True)
class MlKemEncapsulation:
    """Result of an ML-KEM-1024 encapsulation.

    Attributes:
        ciphertext: Safe to send to the holder of the decapsulation key (1568 bytes).
        shared_secret: The 32-byte shared secret. Treat as secret.
    """

    ciphertext: bytes
    shared_secret: bytes = field(repr=False)


def validate_mldsa_keypair(verifying_key: bytes, signing_key: bytes) -> bool:
    """Check that an ML-DSA-87 signing key belongs to a verifying key.

    The signing key starts with the public seed rho shared with the
    verifying key and carries tr = SHAKE256(verifying_key) at offset 64.

    Returns:
        True if sizes are correct and both halves are linked, False otherwise.
    """
    if len(verifying_key) != MLDSA87_PUBLIC_KEY_SIZE:
        return False
    if len(signing_key) != MLDSA87_SECRET_KEY_SIZE:
        return False
    if signing_key[:MLDSA87_RHO_SIZE] != verifying_key[:MLDSA87_RHO_SIZE]:
        return False
    tr = signing_key[MLDSA87_TR_OFFSET : MLDSA87_TR_OFFSET + MLDSA87_TR_SIZE]
    return tr == shake256(verifying_key, MLDSA87_TR_SIZE)


def derive_encapsulation_key(decapsulation_key: bytes) -> bytes:
    """Extract the encapsulation key embedded in an ML-KEM-1024 decapsulation key.

    The decapsulation key structure is:
      dk = dk_pke || ek || H(ek) || z
    Where:
      - dk_pke: 1536 bytes (12 * k * n / 8, k=4, n=256)
      - ek: 1568 bytes (the encapsulation key)
      - H(ek): 32 bytes (SHA3-256 of ek)
      - z: 32 bytes (implicit-rejection seed)

    Args:
        decapsulation_key: The decapsulation key bytes (3168 bytes).

    Returns:
        The encapsulation key bytes (1568 bytes).

    Raises:
        EncodingError: If the decapsulation key has invalid length.
    """
    dk = decode_decapsulation_key(decapsulation_key)
    return dk[
        MLKEM1024_CPA_PRIVATE_KEY_SIZE : MLKEM1024_CPA_PRIVATE_KEY_SIZE + MLKEM1024_PUBLIC_KEY_SIZE
    ]


def validate_mlkem_keypair(encapsulation_key: bytes, decapsulation_key: bytes) -> bool:
    """Check that an ML-KEM-1024 decapsulation key belongs to an encapsulation key.

    Returns:
        True if sizes are correct, the embedded key matches and its hash
        is intact, False otherwise.
    """
    if len(encapsulation_key) != MLKEM1024_PUBLIC_KEY_SIZE:
        return False
    if len(decapsulation_key) != MLKEM1024_SECRET_KEY_SIZE:
        return False
    if derive_encapsulation_key(decapsulation_key) != encapsulation_key:
        return False
    hash_offset = MLKEM1024_CPA_PRIVATE_KEY_SIZE + MLKEM1024_PUBLIC_KEY_SIZE
    embedded_hash = decapsulation_key[hash_offset : hash_offset + MLKEM1024_PUBLIC_KEY_HASH_SIZE]
    return embedded_hash == sha3_256(encapsulation_key)
