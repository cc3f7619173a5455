"""ML-KEM-1024 (FIPS 203) key generation, encapsulation and decapsulation for pqkit."""

from __future__ import annotations

import logging

from kyber_py.ml_kem import ML_KEM_1024

from ..errors import DecapsulationError, EncapsulationError, EncodingError, KeypairMismatchError
from .codec import (
    decode_ciphertext,
    decode_decapsulation_key,
    decode_encapsulation_key,
    decode_shared_secret,
)
from .constants import MLKEM_ALGORITHM
from .keypair import MlKemEncapsulation, MlKemKeypair, validate_mlkem_keypair
from .seed import RandomSource, kem_seed

logger = logging.getLogger("pqkit")


def keygen(seed: bytes | None = None, *, random_source: RandomSource | None = None) -> MlKemKeypair:
    """Generate an ML-KEM-1024 key pair.

    The 64-byte seed is split into ``d`` (key derivation) and ``z``
    (implicit rejection). Without a seed both halves are drawn fresh.

    Args:
        seed: Optional 64-byte deterministic seed ``d || z``.
        random_source: Source of randomness when ``seed`` is omitted.
            Defaults to the OS CSPRNG.

    Returns:
        A new MlKemKeypair.

    Raises:
        SeedLengthError: If ``seed`` is present but not exactly 64 bytes.
    """
    seeded = seed is not None
    d, z = kem_seed(seed, random_source)
    encapsulation_key, decapsulation_key = ML_KEM_1024.key_derive(d + z)
    logger.debug("Generated %s keypair (seeded=%s)", MLKEM_ALGORITHM, seeded)
    return MlKemKeypair(
        encapsulation_key=decode_encapsulation_key(encapsulation_key),
        decapsulation_key=decode_decapsulation_key(decapsulation_key),
    )


def encaps(encapsulation_key: bytes) -> MlKemEncapsulation:
    """Encapsulate a fresh shared secret to an ML-KEM-1024 encapsulation key.

    The ciphertext can safely be sent to the owner of the matching
    decapsulation key. The shared secret must be treated as secret.

    Args:
        encapsulation_key: The 1568-byte encapsulation key.

    Returns:
        The ciphertext and shared secret.

    Raises:
        EncodingError: If the key has the wrong length.
        EncapsulationError: If the primitive rejects the key contents.
    """
    ek = decode_encapsulation_key(encapsulation_key)

    try:
        shared_secret, ciphertext = ML_KEM_1024.encaps(ek)
    except Exception as e:
        logger.debug("%s encapsulation failed: %s", MLKEM_ALGORITHM, e, exc_info=True)
        raise EncapsulationError(f"Could not encapsulate: {e}") from e

    try:
        return MlKemEncapsulation(
            ciphertext=decode_ciphertext(ciphertext),
            shared_secret=decode_shared_secret(shared_secret),
        )
    except EncodingError as e:
        raise EncapsulationError(f"Could not encapsulate: {e}") from e


def decaps(decapsulation_key: bytes, ciphertext: bytes) -> bytes:
    """Recover the shared secret from an ML-KEM-1024 ciphertext.

    Deterministic; no randomness is used. A ciphertext that was not
    produced for this key yields a pseudorandom 32-byte value (implicit
    rejection) rather than an error.

    Args:
        decapsulation_key: The 3168-byte decapsulation key.
        ciphertext: The 1568-byte ciphertext.

    Returns:
        The 32-byte shared secret.

    Raises:
        EncodingError: If the key or ciphertext has the wrong length.
        DecapsulationError: If the primitive rejects the key contents.
    """
    dk = decode_decapsulation_key(decapsulation_key)
    ct = decode_ciphertext(ciphertext)

    try:
        shared_secret = ML_KEM_1024.decaps(dk, ct)
    except Exception as e:
        logger.debug("%s decapsulation failed: %s", MLKEM_ALGORITHM, e, exc_info=True)
        raise DecapsulationError(f"Could not decapsulate: {e}") from e

    try:
        return decode_shared_secret(shared_secret)
    except EncodingError as e:
        raise DecapsulationError(f"Could not decapsulate: {e}") from e


class MlKem:
    """A decoded ML-KEM-1024 key pair.

    Example:
        ```python
        kem = MlKem.generate()
        encapsulation = kem.encaps()
        assert kem.decaps(encapsulation.ciphertext) == encapsulation.shared_secret
        ```
    """

    def __init__(self, keypair: MlKemKeypair) -> None:
        self._keypair = keypair

    @classmethod
    def generate(
        cls, seed: bytes | None = None, *, random_source: RandomSource | None = None
    ) -> MlKem:
        """Generate a new key pair. See :func:`keygen`."""
        return cls(keygen(seed, random_source=random_source))

    @classmethod
    def decode(cls, encapsulation_key: bytes, decapsulation_key: bytes) -> MlKem:
        """Load a key pair from its encoded halves.

        Raises:
            EncodingError: If either key has the wrong length.
            KeypairMismatchError: If the decapsulation key does not embed
                the encapsulation key.
        """
        ek = decode_encapsulation_key(encapsulation_key)
        dk = decode_decapsulation_key(decapsulation_key)
        if not validate_mlkem_keypair(ek, dk):
            raise KeypairMismatchError(
                "Decapsulation key does not belong to encapsulation key",
                field="decapsulation key",
            )
        return cls(MlKemKeypair(encapsulation_key=ek, decapsulation_key=dk))

    @property
    def keypair(self) -> MlKemKeypair:
        return self._keypair

    @property
    def encapsulation_key(self) -> bytes:
        return self._keypair.encapsulation_key

    @property
    def decapsulation_key(self) -> bytes:
        return self._keypair.decapsulation_key

    def encaps(self) -> MlKemEncapsulation:
        return encaps(self._keypair.encapsulation_key)

    def decaps(self, ciphertext: bytes) -> bytes:
        return decaps(self._keypair.decapsulation_key, ciphertext)
