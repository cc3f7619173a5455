"""ML-DSA-87 (FIPS 204) key generation, signing and verification for pqkit."""

from __future__ import annotations

import logging
import threading

from dilithium_py.ml_dsa import ML_DSA_87

from ..errors import EncodingError, KeypairMismatchError, SignatureDecodeError, SigningError
from .codec import (
    as_bytes,
    check_signature_structure,
    decode_context,
    decode_signature,
    decode_signing_key,
    decode_verifying_key,
)
from .constants import MLDSA_ALGORITHM
from .keypair import MlDsaKeypair, validate_mldsa_keypair
from .seed import RandomSource, signature_seed

logger = logging.getLogger("pqkit")

# dilithium-py keeps module-level SHAKE state shared by every ML_DSA instance
_primitive_lock = threading.Lock()


def keygen(seed: bytes | None = None, *, random_source: RandomSource | None = None) -> MlDsaKeypair:
    """Generate an ML-DSA-87 key pair.

    With a seed, key generation is a pure function of the seed. Without
    one, 32 fresh random bytes are drawn and derived the same way.

    Args:
        seed: Optional 32-byte deterministic seed.
        random_source: Source of randomness when ``seed`` is omitted.
            Defaults to the OS CSPRNG.

    Returns:
        A new MlDsaKeypair.

    Raises:
        SeedLengthError: If ``seed`` is present but not exactly 32 bytes.
    """
    seeded = seed is not None
    xi = signature_seed(seed, random_source)
    with _primitive_lock:
        verifying_key, signing_key = ML_DSA_87.key_derive(xi)
    logger.debug("Generated %s keypair (seeded=%s)", MLDSA_ALGORITHM, seeded)
    return MlDsaKeypair(
        verifying_key=decode_verifying_key(verifying_key),
        signing_key=decode_signing_key(signing_key),
    )


def sign(signing_key: bytes, message: bytes, context: bytes | None = None) -> bytes:
    """Sign a message with the hedged (randomized) ML-DSA-87 algorithm.

    A fresh 256-bit random value is mixed into every signature, so two
    signatures over the same input differ while both verify.

    Args:
        signing_key: The 4896-byte signing key.
        message: The message to sign.
        context: Optional context string (up to 255 bytes). Treated as
            empty when omitted.

    Returns:
        The 4627-byte signature.

    Raises:
        EncodingError: If the signing key has the wrong length.
        ContextLengthError: If the context is longer than 255 bytes.
        SigningError: If the signing primitive fails.
    """
    sk = decode_signing_key(signing_key)
    msg = as_bytes("message", message)
    ctx = decode_context(context)

    try:
        with _primitive_lock:
            signature = ML_DSA_87.sign(sk, msg, ctx=ctx, deterministic=False)
    except Exception as e:
        logger.debug("%s signing failed: %s", MLDSA_ALGORITHM, e, exc_info=True)
        raise SigningError(f"Could not sign message: {e}") from e

    if signature is None:
        raise SigningError("Could not sign message: no signature was produced")
    try:
        return decode_signature(signature)
    except EncodingError as e:
        raise SigningError(f"Could not sign message: {e}") from e


def verify(
    verifying_key: bytes,
    message: bytes,
    signature: bytes,
    context: bytes | None = None,
) -> bool:
    """Verify an ML-DSA-87 signature.

    The context must match the one used at signing time exactly,
    including when both are empty.

    Args:
        verifying_key: The 2592-byte verifying key.
        message: The signed message.
        signature: The 4627-byte signature.
        context: Optional context string (up to 255 bytes). Treated as
            empty when omitted.

    Returns:
        True if the signature is valid for the message, context and key,
        False otherwise.

    Raises:
        EncodingError: If the key or signature has the wrong length.
        ContextLengthError: If the context is longer than 255 bytes.
        SignatureDecodeError: If the signature bytes do not decode to a
            valid signature structure.
    """
    pk = decode_verifying_key(verifying_key)
    sig = check_signature_structure(decode_signature(signature))
    msg = as_bytes("message", message)
    ctx = decode_context(context)

    try:
        with _primitive_lock:
            return bool(ML_DSA_87.verify(pk, msg, sig, ctx=ctx))
    except Exception as e:
        logger.debug("%s signature decoding failed: %s", MLDSA_ALGORITHM, e, exc_info=True)
        raise SignatureDecodeError(f"Could not decode signature: {e}") from e


class MlDsa:
    """A decoded ML-DSA-87 key pair with bound signing and verification.

    Example:
        ```python
        dsa = MlDsa.generate()
        signature = dsa.sign(b"hello", context=b"app:v1")
        assert dsa.verify(b"hello", signature, context=b"app:v1")
        ```
    """

    def __init__(self, keypair: MlDsaKeypair) -> None:
        self._keypair = keypair

    @classmethod
    def generate(
        cls, seed: bytes | None = None, *, random_source: RandomSource | None = None
    ) -> MlDsa:
        """Generate a new key pair. See :func:`keygen`."""
        return cls(keygen(seed, random_source=random_source))

    @classmethod
    def decode(cls, verifying_key: bytes, signing_key: bytes) -> MlDsa:
        """Load a key pair from its encoded halves.

        Raises:
            EncodingError: If either key has the wrong length.
            KeypairMismatchError: If the signing key does not belong to
                the verifying key.
        """
        vk = decode_verifying_key(verifying_key)
        sk = decode_signing_key(signing_key)
        if not validate_mldsa_keypair(vk, sk):
            raise KeypairMismatchError(
                "Signing key does not belong to verifying key", field="signing key"
            )
        return cls(MlDsaKeypair(verifying_key=vk, signing_key=sk))

    @property
    def keypair(self) -> MlDsaKeypair:
        return self._keypair

    @property
    def verifying_key(self) -> bytes:
        return self._keypair.verifying_key

    @property
    def signing_key(self) -> bytes:
        return self._keypair.signing_key

    def sign(self, message: bytes, context: bytes | None = None) -> bytes:
        return sign(self._keypair.signing_key, message, context)

    def verify(self, message: bytes, signature: bytes, context: bytes | None = None) -> bool:
        return verify(self._keypair.verifying_key, message, signature, context)
