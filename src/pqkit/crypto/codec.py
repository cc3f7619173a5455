"""Fixed-size encoding checks for every key, signature, ciphertext and digest.

Nothing reaches the primitive libraries without passing through one of the
decoders below, and nothing produced by them is returned to a caller without
passing through one again.
"""

from __future__ import annotations

from typing import Any

from ..errors import ContextLengthError, EncodingError, SignatureDecodeError
from .constants import (
    MLDSA87_HINT_OFFSET,
    MLDSA87_K,
    MLDSA87_OMEGA,
    MLDSA87_PUBLIC_KEY_SIZE,
    MLDSA87_SECRET_KEY_SIZE,
    MLDSA87_SIGNATURE_SIZE,
    MLDSA_MAX_CONTEXT_SIZE,
    MLKEM1024_CIPHERTEXT_SIZE,
    MLKEM1024_PUBLIC_KEY_SIZE,
    MLKEM1024_SECRET_KEY_SIZE,
    MLKEM1024_SHARED_SECRET_SIZE,
    SHA3_512_DIGEST_SIZE,
)


def as_bytes(name: str, value: Any) -> bytes:
    """Copy a bytes-like value into immutable ``bytes``.

    Args:
        name: Field name used in the error message.
        value: The value to convert.

    Returns:
        The value as ``bytes``.

    Raises:
        EncodingError: If the value is not bytes-like. Text is rejected
            rather than implicitly encoded.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    raise EncodingError(
        f"Invalid {name} type: {type(value).__name__}, expected bytes",
        field=name,
    )


def ensure_length(name: str, value: Any, expected: int) -> bytes:
    """Validate that a value is bytes-like and exactly ``expected`` bytes long.

    Raises:
        EncodingError: On a type or length mismatch.
    """
    data = as_bytes(name, value)
    if len(data) != expected:
        raise EncodingError(
            f"Invalid {name} length: {len(data)} bytes, expected {expected}",
            field=name,
            expected=expected,
            actual=len(data),
        )
    return data


def decode_verifying_key(value: Any) -> bytes:
    return ensure_length("verifying key", value, MLDSA87_PUBLIC_KEY_SIZE)


def decode_signing_key(value: Any) -> bytes:
    return ensure_length("signing key", value, MLDSA87_SECRET_KEY_SIZE)


def decode_signature(value: Any) -> bytes:
    return ensure_length("signature", value, MLDSA87_SIGNATURE_SIZE)


def check_signature_structure(signature: bytes) -> bytes:
    """Check that the hint section of an ML-DSA-87 signature is well formed.

    The hint is omega position bytes followed by k cumulative end offsets.
    Offsets never decrease and never exceed omega, positions within each
    polynomial strictly increase, and unused position bytes are zero.

    Args:
        signature: A signature of the correct length.

    Returns:
        The signature bytes.

    Raises:
        SignatureDecodeError: If the hint encoding is malformed.
    """
    hint = signature[MLDSA87_HINT_OFFSET:]
    positions = hint[:MLDSA87_OMEGA]
    offsets = hint[MLDSA87_OMEGA : MLDSA87_OMEGA + MLDSA87_K]

    start = 0
    for i, end in enumerate(offsets):
        if end < start or end > MLDSA87_OMEGA:
            raise SignatureDecodeError(
                f"Could not decode signature: invalid hint offset {end} for polynomial {i}"
            )
        for j in range(start + 1, end):
            if positions[j - 1] >= positions[j]:
                raise SignatureDecodeError(
                    f"Could not decode signature: unordered hint positions in polynomial {i}"
                )
        start = end

    if any(positions[start:]):
        raise SignatureDecodeError("Could not decode signature: non-zero hint padding")
    return signature


def decode_encapsulation_key(value: Any) -> bytes:
    return ensure_length("encapsulation key", value, MLKEM1024_PUBLIC_KEY_SIZE)


def decode_decapsulation_key(value: Any) -> bytes:
    return ensure_length("decapsulation key", value, MLKEM1024_SECRET_KEY_SIZE)


def decode_ciphertext(value: Any) -> bytes:
    return ensure_length("ciphertext", value, MLKEM1024_CIPHERTEXT_SIZE)


def decode_shared_secret(value: Any) -> bytes:
    return ensure_length("shared secret", value, MLKEM1024_SHARED_SECRET_SIZE)


def decode_digest(value: Any) -> bytes:
    return ensure_length("digest", value, SHA3_512_DIGEST_SIZE)


def decode_context(value: Any | None) -> bytes:
    """Normalize an optional signing context.

    Args:
        value: The context, or ``None`` for the empty context.

    Returns:
        The context bytes (``b""`` when omitted).

    Raises:
        ContextLengthError: If the context is longer than 255 bytes.
    """
    if value is None:
        return b""
    context = as_bytes("context", value)
    if len(context) > MLDSA_MAX_CONTEXT_SIZE:
        raise ContextLengthError(
            f"Invalid context length: {len(context)} bytes, "
            f"maximum {MLDSA_MAX_CONTEXT_SIZE}",
            field="context",
            expected=MLDSA_MAX_CONTEXT_SIZE,
            actual=len(context),
        )
    return context
