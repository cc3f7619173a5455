"""Seed validation and randomness sourcing for key generation."""

from __future__ import annotations

import secrets
from collections.abc import Callable

from ..errors import SeedLengthError
from .codec import as_bytes, ensure_length
from .constants import MLDSA87_SEED_SIZE, MLKEM1024_SEED_HALF_SIZE, MLKEM1024_SEED_SIZE

# Returns n fresh random bytes. Must be safe to call from any thread.
RandomSource = Callable[[int], bytes]

# Backed by the OS CSPRNG; thread-safe.
default_random_source: RandomSource = secrets.token_bytes


def _draw(random_source: RandomSource | None, size: int) -> bytes:
    source = random_source if random_source is not None else default_random_source
    return ensure_length("random source output", source(size), size)


def _validate_seed(name: str, seed: bytes, expected: int) -> bytes:
    data = as_bytes(name, seed)
    if len(data) != expected:
        raise SeedLengthError(name, expected, len(data))
    return data


def signature_seed(
    seed: bytes | None = None, random_source: RandomSource | None = None
) -> bytes:
    """Return the 32-byte ML-DSA key-generation seed.

    Args:
        seed: Caller-supplied deterministic seed, or ``None`` to draw one.
        random_source: Source of randomness when ``seed`` is ``None``.

    Returns:
        The seed bytes.

    Raises:
        SeedLengthError: If ``seed`` is present but not exactly 32 bytes.
        EncodingError: If ``random_source`` returns the wrong number of bytes.
    """
    if seed is None:
        seed = _draw(random_source, MLDSA87_SEED_SIZE)
    return _validate_seed("signature seed", seed, MLDSA87_SEED_SIZE)


def kem_seed(
    seed: bytes | None = None, random_source: RandomSource | None = None
) -> tuple[bytes, bytes]:
    """Return the ML-KEM key-generation randomness as ``(d, z)``.

    ``d`` seeds key derivation and ``z`` seeds implicit rejection.

    Args:
        seed: Caller-supplied 64-byte seed ``d || z``, or ``None`` to draw both halves.
        random_source: Source of randomness when ``seed`` is ``None``.

    Raises:
        SeedLengthError: If ``seed`` is present but not exactly 64 bytes.
        EncodingError: If ``random_source`` returns the wrong number of bytes.
    """
    if seed is None:
        seed = _draw(random_source, MLKEM1024_SEED_SIZE)
    data = _validate_seed("KEM seed", seed, MLKEM1024_SEED_SIZE)
    return data[:MLKEM1024_SEED_HALF_SIZE], data[MLKEM1024_SEED_HALF_SIZE:]
