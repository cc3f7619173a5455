"""Tests for crypto/codec.py and crypto/seed.py."""

import pytest

from pqkit.crypto.codec import (
    as_bytes,
    check_signature_structure,
    decode_ciphertext,
    decode_context,
    decode_decapsulation_key,
    decode_encapsulation_key,
    decode_shared_secret,
    decode_signature,
    decode_signing_key,
    decode_verifying_key,
    ensure_length,
)
from pqkit.crypto.constants import (
    MLDSA87_HINT_OFFSET,
    MLDSA87_OMEGA,
    MLDSA87_PUBLIC_KEY_SIZE,
    MLDSA87_SECRET_KEY_SIZE,
    MLDSA87_SIGNATURE_SIZE,
    MLKEM1024_CIPHERTEXT_SIZE,
    MLKEM1024_PUBLIC_KEY_SIZE,
    MLKEM1024_SECRET_KEY_SIZE,
    MLKEM1024_SHARED_SECRET_SIZE,
)
from pqkit.crypto.seed import kem_seed, signature_seed
from pqkit.errors import (
    ContextLengthError,
    EncodingError,
    SeedLengthError,
    SignatureDecodeError,
)


class TestAsBytes:
    """Tests for bytes-like coercion."""

    def test_bytes_passthrough(self) -> None:
        """Test that bytes are returned unchanged."""
        data = b"abc"
        assert as_bytes("data", data) is data

    def test_bytearray_and_memoryview(self) -> None:
        """Test that mutable buffers are copied into bytes."""
        assert as_bytes("data", bytearray(b"abc")) == b"abc"
        assert as_bytes("data", memoryview(b"abc")) == b"abc"
        assert isinstance(as_bytes("data", bytearray(b"abc")), bytes)

    def test_rejects_text(self) -> None:
        """Test that text is never implicitly encoded."""
        with pytest.raises(EncodingError, match="Invalid data type: str"):
            as_bytes("data", "abc")

    def test_rejects_none(self) -> None:
        """Test that None is rejected."""
        with pytest.raises(EncodingError):
            as_bytes("data", None)


class TestEnsureLength:
    """Tests for exact-length validation."""

    def test_exact_length(self) -> None:
        """Test that a correctly sized buffer passes."""
        assert ensure_length("field", b"\x00" * 4, 4) == b"\x00" * 4

    def test_error_names_field_and_sizes(self) -> None:
        """Test that the error reports the field, expected and actual size."""
        with pytest.raises(EncodingError) as exc_info:
            ensure_length("field", b"\x00" * 3, 4)

        assert exc_info.value.field == "field"
        assert exc_info.value.expected == 4
        assert exc_info.value.actual == 3
        assert "Invalid field length: 3 bytes, expected 4" in str(exc_info.value)

    @pytest.mark.parametrize(
        ("decoder", "size"),
        [
            (decode_verifying_key, MLDSA87_PUBLIC_KEY_SIZE),
            (decode_signing_key, MLDSA87_SECRET_KEY_SIZE),
            (decode_signature, MLDSA87_SIGNATURE_SIZE),
            (decode_encapsulation_key, MLKEM1024_PUBLIC_KEY_SIZE),
            (decode_decapsulation_key, MLKEM1024_SECRET_KEY_SIZE),
            (decode_ciphertext, MLKEM1024_CIPHERTEXT_SIZE),
            (decode_shared_secret, MLKEM1024_SHARED_SECRET_SIZE),
        ],
    )
    def test_decoders_reject_off_by_one(self, decoder, size) -> None:
        """Test that every decoder rejects one byte too few or too many."""
        assert len(decoder(b"\x00" * size)) == size
        with pytest.raises(EncodingError):
            decoder(b"\x00" * (size - 1))
        with pytest.raises(EncodingError):
            decoder(b"\x00" * (size + 1))

    def test_verifying_key_boundaries(self) -> None:
        """Check the 2591 and 2593 byte public keys are rejected."""
        with pytest.raises(EncodingError, match="verifying key length: 2591"):
            decode_verifying_key(b"\x00" * 2591)
        with pytest.raises(EncodingError, match="verifying key length: 2593"):
            decode_verifying_key(b"\x00" * 2593)


class TestDecodeContext:
    """Tests for signing context normalization."""

    def test_none_is_empty(self) -> None:
        """Test that an omitted context becomes the empty context."""
        assert decode_context(None) == b""

    def test_max_length_accepted(self) -> None:
        """Test that a 255-byte context is accepted."""
        assert len(decode_context(b"c" * 255)) == 255

    def test_too_long_rejected(self) -> None:
        """Test that a 256-byte context fails fast."""
        with pytest.raises(ContextLengthError, match="256 bytes, maximum 255"):
            decode_context(b"c" * 256)

    def test_context_error_is_encoding_error(self) -> None:
        """Test that context errors are caught as encoding errors."""
        with pytest.raises(EncodingError):
            decode_context(b"c" * 300)


def make_signature(positions: bytes, offsets: bytes) -> bytes:
    """Build a zeroed signature with the given hint positions and offsets."""
    padded_offsets = offsets.ljust(8, offsets[-1:] or b"\x00")
    hint = positions.ljust(MLDSA87_OMEGA, b"\x00") + padded_offsets
    return b"\x00" * MLDSA87_HINT_OFFSET + hint


class TestSignatureStructure:
    """Tests for the ML-DSA-87 hint section check."""

    def test_empty_hint_accepted(self) -> None:
        """Test that a signature with no hint bits is well formed."""
        signature = make_signature(b"", b"\x00" * 8)
        assert len(signature) == MLDSA87_SIGNATURE_SIZE
        assert check_signature_structure(signature) == signature

    def test_increasing_positions_accepted(self) -> None:
        """Test that ordered positions split across polynomials are accepted."""
        signature = make_signature(b"\x01\x05\x09\x02", b"\x03\x04")
        assert check_signature_structure(signature) == signature

    def test_all_ff_rejected(self) -> None:
        """Test that an all-0xff signature is undecodable."""
        with pytest.raises(SignatureDecodeError, match="invalid hint offset 255"):
            check_signature_structure(b"\xff" * MLDSA87_SIGNATURE_SIZE)

    def test_offset_above_omega_rejected(self) -> None:
        """Test that an offset past omega is rejected."""
        with pytest.raises(SignatureDecodeError, match="invalid hint offset 76"):
            check_signature_structure(make_signature(b"", b"\x4c"))

    def test_decreasing_offsets_rejected(self) -> None:
        """Test that offsets must never decrease."""
        with pytest.raises(SignatureDecodeError, match="for polynomial 1"):
            check_signature_structure(make_signature(b"\x01\x02\x03", b"\x03\x02"))

    def test_unordered_positions_rejected(self) -> None:
        """Test that positions within one polynomial must strictly increase."""
        with pytest.raises(SignatureDecodeError, match="unordered hint positions"):
            check_signature_structure(make_signature(b"\x05\x05", b"\x02"))

    def test_non_zero_padding_rejected(self) -> None:
        """Test that unused position bytes must be zero."""
        with pytest.raises(SignatureDecodeError, match="non-zero hint padding"):
            check_signature_structure(make_signature(b"\x01\x07", b"\x01"))


class TestSignatureSeed:
    """Tests for ML-DSA seed handling."""

    def test_valid_seed_returned(self) -> None:
        """Test that a 32-byte seed is returned unchanged."""
        seed = bytes(range(32))
        assert signature_seed(seed) == seed

    @pytest.mark.parametrize("length", [0, 31, 33, 64])
    def test_wrong_length(self, length: int) -> None:
        """Test that seeds of the wrong length raise SeedLengthError."""
        with pytest.raises(SeedLengthError) as exc_info:
            signature_seed(b"\x00" * length)

        assert exc_info.value.expected == 32
        assert exc_info.value.actual == length

    def test_seeded_never_draws(self) -> None:
        """Test that a seeded call never touches the random source."""

        def forbidden(n: int) -> bytes:
            raise AssertionError("random source must not be used")

        signature_seed(b"\x01" * 32, random_source=forbidden)

    def test_unseeded_draws_32_bytes(self) -> None:
        """Test that an unseeded call draws exactly 32 bytes."""
        calls: list[int] = []

        def source(n: int) -> bytes:
            calls.append(n)
            return b"\x07" * n

        assert signature_seed(random_source=source) == b"\x07" * 32
        assert calls == [32]

    @pytest.mark.parametrize("length", [31, 33])
    def test_short_random_source_output(self, length: int) -> None:
        """Test that a misbehaving random source is blamed, not the seed."""
        with pytest.raises(
            EncodingError, match=f"random source output length: {length}"
        ) as exc_info:
            signature_seed(random_source=lambda n: b"\x00" * length)

        assert not isinstance(exc_info.value, SeedLengthError)

    def test_default_source_is_fresh(self) -> None:
        """Test that two unseeded draws differ."""
        assert signature_seed() != signature_seed()


class TestKemSeed:
    """Tests for ML-KEM seed handling."""

    def test_split_into_halves(self) -> None:
        """Test that the 64-byte seed splits into d and z."""
        seed = bytes(range(64))
        d, z = kem_seed(seed)
        assert d == bytes(range(32))
        assert z == bytes(range(32, 64))

    @pytest.mark.parametrize("length", [0, 32, 63, 65])
    def test_wrong_length(self, length: int) -> None:
        """Test that seeds of the wrong length raise SeedLengthError."""
        with pytest.raises(SeedLengthError, match=f"Invalid KEM seed length: {length} bytes"):
            kem_seed(b"\x00" * length)

    def test_unseeded_draws_both_halves(self) -> None:
        """Test that both halves come from the random source."""
        d, z = kem_seed(random_source=lambda n: bytes(range(n)))
        assert d + z == bytes(range(64))

    def test_wrong_random_source_output(self) -> None:
        """Test that a random source returning too few bytes is reported as such."""
        with pytest.raises(
            EncodingError, match="random source output length: 63 bytes, expected 64"
        ):
            kem_seed(random_source=lambda n: b"\x00" * (n - 1))
