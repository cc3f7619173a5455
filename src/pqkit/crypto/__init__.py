"""Cryptographic operations for pqkit."""

from .codec import (
    as_bytes,
    decode_ciphertext,
    decode_context,
    decode_decapsulation_key,
    decode_digest,
    decode_encapsulation_key,
    decode_shared_secret,
    decode_signature,
    decode_signing_key,
    decode_verifying_key,
    ensure_length,
)
from .keypair import (
    MlDsaKeypair,
    MlKemEncapsulation,
    MlKemKeypair,
    derive_encapsulation_key,
    validate_mldsa_keypair,
    validate_mlkem_keypair,
)
from .mldsa import MlDsa
from .mlkem import MlKem
from .seed import RandomSource, kem_seed, signature_seed
from .sha3 import Sha3_512, sha3_512
from .utils import from_base64url, to_base64url

__all__ = [
    "MlDsa",
    "MlDsaKeypair",
    "MlKem",
    "MlKemEncapsulation",
    "MlKemKeypair",
    "RandomSource",
    "Sha3_512",
    "as_bytes",
    "decode_ciphertext",
    "decode_context",
    "decode_decapsulation_key",
    "decode_digest",
    "decode_encapsulation_key",
    "decode_shared_secret",
    "decode_signature",
    "decode_signing_key",
    "decode_verifying_key",
    "derive_encapsulation_key",
    "ensure_length",
    "from_base64url",
    "kem_seed",
    "sha3_512",
    "signature_seed",
    "to_base64url",
    "validate_mldsa_keypair",
    "validate_mlkem_keypair",
]
