"""Cryptographic constants for pqkit."""

# Algorithm identifiers
MLDSA_ALGORITHM = "ML-DSA-87"
MLKEM_ALGORITHM = "ML-KEM-1024"

# ML-DSA-87 (FIPS 204) sizes
MLDSA87_PUBLIC_KEY_SIZE = 2592
MLDSA87_SECRET_KEY_SIZE = 4896
MLDSA87_SIGNATURE_SIZE = 4627
MLDSA87_SEED_SIZE = 32
# Context strings are length-prefixed with a single byte
MLDSA_MAX_CONTEXT_SIZE = 255
# Signing key layout: rho (32) || K (32) || tr (64) || ...
MLDSA87_RHO_SIZE = 32
MLDSA87_TR_OFFSET = 64
MLDSA87_TR_SIZE = 64
# Signature layout: c_tilde (64) || z (4480) || h (omega + k = 83)
MLDSA87_OMEGA = 75
MLDSA87_K = 8
MLDSA87_HINT_OFFSET = 4544

# ML-KEM-1024 (FIPS 203) sizes
MLKEM1024_PUBLIC_KEY_SIZE = 1568
MLKEM1024_SECRET_KEY_SIZE = 3168
MLKEM1024_CIPHERTEXT_SIZE = 1568
MLKEM1024_SHARED_SECRET_SIZE = 32
# Seed is d (32) || z (32)
MLKEM1024_SEED_SIZE = 64
MLKEM1024_SEED_HALF_SIZE = 32
# CPA private key size: 12 * k * n / 8 where k=4, n=256
MLKEM1024_CPA_PRIVATE_KEY_SIZE = 1536
MLKEM1024_PUBLIC_KEY_HASH_SIZE = 32

# SHA3-512 (FIPS 202)
SHA3_512_DIGEST_SIZE = 64
