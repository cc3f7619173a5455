"""pqkit - post-quantum signatures, key encapsulation and hashing.

A single facade over ML-DSA-87 (FIPS 204), ML-KEM-1024 (FIPS 203) and
SHA3-512 (FIPS 202). All inputs and outputs are raw bytes with fixed,
validated sizes.

Example:
    ```python
    from pqkit import mldsa, mlkem, sha3_512

    keypair = mldsa.keygen()
    signature = mldsa.sign(keypair.signing_key, b"hello", context=b"app:v1")
    assert mldsa.verify(keypair.verifying_key, b"hello", signature, context=b"app:v1")

    kem_keypair = mlkem.keygen()
    encapsulation = mlkem.encaps(kem_keypair.encapsulation_key)
    shared_secret = mlkem.decaps(kem_keypair.decapsulation_key, encapsulation.ciphertext)
    assert shared_secret == encapsulation.shared_secret

    digest = sha3_512(b"data")
    ```
"""

from .crypto import (
    MlDsa,
    MlDsaKeypair,
    MlKem,
    MlKemEncapsulation,
    MlKemKeypair,
    RandomSource,
    Sha3_512,
    sha3_512,
)
from .crypto import mldsa, mlkem
from .crypto.constants import (
    MLDSA87_PUBLIC_KEY_SIZE,
    MLDSA87_SECRET_KEY_SIZE,
    MLDSA87_SEED_SIZE,
    MLDSA87_SIGNATURE_SIZE,
    MLDSA_MAX_CONTEXT_SIZE,
    MLKEM1024_CIPHERTEXT_SIZE,
    MLKEM1024_PUBLIC_KEY_SIZE,
    MLKEM1024_SECRET_KEY_SIZE,
    MLKEM1024_SEED_SIZE,
    MLKEM1024_SHARED_SECRET_SIZE,
    SHA3_512_DIGEST_SIZE,
)
from .errors import (
    ContextLengthError,
    DecapsulationError,
    EncapsulationError,
    EncodingError,
    KeypairMismatchError,
    PqkitError,
    SeedLengthError,
    SignatureDecodeError,
    SigningError,
)

__version__ = "0.1.0"

__all__ = [
    # Facades
    "MlDsa",
    "MlKem",
    "Sha3_512",
    "mldsa",
    "mlkem",
    "sha3_512",
    # Value types
    "MlDsaKeypair",
    "MlKemEncapsulation",
    "MlKemKeypair",
    "RandomSource",
    # Sizes
    "MLDSA87_PUBLIC_KEY_SIZE",
    "MLDSA87_SECRET_KEY_SIZE",
    "MLDSA87_SEED_SIZE",
    "MLDSA87_SIGNATURE_SIZE",
    "MLDSA_MAX_CONTEXT_SIZE",
    "MLKEM1024_CIPHERTEXT_SIZE",
    "MLKEM1024_PUBLIC_KEY_SIZE",
    "MLKEM1024_SECRET_KEY_SIZE",
    "MLKEM1024_SEED_SIZE",
    "MLKEM1024_SHARED_SECRET_SIZE",
    "SHA3_512_DIGEST_SIZE",
    # Errors
    "ContextLengthError",
    "DecapsulationError",
    "EncapsulationError",
    "EncodingError",
    "KeypairMismatchError",
    "PqkitError",
    "SeedLengthError",
    "SignatureDecodeError",
    "SigningError",
]
