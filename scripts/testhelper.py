#!/usr/bin/env python3
"""Testhelper CLI for pqkit interoperability testing.

Reads a JSON object from stdin and writes a JSON object to stdout. All
binary fields are base64url-encoded without padding.
"""

import json
import sys
from collections.abc import Callable
from typing import Any

from pqkit import PqkitError, mldsa, mlkem, sha3_512
from pqkit.crypto import from_base64url, to_base64url


def _optional(data: dict[str, Any], key: str) -> bytes | None:
    value = data.get(key)
    return None if value is None else from_base64url(value)


def mldsa_keygen(data: dict[str, Any]) -> dict[str, Any]:
    """Generate an ML-DSA-87 keypair, optionally from {"seed"}."""
    keypair = mldsa.keygen(_optional(data, "seed"))
    return {
        "verifyingKey": keypair.verifying_key_b64,
        "signingKey": to_base64url(keypair.signing_key),
    }


def mldsa_sign(data: dict[str, Any]) -> dict[str, Any]:
    """Sign {"message"} with {"signingKey"} and optional {"context"}."""
    signature = mldsa.sign(
        from_base64url(data["signingKey"]),
        from_base64url(data["message"]),
        _optional(data, "context"),
    )
    return {"signature": to_base64url(signature)}


def mldsa_verify(data: dict[str, Any]) -> dict[str, Any]:
    """Verify {"signature"} over {"message"} with {"verifyingKey"} and optional {"context"}."""
    valid = mldsa.verify(
        from_base64url(data["verifyingKey"]),
        from_base64url(data["message"]),
        from_base64url(data["signature"]),
        _optional(data, "context"),
    )
    return {"valid": valid}


def mlkem_keygen(data: dict[str, Any]) -> dict[str, Any]:
    """Generate an ML-KEM-1024 keypair, optionally from {"seed"}."""
    keypair = mlkem.keygen(_optional(data, "seed"))
    return {
        "encapsulationKey": keypair.encapsulation_key_b64,
        "decapsulationKey": to_base64url(keypair.decapsulation_key),
    }


def mlkem_encaps(data: dict[str, Any]) -> dict[str, Any]:
    """Encapsulate to {"encapsulationKey"}."""
    encapsulation = mlkem.encaps(from_base64url(data["encapsulationKey"]))
    return {
        "ciphertext": to_base64url(encapsulation.ciphertext),
        "sharedSecret": to_base64url(encapsulation.shared_secret),
    }


def mlkem_decaps(data: dict[str, Any]) -> dict[str, Any]:
    """Decapsulate {"ciphertext"} with {"decapsulationKey"}."""
    shared_secret = mlkem.decaps(
        from_base64url(data["decapsulationKey"]),
        from_base64url(data["ciphertext"]),
    )
    return {"sharedSecret": to_base64url(shared_secret)}


def sha3_hash(data: dict[str, Any]) -> dict[str, Any]:
    """Hash {"data"} with SHA3-512."""
    return {"digest": to_base64url(sha3_512(from_base64url(data["data"])))}


COMMANDS: dict[str, Callable[[dict[str, Any]], dict[str, Any]]] = {
    "mldsa-keygen": mldsa_keygen,
    "mldsa-sign": mldsa_sign,
    "mldsa-verify": mldsa_verify,
    "mlkem-keygen": mlkem_keygen,
    "mlkem-encaps": mlkem_encaps,
    "mlkem-decaps": mlkem_decaps,
    "sha3-512": sha3_hash,
}


def main() -> None:
    """Main entry point."""
    if len(sys.argv) < 2 or sys.argv[1] not in COMMANDS:
        print(f"Usage: testhelper.py <{'|'.join(COMMANDS)}>", file=sys.stderr)
        sys.exit(1)

    raw = sys.stdin.read()

    try:
        data = json.loads(raw) if raw.strip() else {}
        result = COMMANDS[sys.argv[1]](data)
    except (PqkitError, AttributeError, KeyError, TypeError, ValueError) as e:
        print(json.dumps({"error": str(e)}))
        sys.exit(1)

    print(json.dumps(result))


if __name__ == "__main__":
    main()
