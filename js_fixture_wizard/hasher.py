"""Signature hashing for change detection between runs."""

import hashlib

HASH_LENGTH = 8


def canonical_signature(name: str, parameters: dict[str, str], return_type: str) -> str:
    """Render a signature as ``name(a: T, b: U): R``."""
    params = ", ".join(f"{k}: {v}" for k, v in parameters.items())
    return f"{name}({params}): {return_type}"


def signature_hash(name: str, parameters: dict[str, str], return_type: str) -> str:
    """Digest a function signature for change detection.

    Only the signature is hashed, so edits to a function body never change
    the result. Not intended for any security purpose.

    Args:
        name: Function name
        parameters: Ordered {name: type} mapping
        return_type: Declared return type text

    Returns:
        The first 8 hex characters of the SHA-256 of the canonical signature
    """
    signature = canonical_signature(name, parameters, return_type)
    return hashlib.sha256(signature.encode("utf-8")).hexdigest()[:HASH_LENGTH]
