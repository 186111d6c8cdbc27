"""Determinism Hash: normalized content fingerprint of an enhanced prompt.

Invariants:
    - Normalization is NFKC, then strip, then lower-case
    - Digest is SHA-256 over UTF-8 bytes, 64 lowercase hex characters
    - Not a security primitive: only detects textual equivalence
"""

import hashlib
import unicodedata


def normalize_for_determinism_hash(text: str) -> str:
    return unicodedata.normalize("NFKC", text).strip().lower()


def sha256_hex(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def compute_determinism_hash(enhanced_prompt: str) -> str:
    """Hash enhanced_prompt up to case, outer whitespace and Unicode form."""
    return sha256_hex(normalize_for_determinism_hash(enhanced_prompt))
