"""SHA-256 hashing for source files and rendered posts"""

import hashlib


def sha256(content: str) -> str:
    """Return the hex digest of content encoded as UTF-8 (64 chars, fits the String(64) column)."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()
