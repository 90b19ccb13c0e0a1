"""Content digests."""

import hashlib


def md5(content: str) -> str:
    """Return the lower-case hex MD5 of the content, or "" for empty content."""
    if not content:
        return ""
    return hashlib.md5(content.encode("utf-8")).hexdigest()