"""Shortening of content for display in logs."""

SHOW_CONTENT_SIZE = 100


def truncate_content(content: str) -> str:
    """Return at most the first SHOW_CONTENT_SIZE bytes of the UTF-8 content.

    A character cut in half at the limit is dropped.
    """
    if not content:
        return ""
    raw = content.encode("utf-8")
    if len(raw) <= SHOW_CONTENT_SIZE:
        return content
    return raw[:SHOW_CONTENT_SIZE].decode("utf-8", errors="ignore")