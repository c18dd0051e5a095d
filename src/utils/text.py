import re


def normalize_text(text: str) -> str:
    """Collapse whitespace and trim."""
    if not text:
        return ""
    return re.sub(r'\s+', ' ', text.strip())


def matches_search(name: str, search: str) -> bool:
    """Case-insensitive substring match; an empty search matches everything."""
    needle = normalize_text(search).lower()
    if not needle:
        return True
    return needle in normalize_text(name).lower()
