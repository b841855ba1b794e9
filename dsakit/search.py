"""Substring search."""


def contains_substring(text: str, pattern: str) -> bool:
    """Return True when ``pattern`` occurs anywhere in ``text``."""
    return pattern in text