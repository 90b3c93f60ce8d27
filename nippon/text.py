"""Small string helpers for paths and archive names."""

from __future__ import annotations


def cut_front(text: str, size: int) -> str:
    """Drop the first ``size`` characters."""
    if size < 0 or size > len(text):
        raise ValueError(f"cannot cut {size} characters from a string of length {len(text)}")
    return text[size:]


def cut_back(text: str, size: int) -> str:
    """Drop the last ``size`` characters; a size beyond the length keeps the whole string."""
    if size < 0:
        raise ValueError("size must not be negative")
    if size > len(text):
        return text
    return text[:len(text) - size]


def remove_nulls(text: str) -> str:
    """Remove every NUL character."""
    return text.replace("\0", "")


def posix_path(text: str) -> str:
    """Turn backslash separators into forward slashes."""
    return text.replace("\\", "/")


def select_expr(text: str, expr: str) -> str:
    """Keep the characters of ``text`` at the positions where ``expr`` holds an ``X``.

    Nothing is selected when the expression is longer than the text.
    """
    if not text or len(expr) > len(text):
        return ""
    return "".join(char for char, mark in zip(text, expr) if mark == "X")