"""String helpers used by the shell: tokenizing, path joining, status parsing."""

from __future__ import annotations

INT_MAX = 2147483647
_MAX_DIGITS = len(str(INT_MAX))
_LAST_DIGIT_LIMIT = INT_MAX % 10
_PREFIX_LIMIT = INT_MAX // 10


def tokenize(buffer: str, delimiters: str) -> list[str]:
    """Split *buffer* at any character in *delimiters*, dropping empty tokens."""
    tokens: list[str] = []
    current: list[str] = []
    for char in buffer:
        if char in delimiters:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        tokens.append("".join(current))
    return tokens


def join_path(directory: str | None, name: str | None) -> str:
    """Join a directory and a file name with a single slash between them."""
    return f"{directory or ''}/{name or ''}"


def parse_status(text: str) -> int:
    """Parse an exit status made of decimal digits.

    Only the first ten characters are examined; anything past them is
    ignored. Raises ValueError for a non-digit or a value above INT_MAX.
    """
    num = 0
    for index, char in enumerate(text[:_MAX_DIGITS]):
        if not ("0" <= char <= "9"):
            raise ValueError(f"Illegal number: {text}")
        digit = ord(char) - ord("0")
        num *= 10
        if index == _MAX_DIGITS - 1 and digit > _LAST_DIGIT_LIMIT:
            raise ValueError(f"Illegal number: {text}")
        num += digit
        if (
            index == _MAX_DIGITS - 2
            and len(text) > index + 1
            and num > _PREFIX_LIMIT
        ):
            raise ValueError(f"Illegal number: {text}")
    return num


def has_directory(command: str) -> bool:
    """Return True when *command* contains a path separator."""
    return "/" in command