"""Small text utilities: shifting cipher, bracket matching and a keyword file."""

from __future__ import annotations

from os import PathLike

KEYWORDS: tuple[str, ...] = (
    "extern", "return", "union", "const", "float", "short",
    "auto", "double", "int", "struct", "break", "else", "long",
    "goto", "sizeof", "volatile", "do", "if", "static", "while",
    "unsigned", "continue", "for", "signed", "void", "default",
    "switch", "case", "enum", "register", "typedef", "char",
)

_PAIRS = {")": "(", "]": "[", "}": "{"}


def encrypt(text: str) -> str:
    """Shift every character of ``text`` one code point up."""
    return "".join(chr(ord(ch) + 1) for ch in text)


def is_balanced(expression: str) -> bool:
    """Return True if the brackets (), [] and {} in ``expression`` match."""
    stack: list[str] = []
    for ch in expression:
        if ch in "([{":
            stack.append(ch)
        elif ch in _PAIRS:
            if not stack or stack.pop() != _PAIRS[ch]:
                return False
    return not stack


def write_keywords(path: str | PathLike) -> int:
    """Write the C keywords to ``path``, one per line; return how many were written."""
    with open(path, "w", encoding="ascii") as handle:
        for keyword in KEYWORDS:
            handle.write(keyword + "\n")
    return len(KEYWORDS)


def count_lines(path: str | PathLike) -> int:
    """Return the number of newline characters in the file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return sum(line.count("\n") for line in handle)