"""Scanning text up to an unbalanced closing bracket."""

from __future__ import annotations


class UnbalancedBracketsError(ValueError):
    """Brackets in the input could not be matched."""

    def __init__(self, input: str, reason: str = "unbalanced brackets") -> None:
        super().__init__(f"{reason}: {input!r}")
        self.input = input
        self.reason = reason


def take_until_unbalanced(opening: str, closing: str, text: str) -> tuple[str, str]:
    """Split ``text`` at the first closing bracket that has no opening partner.

    Returns ``(rest, taken)``; the unmatched closing bracket stays in ``rest``.
    If no such bracket exists and all brackets balance, the whole text is taken.
    """
    depth = 0
    for index, char in enumerate(text):
        if char == opening:
            depth += 1
        elif char == closing:
            depth -= 1
            if depth == -1:
                return text[index:], text[:index]
    if depth == 0:
        return "", text
    raise UnbalancedBracketsError(text)


def delimited_unbalanced(opening: str, closing: str, text: str) -> tuple[str, str]:
    """Parse ``opening ... closing`` allowing nested brackets inside.

    Returns ``(rest, inside)``.
    """
    if not text.startswith(opening):
        raise UnbalancedBracketsError(text, f"expected {opening!r}")
    rest, inside = take_until_unbalanced(opening, closing, text[len(opening):])
    if not rest.startswith(closing):
        raise UnbalancedBracketsError(rest, f"expected {closing!r}")
    return rest[len(closing):], inside