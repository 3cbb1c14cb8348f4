"""String algorithms: Roman numerals, substrings, words, integer parsing and brackets."""

from __future__ import annotations

from itertools import pairwise

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_CLOSERS = {")": "(", "]": "[", "}": "{"}


def roman_to_int(s: str) -> int:
    """Return the value of the Roman numeral ``s``."""
    try:
        values = [_ROMAN[symbol] for symbol in s]
    except KeyError as exc:
        raise ValueError(f"not a Roman numeral symbol: {exc.args[0]!r}") from exc
    return sum(
        -current if current < following else current
        for current, following in pairwise([*values, 0])
    )


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring with no repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def reverse_words(s: str) -> str:
    """Return the whitespace-separated words of ``s`` in reverse order, single-spaced."""
    return " ".join(reversed(s.split()))


def my_atoi(s: str) -> int:
    """Parse a leading signed integer after spaces, clamped to the 32-bit signed range."""
    rest = s.lstrip(" ")
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
        if value > INT_MAX:
            return INT_MIN if sign < 0 else INT_MAX
    return sign * value


def is_valid_parentheses(s: str) -> bool:
    """Tell whether ``s`` is made of correctly matched and nested brackets."""
    stack: list[str] = []
    for char in s:
        if char in "([{":
            stack.append(char)
        elif not stack or stack.pop() != _CLOSERS.get(char):
            return False
    return not stack