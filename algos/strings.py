"""String and number-as-text puzzles."""

from __future__ import annotations

from typing import Sequence

_ROMAN = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
    "IV": 4,
    "IX": 9,
    "XL": 40,
    "XC": 90,
    "CD": 400,
    "CM": 900,
}

_CLOSING = {")": "(", "]": "[", "}": "{"}


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer.

    Raises ValueError for unknown symbols or an unknown subtractive pair.
    """
    if s in _ROMAN:
        return _ROMAN[s]
    total = 0
    last = 1000
    previous = ""
    for symbol in s:
        if symbol not in _ROMAN or len(symbol) != 1:
            raise ValueError(f"invalid Roman symbol {symbol!r}")
        value = _ROMAN[symbol]
        if value > last:
            pair = previous + symbol
            if pair not in _ROMAN:
                raise ValueError(f"invalid Roman numeral {s!r}")
            total -= last
            value = _ROMAN[pair]
        last = value
        previous = symbol
        total += value
    return total


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string."""
    if not strs:
        raise ValueError("at least one string is required")
    prefix = []
    for chars in zip(*strs):
        if any(c != chars[0] for c in chars):
            break
        prefix.append(chars[0])
    return "".join(prefix)


def is_valid_brackets(s: str) -> bool:
    """Check that every closing bracket matches the most recent unmatched opener."""
    if len(s) % 2 == 1:
        return False
    stack = []
    for char in s:
        opener = _CLOSING.get(char)
        if opener is None:
            stack.append(char)
        elif stack and stack[-1] == opener:
            stack.pop()
        else:
            return False
    return not stack


def length_of_last_word(s: str) -> int:
    """Length of the last space-separated word, ignoring trailing spaces."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])


def _expand(s: str, left: int, right: int) -> str:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return s[left + 1 : right]


def longest_palindrome(s: str) -> str:
    """Return the first longest palindromic substring."""
    best = ""
    for centre in range(len(s)):
        for candidate in (_expand(s, centre, centre), _expand(s, centre, centre + 1)):
            if len(candidate) > len(best):
                best = candidate
    return best


def add_binary(a: str, b: str) -> str:
    """Add two binary strings; an empty string counts as zero."""
    return format(int(a or "0", 2) + int(b or "0", 2), "b")


def is_palindrome_number(x: int) -> bool:
    """Report whether the decimal digits of x read the same both ways."""
    if x < 0:
        return False
    reversed_value, remaining = 0, x
    while remaining:
        remaining, digit = divmod(remaining, 10)
        reversed_value = reversed_value * 10 + digit
    return reversed_value == x


def longest_common_substring(strs: Sequence[str]) -> str:
    """Greedily grow a string from the characters of the shortest input.

    Each character of the shortest string is appended when the extended
    string still occurs in every other input; the grown string is returned.
    """
    if not strs:
        raise ValueError("at least one string is required")
    shortest_index = min(range(len(strs)), key=lambda i: len(strs[i]))
    others = [text for i, text in enumerate(strs) if i != shortest_index]
    found = ""
    for char in strs[shortest_index]:
        candidate = found + char
        if all(candidate in text for text in others):
            found = candidate
    return found