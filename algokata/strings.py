"""Palindrome checks, vowel handling, substrings and Roman numerals."""

from __future__ import annotations

ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
VOWELS = frozenset("aeiou")


def _is_ascii_alnum(c: str) -> bool:
    return c.isascii() and c.isalnum()


def is_palindrome(s: str) -> bool:
    """Return True if ``s`` reads the same both ways, ignoring case and non-alphanumerics."""
    kept = [c.lower() for c in s if _is_ascii_alnum(c)]
    return kept == kept[::-1]


def _is_palindrome_range(s: str, i: int, j: int) -> bool:
    while i < j:
        if s[i] != s[j]:
            return False
        i += 1
        j -= 1
    return True


def valid_palindrome(s: str) -> bool:
    """Return True if ``s`` is a palindrome after deleting at most one character."""
    left, right = 0, len(s) - 1
    while left < right:
        if s[left] != s[right]:
            return _is_palindrome_range(s, left + 1, right) or _is_palindrome_range(
                s, left, right - 1
            )
        left += 1
        right -= 1
    return True


def is_vowel(c: str) -> bool:
    """Return True if ``c`` is a single vowel letter, in either case."""
    return len(c) == 1 and c.lower() in VOWELS


def reverse_vowels(s: str) -> str:
    """Return ``s`` with the order of its vowels reversed."""
    chars = list(s)
    left, right = 0, len(chars) - 1
    while left < right:
        if not is_vowel(chars[left]):
            left += 1
        elif not is_vowel(chars[right]):
            right -= 1
        else:
            chars[left], chars[right] = chars[right], chars[left]
            left += 1
            right -= 1
    return "".join(chars)


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring with no repeated character."""
    window: set[str] = set()
    best = 0
    start = 0
    for end, char in enumerate(s):
        while char in window:
            window.discard(s[start])
            start += 1
        window.add(char)
        best = max(best, end - start + 1)
    return best


def roman_to_int(s: str) -> int:
    """Return the integer value of a Roman numeral."""
    try:
        values = [ROMAN_VALUES[c] for c in s]
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral symbol {exc.args[0]!r}") from None
    total = 0
    for current, following in zip(values, [*values[1:], 0]):
        total += -current if current < following else current
    return total