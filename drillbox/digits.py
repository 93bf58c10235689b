"""Questions about the digits of integers and the letters of words."""

from __future__ import annotations

from collections import Counter

VOWELS = frozenset("aeiou")


def _digits(number: int) -> str:
    return str(abs(number))


def count_digits(number: int) -> int:
    """Return how many decimal digits ``number`` has; the sign is ignored."""
    return len(_digits(number))


def digit_frequency(number: int) -> dict[int, int]:
    """Map each digit occurring in ``number`` to its count, in ascending digit order."""
    counts = Counter(int(ch) for ch in _digits(number))
    return dict(sorted(counts.items()))


def is_prime(number: int) -> bool:
    """Return True if ``number`` has exactly one prime factor, counted with multiplicity."""
    if number < 2:
        return False
    factors = 0
    remaining = number
    divisor = 2
    while remaining != 1:
        if divisor * divisor > remaining:
            factors += 1
            break
        if remaining % divisor == 0:
            remaining //= divisor
            factors += 1
            if factors > 1:
                return False
        else:
            divisor += 1
    return factors == 1


def reverse_digits(number: int) -> str:
    """Return the digits of ``number`` in reverse order, keeping leading zeros."""
    return _digits(number)[::-1]


def has_unique_digits(number: int) -> bool:
    """Return True if no digit occurs twice in ``number``."""
    digits = _digits(number)
    return len(set(digits)) == len(digits)


def is_vowel(letter: str) -> bool:
    """Return True if the first character of ``letter`` is a vowel, ignoring case."""
    if not letter:
        raise ValueError("a letter is required")
    return letter[0].lower() in VOWELS