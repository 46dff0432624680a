"""Small integer and ASCII string helpers with their historical quirks."""

from __future__ import annotations

import math
import sys

_INT_MAX = 2147483647


def getnbr(text: str) -> int:
    """Read the first run of digits in ``text`` as an integer.

    A '-' directly before a digit from 1 to 8 makes the number negative.
    Values reaching the 32-bit limit give 0.
    """
    negative = False
    start = len(text)
    for i, ch in enumerate(text):
        if "0" <= ch <= "9":
            start = i
            break
        if ch == "-" and "0" < text[i + 1:i + 2] < "9":
            negative = True
    digits = []
    for ch in text[start:]:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    if negative:
        value = -value
    if value >= _INT_MAX or value <= -_INT_MAX:
        return 0
    return value


def compute_power_rec(nb: int, p: int) -> int:
    """``nb`` to the power ``p``; 0 for negative exponents or bases."""
    if p < 0:
        return 0
    if p == 0:
        return 1
    if nb >= _INT_MAX or nb < 0:
        return 0
    return nb * compute_power_rec(nb, p - 1)


def compute_square_root(nb: int) -> int:
    """Integer square root of a perfect square, else 0."""
    if nb <= 0:
        return 0
    root = math.isqrt(nb)
    return root if root * root == nb else 0


def is_prime(nb: int) -> bool:
    """True when no number in [2, nb) divides ``nb``."""
    return all(nb % i for i in range(2, nb))


def find_prime_sup(nb: int) -> int:
    """Smallest number at or above ``nb`` that is_prime accepts."""
    while not is_prime(nb):
        nb += 1
    return nb


def isneg(n: int) -> str:
    """Write 'N' for negative numbers, 'P' otherwise, to standard output.

    The letter written is also returned.
    """
    letter = "N" if n < 0 else "P"
    sys.stdout.write(letter)
    sys.stdout.flush()
    return letter


def sort_int_array(values: list[int]) -> list[int]:
    """Return the values in ascending order."""
    return sorted(values)


def _all_between(text: str, low: int, high: int) -> bool:
    return all(low <= ord(ch) <= high for ch in text)


def str_isalpha(text: str) -> bool:
    return all(_all_between(ch, 65, 90) or _all_between(ch, 97, 122) for ch in text)


def str_islower(text: str) -> bool:
    return _all_between(text, 97, 122)


def str_isnum(text: str) -> bool:
    return _all_between(text, 48, 57)


def str_isprintable(text: str) -> bool:
    return _all_between(text, 32, 126)


def str_isupper(text: str) -> bool:
    return _all_between(text, 65, 90)


def _ascii_lower(text: str) -> str:
    return "".join(chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch for ch in text)


def _ascii_upper(ch: str) -> str:
    return chr(ord(ch) - 32) if "a" <= ch <= "z" else ch


def strcapitalize(text: str) -> str:
    """Lower-case ``text`` and capitalise letters after spaces and punctuation."""
    lowered = _ascii_lower(text)
    if not lowered:
        return lowered
    out = [_ascii_upper(lowered[0])]
    for ch in lowered[1:]:
        out.append(_ascii_upper(ch) if 23 <= ord(out[-1]) <= 47 else ch)
    return "".join(out)


def strcmp(s1: str, s2: str) -> int:
    """Difference of the first differing character codes, 0 when equal."""
    return strncmp(s1, s2, max(len(s1), len(s2)) + 1)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Like strcmp but looks at no more than ``n`` characters (at least one)."""
    a = s1 + "\0"
    b = s2 + "\0"
    i = 0
    while a[i] == b[i] and a[i] != "\0" and i + 1 < n:
        i += 1
    return ord(a[i]) - ord(b[i])


def strstr(text: str, to_find: str) -> str | None:
    """Suffix of ``text`` starting at the first occurrence of to_find's first character."""
    if not to_find:
        return None
    index = text.find(to_find[0])
    return None if index == -1 else text[index:]