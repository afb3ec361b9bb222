"""String puzzles: binary addition, anagrams, roman numerals, brackets and more."""

from __future__ import annotations

from math import gcd

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_CLOSING_TO_OPENING = {")": "(", "}": "{", "]": "["}


def add_binary(a: str, b: str) -> str:
    """Add two binary numbers given as strings and return the binary sum."""
    digits: list[str] = []
    carry = 0
    rev_a, rev_b = reversed(a), reversed(b)
    while True:
        bit_a = next(rev_a, None)
        bit_b = next(rev_b, None)
        if bit_a is None and bit_b is None and not carry:
            break
        total = carry
        if bit_a is not None:
            total += int(bit_a)
        if bit_b is not None:
            total += int(bit_b)
        digits.append(str(total % 2))
        carry = total // 2
    return "".join(reversed(digits))


def append_and_delete(s: str, t: str, k: int) -> str:
    """Say whether ``s`` becomes ``t`` in exactly ``k`` append/delete-last operations."""
    common = 0
    for left, right in zip(s, t):
        if left != right:
            break
        common += 1
    needed = len(s) + len(t) - 2 * common
    if k >= len(s) + len(t) or (k >= needed and (k - needed) % 2 == 0):
        return "Yes"
    return "No"


def gcd_of_strings(s1: str, s2: str) -> str:
    """Return the longest string that divides both inputs, or ``""`` if none does."""
    if s1 + s2 != s2 + s1:
        return ""
    return s1[: gcd(len(s1), len(s2))]


def counting_valleys(steps: int, path: str) -> int:
    """Count the valleys walked along ``path`` ('U' is up, anything else is down)."""
    level = 0
    valleys = 0
    for step in path:
        if step == "U":
            level += 1
            if level == 0:
                valleys += 1
        else:
            level -= 1
    return valleys


def designer_pdf_viewer(heights: list[int], word: str) -> int:
    """Area of the highlight box around ``word`` given per-letter heights for a..z."""
    max_height = 0
    for ch in word:
        if not "a" <= ch <= "z":
            raise ValueError(f"character {ch!r} is not a lowercase letter")
        max_height = max(max_height, heights[ord(ch) - ord("a")])
    return max_height * len(word)


def group_anagrams(strs: list[str]) -> list[list[str]]:
    """Group words that are anagrams, groups ordered by their sorted letters."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return [groups[key] for key in sorted(groups)]


def length_of_last_word(s: str) -> int:
    """Length of the last space-separated word in ``s``."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])


def longest_common_prefix(strs: list[str]) -> str:
    """Longest prefix shared by every string in ``strs``."""
    if not strs:
        return ""
    prefix: list[str] = []
    for chars in zip(*strs):
        first = chars[0]
        if any(ch != first for ch in chars):
            break
        prefix.append(first)
    return "".join(prefix)


def merge_strings(s1: str, s2: str) -> str:
    """Interleave the characters of two strings, the rest of the longer one last."""
    merged: list[str] = []
    for i in range(max(len(s1), len(s2))):
        if i < len(s1):
            merged.append(s1[i])
        if i < len(s2):
            merged.append(s2[i])
    return "".join(merged)


def roman_to_int(symbols: str) -> int:
    """Value of a roman numeral; unknown symbols count as zero."""
    total = 0
    previous = 0
    for symbol in symbols:
        value = _ROMAN_VALUES.get(symbol, 0)
        total += value
        if value > previous:
            total -= 2 * previous
        previous = value
    return total


def time_conversion(s: str) -> str:
    """Convert ``hh:mm:ssAM``/``hh:mm:ssPM`` to 24-hour ``hh:mm:ss``."""
    hours = int(s[0:2])
    minutes = int(s[3:5])
    seconds = int(s[6:8])
    if s[8:10] == "AM":
        if hours == 12:
            hours = 0
    elif hours != 12:
        hours += 12
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def is_palindrome_text(s: str) -> bool:
    """True if ``s`` reads the same both ways, ignoring case and non-alphanumerics."""
    cleaned = [ch for ch in s.lower() if ch.isascii() and ch.isalnum()]
    return cleaned == cleaned[::-1]


def is_valid_parentheses(s: str) -> bool:
    """True if every bracket in ``s`` is closed in the right order."""
    stack: list[str] = []
    for ch in s:
        if ch in "({[":
            stack.append(ch)
        elif ch in _CLOSING_TO_OPENING:
            if not stack or stack[-1] != _CLOSING_TO_OPENING[ch]:
                return False
            stack.pop()
    return not stack


def day_of_programmer(year: int) -> str:
    """Date of the 256th day of ``year`` in the Russian calendar, as ``dd.mm.yyyy``."""
    if year == 1918:
        return "26.09.1918"
    if year < 1918:
        leap = year % 4 == 0
    else:
        leap = year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)
    return ("12.09." if leap else "13.09.") + str(year)