"""String drills: palindromes, anagrams, ciphers and character scans."""

from collections import Counter
from string import ascii_lowercase


def _is_palindrome_span(text: str, start: int, end: int) -> bool:
    """Return True if ``text[start:end + 1]`` reads the same both ways."""
    span = text[start:end + 1]
    return span == span[::-1]


def valid_palindrome(text: str) -> bool:
    """Return True if ``text`` is a palindrome after deleting at most one character."""
    left, right = 0, len(text) - 1
    while left <= right:
        if text[left] != text[right]:
            return _is_palindrome_span(text, left + 1, right) or _is_palindrome_span(
                text, left, right - 1
            )
        left += 1
        right -= 1
    return True


def _expand(text: str, left: int, right: int) -> int:
    """Count palindromes found by growing outwards from one centre."""
    count = 0
    while left >= 0 and right < len(text) and text[left] == text[right]:
        count += 1
        left -= 1
        right += 1
    return count


def count_palindromic_substrings(text: str) -> int:
    """Count the palindromic substrings of ``text``, by position."""
    return sum(
        _expand(text, centre, centre) + _expand(text, centre, centre + 1)
        for centre in range(len(text))
    )


def decode_message(key: str, message: str) -> str:
    """Decode ``message`` with the substitution table given by ``key``.

    The first distinct non-space character of ``key`` maps to ``a``, the next
    to ``b`` and so on.  Spaces in the message are kept.
    """
    table: dict[str, str] = {}
    letters = iter(ascii_lowercase)
    for ch in key:
        if ch != " " and ch not in table:
            table[ch] = next(letters, "")
    try:
        return "".join(" " if ch == " " else table[ch] for ch in message)
    except KeyError as exc:
        raise ValueError(f"character {exc.args[0]!r} does not occur in the key") from None


def _require_lowercase(text: str) -> None:
    for ch in text:
        if ch not in ascii_lowercase:
            raise ValueError(f"expected lowercase letters only, got {ch!r}")


def count_sort(text: str) -> str:
    """Sort the lowercase letters of ``text`` with a counting sort."""
    _require_lowercase(text)
    counts = Counter(text)
    return "".join(letter * counts[letter] for letter in ascii_lowercase)


def is_anagram(first: str, second: str) -> bool:
    """Return True if the two strings hold the same characters the same number of times."""
    if len(first) != len(second):
        return False
    return Counter(first) == Counter(second)


def is_isomorphic(first: str, second: str) -> bool:
    """Return True if characters of ``first`` can be replaced one-to-one to get ``second``."""
    if len(first) != len(second):
        return False
    last_first: dict[str, int] = {}
    last_second: dict[str, int] = {}
    for position, (a, b) in enumerate(zip(first, second)):
        if last_first.get(a, -1) != last_second.get(b, -1):
            return False
        last_first[a] = last_second[b] = position
    return True


def longest_common_prefix(words: list[str]) -> str:
    """Return the longest prefix shared by every word."""
    if not words:
        raise ValueError("need at least one word")
    lowest, highest = min(words), max(words)
    prefix = []
    for a, b in zip(lowest, highest):
        if a != b:
            break
        prefix.append(a)
    return "".join(prefix)


def decode_string(encoded: str) -> str:
    """Expand ``k[text]`` groups, so ``"3[a]2[bc]"`` becomes ``"aaabcbc"``."""
    result: list[str] = []
    for ch in encoded:
        if ch != "]":
            result.append(ch)
            continue
        body: list[str] = []
        while result and result[-1] != "[":
            body.append(result.pop())
        if not result:
            raise ValueError("unbalanced ']' in encoded string")
        result.pop()
        digits: list[str] = []
        while result and result[-1].isdigit():
            digits.append(result.pop())
        if not digits:
            raise ValueError("missing repeat count before '['")
        repeat = int("".join(reversed(digits)))
        result.extend(list("".join(reversed(body))) * repeat)
    return "".join(result)


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same forwards and backwards."""
    return text == text[::-1]


def is_subsequence(text: str, pattern: str) -> bool:
    """Return True if ``pattern`` can be obtained from ``text`` by deleting characters."""
    if len(pattern) > len(text):
        return False
    remaining = iter(text)
    return all(ch in remaining for ch in pattern)


def leftmost_repeating_index(text: str) -> int:
    """Index of the first character that occurs more than once, or -1."""
    counts = Counter(text)
    return next((i for i, ch in enumerate(text) if counts[ch] > 1), -1)


def leftmost_non_repeating_index(text: str) -> int:
    """Index of the first character that occurs exactly once, or -1."""
    counts = Counter(text)
    return next((i for i, ch in enumerate(text) if counts[ch] == 1), -1)