"""String puzzles: shifted substrings, distinct subsequences, digit averages, LCS, word reversal."""

from __future__ import annotations

MOD = 10**9 + 7


def smallest_string(s: str) -> str:
    """Shift the first run of non-'a' characters back by one; an all-'a' string ends in 'z'."""
    if not s:
        raise ValueError("the string must not be empty")
    rest = s.lstrip("a")
    if not rest:
        return s[:-1] + "z"
    prefix = s[: len(s) - len(rest)]
    end = rest.find("a")
    if end == -1:
        end = len(rest)
    shifted = "".join(chr(ord(ch) - 1) for ch in rest[:end])
    return prefix + shifted + rest[end:]


def distinct_subsequences(s: str) -> int:
    """Count the distinct subsequences of ``s``, the empty one included, modulo 10**9 + 7."""
    counts = [1]
    last_seen: dict[str, int] = {}
    for position, ch in enumerate(s):
        count = counts[-1] * 2
        if ch in last_seen:
            count -= counts[last_seen[ch]]
        counts.append(count % MOD)
        last_seen[ch] = position
    return counts[-1]


def _is_ascii_letter(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def number_search(text: str) -> int:
    """Sum the digits of ``text``, divide by its letter count and round half away from zero."""
    letters = sum(1 for ch in text if _is_ascii_letter(ch))
    if letters == 0:
        raise ValueError("the text must contain at least one letter")
    digits = sum(int(ch) for ch in text if "0" <= ch <= "9")
    whole, remainder = divmod(digits, letters)
    return whole + (1 if 2 * remainder >= letters else 0)


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Return the length of the longest common subsequence of two strings."""
    following = [0] * (len(text2) + 1)
    for ch1 in reversed(text1):
        current = [0] * (len(text2) + 1)
        for j in range(len(text2) - 1, -1, -1):
            if ch1 == text2[j]:
                current[j] = 1 + following[j + 1]
            else:
                current[j] = max(current[j + 1], following[j])
        following = current
    return following[0]


def reverse_words(s: str) -> str:
    """Reverse the characters of every space-separated word, keeping the spaces in place."""
    return " ".join(word[::-1] for word in s.split(" "))