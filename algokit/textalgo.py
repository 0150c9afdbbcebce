"""String matching, bracket checking and small expression routines."""

from __future__ import annotations

from collections import Counter

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = {")": "(", "]": "[", "}": "{"}
_DECODE_MODULUS = 10**9 + 7


def compute_lps(pattern: str) -> list[int]:
    """Return the longest-proper-prefix-that-is-also-suffix table for ``pattern``."""
    lps = [0] * len(pattern)
    length = 0
    index = 1
    while index < len(pattern):
        if pattern[index] == pattern[length]:
            length += 1
            lps[index] = length
            index += 1
        elif length:
            length = lps[length - 1]
        else:
            index += 1
    return lps


def kmp_search(pattern: str, text: str) -> list[int]:
    """Return every start index of ``pattern`` in ``text``, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = compute_lps(pattern)
    matches: list[int] = []
    matched = 0
    for index, char in enumerate(text):
        while matched and pattern[matched] != char:
            matched = lps[matched - 1]
        if pattern[matched] == char:
            matched += 1
        if matched == len(pattern):
            matches.append(index + 1 - matched)
            matched = lps[matched - 1]
    return matches


def count_anagrams(pattern: str, text: str) -> int:
    """Count windows of ``text`` that are anagrams of ``pattern``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    need = Counter(pattern)
    unmatched = len(need)
    width = len(pattern)
    found = 0
    for index, char in enumerate(text):
        if char in need:
            need[char] -= 1
            if need[char] == 0:
                unmatched -= 1
        if index >= width - 1:
            if unmatched == 0:
                found += 1
            leaving = text[index - width + 1]
            if leaving in need:
                if need[leaving] == 0:
                    unmatched += 1
                need[leaving] += 1
    return found


def is_balanced(expr: str) -> bool:
    """Report whether the brackets in ``expr`` are balanced.

    A character that is not an opening bracket is rejected when no bracket is
    open; other characters inside brackets are ignored.
    """
    stack: list[str] = []
    for char in expr:
        if char in _OPENERS:
            stack.append(char)
            continue
        if not stack:
            return False
        if char in _CLOSERS and stack.pop() != _CLOSERS[char]:
            return False
    return not stack


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATIONS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_div,
}


def evaluate_postfix(expr: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Division truncates toward zero.
    """
    stack: list[int] = []
    for char in expr:
        if "0" <= char <= "9":
            stack.append(int(char))
            continue
        operation = _OPERATIONS.get(char)
        if operation is None:
            raise ValueError(f"unknown operator {char!r}")
        if len(stack) < 2:
            raise ValueError(f"operator {char!r} lacks operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(operation(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def count_decodings(digits: str) -> int:
    """Count the ways ``digits`` decodes with A=1 .. Z=26, modulo 10**9+7."""
    if not digits.isdigit() and digits:
        raise ValueError("input must consist of decimal digits")
    values = [int(d) for d in digits]
    before, current = 1, 1
    for previous, digit in zip(values, values[1:]):
        following = current
        if previous * 10 + digit <= 26:
            following += before
        before, current = current, following % _DECODE_MODULUS
    return current