"""English vocabularies for the rules-based translator.

These mappings should remain small and deterministic.
"""

from __future__ import annotations

NUMBER_WORDS: dict[str, int] = {
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
    "twenty": 20,
}

PALINDROME_TERM_PREFIX = "palindrom"

SINGLE_WORD_PHRASES: tuple[str, ...] = ("single word", "one word")

# "more than one word", "at least one word": a count bound, not a single word.
COMPARISON_QUALIFIERS: frozenset[str] = frozenset({"than", "least", "most"})


def number_pattern() -> str:
    """Regex alternation matching digits or a known number word."""

    # Longer words first so "seventeen" is not cut to "seven".
    words = sorted(NUMBER_WORDS, key=lambda w: (-len(w), w))
    return r"\d+|" + "|".join(words)


def parse_number(token: str) -> int | None:
    """Parse digits or a number word; `None` if the token is neither."""

    if token.isdecimal():
        return int(token)
    return NUMBER_WORDS.get(token)


def has_palindrome_term(text: str) -> bool:
    """Whether any token mentions palindromes ("palindrome", "palindromes", "palindromic")."""

    return any(t.startswith(PALINDROME_TERM_PREFIX) for t in text.split())


def has_single_word_phrase(text: str) -> bool:
    """Whether the text asks for single-word strings ("single word", "one word(s)")."""

    tokens = text.split()
    for i, (first, second) in enumerate(zip(tokens, tokens[1:])):
        if f"{first} {second.removesuffix('s')}" not in SINGLE_WORD_PHRASES:
            continue
        if i > 0 and tokens[i - 1] in COMPARISON_QUALIFIERS:
            continue
        return True
    return False
