"""Word-frequency counting over plain text."""
from collections import Counter
from typing import List, Tuple


def clean_word(word: str) -> str:
    """Lowercase a token and strip everything except letters, digits and apostrophes."""
    return "".join(ch for ch in word.lower() if ch.isalnum() or ch == "'")


def count_words(text: str) -> Counter:
    counts: Counter = Counter()
    for word in text.split():
        cleaned = clean_word(word)
        if cleaned:
            counts[cleaned] += 1
    return counts


def top_words(counts: Counter, n: int) -> List[Tuple[str, int]]:
    """The n most frequent words; equal counts are ordered alphabetically."""
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return ranked[:n]
