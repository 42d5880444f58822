from __future__ import annotations

import re
from typing import List

from .textutils import find_sentences, split_words

VOWELS = "aeiou"
PASSIVE_RE = re.compile(r"\b(?:was|were|been|being|is|are|am)\s+\w+ed\b", re.IGNORECASE)
COMPLEX_WORD_RE = re.compile(r"\b\w{10,}\b")
CLAUSE_MARKER_RE = re.compile(
    r"\b(which|that|who|whom|whose|where|when|while|although|because)\b",
    re.IGNORECASE,
)
NON_ALPHA_RE = re.compile(r"[^a-z]")

LONG_SENTENCE_WORDS = 25
MAX_COMPLEX_WORD_PENALTY = 20


def count_syllables(word: str) -> int:
    """Count vowel groups, drop one for a trailing silent 'e', floor at one."""
    cleaned = NON_ALPHA_RE.sub("", word.lower())
    count = 0
    previous_was_vowel = False
    for ch in cleaned:
        is_vowel = ch in VOWELS
        if is_vowel and not previous_was_vowel:
            count += 1
        previous_was_vowel = is_vowel
    if cleaned.endswith("e"):
        count -= 1
    return max(1, count)


def flesch_reading_ease(text: str) -> float:
    """Flesch Reading Ease clamped to [0, 100]; 0 when there is nothing to score."""
    sentences = find_sentences(text)
    words = split_words(text)
    if not sentences or not words:
        return 0.0
    syllables = sum(count_syllables(word) for word in words)
    score = (
        206.835
        - 1.015 * (len(words) / len(sentences))
        - 84.6 * (syllables / len(words))
    )
    return max(0.0, min(100.0, score))


def count_passive_voice(text: str) -> int:
    return len(PASSIVE_RE.findall(text))


def long_sentences(text: str, threshold: int = LONG_SENTENCE_WORDS) -> List[str]:
    return [s.strip() for s in find_sentences(text) if len(split_words(s)) > threshold]


def count_long_sentences(text: str, threshold: int = LONG_SENTENCE_WORDS) -> int:
    return len(long_sentences(text, threshold))


def clarity_score(text: str) -> float:
    """
    Heuristic 0-100 clarity score.
    Penalizes long average sentences, passive constructions and complex words.
    """
    sentences = find_sentences(text)
    if not sentences:
        return 0.0

    score = 100.0
    avg_words = sum(len(split_words(s)) for s in sentences) / len(sentences)
    if avg_words > 20:
        score -= 10
    if avg_words > 25:
        score -= 10

    score -= 2 * count_passive_voice(text)
    score -= min(len(COMPLEX_WORD_RE.findall(text)), MAX_COMPLEX_WORD_PENALTY)
    return max(0.0, min(100.0, score))


def average_clause_count(text: str) -> float:
    """Average number of subordinate-clause markers per sentence, one decimal."""
    sentences = find_sentences(text)
    if not sentences:
        return 0.0
    total = sum(len(CLAUSE_MARKER_RE.findall(s)) for s in sentences)
    return round(total / len(sentences), 1)
