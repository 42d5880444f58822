"""
Read-only clarity diagnostics.

Unlike the rewriting pipeline this pass never edits text: it counts problem
patterns, grades each category by severity and derives a score and a list of
recommendations from those counts.
"""

from __future__ import annotations

import re
from typing import List

from .models import ClarityIssue, ClarityReport, ClarityStatistics, Severity
from .scoring import count_passive_voice, count_syllables, flesch_reading_ease
from .textutils import find_sentences, phrase_pattern, split_words

PASSIVE_PATTERNS = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"\b(?:was|were)\s+\w+ed\b",
        r"\b(?:has|have|had)\s+been\s+\w+ed\b",
        r"\b(?:is|are|am)\s+being\s+\w+ed\b",
        r"\bit\s+(?:is|was)\s+\w+ed\s+that\b",
    )
)

JARGON_TERMS = (
    "paradigm",
    "framework",
    "utilize",
    "implement",
    "facilitate",
    "leverage",
    "synergy",
    "holistic",
    "robust",
    "cutting-edge",
    "state-of-the-art",
    "best-of-breed",
    "game-changing",
    "disruptive",
    "transformative",
    "innovative",
    "revolutionary",
    "groundbreaking",
)
DENSITY_JARGON_TERMS = JARGON_TERMS[:5]

REDUNDANT_PHRASES = (
    "absolutely essential",
    "actual fact",
    "advance planning",
    "basic fundamentals",
    "close proximity",
    "completely eliminate",
    "end result",
    "final outcome",
    "free gift",
    "future plans",
    "past history",
    "personal opinion",
    "repeat again",
    "true fact",
    "unexpected surprise",
    "very unique",
)

CLAUSE_RE = re.compile(
    r"\b(which|that|who|whom|whose|where|when|while|although|because|since|if|unless)\b",
    re.IGNORECASE,
)

LONG_SENTENCE_WORDS = 25
EXAMPLE_CHARS = 100
SEVERITY_PENALTY = {"high": 15, "medium": 8, "low": 3}


def _severity(count: int, medium_above: int = 2, high_above: int = 5) -> Severity:
    if count > high_above:
        return "high"
    if count > medium_above:
        return "medium"
    return "low"


def _shorten(sentence: str) -> str:
    sentence = sentence.strip()
    if len(sentence) > EXAMPLE_CHARS:
        return sentence[:EXAMPLE_CHARS] + "..."
    return sentence


def check_passive_voice(text: str) -> ClarityIssue:
    count = 0
    examples: List[str] = []
    for pattern in PASSIVE_PATTERNS:
        matches = pattern.findall(text)
        count += len(matches)
        examples.extend(matches[:3])
    return ClarityIssue("Passive Voice", _severity(count), count, examples[:3])


def check_long_sentences(sentences: List[str]) -> ClarityIssue:
    long_ones = [s for s in sentences if len(split_words(s)) > LONG_SENTENCE_WORDS]
    return ClarityIssue(
        "Long Sentences",
        _severity(len(long_ones)),
        len(long_ones),
        [_shorten(s) for s in long_ones[:3]],
    )


def check_complex_words(words: List[str]) -> ClarityIssue:
    unique: List[str] = []
    for word in words:
        cleaned = re.sub(r"[^a-zA-Z]", "", word)
        if len(cleaned) > 12 or count_syllables(cleaned) > 4:
            if word not in unique:
                unique.append(word)
    return ClarityIssue(
        "Complex Vocabulary", _severity(len(unique), 10, 20), len(unique), unique[:5]
    )


def check_jargon(text: str) -> ClarityIssue:
    count = 0
    found: List[str] = []
    for term in JARGON_TERMS:
        hits = len(phrase_pattern(term).findall(text))
        if hits:
            count += hits
            found.append(term)
    return ClarityIssue("Academic Jargon", _severity(count, 5, 10), count, found[:5])


def check_redundancy(text: str) -> ClarityIssue:
    found = [phrase for phrase in REDUNDANT_PHRASES if phrase_pattern(phrase).search(text)]
    return ClarityIssue("Redundant Phrases", _severity(len(found)), len(found), found[:5])


def check_multiple_clauses(sentences: List[str]) -> ClarityIssue:
    dense = [s for s in sentences if len(CLAUSE_RE.findall(s)) > 2]
    return ClarityIssue(
        "Multiple Clauses",
        _severity(len(dense)),
        len(dense),
        [_shorten(s) for s in dense[:3]],
    )


def compute_statistics(
    text: str, sentences: List[str], words: List[str]
) -> ClarityStatistics:
    if not words:
        return ClarityStatistics(0.0, 0, 0, 0, 0.0)
    avg_sentence_length = len(words) / len(sentences) if sentences else 0.0
    passive_pct = (
        round(count_passive_voice(text) / len(sentences) * 100) if sentences else 0
    )
    complex_words = [w for w in words if count_syllables(w) > 3]
    jargon_count = sum(
        len(phrase_pattern(term).findall(text)) for term in DENSITY_JARGON_TERMS
    )
    return ClarityStatistics(
        average_sentence_length=round(avg_sentence_length, 1),
        passive_voice_percentage=passive_pct,
        complex_word_percentage=round(len(complex_words) / len(words) * 100),
        readability_score=round(flesch_reading_ease(text)),
        jargon_density=round(jargon_count / len(words) * 100, 1),
    )


def score_issues(issues: List[ClarityIssue], stats: ClarityStatistics) -> int:
    score = 100
    for issue in issues:
        if issue.count > 0:
            score -= SEVERITY_PENALTY[issue.severity]
    if stats.average_sentence_length > 25:
        score -= 10
    if stats.passive_voice_percentage > 20:
        score -= 10
    if stats.complex_word_percentage > 15:
        score -= 5
    if stats.readability_score < 50:
        score -= 10
    if stats.jargon_density > 5:
        score -= 5
    return max(0, min(100, score))


def build_recommendations(
    issues: List[ClarityIssue], stats: ClarityStatistics
) -> List[str]:
    templates = {
        "Passive Voice": "Convert {n} passive voice instances to active voice for clearer writing",
        "Long Sentences": "Split {n} long sentences (>25 words) into shorter, clearer statements",
        "Complex Vocabulary": "Replace {n} complex words with simpler alternatives",
        "Academic Jargon": "Remove or replace {n} instances of academic jargon",
        "Redundant Phrases": "Eliminate {n} redundant phrases for conciseness",
        "Multiple Clauses": "Simplify {n} sentences with multiple clauses",
    }
    recommendations = [
        templates[issue.category].format(n=issue.count)
        for issue in issues
        if issue.count > 0
    ]
    if stats.average_sentence_length > 20:
        recommendations.append(
            f"Reduce average sentence length from {stats.average_sentence_length} to under 20 words"
        )
    if stats.readability_score < 60:
        recommendations.append(
            f"Improve readability score from {stats.readability_score} to at least 60"
        )
    if stats.passive_voice_percentage > 10:
        recommendations.append(
            f"Reduce passive voice usage from {stats.passive_voice_percentage}% to under 10%"
        )
    return recommendations


def check_clarity_metrics(text: str) -> ClarityReport:
    """Diagnose clarity problems in text without modifying it."""
    sentences = find_sentences(text)
    words = split_words(text)
    issues = [
        check_passive_voice(text),
        check_long_sentences(sentences),
        check_complex_words(words),
        check_jargon(text),
        check_redundancy(text),
        check_multiple_clauses(sentences),
    ]
    stats = compute_statistics(text, sentences, words)
    return ClarityReport(
        score=score_issues(issues, stats),
        issues=[issue for issue in issues if issue.count > 0],
        statistics=stats,
        recommendations=build_recommendations(issues, stats),
    )
