from __future__ import annotations

import re
from typing import Callable, List, Tuple

from ..changes import ChangeLog
from ..textutils import (
    WHITESPACE_RE,
    capitalize_first,
    replace_phrases,
    tidy_punctuation,
)

FORBIDDEN_TERMS = (
    "paradigm",
    "framework",
    "thus",
    "therefore",
    "hence",
    "Note that",
    "It should be noted that",
    "It is worth noting that",
    "It is important to note that",
    "In this paper",
    "In this work",
    "In this study",
    "aforementioned",
    "hereby",
    "heretofore",
    "henceforth",
    "whilst",
    "amongst",
    "albeit",
)

REDUNDANT_PHRASES = {
    "absolutely essential": "essential",
    "absolutely necessary": "necessary",
    "actual fact": "fact",
    "added bonus": "bonus",
    "advance planning": "planning",
    "advance warning": "warning",
    "all-time record": "record",
    "basic fundamentals": "fundamentals",
    "brief summary": "summary",
    "close proximity": "proximity",
    "combine together": "combine",
    "completely eliminate": "eliminate",
    "consensus of opinion": "consensus",
    "continue on": "continue",
    "each and every": "each",
    "end result": "result",
    "exactly the same": "the same",
    "final outcome": "outcome",
    "first and foremost": "first",
    "free gift": "gift",
    "future plans": "plans",
    "general consensus": "consensus",
    "joint collaboration": "collaboration",
    "major breakthrough": "breakthrough",
    "merge together": "merge",
    "mutual cooperation": "cooperation",
    "new innovation": "innovation",
    "null and void": "void",
    "past experience": "experience",
    "past history": "history",
    "period of time": "period",
    "personal opinion": "opinion",
    "plan ahead": "plan",
    "positive improvement": "improvement",
    "postpone until later": "postpone",
    "reduce down": "reduce",
    "refer back": "refer",
    "repeat again": "repeat",
    "revert back": "revert",
    "same exact": "same",
    "serious crisis": "crisis",
    "still remains": "remains",
    "sudden impulse": "impulse",
    "sum total": "total",
    "true fact": "fact",
    "unexpected surprise": "surprise",
    "unintentional mistake": "mistake",
    "various different": "various",
    "very unique": "unique",
}

WEAK_VERBS = {
    "is able to": "can",
    "are able to": "can",
    "was able to": "could",
    "were able to": "could",
    "has the ability to": "can",
    "have the ability to": "can",
    "is capable of": "can",
    "are capable of": "can",
    "serves to": "",
    "serves as": "is",
    "functions as": "is",
    "acts as": "is",
}

PARENTHETICAL_RE = re.compile(r"\(([^)]+)\)")
FOOTNOTE_RE = re.compile(r"\[\d+\]")
WORD_RE = re.compile(r"\w+")

SENTENCE_PARENTHETICAL_CHARS = 30
CLAUSE_PARENTHETICAL_CHARS = 10

PLURAL_PRONOUNS = {"we", "they", "you", "these", "those", "both", "many", "several"}
SINGULAR_SUBJECTS = {"it", "this", "he", "she", "its", "analysis", "thesis", "basis"}


def _subject_number(text: str, position: int) -> str:
    """Classify the word before ``position`` as 'first', 'plural' or 'singular'."""
    preceding = WORD_RE.findall(text[:position])
    if not preceding:
        return "singular"
    word = preceding[-1].lower()
    if word == "i":
        return "first"
    if word in PLURAL_PRONOUNS:
        return "plural"
    if word in SINGULAR_SUBJECTS:
        return "singular"
    if word.endswith("s") and not word.endswith(("ss", "us", "is")):
        return "plural"
    return "singular"


def _present_be(number: str) -> str:
    return {"first": "am", "plural": "are"}.get(number, "is")


def _will_progressive(match: re.Match[str]) -> str:
    number = _subject_number(match.string, match.start())
    return f"{_present_be(number)} {match.group(1)}"


def _will_verb(match: re.Match[str]) -> str:
    verb = match.group(1)
    number = _subject_number(match.string, match.start())
    if verb.lower() == "be":
        return _present_be(number)
    if number != "singular":
        return verb
    return verb + "s"


TENSE_RULES: List[Tuple[re.Pattern[str], Callable[[re.Match[str]], str]]] = [
    (
        re.compile(r"\b(we)\s+will\s+(\w+)", re.IGNORECASE),
        lambda m: f"{m.group(1)} {m.group(2)}",
    ),
    (re.compile(r"\bwill\s+be\s+(\w+ing)\b", re.IGNORECASE), _will_progressive),
    (re.compile(r"\bwill\s+(\w+)", re.IGNORECASE), _will_verb),
    (re.compile(r"\bshall\s+(\w+)", re.IGNORECASE), lambda m: m.group(1)),
    (
        re.compile(r"\bis\s+going\s+to\s+(\w+)", re.IGNORECASE),
        lambda m: m.group(1) + "s",
    ),
    (
        re.compile(r"\bare\s+going\s+to\s+(\w+)", re.IGNORECASE),
        lambda m: m.group(1),
    ),
]


def _flatten_parenthetical(match: re.Match[str]) -> str:
    content = match.group(1).strip()
    if len(content) > SENTENCE_PARENTHETICAL_CHARS:
        return f". {capitalize_first(content)}."
    if len(content) > CLAUSE_PARENTHETICAL_CHARS:
        return f", {content},"
    return f" {content}"


class StyleRuleSet:
    """Lexical and tonal rewrites applied sentence by sentence."""

    def __init__(self, log: ChangeLog | None = None) -> None:
        self.log = log if log is not None else ChangeLog()

    def clean_vocabulary(self, text: str) -> str:
        result, changed = replace_phrases(text, dict.fromkeys(FORBIDDEN_TERMS, ""))
        if not changed:
            return text
        result = tidy_punctuation(result)
        if text[:1].isupper():
            result = capitalize_first(result)
        self.log.record(
            "Forbidden Vocabulary",
            "vocabulary",
            text,
            result,
            "Removed forbidden academic jargon and redundant phrases",
        )
        return result

    def fix_tense(self, text: str) -> str:
        result = text
        for pattern, replacement in TENSE_RULES:
            result = pattern.sub(replacement, result)
        if result != text:
            self.log.record(
                "Tense Correction",
                "style",
                text,
                result,
                "Converted future tense to present tense for academic writing",
            )
        return result

    def remove_parentheticals(self, text: str) -> str:
        result = PARENTHETICAL_RE.sub(_flatten_parenthetical, text)
        result = FOOTNOTE_RE.sub("", result)
        if result == text:
            return text
        result = tidy_punctuation(result)
        self.log.record(
            "Parentheticals Removed",
            "style",
            text,
            result,
            "Converted parenthetical content to regular text for better flow",
        )
        return result

    def remove_redundancy(self, text: str) -> str:
        result, changed = replace_phrases(text, REDUNDANT_PHRASES)
        if changed:
            self.log.record(
                "Redundancy Removed",
                "style",
                text,
                result,
                "Eliminated redundant phrases for concise writing",
            )
        return result

    def enforce_active_writing(self, text: str) -> str:
        result, changed = replace_phrases(text, WEAK_VERBS)
        if not changed:
            return text
        result = WHITESPACE_RE.sub(" ", result).strip()
        self.log.record(
            "Active Writing",
            "style",
            text,
            result,
            "Replaced weak verb constructions with strong, active alternatives",
        )
        return result
