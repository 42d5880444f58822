from __future__ import annotations

import re
from functools import lru_cache
from typing import List, Mapping, Tuple

WHITESPACE_RE = re.compile(r"\s+")
SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+")
TERMINAL_PUNCT_RE = re.compile(r"[.!?]$")


def split_words(text: str) -> List[str]:
    """Split text on whitespace, ignoring empty fragments."""
    return [word for word in WHITESPACE_RE.split(text.strip()) if word]


def count_words(text: str) -> int:
    return len(split_words(text))


def find_sentences(text: str) -> List[str]:
    """Return every punctuation-terminated sentence found in text."""
    return SENTENCE_RE.findall(text)


def capitalize_first(text: str) -> str:
    if not text:
        return text
    return text[0].upper() + text[1:]


def lower_first(text: str) -> str:
    if not text:
        return text
    return text[0].lower() + text[1:]


def ensure_complete_sentence(fragment: str) -> str:
    """Capitalize a fragment and terminate it with a period when needed."""
    sentence = fragment.strip()
    if not sentence:
        return ""
    sentence = capitalize_first(sentence.rstrip(",;:").rstrip())
    if not TERMINAL_PUNCT_RE.search(sentence):
        sentence += "."
    return sentence


@lru_cache(maxsize=None)
def phrase_pattern(phrase: str) -> re.Pattern[str]:
    """Whole-word, case-insensitive pattern for a literal phrase."""
    return re.compile(rf"\b{re.escape(phrase)}\b", re.IGNORECASE)


def replace_phrases(text: str, replacements: Mapping[str, str]) -> Tuple[str, bool]:
    """Apply whole-word phrase substitutions in mapping order.

    A replacement keeps the leading capital of the text it replaces. Returns the
    new text and whether anything was substituted.
    """
    result = text
    changed = False
    for phrase, substitute in replacements.items():

        def _sub(match: re.Match[str], substitute: str = substitute) -> str:
            if substitute and match.group(0)[0].isupper():
                return capitalize_first(substitute)
            return substitute

        updated = phrase_pattern(phrase).sub(_sub, result)
        if updated != result:
            changed = True
            result = updated
    return result, changed


def tidy_punctuation(text: str) -> str:
    """Repair spacing and punctuation left behind after deleting text."""
    result = WHITESPACE_RE.sub(" ", text)
    result = re.sub(r"\s+([.,!?;:])", r"\1", result)
    result = re.sub(r"[,;]\s*([.!?])", r"\1", result)
    result = re.sub(r"([.,])\s*,", ",", result)
    result = re.sub(r"\.\s*\.", ".", result)
    result = re.sub(r"^\s*[.,;]\s*", "", result)
    return result.strip()
