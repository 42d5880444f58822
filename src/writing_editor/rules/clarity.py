from __future__ import annotations

import re
from typing import Callable, List, Tuple

from ..changes import ChangeLog
from ..segmentation import split_sentences
from ..textutils import (
    capitalize_first,
    count_words,
    ensure_complete_sentence,
    lower_first,
    replace_phrases,
)

LONG_SENTENCE_WORDS = 25
MIN_FRAGMENT_WORDS = 5
MAX_CLAUSES = 2

# Past participle -> simple past for verbs the -ed heuristic cannot handle.
IRREGULAR_VERBS = {
    "written": "wrote",
    "driven": "drove",
    "given": "gave",
    "taken": "took",
    "chosen": "chose",
    "seen": "saw",
    "done": "did",
    "known": "knew",
    "shown": "showed",
    "proven": "proved",
    "broken": "broke",
    "spoken": "spoke",
    "eaten": "ate",
    "beaten": "beat",
    "forgotten": "forgot",
    "frozen": "froze",
    "gotten": "got",
    "hidden": "hid",
    "ridden": "rode",
    "risen": "rose",
    "stolen": "stole",
    "worn": "wore",
}

DETERMINERS = (
    "the",
    "a",
    "an",
    "this",
    "that",
    "these",
    "those",
    "our",
    "their",
    "its",
    "his",
    "her",
    "my",
    "your",
)

OBJECT_PRONOUNS = {"us": "we", "me": "I", "them": "they", "him": "he", "her": "she"}

_PARTICIPLE = r"(?!not\b)\w+(?:ed|en|wn|t)"

AGENT_PASSIVE_RE = re.compile(
    rf"\b(?P<subject>(?:(?:{'|'.join(DETERMINERS)})\s+)?\w+)\s+(?:was|were)\s+"
    rf"(?P<verb>{_PARTICIPLE})\s+by\s+(?P<agent>[^.,;!?]+)",
    re.IGNORECASE,
)
IMPERSONAL_PASSIVE_RE = re.compile(r"\bit\s+(?:is|was)\s+\w+ed\s+that\s+", re.IGNORECASE)
PERFECT_PASSIVE_RE = re.compile(
    r"\b(?P<subject>\w+)\s+(?:has|have)\s+been\s+(?P<verb>\w+(?:ed|en|wn))\b",
    re.IGNORECASE,
)

# Tried in priority order; the prefix opens the second sentence.
SPLIT_POINTS: Tuple[Tuple[re.Pattern[str], str], ...] = (
    (re.compile(r",\s*and\s+", re.IGNORECASE), ""),
    (re.compile(r",\s*but\s+", re.IGNORECASE), "However, "),
    (re.compile(r";\s*"), ""),
    (re.compile(r",\s*which\s+", re.IGNORECASE), "This "),
    (re.compile(r",\s*while\s+", re.IGNORECASE), "Meanwhile, "),
)

CLAUSE_INDICATOR_RE = re.compile(
    r"\b(which|that|who|whom|whose|where|when|while|although|because|since|if|"
    r"unless|after|before|as)\b",
    re.IGNORECASE,
)
CONNECTOR_RE = re.compile(
    r"\s+(?:and|but|however|moreover|furthermore|additionally|also)\s+",
    re.IGNORECASE,
)

SIMPLIFICATIONS = {
    "utilize": "use",
    "utilizes": "uses",
    "utilized": "used",
    "utilizing": "using",
    "implement": "use",
    "implements": "uses",
    "implemented": "used",
    "implementing": "using",
    "facilitate": "help",
    "facilitates": "helps",
    "facilitated": "helped",
    "demonstrate": "show",
    "demonstrates": "shows",
    "demonstrated": "showed",
    "approximately": "about",
    "subsequent": "next",
    "prior to": "before",
    "in order to": "to",
    "due to the fact that": "because",
    "in the event that": "if",
    "at this point in time": "now",
    "in light of the fact that": "because",
    "in spite of the fact that": "although",
    "for the purpose of": "to",
    "with regard to": "about",
    "with respect to": "about",
    "in terms of": "about",
    "on the basis of": "based on",
    "as a consequence of": "because of",
    "in conjunction with": "with",
    "in the vicinity of": "near",
    "a number of": "several",
    "the majority of": "most",
}


def past_tense(participle: str) -> str:
    """Simple past for a participle; regular participles already are one."""
    return IRREGULAR_VERBS.get(participle.lower(), participle)


def active_verb(participle: str) -> str:
    """Active stem for a participle using the irregular table, then -ed stripping."""
    lowered = participle.lower()
    if lowered in IRREGULAR_VERBS:
        return IRREGULAR_VERBS[lowered]
    if lowered.endswith("ied"):
        return participle[:-3] + "y"
    if lowered.endswith("ed"):
        return participle[:-2]
    return participle


def count_clauses(sentence: str) -> int:
    return len(CLAUSE_INDICATOR_RE.findall(sentence)) + 1


class ClarityRuleSet:
    """Sentence-level rewrites: active voice, sentence length, one idea per sentence."""

    def __init__(
        self,
        log: ChangeLog | None = None,
        long_sentence_words: int = LONG_SENTENCE_WORDS,
    ) -> None:
        self.log = log if log is not None else ChangeLog()
        self.long_sentence_words = long_sentence_words
        self._passive_rules: List[
            Tuple[re.Pattern[str], Callable[[re.Match[str]], str]]
        ] = [
            (AGENT_PASSIVE_RE, self._rewrite_agent_passive),
            (IMPERSONAL_PASSIVE_RE, lambda _match: ""),
            (PERFECT_PASSIVE_RE, self._rewrite_perfect_passive),
        ]

    def fix_passive_voice(self, sentence: str) -> str:
        result = sentence
        for pattern, transform in self._passive_rules:
            result = pattern.sub(transform, result)
        if result == sentence:
            return sentence
        if sentence[:1].isupper():
            result = capitalize_first(result)
        self.log.record(
            "Passive Voice",
            "clarity",
            sentence,
            result,
            "Converted passive voice to active voice for clearer, more direct writing",
        )
        return result

    @staticmethod
    def _rewrite_agent_passive(match: re.Match[str]) -> str:
        raw_agent = match.group("agent")
        agent = raw_agent.strip()
        trailing = raw_agent[len(raw_agent.rstrip()) :]
        agent = OBJECT_PRONOUNS.get(agent.lower(), agent)
        subject = match.group("subject")
        if not match.string[: match.start()].strip():
            agent = capitalize_first(agent)
            if subject.split()[0].lower() in DETERMINERS:
                subject = lower_first(subject)
        verb = past_tense(match.group("verb"))
        return f"{agent} {verb} {subject}{trailing}"

    @staticmethod
    def _rewrite_perfect_passive(match: re.Match[str]) -> str:
        return f"{match.group('subject')} {active_verb(match.group('verb'))}"

    def split_long_sentences(self, text: str) -> str:
        processed: List[str] = []
        for sentence in split_sentences(text) or [text.strip()]:
            word_count = count_words(sentence)
            if word_count <= self.long_sentence_words:
                processed.append(sentence)
                continue
            parts = self._intelligent_split(sentence)
            if len(parts) > 1:
                self.log.record(
                    "Long Sentence",
                    "clarity",
                    sentence,
                    " ".join(parts),
                    f"Split sentence with {word_count} words into shorter, clearer sentences",
                )
            processed.extend(parts)
        return " ".join(processed)

    @staticmethod
    def _intelligent_split(sentence: str) -> List[str]:
        for pattern, prefix in SPLIT_POINTS:
            parts = pattern.split(sentence, maxsplit=1)
            if len(parts) != 2:
                continue
            head, tail = parts
            if min(count_words(head), count_words(tail)) >= MIN_FRAGMENT_WORDS:
                return [
                    ensure_complete_sentence(head),
                    ensure_complete_sentence(prefix + tail),
                ]
        return [sentence]

    def separate_multiple_ideas(self, sentence: str) -> List[str]:
        if count_clauses(sentence) <= MAX_CLAUSES:
            return [sentence]

        fragments = [
            ensure_complete_sentence(part)
            for part in CONNECTOR_RE.split(sentence)
            if part.strip()
        ]
        fragments = [fragment for fragment in fragments if fragment]
        if len(fragments) <= 1:
            return [sentence]

        self.log.record(
            "Multiple Ideas",
            "clarity",
            sentence,
            " ".join(fragments),
            "Separated multiple ideas into individual sentences for clarity",
        )
        return fragments

    def simplify_language(self, text: str) -> str:
        result, changed = replace_phrases(text, SIMPLIFICATIONS)
        if changed:
            self.log.record(
                "Simplified Language",
                "vocabulary",
                text,
                result,
                "Replaced elaborate vocabulary with simpler alternatives",
            )
        return result
