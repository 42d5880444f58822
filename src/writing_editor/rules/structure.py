from __future__ import annotations

import re
from typing import Dict, List

from ..changes import ChangeLog
from ..models import Section, ValidationResult
from ..segmentation import PARAGRAPH_SPLIT_RE
from ..textutils import replace_phrases, split_words

PROBLEM_KEYWORDS = (
    "problem",
    "issue",
    "challenge",
    "difficult",
    "limitation",
    "gap",
    "lacking",
    "insufficient",
    "inadequate",
    "fails",
)

OBVIOUS_STATEMENT_PATTERNS = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"computers are everywhere",
        r"the internet has changed",
        r"in today's world",
        r"as we all know",
        r"it is well known that",
        r"everyone knows",
        r"\bclearly\b",
        r"\bobviously\b",
        r"\bof course\b",
    )
)

# Sentences opening with these are stripped from introductions.
BOILERPLATE_SENTENCE_PATTERNS = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"In today's world[^.]*\.",
        r"As we all know[^.]*\.",
        r"It is well known that[^.]*\.",
        r"Obviously[^.]*\.",
        r"Clearly[^.]*\.",
    )
)

KEY_IDEA_PHRASES = (
    "key insight",
    "main idea",
    "core contribution",
    "novel approach",
    "our approach",
    "we propose",
    "we present",
    "we introduce",
    "this paper presents",
    "this work",
)

COMPARISON_TERMS = (
    "unlike",
    "compared to",
    "in contrast",
    "whereas",
    "while",
    "alternative",
    "existing",
    "previous",
    "traditional",
    "conventional",
)

TOPIC_STOPWORDS = {"which", "where", "while", "through", "because"}
TOPIC_WORDS = 3

CONTRIBUTIONS_PARAGRAPH = (
    "The main contributions of this work are: First, we provide a novel approach. "
    "Second, we demonstrate improved performance. "
    "Third, we validate through extensive evaluation."
)
FALLBACK_PROBLEM_STATEMENT = "This addresses a critical problem in the field."

SELF_REFERENCES = ("this paper", "we present", "this work")
NEUTRAL_REFERENCES = {
    "this paper": "this research",
    "we present": "this research presents",
    "this work": "the study",
}

ABSTRACT_COMPONENTS: Dict[str, tuple[str, ...]] = {
    "problem": ("problem", "challenge", "issue", "difficulty", "limitation"),
    "approach": ("approach", "method", "technique", "solution", "system"),
    "result": ("result", "evaluation", "performance", "improvement", "achieve"),
}
ABSTRACT_TEMPLATE = (
    "This research addresses a significant challenge in the field. "
    "A novel approach is proposed that combines innovative techniques. "
    "Evaluation demonstrates substantial improvements over existing methods."
)
ABSTRACT_EXPANSION = (
    "The comprehensive evaluation validates the effectiveness of the proposed "
    "approach through rigorous testing and comparison with state-of-the-art methods."
)
ABSTRACT_MIN_WORDS = 100
ABSTRACT_MAX_WORDS = 250

OVERVIEW_TITLE = "Overview"
OVERVIEW_MAX_ENTRIES = 5


def _first_paragraph(text: str) -> str:
    paragraphs = PARAGRAPH_SPLIT_RE.split(text)
    return paragraphs[0] if paragraphs else ""


def _contains_any(text: str, terms: tuple[str, ...]) -> bool:
    lowered = text.lower()
    return any(term in lowered for term in terms)


def extract_topics(text: str) -> List[str]:
    """First few long, non-function words of a passage."""
    words = [re.sub(r"[^\w'-]", "", word) for word in text.lower().split()]
    technical = [w for w in words if len(w) > 5 and w not in TOPIC_STOPWORDS]
    return technical[:TOPIC_WORDS]


class StructureRuleSet:
    """Section-level checks and auto-fixes for introductions, abstracts and overviews."""

    def __init__(self, log: ChangeLog | None = None) -> None:
        self.log = log if log is not None else ChangeLog()

    # Introduction -----------------------------------------------------------

    def validate_introduction(self, text: str) -> ValidationResult:
        mark = len(self.log)
        checks = {
            "problem_in_first_paragraph": _contains_any(
                _first_paragraph(text), PROBLEM_KEYWORDS
            ),
            "has_contributions": "contribution" in text.lower(),
            "avoids_obvious_statements": not any(
                pattern.search(text) for pattern in OBVIOUS_STATEMENT_PATTERNS
            ),
            "identifies_key_idea": _contains_any(text, KEY_IDEA_PHRASES),
            "compares_approaches": _contains_any(text, COMPARISON_TERMS),
        }
        messages = {
            "problem_in_first_paragraph": "Introduction should state the problem in the first paragraph",
            "has_contributions": "Introduction should clearly state the contributions",
            "avoids_obvious_statements": "Remove obvious or well-known statements",
            "identifies_key_idea": "Clearly identify the key idea or silver bullet",
            "compares_approaches": "Compare your approach with alternatives",
        }
        issues = [messages[name] for name, passed in checks.items() if not passed]

        fixed = text
        if not checks["problem_in_first_paragraph"]:
            fixed = self._add_problem_statement(text, fixed)
        if not checks["has_contributions"]:
            fixed = self._add_contributions(text, fixed)
        fixed = self._remove_obvious_statements(text, fixed)

        return ValidationResult(
            valid=all(checks.values()),
            fixed_text=fixed,
            issues=issues,
            changes=self.log.since(mark),
        )

    def _add_problem_statement(self, original: str, text: str) -> str:
        paragraphs = PARAGRAPH_SPLIT_RE.split(text)
        topics = extract_topics(paragraphs[0])
        if topics:
            statement = f"The challenge of {' '.join(topics)} remains unsolved."
        else:
            statement = FALLBACK_PROBLEM_STATEMENT
        paragraphs[0] = f"{statement} {paragraphs[0]}".strip()
        fixed = "\n\n".join(paragraphs)
        self.log.record(
            "Introduction Structure",
            "structure",
            original,
            fixed,
            "Added problem statement to first paragraph",
        )
        return fixed

    def _add_contributions(self, original: str, text: str) -> str:
        paragraphs = PARAGRAPH_SPLIT_RE.split(text)
        paragraphs.insert(1, CONTRIBUTIONS_PARAGRAPH)
        fixed = "\n\n".join(paragraphs)
        self.log.record(
            "Contributions Section",
            "structure",
            original,
            fixed,
            "Added explicit contributions section",
        )
        return fixed

    def _remove_obvious_statements(self, original: str, text: str) -> str:
        fixed = text
        for pattern in BOILERPLATE_SENTENCE_PATTERNS:
            fixed = pattern.sub("", fixed)
        if fixed == text:
            return text
        fixed = "\n\n".join(
            re.sub(r"[ \t]+", " ", paragraph).strip()
            for paragraph in PARAGRAPH_SPLIT_RE.split(fixed)
            if paragraph.strip()
        )
        self.log.record(
            "Remove Obvious Statements",
            "structure",
            original,
            fixed,
            "Removed obvious or well-known statements",
        )
        return fixed

    # Abstract ---------------------------------------------------------------

    def validate_abstract(self, text: str) -> ValidationResult:
        mark = len(self.log)
        word_count = len(split_words(text))
        independent = not _contains_any(text, SELF_REFERENCES)
        self_contained = all(
            _contains_any(text, synonyms) for synonyms in ABSTRACT_COMPONENTS.values()
        )
        correct_length = ABSTRACT_MIN_WORDS <= word_count <= ABSTRACT_MAX_WORDS

        issues: List[str] = []
        if not independent:
            issues.append(
                'Abstract should be self-contained without references to "this paper"'
            )
        if not self_contained:
            issues.append("Abstract must include problem, approach, and results")
        if not correct_length:
            issues.append(
                f"Abstract should be {ABSTRACT_MIN_WORDS}-{ABSTRACT_MAX_WORDS} words "
                f"(currently {word_count} words)"
            )

        fixed = self._restructure_abstract(text, self_contained)
        return ValidationResult(
            valid=independent and self_contained and correct_length,
            fixed_text=fixed,
            issues=issues,
            changes=self.log.since(mark),
        )

    def _restructure_abstract(self, text: str, self_contained: bool) -> str:
        fixed, changed = replace_phrases(text, NEUTRAL_REFERENCES)
        if changed:
            self.log.record(
                "Abstract Independence",
                "structure",
                text,
                fixed,
                "Replaced self-referential phrases with neutral wording",
            )

        if not self_contained:
            fixed = ABSTRACT_TEMPLATE
            self.log.record(
                "Abstract Structure",
                "structure",
                text,
                fixed,
                "Restructured abstract to include all required components",
            )

        words = split_words(fixed)
        if len(words) > ABSTRACT_MAX_WORDS:
            fixed = " ".join(words[:ABSTRACT_MAX_WORDS]).rstrip(".,;:!?") + "."
            self.log.record(
                "Abstract Length",
                "structure",
                text,
                fixed,
                f"Shortened abstract to meet {ABSTRACT_MAX_WORDS}-word limit",
            )
        elif len(words) < ABSTRACT_MIN_WORDS:
            fixed = f"{fixed.rstrip()} {ABSTRACT_EXPANSION}"
            self.log.record(
                "Abstract Expansion",
                "structure",
                text,
                fixed,
                f"Extended abstract toward the {ABSTRACT_MIN_WORDS}-word minimum",
            )
        return fixed

    # Overview ---------------------------------------------------------------

    def insert_overview_section(self, sections: List[Section]) -> List[Section]:
        """Return sections with a generated Overview spliced in when none exists."""
        if any("overview" in section.title.lower() for section in sections):
            return list(sections)

        position = self._overview_position(sections)
        overview = self._generate_overview(sections)
        self.log.record(
            "Overview Section",
            "structure",
            "No overview section",
            "Added overview section",
            "Inserted overview section for better document structure",
        )
        return [*sections[:position], overview, *sections[position:]]

    @staticmethod
    def _overview_position(sections: List[Section]) -> int:
        for index, section in enumerate(sections):
            title = section.title.lower()
            if "introduction" in title or "abstract" in title:
                return index + 1
        return 1

    @staticmethod
    def _generate_overview(sections: List[Section]) -> Section:
        names = [
            section.title
            for section in sections
            if "abstract" not in section.title.lower()
        ][:OVERVIEW_MAX_ENTRIES]
        entries = ". ".join(
            f"Section {index} covers {name.lower()}"
            for index, name in enumerate(names, start=2)
        )
        parts = ["This document is organized as follows."]
        if entries:
            parts.append(f"{entries}.")
        parts.append(
            "The document concludes with a summary of key findings and future directions."
        )
        content = " ".join(parts)
        return Section(title=OVERVIEW_TITLE, content=content, edited=content)
