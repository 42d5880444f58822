from __future__ import annotations

import logging
from dataclasses import replace
from typing import List

from .changes import ChangeLog
from .models import Change, DocumentType, Metrics, ProcessedDocument, Section
from .rules import ClarityRuleSet, StructureRuleSet, StyleRuleSet
from .scoring import (
    LONG_SENTENCE_WORDS,
    average_clause_count,
    clarity_score,
    count_long_sentences,
    count_passive_voice,
    flesch_reading_ease,
)
from .segmentation import (
    CONTENT_TITLE,
    PREAMBLE_TITLE,
    extract_sections,
    split_paragraphs,
    split_sentences,
)
from .textutils import count_words
from .tracking import render_tracking_report

logger = logging.getLogger(__name__)

UNTITLED_SECTIONS = {CONTENT_TITLE, PREAMBLE_TITLE}


class DocumentProcessor:
    """Runs the clarity, style and structure rule engines over a document.

    Every call to ``process`` builds its own ChangeLog and rule-set instances, so
    one processor can serve unrelated documents without sharing edit history.
    """

    def __init__(self, long_sentence_words: int = LONG_SENTENCE_WORDS) -> None:
        self.long_sentence_words = long_sentence_words

    def process(self, text: str, document_type: DocumentType) -> ProcessedDocument:
        log = ChangeLog()
        clarity = ClarityRuleSet(log, long_sentence_words=self.long_sentence_words)
        style = StyleRuleSet(log)
        structure = StructureRuleSet(log)

        if document_type == "full_paper":
            sections = extract_sections(text)
        else:
            sections = [Section(title=CONTENT_TITLE, content=text)]

        for section in sections:
            section.edited = self._edit_section(section.content, clarity, style)
            section.changes = _tag(log.drain(), section.title)

        if document_type == "full_paper":
            sections = self._apply_structure(sections, structure, log)

        edited = assemble_document(sections)
        changes = [change for section in sections for change in section.changes]
        metrics = compute_metrics(text, edited, self.long_sentence_words)
        logger.debug(
            "Processed %s document: %d sections, %d changes",
            document_type,
            len(sections),
            len(changes),
        )
        return ProcessedDocument(
            document_type=document_type,
            original=text,
            edited=edited,
            sections=sections,
            metrics=metrics,
            tracking_report=render_tracking_report(text, edited, changes),
            changes=changes,
            suggestions=generate_suggestions(metrics, changes),
        )

    def _edit_section(
        self, content: str, clarity: ClarityRuleSet, style: StyleRuleSet
    ) -> str:
        paragraphs: List[str] = []
        for paragraph in split_paragraphs(content):
            sentences: List[str] = []
            for sentence in split_sentences(paragraph):
                if count_words(sentence) > self.long_sentence_words:
                    sentence = clarity.split_long_sentences(sentence)
                sentences.append(_process_sentence(sentence, clarity, style))
            paragraphs.append(" ".join(s for s in sentences if s))
        return "\n\n".join(paragraphs)

    @staticmethod
    def _apply_structure(
        sections: List[Section], structure: StructureRuleSet, log: ChangeLog
    ) -> List[Section]:
        updated = structure.insert_overview_section(sections)
        overview_changes = log.drain()
        for section in updated:
            if all(section is not existing for existing in sections):
                section.changes = _tag(overview_changes, section.title)

        for section in updated:
            title = section.title.lower()
            if "introduction" in title:
                result = structure.validate_introduction(section.text)
            elif "abstract" in title:
                result = structure.validate_abstract(section.text)
            else:
                continue
            section.edited = result.fixed_text
            section.changes.extend(_tag(result.changes, section.title))
            log.clear()
        return updated


def _process_sentence(
    sentence: str, clarity: ClarityRuleSet, style: StyleRuleSet
) -> str:
    # Idea separation runs last, on the cleaned sentence.
    if not sentence.strip():
        return sentence
    edited = clarity.fix_passive_voice(sentence)
    edited = clarity.simplify_language(edited)
    edited = style.clean_vocabulary(edited)
    edited = style.fix_tense(edited)
    edited = style.remove_redundancy(edited)
    edited = style.enforce_active_writing(edited)
    edited = style.remove_parentheticals(edited)
    return " ".join(clarity.separate_multiple_ideas(edited))


def _tag(changes: List[Change], title: str) -> List[Change]:
    return [replace(change, section=title) for change in changes]


def assemble_document(sections: List[Section]) -> str:
    """Join edited sections back into one text, restoring Markdown headings."""
    parts: List[str] = []
    for section in sections:
        if section.title in UNTITLED_SECTIONS:
            parts.append(section.text)
        else:
            parts.append(f"# {section.title}\n\n{section.text}")
    return "\n\n".join(parts)


def compute_metrics(
    original: str, edited: str, long_sentence_words: int = LONG_SENTENCE_WORDS
) -> Metrics:
    """Pre-edit counts come from the original text, scores from the edited text."""
    return Metrics(
        clarity=clarity_score(edited),
        word_delta=count_words(edited) - count_words(original),
        readability_gain=flesch_reading_ease(edited) - flesch_reading_ease(original),
        sentence_complexity=average_clause_count(edited),
        passive_voice_count=count_passive_voice(original),
        long_sentence_count=count_long_sentences(original, long_sentence_words),
    )


def generate_suggestions(metrics: Metrics, changes: List[Change]) -> List[str]:
    suggestions: List[str] = []
    if metrics.passive_voice_count > 0:
        suggestions.append(
            f"Found {metrics.passive_voice_count} instances of passive voice that were corrected"
        )
    if metrics.long_sentence_count > 0:
        suggestions.append(
            f"Split {metrics.long_sentence_count} long sentences for better readability"
        )
    if metrics.word_delta < 0:
        suggestions.append(
            f"Reduced word count by {-metrics.word_delta} words for conciseness"
        )
    elif metrics.word_delta > 0:
        suggestions.append(
            f"Added {metrics.word_delta} words to complete required structure"
        )
    if metrics.readability_gain > 0:
        suggestions.append(
            f"Improved readability score by {round(metrics.readability_gain)} points"
        )

    categories: dict[str, int] = {}
    for change in changes:
        categories[change.category] = categories.get(change.category, 0) + 1
    for category, count in categories.items():
        suggestions.append(f"Applied {count} {category} improvements")
    return suggestions


def process_document(
    text: str,
    document_type: DocumentType = "section",
    long_sentence_words: int = LONG_SENTENCE_WORDS,
) -> ProcessedDocument:
    """Run the full rewriting pipeline over a single document."""
    return DocumentProcessor(long_sentence_words).process(text, document_type)
