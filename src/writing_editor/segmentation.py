from __future__ import annotations

import re
from typing import List

from .models import Section
from .textutils import SENTENCE_RE, split_words

MARKDOWN_HEADING_RE = re.compile(r"^#+\s+(.+)$")
LABEL_HEADING_RE = re.compile(r"^([A-Z][^:]+):$")
NUMBERED_HEADING_RE = re.compile(r"^(?:\d+(?:\.\d+)*\.?\s+)?([A-Z][^.!?]*?)$")
PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n+")

# Capitalized lines longer than this are treated as prose, not headings.
MAX_HEADING_WORDS = 10
PREAMBLE_TITLE = "Document"
CONTENT_TITLE = "Content"


def match_heading(line: str) -> str | None:
    """Return the heading title if the line looks like a section heading."""
    stripped = line.strip()
    if not stripped:
        return None
    markdown = MARKDOWN_HEADING_RE.match(stripped)
    if markdown:
        return markdown.group(1).strip()
    for pattern in (LABEL_HEADING_RE, NUMBERED_HEADING_RE):
        match = pattern.match(stripped)
        if match:
            title = match.group(1).strip()
            if title and len(split_words(title)) <= MAX_HEADING_WORDS:
                return title
    return None


def extract_sections(text: str) -> List[Section]:
    """Partition a full paper into titled sections using heading heuristics."""
    sections: List[Section] = []
    title = PREAMBLE_TITLE
    content_lines: List[str] = []

    def flush() -> None:
        content = "\n".join(content_lines).strip()
        if content:
            sections.append(Section(title=title, content=content))

    for line in text.split("\n"):
        heading = match_heading(line)
        if heading is None:
            content_lines.append(line)
            continue
        flush()
        title = heading
        content_lines = []
    flush()

    if not sections and text.strip():
        sections.append(Section(title=PREAMBLE_TITLE, content=text.strip()))
    return sections


def split_paragraphs(text: str) -> List[str]:
    return [p.strip() for p in PARAGRAPH_SPLIT_RE.split(text) if p.strip()]


def split_sentences(text: str) -> List[str]:
    """Split on terminal punctuation runs, keeping any unterminated tail."""
    if not text or not text.strip():
        return []
    sentences: List[str] = []
    end = 0
    for match in SENTENCE_RE.finditer(text):
        sentence = match.group(0).strip()
        if sentence:
            sentences.append(sentence)
        end = match.end()
    remainder = text[end:].strip()
    if remainder:
        sentences.append(remainder)
    return sentences
