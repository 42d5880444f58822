from __future__ import annotations

from typing import List, Sequence

from .models import Section, SectionPresence, StructureAnalysis
from .rules import StructureRuleSet
from .rules.structure import ABSTRACT_MAX_WORDS, ABSTRACT_MIN_WORDS
from .segmentation import extract_sections
from .textutils import count_words

DEFAULT_EXPECTED_SECTIONS = (
    "Abstract",
    "Introduction",
    "Overview",
    "Technical Approach",
    "Evaluation",
    "Related Work",
    "Conclusion",
)

ABSTRACT_PLACEHOLDER = (
    "This work addresses a critical challenge in the field. A novel approach is "
    "proposed that combines innovative techniques to solve the identified problem. "
    "The method demonstrates significant improvements over existing solutions "
    "through comprehensive evaluation. Results show substantial gains in "
    "performance metrics, validating the effectiveness of the proposed approach."
)

SECTION_PLACEHOLDERS = {
    "Overview": (
        "This section provides an overview of the document structure and main "
        "components of the proposed approach."
    ),
    "Technical Approach": (
        "The technical details of the proposed method are presented here, "
        "including algorithms and implementation specifics."
    ),
    "Evaluation": (
        "This section presents experimental results and performance comparisons "
        "with baseline methods."
    ),
    "Related Work": (
        "Previous research and existing approaches related to this problem are "
        "discussed here."
    ),
    "Conclusion": (
        "This work presented a novel approach to address the stated problem. "
        "Future work includes extending the method to additional domains."
    ),
}


def _find_section(sections: List[Section], name: str) -> Section | None:
    lowered = name.lower()
    return next((s for s in sections if lowered in s.title.lower()), None)


def _validate(name: str, content: str) -> List[str]:
    rules = StructureRuleSet()
    if name.lower() == "introduction":
        result = rules.validate_introduction(content)
    elif name.lower() == "abstract":
        result = rules.validate_abstract(content)
    else:
        return []
    return [] if result.valid else list(result.issues)


def analyze_structure(
    text: str, expected_sections: Sequence[str] | None = None
) -> StructureAnalysis:
    """Check a document against the expected section list."""
    sections = extract_sections(text)
    expected = list(expected_sections or DEFAULT_EXPECTED_SECTIONS)

    analysis: List[SectionPresence] = []
    for name in expected:
        found = _find_section(sections, name)
        if found is None:
            issues = [f"{name} section is missing"]
        else:
            issues = _validate(name, found.content)
        analysis.append(
            SectionPresence(name=name, present=found is not None, issues=issues)
        )

    fixed_version = None
    if any(not entry.present or entry.issues for entry in analysis):
        fixed_version = build_improved_structure(sections, analysis)

    return StructureAnalysis(
        valid=all(entry.present and not entry.issues for entry in analysis),
        sections=analysis,
        suggestions=structure_suggestions(analysis, sections),
        fixed_version=fixed_version,
    )


def structure_suggestions(
    analysis: List[SectionPresence], sections: List[Section]
) -> List[str]:
    suggestions: List[str] = []

    missing = [entry.name for entry in analysis if not entry.present]
    if missing:
        suggestions.append(f"Add missing sections: {', '.join(missing)}")

    for entry in analysis:
        if entry.present:
            suggestions.extend(f"{entry.name}: {issue}" for issue in entry.issues)

    abstract = _find_section(sections, "abstract")
    if abstract is not None:
        words = count_words(abstract.content)
        if words < ABSTRACT_MIN_WORDS:
            suggestions.append(
                f"Abstract is too short ({words} words). "
                f"Aim for {ABSTRACT_MIN_WORDS}-{ABSTRACT_MAX_WORDS} words."
            )
        elif words > ABSTRACT_MAX_WORDS:
            suggestions.append(
                f"Abstract is too long ({words} words). "
                f"Aim for {ABSTRACT_MIN_WORDS}-{ABSTRACT_MAX_WORDS} words."
            )

    intro = _find_section(sections, "introduction")
    if intro is not None and "contribution" not in intro.content.lower():
        suggestions.append(
            "Introduction should explicitly state the contributions of the work"
        )

    if _find_section(sections, "conclusion") is None:
        suggestions.append(
            "Add a conclusion section to summarize findings and future work"
        )

    if _find_section(sections, "overview") is None and len(sections) > 4:
        suggestions.append(
            "Consider adding an Overview section after Introduction for complex documents"
        )
    return suggestions


def build_improved_structure(
    sections: List[Section], analysis: List[SectionPresence]
) -> str:
    """Rebuild the document with fixed intro/abstract and placeholder sections."""
    parts: List[str] = []
    if _find_section(sections, "abstract") is None:
        parts.append(f"# Abstract\n\n{ABSTRACT_PLACEHOLDER}")

    rules = StructureRuleSet()
    for section in sections:
        title = section.title.lower()
        flagged = any(
            entry.issues and entry.name.lower() in title for entry in analysis
        )
        body = section.content
        if flagged and "introduction" in title:
            body = rules.validate_introduction(section.content).fixed_text
        elif flagged and "abstract" in title:
            body = rules.validate_abstract(section.content).fixed_text
        parts.append(f"# {section.title}\n\n{body}")

    improved = "\n\n".join(parts)
    for entry in analysis:
        if not entry.present and f"# {entry.name}" not in improved:
            placeholder = SECTION_PLACEHOLDERS.get(
                entry.name, f"[{entry.name} content to be added]"
            )
            parts.append(f"# {entry.name}\n\n{placeholder}")
            improved = "\n\n".join(parts)
    return improved.strip()
