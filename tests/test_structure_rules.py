from writing_editor.changes import ChangeLog
from writing_editor.models import Section
from writing_editor.rules import StructureRuleSet
from writing_editor.rules.structure import (
    ABSTRACT_EXPANSION,
    ABSTRACT_TEMPLATE,
    CONTRIBUTIONS_PARAGRAPH,
)
from writing_editor.textutils import count_words
from tests.utils import VALID_INTRODUCTION, make_abstract


def test_validate_introduction_accepts_complete_intro():
    """An introduction passing every check is returned untouched."""
    result = StructureRuleSet().validate_introduction(VALID_INTRODUCTION)
    assert result.valid
    assert result.issues == []
    assert result.fixed_text == VALID_INTRODUCTION
    assert result.changes == []


def test_validate_introduction_fixes_missing_parts():
    """Problem statement and contributions are added, boilerplate removed."""
    text = "In today's world, computers run many jobs. Scheduling matters for operators."
    result = StructureRuleSet().validate_introduction(text)
    assert not result.valid
    assert len(result.issues) == 5
    assert [change.rule for change in result.changes] == [
        "Introduction Structure",
        "Contributions Section",
        "Remove Obvious Statements",
    ]
    assert all(change.before == text for change in result.changes)
    assert result.fixed_text.startswith("The challenge of ")
    assert "In today's world" not in result.fixed_text
    assert CONTRIBUTIONS_PARAGRAPH in result.fixed_text


def test_validate_introduction_changes_are_scoped_to_call():
    """Results only report changes recorded during that validation."""
    log = ChangeLog()
    rules = StructureRuleSet(log)
    rules.validate_introduction("Plain text without any structure.")
    second = rules.validate_introduction(VALID_INTRODUCTION)
    assert second.changes == []
    assert len(log) > 0


def test_validate_abstract_truncates_long_abstract():
    """A 300-word abstract is cut to exactly 250 words plus a period."""
    sentence = (
        "The problem of scheduling is addressed with a new approach "
        "and the result is strong."
    )
    text = " ".join([sentence] * 20)
    assert count_words(text) == 300
    result = StructureRuleSet().validate_abstract(text)
    assert not result.valid
    assert count_words(result.fixed_text) == 250
    assert result.fixed_text.endswith("approach.")
    assert [change.rule for change in result.changes] == ["Abstract Length"]


def test_validate_abstract_expands_short_abstract():
    """A 50-word self-contained abstract gains exactly one expansion sentence."""
    text = make_abstract(5)
    assert count_words(text) == 50
    result = StructureRuleSet().validate_abstract(text)
    assert "Abstract must include problem, approach, and results" not in result.issues
    assert result.fixed_text == f"{text} {ABSTRACT_EXPANSION}"
    assert count_words(result.fixed_text) == 50 + count_words(ABSTRACT_EXPANSION)
    assert count_words(result.fixed_text) == 68
    assert [change.rule for change in result.changes] == ["Abstract Expansion"]


def test_validate_abstract_accepts_hundred_word_abstract():
    """A 100-word abstract with every component validates cleanly."""
    text = make_abstract(10)
    result = StructureRuleSet().validate_abstract(text)
    assert result.valid
    assert result.issues == []
    assert result.fixed_text == text
    assert result.changes == []


def test_validate_abstract_neutralizes_self_references():
    """'This paper' style phrasing is replaced with neutral wording."""
    text = "This paper studies a scheduling problem with a new method and strong results."
    result = StructureRuleSet().validate_abstract(text)
    assert any("self-contained" in issue for issue in result.issues)
    assert result.fixed_text.startswith("This research studies")
    assert "this paper" not in result.fixed_text.lower()
    assert "Abstract Independence" in [change.rule for change in result.changes]


def test_validate_abstract_replaces_incomplete_abstract_with_template():
    """Abstracts missing a component are replaced by the fixed template."""
    result = StructureRuleSet().validate_abstract("Scheduling is interesting.")
    assert result.fixed_text.startswith(ABSTRACT_TEMPLATE)
    assert [change.rule for change in result.changes] == [
        "Abstract Structure",
        "Abstract Expansion",
    ]


def test_insert_overview_section_after_introduction():
    """The overview follows the first abstract or introduction section."""
    log = ChangeLog()
    rules = StructureRuleSet(log)
    sections = [
        Section("Abstract", "Summary."),
        Section("Introduction", "Intro."),
        Section("Method", "Details."),
    ]
    updated = rules.insert_overview_section(sections)
    assert [section.title for section in updated] == [
        "Abstract",
        "Overview",
        "Introduction",
        "Method",
    ]
    overview = updated[1]
    assert "Section 2 covers introduction. Section 3 covers method." in overview.text
    assert len(sections) == 3
    assert [change.rule for change in log] == ["Overview Section"]


def test_insert_overview_section_is_idempotent():
    """A second insertion on a list with an Overview adds nothing."""
    log = ChangeLog()
    rules = StructureRuleSet(log)
    once = rules.insert_overview_section([Section("Introduction", "Intro.")])
    twice = rules.insert_overview_section(once)
    assert [section.title for section in twice] == ["Introduction", "Overview"]
    assert len(log) == 1
