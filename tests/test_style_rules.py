import pytest

from writing_editor.changes import ChangeLog
from writing_editor.rules import StyleRuleSet


def test_clean_vocabulary_removes_filler_opener():
    """Forbidden openers are removed and the sentence is re-capitalized."""
    log = ChangeLog()
    rules = StyleRuleSet(log)
    result = rules.clean_vocabulary(
        "It should be noted that the results will be evaluated."
    )
    assert result == "The results will be evaluated."
    changes = log.drain()
    assert [change.rule for change in changes] == ["Forbidden Vocabulary"]
    assert changes[0].category == "vocabulary"


def test_clean_vocabulary_repairs_leading_punctuation():
    """Removing a connective leaves no dangling comma."""
    rules = StyleRuleSet()
    assert rules.clean_vocabulary("Thus, the method converges.") == (
        "The method converges."
    )


def test_clean_vocabulary_without_matches_is_noop():
    """Text without forbidden terms is returned byte-for-byte."""
    log = ChangeLog()
    rules = StyleRuleSet(log)
    text = "The  method   converges."
    assert rules.clean_vocabulary(text) == text
    assert len(log) == 0


@pytest.mark.parametrize(
    ("sentence", "expected"),
    [
        ("We will evaluate the model.", "We evaluate the model."),
        ("The model will converge quickly.", "The model converges quickly."),
        ("The results will be evaluated.", "The results are evaluated."),
        ("The jobs will be running overnight.", "The jobs are running overnight."),
        ("The system is going to fail.", "The system fails."),
        ("We shall see.", "We see."),
    ],
)
def test_fix_tense_converts_future_to_present(sentence: str, expected: str):
    """Future constructions are rewritten in the present tense."""
    log = ChangeLog()
    rules = StyleRuleSet(log)
    assert rules.fix_tense(sentence) == expected
    assert [change.category for change in log] == ["style"]


def test_remove_parentheticals_by_length():
    """Parenthetical content is inlined, set off by commas or split out."""
    rules = StyleRuleSet()
    assert rules.remove_parentheticals("The value (n) rises.") == "The value n rises."
    assert rules.remove_parentheticals("The model (see appendix) converges.") == (
        "The model, see appendix, converges."
    )
    assert rules.remove_parentheticals(
        "The method converges (this holds for all tested configurations)."
    ) == "The method converges. This holds for all tested configurations."


def test_remove_parentheticals_strips_footnote_markers():
    """Numeric footnote markers are deleted."""
    log = ChangeLog()
    rules = StyleRuleSet(log)
    assert rules.remove_parentheticals("Prior work [3] agrees.") == "Prior work agrees."
    assert [change.rule for change in log] == ["Parentheticals Removed"]


def test_remove_redundancy_shortens_phrases():
    """Redundant pairs collapse to their essential word."""
    rules = StyleRuleSet()
    assert rules.remove_redundancy("The end result was a very unique design.") == (
        "The result was a unique design."
    )


def test_enforce_active_writing_replaces_weak_verbs():
    """Weak verb constructions become direct verbs."""
    log = ChangeLog()
    rules = StyleRuleSet(log)
    assert rules.enforce_active_writing("The module is able to parse input.") == (
        "The module can parse input."
    )
    assert rules.enforce_active_writing("The cache serves to cut latency.") == (
        "The cache cut latency."
    )
    assert [change.rule for change in log] == ["Active Writing", "Active Writing"]
