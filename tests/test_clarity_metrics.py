from writing_editor.clarity_metrics import check_clarity_metrics


def test_many_passives_are_high_severity():
    """Six or more passive constructions grade as high severity."""
    text = (
        "The data was collected. The model was trained. The code was reviewed. "
        "The test was passed. The plan was approved. The result was verified."
    )
    report = check_clarity_metrics(text)
    passive = next(issue for issue in report.issues if issue.category == "Passive Voice")
    assert passive.count == 6
    assert passive.severity == "high"
    assert passive.examples == ["was collected", "was trained", "was reviewed"]
    assert report.statistics.passive_voice_percentage == 100
    assert any("passive voice" in rec for rec in report.recommendations)


def test_clean_text_scores_full_marks():
    """Short plain sentences produce no issues and no recommendations."""
    report = check_clarity_metrics("The cat sat on the mat.")
    assert report.issues == []
    assert report.score == 100
    assert report.recommendations == []
    assert report.statistics.average_sentence_length == 6.0
    assert report.statistics.readability_score == 100


def test_jargon_and_redundancy_are_reported():
    """Jargon terms and redundant phrases are listed as examples."""
    report = check_clarity_metrics(
        "We leverage a robust framework. The end result is a very unique design."
    )
    by_category = {issue.category: issue for issue in report.issues}
    assert by_category["Academic Jargon"].examples == [
        "framework",
        "leverage",
        "robust",
    ]
    assert by_category["Academic Jargon"].severity == "low"
    assert by_category["Redundant Phrases"].examples == ["end result", "very unique"]
    assert report.score < 100


def test_empty_text_is_safe():
    """Empty input yields zeroed statistics and a clamped score."""
    report = check_clarity_metrics("")
    assert report.issues == []
    assert report.statistics.average_sentence_length == 0.0
    assert 0 <= report.score <= 100
