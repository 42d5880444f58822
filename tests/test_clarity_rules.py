from writing_editor.changes import ChangeLog
from writing_editor.rules import ClarityRuleSet
from writing_editor.rules.clarity import active_verb, count_clauses, past_tense


def test_fix_passive_voice_moves_agent_to_subject():
    """Agent passives are rewritten with the agent leading the sentence."""
    log = ChangeLog()
    rules = ClarityRuleSet(log)
    result = rules.fix_passive_voice("The system was designed by our team.")
    assert result == "Our team designed the system."
    assert [change.rule for change in log] == ["Passive Voice"]
    assert log.drain()[0].category == "clarity"


def test_fix_passive_voice_maps_object_pronouns():
    """Object pronoun agents become subject pronouns."""
    rules = ClarityRuleSet()
    assert rules.fix_passive_voice("The data was collected by us.") == (
        "We collected the data."
    )


def test_fix_passive_voice_drops_impersonal_opener():
    """'It was assumed that' style openers are removed."""
    rules = ClarityRuleSet()
    result = rules.fix_passive_voice("It was assumed that the model converges.")
    assert result == "The model converges."


def test_fix_passive_voice_leaves_active_sentence_untouched():
    """Sentences without a passive pattern produce no change record."""
    log = ChangeLog()
    rules = ClarityRuleSet(log)
    sentence = "The scheduler assigns jobs to machines."
    assert rules.fix_passive_voice(sentence) == sentence
    assert len(log) == 0


def test_verb_helpers_handle_irregular_and_regular_forms():
    """Irregular participles use the lookup table, regular ones strip -ed."""
    assert past_tense("written") == "wrote"
    assert past_tense("designed") == "designed"
    assert active_verb("studied") == "study"
    assert active_verb("shown") == "showed"
    assert active_verb("tested") == "test"


def test_split_long_sentences_splits_on_coordinating_comma():
    """Long sentences split at ', and' into two complete sentences."""
    log = ChangeLog()
    rules = ClarityRuleSet(log)
    sentence = (
        "The proposed method processes every incoming request within a bounded "
        "amount of time, and the evaluation shows that it scales well to very "
        "large clusters of machines."
    )
    result = rules.split_long_sentences(sentence)
    assert result == (
        "The proposed method processes every incoming request within a bounded "
        "amount of time. The evaluation shows that it scales well to very large "
        "clusters of machines."
    )
    assert [change.rule for change in log] == ["Long Sentence"]


def test_split_long_sentences_uses_however_for_but():
    """A ', but' split opens the second sentence with 'However,'."""
    rules = ClarityRuleSet()
    sentence = (
        "The baseline scheduler handles small clusters with very little overhead "
        "in practice, but it struggles badly once the number of machines grows "
        "past several thousand nodes."
    )
    result = rules.split_long_sentences(sentence)
    assert ". However, it struggles badly" in result


def test_split_long_sentences_rejects_short_fragments():
    """No split happens when a candidate half would be under five words."""
    log = ChangeLog()
    rules = ClarityRuleSet(log)
    sentence = (
        "We tested it, and the proposed method processes every incoming request "
        "within a bounded amount of time while the evaluation shows scaling to "
        "very large clusters."
    )
    assert rules.split_long_sentences(sentence) == sentence
    assert len(log) == 0


def test_split_long_sentences_ignores_short_sentences():
    """Sentences at or under the threshold are returned unchanged."""
    rules = ClarityRuleSet()
    sentence = "Short sentences stay, and nothing else happens here at all."
    assert rules.split_long_sentences(sentence) == sentence


def test_separate_multiple_ideas_splits_on_connectors():
    """Sentences with more than two clauses are split on connectors."""
    log = ChangeLog()
    rules = ClarityRuleSet(log)
    sentence = (
        "The cache stores results that are reused when requests repeat and the "
        "index tracks which entries expire."
    )
    assert count_clauses(sentence) > 2
    parts = rules.separate_multiple_ideas(sentence)
    assert parts == [
        "The cache stores results that are reused when requests repeat.",
        "The index tracks which entries expire.",
    ]
    assert [change.rule for change in log] == ["Multiple Ideas"]


def test_separate_multiple_ideas_keeps_simple_sentence():
    """Simple sentences come back as a single-element list."""
    rules = ClarityRuleSet()
    assert rules.separate_multiple_ideas("The model converges.") == [
        "The model converges."
    ]


def test_simplify_language_replaces_elaborate_phrases():
    """Elaborate vocabulary is replaced and recorded as a vocabulary change."""
    log = ChangeLog()
    rules = ClarityRuleSet(log)
    result = rules.simplify_language("We utilize a number of tools in order to test.")
    assert result == "We use several tools to test."
    changes = log.drain()
    assert len(changes) == 1
    assert changes[0].category == "vocabulary"


def test_simplify_language_preserves_leading_capital():
    """A replaced sentence-initial word keeps its capital letter."""
    rules = ClarityRuleSet()
    assert rules.simplify_language("Utilize the cache.") == "Use the cache."
