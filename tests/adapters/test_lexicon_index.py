# tests\adapters\test_lexicon_index.py
import pytest

from nlg_realiser.adapters.persistence.lexicon import (
    LexemeNotFound,
    LexicalEntry,
    LexiconData,
    LexiconIndex,
    LexiconMeta,
)
from nlg_realiser.core.domain.features import (
    Gender,
    LexicalCategory,
    NumberAgreement,
    Person,
    Tense,
)


@pytest.fixture
def index():
    entries = [
        LexicalEntry("sleutel", "noun", {"gender": "common"}, {"sleutels": "plural"}),
        LexicalEntry("denken", "verb", {"past": "dacht"}, {"denk": "present1s"}),
        LexicalEntry("zij", "pronoun", {"pronoun_type": "personal", "person": "third", "number": "singular",
                                        "gender": "feminine", "discourse_function": "subject"}),
        LexicalEntry("haar", "pronoun", {"pronoun_type": "personal", "person": "third", "number": "singular",
                                         "gender": "feminine", "discourse_function": "object"}),
        LexicalEntry("zij", "pronoun", {"pronoun_type": "personal", "person": "third", "number": "plural",
                                        "discourse_function": "subject"}),
        LexicalEntry("zich", "pronoun", {"pronoun_type": "reflexive", "person": "third", "reflexive": True}),
        LexicalEntry("Jan", "noun", {"proper": True}),
        LexicalEntry("jan", "adjective"),
    ]
    return LexiconIndex(LexiconData(LexiconMeta("nl"), entries))


class TestBaseLookup:
    def test_lookup_is_case_insensitive(self, index):
        word = index.lookup_word("SLEUTEL")

        assert word.base_form == "sleutel"
        assert word.category is LexicalCategory.NOUN
        assert word.get_feature("gender") is Gender.COMMON

    def test_first_entry_wins(self, index):
        """With no category, the first entry of a base form is returned."""
        assert index.lookup_word("jan").category is LexicalCategory.NOUN
        assert index.lookup_word("jan", LexicalCategory.ADJECTIVE).category is LexicalCategory.ADJECTIVE

    def test_unknown_word_gets_a_bare_entry(self, index):
        word = index.lookup_word("fiets", LexicalCategory.NOUN)

        assert word.base_form == "fiets"
        assert list(word.features.items()) == []

    def test_lookups_hand_out_copies(self, index):
        """Features set on a returned word never leak back into the index."""
        index.lookup_word("sleutel").set_feature("number", "plural")

        assert index.lookup_word("sleutel").get_feature("number") is None

    def test_get_word_raises_for_missing_lexeme(self, index):
        with pytest.raises(LexemeNotFound) as exc:
            index.get_word("zullen", LexicalCategory.VERB)

        assert exc.value.key == "zullen"
        assert exc.value.category == "verb"

    def test_has_word_respects_category(self, index):
        assert index.has_word("denken", LexicalCategory.VERB)
        assert not index.has_word("denken", LexicalCategory.NOUN)


class TestVariants:
    def test_variant_resolves_to_base_entry(self, index):
        word = index.lookup_word("sleutels")

        assert word.base_form == "sleutel"
        assert word.features.get_extra("plural") == "sleutels"

    def test_variant_features(self, index):
        """A variant key implies the grammatical features of its cell."""
        assert index.variant_features("sleutels") == {"number": NumberAgreement.PLURAL}
        assert index.variant_features("denk", LexicalCategory.VERB) == {
            "tense": Tense.PRESENT,
            "person": Person.FIRST,
            "number": NumberAgreement.SINGULAR,
        }

    def test_base_form_has_no_variant_features(self, index):
        assert index.variant_features("sleutel") == {}

    def test_lookup_variant_misses(self, index):
        assert index.lookup_variant("sleutels", LexicalCategory.VERB) is None


class TestLookupByFeatures:
    def test_most_explicit_match_wins(self, index):
        word = index.lookup_by_features(
            LexicalCategory.PRONOUN,
            {"pronoun_type": "personal", "person": Person.THIRD, "number": NumberAgreement.SINGULAR,
             "gender": Gender.FEMININE, "discourse_function": "object"},
        )

        assert word.base_form == "haar"

    def test_explicit_mismatch_rejects(self, index):
        """The plural "zij" is the only entry not contradicting a plural subject."""
        word = index.lookup_by_features(
            LexicalCategory.PRONOUN,
            {"pronoun_type": "personal", "number": "plural", "discourse_function": "subject"},
        )

        assert word.get_feature("number") is NumberAgreement.PLURAL

    def test_boolean_constraint(self, index):
        word = index.lookup_by_features(LexicalCategory.PRONOUN, {"reflexive": True})

        assert word.base_form == "zich"

    def test_ties_go_to_first_entry(self, index):
        word = index.lookup_by_features(LexicalCategory.PRONOUN, {"person": "third"})

        assert word.base_form == "zij"
        assert word.get_feature("gender") is Gender.FEMININE

    def test_none_constraints_are_ignored(self, index):
        word = index.lookup_by_features(LexicalCategory.NOUN, {"gender": None, "proper": True})

        assert word.base_form == "Jan"

    def test_empty_category(self, index):
        assert index.lookup_by_features(LexicalCategory.MODAL, {}) is None


class TestListing:
    def test_words_by_category(self, index):
        assert [w.base_form for w in index.words(LexicalCategory.NOUN)] == ["sleutel", "Jan"]

    def test_len_counts_entries(self, index):
        assert len(index) == 8
