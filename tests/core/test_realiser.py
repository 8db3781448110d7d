# tests\core\test_realiser.py
"""
Pipeline-level behaviour shared by every language: stages, copies of the
input tree and the result model.
"""

import pytest

from nlg_realiser.core.domain.elements import ListElement, StringElement
from nlg_realiser.core.domain.exceptions import LanguageNotFoundError
from nlg_realiser.core.domain.features import InterrogativeType, Tense
from nlg_realiser.core.domain.realiser import Realiser


class TestStages:
    def test_syntax_then_morphology(self, en_factory, en_realiser):
        """The two stages can be run one after the other by hand."""
        clause = en_factory.create_clause("John", "dance")

        syntax = en_realiser.realise_syntax(clause)
        morph = en_realiser.realise_morphology(syntax)

        assert isinstance(morph, ListElement)
        texts = [leaf.text for leaf in morph.leaves() if isinstance(leaf, StringElement)]
        assert [t for t in texts if t] == ["John", "dances"]

    def test_realise_returns_flat_tokens(self, fr_factory, fr_realiser):
        clause = fr_factory.create_clause("Jean", "parler")
        clause.add_complement(
            fr_factory.create_preposition_phrase("de", fr_factory.create_noun_phrase("le", "livre"))
        )

        realised = fr_realiser.realise(clause)

        assert [t.text for t in realised.components] == ["Jean", "parle", "du", "livre"]

    def test_empty_input(self, en_realiser):
        assert en_realiser.realise_syntax(None) is None
        assert en_realiser.realise_morphology(None) is None
        assert en_realiser.realise(None) is None

    def test_unknown_language(self, en_lexicon):
        with pytest.raises(LanguageNotFoundError):
            Realiser(en_lexicon, "xx")


class TestInputIsNotConsumed:
    def test_realising_twice_gives_the_same_sentence(self, nl_factory, nl_realiser):
        """Object relocation happens on a copy, so a second run sees the full tree."""
        clause = nl_factory.create_clause("jij", "krijgen", "sleutels")
        clause.subjects[0].set_feature("person", "second")
        clause.set_feature("perfect", True)
        clause.set_feature("interrogative_type", InterrogativeType.WHOSE)

        first = nl_realiser.realise_sentence(clause)
        second = nl_realiser.realise_sentence(clause)

        assert first == second == "Wiens sleutels heb jij gekregen?"
        assert clause.get_object() is not None
        assert clause.verb_phrase.get_feature("perfect") is None

    def test_same_tree_through_two_realisers(self, en_factory, en_lexicon):
        clause = en_factory.create_clause("Mary", "see", "John")
        clause.set_feature("tense", Tense.PAST)

        assert Realiser(en_lexicon).realise_sentence(clause) == "Mary saw John."
        assert Realiser(en_lexicon, "en").realise_sentence(clause) == "Mary saw John."
        assert clause.realisation is None


class TestResultModel:
    def test_statement_result(self, en_factory, en_realiser):
        result = en_realiser.realise_result(en_factory.create_clause("John", "dance"))

        assert result.model_dump() == {
            "language": "en",
            "text": "John dances.",
            "tokens": ["John", "dances"],
            "interrogative": False,
        }

    def test_empty_result(self, en_realiser):
        result = en_realiser.realise_result(None)

        assert result.text == ""
        assert result.tokens == []
