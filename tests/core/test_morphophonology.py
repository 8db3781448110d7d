# tests\core\test_morphophonology.py
import pytest

from nlg_realiser.core.domain.elements import StringElement, WordElement
from nlg_realiser.core.domain.exceptions import LanguageNotFoundError
from nlg_realiser.core.domain.features import LexicalCategory
from nlg_realiser.core.domain.morphophonology import apply_rules, create_morphophonology


def _tok(text, category=LexicalCategory.ANY, **features):
    word = WordElement(text, category)
    for key, value in features.items():
        word.set_feature(key, value)
    return StringElement(text, origin=word)


def _run(language, *tokens):
    return [t.text for t in apply_rules(create_morphophonology(language), tokens)]


DET = LexicalCategory.DETERMINER
PREP = LexicalCategory.PREPOSITION
PRON = LexicalCategory.PRONOUN
NOUN = LexicalCategory.NOUN


class TestEnglish:
    def test_a_before_vowel(self):
        assert _run("en", _tok("a", DET), _tok("apple", NOUN)) == ["an", "apple"]

    def test_vowel_initial_flag_wins_over_spelling(self):
        assert _run("en", _tok("a", DET), _tok("hour", NOUN, vowel_initial=True)) == ["an", "hour"]
        assert _run("en", _tok("a", DET), _tok("university", NOUN, vowel_initial=False)) == ["a", "university"]

    def test_only_the_article_changes(self):
        assert _run("en", _tok("a", NOUN), _tok("apple", NOUN)) == ["a", "apple"]

    def test_repeated_that(self):
        assert _run("en", _tok("that"), _tok("that"), _tok("John")) == ["that", "John"]


class TestFrench:
    def test_elision(self):
        assert _run("fr", _tok("le", DET), _tok("arbre", NOUN)) == ["l'", "arbre"]

    def test_aspirated_h_blocks_elision(self):
        assert _run("fr", _tok("le", DET), _tok("héros", NOUN, aspired_h=True)) == ["le", "héros"]

    def test_la_elides_only_as_article_or_pronoun(self):
        assert _run("fr", _tok("la", DET), _tok("école", NOUN)) == ["l'", "école"]
        assert _run("fr", _tok("la", NOUN), _tok("est", LexicalCategory.VERB)) == ["la", "est"]

    def test_si_il(self):
        assert _run("fr", _tok("si"), _tok("il", PRON)) == ["s'", "il"]

    @pytest.mark.parametrize(
        "prep, article, expected",
        [("de", "le", "du"), ("de", "les", "des"), ("à", "le", "au"), ("à", "les", "aux")],
    )
    def test_contraction(self, prep, article, expected):
        assert _run("fr", _tok(prep, PREP), _tok(article, DET), _tok("livre", NOUN)) == [expected, "livre"]

    def test_contraction_with_relative_pronoun(self):
        relative = _tok("lequel", PRON, pronoun_type="relative")

        assert _run("fr", _tok("à", PREP), relative) == ["auquel"]

    def test_object_clitic_does_not_contract(self):
        """"de le faire": "le" is a pronoun, not an article."""
        assert _run("fr", _tok("de", PREP), _tok("le", PRON), _tok("faire")) == ["de", "le", "faire"]

    def test_elision_runs_before_contraction(self):
        tokens = _run("fr", _tok("de", PREP), _tok("le", DET), _tok("arbre", NOUN))

        assert tokens == ["de", "l'", "arbre"]

    def test_detached_pronoun_before_en(self):
        """"-moi" becomes "-me" before "-en" and then elides."""
        assert _run("fr", _tok("-moi", PRON), _tok("-en", PRON)) == ["-m'", "-en"]

    def test_duplicates_collapse(self):
        assert _run("fr", _tok("de", PREP), _tok("des", DET), _tok("pommes", NOUN)) == ["des", "pommes"]
        assert _run("fr", _tok("que"), _tok("que"), _tok("Jean", NOUN)) == ["que", "Jean"]


class TestDutch:
    def test_duplicate_complementiser(self):
        comp = LexicalCategory.COMPLEMENTISER

        assert _run("nl", _tok("dat", comp), _tok("dat", comp), _tok("Jan")) == ["dat", "Jan"]

    def test_complementiser_and_pronoun_both_stay(self):
        tokens = _run("nl", _tok("dat", LexicalCategory.COMPLEMENTISER), _tok("dat", PRON))

        assert tokens == ["dat", "dat"]


class TestRegistry:
    def test_unknown_language(self):
        with pytest.raises(LanguageNotFoundError):
            create_morphophonology("xx")
