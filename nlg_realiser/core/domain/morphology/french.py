# nlg_realiser\core\domain\morphology\french.py
"""
morphology/french.py

French inflection.

Verbs are conjugated by group:
- 1st group, "-er" (parler): e, es, e, ons, ez, ent
- 2nd group, "-ir" with "-iss-" (finir): is, is, it, issons, issez, issent
- 3rd group, everything else (partir, vendre); the truly irregular verbs
  (être, avoir, aller, faire, ...) list their cells in the lexicon.

The imperfect is built on the "nous" stem, the future and conditional on
the infinitive (or a lexical future radical), the subjunctive on the
third person plural stem.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple

from ..elements import InflectedWordElement, NLGElement
from ..features import (
    DiscourseFunction,
    Form,
    Gender,
    LexicalFeature,
    NumberAgreement,
    Person,
    Tense,
    cell_key,
)
from .base import (
    apply_first,
    is_plural,
    lexical_form,
    opposite_gender_form,
    personal_pronoun,
    register_rules,
    suffix_rules,
    target_agreement,
)

if TYPE_CHECKING:
    from nlg_realiser.core.ports.lexicon import Lexicon


Endings = Tuple[str, str, str, str, str, str]

PRESENT_ENDINGS = {
    1: ("e", "es", "e", "ons", "ez", "ent"),
    2: ("is", "is", "it", "issons", "issez", "issent"),
    3: ("s", "s", "t", "ons", "ez", "ent"),
}
IMPERFECT_ENDINGS: Endings = ("ais", "ais", "ait", "ions", "iez", "aient")
FUTURE_ENDINGS: Endings = ("ai", "as", "a", "ons", "ez", "ont")
CONDITIONAL_ENDINGS: Endings = IMPERFECT_ENDINGS
SUBJUNCTIVE_ENDINGS: Endings = ("e", "es", "e", "ions", "iez", "ent")

NOUN_PLURAL_RULES = suffix_rules(
    (r"(s|x|z)$", r"\1"),
    (r"(au|eu)$", r"\1x"),
    (r"al$", "aux"),
)

FEMININE_RULES = suffix_rules(
    (r"e$", "e"),
    (r"er$", "ère"),
    (r"eux$", "euse"),
    (r"if$", "ive"),
)

MASCULINE_PLURAL_RULES = suffix_rules(
    (r"(s|x)$", r"\1"),
    (r"al$", "aux"),
    (r"eau$", "eaux"),
)

DEFINITE_ARTICLES = {
    (Gender.FEMININE, NumberAgreement.SINGULAR): "la",
    (Gender.MASCULINE, NumberAgreement.SINGULAR): "le",
}


def _cell(person: Person, number: NumberAgreement) -> int:
    index = {Person.FIRST: 0, Person.SECOND: 1}.get(person, 2)
    return index + (3 if number is NumberAgreement.PLURAL else 0)


def _join(radical: str, ending: str) -> str:
    """Keep the soft g/c of "manger", "commencer" before a/o, drop it before i."""
    if ending[:1] in ("a", "o"):
        if radical.endswith("g"):
            return radical + "e" + ending
        if radical.endswith("c"):
            return radical[:-1] + "ç" + ending
    if ending[:1] == "i":
        if radical.endswith("ge"):
            return radical[:-1] + ending
        if radical.endswith("ç"):
            return radical[:-1] + "c" + ending
    return radical + ending


def feminine(word: str) -> str:
    """"grand" -> "grande", "bon" -> "bonne", "heureux" -> "heureuse"."""
    for suffix in ("on", "en", "el", "il"):
        if word.endswith(suffix):
            return word + word[-1] + "e"
    return apply_first(FEMININE_RULES, word, word + "e")


def add_plural_s(word: str) -> str:
    return word if word.endswith(("s", "x")) else word + "s"


@register_rules("fr")
class FrenchMorphology:
    # ------------------------------------------------------------------
    # Nouns
    # ------------------------------------------------------------------

    def inflect_noun(self, token: InflectedWordElement, lexicon: "Lexicon") -> str:
        base = opposite_gender_form(token, lexicon) or token.base_form
        if is_plural(token) and not token.flag("proper"):
            own = lexical_form(token, LexicalFeature.PLURAL) if base == token.base_form else None
            base = own or apply_first(NOUN_PLURAL_RULES, base, base + "s")
        return base

    # ------------------------------------------------------------------
    # Adjectives, adverbs, determiners
    # ------------------------------------------------------------------

    def agreeing_form(self, token: InflectedWordElement) -> str:
        gender, number = target_agreement(token)
        base = token.base_form
        plural = number is NumberAgreement.PLURAL
        if gender is Gender.FEMININE:
            if plural:
                return lexical_form(token, LexicalFeature.FEMININE_PLURAL) or add_plural_s(
                    lexical_form(token, LexicalFeature.FEMININE_SINGULAR) or feminine(base)
                )
            return lexical_form(token, LexicalFeature.FEMININE_SINGULAR) or feminine(base)
        if plural:
            return lexical_form(token, LexicalFeature.PLURAL) or apply_first(
                MASCULINE_PLURAL_RULES, base, base + "s"
            )
        return base

    def inflect_adjective(self, token: InflectedWordElement, lexicon: "Lexicon") -> str:
        form = self.agreeing_form(token)
        if token.flag("comparative"):
            return lexical_form(token, LexicalFeature.COMPARATIVE) or f"plus {form}"
        if token.flag("superlative"):
            own = lexical_form(token, LexicalFeature.SUPERLATIVE)
            gender, number = target_agreement(token)
            article = "les" if number is NumberAgreement.PLURAL else DEFINITE_ARTICLES.get(
                (gender or Gender.MASCULINE, NumberAgreement.SINGULAR), "le"
            )
            return f"{article} {own or 'plus ' + form}"
        return form

    def inflect_adverb(self, token: InflectedWordElement, lexicon: "Lexicon") -> str:
        if token.flag("comparative"):
            return lexical_form(token, LexicalFeature.COMPARATIVE) or f"plus {token.base_form}"
        if token.flag("superlative"):
            return lexical_form(token, LexicalFeature.SUPERLATIVE) or f"le plus {token.base_form}"
        return token.base_form

    def inflect_determiner(self, token: InflectedWordElement, lexicon: "Lexicon") -> str:
        gender, number = target_agreement(token)
        base = token.base_form
        if number is NumberAgreement.PLURAL:
            if gender is Gender.FEMININE:
                own = lexical_form(token, LexicalFeature.FEMININE_PLURAL)
                if own:
                    return own
            return lexical_form(token, LexicalFeature.PLURAL) or base
        if gender is Gender.FEMININE:
            return lexical_form(token, LexicalFeature.FEMININE_SINGULAR) or base
        return base

    # ------------------------------------------------------------------
    # Pronouns
    # ------------------------------------------------------------------

    def inflect_pronoun(self, token: InflectedWordElement, lexicon: "Lexicon") -> str:
        enclitic = bool(token.features.get_extra("enclitic"))
        clitic: Optional[bool] = token.flag("clitic")
        person = token.get_feature("person", Person.THIRD)
        number = token.get_feature("number", NumberAgreement.SINGULAR)
        if enclitic and person is not Person.THIRD and number is not NumberAgreement.PLURAL:
            # "donne-moi", not "donne-me"
            clitic = False
            token.set_feature("discourse_function", DiscourseFunction.OBJECT)
        form = personal_pronoun(token, lexicon, clitic=clitic, keep_indirect=bool(clitic))
        return "-" + form if enclitic else form

    # ------------------------------------------------------------------
    # Verbs
    # ------------------------------------------------------------------

    @staticmethod
    def verb_group(token: NLGElement) -> int:
        value = lexical_form(token, LexicalFeature.VERB_GROUP)
        if value:
            return int(value)
        base = token.base_form
        if base.endswith("er"):
            return 1
        if base.endswith("ir"):
            return 2
        return 3

    def present(self, token: NLGElement, person: Person, number: NumberAgreement) -> str:
        override = lexical_form(token, cell_key("present", person, number))
        if override:
            return override
        base = token.base_form
        group = self.verb_group(token)
        radical = base[:-2]
        cell = _cell(person, number)
        ending = PRESENT_ENDINGS[group][cell]
        if group == 3:
            if base.endswith("ir") and cell < 3:
                # "partir" -> "par-s", "part-ons"
                radical = radical[:-1]
            if cell == 2 and radical.endswith(("d", "t")):
                ending = ""
        return _join(radical, ending)

    def _nous_stem(self, token: NLGElement) -> str:
        nous = self.present(token, Person.FIRST, NumberAgreement.PLURAL)
        return nous[:-3] if nous.endswith("ons") else nous

    def _synthetic(self, token: NLGElement, prefix: str, radical: str, endings: Endings,
                   person: Person, number: NumberAgreement) -> str:
        return lexical_form(token, cell_key(prefix, person, number)) or _join(radical, endings[_cell(person, number)])

    def future_radical(self, token: NLGElement) -> str:
        own = lexical_form(token, LexicalFeature.FUTURE_RADICAL)
        if own:
            return own
        base = token.base_form
        return base[:-1] if base.endswith("re") else base

    def past_participle(self, token: NLGElement) -> str:
        own = lexical_form(token, LexicalFeature.PAST_PARTICIPLE)
        if own:
            return own
        base = token.base_form
        if self.verb_group(token) == 1:
            return base[:-2] + "é"
        if base.endswith("ir"):
            return base[:-2] + "i"
        return base[:-2] + "u"

    def inflect_verb(self, token: InflectedWordElement, lexicon: "Lexicon") -> str:
        form = token.get_feature("form", Form.NORMAL)
        person = token.get_feature("person", Person.THIRD)
        number = token.get_feature("number", NumberAgreement.SINGULAR)

        if form in (Form.INFINITIVE, Form.BARE_INFINITIVE):
            return token.base_form
        if form is Form.PAST_PARTICIPLE:
            participle = self.past_participle(token)
            if token.get_feature("gender") is Gender.FEMININE:
                participle = lexical_form(token, LexicalFeature.FEMININE_PAST_PARTICIPLE) or (
                    participle if participle.endswith("e") else participle + "e"
                )
            if number is NumberAgreement.PLURAL:
                participle = add_plural_s(participle)
            return participle
        if form in (Form.PRESENT_PARTICIPLE, Form.GERUND):
            return lexical_form(token, LexicalFeature.PRESENT_PARTICIPLE) or _join(self._nous_stem(token), "ant")
        if form is Form.IMPERATIVE:
            own = lexical_form(token, cell_key("imperative", person, number))
            if own:
                return own
            present = self.present(token, person, number)
            if person is Person.SECOND and number is not NumberAgreement.PLURAL and present.endswith("es"):
                return present[:-1]
            return present
        if form is Form.SUBJUNCTIVE:
            radical = lexical_form(token, LexicalFeature.SUBJUNCTIVE_RADICAL)
            if not radical:
                they = self.present(token, Person.THIRD, NumberAgreement.PLURAL)
                radical = they[:-3] if they.endswith("ent") else they
            return self._synthetic(token, "subjunctive", radical, SUBJUNCTIVE_ENDINGS, person, number)

        tense = token.get_feature("tense", Tense.PRESENT)
        if tense is Tense.PAST:
            radical = lexical_form(token, LexicalFeature.IMPERFECT_RADICAL) or self._nous_stem(token)
            return self._synthetic(token, "past", radical, IMPERFECT_ENDINGS, person, number)
        if tense is Tense.FUTURE:
            return self._synthetic(token, "future", self.future_radical(token), FUTURE_ENDINGS, person, number)
        if tense is Tense.CONDITIONAL:
            return self._synthetic(token, "conditional", self.future_radical(token), CONDITIONAL_ENDINGS, person, number)
        return self.present(token, person, number)


__all__ = ["FrenchMorphology", "feminine", "add_plural_s"]
