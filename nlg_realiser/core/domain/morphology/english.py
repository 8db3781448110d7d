# nlg_realiser\core\domain\morphology\english.py
"""
morphology/english.py

English inflection: regular suffix rules with lexical overrides for the
irregular words ("children", "went", "better").
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ..elements import InflectedWordElement
from ..features import Form, LexicalCategory, LexicalFeature, NumberAgreement, Person, Tense
from .base import (
    apply_first,
    cell_override,
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


NOUN_PLURAL_RULES = suffix_rules(
    (r"(s|x|z|ch|sh)$", r"\1es"),
    (r"([^aeiou])y$", r"\1ies"),
)

THIRD_SINGULAR_RULES = suffix_rules(
    (r"(s|x|z|ch|sh|o)$", r"\1es"),
    (r"([^aeiou])y$", r"\1ies"),
)

PAST_RULES = suffix_rules(
    (r"e$", "ed"),
    (r"([^aeiou])y$", r"\1ied"),
)

ING_RULES = suffix_rules(
    (r"ie$", "ying"),
    (r"([^eoy])e$", r"\1ing"),
)

GRADE_RULES = suffix_rules(
    (r"e$", "e{r}"),
    (r"([^aeiou])y$", r"\1i{r}"),
)

_VOWEL_GROUP_RE = re.compile(r"[aeiouy]+", re.IGNORECASE)


def _syllables(word: str) -> int:
    count = len(_VOWEL_GROUP_RE.findall(word))
    if word.endswith("e") and count > 1:
        count -= 1
    return max(count, 1)


def _double(token: InflectedWordElement, word: str) -> str:
    """Doubles the final consonant for words flagged regular_double ("stop" -> "stopp")."""
    if token.flag(LexicalFeature.REGULAR_DOUBLE):
        return word + word[-1]
    return word


@register_rules("en")
class EnglishMorphology:
    def inflect_noun(self, token: InflectedWordElement, lexicon: "Lexicon") -> str:
        base = opposite_gender_form(token, lexicon) or token.base_form
        if is_plural(token) and not token.flag("proper"):
            own = lexical_form(token, LexicalFeature.PLURAL) if base == token.base_form else None
            base = own or apply_first(NOUN_PLURAL_RULES, base, base + "s")
        if token.flag("possessive"):
            base += "'" if base.endswith("s") else "'s"
        return base

    # ------------------------------------------------------------------
    # Verbs
    # ------------------------------------------------------------------

    def inflect_verb(self, token: InflectedWordElement, lexicon: "Lexicon") -> str:
        base = token.base_form
        if token.category is LexicalCategory.MODAL:
            if token.get_feature("tense") is Tense.PAST:
                return lexical_form(token, LexicalFeature.PAST) or base
            return base

        form = token.get_feature("form", Form.NORMAL)
        if form in (Form.INFINITIVE, Form.BARE_INFINITIVE, Form.IMPERATIVE):
            return base
        if form in (Form.PRESENT_PARTICIPLE, Form.GERUND):
            return lexical_form(token, LexicalFeature.PRESENT_PARTICIPLE) or self.ing(token)
        if form is Form.PAST_PARTICIPLE:
            return (
                lexical_form(token, LexicalFeature.PAST_PARTICIPLE)
                or lexical_form(token, LexicalFeature.PAST)
                or self.ed(token)
            )

        if token.get_feature("tense") is Tense.PAST:
            return cell_override(token, "past") or lexical_form(token, LexicalFeature.PAST) or self.ed(token)
        override = cell_override(token, "present")
        if override:
            return override
        third_singular = (
            token.get_feature("person", Person.THIRD) is Person.THIRD
            and token.get_feature("number", NumberAgreement.SINGULAR) is not NumberAgreement.PLURAL
        )
        if third_singular:
            return apply_first(THIRD_SINGULAR_RULES, base, base + "s")
        return base

    def ed(self, token: InflectedWordElement) -> str:
        base = token.base_form
        return apply_first(PAST_RULES, base, _double(token, base) + "ed")

    def ing(self, token: InflectedWordElement) -> str:
        base = token.base_form
        return apply_first(ING_RULES, base, _double(token, base) + "ing")

    # ------------------------------------------------------------------
    # Adjectives, adverbs
    # ------------------------------------------------------------------

    def _grade(self, token: InflectedWordElement, ending: str, periphrastic: str) -> str:
        base = token.base_form
        if _syllables(base) > 2 or (_syllables(base) == 2 and not base.endswith("y")):
            return f"{periphrastic} {base}"
        for pattern, replacement in GRADE_RULES:
            if pattern.search(base):
                return pattern.sub(replacement.replace("{r}", ending), base, count=1)
        return _double(token, base) + ending

    def inflect_adjective(self, token: InflectedWordElement, lexicon: "Lexicon") -> str:
        if token.flag("comparative"):
            return lexical_form(token, LexicalFeature.COMPARATIVE) or self._grade(token, "er", "more")
        if token.flag("superlative"):
            return lexical_form(token, LexicalFeature.SUPERLATIVE) or self._grade(token, "est", "most")
        return token.base_form

    def inflect_adverb(self, token: InflectedWordElement, lexicon: "Lexicon") -> str:
        if token.flag("comparative"):
            return lexical_form(token, LexicalFeature.COMPARATIVE) or f"more {token.base_form}"
        if token.flag("superlative"):
            return lexical_form(token, LexicalFeature.SUPERLATIVE) or f"most {token.base_form}"
        return token.base_form

    # ------------------------------------------------------------------
    # Determiners, pronouns
    # ------------------------------------------------------------------

    def inflect_determiner(self, token: InflectedWordElement, lexicon: "Lexicon") -> str:
        _, number = target_agreement(token)
        if number is NumberAgreement.PLURAL:
            if token.base_form in ("a", "an"):
                return ""
            return lexical_form(token, LexicalFeature.PLURAL) or token.base_form
        return token.base_form

    def inflect_pronoun(self, token: InflectedWordElement, lexicon: "Lexicon") -> str:
        return personal_pronoun(token, lexicon)


__all__ = ["EnglishMorphology"]
