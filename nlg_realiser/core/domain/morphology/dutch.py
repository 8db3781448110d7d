# nlg_realiser\core\domain\morphology\dutch.py
"""
morphology/dutch.py

Dutch inflection.

Spelling drives most of the work: an open syllable doubles its vowel in
writing ("geven" -> "geef"), a closed one after a short vowel doubles the
consonant before a vowel-initial ending ("dik" -> "dikke"), and v/z
devoice at the end of a word ("leven" -> "leef", "huizen" -> "huis").

Separable compound verbs ("opbellen") split into preverb and main verb;
the syntax decides where the preverb goes and marks the token accordingly.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, NamedTuple, Optional

from ..elements import InflectedWordElement, NLGElement
from ..features import (
    ExtraFeature,
    Form,
    Gender,
    LexicalCategory,
    LexicalFeature,
    NumberAgreement,
    Person,
    Tense,
    cell_key,
)
from .base import (
    apply_first,
    governing_noun_phrase,
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


# ---------------------------------------------------------------------------
# Separable compound verbs
# ---------------------------------------------------------------------------

PREVERB_PREFIXES = ("bij", "in", "na", "uit", "op", "af", "mee", "tegen", "tussen", "terug", "toe")


class SeparableVerb(NamedTuple):
    preverb: Optional[str]
    main_verb: str


def separable_compound(token: Optional[NLGElement], base_form: Optional[str] = None) -> SeparableVerb:
    """
    Split a verb into (preverb, main verb).

    Sources, first hit wins: the token's preverb feature, the lexical
    preverb, the parent phrase's preverb, a "|" in the base form
    ("op|bellen"), and finally the known prefixes when the remainder is
    long enough to be a verb. Verbs with a lexical past participle are
    never split on prefix alone.
    """
    base = base_form or getattr(token, "base_form", "") or ""
    preverb: Optional[str] = None
    if token is not None:
        preverb = token.features.get_extra(ExtraFeature.PREVERB) or token.features.get_extra(LexicalFeature.PREVERB)
        parent = token.parent
        if not preverb and parent is not None:
            preverb = parent.features.get_extra(ExtraFeature.PREVERB)
    if not preverb and "|" in base:
        preverb = base.split("|", 1)[0]
    has_participle = token is not None and token.features.get_extra(LexicalFeature.PAST_PARTICIPLE)
    if not preverb and not has_participle:
        for prefix in PREVERB_PREFIXES:
            if base.startswith(prefix) and len(base) - len(prefix) > 3:
                preverb = prefix

    plain = base.replace("|", "")
    if not preverb:
        return SeparableVerb(None, plain)
    preverb = str(preverb)
    main = plain[len(preverb):] if plain.startswith(preverb) else plain
    return SeparableVerb(preverb, main)


# ---------------------------------------------------------------------------
# Spelling helpers
# ---------------------------------------------------------------------------

_VOWELS = "aeiouy"
_DOUBLED_VOWEL_RE = re.compile(r"(^|[^aeiou])(aa|ee|oo|uu)([^aeiouyjw])$")
_SHORT_VOWEL_RE = re.compile(r"(^|[^aeiou])([aeiou])([^aeiouyjw])$")
_OPEN_SYLLABLE_RE = re.compile(r"(^|[^aeiou])([aeou])([^aeiouyjw])$")
# unstressed final syllables never double their consonant
_UNSTRESSED_RE = re.compile(r"(ig|el|er|en|em|lijk|isch|ing)$")
_KOFSCHIP = ("t", "k", "f", "s", "ch", "p", "x", "c")
_UNSTRESSED_PREFIXES = ("be", "ge", "her", "ont", "ver", "er")


def vowel_suffix_stem(word: str) -> str:
    """
    The stem a vowel-initial ending ("-en", "-e", "-er") attaches to.

    "boom" -> "bom", "dik" -> "dikk", "lief" -> "liev", "huis" -> "huiz".
    """
    if _UNSTRESSED_RE.search(word):
        return word
    if _DOUBLED_VOWEL_RE.search(word):
        stem = word[:-2] + word[-1]
    elif _SHORT_VOWEL_RE.search(word):
        return word + word[-1]
    else:
        stem = word
    if len(stem) > 1 and stem[-2] in _VOWELS:
        if stem.endswith("f"):
            stem = stem[:-1] + "v"
        elif stem.endswith("s"):
            stem = stem[:-1] + "z"
    return stem


def verb_radical(infinitive: str, *, devoice: bool = True) -> str:
    """
    The present-tense stem: "hebben" -> "heb", "geven" -> "geef",
    "presenteren" -> "presenteer". With `devoice` off the final v/z stays,
    which the past-tense ending choice needs.
    """
    if infinitive.endswith("en"):
        stem = infinitive[:-2]
    elif infinitive.endswith("n"):
        stem = infinitive[:-1]
    else:
        stem = infinitive
    if len(stem) >= 2 and stem[-1] == stem[-2] and stem[-1] not in _VOWELS:
        stem = stem[:-1]
    elif _OPEN_SYLLABLE_RE.search(stem):
        stem = stem[:-1] + stem[-2] + stem[-1]
    if devoice:
        if stem.endswith("v"):
            stem = stem[:-1] + "f"
        elif stem.endswith("z"):
            stem = stem[:-1] + "s"
    return stem


def weak_past_suffix(infinitive: str) -> str:
    """'t kofschip: voiceless stem endings take "te", the rest "de"."""
    underlying = verb_radical(infinitive, devoice=False)
    return "te" if underlying.endswith(_KOFSCHIP) else "de"


def _has_unstressed_prefix(infinitive: str) -> bool:
    for prefix in _UNSTRESSED_PREFIXES:
        rest = infinitive[len(prefix):]
        if infinitive.startswith(prefix) and len(rest) > 3 and rest[0] != rest[1]:
            return True
    return False


def weak_participle(infinitive: str) -> str:
    stem = verb_radical(infinitive)
    prefix = "" if _has_unstressed_prefix(infinitive) else "ge"
    if stem.endswith(("t", "d")):
        return prefix + stem
    return prefix + stem + weak_past_suffix(infinitive)[0]


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

NOUN_PLURAL_RULES = suffix_rules(
    (r"heid$", "heden"),
    (r"^(.)$", r"\1's"),
    (r"(ee|ie)$", r"\1ën"),
    (r"eau$", "eaus"),
    (r"([aiouy])$", r"\1's"),
    (r"(el|em|en|aar|aard|erd|je|ster|stel|sel|te|age|ette|eur|ier|trice|ine|oir|e)$", r"\1s"),
    (r"([^o]er)$", r"\1s"),
)

INDEFINITE_ARTICLE = "een"
DEFINITE_COMMON = "de"


def _attributive(token: InflectedWordElement) -> bool:
    return not token.flag("predicative") and governing_noun_phrase(token) is not None


def _definite(np: Optional[NLGElement]) -> bool:
    spec = getattr(np, "specifier", None)
    if spec is None:
        return False
    base = getattr(spec, "base_form", "")
    return base != INDEFINITE_ARTICLE


@register_rules("nl")
class DutchMorphology:
    """Dutch rule set; see the module docstring."""

    # ------------------------------------------------------------------
    # Nouns
    # ------------------------------------------------------------------

    def inflect_noun(self, token: InflectedWordElement, lexicon: "Lexicon") -> str:
        base = opposite_gender_form(token, lexicon)
        if base is None:
            base = token.base_form
            if is_plural(token) and not token.flag("proper"):
                base = lexical_form(token, LexicalFeature.PLURAL) or self.plural(base)
        elif is_plural(token):
            base = self.plural(base)
        if token.flag("possessive"):
            base += "'" if base.endswith("s") else "s"
        return base

    @staticmethod
    def plural(word: str) -> str:
        return apply_first(NOUN_PLURAL_RULES, word, vowel_suffix_stem(word) + "en")

    # ------------------------------------------------------------------
    # Adjectives and adverbs
    # ------------------------------------------------------------------

    def inflect_adjective(self, token: InflectedWordElement, lexicon: "Lexicon") -> str:
        base = token.base_form
        if token.flag("comparative"):
            base = lexical_form(token, LexicalFeature.COMPARATIVE) or self.comparative(base)
        elif token.flag("superlative"):
            base = lexical_form(token, LexicalFeature.SUPERLATIVE) or self.superlative(base)

        if not _attributive(token) or base.startswith("meest "):
            return base
        np = governing_noun_phrase(token)
        gender, number = target_agreement(token)
        neuter_indefinite = (
            gender is Gender.NEUTER and number is not NumberAgreement.PLURAL and not _definite(np)
        )
        if neuter_indefinite or base.endswith(("e", "en")):
            return base
        inflected = lexical_form(token, "inflected") if base == token.base_form else None
        return inflected or vowel_suffix_stem(base) + "e"

    @staticmethod
    def comparative(word: str) -> str:
        if word.endswith("r"):
            return word + "der"
        if word.endswith("e"):
            return word + "r"
        return vowel_suffix_stem(word) + "er"

    @staticmethod
    def superlative(word: str) -> str:
        if word.endswith(("isch", "st", "sd")):
            return "meest " + word
        if word.endswith("s"):
            return word + "t"
        return word + "st"

    def inflect_adverb(self, token: InflectedWordElement, lexicon: "Lexicon") -> str:
        if token.flag("comparative"):
            return lexical_form(token, LexicalFeature.COMPARATIVE) or self.comparative(token.base_form)
        if token.flag("superlative"):
            return lexical_form(token, LexicalFeature.SUPERLATIVE) or self.superlative(token.base_form)
        return token.base_form

    # ------------------------------------------------------------------
    # Determiners and pronouns
    # ------------------------------------------------------------------

    def inflect_determiner(self, token: InflectedWordElement, lexicon: "Lexicon") -> str:
        base = token.base_form
        gender, number = target_agreement(token)
        if number is NumberAgreement.PLURAL:
            if base == INDEFINITE_ARTICLE:
                return ""
            return lexical_form(token, LexicalFeature.PLURAL) or base
        if gender is Gender.NEUTER:
            if base == DEFINITE_COMMON:
                return "het"
            return lexical_form(token, "neuter_singular") or base
        return base

    def inflect_pronoun(self, token: InflectedWordElement, lexicon: "Lexicon") -> str:
        return personal_pronoun(token, lexicon)

    # ------------------------------------------------------------------
    # Verbs
    # ------------------------------------------------------------------

    def inflect_verb(self, token: InflectedWordElement, lexicon: "Lexicon") -> str:
        compound = separable_compound(token)
        source: NLGElement = token
        prefix = ""
        if compound.preverb:
            if lexicon.has_word(compound.main_verb, LexicalCategory.VERB):
                source = lexicon.lookup_word(compound.main_verb, LexicalCategory.VERB)
            if not token.features.get_extra(ExtraFeature.PREVERB_REALISED):
                prefix = compound.preverb
        infinitive = compound.main_verb

        form = token.get_feature("form", Form.NORMAL)
        if form in (Form.INFINITIVE, Form.BARE_INFINITIVE):
            return prefix + infinitive
        if form is Form.PAST_PARTICIPLE:
            own = lexical_form(token, LexicalFeature.PAST_PARTICIPLE)
            if own:
                return own
            return prefix + (lexical_form(source, LexicalFeature.PAST_PARTICIPLE) or weak_participle(infinitive))
        if form in (Form.PRESENT_PARTICIPLE, Form.GERUND):
            return prefix + (lexical_form(source, LexicalFeature.PRESENT_PARTICIPLE) or infinitive + "d")
        if form is Form.IMPERATIVE:
            return prefix + self._present(source, infinitive, Person.FIRST, NumberAgreement.SINGULAR)

        person = token.get_feature("person", Person.THIRD)
        number = token.get_feature("number", NumberAgreement.SINGULAR)
        # "loop jij", not "loopt jij"
        if (
            token.features.get_extra(ExtraFeature.INVERTED)
            and person is Person.SECOND
            and number is not NumberAgreement.PLURAL
        ):
            person = Person.FIRST
        if token.get_feature("tense") is Tense.PAST:
            return prefix + self._past(source, infinitive, person, number)
        return prefix + self._present(source, infinitive, person, number)

    @staticmethod
    def _present(source: NLGElement, infinitive: str, person: Person, number: NumberAgreement) -> str:
        override = lexical_form(source, cell_key("present", person, number))
        if override:
            return override
        if number is NumberAgreement.PLURAL:
            return infinitive
        stem = verb_radical(infinitive)
        if person is Person.FIRST or stem.endswith("t"):
            return stem
        return stem + "t"

    @staticmethod
    def _past(source: NLGElement, infinitive: str, person: Person, number: NumberAgreement) -> str:
        override = lexical_form(source, cell_key("past", person, number))
        if override:
            return override
        plural = number is NumberAgreement.PLURAL
        strong = lexical_form(source, LexicalFeature.PAST)
        if strong:
            return vowel_suffix_stem(strong) + "en" if plural else strong
        weak = verb_radical(infinitive) + weak_past_suffix(infinitive)
        return weak + "n" if plural else weak


__all__ = [
    "DutchMorphology",
    "SeparableVerb",
    "separable_compound",
    "PREVERB_PREFIXES",
    "vowel_suffix_stem",
    "verb_radical",
    "weak_past_suffix",
    "weak_participle",
]
