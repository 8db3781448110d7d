# nlg_realiser\core\domain\morphology\base.py
"""
morphology/base.py

Shared abstractions and utilities for the per-language morphology rules.

This module defines:
- The `MorphologyRules` capability interface (one implementation per
  language, no inheritance between languages).
- `inflect()`, the dispatch by lexical category every language shares.
- Free helpers the rule sets call: ordered suffix tables, per-cell
  conjugation overrides, agreement lookup and personal-pronoun selection.
- A simple registry so rule sets can be created by language code.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Protocol, Sequence, Tuple, Type

from ..elements import (
    InflectedWordElement,
    NLGElement,
    NounPhraseSpec,
    StringElement,
    VerbPhraseSpec,
    WordElement,
)
from ..exceptions import LanguageNotFoundError
from ..features import (
    DiscourseFunction,
    Form,
    Gender,
    LexicalCategory,
    LexicalFeature,
    NumberAgreement,
    Person,
    PhraseCategory,
    PronounType,
    cell_key,
)

if TYPE_CHECKING:
    from nlg_realiser.core.ports.lexicon import Lexicon


# ---------------------------------------------------------------------------
# Capability interface
# ---------------------------------------------------------------------------


class MorphologyRules(Protocol):
    """
    Per-language inflection of single tokens.

    Every method is a pure function of the token (its base form, lexical
    features and the contextual features the syntax stage set) and the
    lexicon. None of them look at neighbouring tokens; that is the job of
    the morphophonology rules.
    """

    language: str

    def inflect_noun(self, token: InflectedWordElement, lexicon: "Lexicon") -> str: ...

    def inflect_verb(self, token: InflectedWordElement, lexicon: "Lexicon") -> str: ...

    def inflect_adjective(self, token: InflectedWordElement, lexicon: "Lexicon") -> str: ...

    def inflect_adverb(self, token: InflectedWordElement, lexicon: "Lexicon") -> str: ...

    def inflect_determiner(self, token: InflectedWordElement, lexicon: "Lexicon") -> str: ...

    def inflect_pronoun(self, token: InflectedWordElement, lexicon: "Lexicon") -> str: ...


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def inflect(rules: MorphologyRules, element: NLGElement, lexicon: "Lexicon") -> Optional[StringElement]:
    """
    Realise one token as a `StringElement` pointing back at the token.

    Canned text and tokens flagged NON_MORPH pass through unchanged.
    """
    if isinstance(element, StringElement):
        return element
    if isinstance(element, WordElement):
        element = InflectedWordElement(element)
    if not isinstance(element, InflectedWordElement):
        return None
    if element.flag("non_morph"):
        return StringElement(element.base_form, origin=element)

    handlers: Dict[Any, Callable[[InflectedWordElement, "Lexicon"], str]] = {
        LexicalCategory.NOUN: rules.inflect_noun,
        LexicalCategory.VERB: rules.inflect_verb,
        LexicalCategory.MODAL: rules.inflect_verb,
        LexicalCategory.ADJECTIVE: rules.inflect_adjective,
        LexicalCategory.ADVERB: rules.inflect_adverb,
        LexicalCategory.DETERMINER: rules.inflect_determiner,
        LexicalCategory.PRONOUN: rules.inflect_pronoun,
    }
    handler = handlers.get(element.category)
    surface = handler(element, lexicon) if handler is not None else element.base_form
    return StringElement(surface, origin=element)


# ---------------------------------------------------------------------------
# Rule tables
# ---------------------------------------------------------------------------

SuffixRule = Tuple["re.Pattern[str]", str]


def suffix_rules(*pairs: Tuple[str, str]) -> Tuple[SuffixRule, ...]:
    """Compile (pattern, replacement) pairs; patterns are case-insensitive."""
    return tuple((re.compile(p, re.IGNORECASE), r) for p, r in pairs)


def apply_first(rules: Sequence[SuffixRule], word: str, default: Optional[str] = None) -> str:
    """The first matching rule wins; no match returns `default` (or the word)."""
    for pattern, replacement in rules:
        if pattern.search(word):
            return pattern.sub(replacement, word, count=1)
    return word if default is None else default


def cell_override(token: NLGElement, prefix: str) -> Optional[str]:
    """Per-cell lexical form such as `present2s` or `imperative1p`, if any."""
    value = token.features.get_extra(
        cell_key(prefix, token.get_feature("person"), token.get_feature("number"))
    )
    return str(value) if value else None


def lexical_form(token: NLGElement, key: Any) -> Optional[str]:
    value = token.features.get_extra(key)
    return str(value) if value else None


def is_plural(token: NLGElement) -> bool:
    return token.get_feature("number") is NumberAgreement.PLURAL


def match_case(template: str, word: str) -> str:
    if template[:1].isupper() and word:
        return word[0].upper() + word[1:]
    return word


# ---------------------------------------------------------------------------
# Agreement
# ---------------------------------------------------------------------------


def governing_noun_phrase(token: NLGElement) -> Optional[NLGElement]:
    """The noun phrase a modifier or determiner agrees with, one level up at most."""
    node = token.parent
    for _ in range(2):
        if node is None:
            return None
        if isinstance(node, NounPhraseSpec) or node.is_a(PhraseCategory.NOUN_PHRASE):
            return node
        node = node.parent
    return None


def target_agreement(token: NLGElement) -> Tuple[Optional[Gender], NumberAgreement]:
    """Gender and number an adjective or determiner must show."""
    gender = token.get_feature("gender")
    number = token.get_feature("number")
    # attributive: the noun phrase; predicative: the subject via the verb phrase
    host = governing_noun_phrase(token) or governing_verb_phrase(token)
    if host is not None:
        gender = gender or host.get_feature("gender")
        number = number or host.get_feature("number")
    return gender, number or NumberAgreement.SINGULAR


def opposite_gender_form(token: NLGElement, lexicon: "Lexicon") -> Optional[str]:
    """
    Base form of the registered opposite-gender entry when the requested
    gender differs from the lexical one ("acteur" -> "actrice").
    """
    other = lexical_form(token, LexicalFeature.OPPOSITE_GENDER)
    requested = token.get_feature("gender")
    if not other or requested is None:
        return None
    word = lexicon.lookup_word(other, LexicalCategory.NOUN)
    lexical_gender = getattr(token, "word", token).get_feature("gender")
    if lexical_gender is not None and lexical_gender is not requested:
        return word.base_form
    return None


# ---------------------------------------------------------------------------
# Pronouns
# ---------------------------------------------------------------------------

# special personal pronouns ("en", "y", "er") keep their base form
PERSONAL_TYPES = (PronounType.PERSONAL, PronounType.REFLEXIVE)


def governing_verb_phrase(token: NLGElement) -> Optional[VerbPhraseSpec]:
    node = token.parent
    for _ in range(3):
        if node is None:
            return None
        if isinstance(node, VerbPhraseSpec):
            return node
        node = node.parent
    return None


def reflexive_agreement(token: NLGElement) -> Tuple[Person, NumberAgreement]:
    """
    Reflexives take person and number from the governing verb phrase;
    an imperative forces the second person, except in the first plural.
    """
    person = token.get_feature("person", Person.THIRD)
    number = token.get_feature("number", NumberAgreement.SINGULAR)
    vp = governing_verb_phrase(token)
    if vp is not None:
        person = vp.get_feature("person", person)
        number = vp.get_feature("number", number)
        if vp.get_feature("form") is Form.IMPERATIVE:
            if not (person is Person.FIRST and number is NumberAgreement.PLURAL):
                person = Person.SECOND
    return person, number


def pronoun_function(token: NLGElement, *, keep_indirect: bool) -> DiscourseFunction:
    function = token.discourse_function
    if function is None:
        np = token.parent
        function = np.discourse_function if np is not None else None
    if function in (DiscourseFunction.SUBJECT, DiscourseFunction.SPECIFIER):
        return function
    if function is DiscourseFunction.INDIRECT_OBJECT and keep_indirect:
        return function
    return DiscourseFunction.OBJECT


def personal_pronoun(
    token: InflectedWordElement,
    lexicon: "Lexicon",
    *,
    clitic: Optional[bool] = None,
    keep_indirect: bool = False,
) -> str:
    """
    Feature-constrained reverse lookup of a personal pronoun.

    Person defaults to THIRD and number to SINGULAR; gender only counts in
    the third person. Returns the token's base form when nothing matches.
    """
    pronoun_type = token.get_feature("pronoun_type", PronounType.PERSONAL)
    if pronoun_type not in PERSONAL_TYPES:
        return token.base_form

    reflexive = token.flag("reflexive") or pronoun_type is PronounType.REFLEXIVE
    if reflexive:
        person, number = reflexive_agreement(token)
    else:
        person = token.get_feature("person", Person.THIRD)
        number = token.get_feature("number", NumberAgreement.SINGULAR)

    constraints: Dict[str, Any] = {
        "person": person,
        "number": number,
        "discourse_function": pronoun_function(token, keep_indirect=keep_indirect),
        "reflexive": reflexive,
        "possessive": token.flag("possessive"),
    }
    if person is Person.THIRD:
        constraints["gender"] = token.get_feature("gender")
    if clitic is not None:
        constraints["clitic"] = clitic

    word = lexicon.lookup_by_features(LexicalCategory.PRONOUN, constraints)
    return word.base_form if word is not None else token.base_form


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

RULES_REGISTRY: Dict[str, Type[Any]] = {}
"""
Global registry mapping language code -> morphology rule class.
"""


def register_rules(language: str):
    """
    Class decorator registering a morphology rule set under a language
    code:

        @register_rules("nl")
        class DutchMorphology:
            ...
    """

    def decorator(cls: Type[Any]) -> Type[Any]:
        if language in RULES_REGISTRY:
            raise ValueError(f"Morphology rules already registered for '{language}'")
        RULES_REGISTRY[language] = cls
        cls.language = language
        return cls

    return decorator


def create_rules(language: str) -> MorphologyRules:
    try:
        cls = RULES_REGISTRY[language]
    except KeyError as exc:
        raise LanguageNotFoundError(language) from exc
    return cls()


def list_registered_languages() -> Dict[str, Type[Any]]:
    """Snapshot of the registry, mainly for debugging."""
    return dict(RULES_REGISTRY)


__all__ = [
    "MorphologyRules",
    "inflect",
    "SuffixRule",
    "suffix_rules",
    "apply_first",
    "cell_override",
    "lexical_form",
    "is_plural",
    "match_case",
    "governing_noun_phrase",
    "target_agreement",
    "opposite_gender_form",
    "governing_verb_phrase",
    "reflexive_agreement",
    "pronoun_function",
    "personal_pronoun",
    "RULES_REGISTRY",
    "register_rules",
    "create_rules",
    "list_registered_languages",
]
