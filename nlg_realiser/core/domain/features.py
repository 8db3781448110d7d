# nlg_realiser\core\domain\features.py
"""
core/domain/features.py

Closed grammatical categories shared by every language module.

All enums are `str`-valued so that lexicon JSON files and settings can
refer to them by their lowercase value (e.g. "feminine", "past").

Besides the enums this module names the open-ended feature keys that
live in the extension map of a `FeatureSet`:

- `LexicalFeature`: keys supplied by the lexicon (irregular forms,
  auxiliary-selection flags, ...).
- `ExtraFeature`: language-specific keys set by phrase builders or by
  the syntax helpers during realisation.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .exceptions import UnsupportedInterrogativeError


__all__ = [
    "LexicalCategory",
    "PhraseCategory",
    "Tense",
    "Person",
    "NumberAgreement",
    "Gender",
    "Form",
    "DiscourseFunction",
    "ClauseStatus",
    "InterrogativeType",
    "PronounType",
    "LexicalFeature",
    "ExtraFeature",
    "cell_key",
]


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


class LexicalCategory(str, Enum):
    """Word classes known to the lexicon and the morphology rules."""
    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    DETERMINER = "determiner"
    PRONOUN = "pronoun"
    PREPOSITION = "preposition"
    CONJUNCTION = "conjunction"
    COMPLEMENTISER = "complementiser"
    MODAL = "modal"
    SYMBOL = "symbol"
    ANY = "any"


class PhraseCategory(str, Enum):
    """Phrase-level categories."""
    CLAUSE = "clause"
    NOUN_PHRASE = "noun_phrase"
    VERB_PHRASE = "verb_phrase"
    PREPOSITIONAL_PHRASE = "prepositional_phrase"
    ADJECTIVE_PHRASE = "adjective_phrase"
    ADVERB_PHRASE = "adverb_phrase"
    COORDINATED_PHRASE = "coordinated_phrase"
    CANNED_TEXT = "canned_text"


# ---------------------------------------------------------------------------
# Grammatical features
# ---------------------------------------------------------------------------


class Tense(str, Enum):
    PRESENT = "present"
    PAST = "past"
    FUTURE = "future"
    CONDITIONAL = "conditional"


class Person(str, Enum):
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"


class NumberAgreement(str, Enum):
    SINGULAR = "singular"
    PLURAL = "plural"
    BOTH = "both"


class Gender(str, Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"
    COMMON = "common"


class Form(str, Enum):
    NORMAL = "normal"
    INFINITIVE = "infinitive"
    BARE_INFINITIVE = "bare_infinitive"
    GERUND = "gerund"
    IMPERATIVE = "imperative"
    PRESENT_PARTICIPLE = "present_participle"
    PAST_PARTICIPLE = "past_participle"
    SUBJUNCTIVE = "subjunctive"

    @property
    def is_finite(self) -> bool:
        return self in (Form.NORMAL, Form.IMPERATIVE, Form.SUBJUNCTIVE)


class DiscourseFunction(str, Enum):
    """Grammatical role of an element within its parent."""
    SUBJECT = "subject"
    OBJECT = "object"
    INDIRECT_OBJECT = "indirect_object"
    COMPLEMENT = "complement"
    PRE_MODIFIER = "pre_modifier"
    POST_MODIFIER = "post_modifier"
    FRONT_MODIFIER = "front_modifier"
    SPECIFIER = "specifier"
    HEAD = "head"
    VERB_PHRASE = "verb_phrase"
    AUXILIARY = "auxiliary"
    CUE_PHRASE = "cue_phrase"
    COMPLEMENTISER = "complementiser"
    CONJUNCTION = "conjunction"


class ClauseStatus(str, Enum):
    MATRIX = "matrix"
    SUBORDINATE = "subordinate"


class InterrogativeType(str, Enum):
    """
    Closed set of supported question types.

    WHAT_FOR is deliberately absent: its preposition is stranded at the
    end of the clause and no language module knows how to place it.
    """
    YES_NO = "yes_no"
    WHO_SUBJECT = "who_subject"
    WHAT_SUBJECT = "what_subject"
    WHO_OBJECT = "who_object"
    WHO_INDIRECT_OBJECT = "who_indirect_object"
    WHAT_OBJECT = "what_object"
    WHERE = "where"
    WHY = "why"
    WHEN = "when"
    HOW = "how"
    HOW_MANY = "how_many"
    WHICH = "which"
    WHOSE = "whose"
    HOW_CONDITION_QUALITY = "how_condition_quality"
    HOW_PREDICATE = "how_condition_quality"
    HOW_ADJECTIVE = "how_adjective"
    HOW_COME = "how_come"

    @property
    def is_object(self) -> bool:
        """The question word stands in for the direct object."""
        return self in (InterrogativeType.WHO_OBJECT, InterrogativeType.WHAT_OBJECT)

    @property
    def is_indirect_object(self) -> bool:
        return self is InterrogativeType.WHO_INDIRECT_OBJECT

    @property
    def is_subject(self) -> bool:
        """The question word stands in for the subject."""
        return self in (InterrogativeType.WHO_SUBJECT, InterrogativeType.WHAT_SUBJECT)

    @property
    def relocates_object(self) -> bool:
        """The realised object moves in front of the verb phrase."""
        return self in (
            InterrogativeType.HOW_ADJECTIVE,
            InterrogativeType.WHICH,
            InterrogativeType.HOW_MANY,
            InterrogativeType.WHOSE,
        )

    @classmethod
    def parse(cls, value: object) -> Optional["InterrogativeType"]:
        """
        Coerce a raw value into the closed set.

        None stays None. Anything outside the set raises
        UnsupportedInterrogativeError.
        """
        if value is None or isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            pass
        try:
            return cls[str(value).upper()]
        except KeyError as exc:
            raise UnsupportedInterrogativeError(value) from exc


class PronounType(str, Enum):
    PERSONAL = "personal"
    SPECIAL_PERSONAL = "special_personal"
    NUMERAL = "numeral"
    POSSESSIVE = "possessive"
    DEMONSTRATIVE = "demonstrative"
    RELATIVE = "relative"
    INTERROGATIVE = "interrogative"
    INDEFINITE = "indefinite"
    REFLEXIVE = "reflexive"


# ---------------------------------------------------------------------------
# Open feature keys (extension map)
# ---------------------------------------------------------------------------


class LexicalFeature(str, Enum):
    """Keys read from lexicon entries."""
    PLURAL = "plural"
    PAST = "past"
    PAST_PARTICIPLE = "past_participle"
    PRESENT_PARTICIPLE = "present_participle"
    FEMININE_PAST_PARTICIPLE = "feminine_past_participle"
    COMPARATIVE = "comparative_form"
    SUPERLATIVE = "superlative_form"
    FEMININE_SINGULAR = "feminine_singular"
    FEMININE_PLURAL = "feminine_plural"
    OPPOSITE_GENDER = "opposite_gender"
    REGULAR_DOUBLE = "regular_double"
    COPULAR = "copular"
    CLITIC_RISING = "clitic_rising"
    ASPIRED_H = "aspired_h"
    PREPOSED = "preposed"
    PREVERB = "preverb"
    AUXILIARY_ZIJN = "auxiliary_zijn"
    AUXILIARY_ETRE = "auxiliary_etre"
    FUTURE_RADICAL = "future_radical"
    IMPERFECT_RADICAL = "imperfect_radical"
    SUBJUNCTIVE_RADICAL = "subjunctive_radical"
    VERB_GROUP = "verb_group"
    DETACHED = "detached"
    HUMAN = "human"
    VOWEL_INITIAL = "vowel_initial"


class ExtraFeature(str, Enum):
    """Language-specific keys set on phrases or by the syntax helpers."""
    PREVERB = "preverb"
    PREVERB_REALISED = "preverb_realised"
    TE_INFINITIVE = "te_infinitive"
    NEGATION_AUXILIARY = "negation_auxiliary"
    INVERTED = "inverted"
    FINITE_VERB = "finite_verb"
    FINITE = "finite"
    SUBJECTS_REALISED = "subjects_realised"
    AGENT_PREPOSITION = "agent_preposition"


def cell_key(prefix: str, person: Optional[Person], number: Optional[NumberAgreement]) -> str:
    """
    Build a per-cell conjugation key such as "present1s" or "past3p".

    Unset person defaults to THIRD and unset number to SINGULAR.
    """
    digit = {Person.FIRST: "1", Person.SECOND: "2"}.get(person, "3")
    suffix = "p" if number is NumberAgreement.PLURAL else "s"
    return f"{prefix}{digit}{suffix}"
