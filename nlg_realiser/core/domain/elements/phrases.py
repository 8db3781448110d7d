# nlg_realiser\core\domain\elements\phrases.py
"""
core/domain/elements/phrases.py

Phrase specifications.

A phrase owns its children: head, specifier, complements and the three
modifier lists. Setters accept either elements or plain strings; strings
are turned into elements by the phrase factory the phrase was built by.

Clauses delegate verb-related setters (verb, object, indirect object,
complements) to their verb phrase, as in the usual clause/VP split.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Union

from ..exceptions import InvalidElementError
from ..features import (
    DiscourseFunction,
    LexicalCategory,
    NumberAgreement,
    PhraseCategory,
)
from .base import NLGElement
from .words import StringElement, WordElement

ElementLike = Union[NLGElement, str]

_CONJUNCTIVE = {"and", "et", "en"}


class PhraseElement(NLGElement):
    def __init__(self, category: PhraseCategory, factory: Any = None) -> None:
        super().__init__(category)
        self.factory = factory
        self.head: Optional[NLGElement] = None
        self.specifier: Optional[NLGElement] = None
        self.complements: List[NLGElement] = []
        self.pre_modifiers: List[NLGElement] = []
        self.post_modifiers: List[NLGElement] = []
        self.front_modifiers: List[NLGElement] = []

    # ------------------------------------------------------------------
    # Coercion
    # ------------------------------------------------------------------

    def _word(self, value: ElementLike, category: LexicalCategory) -> NLGElement:
        if isinstance(value, NLGElement):
            return value
        if isinstance(value, str):
            if self.factory is None:
                return WordElement(value, category)
            return self.factory.create_word(value, category)
        raise InvalidElementError(f"cannot use {type(value).__name__} as a {category.value}")

    def _noun_phrase(self, value: ElementLike) -> NLGElement:
        if isinstance(value, NLGElement):
            return value
        if isinstance(value, str):
            if self.factory is None:
                return WordElement(value, LexicalCategory.NOUN)
            return self.factory.create_noun_phrase(value)
        raise InvalidElementError(f"cannot use {type(value).__name__} as a noun phrase")

    @staticmethod
    def _canned(value: ElementLike) -> NLGElement:
        if isinstance(value, NLGElement):
            return value
        if isinstance(value, str):
            return StringElement(value)
        raise InvalidElementError(f"cannot use {type(value).__name__} as a phrase component")

    def _tag(self, element: NLGElement, function: DiscourseFunction) -> NLGElement:
        if element.discourse_function is None or function is not DiscourseFunction.COMPLEMENT:
            element.set_feature("discourse_function", function)
        return self.attach(element)

    # ------------------------------------------------------------------
    # Children
    # ------------------------------------------------------------------

    def set_head(self, value: ElementLike, category: LexicalCategory = LexicalCategory.ANY) -> None:
        self.head = self.attach(self._word(value, category))
        self.head.set_feature("discourse_function", DiscourseFunction.HEAD)

    def set_specifier(self, value: ElementLike) -> None:
        spec = self._word(value, LexicalCategory.DETERMINER)
        self.specifier = self._tag(spec, DiscourseFunction.SPECIFIER)

    def add_complement(self, value: ElementLike) -> NLGElement:
        comp = self._tag(self._canned(value), DiscourseFunction.COMPLEMENT)
        self.complements.append(comp)
        return comp

    def set_complement(self, value: ElementLike) -> NLGElement:
        self.complements = []
        return self.add_complement(value)

    def add_pre_modifier(self, value: ElementLike) -> NLGElement:
        mod = self._tag(self._canned(value), DiscourseFunction.PRE_MODIFIER)
        self.pre_modifiers.append(mod)
        return mod

    def add_post_modifier(self, value: ElementLike) -> NLGElement:
        mod = self._tag(self._canned(value), DiscourseFunction.POST_MODIFIER)
        self.post_modifiers.append(mod)
        return mod

    def add_front_modifier(self, value: ElementLike) -> NLGElement:
        mod = self._tag(self._canned(value), DiscourseFunction.FRONT_MODIFIER)
        self.front_modifiers.append(mod)
        return mod

    def complements_with(self, *functions: DiscourseFunction) -> List[NLGElement]:
        return [c for c in self.complements if c.discourse_function in functions]

    def remove_complements(self, function: DiscourseFunction) -> None:
        self.complements = [c for c in self.complements if c.discourse_function is not function]

    @property
    def children(self) -> List[NLGElement]:
        out: List[NLGElement] = []
        out.extend(self.front_modifiers)
        if self.specifier is not None:
            out.append(self.specifier)
        out.extend(self.pre_modifiers)
        if self.head is not None:
            out.append(self.head)
        out.extend(self.complements)
        out.extend(self.post_modifiers)
        return out


# ---------------------------------------------------------------------------
# Concrete phrases
# ---------------------------------------------------------------------------


class NounPhraseSpec(PhraseElement):
    def __init__(self, factory: Any = None) -> None:
        super().__init__(PhraseCategory.NOUN_PHRASE, factory)

    def set_noun(self, value: ElementLike) -> None:
        self.set_head(value, LexicalCategory.NOUN)
        head = self.head
        # Agreement features of the phrase start out as the head's.
        for key in ("gender", "person", "number", "proper", "pronoun_type", "reflexive"):
            if head.has_feature(key) and not self.has_feature(key):
                self.set_feature(key, head.get_feature(key))

    def set_determiner(self, value: ElementLike) -> None:
        self.set_specifier(value)

    def add_modifier(self, value: ElementLike) -> NLGElement:
        """Adjectives go before the noun, everything else after it."""
        if isinstance(value, str) and self.factory is not None:
            value = self.factory.create_word(value, LexicalCategory.ANY)
        if isinstance(value, NLGElement) and value.is_a(
            LexicalCategory.ADJECTIVE, PhraseCategory.ADJECTIVE_PHRASE
        ):
            return self.add_pre_modifier(value)
        return self.add_post_modifier(value)

    @property
    def noun(self) -> Optional[NLGElement]:
        return self.head


class VerbPhraseSpec(PhraseElement):
    def __init__(self, factory: Any = None) -> None:
        super().__init__(PhraseCategory.VERB_PHRASE, factory)

    def set_verb(self, value: ElementLike) -> None:
        self.set_head(value, LexicalCategory.VERB)
        # A plural/person variant given as the verb ("denk") only fixes the lemma.
        for key in ("person", "number", "tense"):
            self.head.set_feature(key, None)

    @property
    def verb(self) -> Optional[NLGElement]:
        return self.head

    def set_object(self, value: ElementLike) -> NLGElement:
        self.remove_complements(DiscourseFunction.OBJECT)
        obj = self._noun_phrase(value)
        obj.set_feature("discourse_function", DiscourseFunction.OBJECT)
        self.complements.append(self.attach(obj))
        return obj

    def set_indirect_object(self, value: ElementLike) -> NLGElement:
        self.remove_complements(DiscourseFunction.INDIRECT_OBJECT)
        obj = self._noun_phrase(value)
        obj.set_feature("discourse_function", DiscourseFunction.INDIRECT_OBJECT)
        self.complements.append(self.attach(obj))
        return obj

    def get_object(self) -> Optional[NLGElement]:
        found = self.complements_with(DiscourseFunction.OBJECT)
        return found[0] if found else None

    def get_indirect_object(self) -> Optional[NLGElement]:
        found = self.complements_with(DiscourseFunction.INDIRECT_OBJECT)
        return found[0] if found else None


class PrepositionPhraseSpec(PhraseElement):
    def __init__(self, factory: Any = None) -> None:
        super().__init__(PhraseCategory.PREPOSITIONAL_PHRASE, factory)

    def set_preposition(self, value: ElementLike) -> None:
        self.set_head(value, LexicalCategory.PREPOSITION)

    def set_object(self, value: ElementLike) -> NLGElement:
        self.complements = []
        obj = self._noun_phrase(value)
        obj.set_feature("discourse_function", DiscourseFunction.OBJECT)
        self.complements.append(self.attach(obj))
        return obj

    @property
    def preposition(self) -> Optional[NLGElement]:
        return self.head


class AdjectivePhraseSpec(PhraseElement):
    def __init__(self, factory: Any = None) -> None:
        super().__init__(PhraseCategory.ADJECTIVE_PHRASE, factory)

    def set_adjective(self, value: ElementLike) -> None:
        self.set_head(value, LexicalCategory.ADJECTIVE)


class AdverbPhraseSpec(PhraseElement):
    def __init__(self, factory: Any = None) -> None:
        super().__init__(PhraseCategory.ADVERB_PHRASE, factory)

    def set_adverb(self, value: ElementLike) -> None:
        self.set_head(value, LexicalCategory.ADVERB)


class ClauseSpec(PhraseElement):
    """
    A clause: subjects, a verb phrase and clause-level features.

    Tense, aspect, voice, polarity, modal and form are set on the clause
    and handed to the verb phrase when the clause is realised.
    """

    def __init__(self, factory: Any = None) -> None:
        super().__init__(PhraseCategory.CLAUSE, factory)
        self.subjects: List[NLGElement] = []
        self.verb_phrase: VerbPhraseSpec = VerbPhraseSpec(factory)
        self.attach(self.verb_phrase)
        self.verb_phrase.set_feature("discourse_function", DiscourseFunction.VERB_PHRASE)
        self.cue_phrase: Optional[NLGElement] = None

    # --- subjects ---

    def set_subject(self, value: ElementLike) -> NLGElement:
        self.subjects = []
        return self.add_subject(value)

    def add_subject(self, value: ElementLike) -> NLGElement:
        subject = self._noun_phrase(value)
        subject.set_feature("discourse_function", DiscourseFunction.SUBJECT)
        self.subjects.append(self.attach(subject))
        return subject

    def set_subjects(self, values: Iterable[ElementLike]) -> None:
        self.subjects = []
        for value in values:
            self.add_subject(value)

    # --- verb phrase delegation ---

    def set_verb_phrase(self, vp: VerbPhraseSpec) -> None:
        self.verb_phrase = self.attach(vp)
        vp.set_feature("discourse_function", DiscourseFunction.VERB_PHRASE)

    def set_verb(self, value: ElementLike) -> None:
        self.verb_phrase.set_verb(value)

    @property
    def verb(self) -> Optional[NLGElement]:
        return self.verb_phrase.head

    def set_object(self, value: ElementLike) -> NLGElement:
        return self.verb_phrase.set_object(value)

    def set_indirect_object(self, value: ElementLike) -> NLGElement:
        return self.verb_phrase.set_indirect_object(value)

    def get_object(self) -> Optional[NLGElement]:
        return self.verb_phrase.get_object()

    def get_indirect_object(self) -> Optional[NLGElement]:
        return self.verb_phrase.get_indirect_object()

    def add_complement(self, value: ElementLike) -> NLGElement:
        return self.verb_phrase.add_complement(value)

    def set_complement(self, value: ElementLike) -> NLGElement:
        return self.verb_phrase.set_complement(value)

    def add_pre_modifier(self, value: ElementLike) -> NLGElement:
        return self.verb_phrase.add_pre_modifier(value)

    def add_post_modifier(self, value: ElementLike) -> NLGElement:
        return self.verb_phrase.add_post_modifier(value)

    def set_cue_phrase(self, value: ElementLike) -> None:
        cue = self._canned(value)
        cue.set_feature("discourse_function", DiscourseFunction.CUE_PHRASE)
        self.cue_phrase = self.attach(cue)

    @property
    def children(self) -> List[NLGElement]:
        out: List[NLGElement] = list(self.front_modifiers)
        if self.cue_phrase is not None:
            out.append(self.cue_phrase)
        out.extend(self.subjects)
        out.append(self.verb_phrase)
        out.extend(self.post_modifiers)
        return out


class CoordinatedPhraseElement(NLGElement):
    """Coordinates joined by a conjunction ("Marie et Julie")."""

    def __init__(self, coordinates: Iterable[NLGElement] = (), conjunction: str = "and") -> None:
        super().__init__(PhraseCategory.COORDINATED_PHRASE)
        self.coordinates: List[NLGElement] = []
        self.conjunction = conjunction
        for c in coordinates:
            self.add_coordinate(c)

    def add_coordinate(self, element: NLGElement) -> None:
        self.coordinates.append(self.attach(element))

    @property
    def is_conjunctive(self) -> bool:
        return self.conjunction.lower() in _CONJUNCTIVE

    def resolved_number(self) -> NumberAgreement:
        if len(self.coordinates) > 1 and self.is_conjunctive:
            return NumberAgreement.PLURAL
        if self.coordinates:
            return self.coordinates[-1].get_feature("number", NumberAgreement.SINGULAR)
        return NumberAgreement.SINGULAR

    @property
    def children(self) -> List[NLGElement]:
        return list(self.coordinates)


__all__ = [
    "PhraseElement",
    "NounPhraseSpec",
    "VerbPhraseSpec",
    "PrepositionPhraseSpec",
    "AdjectivePhraseSpec",
    "AdverbPhraseSpec",
    "ClauseSpec",
    "CoordinatedPhraseElement",
]
