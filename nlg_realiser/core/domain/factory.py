# nlg_realiser\core\domain\factory.py
"""
core/domain/factory.py

Builds phrase trees against one language's lexicon.

Plain strings handed to a factory method (or to a phrase setter of a
phrase the factory built) are resolved through the lexicon:

    factory.create_noun_phrase("de", "sleutels")
    # -> NP(spec="de", head="sleutel" with number=plural)

Unknown words become ad hoc entries with no lexical features; they still
realise, with regular morphology.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional, Union

import structlog

from .elements import (
    AdjectivePhraseSpec,
    AdverbPhraseSpec,
    ClauseSpec,
    CoordinatedPhraseElement,
    NLGElement,
    NounPhraseSpec,
    PrepositionPhraseSpec,
    StringElement,
    VerbPhraseSpec,
    WordElement,
)
from .exceptions import InvalidElementError
from .features import LexicalCategory

if TYPE_CHECKING:
    from nlg_realiser.core.ports.lexicon import Lexicon

logger = structlog.get_logger()

ElementLike = Union[NLGElement, str]

DEFAULT_CONJUNCTIONS: Dict[str, str] = {"en": "and", "fr": "et", "nl": "en"}


class PhraseFactory:
    def __init__(self, lexicon: "Lexicon") -> None:
        self.lexicon = lexicon
        self.language: str = getattr(lexicon, "language", "")

    # Phrases keep a reference to their factory; copies of a tree share it.
    def __deepcopy__(self, memo: Dict[int, Any]) -> "PhraseFactory":
        return self

    # ------------------------------------------------------------------
    # Words
    # ------------------------------------------------------------------

    def create_word(self, value: ElementLike, category: LexicalCategory = LexicalCategory.ANY) -> NLGElement:
        """
        A lexicon word for `value`. An inflected variant ("denk", "sleutels")
        resolves to its base entry carrying the features the variant implies.
        """
        if isinstance(value, NLGElement):
            return value
        if not isinstance(value, str):
            raise InvalidElementError(f"cannot make a word from {type(value).__name__}")
        if self.lexicon.has_word(value, category):
            return self.lexicon.lookup_word(value, category)
        variant = self.lexicon.lookup_variant(value, category)
        if variant is not None:
            for key, feature in self.lexicon.variant_features(value, category).items():
                variant.set_feature(key, feature)
            return variant
        logger.debug("ad_hoc_word", language=self.language, word=value, category=category.value)
        return WordElement(value, category)

    def _noun(self, value: ElementLike) -> NLGElement:
        if isinstance(value, NLGElement):
            return value
        # "hij" is a pronoun before anything else
        if self.lexicon.has_word(value, LexicalCategory.PRONOUN):
            return self.lexicon.lookup_word(value, LexicalCategory.PRONOUN)
        return self.create_word(value, LexicalCategory.NOUN)

    def create_string(self, text: str) -> StringElement:
        return StringElement(text)

    # ------------------------------------------------------------------
    # Phrases
    # ------------------------------------------------------------------

    def create_noun_phrase(
        self,
        spec_or_noun: Optional[ElementLike] = None,
        noun: Optional[ElementLike] = None,
    ) -> NounPhraseSpec:
        """`create_noun_phrase("Jan")` or `create_noun_phrase("de", "sleutels")`."""
        if noun is None:
            spec_or_noun, noun = None, spec_or_noun
        np = NounPhraseSpec(self)
        if noun is not None:
            np.set_noun(self._noun(noun))
        if spec_or_noun is not None:
            np.set_determiner(spec_or_noun)
        return np

    def create_verb_phrase(self, verb: Optional[ElementLike] = None) -> VerbPhraseSpec:
        vp = VerbPhraseSpec(self)
        if verb is not None:
            vp.set_verb(verb)
        return vp

    def create_clause(
        self,
        subject: Optional[ElementLike] = None,
        verb: Optional[ElementLike] = None,
        direct_object: Optional[ElementLike] = None,
    ) -> ClauseSpec:
        clause = ClauseSpec(self)
        if subject is not None:
            clause.set_subject(subject)
        if verb is not None:
            if isinstance(verb, VerbPhraseSpec):
                clause.set_verb_phrase(verb)
            else:
                clause.set_verb(verb)
        if direct_object is not None:
            clause.set_object(direct_object)
        return clause

    def create_preposition_phrase(
        self,
        preposition: Optional[ElementLike] = None,
        complement: Optional[ElementLike] = None,
    ) -> PrepositionPhraseSpec:
        pp = PrepositionPhraseSpec(self)
        if preposition is not None:
            pp.set_preposition(preposition)
        if complement is not None:
            pp.set_object(complement)
        return pp

    def create_adjective_phrase(self, adjective: Optional[ElementLike] = None) -> AdjectivePhraseSpec:
        ap = AdjectivePhraseSpec(self)
        if adjective is not None:
            ap.set_adjective(adjective)
        return ap

    def create_adverb_phrase(self, adverb: Optional[ElementLike] = None) -> AdverbPhraseSpec:
        ap = AdverbPhraseSpec(self)
        if adverb is not None:
            ap.set_adverb(adverb)
        return ap

    def create_coordinated(
        self,
        *coordinates: ElementLike,
        conjunction: Optional[str] = None,
    ) -> CoordinatedPhraseElement:
        """Coordinates joined by the language's "and" unless told otherwise."""
        elements: Iterable[NLGElement] = (
            c if isinstance(c, NLGElement) else self.create_noun_phrase(c) for c in coordinates
        )
        return CoordinatedPhraseElement(
            elements, conjunction or DEFAULT_CONJUNCTIONS.get(self.language, "and")
        )


__all__ = ["PhraseFactory", "DEFAULT_CONJUNCTIONS"]
