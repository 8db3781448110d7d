# nlg_realiser\core\domain\syntax\base.py
"""
core/domain/syntax/base.py

Capability interfaces for the per-language syntax helpers, and the
realisation context that dispatches an element to the right helper.

Each language supplies one concrete `ClauseHelper`, `VerbPhraseHelper`
and `PhraseHelper`. Logic they share lives in free functions in
`syntax.common`; there is no inheritance between languages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Protocol

import structlog

from ..elements import (
    ClauseSpec,
    CoordinatedPhraseElement,
    InflectedWordElement,
    ListElement,
    NLGElement,
    PhraseElement,
    StringElement,
    VerbPhraseSpec,
    WordElement,
)
from ..features import LexicalCategory, PhraseCategory

if TYPE_CHECKING:
    from nlg_realiser.core.ports.lexicon import Lexicon

    from .verb_group import VerbGroup

logger = structlog.get_logger()


# ---------------------------------------------------------------------------
# Capability interfaces
# ---------------------------------------------------------------------------


class ClauseHelper(Protocol):
    def realise(self, clause: ClauseSpec, ctx: "SyntaxContext") -> Optional[ListElement]:
        """Linear token sequence for one clause."""
        ...


class VerbPhraseHelper(Protocol):
    def build_verb_group(self, vp: VerbPhraseSpec, ctx: "SyntaxContext") -> "VerbGroup":
        """Ordered verb group with every token tagged AUX or MAIN."""
        ...

    def realise(self, vp: VerbPhraseSpec, ctx: "SyntaxContext") -> Optional[ListElement]:
        ...


class PhraseHelper(Protocol):
    def realise(self, phrase: NLGElement, ctx: "SyntaxContext") -> Optional[NLGElement]:
        """Noun, prepositional, adjective, adverb and coordinated phrases."""
        ...


# ---------------------------------------------------------------------------
# Realisation context
# ---------------------------------------------------------------------------


class SyntaxContext:
    """
    Everything a helper needs while walking one working tree: the
    lexicon, the factory and the language's helpers.

    `realise` is the single recursion point; helpers never call each
    other directly.
    """

    def __init__(
        self,
        language: str,
        lexicon: "Lexicon",
        factory: Any,
        clause_helper: ClauseHelper,
        verb_phrase_helper: VerbPhraseHelper,
        phrase_helper: PhraseHelper,
    ) -> None:
        self.language = language
        self.lexicon = lexicon
        self.factory = factory
        self.clause_helper = clause_helper
        self.verb_phrase_helper = verb_phrase_helper
        self.phrase_helper = phrase_helper

    def realise(self, element: Optional[NLGElement]) -> Optional[NLGElement]:
        if element is None:
            return None
        if isinstance(element, ClauseSpec):
            return self.clause_helper.realise(element, self)
        if isinstance(element, VerbPhraseSpec):
            return self.verb_phrase_helper.realise(element, self)
        if isinstance(element, (PhraseElement, CoordinatedPhraseElement)):
            return self.phrase_helper.realise(element, self)
        if isinstance(element, WordElement):
            return self.inflect(element, parent=element.parent)
        if isinstance(element, (InflectedWordElement, StringElement)):
            return element
        if isinstance(element, ListElement):
            out = ListElement(source=element)
            for component in element.components:
                out.add(self.realise(component))
            return out
        logger.debug("element_not_realisable", kind=type(element).__name__)
        return None

    # ------------------------------------------------------------------
    # Token helpers
    # ------------------------------------------------------------------

    def word(self, base_form: str, category: LexicalCategory = LexicalCategory.ANY) -> WordElement:
        """Closed-class lexeme; a missing entry raises LexemeNotFound."""
        return self.lexicon.get_word(base_form, category)

    def inflect(
        self,
        word: WordElement | str,
        category: LexicalCategory = LexicalCategory.ANY,
        parent: Optional[NLGElement] = None,
    ) -> InflectedWordElement:
        if isinstance(word, str):
            word = self.word(word, category)
        token = InflectedWordElement(word)
        token.parent = parent if parent is not None else word.parent
        return token

    @staticmethod
    def canned(text: str, parent: Optional[NLGElement] = None) -> StringElement:
        s = StringElement(text)
        s.parent = parent
        return s

    @staticmethod
    def is_phrase(element: Optional[NLGElement], *categories: PhraseCategory) -> bool:
        return element is not None and element.category in categories


__all__ = ["ClauseHelper", "VerbPhraseHelper", "PhraseHelper", "SyntaxContext"]
