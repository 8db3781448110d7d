# nlg_realiser\core\domain\realiser.py
"""
core/domain/realiser.py

Public entry point: phrase tree in, sentence out.

Pipeline:
1. syntax: the language's clause / verb-phrase / phrase helpers turn the
   tree into nested lists of tokens;
2. morphology: every token becomes one surface string;
3. morphophonology: adjacent-token adjustments (elision, contraction,
   a/an);
4. orthography: spacing, capital and final punctuation.

Every public method realises a deep copy of its input; the caller's tree
is never touched, so the same tree can be realised again (or by another
realiser) with the same result.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, List, Optional

import structlog

from nlg_realiser.shared.config import settings
from nlg_realiser.shared.observability import get_tracer

from .elements import ListElement, NLGElement, StringElement
from .factory import PhraseFactory
from .languages import LanguageRules, get_language
from .models import RealisedSentence
from .morphology import inflect
from .morphophonology import apply_rules
from .orthography import sentence
from .syntax import SyntaxContext

if TYPE_CHECKING:
    from nlg_realiser.core.ports.lexicon import Lexicon

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class Realiser:
    """
    Realiser for one language.

    Args:
        lexicon: the language's lexicon (any `Lexicon` port implementation).
        language: language code; defaults to the lexicon's own.
        factory: phrase factory used when the syntax needs new phrases
            (agent "by"-phrases, clausal-subject wrappers); defaults to one
            over `lexicon`.
    """

    def __init__(
        self,
        lexicon: "Lexicon",
        language: Optional[str] = None,
        factory: Optional[PhraseFactory] = None,
    ) -> None:
        self.lexicon = lexicon
        self.rules: LanguageRules = get_language(language or lexicon.language)
        self.language = self.rules.code
        self.factory = factory or PhraseFactory(lexicon)

    def _context(self) -> SyntaxContext:
        return SyntaxContext(
            self.language,
            self.lexicon,
            self.factory,
            self.rules.clause_helper,
            self.rules.verb_phrase_helper,
            self.rules.phrase_helper,
        )

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def realise_syntax(self, element: Optional[NLGElement]) -> Optional[NLGElement]:
        """Token structure of a copy of `element`, before morphology."""
        if element is None:
            return None
        return self._context().realise(copy.deepcopy(element))

    def realise_morphology(self, element: Optional[NLGElement]) -> Optional[NLGElement]:
        """
        Inflect every token of a syntax-stage result. Lists keep their
        nesting; tokens become `StringElement`s.
        """
        if element is None:
            return None
        return self._morphology(copy.deepcopy(element))

    def _morphology(self, element: NLGElement) -> Optional[NLGElement]:
        if isinstance(element, ListElement):
            out = ListElement(source=element)
            for component in element.components:
                out.add(self._morphology(component))
            return out
        return inflect(self.rules.morphology, element, self.lexicon)

    def realise(self, element: Optional[NLGElement]) -> Optional[ListElement]:
        """
        Full pipeline up to (not including) orthography: a flat list of the
        surviving surface tokens, carrying the top element's features.
        """
        if element is None:
            return None
        syntax = self._context().realise(copy.deepcopy(element))
        if syntax is None:
            logger.debug("nothing_to_realise", language=self.language, kind=type(element).__name__)
            return None
        morph = self._morphology(syntax)
        leaves = morph.leaves() if isinstance(morph, ListElement) else [morph]
        tokens = [leaf for leaf in leaves if isinstance(leaf, StringElement)]
        out = ListElement(source=syntax)
        out.extend(apply_rules(self.rules.morphophonology, tokens))
        return out

    # ------------------------------------------------------------------
    # Sentences
    # ------------------------------------------------------------------

    def realise_sentence(self, element: Optional[NLGElement]) -> str:
        return self.realise_result(element).text

    def realise_result(self, element: Optional[NLGElement]) -> RealisedSentence:
        """`realise_sentence` with the surface tokens alongside the text."""
        interrogative = element is not None and element.features.interrogative_type is not None
        with structlog.contextvars.bound_contextvars(language=self.language), tracer.start_as_current_span(
            "realiser.realise_sentence"
        ) as span:
            span.set_attribute("app.language", self.language)
            span.set_attribute("app.interrogative", interrogative)
            logger.debug("realisation_started", interrogative=interrogative)

            realised = self.realise(element)
            tokens: List[StringElement] = list(realised.components) if realised is not None else []
            text = sentence(
                tokens,
                interrogative=interrogative,
                statement=settings.SENTENCE_TERMINATOR,
                question=settings.QUESTION_TERMINATOR,
            )

            span.set_attribute("app.token_count", len(tokens))
            logger.debug("realisation_finished", text=text)
            return RealisedSentence(
                language=self.language,
                text=text,
                tokens=[t.text for t in tokens],
                interrogative=interrogative,
            )


__all__ = ["Realiser"]
