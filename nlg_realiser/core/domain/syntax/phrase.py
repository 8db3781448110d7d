# nlg_realiser\core\domain\syntax\phrase.py
"""
core/domain/syntax/phrase.py

Realisation of the non-clausal phrases: noun, prepositional, adjective,
adverb and coordinated phrases.

The three languages differ here only in where attributive adjectives go,
so a single helper is configured per language rather than subclassed.
"""

from __future__ import annotations

from typing import Optional

from ..elements import (
    CoordinatedPhraseElement,
    ListElement,
    NLGElement,
    NounPhraseSpec,
    PhraseElement,
)
from ..features import (
    DiscourseFunction,
    LexicalCategory,
    LexicalFeature,
    NumberAgreement,
    PhraseCategory,
)
from .base import SyntaxContext
from .common import pronoun_of


_AGREEMENT_KEYS = ("number", "gender", "person", "possessive", "reflexive")


def _pronoun_function(np: NLGElement) -> DiscourseFunction:
    function = np.discourse_function
    if function in (DiscourseFunction.SUBJECT, DiscourseFunction.SPECIFIER,
                    DiscourseFunction.INDIRECT_OBJECT):
        return function
    return DiscourseFunction.OBJECT


class StandardPhraseHelper:
    """
    `postposed_adjectives`: attributive adjectives follow the noun unless
    the adjective is lexically marked PREPOSED (French).
    """

    def __init__(self, *, postposed_adjectives: bool = False, list_separator: str = ",") -> None:
        self.postposed_adjectives = postposed_adjectives
        self.list_separator = list_separator

    def realise(self, phrase: NLGElement, ctx: SyntaxContext) -> Optional[NLGElement]:
        if phrase.flag("elided"):
            return None
        if isinstance(phrase, CoordinatedPhraseElement):
            return self.realise_coordinated(phrase, ctx)
        if phrase.is_a(PhraseCategory.NOUN_PHRASE):
            return self.realise_noun_phrase(phrase, ctx)
        return self.realise_generic(phrase, ctx)

    # ------------------------------------------------------------------
    # Noun phrases
    # ------------------------------------------------------------------

    def realise_noun_phrase(self, np: NounPhraseSpec, ctx: SyntaxContext) -> Optional[NLGElement]:
        out = ListElement(source=np)

        pronoun = pronoun_of(np)
        if pronoun is not None:
            token = ctx.inflect(pronoun, parent=np)
            for key in _AGREEMENT_KEYS:
                value = np.get_feature(key)
                if value is not None:
                    token.set_feature(key, value)
            token.set_feature("discourse_function", _pronoun_function(np))
            out.add(token)
            return out

        if np.specifier is not None:
            spec = ctx.realise(np.specifier)
            self._agree(spec, np)
            out.add(spec)

        pre, post = [], []
        for mod in np.pre_modifiers:
            if self.postposed_adjectives and not self._preposed(mod):
                post.append(mod)
            else:
                pre.append(mod)

        for mod in pre:
            out.add(self._agree(ctx.realise(mod), np))

        if np.head is not None:
            head = ctx.realise(np.head)
            self._agree(head, np)
            out.add(head)

        for mod in post:
            out.add(self._agree(ctx.realise(mod), np))

        for comp in np.complements:
            out.add(ctx.realise(comp))
        for mod in np.post_modifiers:
            out.add(ctx.realise(mod))

        return out if out.components else None

    @staticmethod
    def _preposed(mod: NLGElement) -> bool:
        head = mod.head if isinstance(mod, PhraseElement) else mod
        return head is not None and head.flag(LexicalFeature.PREPOSED)

    @staticmethod
    def _agree(realised: Optional[NLGElement], np: NLGElement) -> Optional[NLGElement]:
        """Push the phrase's number and gender down onto a realised token."""
        if realised is None:
            return None
        targets = [realised]
        if isinstance(realised, ListElement):
            targets = [leaf for leaf in realised.leaves()
                       if leaf.is_a(LexicalCategory.ADJECTIVE, LexicalCategory.DETERMINER,
                                    LexicalCategory.NOUN)]
        for token in targets:
            token.set_feature("number", np.get_feature("number", NumberAgreement.SINGULAR))
            if np.get_feature("gender") is not None and not token.is_a(LexicalCategory.NOUN):
                token.set_feature("gender", np.get_feature("gender"))
        if np.flag("possessive") and realised.is_a(LexicalCategory.NOUN):
            realised.set_feature("possessive", True)
        return realised

    # ------------------------------------------------------------------
    # Prepositional, adjective and adverb phrases
    # ------------------------------------------------------------------

    def realise_generic(self, phrase: PhraseElement, ctx: SyntaxContext) -> Optional[NLGElement]:
        out = ListElement(source=phrase)
        for mod in phrase.pre_modifiers:
            out.add(ctx.realise(mod))
        if phrase.head is not None:
            head = ctx.realise(phrase.head)
            if head is not None:
                for key in ("comparative", "superlative"):
                    if phrase.flag(key):
                        head.set_feature(key, True)
                if phrase.is_a(PhraseCategory.ADJECTIVE_PHRASE) and phrase.discourse_function not in (
                    DiscourseFunction.PRE_MODIFIER, None
                ):
                    head.set_feature("predicative", True)
            out.add(head)
        for comp in phrase.complements:
            if phrase.is_a(PhraseCategory.PREPOSITIONAL_PHRASE) and comp.discourse_function is None:
                comp.set_feature("discourse_function", DiscourseFunction.OBJECT)
            out.add(ctx.realise(comp))
        for mod in phrase.post_modifiers:
            out.add(ctx.realise(mod))
        return out if out.components else None

    # ------------------------------------------------------------------
    # Coordination
    # ------------------------------------------------------------------

    def realise_coordinated(self, coord: CoordinatedPhraseElement, ctx: SyntaxContext) -> Optional[NLGElement]:
        out = ListElement(source=coord)
        out.set_feature("number", coord.resolved_number())
        realised = [r for r in (ctx.realise(c) for c in coord.coordinates) if r is not None]
        last = len(realised) - 1
        for i, r in enumerate(realised):
            if i > 0:
                if i == last:
                    conj = ctx.canned(coord.conjunction, parent=coord)
                    conj.set_feature("non_morph", True)
                    out.add(conj)
                else:
                    out.add(ctx.canned(self.list_separator, parent=coord))
            out.add(r)
        return out if out.components else None


__all__ = ["StandardPhraseHelper"]
