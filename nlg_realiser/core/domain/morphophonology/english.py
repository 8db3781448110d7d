# nlg_realiser\core\domain\morphophonology\english.py
"""English: "a" -> "an" before a vowel sound, and "that that" -> "that"."""

from __future__ import annotations

from typing import Sequence

from ..elements import StringElement
from ..features import LexicalCategory, LexicalFeature
from .base import PairRule, adjust_pair, clear, register_morphophonology

VOWELS = "aeiou"


def starts_with_vowel_sound(token: StringElement) -> bool:
    # lexicon exceptions: "hour" (vowel), "university" (consonant)
    marked = token.get_feature(LexicalFeature.VOWEL_INITIAL)
    if marked is not None:
        return bool(marked)
    return token.text[:1].lower() in VOWELS


@register_morphophonology("en")
class EnglishMorphophonology:
    def passes(self) -> Sequence[PairRule]:
        return (self.indefinite_article, self.duplicate_that)

    def adjust(self, left: StringElement, right: StringElement) -> None:
        adjust_pair(self, left, right)

    @staticmethod
    def indefinite_article(left: StringElement, right: StringElement) -> None:
        if left.text.lower() != "a" or left.source_category is not LexicalCategory.DETERMINER:
            return
        if starts_with_vowel_sound(right):
            left.realisation = left.text + "n"

    @staticmethod
    def duplicate_that(left: StringElement, right: StringElement) -> None:
        if left.text.lower() == "that" and right.text.lower() == "that":
            clear(right)


__all__ = ["EnglishMorphophonology", "starts_with_vowel_sound"]
