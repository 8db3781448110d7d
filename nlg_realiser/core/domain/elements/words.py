# nlg_realiser\core\domain\elements\words.py
"""
Leaf elements: lexicon words, their inflected tokens and canned strings.
"""

from __future__ import annotations

from typing import Any, Optional

from ..feature_set import FeatureSet
from ..features import LexicalCategory, PhraseCategory
from .base import NLGElement


class WordElement(NLGElement):
    """A lexicon entry: base form, lexical category and lexical features."""

    def __init__(
        self,
        base_form: str,
        category: LexicalCategory = LexicalCategory.ANY,
        features: Optional[FeatureSet] = None,
        word_id: Optional[str] = None,
    ) -> None:
        super().__init__(category, features)
        self.base_form = base_form
        self.word_id = word_id or f"{base_form}:{getattr(category, 'value', category)}"

    def __repr__(self) -> str:
        return f"<WordElement {self.base_form!r} {getattr(self.category, 'value', self.category)}>"


class InflectedWordElement(NLGElement):
    """
    One token awaiting morphology.

    Starts with a copy of the word's lexical features; the syntax helpers
    then add the contextual ones (tense, person, number, form, ...).
    """

    def __init__(self, word: WordElement, category: Any = None) -> None:
        super().__init__(category or word.category, word.features.copy())
        self.word = word
        self.base_form = word.base_form

    def __repr__(self) -> str:
        return f"<InflectedWordElement {self.base_form!r}>"


class StringElement(NLGElement):
    """
    Terminal surface text.

    `origin` points back at the word or inflected token the text came from
    so that morphophonology can still inspect its category and features.
    """

    def __init__(self, text: Optional[str], origin: Optional[NLGElement] = None) -> None:
        super().__init__(PhraseCategory.CANNED_TEXT)
        self.realisation = text
        self.origin = origin
        if origin is not None:
            self.features = origin.features.copy()

    @property
    def source_category(self) -> Any:
        return self.origin.category if self.origin is not None else self.category

    @property
    def text(self) -> str:
        return self.realisation or ""

    def __repr__(self) -> str:
        return f"<StringElement {self.realisation!r}>"
