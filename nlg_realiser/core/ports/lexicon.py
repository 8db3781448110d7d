# nlg_realiser\core\ports\lexicon.py
from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from nlg_realiser.core.domain.elements import WordElement
from nlg_realiser.core.domain.features import LexicalCategory


@runtime_checkable
class Lexicon(Protocol):
    """
    Port for word lookup used by the factory and the rule engines.

    Implementations are read-only after construction and can be shared
    between realisers.
    """

    language: str

    def lookup_word(self, base_form: str, category: LexicalCategory = LexicalCategory.ANY) -> WordElement:
        """
        Returns the entry for `base_form` (or an inflected variant of it).
        Unknown words come back as a fresh entry with no lexical features.
        """
        ...

    def get_word(self, base_form: str, category: LexicalCategory = LexicalCategory.ANY) -> WordElement:
        """
        Like lookup_word, but raises LexemeNotFound for unknown words.
        Used for closed-class lexemes (auxiliaries, modals, complementisers).
        """
        ...

    def has_word(self, base_form: str, category: LexicalCategory = LexicalCategory.ANY) -> bool:
        ...

    def lookup_variant(self, form: str, category: LexicalCategory = LexicalCategory.ANY) -> Optional[WordElement]:
        """Resolves an inflected form ("sleutels") to its base entry."""
        ...

    def variant_features(self, form: str, category: LexicalCategory = LexicalCategory.ANY) -> Mapping[str, Any]:
        """Features implied by an inflected form (e.g. number=plural for "sleutels")."""
        ...

    def lookup_by_features(
        self, category: LexicalCategory, constraints: Mapping[str, Any]
    ) -> Optional[WordElement]:
        """Best entry of `category` whose features match `constraints`."""
        ...
