# nlg_realiser\core\domain\elements\__init__.py
"""Phrase-tree element model."""

from .base import NLGElement
from .lists import ListElement
from .phrases import (
    AdjectivePhraseSpec,
    AdverbPhraseSpec,
    ClauseSpec,
    CoordinatedPhraseElement,
    NounPhraseSpec,
    PhraseElement,
    PrepositionPhraseSpec,
    VerbPhraseSpec,
)
from .words import InflectedWordElement, StringElement, WordElement

__all__ = [
    "NLGElement",
    "WordElement",
    "InflectedWordElement",
    "StringElement",
    "ListElement",
    "PhraseElement",
    "NounPhraseSpec",
    "VerbPhraseSpec",
    "PrepositionPhraseSpec",
    "AdjectivePhraseSpec",
    "AdverbPhraseSpec",
    "ClauseSpec",
    "CoordinatedPhraseElement",
]
