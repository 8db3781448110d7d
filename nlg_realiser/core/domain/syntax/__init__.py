# nlg_realiser\core\domain\syntax\__init__.py
"""
Syntax stage: phrase tree -> nested list of tokens awaiting morphology.
"""

from .base import ClauseHelper, PhraseHelper, SyntaxContext, VerbPhraseHelper
from .phrase import StandardPhraseHelper
from .verb_group import VerbGroup, VerbGroupEntry, VerbSlot

__all__ = [
    "ClauseHelper",
    "VerbPhraseHelper",
    "PhraseHelper",
    "SyntaxContext",
    "StandardPhraseHelper",
    "VerbGroup",
    "VerbGroupEntry",
    "VerbSlot",
]
