# nlg_realiser\core\domain\morphophonology\dutch.py
"""Dutch: a complementiser repeated by clause embedding is said once ("dat dat")."""

from __future__ import annotations

from typing import Sequence

from ..elements import StringElement
from ..features import LexicalCategory
from .base import PairRule, adjust_pair, clear, register_morphophonology


@register_morphophonology("nl")
class DutchMorphophonology:
    def passes(self) -> Sequence[PairRule]:
        return (self.duplicate_complementiser,)

    def adjust(self, left: StringElement, right: StringElement) -> None:
        adjust_pair(self, left, right)

    @staticmethod
    def duplicate_complementiser(left: StringElement, right: StringElement) -> None:
        if (
            left.source_category is LexicalCategory.COMPLEMENTISER
            and right.source_category is LexicalCategory.COMPLEMENTISER
            and left.text.lower() == right.text.lower()
        ):
            clear(right)


__all__ = ["DutchMorphophonology"]
