# nlg_realiser\core\domain\syntax\verb_group.py
"""
core/domain/syntax/verb_group.py

Two-list builder for the verb group of a verb phrase.

Tokens are pushed innermost first (the main verb, then whatever sits
further from it), so `stack` is in push order and surface order is its
reverse. Every token is tagged AUX or MAIN at push time:

- until the main verb has been pushed, tokens are MAIN; the main verb is
  the first pushed token that is neither an adverb nor a clitic;
- right after the main verb, clitics and the "ne" particle stay MAIN;
- the first other token switches the builder to AUX for good.

Helpers may pass an explicit slot; Dutch does so to keep non-finite
auxiliaries in the clause-final MAIN cluster.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..elements import NLGElement
from ..features import LexicalCategory


class VerbSlot(str, Enum):
    AUX = "aux"
    MAIN = "main"


@dataclass(slots=True)
class VerbGroupEntry:
    element: NLGElement
    slot: VerbSlot


def _base(element: NLGElement) -> str:
    return (getattr(element, "base_form", None) or element.realisation or "").lower()


def _is_clitic(element: NLGElement) -> bool:
    return element.flag("clitic")


@dataclass
class VerbGroup:
    """
    The verb group under construction.

    `direct_object_clitic` is the clitic chosen for the direct object, if
    any, so the caller can apply past-participle agreement.
    `consumed_complements` are the complements realised as clitics inside
    the group; the caller must not realise them again. `negation`
    holds a negation particle the helper did not place inside the group
    (Dutch "niet" without an auxiliary).
    """

    entries: List[VerbGroupEntry] = field(default_factory=list)
    direct_object_clitic: Optional[NLGElement] = None
    negation: Optional[NLGElement] = None
    preverb: Optional[NLGElement] = None
    consumed_complements: List[NLGElement] = field(default_factory=list)
    _state: str = "before_main"

    def push(self, element: Optional[NLGElement], slot: Optional[VerbSlot] = None) -> None:
        if element is None:
            return
        if slot is None:
            slot = self._classify(element)
        elif slot is VerbSlot.MAIN and self._state == "before_main" and self._ends_main_run(element):
            self._state = "after_main"
        elif slot is VerbSlot.AUX:
            self._state = "aux"
        self.entries.append(VerbGroupEntry(element, slot))

    @staticmethod
    def _ends_main_run(element: NLGElement) -> bool:
        return not element.is_a(LexicalCategory.ADVERB) and not _is_clitic(element)

    def _classify(self, element: NLGElement) -> VerbSlot:
        if self._state == "before_main":
            if self._ends_main_run(element):
                self._state = "after_main"
            return VerbSlot.MAIN
        if self._state == "after_main":
            if _is_clitic(element) or _base(element) == "ne":
                return VerbSlot.MAIN
            self._state = "aux"
        return VerbSlot.AUX

    def insert_before(self, anchor: NLGElement, element: NLGElement) -> None:
        """
        Insert into the stack just before `anchor` (in push order), with
        the anchor's slot. Appends when the anchor is not in the group.
        """
        for i, entry in enumerate(self.entries):
            if entry.element is anchor:
                self.entries.insert(i, VerbGroupEntry(element, entry.slot))
                return
        self.push(element)

    def index_of(self, element: NLGElement) -> int:
        for i, entry in enumerate(self.entries):
            if entry.element is element:
                return i
        return -1

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    @property
    def stack(self) -> List[NLGElement]:
        """Tokens in push order (innermost first)."""
        return [e.element for e in self.entries]

    @property
    def surface(self) -> List[NLGElement]:
        return [e.element for e in reversed(self.entries)]

    @property
    def main(self) -> List[NLGElement]:
        return [e.element for e in reversed(self.entries) if e.slot is VerbSlot.MAIN]

    @property
    def auxiliaries(self) -> List[NLGElement]:
        return [e.element for e in reversed(self.entries) if e.slot is VerbSlot.AUX]

    @property
    def finite(self) -> Optional[NLGElement]:
        """First surface token carrying the finite flag, if any."""
        for element in self.surface:
            if element.features.get_extra("finite"):
                return element
        return None

    def __len__(self) -> int:
        return len(self.entries)


__all__ = ["VerbSlot", "VerbGroupEntry", "VerbGroup"]
