# nlg_realiser\adapters\persistence\lexicon\index.py
"""
lexicon/index.py

In-memory index over a loaded `LexiconData`; the concrete `Lexicon` port.

Design goals
------------
- No filesystem knowledge (the loader handles I/O).
- Deterministic, case-insensitive lookups.
- First-writer-wins on collisions: the first entry of a base form (in
  shard order) is the one returned.
- Every lookup hands out a fresh `WordElement`, so phrase builders can
  set features on their words without touching the shared index.

Lookup surface
--------------
- by base form (and category),
- by inflected variant ("sleutels" -> "sleutel", number=plural),
- by feature constraints (pronoun and relative-pronoun selection).
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Mapping, Optional, Tuple

from nlg_realiser.core.domain.elements import WordElement
from nlg_realiser.core.domain.feature_set import FeatureSet, feature_key
from nlg_realiser.core.domain.features import (
    LexicalCategory,
    NumberAgreement,
    Person,
    Tense,
)

from .errors import LexemeNotFound
from .types import LexicalEntry, LexiconData

_CELL_RE = re.compile(r"^(present|past)([123])([sp])$")
_PERSONS = {"1": Person.FIRST, "2": Person.SECOND, "3": Person.THIRD}


def _variant_key_features(key: str) -> Dict[str, Any]:
    """Grammatical features implied by a variant key such as "present1s"."""
    if key == "plural":
        return {"number": NumberAgreement.PLURAL}
    if key == "past":
        return {"tense": Tense.PAST}
    m = _CELL_RE.match(key)
    if m:
        return {
            "tense": Tense(m.group(1)),
            "person": _PERSONS[m.group(2)],
            "number": NumberAgreement.PLURAL if m.group(3) == "p" else NumberAgreement.SINGULAR,
        }
    return {}


def _values_equal(a: Any, b: Any) -> bool:
    if isinstance(a, bool) or isinstance(b, bool):
        return bool(a) == bool(b)
    return feature_key(a) == feature_key(b)


class LexiconIndex:
    """
    Helper around a `LexiconData` that exposes the lookups the factory and
    the rule engines need.
    """

    def __init__(self, data: LexiconData) -> None:
        self.data = data
        self.language: str = data.meta.language

        self._by_base: Dict[Tuple[str, LexicalCategory], WordElement] = {}
        self._by_base_any: Dict[str, WordElement] = {}
        self._variants: Dict[str, List[Tuple[WordElement, str]]] = {}
        self._by_category: Dict[LexicalCategory, List[WordElement]] = {}

        self._build_indices()

    # Lexicons are read-only; copies of a phrase tree share them.
    def __deepcopy__(self, memo: Dict[int, Any]) -> "LexiconIndex":
        return self

    # ------------------------------------------------------------------
    # Index construction
    # ------------------------------------------------------------------

    @staticmethod
    def _to_word(entry: LexicalEntry) -> WordElement:
        category = LexicalCategory(entry.category)
        features = FeatureSet.from_mapping(entry.features)
        for form, key in entry.variants.items():
            if features.get_extra(key) is None:
                features.set_extra(key, form)
        return WordElement(entry.base, category, features)

    def _build_indices(self) -> None:
        for entry in self.data.entries:
            word = self._to_word(entry)
            base = word.base_form.casefold()

            self._by_base.setdefault((base, word.category), word)
            self._by_base_any.setdefault(base, word)
            self._by_category.setdefault(word.category, []).append(word)

            for form, key in entry.variants.items():
                self._variants.setdefault(form.casefold(), []).append((word, key))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _clone(word: WordElement) -> WordElement:
        return WordElement(word.base_form, word.category, word.features.copy(), word.word_id)

    def _find_base(self, base_form: str, category: LexicalCategory) -> Optional[WordElement]:
        k = base_form.casefold()
        if category is LexicalCategory.ANY:
            return self._by_base_any.get(k)
        return self._by_base.get((k, category))

    def _find_variant(
        self, form: str, category: LexicalCategory
    ) -> Optional[Tuple[WordElement, str]]:
        for word, key in self._variants.get(form.casefold(), ()):
            if category is LexicalCategory.ANY or word.category is category:
                return word, key
        return None

    # ------------------------------------------------------------------
    # Public lookup API (Lexicon port)
    # ------------------------------------------------------------------

    def has_word(self, base_form: str, category: LexicalCategory = LexicalCategory.ANY) -> bool:
        return self._find_base(base_form, category) is not None

    def lookup_variant(
        self, form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> Optional[WordElement]:
        hit = self._find_variant(form, category)
        return self._clone(hit[0]) if hit else None

    def variant_features(
        self, form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> Mapping[str, Any]:
        if self._find_base(form, category) is not None:
            return {}
        hit = self._find_variant(form, category)
        return _variant_key_features(hit[1]) if hit else {}

    def lookup_word(
        self, base_form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> WordElement:
        """
        Resolution order:
          1) base form (+ category)
          2) inflected variant
          3) a fresh entry with no lexical features
        """
        word = self._find_base(base_form, category)
        if word is not None:
            return self._clone(word)
        hit = self._find_variant(base_form, category)
        if hit is not None:
            return self._clone(hit[0])
        return WordElement(base_form, category)

    def get_word(
        self, base_form: str, category: LexicalCategory = LexicalCategory.ANY
    ) -> WordElement:
        word = self._find_base(base_form, category)
        if word is None:
            raise LexemeNotFound(self.language, base_form, category.value)
        return self._clone(word)

    def lookup_by_features(
        self, category: LexicalCategory, constraints: Mapping[str, Any]
    ) -> Optional[WordElement]:
        """
        Best entry of `category` for the given constraints.

        An entry whose feature explicitly differs from a constraint is
        rejected. Among the rest, the one matching the most constraints
        explicitly wins; ties go to the first in lexicon order. None-valued
        constraints are ignored.
        """
        wanted = {feature_key(k): v for k, v in constraints.items() if v is not None}
        best: Optional[WordElement] = None
        best_score = -1

        for word in self._by_category.get(category, ()):
            score = 0
            for key, value in wanted.items():
                actual = word.features.get(key)
                if actual is None:
                    continue
                if not _values_equal(actual, value):
                    score = -1
                    break
                score += 1
            if score > best_score:
                best, best_score = word, score

        return self._clone(best) if best is not None else None

    def words(self, category: LexicalCategory) -> List[WordElement]:
        return [self._clone(w) for w in self._by_category.get(category, ())]

    def __len__(self) -> int:
        return len(self.data.entries)


__all__ = ["LexiconIndex"]
