# nlg_realiser\core\domain\elements\base.py
"""
core/domain/elements/base.py

Common capabilities of every element in a phrase tree: a category, a
typed feature set, a parent back-reference and (after realisation) a
surface string.
"""

from __future__ import annotations

from typing import Any, List, Optional

from ..feature_set import FeatureSet
from ..features import DiscourseFunction


class NLGElement:
    """
    Base class for words, phrases, lists and canned strings.

    `parent` is navigation only. It is set when a child is attached and
    followed upwards for agreement lookups.
    """

    def __init__(self, category: Any = None, features: Optional[FeatureSet] = None) -> None:
        self.category = category
        self.features: FeatureSet = features if features is not None else FeatureSet()
        self.parent: Optional[NLGElement] = None
        self.realisation: Optional[str] = None

    # ------------------------------------------------------------------
    # Features
    # ------------------------------------------------------------------

    def get_feature(self, key: Any, default: Any = None) -> Any:
        return self.features.get(key, default)

    def set_feature(self, key: Any, value: Any) -> None:
        self.features.set(key, value)

    def has_feature(self, key: Any) -> bool:
        return self.features.has(key)

    def flag(self, key: Any) -> bool:
        return self.features.flag(key)

    @property
    def discourse_function(self) -> Optional[DiscourseFunction]:
        return self.features.discourse_function

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def is_a(self, *categories: Any) -> bool:
        return self.category in categories

    @property
    def children(self) -> List["NLGElement"]:
        return []

    def ancestors(self):
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def attach(self, child: Optional["NLGElement"]) -> Optional["NLGElement"]:
        """Make `child` point back at this element."""
        if child is not None:
            child.parent = self
        return child

    def __repr__(self) -> str:
        cat = getattr(self.category, "value", self.category)
        return f"<{type(self).__name__} {cat}>"
