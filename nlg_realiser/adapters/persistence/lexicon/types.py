# nlg_realiser\adapters\persistence\lexicon\types.py
"""
lexicon/types.py

Plain data structures produced by the loader and consumed by the index.

No I/O here. The loader maps validated JSON shards into these types; the
index turns them into `WordElement`s with typed features.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


LanguageCode = str


@dataclass(slots=True)
class LexiconMeta:
    """
    Metadata about a single language lexicon, read from the `meta` object:

        {"meta": {"language": "nl", "version": "1.0", "description": "..."}}
    """

    language: LanguageCode
    version: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.language, str) or not self.language.strip():
            raise ValueError("LexiconMeta.language must be a non-empty string.")


@dataclass(slots=True)
class LexicalEntry:
    """
    One word of the lexicon.

    `features` holds typed grammatical features (gender, person, ...) and
    lexical exception features (irregular forms, auxiliary-selection
    flags). `variants` maps inflected surface forms to the feature key
    they fill, e.g. {"sleutels": "plural", "denk": "present1s"}.
    """

    base: str
    category: str
    features: Dict[str, Any] = field(default_factory=dict)
    variants: Dict[str, str] = field(default_factory=dict)
    source: Optional[str] = None


@dataclass(slots=True)
class LexiconData:
    meta: LexiconMeta
    entries: List[LexicalEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)


__all__ = ["LanguageCode", "LexiconMeta", "LexicalEntry", "LexiconData"]
