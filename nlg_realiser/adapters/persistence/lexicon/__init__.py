# nlg_realiser\adapters\persistence\lexicon\__init__.py
"""
lexicon/__init__.py
-------------------

Public entrypoint for the lexicon adapter:

    from nlg_realiser.adapters.persistence.lexicon import FileSystemLexiconRepository

- loader.py: filesystem + JSON shard merging
- schema.py: pydantic validation of shards
- index.py: the in-memory `Lexicon` port implementation
- repository.py: per-language caching
"""

from __future__ import annotations

from .errors import (
    LexemeNotFound,
    LexiconError,
    LexiconNotFound,
    LexiconSchemaError,
)
from .index import LexiconIndex
from .loader import available_languages, load_lexicon
from .repository import FileSystemLexiconRepository
from .types import LexicalEntry, LexiconData, LexiconMeta

__all__ = [
    "FileSystemLexiconRepository",
    "LexiconIndex",
    "LexiconData",
    "LexiconMeta",
    "LexicalEntry",
    "available_languages",
    "load_lexicon",
    "LexiconError",
    "LexiconNotFound",
    "LexiconSchemaError",
    "LexemeNotFound",
]
