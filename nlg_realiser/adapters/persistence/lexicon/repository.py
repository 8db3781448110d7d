# nlg_realiser\adapters\persistence\lexicon\repository.py
"""
Filesystem-backed lexicon repository with a per-language index cache.

Indices are built once per language and then shared: they are read-only,
so concurrent realisers can use the same instance.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Dict, Iterable, List, Union

import structlog

from .errors import LexiconError
from .index import LexiconIndex
from .loader import available_languages, load_lexicon

logger = structlog.get_logger()


class FileSystemLexiconRepository:
    """
    Loads `<base_path>/<lang>/*.json` on first use and caches the index.
    """

    def __init__(self, base_path: Union[str, Path], strict: bool = False) -> None:
        self.base_path = Path(base_path)
        self.strict = strict
        self._cache: Dict[str, LexiconIndex] = {}
        self._lock = threading.RLock()

    @staticmethod
    def _norm_lang(lang: str) -> str:
        if not isinstance(lang, str):
            return ""
        return lang.strip().casefold()

    def get_lexicon(self, lang: str) -> LexiconIndex:
        """
        Raises:
            ValueError: empty language code.
            LexiconNotFound / LexiconSchemaError: propagated from the loader.
        """
        nlang = self._norm_lang(lang)
        if not nlang:
            raise ValueError("Language code must be a non-empty string.")

        existing = self._cache.get(nlang)
        if existing is not None:
            return existing

        with self._lock:
            existing = self._cache.get(nlang)
            if existing is not None:
                return existing
            try:
                data = load_lexicon(nlang, self.base_path, strict=self.strict)
            except LexiconError as e:
                logger.error("lexicon_load_failed", lang=nlang, path=str(self.base_path), error=str(e))
                raise
            index = LexiconIndex(data)
            self._cache[nlang] = index
            logger.info("lexicon_loaded", lang=nlang, count=len(index))
            return index

    def preload(self, langs: Iterable[str]) -> None:
        for lang in langs:
            self.get_lexicon(lang)

    def available_languages(self) -> List[str]:
        return available_languages(self.base_path)

    def cached_languages(self) -> List[str]:
        with self._lock:
            return sorted(self._cache)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()


__all__ = ["FileSystemLexiconRepository"]
