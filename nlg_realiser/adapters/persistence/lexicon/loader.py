# nlg_realiser\adapters\persistence\lexicon\loader.py
"""
lexicon/loader.py
=================

Load per-language lexicon shards from `data/lexicon/{lang}/*.json`.

Goals
-----
- One entry point: `load_lexicon(lang_code, base_dir)` -> `LexiconData`.
- Merge every shard of a language (core.json, extra domain files, ...).
- Deterministic loading: shards are read in sorted filename order and
  entries keep their file order, so the first entry of a base form wins
  in the index.

Error behaviour
---------------
- A missing language directory raises `LexiconNotFound`.
- A shard with invalid JSON or an invalid schema raises
  `LexiconSchemaError` in strict mode. Otherwise it is logged and skipped.
- A directory with no loadable shard raises `LexiconNotFound`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from .errors import LexiconNotFound, LexiconSchemaError
from .schema import LexiconFileModel, validate_shard
from .types import LexicalEntry, LexiconData, LexiconMeta

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------


def _language_dir(base_dir: PathLike, lang_code: str) -> Path:
    """e.g. "nl" -> <base_dir>/nl/"""
    return Path(base_dir) / lang_code.strip().casefold()


def available_languages(base_dir: PathLike) -> List[str]:
    """Language codes that have a lexicon directory with at least one shard."""
    root = Path(base_dir)
    if not root.is_dir():
        return []
    return sorted(
        p.name for p in root.iterdir() if p.is_dir() and any(p.glob("*.json"))
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _read_json(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise LexiconSchemaError(str(path), "root must be a JSON object")
    return data


def _load_shard(path: Path, strict: bool) -> Optional[LexiconFileModel]:
    try:
        return validate_shard(_read_json(path), str(path))
    except json.JSONDecodeError as e:
        if strict:
            raise LexiconSchemaError(str(path), f"JSON decode error: {e}") from e
        logger.warning("Skipping %s: JSON decode error: %s", path.name, e)
    except (LexiconSchemaError, ValidationError) as e:
        if strict:
            raise
        logger.warning("Skipping %s: %s", path.name, e)
    return None


def _to_entry(model: Any, source: str) -> LexicalEntry:
    return LexicalEntry(
        base=model.base,
        category=model.category.value,
        features=dict(model.features),
        variants=dict(model.variants),
        source=source,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_lexicon(lang_code: str, base_dir: PathLike, *, strict: bool = False) -> LexiconData:
    """
    Load and merge every shard of `lang_code`.

    Raises:
        LexiconNotFound: no directory, or no valid shard in it.
        LexiconSchemaError: strict mode and a shard is malformed.
    """
    lang_dir = _language_dir(base_dir, lang_code)
    if not lang_dir.is_dir():
        raise LexiconNotFound(lang_code, f"Lexicon directory not found: {lang_dir}")

    meta: Optional[LexiconMeta] = None
    entries: List[LexicalEntry] = []

    for path in sorted(lang_dir.glob("*.json")):
        shard = _load_shard(path, strict)
        if shard is None:
            continue
        if shard.meta.language.casefold() != lang_code.casefold():
            logger.warning(
                "Shard %s declares language %r, expected %r.",
                path.name, shard.meta.language, lang_code,
            )
        if meta is None:
            meta = LexiconMeta(
                language=lang_code,
                version=shard.meta.version,
                description=shard.meta.description,
            )
        entries.extend(_to_entry(e, path.name) for e in shard.entries)
        logger.debug("Loaded %d entries from %s", len(shard.entries), path.name)

    if meta is None:
        raise LexiconNotFound(lang_code, f"No valid lexicon shard in {lang_dir}")

    return LexiconData(meta=meta, entries=entries)


__all__ = ["available_languages", "load_lexicon"]
