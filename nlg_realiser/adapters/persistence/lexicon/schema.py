# nlg_realiser\adapters\persistence\lexicon\schema.py
"""
lexicon/schema.py
=================

Pydantic models for lexicon JSON shards.

A shard looks like:

    {
      "meta": {"language": "nl", "version": "1.0"},
      "entries": [
        {"base": "krijgen", "category": "verb",
         "features": {"past_participle": "gekregen"},
         "variants": {"krijg": "present1s"}}
      ]
    }

Validation is intentionally shallow: it checks the shape and the closed
category set, and leaves feature values to the index.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from nlg_realiser.core.domain.features import LexicalCategory

from .errors import LexiconSchemaError


SCHEMA_VERSION: int = 1


class LexiconMetaModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    language: str = Field(..., min_length=1)
    version: Optional[str] = None
    description: Optional[str] = None
    schema_version: int = SCHEMA_VERSION


class LexicalEntryModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base: str = Field(..., min_length=1)
    category: LexicalCategory
    features: Dict[str, Any] = Field(default_factory=dict)
    variants: Dict[str, str] = Field(default_factory=dict)

    @field_validator("base")
    @classmethod
    def _strip_base(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("base must not be blank")
        return v


class LexiconFileModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    meta: LexiconMetaModel
    entries: List[LexicalEntryModel] = Field(default_factory=list)


def validate_shard(raw: Mapping[str, Any], path: str) -> LexiconFileModel:
    """
    Validate one decoded shard.

    Raises:
        LexiconSchemaError: with the pydantic error summary as detail.
    """
    try:
        return LexiconFileModel.model_validate(raw)
    except ValidationError as exc:
        detail = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise LexiconSchemaError(path, detail) from exc


__all__ = [
    "SCHEMA_VERSION",
    "LexiconMetaModel",
    "LexicalEntryModel",
    "LexiconFileModel",
    "validate_shard",
]
