# nlg_realiser\core\domain\feature_set.py
"""
core/domain/feature_set.py

Typed feature storage attached to every element.

The universal grammatical features are dataclass fields, so typos surface
as attribute errors and values are coerced to their enum on assignment.
Everything else (irregular forms, per-cell conjugations, language-specific
flags) lives in `extra`, keyed by plain string.

Lookups never raise: an absent key reads as None, and rule code applies
its own default (unset NUMBER means singular, unset PERSON means third).
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from .features import (
    ClauseStatus,
    DiscourseFunction,
    Form,
    Gender,
    InterrogativeType,
    NumberAgreement,
    Person,
    PronounType,
    Tense,
)


# Enum type of each enum-valued field; raw strings are coerced on set().
_ENUM_FIELDS: Dict[str, type] = {
    "tense": Tense,
    "person": Person,
    "number": NumberAgreement,
    "gender": Gender,
    "form": Form,
    "discourse_function": DiscourseFunction,
    "clause_status": ClauseStatus,
    "pronoun_type": PronounType,
}


def feature_key(key: Any) -> str:
    """Normalise an enum or string key to its lowercase string form."""
    if isinstance(key, Enum):
        key = key.value
    return str(key).lower()


@dataclass(slots=True)
class FeatureSet:
    # --- enum-valued ---
    tense: Optional[Tense] = None
    person: Optional[Person] = None
    number: Optional[NumberAgreement] = None
    gender: Optional[Gender] = None
    form: Optional[Form] = None
    discourse_function: Optional[DiscourseFunction] = None
    clause_status: Optional[ClauseStatus] = None
    interrogative_type: Optional[InterrogativeType] = None
    pronoun_type: Optional[PronounType] = None

    # --- boolean flags (None means unset) ---
    perfect: Optional[bool] = None
    progressive: Optional[bool] = None
    passive: Optional[bool] = None
    negated: Optional[bool] = None
    pronominal: Optional[bool] = None
    possessive: Optional[bool] = None
    elided: Optional[bool] = None
    proper: Optional[bool] = None
    reflexive: Optional[bool] = None
    appositive: Optional[bool] = None
    suppressed_complementiser: Optional[bool] = None
    clitic: Optional[bool] = None
    non_morph: Optional[bool] = None
    realise_auxiliary: Optional[bool] = None
    aggregate_auxiliary: Optional[bool] = None
    raise_specifier: Optional[bool] = None
    comparative: Optional[bool] = None
    superlative: Optional[bool] = None
    predicative: Optional[bool] = None

    # --- open values ---
    modal: Optional[str] = None
    complementiser: Any = None
    relative_phrase: Any = None

    extra: Dict[str, Any] = field(default_factory=dict)

    # ------------------------------------------------------------------
    # Keyed access
    # ------------------------------------------------------------------

    @classmethod
    def typed_keys(cls) -> Tuple[str, ...]:
        return _TYPED_KEYS

    def get(self, key: Any, default: Any = None) -> Any:
        k = feature_key(key)
        if k in _TYPED_KEY_SET:
            value = getattr(self, k)
        else:
            value = self.extra.get(k)
        return default if value is None else value

    def set(self, key: Any, value: Any) -> None:
        k = feature_key(key)
        if k in _TYPED_KEY_SET:
            setattr(self, k, _coerce(k, value))
        elif value is None:
            self.extra.pop(k, None)
        else:
            self.extra[k] = value

    def remove(self, key: Any) -> None:
        self.set(key, None)

    def has(self, key: Any) -> bool:
        return self.get(key) is not None

    def flag(self, key: Any) -> bool:
        """Truth value of a boolean feature; unset reads as False."""
        return bool(self.get(key))

    # Shorthands for the extension map
    def get_extra(self, key: Any, default: Any = None) -> Any:
        return self.extra.get(feature_key(key), default)

    def set_extra(self, key: Any, value: Any) -> None:
        k = feature_key(key)
        if value is None:
            self.extra.pop(k, None)
        else:
            self.extra[k] = value

    # ------------------------------------------------------------------
    # Bulk operations
    # ------------------------------------------------------------------

    def items(self) -> Iterator[Tuple[str, Any]]:
        """All set features, typed fields first."""
        for k in _TYPED_KEYS:
            value = getattr(self, k)
            if value is not None:
                yield k, value
        yield from self.extra.items()

    def copy(self) -> "FeatureSet":
        clone = FeatureSet(**{k: getattr(self, k) for k in _TYPED_KEYS})
        clone.extra = dict(self.extra)
        return clone

    def update_from(self, other: "FeatureSet | Mapping[str, Any]") -> None:
        """Copy every set feature of `other` over this one."""
        for k, value in list(other.items()):
            self.set(k, value)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[Any, Any]]) -> "FeatureSet":
        fs = cls()
        for k, value in (data or {}).items():
            fs.set(k, value)
        return fs


_TYPED_KEYS: Tuple[str, ...] = tuple(f.name for f in fields(FeatureSet) if f.name != "extra")
_TYPED_KEY_SET = frozenset(_TYPED_KEYS)
_BOOL_KEYS = frozenset(
    f.name for f in fields(FeatureSet) if f.type == "Optional[bool]"
)


def _coerce(key: str, value: Any) -> Any:
    if value is None:
        return None
    if key == "interrogative_type":
        return InterrogativeType.parse(value)
    enum_type = _ENUM_FIELDS.get(key)
    if enum_type is not None and not isinstance(value, enum_type):
        return enum_type(feature_key(value))
    if key in _BOOL_KEYS and isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return value


__all__ = ["FeatureSet", "feature_key"]
