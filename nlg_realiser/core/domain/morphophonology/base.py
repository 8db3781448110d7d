# nlg_realiser\core\domain\morphophonology\base.py
"""
morphophonology/base.py

Adjustments between adjacent realised tokens, after morphology.

A rule looks at one (left, right) pair of `StringElement`s and either
rewrites the left token (possibly absorbing the right one, which is then
cleared) or leaves both alone. Cleared tokens have no realisation and are
skipped here and dropped by the orthography.

A language may need one rule settled over the whole sentence before the
next runs (French elides "le" before it contracts "de le"), so rule sets
expose their rules as ordered passes. Each pass walks the tokens left to
right; after a contraction the new left token meets the next token.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol, Sequence, Type

from ..elements import StringElement
from ..exceptions import LanguageNotFoundError

PairRule = Callable[[StringElement, StringElement], None]


class MorphophonologyRules(Protocol):
    language: str

    def passes(self) -> Sequence[PairRule]:
        """Pair rules in the order they run over the sentence."""
        ...

    def adjust(self, left: StringElement, right: StringElement) -> None:
        """Apply every pass to a single pair."""
        ...


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def is_cleared(token: StringElement) -> bool:
    return not token.realisation


def clear(token: StringElement) -> None:
    token.realisation = None


def last_word(text: str) -> str:
    return text.rsplit(" ", 1)[-1]


def replace_last_word(text: str, word: str) -> str:
    head, _, _ = text.rpartition(" ")
    return f"{head} {word}" if head else word


def adjust_pair(rules: MorphophonologyRules, left: StringElement, right: StringElement) -> None:
    for rule in rules.passes():
        if is_cleared(left) or is_cleared(right):
            return
        rule(left, right)


def apply_rules(rules: MorphophonologyRules, tokens: Iterable[StringElement]) -> List[StringElement]:
    """
    Run every pass over `tokens` in place; returns the surviving tokens.
    """
    sequence = list(tokens)
    for rule in rules.passes():
        left: Optional[StringElement] = None
        for token in sequence:
            if is_cleared(token):
                continue
            if left is not None:
                rule(left, token)
            if not is_cleared(token):
                left = token
    return [t for t in sequence if not is_cleared(t)]


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

MORPHOPHONOLOGY_REGISTRY: Dict[str, Type[Any]] = {}


def register_morphophonology(language: str):
    def decorator(cls: Type[Any]) -> Type[Any]:
        if language in MORPHOPHONOLOGY_REGISTRY:
            raise ValueError(f"Morphophonology rules already registered for '{language}'")
        MORPHOPHONOLOGY_REGISTRY[language] = cls
        cls.language = language
        return cls

    return decorator


def create_morphophonology(language: str) -> MorphophonologyRules:
    try:
        cls = MORPHOPHONOLOGY_REGISTRY[language]
    except KeyError as exc:
        raise LanguageNotFoundError(language) from exc
    return cls()


__all__ = [
    "PairRule",
    "MorphophonologyRules",
    "is_cleared",
    "clear",
    "last_word",
    "replace_last_word",
    "adjust_pair",
    "apply_rules",
    "MORPHOPHONOLOGY_REGISTRY",
    "register_morphophonology",
    "create_morphophonology",
]
