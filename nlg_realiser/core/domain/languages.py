# nlg_realiser\core\domain\languages.py
"""
core/domain/languages.py

The per-language bundle of rule engines the realiser runs: clause,
verb-phrase and phrase helpers for syntax, then morphology and
morphophonology.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List

from .exceptions import LanguageNotFoundError
from .morphology import MorphologyRules, create_rules
from .morphophonology import MorphophonologyRules, create_morphophonology
from .syntax import ClauseHelper, PhraseHelper, StandardPhraseHelper, VerbPhraseHelper
from .syntax.dutch import DutchClauseHelper, DutchVerbPhraseHelper
from .syntax.english import EnglishClauseHelper, EnglishVerbPhraseHelper
from .syntax.french import FrenchClauseHelper, FrenchVerbPhraseHelper


@dataclass(frozen=True)
class LanguageRules:
    code: str
    name: str
    clause_helper: ClauseHelper
    verb_phrase_helper: VerbPhraseHelper
    phrase_helper: PhraseHelper
    morphology: MorphologyRules
    morphophonology: MorphophonologyRules


def _english() -> LanguageRules:
    return LanguageRules(
        code="en",
        name="English",
        clause_helper=EnglishClauseHelper(),
        verb_phrase_helper=EnglishVerbPhraseHelper(),
        phrase_helper=StandardPhraseHelper(),
        morphology=create_rules("en"),
        morphophonology=create_morphophonology("en"),
    )


def _french() -> LanguageRules:
    return LanguageRules(
        code="fr",
        name="French",
        clause_helper=FrenchClauseHelper(),
        verb_phrase_helper=FrenchVerbPhraseHelper(),
        phrase_helper=StandardPhraseHelper(postposed_adjectives=True),
        morphology=create_rules("fr"),
        morphophonology=create_morphophonology("fr"),
    )


def _dutch() -> LanguageRules:
    return LanguageRules(
        code="nl",
        name="Dutch",
        clause_helper=DutchClauseHelper(),
        verb_phrase_helper=DutchVerbPhraseHelper(),
        phrase_helper=StandardPhraseHelper(),
        morphology=create_rules("nl"),
        morphophonology=create_morphophonology("nl"),
    )


_BUILDERS: Dict[str, Callable[[], LanguageRules]] = {
    "en": _english,
    "fr": _french,
    "nl": _dutch,
}


def get_language(code: str) -> LanguageRules:
    """
    Rule bundle for a language code ("en", "fr", "nl"); case-insensitive.

    Raises:
        LanguageNotFoundError: for any other code.
    """
    key = (code or "").strip().lower()
    builder = _BUILDERS.get(key)
    if builder is None:
        raise LanguageNotFoundError(code)
    return builder()


def supported_languages() -> List[str]:
    return sorted(_BUILDERS)


__all__ = ["LanguageRules", "get_language", "supported_languages"]
