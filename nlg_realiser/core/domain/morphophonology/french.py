# nlg_realiser\core\domain\morphophonology\french.py
"""
French adjacent-token rules, in pass order:

1. detached pronouns before "en"/"y": "moi" -> "me", "toi" -> "te";
2. elision before a vowel or mute h: "le arbre" -> "l'arbre",
   "est-ce que il" -> "est-ce qu'il", "si il" -> "s'il";
3. preposition + article contractions: "de le" -> "du", "à les" -> "aux",
   "à lequel" -> "auquel";
4. repeated "de"/"que" collapse to the right-hand form.

Elision runs first so that "de l'arbre" is never contracted.
"""

from __future__ import annotations

from typing import Dict, Sequence, Tuple

from ..elements import StringElement
from ..features import LexicalCategory, LexicalFeature, PronounType
from .base import PairRule, adjust_pair, clear, last_word, register_morphophonology, replace_last_word

VOWEL_STARTS = "aeiouyàâäéèêëîïôöûùüœæh"

ELIDABLE = ("le", "la", "je", "me", "te", "se", "ne", "de", "que", "ce")
# "la" only elides as article or pronoun, never as the musical note
CATEGORY_BOUND = {"la": (LexicalCategory.DETERMINER, LexicalCategory.PRONOUN)}

DETACHED: Dict[str, str] = {"moi": "me", "toi": "te"}
ATTACHING = ("en", "y")

CONTRACTIONS: Dict[Tuple[str, str], str] = {
    ("de", "le"): "du",
    ("de", "les"): "des",
    ("à", "le"): "au",
    ("à", "les"): "aux",
    ("de", "lequel"): "duquel",
    ("de", "lesquels"): "desquels",
    ("de", "lesquelles"): "desquelles",
    ("à", "lequel"): "auquel",
    ("à", "lesquels"): "auxquels",
    ("à", "lesquelles"): "auxquelles",
}

COLLAPSING = {
    "de": ("de", "du", "des"),
    "que": ("que",),
}


def _bare(text: str) -> str:
    return text.lstrip("-").lower()


def starts_with_vowel(token: StringElement) -> bool:
    first = _bare(token.text)[:1]
    if not first or first not in VOWEL_STARTS:
        return False
    return not (first == "h" and token.flag(LexicalFeature.ASPIRED_H))


@register_morphophonology("fr")
class FrenchMorphophonology:
    def passes(self) -> Sequence[PairRule]:
        return (self.attached_pronoun, self.elide, self.contract, self.collapse_duplicates)

    def adjust(self, left: StringElement, right: StringElement) -> None:
        adjust_pair(self, left, right)

    @staticmethod
    def attached_pronoun(left: StringElement, right: StringElement) -> None:
        bare = _bare(left.text)
        if bare in DETACHED and _bare(right.text) in ATTACHING:
            hyphen = "-" if left.text.startswith("-") else ""
            left.realisation = hyphen + DETACHED[bare]

    @staticmethod
    def elide(left: StringElement, right: StringElement) -> None:
        if not starts_with_vowel(right):
            return
        text = left.text
        word = last_word(text)
        hyphen = "-" if word.startswith("-") else ""
        bare = word.lstrip("-").lower()
        if bare == "si" and _bare(right.text) in ("il", "ils"):
            left.realisation = replace_last_word(text, hyphen + word.lstrip("-")[0] + "'")
            return
        if bare not in ELIDABLE:
            return
        allowed = CATEGORY_BOUND.get(bare)
        if allowed is not None and " " not in text and left.source_category not in allowed:
            return
        plain = word.lstrip("-")
        left.realisation = replace_last_word(text, hyphen + plain[:-1] + "'")

    @staticmethod
    def contract(left: StringElement, right: StringElement) -> None:
        merged = CONTRACTIONS.get((left.text.lower(), right.text.lower()))
        if merged is None:
            return
        category = right.source_category
        relative = right.get_feature("pronoun_type") is PronounType.RELATIVE
        if category is LexicalCategory.DETERMINER or relative:
            left.realisation = merged
            clear(right)

    @staticmethod
    def collapse_duplicates(left: StringElement, right: StringElement) -> None:
        forms = COLLAPSING.get(left.text.lower())
        if forms is not None and right.text.lower() in forms:
            left.realisation = right.text
            clear(right)


__all__ = ["FrenchMorphophonology", "starts_with_vowel", "CONTRACTIONS"]
