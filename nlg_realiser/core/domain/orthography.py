# nlg_realiser\core\domain\orthography.py
"""
core/domain/orthography.py

Joins realised tokens into sentence text.

- single spaces between tokens;
- no space after an elided token ("l'", "qu'") or before an enclitic
  ("donne" + "-le"), and an elided enclitic swallows the next hyphen
  ("donne-m'" + "-en" -> "donne-m'en");
- first letter upper-cased;
- "?" after a question, "." otherwise, unless punctuation is already there.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .elements import StringElement

TERMINAL_PUNCTUATION = (".", "?", "!")


def join_tokens(tokens: Iterable[StringElement]) -> str:
    parts: List[str] = []
    previous: Optional[str] = None
    for token in tokens:
        text = token.realisation
        if not text:
            continue
        if previous is None:
            parts.append(text)
        elif previous.endswith("'"):
            parts.append(text.lstrip("-"))
        elif text.startswith("-"):
            parts.append(text)
        else:
            parts.append(" " + text)
        previous = text
    return "".join(parts)


def capitalise(text: str) -> str:
    return text[:1].upper() + text[1:] if text else text


def punctuate(text: str, *, interrogative: bool, statement: str = ".", question: str = "?") -> str:
    if not text or text.endswith(TERMINAL_PUNCTUATION):
        return text
    return text + (question if interrogative else statement)


def sentence(
    tokens: Iterable[StringElement],
    *,
    interrogative: bool,
    statement: str = ".",
    question: str = "?",
) -> str:
    """Join, capitalise and punctuate; empty input gives ""."""
    text = join_tokens(tokens)
    if not text:
        return ""
    return punctuate(capitalise(text), interrogative=interrogative, statement=statement, question=question)


__all__ = ["join_tokens", "capitalise", "punctuate", "sentence", "TERMINAL_PUNCTUATION"]
