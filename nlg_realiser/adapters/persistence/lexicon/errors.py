# nlg_realiser\adapters\persistence\lexicon\errors.py
"""
lexicon/errors.py
-----------------

Exception types for the lexicon adapter.

Callers can tell apart:

    - a language with no lexicon directory
    - a shard that does not match the JSON schema
    - a closed-class word the rule engines need but the lexicon lacks

Typical usage:

    try:
        index = repository.get_lexicon("nl")
    except LexiconNotFound as e:
        log.error("No lexicon for 'nl': %s", e)
    except LexiconSchemaError as e:
        log.error("Bad lexicon shard: %s", e)

`LexemeNotFound` is a configuration error: the realiser cannot build an
auxiliary or a complementiser it has no entry for, and it does not guess.
"""

from __future__ import annotations


class LexiconError(Exception):
    """
    Base class for all lexicon-related errors.

    Catch this if you want to handle any lexicon problem in a single
    place; catch subclasses for more fine-grained handling.
    """


class LexiconNotFound(LexiconError):
    """Raised when no lexicon directory exists for a requested language."""

    def __init__(self, language: str, message: str | None = None) -> None:
        if message is None:
            message = f"Lexicon for language '{language}' not found."
        super().__init__(message)
        self.language = language


class LexiconSchemaError(LexiconError):
    """
    Raised when a lexicon shard does not match the expected schema.

    Examples:
        - invalid JSON
        - an entry without a base form
        - an unknown lexical category
    """

    def __init__(self, path: str, detail: str | None = None) -> None:
        msg = f"Invalid lexicon schema in '{path}'."
        if detail:
            msg += f" Detail: {detail}"
        super().__init__(msg)
        self.path = path
        self.detail = detail


class LexemeNotFound(LexiconError):
    """
    Raised when an obligatory word (auxiliary, modal, complementiser,
    closed-class pronoun) is missing from an otherwise valid lexicon.
    """

    def __init__(self, language: str, key: str, category: str | None = None) -> None:
        if category:
            message = (
                f"Lexeme '{key}' (category={category}) not found in lexicon for '{language}'."
            )
        else:
            message = f"Lexeme '{key}' not found in lexicon for '{language}'."
        super().__init__(message)
        self.language = language
        self.key = key
        self.category = category


__all__ = [
    "LexiconError",
    "LexiconNotFound",
    "LexiconSchemaError",
    "LexemeNotFound",
]
