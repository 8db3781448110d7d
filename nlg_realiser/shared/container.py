# nlg_realiser\shared\container.py
from typing import Optional

from dependency_injector import containers, providers

from nlg_realiser.adapters.persistence.lexicon import FileSystemLexiconRepository
from nlg_realiser.core.domain.factory import PhraseFactory
from nlg_realiser.core.domain.realiser import Realiser
from nlg_realiser.shared.config import settings


def build_phrase_factory(
    repository: FileSystemLexiconRepository,
    default_language: str,
    language: Optional[str] = None,
) -> PhraseFactory:
    return PhraseFactory(repository.get_lexicon(language or default_language))


def build_realiser(
    repository: FileSystemLexiconRepository,
    default_language: str,
    language: Optional[str] = None,
) -> Realiser:
    code = language or default_language
    return Realiser(repository.get_lexicon(code), code)


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    Usage:
        factory = container.phrase_factory(language="nl")
        realiser = container.realiser(language="nl")
    """

    # 1. Configuration (wrapped so tests can override it)
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Persistence (Singleton: each language's lexicon is loaded once and shared)
    # LEXICON_PATH is a computed property, so it is read from settings directly.
    lexicon_repository = providers.Singleton(
        FileSystemLexiconRepository,
        base_path=settings.LEXICON_PATH,
        strict=config.LEXICON_STRICT_SCHEMA,
    )

    # 3. Builders and realisers (Factory: cheap, one per call, over the shared lexicons)
    phrase_factory = providers.Factory(
        build_phrase_factory,
        repository=lexicon_repository,
        default_language=config.DEFAULT_LANGUAGE,
    )

    realiser = providers.Factory(
        build_realiser,
        repository=lexicon_repository,
        default_language=config.DEFAULT_LANGUAGE,
    )


# Instantiate the container for global access
container = Container()
