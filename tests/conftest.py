# tests\conftest.py
import pytest

from nlg_realiser.adapters.persistence.lexicon import FileSystemLexiconRepository
from nlg_realiser.core.domain.factory import PhraseFactory
from nlg_realiser.core.domain.realiser import Realiser
from nlg_realiser.shared.config import settings
from nlg_realiser.shared.container import Container


@pytest.fixture(scope="session")
def lexicon_repository():
    """The lexicons shipped under data/lexicon, loaded once for the session."""
    return FileSystemLexiconRepository(settings.LEXICON_PATH, strict=True)


# --- English ---

@pytest.fixture(scope="session")
def en_lexicon(lexicon_repository):
    return lexicon_repository.get_lexicon("en")


@pytest.fixture
def en_factory(en_lexicon):
    return PhraseFactory(en_lexicon)


@pytest.fixture
def en_realiser(en_lexicon):
    return Realiser(en_lexicon, "en")


# --- French ---

@pytest.fixture(scope="session")
def fr_lexicon(lexicon_repository):
    return lexicon_repository.get_lexicon("fr")


@pytest.fixture
def fr_factory(fr_lexicon):
    return PhraseFactory(fr_lexicon)


@pytest.fixture
def fr_realiser(fr_lexicon):
    return Realiser(fr_lexicon, "fr")


# --- Dutch ---

@pytest.fixture(scope="session")
def nl_lexicon(lexicon_repository):
    return lexicon_repository.get_lexicon("nl")


@pytest.fixture
def nl_factory(nl_lexicon):
    return PhraseFactory(nl_lexicon)


@pytest.fixture
def nl_realiser(nl_lexicon):
    return Realiser(nl_lexicon, "nl")


@pytest.fixture(scope="function")
def container(lexicon_repository):
    """
    Sets up the Dependency Injection Container for testing.
    The repository provider is overridden with the session-wide instance
    so lexicons are not reloaded per test.
    """
    container = Container()
    container.lexicon_repository.override(lexicon_repository)

    yield container

    container.lexicon_repository.reset_override()
