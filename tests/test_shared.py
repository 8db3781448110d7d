# tests\test_shared.py
"""
Configuration, dependency wiring, logging and tracing.
"""

import logging
from pathlib import Path

import structlog
from opentelemetry.sdk.trace import TracerProvider

from nlg_realiser.core.domain.factory import PhraseFactory
from nlg_realiser.core.domain.realiser import Realiser
from nlg_realiser.shared.config import Settings, settings
from nlg_realiser.shared.container import Container
from nlg_realiser.shared.logging_config import (
    add_open_telemetry_spans,
    add_service_context,
    configure_logging,
)
from nlg_realiser.shared.observability import setup_observability


class TestSettings:
    def test_defaults(self):
        fresh = Settings(_env_file=None)

        assert fresh.DEFAULT_LANGUAGE == "en"
        assert fresh.SENTENCE_TERMINATOR == "."
        assert fresh.QUESTION_TERMINATOR == "?"

    def test_relative_lexicon_dir_is_anchored_at_project_root(self):
        assert settings.LEXICON_PATH.startswith(settings.PROJECT_ROOT)

    def test_absolute_lexicon_dir_is_kept(self, tmp_path):
        custom = Settings(_env_file=None, LEXICON_DIR=str(tmp_path))

        assert custom.LEXICON_PATH == str(tmp_path)

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_LANGUAGE", "nl")

        assert Settings(_env_file=None).DEFAULT_LANGUAGE == "nl"


class TestContainer:
    def test_realiser_per_language(self, container):
        """Each call builds a realiser over the shared lexicon of its language."""
        factory = container.phrase_factory(language="nl")
        realiser = container.realiser(language="nl")

        assert isinstance(factory, PhraseFactory)
        assert isinstance(realiser, Realiser)
        assert realiser.language == "nl"
        assert realiser.lexicon is container.lexicon_repository().get_lexicon("nl")

        clause = factory.create_clause("Jan", "werken")
        assert realiser.realise_sentence(clause) == "Jan werkt."

    def test_default_language(self, container):
        assert container.realiser().language == settings.DEFAULT_LANGUAGE

    def test_default_language_follows_config(self, container):
        """The config provider feeds the default language to both builders."""
        container.config.from_dict({"DEFAULT_LANGUAGE": "nl"})

        assert container.realiser().language == "nl"
        assert container.phrase_factory().language == "nl"

    def test_strict_schema_follows_config(self):
        fresh = Container()
        fresh.config.from_dict({"LEXICON_STRICT_SCHEMA": True})

        repository = fresh.lexicon_repository()

        assert repository.strict is True
        assert repository.base_path == Path(settings.LEXICON_PATH)

    def test_realisers_are_not_shared(self, container):
        assert container.realiser(language="fr") is not container.realiser(language="fr")


class TestLogging:
    def test_span_ids_outside_a_span(self):
        event = add_open_telemetry_spans(None, None, {"event": "x"})

        assert event["trace_id"] is None
        assert event["span_id"] is None

    def test_span_ids_inside_a_span(self):
        tracer = TracerProvider().get_tracer(__name__)

        with tracer.start_as_current_span("realise"):
            event = add_open_telemetry_spans(None, None, {"event": "x"})

        assert len(event["trace_id"]) == 32
        assert len(event["span_id"]) == 16

    def test_configure_logging(self):
        """Stdlib records are routed through the structlog renderer."""
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        try:
            configure_logging("debug")

            assert structlog.is_configured()
            assert root.level == logging.DEBUG
            assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
        finally:
            root.handlers = handlers
            root.setLevel(level)
            structlog.reset_defaults()

    def test_service_context(self):
        event = add_service_context(None, None, {"event": "x"})

        assert event["service"] == settings.APP_NAME
        assert event["env"] == settings.APP_ENV.value


class TestObservability:
    def test_setup_observability(self):
        provider = setup_observability()

        assert isinstance(provider, TracerProvider)
        assert provider.resource.attributes["service.name"] == settings.OTEL_SERVICE_NAME
