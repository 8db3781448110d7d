# nlg_realiser\__init__.py
"""
NLG Realiser - rule-based multilingual surface realisation.

Turns feature-annotated phrase trees into English, French and Dutch
sentences. The package follows a Hexagonal layout:

- core/domain: features, elements, syntax helpers, morphology,
  morphophonology and the realiser entry point.
- core/ports: the Lexicon port consumed by the core.
- adapters/persistence/lexicon: JSON-backed lexicon implementation.
- shared: configuration, logging, tracing and dependency wiring.
"""

__version__ = "1.0.0"
