# nlg_realiser\core\__init__.py
"""
Core Domain Layer.

Pure realisation logic: the feature model, the element model, the
per-language syntax helpers, morphology and morphophonology rules.
The core depends on the Lexicon port only, never on the filesystem.
"""
