# tests\__init__.py
"""
Test Suite for the NLG Realiser.

Organization:
- `core`: rule engines and the realiser, run against the shipped lexicons.
- `adapters`: the JSON lexicon loader, index and repository.
- `test_shared.py`: configuration, dependency wiring, logging and tracing.
"""
