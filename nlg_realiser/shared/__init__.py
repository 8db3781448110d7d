# nlg_realiser\shared\__init__.py
"""
Shared utilities package.

Cross-cutting concerns used by both the core domain and the adapters:
- Configuration management
- Structured logging
- Tracing (Observability)
- Dependency wiring
"""
