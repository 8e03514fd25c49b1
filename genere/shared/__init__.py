"""
Shared utilities package.

Cross-cutting concerns used by the core and the front ends:
- Configuration management
- Structured logging
- Tracing (Observability)
"""
