# lexilabel\shared\__init__.py
"""
Shared utilities package.

Cross-cutting concerns used by both the Core Domain and the Adapters:
- Configuration management
- Structured logging
- Dependency Injection wiring
- Timestamp parsing and formatting
"""
