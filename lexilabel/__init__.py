# lexilabel\__init__.py
"""
lexilabel - Grammar-aware label resolution.

Resolves user-facing labels whose entity nouns may be renamed by end users,
in languages with case, gender, number and article agreement.

The package follows Hexagonal Architecture (Ports & Adapters):
- `core`: grammar model, dictionaries, label sets and the localizer.
- `adapters`: label sources and renaming providers.
- `shared`: configuration, logging and dependency injection.
"""

__version__ = "0.1.0"
