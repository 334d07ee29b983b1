# lexilabel\adapters\__init__.py
"""
Infrastructure Adapters.

Concrete implementations of the Ports defined in `lexilabel.core.ports`:
- `sources`: label sources (in-memory, JSON files on disk).
- `renaming`: map-backed renaming provider.

Dependencies point INWARD. These modules depend on `lexilabel.core`,
but `lexilabel.core` never imports from here.
"""
