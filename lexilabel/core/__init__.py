# lexilabel\core\__init__.py
"""
Core Domain Layer.

This package contains the pure grammar and label-resolution logic.
- No dependencies on infrastructure (files, caches outside the process).
- Defines Interfaces (Ports) that the adapters must implement.
"""
