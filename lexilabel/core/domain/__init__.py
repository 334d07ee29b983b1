# lexilabel\core\domain\__init__.py
"""
Domain Entities and Value Objects.

Grammatical categories, per-language declension rules, nouns and the other
dictionary terms, and the compiled label templates.
"""
