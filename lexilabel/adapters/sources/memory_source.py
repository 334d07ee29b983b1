# lexilabel/adapters/sources/memory_source.py
"""
Label source held entirely in memory.

Used by tests and by applications that build label data programmatically.
Layers are stored as `LayerRecords`, or as plain dicts validated on `put`.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple, Union

from lexilabel.core.domain.language import HumanLanguage, LocaleLike
from lexilabel.core.domain.models import LayerRecords


class InMemoryLabelSource:
    def __init__(self) -> None:
        self._layers: Dict[Tuple[str, str], LayerRecords] = {}
        # Number of load_layer calls that found data; lets tests observe caching.
        self.load_count = 0

    def put(
        self,
        set_id: str,
        language: LocaleLike,
        records: Union[LayerRecords, Mapping[str, Any]],
    ) -> LayerRecords:
        if not isinstance(records, LayerRecords):
            records = LayerRecords.model_validate(dict(records))
        self._layers[(set_id, HumanLanguage.parse(language).locale)] = records
        return records

    def add_labels(self, set_id: str, language: LocaleLike, section: str, labels: Mapping[str, str]) -> None:
        """Merge plain template strings into a section of an existing (or new) layer."""
        key = (set_id, HumanLanguage.parse(language).locale)
        current = self._layers.get(key)
        sections = {} if current is None else {s: dict(v) for s, v in current.sections.items()}
        sections.setdefault(section, {}).update(labels)
        base = LayerRecords() if current is None else current
        self._layers[key] = base.model_copy(update={"sections": sections})

    def remove(self, set_id: str, language: LocaleLike) -> None:
        self._layers.pop((set_id, HumanLanguage.parse(language).locale), None)

    def load_layer(self, set_id: str, language: HumanLanguage) -> Optional[LayerRecords]:
        records = self._layers.get((set_id, language.locale))
        if records is not None:
            self.load_count += 1
        return records

    def reload(self) -> None:
        # Nothing is cached; data is always read from the in-memory map.
        pass
