# lexilabel\core\ports\label_source.py
from typing import Optional, Protocol

from lexilabel.core.domain.language import HumanLanguage
from lexilabel.core.domain.models import LayerRecords


class ILabelSource(Protocol):
    """
    Port for the loading subsystem that turns raw label definitions into
    parsed records.
    Implementations could read JSON files, XML bundles, or a database.
    """

    def load_layer(self, set_id: str, language: HumanLanguage) -> Optional[LayerRecords]:
        """
        Returns the records one label-set layer defines for one language.

        Args:
            set_id: Layer identifier (e.g. 'base', 'tenant_acme').
            language: The exact language; no locale fallback is applied here.

        Returns:
            The parsed records, or None if the layer has nothing for the language.
        """
        ...

    def reload(self) -> None:
        """Drops anything cached so the next `load_layer` re-reads the underlying data."""
        ...
