# lexilabel/adapters/sources/json_source.py
import json
import threading
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import structlog
from pydantic import ValidationError

from lexilabel.core.domain.exceptions import LabelSourceError
from lexilabel.core.domain.language import HumanLanguage
from lexilabel.core.domain.models import LayerRecords

logger = structlog.get_logger()

class JsonLabelSource:
    """
    Label source backed by a directory tree of JSON files.

    Structure: {base_dir}/{set_id}/{locale}.json, e.g. labels/base/en_GB.json.
    Each file is a `LayerRecords` document:

        {
          "nouns": [{"name": "account", "type": "entity", "forms": {"sg": "Account"}}],
          "sections": {"Buttons": {"save": "Save", "ok": {"key": "save"}}}
        }
    """

    def __init__(self, base_dir: Union[str, Path]):
        self.base_dir = Path(base_dir)
        self._cache: Dict[Tuple[str, str], Optional[LayerRecords]] = {}
        self._lock = threading.Lock()

    def _get_file_path(self, set_id: str, language: HumanLanguage) -> Path:
        return self.base_dir / set_id / f"{language.locale}.json"

    def _read(self, path: Path) -> Optional[LayerRecords]:
        if not path.exists():
            return None
        try:
            with path.open(mode="r", encoding="utf-8") as f:
                content = f.read()
            data = json.loads(content) if content.strip() else {}
            records = LayerRecords.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.error("label_source_read_failed", path=str(path), error=str(e))
            raise LabelSourceError(str(path), str(e)) from e

        logger.debug(
            "label_layer_loaded",
            path=str(path),
            nouns=len(records.nouns),
            sections=len(records.sections),
        )
        return records

    # --- Interface Implementation ---

    def load_layer(self, set_id: str, language: HumanLanguage) -> Optional[LayerRecords]:
        key = (set_id, language.locale)
        with self._lock:
            if key in self._cache:
                return self._cache[key]
        records = self._read(self._get_file_path(set_id, language))
        with self._lock:
            return self._cache.setdefault(key, records)

    def reload(self) -> None:
        with self._lock:
            self._cache.clear()
        logger.info("label_source_reloaded", base_dir=str(self.base_dir))
