# tests\adapters\test_json_source.py
from pathlib import Path

import pytest

from lexilabel.adapters.sources import JsonLabelSource
from lexilabel.core.domain.exceptions import LabelSourceError
from lexilabel.core.domain.language import HumanLanguage
from lexilabel.core.domain.renaming import StandardEntity
from lexilabel.core.labels import GrammaticalLabelSetLoader
from lexilabel.core.localizer import LocalizerFactory

FIXTURES = Path(__file__).resolve().parent.parent / "fixtures" / "labels"

EN_US = HumanLanguage("en_US")


@pytest.fixture
def json_source():
    return JsonLabelSource(FIXTURES)


class TestJsonLabelSource:
    def test_loads_a_layer(self, json_source):
        records = json_source.load_layer("base", EN_US)
        assert {noun.name for noun in records.nouns} == {"account", "contact"}
        assert records.sections["Buttons"]["save"] == "Save"

    def test_missing_file_is_no_layer(self, json_source):
        assert json_source.load_layer("base", HumanLanguage("fr")) is None
        assert json_source.load_layer("nonexistent", EN_US) is None

    def test_layers_are_cached_until_reload(self, json_source):
        first = json_source.load_layer("base", EN_US)
        assert json_source.load_layer("base", EN_US) is first
        json_source.reload()
        assert json_source.load_layer("base", EN_US) is not first

    def test_invalid_json_raises(self, tmp_path):
        (tmp_path / "base").mkdir()
        (tmp_path / "base" / "en_US.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(LabelSourceError):
            JsonLabelSource(tmp_path).load_layer("base", EN_US)

    def test_invalid_records_raise(self, tmp_path):
        (tmp_path / "base").mkdir()
        (tmp_path / "base" / "en_US.json").write_text(
            '{"nouns": [{"name": "account", "gender": "x"}]}', encoding="utf-8"
        )
        with pytest.raises(LabelSourceError):
            JsonLabelSource(tmp_path).load_layer("base", EN_US)

    def test_empty_file_is_an_empty_layer(self, tmp_path):
        (tmp_path / "base").mkdir()
        (tmp_path / "base" / "en_US.json").write_text("", encoding="utf-8")
        assert JsonLabelSource(tmp_path).load_layer("base", EN_US).is_empty


class TestLoaderOverJson:
    def test_tenant_override_on_disk(self, json_source):
        base = GrammaticalLabelSetLoader(json_source, "base")
        tenant = GrammaticalLabelSetLoader(json_source, "tenant_acme", parent=base)

        assert base.get_set("en_US").get_string("Buttons", "ok") == "Save"
        assert tenant.get_set("en_US").get_string("Buttons", "ok") == "Store"
        assert tenant.get_set("en_GB").get_string("Messages", "colour") == "Color"

    def test_localized_rendering(self, json_source, test_settings):
        factory = LocalizerFactory(GrammaticalLabelSetLoader(json_source, "base"), settings=test_settings)
        contact = [StandardEntity("contact")]
        assert factory.get_localizer("en_US").get_label("Messages", "create", renameables=contact) == (
            "Create a new contact"
        )
        assert factory.get_localizer("de_CH").get_label("Messages", "create", renameables=contact) == (
            "Einen neuen Kontakt anlegen"
        )
