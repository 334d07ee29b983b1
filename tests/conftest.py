# tests\conftest.py
import pytest

from lexilabel.adapters.renaming import MapRenamingProvider
from lexilabel.adapters.sources import InMemoryLabelSource
from lexilabel.core.domain.declension import get_declension
from lexilabel.core.domain.dictionary import LanguageDictionary
from lexilabel.core.domain.language import ENGLISH, GERMAN, LanguageProvider
from lexilabel.core.domain.models import LayerRecords
from lexilabel.core.domain.renaming import RenamingContext
from lexilabel.core.labels import GrammaticalLabelSetLoader
from lexilabel.core.localizer import LocalizerFactory
from lexilabel.shared.config import AppEnv, Settings
from lexilabel.shared.container import Container

# ---------------------------------------------------------------------------
# Sample label data
# ---------------------------------------------------------------------------

EN_US = {
    "nouns": [
        {"name": "account", "type": "entity", "forms": {"sg": "Account", "pl": "Accounts"}, "plural_alias": "Accounts"},
        {"name": "opportunity", "type": "entity", "forms": {"sg": "Opportunity"}},
        {"name": "contact", "type": "entity", "forms": {"sg": "Contact"}},
        {"name": "hour", "forms": {"sg": "hour"}, "starts_with": "v"},
    ],
    "adjectives": [
        {"name": "new", "base": "new"},
    ],
    "sections": {
        "Buttons": {
            "save": "Save",
            "cancel": "Cancel",
            "ok": {"key": "save"},
        },
        "Global": {
            "confirm": {"key": "ok", "section": "Buttons"},
        },
        "Wizard": {
            "step": "Step {0} of {1}",
            "braces": "{{{0}}}",
        },
        "Messages": {
            "create": "Create <entity entity=\"0\" article=\"a\"/>",
            "created": "<Entity entity=\"0\" article=\"a\"/> was created.",
            "created_many": "<Entity entity=\"0\" plural=\"y\" article=\"a\"/> were created.",
            "new_account": "Create <new/> <account article=\"a\"/>",
            "list": "All <Accounts/>",
            "count": "<plural num=\"0\"><when val=\"one\">{0} <account/></when>{0} <accounts/></plural>",
            "wait": "Wait <hour article=\"a\"/>",
            "colour": "Color",
            "markup": "Line one<br/>Line two",
        },
    },
}

EN_GB = {
    "sections": {
        "Messages": {"colour": "Colour"},
    },
}

TENANT_EN_US = {
    "sections": {
        "Buttons": {"save": "Store"},
    },
}

DE = {
    "nouns": [
        {"name": "account", "type": "entity", "gender": "n", "forms": {"sg": "Konto", "pl": "Konten"}},
        {"name": "opportunity", "type": "entity", "gender": "f", "forms": {"sg": "Opportunity", "pl": "Opportunities"}},
        {"name": "contact", "type": "entity", "gender": "m", "forms": {"sg": "Kontakt", "pl": "Kontakte"}},
    ],
    "adjectives": [
        {"name": "new", "base": "neu"},
    ],
    "sections": {
        "Buttons": {"save": "Speichern"},
        "Messages": {
            "created": "<Entity entity=\"0\" article=\"the\"/> wurde erstellt.",
            "create": "<New/> <Entity entity=\"0\" article=\"a\"/> erstellen",
            "create_many": "<New/> <Entity entity=\"0\" plural=\"y\" article=\"a\"/> erstellen",
            "delete": "<Entity entity=\"0\" article=\"the\" case=\"a\"/> löschen",
            "with_many": "mit <Entity entity=\"0\" plural=\"y\" case=\"d\"/>",
            "fresh": "<gender><when val=\"f\">Neue</when><when val=\"m\">Neuer</when>Neues</gender> <Entity entity=\"0\"/>",
        },
    },
}

FR = {
    "nouns": [
        {"name": "account", "type": "entity", "gender": "m", "forms": {"sg": "compte"}},
        {"name": "opportunity", "type": "entity", "gender": "f", "forms": {"sg": "opportunité"}},
    ],
    "sections": {
        "Messages": {
            "created": "<Entity entity=\"0\" article=\"the\"/> a été créé.",
            "all": "Tous <entity entity=\"0\" plural=\"y\" article=\"the\"/>",
        },
    },
}

SV = {
    "nouns": [
        {"name": "account", "type": "entity", "gender": "n", "forms": {"sg": "konto", "pl": "konton"}},
        {"name": "car", "type": "entity", "gender": "c", "forms": {"sg": "bil", "pl": "bilar"}},
    ],
    "sections": {
        "Messages": {
            "the_entity": "<Entity entity=\"0\" article=\"the\"/>",
            "create": "Skapa <entity entity=\"0\" article=\"a\"/>",
        },
    },
}

JA = {
    "nouns": [
        {"name": "account", "type": "entity", "forms": {"sg": "取引先"}},
    ],
    "sections": {
        "Messages": {"all": "すべての<Entity entity=\"0\" plural=\"y\"/>"},
    },
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="function")
def test_settings():
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, APP_ENV=AppEnv.TESTING)

@pytest.fixture(scope="function")
def label_source():
    """In-memory source holding the base set and one tenant override."""
    source = InMemoryLabelSource()
    source.put("base", "en_US", EN_US)
    source.put("base", "en_GB", EN_GB)
    source.put("base", "de", DE)
    source.put("base", "fr", FR)
    source.put("base", "sv", SV)
    source.put("base", "ja", JA)
    source.put("tenant_acme", "en_US", TENANT_EN_US)
    return source

@pytest.fixture(scope="function")
def language_provider():
    return LanguageProvider("en_US")

@pytest.fixture(scope="function")
def base_loader(label_source, language_provider):
    return GrammaticalLabelSetLoader(label_source, "base", language_provider=language_provider)

@pytest.fixture(scope="function")
def tenant_loader(label_source, language_provider, base_loader):
    return GrammaticalLabelSetLoader(
        label_source, "tenant_acme", parent=base_loader, language_provider=language_provider
    )

@pytest.fixture(scope="function")
def localizer_factory(base_loader, language_provider, test_settings):
    return LocalizerFactory(base_loader, language_provider, test_settings)

@pytest.fixture(scope="function")
def renaming():
    """A per-test renaming context backed by a map provider."""
    return RenamingContext(MapRenamingProvider())

@pytest.fixture
def en_dictionary():
    return LanguageDictionary.from_records(ENGLISH, LayerRecords.model_validate(EN_US))

@pytest.fixture
def de_dictionary():
    return LanguageDictionary.from_records(GERMAN, LayerRecords.model_validate(DE))

@pytest.fixture
def english():
    return get_declension("en")

@pytest.fixture
def german():
    return get_declension("de")

@pytest.fixture(scope="function")
def container(label_source, test_settings):
    """
    Sets up the Dependency Injection Container for testing.
    It overrides the JSON label source with the in-memory sample data.
    """
    container = Container()
    container.label_source.override(label_source)
    container.app_settings.override(test_settings)

    yield container

    # Clean up overrides after test
    container.unwire()
    container.reset_override()
