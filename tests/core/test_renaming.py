# tests\core\test_renaming.py
import pytest

from lexilabel.adapters.renaming import MapRenamingProvider
from lexilabel.core.domain.dictionary import LanguageDictionary
from lexilabel.core.domain.grammar import LanguageGender, LanguageNumber, LanguageStartsWith, NounForm
from lexilabel.core.domain.language import HumanLanguage
from lexilabel.core.domain.renaming import RenamingContext, StandardEntity, StandardRenamingProvider, rename_noun


class TestRenameNoun:
    def test_rename_noun_builds_clone(self, en_dictionary):
        account = en_dictionary.get_noun("account")
        client = rename_noun(account, "Client")
        assert client.get_string(NounForm(LanguageNumber.PLURAL)) == "Clients"
        assert client.starts_with is LanguageStartsWith.CONSONANT
        assert account.get_string(NounForm(LanguageNumber.SINGULAR)) == "Account"

    def test_plural_ignored_without_plural_forms(self, label_source):
        ja = LanguageDictionary.from_records(HumanLanguage("ja"), label_source.load_layer("base", HumanLanguage("ja")))
        renamed = rename_noun(ja.get_noun("account"), "顧客", plural="顧客たち")
        assert renamed.get_string(NounForm(LanguageNumber.SINGULAR)) == "顧客"


class TestMapRenamingProvider:
    def test_unregistered_entity_is_canonical(self, en_dictionary):
        provider = MapRenamingProvider()
        assert provider.get_renameable(en_dictionary, "account") is en_dictionary.get_noun("account")
        assert not provider.is_renamed(HumanLanguage("en_US"), "account")

    def test_rename_is_scoped_by_language(self, en_dictionary):
        provider = MapRenamingProvider()
        client = rename_noun(en_dictionary.get_noun("account"), "Client")
        provider.rename("en_US", client)

        assert provider.get_renamed_noun(HumanLanguage("en_US"), "ACCOUNT") is client
        assert provider.get_renamed_noun(HumanLanguage("en_GB"), "account") is None
        assert provider.get_renamed_noun(HumanLanguage("de"), "account") is None
        assert len(provider) == 1

    def test_language_code_rename_covers_all_locales(self, en_dictionary):
        provider = MapRenamingProvider()
        client = rename_noun(en_dictionary.get_noun("account"), "Client")
        provider.rename("en", client)
        assert provider.get_renamed_noun(HumanLanguage("en_AU"), "account") is client

    def test_toggle_is_idempotent(self, en_dictionary):
        """Turning renaming off and on again restores the same nouns."""
        provider = MapRenamingProvider()
        client = rename_noun(en_dictionary.get_noun("account"), "Client")
        provider.rename("en_US", client)

        provider.set_use_renamed_nouns(False)
        provider.set_use_renamed_nouns(False)
        assert provider.get_renameable(en_dictionary, "account") is en_dictionary.get_noun("account")
        assert not provider.is_renamed(HumanLanguage("en_US"), "account")

        provider.set_use_renamed_nouns(True)
        assert provider.get_renameable(en_dictionary, "account") is client

    def test_clear_rename(self, en_dictionary):
        provider = MapRenamingProvider()
        provider.rename("en_US", rename_noun(en_dictionary.get_noun("account"), "Client"))
        provider.clear_rename("en_US", "Account")
        assert len(provider) == 0


class TestRenamingContext:
    def test_default_provider_renames_nothing(self):
        context = RenamingContext()
        assert isinstance(context.get_provider(), StandardRenamingProvider)
        assert context.use_renamed_nouns()

    def test_set_provider(self):
        context = RenamingContext()
        provider = MapRenamingProvider()
        context.set_provider(provider)
        assert context.get_provider() is provider
        context.set_use_renamed_nouns(False)
        assert provider.use_renamed_nouns() is False

    def test_null_provider_rejected(self):
        with pytest.raises(ValueError):
            RenamingContext().set_provider(None)

    def test_standard_entity(self):
        assert StandardEntity("account").entity_name == "account"


class TestRenamedRendering:
    def test_article_follows_the_renamed_noun(self, localizer_factory, renaming, en_dictionary):
        localizer = localizer_factory.get_localizer("en_US", renaming=renaming)
        entity = [StandardEntity("account")]
        assert localizer.get_label("Messages", "create", renameables=entity) == "Create an account"

        renaming.get_provider().rename("en_US", rename_noun(en_dictionary.get_noun("account"), "Client"))
        assert localizer.get_label("Messages", "create", renameables=entity) == "Create a client"
        assert localizer.get_label("Messages", "list") == "All Clients"

        renaming.set_use_renamed_nouns(False)
        assert localizer.get_label("Messages", "create", renameables=entity) == "Create an account"
        renaming.set_use_renamed_nouns(True)
        assert localizer.get_label("Messages", "create", renameables=entity) == "Create a client"

    def test_gender_follows_the_renamed_noun(self, localizer_factory, renaming, de_dictionary):
        localizer = localizer_factory.get_localizer("de", renaming=renaming)
        entity = [StandardEntity("account")]
        assert localizer.get_label("Messages", "created", renameables=entity) == "Das Konto wurde erstellt."

        firma = rename_noun(de_dictionary.get_noun("account"), "Firma", "Firmen", gender=LanguageGender.FEMININE)
        renaming.get_provider().rename("de", firma)
        assert localizer.get_label("Messages", "created", renameables=entity) == "Die Firma wurde erstellt."
        assert localizer.get_label("Messages", "create", renameables=entity) == "Eine neue Firma erstellen"

    def test_merged_rename_updates_the_article(self, localizer_factory, renaming, en_dictionary):
        localizer = localizer_factory.get_localizer("en_US", renaming=renaming)
        entity = [StandardEntity("contact")]
        assert localizer.get_label("Messages", "created", renameables=entity) == "A Contact was created."

        item = en_dictionary.get_noun("contact").clone(forms={"sg": "Item", "pl": "Items"}, merge=True)
        renaming.get_provider().rename("en_US", item)
        assert localizer.get_label("Messages", "created", renameables=entity) == "An Item was created."

    def test_count_choice_uses_the_renamed_noun(self, localizer_factory, renaming, en_dictionary):
        localizer = localizer_factory.get_localizer("en_US", renaming=renaming)
        renaming.get_provider().rename("en_US", rename_noun(en_dictionary.get_noun("account"), "Client"))
        assert localizer.get_label("Messages", "count", 1) == "1 client"
        assert localizer.get_label("Messages", "count", 2) == "2 clients"
