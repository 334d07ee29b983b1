# tests\shared\test_container.py
from lexilabel.core.domain.renaming import StandardEntity
from lexilabel.core.localizer import LocalizerFactory


class TestContainer:
    def test_localizer_from_container(self, container):
        factory = container.localizer_factory()
        assert isinstance(factory, LocalizerFactory)

        localizer = factory.get_localizer("de", renaming=container.renaming_context())
        assert localizer.get_label("Messages", "created", renameables=[StandardEntity("account")]) == (
            "Das Konto wurde erstellt."
        )

    def test_loader_is_shared(self, container):
        assert container.label_set_loader() is container.label_set_loader()
        assert container.localizer_factory().loader is container.label_set_loader()

    def test_renaming_state_is_per_session(self, container):
        first = container.renaming_context()
        second = container.renaming_context()
        assert first is not second
        assert first.get_provider() is not second.get_provider()

    def test_settings_override(self, container, test_settings):
        assert container.app_settings() is test_settings
        assert container.localizer_factory().settings is test_settings
