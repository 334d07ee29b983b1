# lexilabel\core\ports\renaming.py
from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:  # pragma: no cover
    from lexilabel.core.domain.dictionary import LanguageDictionary
    from lexilabel.core.domain.language import HumanLanguage
    from lexilabel.core.domain.terms import Noun


class IRenameable(Protocol):
    """
    Anything a label can refer to as a renameable entity.

    Only the canonical entity name is needed; the role index is the position
    of the renameable in the list passed to a render call.
    """

    @property
    def entity_name(self) -> str:
        ...


class IRenamingProvider(Protocol):
    """
    Port for session-scoped noun substitution.

    Implementations are not required to be thread-safe: use one provider per
    session and finish any mutation before concurrent reads begin.
    """

    def get_renamed_noun(self, language: "HumanLanguage", entity_name: str) -> Optional["Noun"]:
        """
        The registered substitute for an entity, or None.

        Independent of the on/off toggle.
        """
        ...

    def get_renameable(self, dictionary: "LanguageDictionary", entity_name: str) -> Optional["Noun"]:
        """
        The noun to render for an entity: the substitute when one is
        registered and renaming is enabled, otherwise the canonical noun
        from `dictionary` (None if the dictionary lacks it too).
        """
        ...

    def is_renamed(self, language: "HumanLanguage", entity_name: str) -> bool:
        ...

    def use_renamed_nouns(self) -> bool:
        ...

    def set_use_renamed_nouns(self, enabled: bool) -> None:
        """Toggle substitution without discarding registered renames."""
        ...
