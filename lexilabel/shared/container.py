# lexilabel\shared\container.py
from dependency_injector import containers, providers

from lexilabel.shared.config import settings
from lexilabel.adapters.renaming import MapRenamingProvider
from lexilabel.adapters.sources import JsonLabelSource
from lexilabel.core.domain.language import LanguageProvider
from lexilabel.core.domain.renaming import RenamingContext
from lexilabel.core.labels import GrammaticalLabelSetLoader
from lexilabel.core.localizer import LocalizerFactory

class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the library.
    """

    # 1. Configuration
    # We load settings directly, but wrapping them allows overriding in tests.
    config = providers.Configuration(pydantic_settings=[settings])
    app_settings = providers.Object(settings)

    # 2. Locale resolution (Singleton: stateless rules)
    language_provider = providers.Singleton(
        LanguageProvider,
        default_locale=config.DEFAULT_LOCALE,
    )

    # 3. Gateways (Infrastructure Adapters)

    # Label Source (Singleton: one file cache shared). Tests override this
    # with an InMemoryLabelSource.
    label_source = providers.Singleton(
        JsonLabelSource,
        base_dir=config.LABELS_DIR,
    )

    # 4. Label Sets (Singleton: the per-language cache must be shared)
    label_set_loader = providers.Singleton(
        GrammaticalLabelSetLoader,
        source=label_source,
        set_id=config.LABEL_SET_NAME,
        language_provider=language_provider,
        fail_on_dangling_alias=config.FAIL_ON_DANGLING_ALIAS,
        fail_on_invalid_template=config.FAIL_ON_INVALID_TEMPLATE,
    )

    localizer_factory = providers.Singleton(
        LocalizerFactory,
        loader=label_set_loader,
        language_provider=language_provider,
        settings=app_settings,
    )

    # 5. Per-session state
    # Factory: renaming state belongs to one session and is not thread-safe,
    # so every caller gets its own provider and context.
    renaming_provider = providers.Factory(MapRenamingProvider)

    renaming_context = providers.Factory(
        RenamingContext,
        provider=renaming_provider,
    )

# Instantiate the container for global access
container = Container()
