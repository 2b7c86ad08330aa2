from django.apps import AppConfig
from django.conf import settings


class CoreConfig(AppConfig):
    name = "modules.core"
    label = "core"

    def ready(self) -> None:
        if not settings.SEED_DATA:
            return

        from modules.core.seed import load_seed_data
        from modules.core.store import get_store

        load_seed_data(get_store(), settings.SEED_DATA_PATH)
