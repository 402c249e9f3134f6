__path__ = __import__("pkgutil").extend_path(__path__, __name__)

import os
from pathlib import Path

from strata.config import find_project_root
from .messaging.bus import MessageBus
from .messaging.catalog import MessageCatalog
from .interfaces import DocumentAdapter
from .adapters.yaml_adapter import YamlAdapter

# --- Composition Root for Strata's Core Services ---


def _create_catalog() -> MessageCatalog:
    """
    Builds the message catalog for the current language.

    Priorities (later wins):
    A. Default assets: strata/common/assets/messages/{lang}.yaml
    B. User overrides: <project>/.strata/messages/{lang}.yaml
    """
    lang = os.getenv("STRATA_LANG", "en")
    default_assets_path = Path(__file__).parent / "assets" / "messages" / f"{lang}.yaml"
    user_override_path = find_project_root() / ".strata" / "messages" / f"{lang}.yaml"
    return MessageCatalog([default_assets_path, user_override_path])


# Global singleton representing the "Current Context"
strata_catalog = _create_catalog()
bus = MessageBus(catalog=strata_catalog)

__all__ = [
    "bus",
    "strata_catalog",
    "MessageBus",
    "MessageCatalog",
    "DocumentAdapter",
    "YamlAdapter",
]
