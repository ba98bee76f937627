"""docman configuration package."""

from docman.config.loader import clear_cache, get_config, load_config
from docman.config.models import DocmanConfig

__all__ = ["DocmanConfig", "clear_cache", "get_config", "load_config"]
