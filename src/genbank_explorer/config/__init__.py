"""GenBank Explorer configuration package."""

from genbank_explorer.config.loader import get_config, load_config
from genbank_explorer.config.models import ExplorerConfig

__all__ = ["ExplorerConfig", "get_config", "load_config"]
