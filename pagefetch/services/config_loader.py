import logging

from pagefetch.domain.config import FetchConfig
from pagefetch.services.config_file_store import ConfigFileStore
from pagefetch.services.fetch_config_parser import FetchConfigParser

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Load and validate a run configuration; raises ConfigError on any problem."""

    def __init__(self, store: ConfigFileStore, parser: FetchConfigParser):
        self.store = store
        self.parser = parser

    def load(self, config_path: str) -> FetchConfig:
        data = self.store.load_dict(config_path)
        config = self.parser.parse(config_path=config_path, data=data)
        logger.debug("Loaded config %s: %r", config_path, config)
        return config
