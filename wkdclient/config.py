"""Client configuration."""

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .resolver import ChainResolver, KeyResolver, LocalDirectoryResolver, WKDResolver
from .transport import DEFAULT_TIMEOUT, RequestsFetcher

DEFAULT_USER_AGENT = "wkd-client/1.0.0"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class ClientConfig:
    """Settings for building resolvers from the command line or a file."""

    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    local_directory: Optional[str] = None
    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClientConfig":
        """Create config from a dictionary, ignoring unknown keys."""
        if not isinstance(data, dict):
            raise ValueError("configuration must be a JSON object")
        known = {f.name for f in fields(cls)}
        config = cls(**{k: v for k, v in data.items() if k in known})
        if config.timeout <= 0:
            raise ValueError("timeout must be positive")
        if not isinstance(config.log_level, str) or not isinstance(
            logging.getLevelName(config.log_level.upper()), int
        ):
            raise ValueError(f"unknown log_level: {config.log_level!r}")
        return config

    @classmethod
    def load(cls, config_file: Union[str, Path]) -> "ClientConfig":
        """Load configuration from a JSON file."""
        config_file = Path(config_file)
        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_file}")

        with open(config_file, "r") as f:
            return cls.from_dict(json.load(f))

    def setup_logging(self, verbose: bool = False) -> None:
        """Set up logging for command line use."""
        level = logging.DEBUG if verbose else logging.getLevelName(self.log_level.upper())
        logging.basicConfig(level=level, format=self.log_format)

    def create_fetcher(self) -> RequestsFetcher:
        """Build the configured HTTP fetcher."""
        return RequestsFetcher(
            timeout=self.timeout, headers={"User-Agent": self.user_agent}
        )

    def create_resolver(self) -> KeyResolver:
        """Build a WKD resolver, preceded by a local tree if one is configured."""
        resolver = WKDResolver(fetcher=self.create_fetcher())
        if self.local_directory:
            return ChainResolver(
                [LocalDirectoryResolver(self.local_directory), resolver]
            )
        return resolver
