"""
Client-side helpers for a MediaWiki action API.

Provides:
- get_base_name/get_path_to_subpage/get_subpage: Subpage decomposition
- uri_to_wiki/wiki_to_uri: Page title conversion between Wiki and URL form
- WikiGateway: Page URLs and prepared API requests
- setup_logging: Logging configuration for console and file output
- load_config: Defaults, JSON config file and environment overrides
"""

__version__ = "1.0.0"

from mwgateway.utils import (
    get_base_name,
    get_path_to_subpage,
    get_subpage,
    upcase_first_char,
    uri_to_wiki,
    version,
    wiki_to_uri,
)
from mwgateway.logging_config import setup_logging, get_log_dir
from mwgateway.config import ConfigError, load_config
from mwgateway.gateway import WikiGateway

__all__ = [
    "WikiGateway",
    "ConfigError",
    "load_config",
    "setup_logging",
    "get_log_dir",
    "get_base_name",
    "get_path_to_subpage",
    "get_subpage",
    "upcase_first_char",
    "uri_to_wiki",
    "wiki_to_uri",
    "version",
]
