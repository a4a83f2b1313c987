#!/usr/bin/env python3
"""
Centralized Configuration for the Collins dictionary lookup tool
Holds the search endpoint, request settings, layout constants and logging setup
"""

import os
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class SynonymPolicy(str, Enum):
    """How the collected synonyms of a sense are joined for display.

    ``DROP_LAST`` reproduces the historical output, which never printed the
    final ``ref`` of a thesaurus block. ``ALL`` prints every synonym.
    """

    DROP_LAST = "drop-last"
    ALL = "all"


class LookupConfig:
    """Centralized configuration for the lookup tool"""

    # Search endpoint
    SEARCH_URL = "https://www.collinsdictionary.com/us/search/"
    DICT_CODE = "english"
    USER_AGENT = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:10.0)"
        " Gecko/20100101 Firefox/10.0}"
    )
    REQUEST_TIMEOUT = 30.0

    # Layout
    DEFAULT_WIDTH = 80
    INDENT = 4

    SYNONYM_POLICY = SynonymPolicy.DROP_LAST

    # Logging Configuration
    LOGGING = {
        'level': 'WARNING',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    }

    @classmethod
    def defaults(cls) -> 'LookupSettings':
        """Settings built from the class constants only"""
        return LookupSettings(
            search_url=cls.SEARCH_URL,
            dict_code=cls.DICT_CODE,
            user_agent=cls.USER_AGENT,
            timeout=cls.REQUEST_TIMEOUT,
            width=None,
            indent=cls.INDENT,
            synonym_policy=cls.SYNONYM_POLICY,
            log_level=cls.LOGGING['level'],
        )

    @classmethod
    def from_env(cls) -> 'LookupSettings':
        """Create settings from the class constants and environment variables"""
        settings = cls.defaults()
        overrides = {}

        if os.getenv('COLLINS_SEARCH_URL'):
            overrides['search_url'] = os.getenv('COLLINS_SEARCH_URL')
        if os.getenv('COLLINS_TIMEOUT'):
            overrides['timeout'] = float(os.getenv('COLLINS_TIMEOUT'))
        if os.getenv('COLLINS_WIDTH'):
            overrides['width'] = int(os.getenv('COLLINS_WIDTH'))
        if os.getenv('COLLINS_SYNONYMS'):
            overrides['synonym_policy'] = SynonymPolicy(os.getenv('COLLINS_SYNONYMS'))
        if os.getenv('COLLINS_LOG_LEVEL'):
            overrides['log_level'] = os.getenv('COLLINS_LOG_LEVEL').upper()

        if overrides:
            logger.debug("Environment overrides: %s", sorted(overrides))
            settings = replace(settings, **overrides)
        return settings


@dataclass(frozen=True)
class LookupSettings:
    """Resolved settings for one invocation, with validation"""
    search_url: str
    dict_code: str
    user_agent: str
    timeout: float
    width: Optional[int]
    indent: int
    synonym_policy: SynonymPolicy
    log_level: str

    def __post_init__(self):
        """Validate configuration after initialization"""
        if not self.search_url:
            raise ValueError("Search URL is required")
        if self.timeout <= 0:
            raise ValueError("Request timeout must be positive")
        if self.width is not None and self.width <= 0:
            raise ValueError("Terminal width must be positive")
        if self.indent < 0:
            raise ValueError("Indent cannot be negative")
        if not isinstance(getattr(logging, self.log_level, None), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    def with_overrides(self, **overrides) -> 'LookupSettings':
        """Return a copy with the non-None overrides applied"""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self

    def request_headers(self) -> Dict[str, str]:
        """Headers sent with every search request"""
        return {'User-Agent': self.user_agent}

    def search_params(self, query: str) -> Dict[str, str]:
        """Query parameters for the search endpoint"""
        return {'dictCode': self.dict_code, 'q': query}
