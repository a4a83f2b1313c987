#!/usr/bin/env python3
"""
Collins Dictionary Lookup
Fetches the search-result page for a term and extracts its entries or suggestions
"""

import logging
from typing import Optional

import requests

from .config import LookupConfig, LookupSettings
from .dom import DomQuery, SoupQuery, parse_document
from .exceptions import NetworkError
from .extractor import EntryExtractor, SuggestionExtractor
from .models import LookupResult

logger = logging.getLogger(__name__)


class DictionaryLookup:
    """Client for the Collins search page"""

    def __init__(self, settings: Optional[LookupSettings] = None,
                 session: Optional[requests.Session] = None,
                 query: Optional[DomQuery] = None):
        self.settings = settings or LookupConfig.defaults()
        self.session = session or requests.Session()
        self.session.headers.update(self.settings.request_headers())
        query = query or SoupQuery()
        self.entry_extractor = EntryExtractor(query)
        self.suggestion_extractor = SuggestionExtractor(query)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        self.session.close()

    def fetch_page(self, term: str) -> bytes:
        """GET the search page for ``term`` and return the raw HTML body"""
        params = self.settings.search_params(term)
        logger.debug(f"GET {self.settings.search_url} params={params}")

        try:
            response = self.session.get(
                self.settings.search_url,
                params=params,
                timeout=self.settings.timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"Request for '{term}' failed: {e}")
            raise NetworkError(str(e)) from e

        if response.status_code != 200:
            logger.warning(f"Search for '{term}' returned status {response.status_code}")
            raise NetworkError(f"HTTP {response.status_code}", status_code=response.status_code)

        return response.content

    def lookup(self, term: str) -> LookupResult:
        """
        Main entry point: fetch, parse and extract one term
        """
        body = parse_document(self.fetch_page(term))

        entries = self.entry_extractor.extract_entries(body)
        if entries:
            logger.info(f"Lookup complete for '{term}': {len(entries)} entries")
            return LookupResult(query=term, entries=tuple(entries))

        suggestions = self.suggestion_extractor.extract_suggestions(body)
        logger.info(f"No entry for '{term}', {len(suggestions)} suggestions")
        return LookupResult(query=term, suggestions=suggestions)
