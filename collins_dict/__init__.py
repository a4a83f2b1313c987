"""
Collins Dictionary lookup for the terminal.

This package contains the lookup pipeline:
- Fetching the Collins search page
- Extracting entries and suggestions from its markup
- Re-flowing the extracted text for a fixed-width terminal
"""

from .config import LookupConfig, LookupSettings, SynonymPolicy
from .exceptions import (
    DictionaryError,
    NetworkError,
    ParseError,
    StructuralExtractionError,
    UsageError,
)
from .extractor import EntryExtractor, SuggestionExtractor
from .lookup import DictionaryLookup
from .models import Derivation, DictionaryEntry, LookupResult, Sense
from .renderer import TerminalRenderer
from .text import iter_wrapped, normalize_fragment, write_wrapped

__all__ = [
    'LookupConfig',
    'LookupSettings',
    'SynonymPolicy',
    'DictionaryError',
    'NetworkError',
    'ParseError',
    'StructuralExtractionError',
    'UsageError',
    'EntryExtractor',
    'SuggestionExtractor',
    'DictionaryLookup',
    'Derivation',
    'DictionaryEntry',
    'LookupResult',
    'Sense',
    'TerminalRenderer',
    'iter_wrapped',
    'normalize_fragment',
    'write_wrapped',
]
