#!/usr/bin/env python3
"""
Lexical entry model built from one search-result page.

Objects are immutable once the extractor has built them and are owned
strictly as a tree: an entry owns its senses, a sense owns its derivations.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple

SuggestionList = Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Derivation:
    """A related word listed under a sense (e.g. "happiness" under "happy")"""
    form: str
    grammar_labels: Tuple[str, ...] = ()
    example: Optional[str] = None
    synonyms: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Sense:
    """One meaning within an entry"""
    definition: str
    number: Optional[int] = None
    grammar_labels: Tuple[str, ...] = ()
    example: Optional[str] = None
    derivations: Tuple[Derivation, ...] = ()
    synonyms: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class DictionaryEntry:
    """One dictionary article for a headword.

    ``is_cross_reference`` marks an article without any sense block; its only
    sense then carries the cross-reference text as ``definition``.
    """
    headword: str
    senses: Tuple[Sense, ...] = ()
    pronunciation: Optional[str] = None
    generalization: Optional[str] = None
    word_forms: Tuple[str, ...] = ()
    is_cross_reference: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class LookupResult:
    """Outcome of one lookup: entries when found, otherwise suggestions"""
    query: str
    entries: Tuple[DictionaryEntry, ...] = ()
    suggestions: SuggestionList = field(default_factory=tuple)

    @property
    def found(self) -> bool:
        return bool(self.entries)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'query': self.query,
            'found': self.found,
            'entries': [entry.to_dict() for entry in self.entries],
            'suggestions': list(self.suggestions),
        }
