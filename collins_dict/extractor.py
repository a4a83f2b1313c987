#!/usr/bin/env python3
"""
Collins search-page extraction
Walks the article markup of a parsed search-result page into DictionaryEntry
records, or the "suggested words" region into a SuggestionList.

Every class name used here is a convention of the Collins markup, collected
in the constants below so a site redesign touches one place.
"""

import logging
from typing import List, Optional, Sequence, Tuple, TypeVar

from .dom import DomQuery, Node, SoupQuery, by_class, by_tag
from .exceptions import StructuralExtractionError
from .models import Derivation, DictionaryEntry, Sense, SuggestionList
from .text import normalize_fragment

logger = logging.getLogger(__name__)

# Collins markup
ARTICLE = by_class("cobuild")
TITLE_CONTAINER = by_class("title_container")
ALT_HEADING = by_class("h2_entry")
ORTH = by_class("orth")
PRONUNCIATION_BLOCK = by_class("mini_h2")
NOTE_BLOCK = by_class("note")
LABEL = by_class("lbl")
INFLECTIONS = by_class("type-infl")
SENSE_GROUP = by_class("hom")
DEFINITION = by_class("def")
CROSS_REFERENCE = by_class("xr")
GRAMMAR_GROUP = by_class("gramGrp")
PART_OF_SPEECH = by_class("pos")
QUOTE = by_class("quote")
DERIVATION = by_class("type-drv")
THESAURUS = by_class("thes")
SYNONYM_REF = by_class("ref")
SUGGESTIONS = by_class("suggested_words")
SPAN = by_tag("span")
LIST_ITEM = by_tag("li")

PRON_CLASS = "pron"
HEADWORD_CLASS = "orth"
# Pronunciation spans end with a 3-character tag that is not part of the respelling
PRON_SUFFIX_LEN = 3

T = TypeVar("T")


def even_indexed(matches: Sequence[T]) -> List[T]:
    """Keep matches 0, 2, 4, ... (the site renders these blocks twice, nested)."""
    return list(matches[::2])


def clean_pronunciation(raw: str) -> str:
    """Strip the trailing tag, then keep only the text after the last space."""
    trimmed = raw[:-PRON_SUFFIX_LEN] if len(raw) > PRON_SUFFIX_LEN else ""
    return normalize_fragment(trimmed.rsplit(" ", 1)[-1])


def pick_pronunciation(spans: Sequence[Node], query: DomQuery) -> Optional[str]:
    """Return the first pronunciation among ``spans``, in document order.

    A pronunciation block may list the spellings of several sub-entries, each
    introduced by its own headword span; only the first sub-entry's
    pronunciation belongs to this article, so scanning stops at the next
    headword span.
    """
    for index, span in enumerate(spans):
        css_class = query.class_attribute(span)
        if css_class == PRON_CLASS:
            pron = clean_pronunciation(query.text(span))
            return pron or None
        if css_class == HEADWORD_CLASS and index > 0:
            break
    return None


def strip_first_char(raw: str) -> str:
    """Drop the decorative leading character (quotation mark, label bullet)."""
    return normalize_fragment(raw[1:])


class EntryExtractor:
    """Builds DictionaryEntry records from a parsed Collins page"""

    def __init__(self, query: Optional[DomQuery] = None):
        self.query = query or SoupQuery()

    # -- small helpers ---------------------------------------------------

    def _text(self, node: Node) -> str:
        return normalize_fragment(self.query.text(node))

    def _texts(self, nodes: Sequence[Node]) -> Tuple[str, ...]:
        return tuple(t for t in (self._text(n) for n in nodes) if t)

    def _require(self, parent: Node, selector, what: str) -> Node:
        node = self.query.find_first(parent, selector)
        if node is None:
            raise StructuralExtractionError(f"Missing {what} ({selector})", str(selector))
        return node

    # -- entries -----------------------------------------------------------

    def find_articles(self, body: Node) -> List[Node]:
        return even_indexed(self.query.find_all(body, ARTICLE))

    def extract_entries(self, body: Node) -> List[DictionaryEntry]:
        """Extract every article on the page, in document order."""
        articles = self.find_articles(body)
        logger.debug(f"Found {len(articles)} article blocks")
        return [self.extract_entry(article) for article in articles]

    def extract_entry(self, article: Node) -> DictionaryEntry:
        title = self.query.find_first(article, TITLE_CONTAINER)
        headword = self._extract_headword(article, title)

        pronunciation = self._extract_pronunciation(article)

        generalization = None
        if title is not None:
            label = self.query.find_first(title, LABEL)
            if label is not None:
                generalization = strip_first_char(self.query.text(label)) or None

        word_forms: Tuple[str, ...] = ()
        inflections = self.query.find_first(article, INFLECTIONS)
        if inflections is not None:
            word_forms = self._texts(self.query.find_all(inflections, ORTH))

        groups = self.query.find_all(article, SENSE_GROUP)
        if not groups:
            xref = self._require(article, CROSS_REFERENCE, f"cross-reference for '{headword}'")
            return DictionaryEntry(
                headword=headword,
                pronunciation=pronunciation,
                generalization=generalization,
                word_forms=word_forms,
                senses=(Sense(definition=self._text(xref)),),
                is_cross_reference=True,
            )

        senses = self._extract_senses(groups, headword)
        return DictionaryEntry(
            headword=headword,
            pronunciation=pronunciation,
            generalization=generalization,
            word_forms=word_forms,
            senses=tuple(senses),
        )

    def _extract_headword(self, article: Node, title: Optional[Node]) -> str:
        if title is not None:
            return self._text(self._require(title, ORTH, "headword in title container"))
        heading = self._require(article, ALT_HEADING, "headword")
        return self._text(heading)

    def _extract_pronunciation(self, article: Node) -> Optional[str]:
        spans: List[Node] = []
        block = self.query.find_first(article, PRONUNCIATION_BLOCK)
        if block is not None:
            spans = self.query.find_all(block, SPAN)
        if not spans:
            note = self.query.find_first(article, NOTE_BLOCK)
            if note is not None:
                spans = self.query.find_all(note, SPAN)
        return pick_pronunciation(spans, self.query)

    # -- senses --------------------------------------------------------------

    def _extract_senses(self, groups: Sequence[Node], headword: str) -> List[Sense]:
        numbered = len(groups) > 1
        senses: List[Sense] = []

        for index, group in enumerate(groups):
            node = self.query.find_first(group, DEFINITION)
            if node is None:
                node = self.query.find_first(group, CROSS_REFERENCE)
            if node is None:
                # Incomplete sense: keep what we have for this entry
                logger.debug(
                    "Sense %d of '%s' has no definition, stopping after %d senses",
                    index + 1, headword, len(senses),
                )
                break

            senses.append(Sense(
                definition=self._text(node),
                number=index + 1 if numbered else None,
                grammar_labels=self._grammar_labels(group),
                example=self._example(group),
                derivations=tuple(self._derivations(group)),
                synonyms=self._synonyms(group),
            ))

        return senses

    def _grammar_labels(self, group: Node) -> Tuple[str, ...]:
        grammar = self.query.find_first(group, GRAMMAR_GROUP)
        if grammar is None:
            return ()
        first_pos = self.query.find_first(group, PART_OF_SPEECH)
        if first_pos is None:
            # No part of speech: the sense is drawn unlabelled
            return ()
        if first_pos is grammar:
            # The grammar group is itself the only marker
            return self._texts([grammar])
        return self._texts(self.query.find_all(grammar, PART_OF_SPEECH))

    def _example(self, parent: Node) -> Optional[str]:
        quote = self.query.find_first(parent, QUOTE)
        if quote is None:
            return None
        return strip_first_char(self.query.text(quote)) or None

    def _synonyms(self, parent: Node) -> Tuple[str, ...]:
        thesaurus = self.query.find_first(parent, THESAURUS)
        if thesaurus is None:
            return ()
        return self._texts(self.query.find_all(thesaurus, SYNONYM_REF))

    def _derivations(self, group: Node) -> List[Derivation]:
        derivations = []
        for block in even_indexed(self.query.find_all(group, DERIVATION)):
            form = self._text(self._require(block, ORTH, "derivation form"))
            derivations.append(Derivation(
                form=form,
                grammar_labels=self._texts(self.query.find_all(block, PART_OF_SPEECH)),
                example=self._example(block),
                synonyms=self._synonyms(block),
            ))
        return derivations


class SuggestionExtractor:
    """Collects the "did you mean" candidates of a not-found page"""

    def __init__(self, query: Optional[DomQuery] = None):
        self.query = query or SoupQuery()

    def extract_suggestions(self, body: Node) -> SuggestionList:
        region = self.query.find_first(body, SUGGESTIONS)
        if region is None:
            return ()
        items = self.query.find_all(region, LIST_ITEM)
        suggestions = tuple(
            text for text in (normalize_fragment(self.query.text(li)) for li in items) if text
        )
        logger.debug(f"Found {len(suggestions)} suggestions")
        return suggestions
