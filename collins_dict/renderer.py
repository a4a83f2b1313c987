#!/usr/bin/env python3
"""
Terminal rendering of lookup results.

Output is written to the stream incrementally; nothing here buffers a whole
page of text.
"""

from __future__ import annotations

import json
import os
import shutil
import sys
from typing import Sequence, TextIO

from .config import LookupConfig, SynonymPolicy
from .models import Derivation, DictionaryEntry, LookupResult, Sense
from .text import write_wrapped

ENTRY_MARKER = "✦ "
EXAMPLE_MARKER = "-> "
RULE_CHAR = "―"


def get_terminal_width(default: int = LookupConfig.DEFAULT_WIDTH) -> int:
    """Columns of the controlling terminal, or ``default`` when there is none."""
    try:
        columns = shutil.get_terminal_size(fallback=(default, 24)).columns
    except (OSError, ValueError):
        columns = default
    if columns <= 0:
        columns = default
    # The Windows console moves to the next row once the last column is written
    if os.name == "nt":
        columns = max(1, columns - 1)
    return columns


def join_synonyms(synonyms: Sequence[str], policy: SynonymPolicy) -> str:
    """Comma-join synonyms under ``policy``.

    ``SynonymPolicy.DROP_LAST`` keeps the historical output, which omits the
    final synonym whenever there are two or more.
    """
    if policy == SynonymPolicy.DROP_LAST and len(synonyms) > 1:
        synonyms = synonyms[:-1]
    return ", ".join(synonyms)


class TerminalRenderer:
    """Writes entries, suggestions and not-found messages to a text stream"""

    def __init__(
        self,
        out: TextIO = None,
        width: int = LookupConfig.DEFAULT_WIDTH,
        indent: int = LookupConfig.INDENT,
        synonym_policy: SynonymPolicy = LookupConfig.SYNONYM_POLICY,
    ):
        if width <= 0:
            raise ValueError(f"width must be positive, got {width}")
        self.out = out if out is not None else sys.stdout
        self.width = width
        self.indent = indent
        self.indent_str = " " * indent
        self.synonym_policy = synonym_policy

    def _line(self, text: str = "") -> None:
        self.out.write(text)
        self.out.write("\n")

    def _wrap(self, text: str, indent: int) -> None:
        write_wrapped(self.out, text, self.width, indent, indent)

    # -- not found ---------------------------------------------------------

    def render_not_found(self, query: str) -> None:
        self._line(f'No word or phrase named "{query}"')

    def render_suggestions(self, query: str, suggestions: Sequence[str]) -> None:
        """Not-found message followed by the suggestions in two columns.

        With an odd count the middle suggestion is held back from the columns
        and printed alone on the last line.
        """
        self.render_not_found(query)
        if not suggestions:
            return

        self._line("Maybe you mean:")
        count = len(suggestions)
        half = count // 2
        right_start = half + count % 2
        column = self.width // 2

        for i in range(half):
            left = suggestions[i][:column].ljust(column)
            self._line(left + suggestions[right_start + i])
        if count % 2 == 1:
            self._line(suggestions[half])

    # -- entries -------------------------------------------------------------

    def render_result(self, result: LookupResult) -> None:
        if result.found:
            self.render_entries(result.entries)
        else:
            self.render_suggestions(result.query, result.suggestions)

    def render_entries(self, entries: Sequence[DictionaryEntry]) -> None:
        for index, entry in enumerate(entries):
            if index > 0:
                self._line(RULE_CHAR * self.width)
            self.render_entry(entry)

    def render_entry(self, entry: DictionaryEntry) -> None:
        heading = ENTRY_MARKER + entry.headword
        if entry.pronunciation:
            heading += f" [{entry.pronunciation}]"
        self._line(heading)

        if entry.generalization:
            self._line()
            self._line(entry.generalization)

        if entry.word_forms:
            self._line("Word forms: " + ", ".join(entry.word_forms))

        if entry.is_cross_reference:
            self._line()
            self._wrap(entry.senses[0].definition, 0)
            return

        for sense in entry.senses:
            self.render_sense(sense)

    def render_sense(self, sense: Sense) -> None:
        self._line()
        prefix = f"{sense.number}. " if sense.number is not None else ""
        self.out.write(prefix)

        if sense.grammar_labels:
            self._line(", ".join(sense.grammar_labels))
            self.out.write(self.indent_str)
            self._wrap(sense.definition, self.indent)
        else:
            self._wrap(sense.definition, len(prefix))

        if sense.example:
            self._render_example(sense.example, self.indent)

        if sense.derivations:
            self._line()
            self._line(self.indent_str + "Derivations:")
            for derivation in sense.derivations:
                self.render_derivation(derivation)

        if sense.synonyms:
            self._line(self.indent_str + "Synonyms: " + join_synonyms(sense.synonyms, self.synonym_policy))

    def render_derivation(self, derivation: Derivation) -> None:
        line = self.indent_str + "- " + derivation.form
        if derivation.grammar_labels:
            line += " (" + ", ".join(derivation.grammar_labels) + ")"
        self._line(line)

        nested = self.indent + 2
        if derivation.example:
            self.out.write(" " * nested + EXAMPLE_MARKER)
            self._wrap(derivation.example, nested + len(EXAMPLE_MARKER))
        if derivation.synonyms:
            self._line(" " * nested + "Synonyms: " + join_synonyms(derivation.synonyms, self.synonym_policy))

    def _render_example(self, example: str, indent: int) -> None:
        self._line()
        self.out.write(" " * indent + EXAMPLE_MARKER)
        self._wrap(example, indent + len(EXAMPLE_MARKER))


def render_json(result: LookupResult, out: TextIO = None) -> None:
    """Write the lookup result as one JSON document"""
    out = out if out is not None else sys.stdout
    json.dump(result.to_dict(), out, ensure_ascii=False, indent=2)
    out.write("\n")
