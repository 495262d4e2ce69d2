"""Greedy word wrapping with soft/hard length limits.

The limits bound the rendered length of the whole blockquote, counted as
every character of every emitted line (prefix included) except the line
breaks between them:

  soft_limit              -- no new word may begin at or past this length
  soft_limit + hard_limit -- a word already in progress may run on to here,
                             anything beyond is cut and marked with an ellipsis

Once a word is cut, or a word is refused because the soft limit has been
reached, the wrapper is truncated: it yields nothing more, for this
paragraph or any later one. The first word of a blockquote always starts
and keeps at least one character, even when that pushes the ellipsis one
past the hard cap.

``line_width`` is independent of the limits. It only decides where a
paragraph breaks into lines and never splits a word.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from .config import BlockquoteConfig

logger = logging.getLogger("blockquote_formatter.wrapper")

ELLIPSIS = "…"


class LineWrapper:
    """Turns paragraphs into lines while tracking the shared length budget.

    One wrapper serves every paragraph of a single blockquote, in order.
    ``length`` is the rendered length consumed so far and ``truncated``
    flips to True on the first truncation event.
    """

    def __init__(self, config: BlockquoteConfig) -> None:
        self._config = config
        self._prefix_len = len(config.prefix)
        self._marker_len = len(ELLIPSIS) if config.with_ellipsis else 0
        self.length = 0
        self.truncated = False

    def wrap(self, words: Iterable[str], lead: int) -> Iterator[str]:
        """Yield the lines (without prefix) of one paragraph.

        Args:
            words: The paragraph's words, in order.
            lead: Rendered characters spent before the paragraph's first
                word: its line prefix plus any separator line above it.
        """
        if self.truncated:
            return

        config = self._config
        line: list[str] = []
        line_len = 0  # rendered length of the current line, prefix included

        for word in words:
            if not line:
                cost, new_line = lead, True
            elif config.line_width is not None and line_len + 1 + len(word) > config.line_width:
                cost, new_line = self._prefix_len, True
            else:
                cost, new_line = 1, False

            start = self.length + cost
            if not self._may_start(start):
                self._truncate("soft limit reached", start)
                break

            kept = self._fit(word, start)
            if kept is None:
                # not a single character of the word would survive the cut
                self._truncate("no room left for the next word", start)
                break

            if new_line and line:
                yield " ".join(line)
                line = []
            if new_line:
                line_len = self._prefix_len
            else:
                line_len += 1

            line.append(kept)
            line_len += len(kept)
            self.length = start + len(kept)

            if kept != word:
                self._truncate("word cut at hard limit", start, word=word)
                break

        if line:
            yield " ".join(line)

    def _may_start(self, start: int) -> bool:
        """Whether a word whose first character follows *start* may begin."""
        if self.length == 0:
            # the very first word always gets a line
            return True
        soft_limit = self._config.soft_limit
        return soft_limit is None or start < soft_limit

    def _fit(self, word: str, start: int) -> str | None:
        """Return the part of *word* that fits, or None if nothing does."""
        hard_cap = self._config.hard_cap
        if hard_cap is None or start + len(word) <= hard_cap:
            return word

        keep = hard_cap - self._marker_len - start
        if keep < 1:
            if self.length > 0:
                return None
            # the first line keeps one character even if the ellipsis overruns
            keep = 1
        return word[:keep]

    def _truncate(self, reason: str, start: int, word: str | None = None) -> None:
        self.truncated = True
        logger.debug(
            "[Wrapper] Truncated at rendered length %d: %s",
            start, reason,
            extra={"cut_word": word} if word is not None else None,
        )
