"""Split raw text into paragraphs of words.

A paragraph is a run of non-blank lines; one or more blank (or
whitespace-only) lines separate paragraphs. Inside a paragraph every
whitespace run, line breaks included, is just a word separator.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional


def strip_marker(lines: list[str], prefix: str) -> list[str]:
    """Remove one level of quoting when every non-blank line is quoted.

    A line is quoted when it starts with the full *prefix*, or when it is
    nothing but the prefix's marker (``">"`` for ``"> "``), which is how
    editors often leave blank separator lines. At least one line must carry
    text after the prefix, so input like ``">=5"`` or a lone ``">"`` is
    left alone.

    Returns the lines unchanged if any non-blank line is not quoted.
    """
    bare = prefix.rstrip()
    if not bare:
        return lines

    has_text = False
    for line in lines:
        if not line.strip() or line.strip() == bare:
            continue
        if not line.startswith(prefix):
            return lines
        if line[len(prefix):].strip():
            has_text = True
    if not has_text:
        return lines

    stripped: list[str] = []
    for line in lines:
        if line.strip() == bare:
            stripped.append("")
        elif line.startswith(prefix):
            stripped.append(line[len(prefix):])
        else:
            # whitespace-only line
            stripped.append(line)
    return stripped


def _group_lines(lines: Iterable[str]) -> Iterator[list[str]]:
    words: list[str] = []
    for line in lines:
        line_words = line.split()
        if line_words:
            words.extend(line_words)
        elif words:
            yield words
            words = []
    if words:
        yield words


def split_paragraphs(text: str, prefix: Optional[str] = None) -> Iterator[list[str]]:
    """Yield each paragraph of *text* as a list of words, in order.

    Consecutive blank lines collapse into a single break and no empty
    paragraph is ever produced, so empty or whitespace-only input yields
    nothing.

    Args:
        text: Raw input text.
        prefix: Blockquote prefix to strip from already-quoted input.
            None leaves the lines untouched.
    """
    lines = text.splitlines()
    if prefix is not None:
        lines = strip_marker(lines, prefix)
    return _group_lines(lines)
