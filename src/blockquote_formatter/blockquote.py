"""Render text as a markdown blockquote."""

from __future__ import annotations

import logging
from typing import Any, Optional

from .config import BlockquoteConfig, build_config
from .paragraphs import split_paragraphs
from .wrapper import ELLIPSIS, LineWrapper

logger = logging.getLogger("blockquote_formatter.blockquote")


class Blockquote:
    """
    Quote some text in a markdown blockquote.

    Options are validated when the blockquote is created; rendering itself
    cannot fail. The output is computed on first use and cached.

    Example:
        >>> str(Blockquote("hey, this is cool!"))
        '> hey, this is cool!'
    """

    def __init__(
        self,
        text: str,
        config: Optional[BlockquoteConfig] = None,
        **options: Any
    ):
        """
        Initialize blockquote.

        Args:
            text: Input text; blank lines separate paragraphs
            config: Base configuration (defaults apply when omitted)
            **options: Individual option overrides, e.g. soft_limit=81

        Raises:
            ConfigurationError: If the resulting options are invalid.
        """
        if options:
            base = config.model_dump() if config is not None else {}
            config = build_config(**{**base, **options})
        elif config is None:
            config = build_config()

        self.text = text
        self.config = config
        self._lines: Optional[list[str]] = None
        self._truncated = False

    def is_empty(self) -> bool:
        """
        Whether the blockquote renders to nothing.

        This is the case when the input text is empty or only whitespace.
        """
        return not self.lines()

    @property
    def truncated(self) -> bool:
        """Whether any input was dropped to honor the limits."""
        self.lines()
        return self._truncated

    def lines(self) -> list[str]:
        """Return the rendered lines, prefix included."""
        if self._lines is None:
            self._lines = self._render_lines()
        return list(self._lines)

    def render(self) -> str:
        """Return the formatted blockquote."""
        return "\n".join(self.lines())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Blockquote(text={self.text!r}, config={self.config!r})"

    def _render_lines(self) -> list[str]:
        prefix = self.config.prefix
        quoted_prefix = prefix if self.config.strip_existing_prefix else None
        wrapper = LineWrapper(self.config)
        rendered: list[str] = []
        paragraphs = 0

        for words in split_paragraphs(self.text, prefix=quoted_prefix):
            # later paragraphs also pay for the separator line above them
            lead = len(prefix) * (2 if rendered else 1)
            separator_pending = bool(rendered)
            for line in wrapper.wrap(words, lead):
                if separator_pending:
                    rendered.append(prefix)
                    separator_pending = False
                rendered.append(prefix + line)
            paragraphs += 1
            if wrapper.truncated:
                break

        self._truncated = wrapper.truncated
        if self._truncated and self.config.with_ellipsis:
            rendered[-1] += ELLIPSIS

        logger.debug(
            "[Blockquote] Rendered %d line(s) from %d paragraph(s)",
            len(rendered), paragraphs,
            extra={"truncated": self._truncated, "rendered_length": wrapper.length},
        )
        return rendered


def format_blockquote(text: str, **options: Any) -> str:
    """
    Format *text* as a markdown blockquote in one call.

    Raises:
        ConfigurationError: If the options are invalid.
    """
    return Blockquote(text, **options).render()
