"""Format text as a markdown blockquote with soft/hard length limits."""

from .blockquote import Blockquote, format_blockquote
from .config import DEFAULT_PREFIX, BlockquoteConfig, FormatterSettings, build_config, load_settings
from .exceptions import ConfigurationError
from .wrapper import ELLIPSIS

__all__ = [
    "Blockquote",
    "BlockquoteConfig",
    "ConfigurationError",
    "DEFAULT_PREFIX",
    "ELLIPSIS",
    "FormatterSettings",
    "build_config",
    "format_blockquote",
    "load_settings",
]
