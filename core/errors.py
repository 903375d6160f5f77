"""Exceptions raised by the item matching system."""

from pathlib import Path
from typing import Optional, Union

class ItemMatcherError(Exception):
    """Base class for all lookup failures."""

class ConfigurationError(ItemMatcherError, ValueError):
    """Invalid settings supplied to a lookup."""

class PatternError(ConfigurationError):
    """A name pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        super().__init__(f"Could not parse pattern as regular expression: {pattern!r} ({reason})")

class RecordLoadError(ItemMatcherError):
    """A directory or file could not be read."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = path
        super().__init__(message)

class RecordParseError(ItemMatcherError, ValueError):
    """A file does not contain the expected JSON structure."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = path
        super().__init__(message)

class FormatError(ItemMatcherError):
    """Matched items could not be rendered."""
