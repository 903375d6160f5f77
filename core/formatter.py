"""Output formatting for matched items."""

from typing import Any, Dict, Iterable, Protocol, Sequence, Type, Union
from abc import ABC, abstractmethod
import json

from config.models import ItemRecord, OutputFormat
from core.errors import FormatError

UNNAMED = "unnamed"
FIELD_SEPARATOR = " | "

class Formatter(Protocol):
    """Protocol defining the interface for formatters."""
    def render(self, items: Sequence[ItemRecord]) -> str:
        """Render items, already in output order, as text."""
        ...

class BaseFormatter(ABC):
    """Base class for formatters with common functionality."""

    @abstractmethod
    def render(self, items: Sequence[ItemRecord]) -> str:
        """Render items, already in output order, as text."""
        pass

    def _dump_json(self, value: Any) -> str:
        try:
            return json.dumps(value, ensure_ascii=False, separators=(',', ':'))
        except (TypeError, ValueError) as e:
            raise FormatError(f"Could not serialize items as JSON: {e}") from e

class BasicFormatter(BaseFormatter):
    """One ``id | name | description`` line per item."""

    def render(self, items: Sequence[ItemRecord]) -> str:
        return '\n'.join(
            FIELD_SEPARATOR.join((
                str(item.id),
                item.name or '',
                item.description or ''
            ))
            for item in items
        )

class JsonIdsFormatter(BaseFormatter):
    """JSON array of item ids."""

    def render(self, items: Sequence[ItemRecord]) -> str:
        return self._dump_json([item.id for item in items])

class JsonIdNamesFormatter(BaseFormatter):
    """JSON array of ``[id, name]`` pairs."""

    def render(self, items: Sequence[ItemRecord]) -> str:
        return self._dump_json([
            [item.id, item.name if item.name is not None else UNNAMED]
            for item in items
        ])

class FormatterRegistry:
    """Registry for formatter types."""

    def __init__(self):
        self._formatters: Dict[str, Type[BaseFormatter]] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default formatters."""
        self.register(OutputFormat.BASIC, BasicFormatter)
        self.register(OutputFormat.JSON_IDS, JsonIdsFormatter)
        self.register(OutputFormat.JSON_ID_NAMES, JsonIdNamesFormatter)

    def register(self, name: Union[str, OutputFormat], formatter_class: Type[BaseFormatter]) -> None:
        """
        Register a new formatter type.

        Args:
            name: Name to register the formatter under
            formatter_class: Formatter class to register
        """
        self._formatters[_key(name)] = formatter_class

    def names(self) -> Iterable[str]:
        return list(self._formatters)

    def create(self, name: Union[str, OutputFormat]) -> BaseFormatter:
        """
        Create a formatter instance.

        Args:
            name: Name of the formatter type

        Returns:
            BaseFormatter: Formatter instance

        Raises:
            FormatError: If formatter type not found
        """
        formatter_class = self._formatters.get(_key(name))
        if not formatter_class:
            raise FormatError(f"Unknown output format: {name}")

        return formatter_class()

def _key(name: Union[str, OutputFormat]) -> str:
    return name.value if isinstance(name, OutputFormat) else str(name)

# Global registry instance
registry = FormatterRegistry()

def register_formatter(name: Union[str, OutputFormat], formatter_class: Type[BaseFormatter]) -> None:
    """
    Register a new formatter type globally.

    Args:
        name: Name to register the formatter under
        formatter_class: Formatter class to register
    """
    registry.register(name, formatter_class)

def format_items(items: Sequence[ItemRecord], output_format: Union[str, OutputFormat]) -> str:
    """Render id-sorted items in the requested format."""
    output = registry.create(output_format).render(items)
    try:
        output.encode("utf-8")
    except UnicodeEncodeError as e:
        raise FormatError(f"Rendered items are not valid UTF-8 text: {e}") from e
    return output
