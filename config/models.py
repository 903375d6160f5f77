"""Configuration and data models for the item matching system."""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Tuple
from enum import Enum
import logging

logger = logging.getLogger(__name__)

ACTION_SLOTS = 5

class OutputFormat(str, Enum):
    """Output encodings for matched items."""
    BASIC = "basic"
    JSON_IDS = "json-ids"
    JSON_ID_NAMES = "json-id-names"

@dataclass(frozen=True)
class LookupConfig:
    """Settings for one lookup run."""
    items_path: str = "./data/item_definitions"
    extensions: Tuple[str, ...] = (".json",)
    worker_threads: int = -1  # -1 uses the CPU count
    chunk_size: int = 256
    show_progress: bool = True

    def __post_init__(self):
        """Normalize extensions to lowercase with a leading dot."""
        object.__setattr__(
            self,
            'extensions',
            tuple(
                (ext if ext.startswith('.') else f'.{ext}').lower()
                for ext in self.extensions
            )
        )
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")

def _require_int(key: str, value: Any, optional: bool = False) -> Optional[int]:
    if value is None and optional:
        return None
    # bool is an int subclass but never a valid id
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Field '{key}' must be an integer, got {value!r}")
    return value

def _require_str(key: str, value: Any) -> Optional[str]:
    if value is not None and not isinstance(value, str):
        raise TypeError(f"Field '{key}' must be a string or null, got {value!r}")
    return value

def _require_bool(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"Field '{key}' must be a boolean, got {value!r}")
    return value

def _require_actions(key: str, value: Any) -> Optional[Tuple[Optional[str], ...]]:
    if value is None:
        return None
    if not isinstance(value, list) or len(value) != ACTION_SLOTS:
        raise TypeError(
            f"Field '{key}' must be a list of {ACTION_SLOTS} entries, got {value!r}"
        )
    return tuple(_require_str(key, action) for action in value)

@dataclass(frozen=True)
class ItemRecord:
    """
    One item definition.

    Only ``id`` and ``name`` take part in matching; the remaining attributes
    are carried through unchanged. Equality and hashing cover every field.
    """
    id: int
    name: Optional[str] = None
    description: Optional[str] = None
    ground_actions: Optional[Tuple[Optional[str], ...]] = None
    inventory_actions: Optional[Tuple[Optional[str], ...]] = None
    members: bool = False
    note_graphic_id: Optional[int] = None
    note_info_id: Optional[int] = None
    team: int = 0
    stackable: bool = False
    value: int = 0

    @property
    def display_name(self) -> str:
        """Name used for pattern matching; absent names match as ''."""
        return self.name or ''

    @classmethod
    def from_dict(cls, data: Any) -> 'ItemRecord':
        """
        Build a record from a decoded JSON object.

        Args:
            data: Decoded JSON value

        Returns:
            ItemRecord: Parsed record

        Raises:
            ValueError: If the value is not an object or has no id
            TypeError: If a field has the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError("Item definition must be a JSON object")
        if 'id' not in data:
            raise ValueError("Missing required field: id")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.debug(f"Ignoring unknown fields for item {data['id']!r}: {unknown}")

        return cls(
            id=_require_int('id', data['id']),
            name=_require_str('name', data.get('name')),
            description=_require_str('description', data.get('description')),
            ground_actions=_require_actions('ground_actions', data.get('ground_actions')),
            inventory_actions=_require_actions('inventory_actions', data.get('inventory_actions')),
            members=_require_bool('members', data.get('members', False)),
            note_graphic_id=_require_int('note_graphic_id', data.get('note_graphic_id'), optional=True),
            note_info_id=_require_int('note_info_id', data.get('note_info_id'), optional=True),
            team=_require_int('team', data.get('team', 0)),
            stackable=_require_bool('stackable', data.get('stackable', False)),
            value=_require_int('value', data.get('value', 0)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Plain JSON-compatible representation."""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            result[f.name] = list(value) if isinstance(value, tuple) else value
        return result

@dataclass(frozen=True)
class MatchRequest:
    """
    Filters to apply in one lookup.

    Predicates are OR-ed together. A request with no predicates matches
    nothing.
    """
    patterns: Tuple[str, ...] = ()
    id_list_paths: Tuple[str, ...] = ()
    id_name_paths: Tuple[str, ...] = ()
    ids: Tuple[int, ...] = field(default=())

    def __post_init__(self):
        """Accept any iterable for the tuple fields."""
        for name in ('patterns', 'id_list_paths', 'id_name_paths', 'ids'):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    @property
    def is_empty(self) -> bool:
        return not (self.patterns or self.id_list_paths or self.id_name_paths or self.ids)
