"""
Item loader for discovering and parsing item definition files.

Item definitions live one per JSON file in a flat directory. Auxiliary
files list target ids either as a plain array of integers or as an array
of ``[id, name]`` pairs.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from tqdm import tqdm

from config.models import ItemRecord, LookupConfig
from core.errors import RecordLoadError, RecordParseError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

class ItemLoader:
    """
    Loads item definitions from a directory.

    Any unreadable or malformed file aborts the whole load.
    """

    def __init__(self, config: Optional[LookupConfig] = None):
        """
        Initialize the item loader.

        Args:
            config: Lookup settings; defaults are used when omitted
        """
        self.config = config or LookupConfig()
        self.base_path = Path(self.config.items_path)

    def discover_item_files(self, path: Optional[PathLike] = None) -> List[Path]:
        """
        List item files directly inside a directory.

        Args:
            path: Optional override for the configured items path

        Returns:
            List[Path]: Files with a recognized extension, sorted by path

        Raises:
            RecordLoadError: If the directory cannot be listed
        """
        search_path = Path(path) if path is not None else self.base_path

        if not search_path.is_dir():
            raise RecordLoadError(f"Item directory does not exist: {search_path}", search_path)

        try:
            entries = list(search_path.iterdir())
        except OSError as e:
            raise RecordLoadError(f"Could not read item directory {search_path}: {e}", search_path) from e

        item_files = []
        for entry in entries:
            if entry.suffix.lower() in self.config.extensions and entry.is_file():
                item_files.append(entry)
            else:
                logger.debug(f"Skipping non-item entry {entry}")

        return sorted(item_files)

    def load_item(self, file_path: PathLike) -> ItemRecord:
        """
        Parse a single item definition file.

        Args:
            file_path: Path to the item JSON file

        Returns:
            ItemRecord: Parsed item

        Raises:
            RecordLoadError: If the file cannot be read
            RecordParseError: If the file is not a valid item definition
        """
        data = _read_json(Path(file_path))
        try:
            return ItemRecord.from_dict(data)
        except (TypeError, ValueError) as e:
            raise RecordParseError(f"Invalid item definition in {file_path}: {e}", file_path) from e

    def load_all(self, path: Optional[PathLike] = None) -> List[ItemRecord]:
        """
        Load every item definition in a directory.

        Args:
            path: Optional override for the configured items path

        Returns:
            List[ItemRecord]: Items in file discovery order
        """
        item_files = self.discover_item_files(path)
        logger.info(f"Loading {len(item_files)} item files from {path or self.base_path}")

        items = []
        with tqdm(
            total=len(item_files),
            desc="Loading items",
            unit="file",
            disable=not self.config.show_progress
        ) as pbar:
            for file_path in item_files:
                items.append(self.load_item(file_path))
                pbar.update(1)

        logger.info(f"Loaded {len(items)} items")
        return items

    def load_id_list(self, file_path: PathLike) -> List[int]:
        """
        Read a JSON array of item ids.

        Args:
            file_path: Path to the id list file

        Returns:
            List[int]: Ids in file order
        """
        data = _read_json(Path(file_path))
        if not isinstance(data, list):
            raise RecordParseError(f"Id list {file_path} must be a JSON array", file_path)

        ids = []
        for index, value in enumerate(data):
            if not _is_id(value):
                raise RecordParseError(
                    f"Id list {file_path} entry {index} is not an integer: {value!r}",
                    file_path
                )
            ids.append(value)
        return ids

    def load_id_name_pairs(self, file_path: PathLike) -> List[int]:
        """
        Read a JSON array of ``[id, name]`` pairs and keep only the ids.

        Args:
            file_path: Path to the id/name pair file

        Returns:
            List[int]: Ids in file order
        """
        data = _read_json(Path(file_path))
        if not isinstance(data, list):
            raise RecordParseError(f"Id/name list {file_path} must be a JSON array", file_path)

        ids = []
        for index, pair in enumerate(data):
            if (
                not isinstance(pair, list)
                or len(pair) != 2
                or not _is_id(pair[0])
                or not (pair[1] is None or isinstance(pair[1], str))
            ):
                raise RecordParseError(
                    f"Id/name list {file_path} entry {index} is not an [id, name] pair: {pair!r}",
                    file_path
                )
            ids.append(pair[0])
        return ids

def _is_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

def _read_json(file_path: Path) -> Any:
    try:
        with open(file_path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise RecordParseError(f"Invalid JSON in {file_path}: {e}", file_path) from e
    except RecursionError as e:
        raise RecordParseError(f"JSON in {file_path} is nested too deeply", file_path) from e
    except UnicodeDecodeError as e:
        raise RecordParseError(f"File {file_path} is not valid UTF-8: {e}", file_path) from e
    except OSError as e:
        raise RecordLoadError(f"Could not read {file_path}: {e}", file_path) from e
