"""Main item matching system implementation."""

from typing import Iterable, List, Optional, Sequence, Set
from concurrent.futures import ThreadPoolExecutor
from multiprocessing import cpu_count
import logging
import time
import regex as re

from core.errors import PatternError
from core.loader import ItemLoader
from core.result_set import ResultSet
from config.models import ItemRecord, LookupConfig, MatchRequest
from config.rules import MatchRules

logger = logging.getLogger(__name__)

def compile_patterns(patterns: Iterable[str]) -> List['re.Pattern']:
    """
    Compile name patterns.

    Args:
        patterns: Regular expression sources

    Returns:
        List[re.Pattern]: Compiled patterns in input order

    Raises:
        PatternError: If any pattern is invalid
    """
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise PatternError(pattern, str(e)) from e
    return compiled

class ItemMatcher:
    """
    Selects items matching any name pattern or target id.
    """

    def __init__(
        self,
        config: Optional[LookupConfig] = None,
        loader: Optional[ItemLoader] = None
    ):
        """
        Initialize the item matcher.

        Args:
            config: Lookup settings; defaults are used when omitted
            loader: Loader for item and id files; built from config when omitted
        """
        self.config = config or LookupConfig()
        self.loader = loader or ItemLoader(self.config)
        self.worker_threads = (
            self.config.worker_threads if self.config.worker_threads > 0 else cpu_count()
        )

    def collect_target_ids(self, request: MatchRequest) -> Set[int]:
        """
        Union of ids from every id file in the request and its explicit ids.

        Args:
            request: Match request

        Returns:
            Set[int]: Target ids
        """
        target_ids: Set[int] = set(request.ids)
        for path in request.id_list_paths:
            target_ids.update(self.loader.load_id_list(path))
        for path in request.id_name_paths:
            target_ids.update(self.loader.load_id_name_pairs(path))
        return target_ids

    def build_rules(self, request: MatchRequest) -> MatchRules:
        """
        Compile patterns and gather target ids into match rules.

        Patterns are compiled before any id file is read.
        """
        patterns = compile_patterns(request.patterns)
        target_ids = self.collect_target_ids(request)
        logger.info(
            f"Matching with {len(patterns)} patterns and {len(target_ids)} target ids"
        )
        return MatchRules.from_predicates(patterns, target_ids)

    def match(self, items: Sequence[ItemRecord], request: MatchRequest) -> ResultSet:
        """
        Select the items satisfying at least one predicate of a request.

        Args:
            items: Loaded items
            request: Match request

        Returns:
            ResultSet: Deduplicated matches
        """
        if request.is_empty:
            return ResultSet()
        return self.apply_rules(items, self.build_rules(request))

    def apply_rules(self, items: Sequence[ItemRecord], rules: MatchRules) -> ResultSet:
        """
        Evaluate rules over items in parallel.

        Args:
            items: Loaded items
            rules: Rules to apply

        Returns:
            ResultSet: Deduplicated matches
        """
        start_time = time.time()
        results = ResultSet()

        if rules.is_empty or not items:
            return results

        items = list(items)
        chunk_size = self.config.chunk_size
        chunks = [items[i:i + chunk_size] for i in range(0, len(items), chunk_size)]

        with ThreadPoolExecutor(max_workers=min(self.worker_threads, len(chunks))) as executor:
            futures = [
                executor.submit(self._process_chunk, chunk, rules, results)
                for chunk in chunks
            ]
            for future in futures:
                # re-raises any worker failure
                future.result()

        logger.info(
            f"Matched {len(results)} of {len(items)} items in "
            f"{time.time() - start_time:.2f} seconds"
        )
        return results

    def find_items(self, request: MatchRequest) -> ResultSet:
        """
        Load the configured item directory and match it against a request.

        Rules are built first so an invalid pattern or id file fails before
        the item directory is read.

        Args:
            request: Match request

        Returns:
            ResultSet: Deduplicated matches
        """
        if request.is_empty:
            logger.warning("No patterns or ids given; nothing will match")
        rules = self.build_rules(request)
        logger.info("Searching items...")
        items = self.loader.load_all()
        return self.apply_rules(items, rules)

    @staticmethod
    def _process_chunk(
        chunk: List[ItemRecord],
        rules: MatchRules,
        results: ResultSet
    ) -> None:
        results.update(item for item in chunk if rules.matches(item))
