"""
Item Matcher
============

Finds item definitions stored one per JSON file in a directory and prints
them in plain text or JSON.

Key Features:
- Name matching with any number of regular expressions
- Explicit selection by id from id-list and id/name-pair files
- Deduplicated results ordered by id
- Parallel matching over a thread pool
"""

from core.matcher import ItemMatcher, compile_patterns
from core.loader import ItemLoader
from core.result_set import ResultSet
from core.formatter import format_items, register_formatter

from config.models import (
    ItemRecord,
    LookupConfig,
    MatchRequest,
    OutputFormat
)
from config.rules import MatchRules, NamePatternRule, IdSetRule

__version__ = "1.0.0"
