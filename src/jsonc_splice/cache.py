"""ParseCache: LRU-backed cache of parsed document trees.

Maps document text to its ``TreeNode`` tree so a text that is planned
against more than once (reading back a value right after patching it,
re-saving an unchanged document) is parsed only once.  LRU eviction occurs
silently when ``max_size`` is exceeded.

Each ``ParseCache`` instance maintains its own ``LRUCache``; there is no
class-level shared state.  Cached trees are treated as read-only by every
caller, so a hit returns exactly what a fresh parse would.

Example::

    from jsonc_splice.cache import ParseCache

    cache = ParseCache(max_size=32)
    root = cache.parse('{"a": 1}')        # parsed
    root_again = cache.parse('{"a": 1}')  # served from memory
    assert root is root_again
"""

from __future__ import annotations

from cachetools import LRUCache

from jsonc_splice.tree.nodes import TreeNode
from jsonc_splice.tree.parser import parse_tree

# Distinguishes a cached empty document (None) from a miss.
_MISSING = object()


class ParseCache:
    """LRU cache from document text to parsed tree.

    Args:
        max_size: Maximum number of documents to hold.  Defaults to 32.
    """

    def __init__(self, max_size: int = 32) -> None:
        self._cache: LRUCache[str, TreeNode | None] = LRUCache(maxsize=max_size)
        self._hits = 0
        self._misses = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    @property
    def hits(self) -> int:
        return self._hits

    @property
    def misses(self) -> int:
        return self._misses

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def parse(self, text: str) -> TreeNode | None:
        """Return the tree for ``text``, parsing it on a miss.

        Raises:
            DocumentSyntaxError: If ``text`` is not valid JSONC.  Failed
                parses are not cached.
        """
        cached = self._cache.get(text, _MISSING)
        if cached is not _MISSING:
            self._hits += 1
            return cached  # type: ignore[return-value]
        self._misses += 1
        root = parse_tree(text)
        self._cache[text] = root
        return root

    def clear(self) -> None:
        self._cache.clear()
