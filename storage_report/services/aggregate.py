import logging
from typing import Dict, Iterable, Optional

from storage_report.models import EntryStatsTypedDict, FileRecordTypedDict
from storage_report.utils import ancestor_paths, latest_timestamp, normalize_path

logger = logging.getLogger(__name__)


class PathStats:
    """
    Size, item count and last change for every path of a node,
    accumulated in a single pass over its files.

    Every file adds itself to each path of its ancestor chain,
    so a directory path ends up with the totals of everything beneath it.
    Consecutive ancestors are also recorded as parent -> child edges.
    """

    def __init__(self, files: Iterable[FileRecordTypedDict]):
        self.stats: Dict[str, EntryStatsTypedDict] = {}
        # dicts used as ordered sets, discovery order breaks size ties later
        self.children: Dict[str, Dict[str, None]] = {}

        for file in files:
            ancestors = ancestor_paths(normalize_path(file["path"]))
            size = file["size"]
            last_changed = file.get("last_changed")

            for path in ancestors:
                if path not in self.stats:
                    self.stats[path] = {
                        "size": 0,
                        "item_count": 0,
                        "last_changed": None,
                    }
                current = self.stats[path]
                current["size"] += size
                current["item_count"] += 1
                current["last_changed"] = latest_timestamp(
                    current["last_changed"], last_changed
                )

            for parent, child in zip(ancestors, ancestors[1:]):
                self.children.setdefault(parent, {})[child] = None

        logger.debug("Aggregated %d distinct path(s)", len(self.stats))

    def get_stats(self) -> Dict[str, EntryStatsTypedDict]:
        return self.stats

    def get_children(self) -> Dict[str, Dict[str, None]]:
        return self.children

    def get_root_stats(self) -> EntryStatsTypedDict:
        root: Optional[EntryStatsTypedDict] = self.stats.get("")
        if root is None:
            return {"size": 0, "item_count": 0, "last_changed": None}
        return root
