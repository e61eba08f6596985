import logging
from typing import Iterable, List

from storage_report.models import FileRecordTypedDict, StorageNodeTypedDict
from storage_report.services.aggregate import PathStats
from storage_report.services.grouping import NodeGroups
from storage_report.services.tree import build_entries
from storage_report.utils import collation_key, format_node_id, time_it

logger = logging.getLogger(__name__)


class StorageNodes:
    """One storage tree per node, nodes ordered by name"""

    def __init__(self, files: Iterable[FileRecordTypedDict]):
        self.nodes: List[StorageNodeTypedDict] = []
        for group in NodeGroups(files).get_groups().values():
            path_stats = PathStats(group["files"])
            total_size = path_stats.get_root_stats()["size"]
            entries = build_entries(
                "",
                path_stats.get_stats(),
                path_stats.get_children(),
                total_size,
            )
            self.nodes.append(
                {
                    "name": group["name"] or format_node_id(group["id"]),
                    "id": format_node_id(group["id"]),
                    "totalSize": total_size,
                    "entries": entries,
                }
            )

        self.nodes.sort(key=lambda node: collation_key(node["name"]))

    def get_nodes(self) -> List[StorageNodeTypedDict]:
        return self.nodes


@time_it
def build_storage_nodes(files: Iterable[FileRecordTypedDict]) -> List[StorageNodeTypedDict]:
    """Turn flat per-file records into per-node storage trees"""
    nodes = StorageNodes(files).get_nodes()
    logger.debug("Built storage trees for %d node(s)", len(nodes))
    return nodes
