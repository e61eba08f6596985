import logging
from typing import Dict, Iterable

from storage_report.models import FileRecordTypedDict, NodeGroupTypedDict
from storage_report.utils import format_node_id

logger = logging.getLogger(__name__)


class NodeGroups:
    """Partition file records by the node that owns them"""

    def __init__(self, files: Iterable[FileRecordTypedDict]):
        self.groups: Dict[bytes, NodeGroupTypedDict] = {}
        for record in files:
            # exact byte value, not object identity
            key = bytes(record["node_id"])
            if key not in self.groups:
                self.groups[key] = {"name": "", "id": key, "files": []}
            group = self.groups[key]

            node_name = record.get("node_name")
            if not group["name"] and node_name:
                group["name"] = node_name
            group["files"].append(record)

        for group in self.groups.values():
            if not group["name"]:
                group["name"] = format_node_id(group["id"])

        logger.debug("Grouped records into %d node(s)", len(self.groups))

    def get_groups(self) -> Dict[bytes, NodeGroupTypedDict]:
        return self.groups
