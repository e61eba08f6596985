from typing import Collection, List, Optional

from storage_report.models import (
    StorageEntryTypedDict,
    StorageNodeTypedDict,
    StorageRowTypedDict,
)
from storage_report.utils import format_size, format_timestamp


def node_row_id(node: StorageNodeTypedDict) -> str:
    return f"node:{node['id']}"


def entry_row_id(node_row: str, entry: StorageEntryTypedDict) -> str:
    return f"{node_row}:{entry['path']}"


def _is_expanded(row_id: str, expanded: Optional[Collection[str]]) -> bool:
    return expanded is None or row_id in expanded


def _entry_rows(
    node_row: str,
    entries: List[StorageEntryTypedDict],
    depth: int,
    expanded: Optional[Collection[str]],
    rows: List[StorageRowTypedDict],
):
    for entry in entries:
        row_id = entry_row_id(node_row, entry)
        has_children = bool(entry["children"])
        is_open = has_children and _is_expanded(row_id, expanded)
        rows.append(
            {
                "id": row_id,
                "depth": depth,
                "label": entry["name"],
                "sublabel": entry["path"],
                "percent": f"{entry['percent']:.1f}%",
                "size": format_size(entry["size"]),
                "items": str(entry["itemCount"]),
                "last_changed": format_timestamp(entry["lastChanged"]),
                "has_children": has_children,
                "expanded": is_open,
            }
        )
        if is_open:
            _entry_rows(node_row, entry["children"], depth + 1, expanded, rows)


def build_rows(
    nodes: List[StorageNodeTypedDict],
    expanded: Optional[Collection[str]] = None,
) -> List[StorageRowTypedDict]:
    """
    Flatten storage trees into the rows an expandable tree widget shows
    Args:
        nodes: Assembled storage nodes
        expanded: Row ids whose children are visible, None expands everything

    Returns:
        Rows in display order
    """
    rows: List[StorageRowTypedDict] = []
    for node in nodes:
        row_id = node_row_id(node)
        has_children = bool(node["entries"])
        is_open = has_children and _is_expanded(row_id, expanded)
        rows.append(
            {
                "id": row_id,
                "depth": 0,
                "label": node["name"],
                "sublabel": node["id"],
                "percent": "100%",
                "size": format_size(node["totalSize"]),
                "items": "-",
                "last_changed": "-",
                "has_children": has_children,
                "expanded": is_open,
            }
        )
        if is_open:
            _entry_rows(row_id, node["entries"], 1, expanded, rows)
    return rows
