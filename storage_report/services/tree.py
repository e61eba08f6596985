from typing import Dict, List

from storage_report.models import EntryStatsTypedDict, StorageEntryTypedDict
from storage_report.utils import display_name


def build_entries(
    parent: str,
    stats: Dict[str, EntryStatsTypedDict],
    children: Dict[str, Dict[str, None]],
    total_size: int,
) -> List[StorageEntryTypedDict]:
    """
    Build the sorted entries below a path
    Args:
        parent: Normalized path whose children are built, "" for the node root
        stats: Aggregated statistics per path
        children: Parent path -> child paths, in discovery order
        total_size: Size of the parent, percentages are relative to it

    Returns:
        Entries ordered by descending size, equal sizes keep discovery order
    """
    child_paths = children.get(parent)
    if not child_paths:
        return []

    # sorted() is stable with reverse=True as well
    ordered = sorted(child_paths, key=lambda path: stats[path]["size"], reverse=True)

    entries: List[StorageEntryTypedDict] = []
    for child_path in ordered:
        data = stats[child_path]
        percent = 0.0 if total_size == 0 else data["size"] / total_size * 100
        entries.append(
            {
                "path": child_path,
                "name": display_name(child_path),
                "size": data["size"],
                "itemCount": data["item_count"],
                "lastChanged": data["last_changed"],
                "percent": percent,
                "children": build_entries(child_path, stats, children, data["size"]),
            }
        )
    return entries
