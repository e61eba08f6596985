import locale
import logging
import time
import unicodedata
from datetime import datetime
from functools import wraps
from typing import List, Optional

logger = logging.getLogger(__name__)

SIZE_UNITS = ["KB", "MB", "GB", "TB"]


def time_it(func):
    """decorator to time a function"""

    @wraps(func)
    def timeit_wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        end_time = time.perf_counter()
        total_time = end_time - start_time
        logger.debug("Function %s took %.4f seconds", func.__name__, total_time)
        return result

    return timeit_wrapper


def collation_key(name: str):
    """
    Sort key for display names: case and accents are ignored first,
    the collation locale breaks the remaining ties
    """
    folded = "".join(
        char
        for char in unicodedata.normalize("NFKD", name.casefold())
        if not unicodedata.combining(char)
    )
    return locale.strxfrm(folded), locale.strxfrm(name), name


def normalize_path(path: str) -> str:
    """Use forward slashes and drop leading and trailing slashes"""
    return path.replace("\\", "/").strip("/")


def ancestor_paths(path: str) -> List[str]:
    """
    List every prefix of a normalized path, starting from the root ("")
    and ending with the path itself
    """
    ancestors = [""]
    current = ""
    for segment in path.split("/"):
        if not segment:
            continue
        current = f"{current}/{segment}" if current else segment
        ancestors.append(current)
    return ancestors


def format_node_id(node_id: bytes) -> str:
    if not node_id:
        return "unknown"
    return bytes(node_id).hex()


def display_name(path: str) -> str:
    """Last path segment, "Root" for the node root"""
    segments = [segment for segment in path.split("/") if segment]
    if not segments:
        return "Root"
    return segments[-1]


def latest_timestamp(current: Optional[str], candidate: Optional[str]) -> Optional[str]:
    # plain string comparison, ISO-8601 strings sort chronologically
    if not current:
        return candidate
    if not candidate:
        return current
    return current if current >= candidate else candidate


def format_size(value: int) -> str:
    if value < 1024:
        return f"{value} B"
    size = value / 1024
    index = 0
    while size >= 1024 and index < len(SIZE_UNITS) - 1:
        index += 1
        size /= 1024
    return f"{size:.1f} {SIZE_UNITS[index]}"


def format_timestamp(value: Optional[str]) -> str:
    if not value:
        return "-"
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.strftime("%Y-%m-%d %H:%M:%S")
