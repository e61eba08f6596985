from typing import List, Optional, TypedDict

from marshmallow import EXCLUDE, Schema, ValidationError, fields, validate, validates

from storage_report.settings import settings
from storage_report.utils import ancestor_paths, normalize_path


class FileRecordTypedDict(TypedDict):
    node_id: bytes
    node_name: Optional[str]
    path: str
    size: int
    last_changed: Optional[str]


class EntryStatsTypedDict(TypedDict):
    size: int
    item_count: int
    last_changed: Optional[str]


class NodeGroupTypedDict(TypedDict):
    name: str
    id: bytes
    files: List[FileRecordTypedDict]


class StorageEntryTypedDict(TypedDict):
    path: str
    name: str
    size: int
    itemCount: int
    lastChanged: Optional[str]
    percent: float
    children: List["StorageEntryTypedDict"]


class StorageNodeTypedDict(TypedDict):
    name: str
    id: str
    totalSize: int
    entries: List[StorageEntryTypedDict]


class StorageRowTypedDict(TypedDict):
    id: str
    depth: int
    label: str
    sublabel: str
    percent: str
    size: str
    items: str
    last_changed: str
    has_children: bool
    expanded: bool


class NodeIdField(fields.Field):
    """Node identifier, either a list of byte values or a hex string"""

    default_error_messages = {
        "invalid": "Not a valid node id.",
    }

    def _deserialize(self, value, attr, data, **kwargs) -> bytes:
        if isinstance(value, str):
            try:
                return bytes.fromhex(value)
            except ValueError as error:
                raise self.make_error("invalid") from error
        if isinstance(value, list):
            if not all(isinstance(b, int) and not isinstance(b, bool) for b in value):
                raise self.make_error("invalid")
            try:
                return bytes(value)
            except ValueError as error:
                raise self.make_error("invalid") from error
        raise self.make_error("invalid")

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return bytes(value).hex()


class FileRecordSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    node_id = NodeIdField(required=True)
    node_name = fields.String(load_default=None, allow_none=True)
    path = fields.String(required=True)
    size = fields.Integer(required=True, strict=True, validate=validate.Range(min=0))
    last_changed = fields.String(load_default=None, allow_none=True)

    @validates("path")
    def validate_path_depth(self, value: str, **kwargs):
        depth = len(ancestor_paths(normalize_path(value))) - 1
        if depth > settings.max_path_depth:
            raise ValidationError(
                f"Path is nested {depth} levels deep, limit is {settings.max_path_depth}."
            )


class StorageUsageRequestSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    files = fields.List(fields.Nested(FileRecordSchema), required=True)
    expanded = fields.List(fields.String(), load_default=None, allow_none=True)

