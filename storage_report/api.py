from flask import Blueprint, current_app, jsonify, request
from marshmallow import ValidationError

from storage_report.models import StorageUsageRequestSchema
from storage_report.services.nodes import build_storage_nodes
from storage_report.services.rows import build_rows
from storage_report.settings import settings

api = Blueprint("api", __name__)


def load_storage_request():
    """
    Validate the posted storage usage records
    Returns:
        (payload, None) on success, (None, error response) otherwise
    """
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return None, (jsonify({"error": "expected a JSON object body"}), 400)

    files = body.get("files")
    if isinstance(files, list) and len(files) > settings.max_records:
        current_app.logger.warning(
            "Rejected storage usage request with %d records", len(files)
        )
        return None, (
            jsonify({"error": f"too many records, limit is {settings.max_records}"}),
            413,
        )

    try:
        payload = StorageUsageRequestSchema().load(body)
    except ValidationError as err:
        return None, (jsonify(err.messages), 400)
    return payload, None


@api.route("/api/v0/storage_usage", methods=["POST"])
def api_v0_storage_usage():
    """Storage usage trees, one per node"""
    payload, error = load_storage_request()
    if error is not None:
        return error

    nodes = build_storage_nodes(payload["files"])
    current_app.logger.info(
        "Built storage usage for %d node(s) from %d record(s)",
        len(nodes),
        len(payload["files"]),
    )
    return jsonify(nodes)


@api.route("/api/v0/storage_usage/rows", methods=["POST"])
def api_v0_storage_usage_rows():
    """Storage usage flattened into tree widget rows"""
    payload, error = load_storage_request()
    if error is not None:
        return error

    nodes = build_storage_nodes(payload["files"])
    expanded = payload["expanded"]
    rows = build_rows(nodes, set(expanded) if expanded is not None else None)
    return jsonify(rows)


@api.route("/api/v0/ping", methods=["GET"])
def api_v0_ping():
    """Ping"""
    return jsonify({"status": "ok"})
