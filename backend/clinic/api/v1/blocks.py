# clinic/api/v1/blocks.py
from flask import request, jsonify
from clinic.application.blocks import (
    fetch_page_blocks,
    save_page_blocks,
    save_single_block,
    delete_page_blocks,
)
from clinic.domain.invariants.exceptions import ValidationError
from clinic.normalizers.block import normalize_block
from clinic.utils.decorators import admin_required, current_admin
from . import v1_bp, json_body


def _page_path():
    page_path = request.args.get("page_path")
    if not page_path:
        raise ValidationError("page_path is required")
    return page_path


@v1_bp.route("/blocks", methods=["GET"])
def get_blocks():
    page_path = _page_path()
    admin = bool(current_admin())

    return jsonify({
        "page_path": page_path,
        "blocks": [normalize_block(b, admin=admin) for b in fetch_page_blocks(page_path)]
    }), 200


@v1_bp.route("/blocks", methods=["PUT"])
@admin_required
def replace_blocks():
    page_path = _page_path()
    data = json_body()

    blocks = data.get("blocks")
    if not isinstance(blocks, list):
        raise ValidationError("blocks must be a list")

    rows = save_page_blocks(page_path, blocks)

    return jsonify({
        "page_path": page_path,
        "blocks": [normalize_block(b, admin=True) for b in rows]
    }), 200


@v1_bp.route("/blocks", methods=["DELETE"])
@admin_required
def remove_blocks():
    page_path = _page_path()
    deleted = delete_page_blocks(page_path)

    return jsonify({
        "message": "Blocks deleted",
        "deleted": deleted
    }), 200


@v1_bp.route("/blocks/<string:block_id>", methods=["PUT"])
@admin_required
def upsert_block(block_id):
    data = json_body()
    data["id"] = block_id

    block = save_single_block(data)

    return jsonify(normalize_block(block, admin=True)), 200
