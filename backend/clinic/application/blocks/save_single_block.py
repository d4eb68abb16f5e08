from typing import Any, Dict
from sqlalchemy.exc import SQLAlchemyError
from clinic.extensions import db
from clinic.models.block import PageBlock
from clinic.domain.invariants.block import assert_block_payload, block_content
from clinic.domain.invariants.exceptions import BlockStoreError, ValidationError
from clinic.utils.transaction import transactional


def save_single_block(block: Dict[str, Any]) -> PageBlock:
    """
    Insert or update one block by id.
    """
    if not isinstance(block, dict) or not block.get("id") or not block.get("page_path"):
        raise ValidationError("Block ID and page path are required")

    assert_block_payload(block)

    try:
        with transactional():
            row = db.session.get(PageBlock, block["id"])
            if row is None:
                row = PageBlock(id=block["id"])
                db.session.add(row)

            row.page_path = block["page_path"]
            row.type = block["type"]
            row.content = block_content(block)
            row.order_index = block.get("order_index") or 0
    except SQLAlchemyError as exc:
        raise BlockStoreError(f"Error saving block: {exc}") from exc

    return row
