import uuid
from typing import Any, Dict, List, Sequence
from sqlalchemy.exc import SQLAlchemyError
from clinic.extensions import db
from clinic.models.block import PageBlock
from clinic.domain.invariants.block import assert_block_payload, block_content
from clinic.domain.invariants.exceptions import BlockStoreError
from clinic.utils.transaction import transactional


def save_page_blocks(
    page_path: str,
    blocks: Sequence[Dict[str, Any]],
) -> List[PageBlock]:
    """
    Replace every block of a page with the given sequence.

    Design rules:
    - order_index is the block's position in the sequence (0-based)
    - blocks without an id get a fresh UUID
    - delete and insert share one transaction, so a failed save leaves
      the previous blocks in place
    """
    for block in blocks:
        assert_block_payload(block)

    try:
        with transactional():
            try:
                for existing in PageBlock.query.filter_by(page_path=page_path).all():
                    db.session.delete(existing)
                db.session.flush()
            except SQLAlchemyError as exc:
                raise BlockStoreError(f"Error deleting existing blocks: {exc}") from exc

            rows = [
                PageBlock(
                    id=block.get("id") or str(uuid.uuid4()),
                    page_path=page_path,
                    type=block["type"],
                    content=block_content(block),
                    order_index=index,
                )
                for index, block in enumerate(blocks)
            ]
            db.session.add_all(rows)
    except SQLAlchemyError as exc:
        raise BlockStoreError(f"Error saving blocks: {exc}") from exc

    return rows
