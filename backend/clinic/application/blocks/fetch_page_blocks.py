from typing import List
from sqlalchemy.exc import SQLAlchemyError
from clinic.models.block import PageBlock
from clinic.domain.invariants.exceptions import BlockStoreError


def fetch_page_blocks(page_path: str) -> List[PageBlock]:
    """
    Fetch all blocks for a page, ordered by order_index ascending.
    """
    try:
        return (
            PageBlock.query
            .filter_by(page_path=page_path)
            .order_by(PageBlock.order_index.asc())
            .all()
        )
    except SQLAlchemyError as exc:
        raise BlockStoreError(f"Error fetching blocks: {exc}") from exc
