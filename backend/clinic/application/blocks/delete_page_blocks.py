from sqlalchemy.exc import SQLAlchemyError
from clinic.models.block import PageBlock
from clinic.domain.invariants.exceptions import BlockStoreError
from clinic.utils.transaction import transactional


def delete_page_blocks(page_path: str) -> int:
    """
    Delete all blocks for a page. Returns the number of rows removed.
    """
    try:
        with transactional():
            deleted = PageBlock.query.filter_by(page_path=page_path).delete(
                synchronize_session=False
            )
    except SQLAlchemyError as exc:
        raise BlockStoreError(f"Error deleting blocks: {exc}") from exc

    return deleted
