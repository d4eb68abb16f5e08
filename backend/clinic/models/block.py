from clinic.extensions import db
from .base import BaseModel

class PageBlock(BaseModel):
    __tablename__ = "blocks"

    EDITABLE_FIELDS = frozenset({"type", "content", "order_index"})

    page_path = db.Column(db.String(255), nullable=False, index=True)
    type = db.Column(db.String(100), nullable=False)  # heading, text, image, ...
    content = db.Column(db.JSON, default=dict)  # opaque payload owned by the editor
    order_index = db.Column(db.Integer, nullable=False, default=0)

    __table_args__ = (
        db.Index("idx_block_page_order", "page_path", "order_index"),
    )
