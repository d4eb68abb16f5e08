from clinic.extensions import db
from .base import BaseModel

class Service(BaseModel):
    __tablename__ = "csm_department_services"

    EDITABLE_FIELDS = frozenset({
        "department", "category", "title", "description", "display_order"
    })

    department = db.Column(db.String(50), nullable=False, index=True)
    category = db.Column(db.String(100), nullable=True, index=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    display_order = db.Column(db.Integer, nullable=False, default=0)
