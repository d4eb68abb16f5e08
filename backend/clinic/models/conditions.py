from clinic.extensions import db
from .base import BaseModel

class ConditionsSection(BaseModel):
    __tablename__ = "csm_eyecare_conditions_section"

    EDITABLE_FIELDS = frozenset({"heading", "description"})

    heading = db.Column(db.String(255), nullable=True)
    description = db.Column(db.Text, nullable=True)


class EyeCondition(BaseModel):
    __tablename__ = "csm_eyecare_conditions"

    EDITABLE_FIELDS = frozenset({"title", "description", "display_order"})

    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    display_order = db.Column(db.Integer, nullable=False, default=0)
