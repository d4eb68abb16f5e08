from clinic.extensions import db
from .base import BaseModel

class GetStartedContent(BaseModel):
    __tablename__ = "csm_landingpage_getstarted"

    EDITABLE_FIELDS = frozenset({"heading", "description"})

    name = db.Column(db.String(100), nullable=False, unique=True, index=True)
    heading = db.Column(db.String(255), nullable=True)
    description = db.Column(db.Text, nullable=True)
