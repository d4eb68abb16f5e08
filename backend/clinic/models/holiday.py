from clinic.extensions import db
from .base import BaseModel

HOLIDAY_TYPES = ("national", "doctor", "manual", "api")

class Holiday(BaseModel):
    __tablename__ = "holidays"

    EDITABLE_FIELDS = frozenset({"date", "name", "type", "doctor", "description"})

    date = db.Column(db.Date, nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    type = db.Column(db.String(20), nullable=False, default="manual", index=True)
    # null or "all" means every doctor
    doctor = db.Column(db.String(50), nullable=True)
    description = db.Column(db.Text, nullable=True)
