from clinic.extensions import db
from .base import BaseModel

class DoctorProfile(BaseModel):
    __tablename__ = "csm_doctor_profiles"

    EDITABLE_FIELDS = frozenset({"name", "title", "description", "image_url"})

    department = db.Column(db.String(50), nullable=False, index=True)  # eye, gynecology
    name = db.Column(db.String(255), nullable=False)
    title = db.Column(db.String(255), nullable=True)
    description = db.Column(db.Text, nullable=True)
    image_url = db.Column(db.String(512), nullable=True)


class Qualification(BaseModel):
    __tablename__ = "csm_doctor_qualifications"

    EDITABLE_FIELDS = frozenset({"department", "text", "display_order"})

    department = db.Column(db.String(50), nullable=False, index=True)
    text = db.Column(db.Text, nullable=False)
    display_order = db.Column(db.Integer, nullable=False, default=0)
