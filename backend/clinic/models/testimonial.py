from clinic.extensions import db
from .base import BaseModel

class Testimonial(BaseModel):
    __tablename__ = "csm_testimonials"

    EDITABLE_FIELDS = frozenset({
        "department", "author", "title", "quote", "initials", "delay"
    })

    department = db.Column(db.String(50), nullable=False, index=True)
    author = db.Column(db.String(255), nullable=False)
    title = db.Column(db.String(255), nullable=True)
    quote = db.Column(db.Text, nullable=False)
    initials = db.Column(db.String(8), nullable=True)
    delay = db.Column(db.Integer, default=0)  # animation delay in ms
