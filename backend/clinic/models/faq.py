from clinic.extensions import db
from .base import BaseModel

class Faq(BaseModel):
    __tablename__ = "csm_faqs"

    EDITABLE_FIELDS = frozenset({"question", "answer"})

    question = db.Column(db.Text, nullable=False)
    answer = db.Column(db.Text, nullable=False)
