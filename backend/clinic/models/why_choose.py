from clinic.extensions import db
from .base import BaseModel

class WhyChooseSection(BaseModel):
    __tablename__ = "csm_landingpage_why_choose_us_section"

    EDITABLE_FIELDS = frozenset({"heading", "description"})

    section = db.Column(db.String(100), nullable=False, index=True)
    heading = db.Column(db.String(255), nullable=True)
    description = db.Column(db.Text, nullable=True)


class BenefitCard(BaseModel):
    __tablename__ = "csm_landingpage_why_choose_us_cards"

    EDITABLE_FIELDS = frozenset({"section", "title", "description"})

    section = db.Column(db.String(100), nullable=False, index=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
