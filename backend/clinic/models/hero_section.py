from clinic.extensions import db
from .base import BaseModel

class HeroSection(BaseModel):
    __tablename__ = "csm_eyecare_hero_sections"

    EDITABLE_FIELDS = frozenset({"title", "subtitle", "image_url"})

    title = db.Column(db.String(255), nullable=False)
    subtitle = db.Column(db.Text, nullable=True)
    image_url = db.Column(db.String(512), nullable=True)
