from datetime import datetime, timezone
import uuid
from clinic.extensions import db

def local_time_now():
    return datetime.now(timezone.utc).astimezone()

class BaseModel(db.Model):
    __abstract__ = True

    # Columns an admin may change through a content update. Anything else in a
    # patch is rejected before it reaches the database.
    EDITABLE_FIELDS: frozenset = frozenset()

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    created_at = db.Column(db.DateTime, default=local_time_now, index=True)
    updated_at = db.Column(db.DateTime, default=local_time_now, onupdate=local_time_now, index=True)

    def __init__(self, **kwargs):
        """
        Dummy __init__ to satisfy static type checkers (Pylance, MyPy).
        SQLAlchemy ORM will populate fields dynamically.
        """
        super().__init__(**kwargs)

    def to_dict(self):
        data = {
            column.name: getattr(self, column.name)
            for column in self.__table__.columns
        }
        for key in ("created_at", "updated_at"):
            if data.get(key) is not None:
                data[key] = data[key].isoformat()
        return data
