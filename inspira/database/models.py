from datetime import datetime
import uuid

from sqlalchemy import Column, DateTime, LargeBinary, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Quote(Base):
    """
    One captured quotation.

    Every text field is optional: a freshly created quote is an empty draft
    that gets filled in from the detail view. date_created is the only sort
    key (newest first).
    """

    __tablename__ = "quotes"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    text = Column(Text, nullable=True)
    creator = Column(String, nullable=True)
    description_of_how_found = Column(Text, nullable=True)
    interpretation = Column(Text, nullable=True)
    image_data = Column(LargeBinary, nullable=True)  # PNG bytes
    date_created = Column(
        DateTime, default=datetime.utcnow, nullable=False, index=True
    )

    def __repr__(self) -> str:  # pragma: no cover - repr utility
        return f"Quote(id={self.id}, creator={self.creator}, date_created={self.date_created})"
