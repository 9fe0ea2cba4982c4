"""
SQLAlchemy ORM Models for Learning Store Persistence

One row per learner profile holding the whole store as a JSON blob.
The blob keeps the same shape the scheduler reads and writes, so a row
can be handed to LearningStore.from_blob after json.loads.
"""

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class LearningStoreRow(Base):
    """
    Persisted learning store for a single profile.
    """
    __tablename__ = 'learning_store'

    profile_id = Column(String(255), primary_key=True, nullable=False)

    # Schema tag of the blob (None for legacy weight maps)
    version = Column(Integer, nullable=True)

    # JSON text: {"version": 1, word: {...}} or a legacy {word: weight}
    payload = Column(Text, nullable=False)

    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<LearningStoreRow({self.profile_id}, version={self.version})>"
