from sqlalchemy import Column, String, Float, Date, Text, ForeignKey

from phinpt.core.base import Base, uuid_pk, created_at_column


class WeightRecord(Base):
    __tablename__ = "weight_records"

    id = uuid_pk()
    client_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    weight = Column(Float, nullable=False)
    date = Column(Date, nullable=False, index=True)
    notes = Column(Text, nullable=True)
    created_at = created_at_column()
