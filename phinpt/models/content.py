from sqlalchemy import Column, Integer, String, Text

from phinpt.core.base import Base, uuid_pk, created_at_column, updated_at_column


class Testimonial(Base):
    __tablename__ = "testimonials"

    id = uuid_pk()
    name = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    rating = Column(Integer, default=5, nullable=False)
    avatar = Column(String, nullable=True)
    before_image = Column(String, nullable=True)
    after_image = Column(String, nullable=True)
    created_at = created_at_column()
    updated_at = updated_at_column()


class Video(Base):
    __tablename__ = "videos"

    id = uuid_pk()
    title = Column(String, nullable=False)
    youtube_id = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    category = Column(String, nullable=False)
    created_at = created_at_column()
    updated_at = updated_at_column()
