from sqlalchemy import Column, String, Text, JSON

from phinpt.core.base import Base, uuid_pk, updated_at_column


# Обе таблицы хранят не больше одной строки
class ContactInfo(Base):
    __tablename__ = "contact_info"

    id = uuid_pk()
    phone = Column(String, nullable=False)
    facebook = Column(String, nullable=False)
    zalo = Column(String, nullable=False)
    email = Column(String, nullable=False)
    updated_at = updated_at_column()


class HomeContent(Base):
    __tablename__ = "home_content"

    id = uuid_pk()
    hero_title = Column(String, nullable=False)
    hero_subtitle = Column(Text, nullable=False)
    hero_image = Column(String, nullable=True)
    about_text = Column(Text, nullable=False)
    about_image = Column(String, nullable=True)
    services_title = Column(String, nullable=False)
    services = Column(JSON, nullable=False, default=list)
    updated_at = updated_at_column()
