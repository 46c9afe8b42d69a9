"""Модульные тесты для настроек сайта (контакты, контент главной)."""

import pytest
from sqlalchemy import select, func

from phinpt.models.site_settings import ContactInfo, HomeContent
from phinpt.schemas.site_settings import ContactInfoUpdate, HomeContentUpdate
from phinpt.services.site_settings_service import (
    SiteSettingsService,
    DEFAULT_CONTACT_INFO,
    DEFAULT_HOME_CONTENT,
)

pytestmark = pytest.mark.unit


def make_contact(phone: str = "0909000111") -> ContactInfoUpdate:
    return ContactInfoUpdate(
        phone=phone,
        facebook="https://facebook.com/phi",
        zalo="https://zalo.me/0909000111",
        email="phi@example.com",
    )


async def test_get_contact_info_returns_defaults_when_empty(db_session):
    info = await SiteSettingsService(db_session).get_contact_info()

    assert info.id is None
    assert info.phone == DEFAULT_CONTACT_INFO.phone
    assert info.email == "contact@phinpt.com"


async def test_get_home_content_returns_defaults_when_empty(db_session):
    home = await SiteSettingsService(db_session).get_home_content()

    assert home.hero_title == "Phi Nguyễn Personal Trainer"
    assert home.services == DEFAULT_HOME_CONTENT.services
    assert len(home.services) == 4


async def test_defaults_are_not_shared_between_calls(db_session):
    service = SiteSettingsService(db_session)
    home = await service.get_home_content()
    home.services.append("Yoga")

    assert "Yoga" not in (await service.get_home_content()).services


async def test_update_contact_info_inserts_then_updates_single_row(db_session):
    service = SiteSettingsService(db_session)

    first = await service.update_contact_info(make_contact("0909000111"))
    second = await service.update_contact_info(make_contact("0911222333"))

    assert first.id is not None
    assert second.id == first.id
    assert (await service.get_contact_info()).phone == "0911222333"
    rows = (await db_session.execute(select(func.count()).select_from(ContactInfo))).scalar()
    assert rows == 1


async def test_update_home_content_persists_services_list(db_session):
    service = SiteSettingsService(db_session)
    payload = HomeContentUpdate(
        hero_title="PT Phi",
        hero_subtitle="Khỏe mỗi ngày",
        hero_image="http://localhost:9000/phinpt-images/images/hero.jpg",
        about_text="Giới thiệu",
        services_title="Dịch vụ",
        services=["1-1", "Online"],
    )

    await service.update_home_content(payload)
    updated = await service.update_home_content(payload.model_copy(update={"services": ["Online"]}))

    assert updated.services == ["Online"]
    assert (await service.get_home_content()).hero_image.endswith("hero.jpg")
    rows = (await db_session.execute(select(func.count()).select_from(HomeContent))).scalar()
    assert rows == 1
