"""Test configuration and fixtures."""

import os

# Must be set before creek_river.core.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "development")

from datetime import date
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from creek_river.core.database import Base, enable_sqlite_foreign_keys, get_db
from creek_river.models import *  # noqa: F403 - Import all models

# Test database URL (in-memory SQLite for speed)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create a test database engine with foreign keys enforced."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def test_session(test_engine):
    """Create a test database session."""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def test_app(test_session):
    """Create a test FastAPI application without the lifespan hooks."""
    from fastapi import FastAPI

    from creek_river.core.middleware import setup_middleware
    from creek_river.main import include_api_routers, register_exception_handlers

    app = FastAPI(
        title="Creek River Campground API (Test)",
        version="1.0.0-test",
    )

    setup_middleware(app, enable_logging=True)
    register_exception_handlers(app)
    include_api_routers(app)

    async def override_get_db():
        yield test_session

    app.dependency_overrides[get_db] = override_get_db

    yield app

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def test_client(test_app):
    """Create a test HTTP client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture(scope="function")
async def seeded(test_session):
    """
    Seed two campsite types, two campsites and two guests.

    Returns:
        dict: IDs of the seeded rows keyed by a short name
    """
    tent = CampsiteType(campsite_type_name="Tent", fee_per_night=Decimal("15.99"), max_occupants=4)
    rv = CampsiteType(campsite_type_name="RV", fee_per_night=Decimal("26.50"), max_occupants=6)
    test_session.add_all([tent, rv])
    await test_session.flush()

    owl = Campsite(nickname="Barred Owl", campsite_type_id=tent.id, image_url="https://img.test/owl.jpg")
    heron = Campsite(nickname="Blue Heron", campsite_type_id=rv.id, image_url=None)
    eve = UserProfile(first_name="Eve", last_name="Sullivan", email="eve@sullivan.com")
    sam = UserProfile(first_name="Sam", last_name="Reyes", email="sam@reyes.com")
    test_session.add_all([owl, heron, eve, sam])
    await test_session.commit()

    return {
        "tent": tent.id,
        "rv": rv.id,
        "owl": owl.id,
        "heron": heron.id,
        "eve": eve.id,
        "sam": sam.id,
    }


@pytest.fixture
def sample_campsite_data(seeded):
    """Sample campsite payload in wire (camelCase) format."""
    return {
        "nickname": "Kingfisher",
        "imageUrl": "https://img.test/kingfisher.jpg",
        "campsiteTypeId": seeded["tent"],
    }


@pytest.fixture
def sample_reservation_data(seeded):
    """Sample reservation payload in wire (camelCase) format."""
    return {
        "userProfileId": seeded["eve"],
        "campsiteId": seeded["owl"],
        "checkinDate": date(2023, 7, 18).isoformat(),
        "checkoutDate": date(2023, 7, 20).isoformat(),
    }
