"""Shared test fixtures for Zephyr backend tests."""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from fastapi.testclient import TestClient

from zephyr.dependencies import require_auth, get_profile_service
from zephyr.services.profile.profile_service import ProfileService


@pytest.fixture
def sample_user_id():
    return "firebase_uid_123"


@pytest.fixture
def fake_user(sample_user_id):
    return {
        "uid": sample_user_id,
        "email": "dana@example.com",
        "name": "Dana",
        "token": "id-token-abc",
    }


@pytest.fixture
def mock_collection():
    collection = AsyncMock()
    collection.find_one.return_value = None
    return collection


@pytest.fixture
def mock_db(mock_collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=mock_collection)
    return db


@pytest.fixture
def profile_service(mock_db):
    return ProfileService(db=mock_db)


@pytest.fixture
def complete_profile_doc(sample_user_id):
    now = datetime.now(timezone.utc)
    return {
        "_id": sample_user_id,
        "fullName": "Dana Putri",
        "nickname": "Dana",
        "countryId": "102",
        "countryName": "Indonesia",
        "countryCode": "ID",
        "admin1Id": "1800",
        "admin1Name": "Central Java",
        "admin1Code": "JT",
        "cityId": "56789",
        "cityName": "Klaten",
        "postalCode": "57411",
        "addressDetail": "Jl. Pemuda No. 1",
        "birthDate": "2004-05-01",
        "gender": "female",
        "agreementAccepted": True,
        "updatedAt": now,
        "createdAt": now,
    }


@pytest.fixture
def profile_form_data(complete_profile_doc):
    return {
        key: value
        for key, value in complete_profile_doc.items()
        if key not in {"_id", "agreementAccepted", "updatedAt", "createdAt"}
    }


@pytest.fixture
def client(fake_user, profile_service):
    """Test client with a signed-in user. Lifespan is not run."""
    from api import app

    app.dependency_overrides[require_auth] = lambda: fake_user
    app.dependency_overrides[get_profile_service] = lambda: profile_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(profile_service):
    """Test client with the real auth dependency."""
    from api import app

    app.dependency_overrides[get_profile_service] = lambda: profile_service
    yield TestClient(app)
    app.dependency_overrides.clear()
