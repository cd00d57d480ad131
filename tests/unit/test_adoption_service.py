import uuid
from datetime import date, datetime, timezone

import pytest

from pawfam.core.errors import BadRequestError
from pawfam.models.user import User
from pawfam.schemas.adoption import AdoptionApplicationCreate
from pawfam.services.adoption_service import AdoptionService

# Late evening UTC; servers east of UTC are already on the next day
NOW = datetime(2026, 10, 19, 23, 30, tzinfo=timezone.utc)


class RecordingAdoptionRepository:
    def __init__(self):
        self.applications = []

    def create_application(self, session, application):
        self.applications.append(application)
        return application


def application(visit_date: date) -> AdoptionApplicationCreate:
    return AdoptionApplicationCreate.model_validate(
        {
            "pet": {"id": "1", "name": "Buddy", "type": "Dog"},
            "personal_info": {
                "full_name": "Alice Smith",
                "email": "alice@example.com",
                "phone": "9876543210",
                "address": "12 Park Lane",
            },
            "experience": {"level": "first-time"},
            "visit_schedule": {"date": visit_date.isoformat(), "time": "10:30"},
            "adoption_reason": "Companion",
        }
    )


@pytest.fixture
def user():
    return User(id=uuid.uuid4(), username="alice", email="alice@example.com", password_hash="x")


@pytest.fixture
def repo():
    return RecordingAdoptionRepository()


def test_visit_today_is_accepted(repo, user):
    service = AdoptionService(repo, clock=lambda: NOW)

    stored = service.submit_application(None, user, application(date(2026, 10, 19)))

    assert stored.visit_date == date(2026, 10, 19)
    assert stored.user_id == user.id
    assert repo.applications == [stored]


def test_visit_yesterday_is_rejected(repo, user):
    service = AdoptionService(repo, clock=lambda: NOW)

    with pytest.raises(BadRequestError) as info:
        service.submit_application(None, user, application(date(2026, 10, 18)))

    assert info.value.message == "Visit date cannot be in the past"
    assert repo.applications == []


def test_today_follows_the_utc_clock(repo, user):
    after_midnight = datetime(2026, 10, 20, 0, 5, tzinfo=timezone.utc)
    service = AdoptionService(repo, clock=lambda: after_midnight)

    with pytest.raises(BadRequestError):
        service.submit_application(None, user, application(date(2026, 10, 19)))
