"""Unit tests for decide_admission.

Rules are checked in a fixed order and the first failing rule wins.
"""

from datetime import date, timedelta

import pytest
from uuid_extensions import uuid7

from campus_events.core.enums import ErrorCode
from campus_events.core.result import Failure, Success
from campus_events.domain.enums import EventStatus
from campus_events.domain.errors import (
    AlreadyRegisteredError,
    DeadlinePassedError,
    EventFullError,
    EventNotOpenError,
)
from campus_events.domain.policies import decide_admission

pytestmark = pytest.mark.unit

TODAY = date(2026, 3, 10)


def test_admits_when_every_rule_passes(make_event):
    event = make_event(max_capacity=10, registration_deadline=TODAY)

    result = decide_admission(
        event, today=TODAY, confirmed_count=9, existing_registration_id=None
    )

    assert result == Success(value=None)


@pytest.mark.parametrize(
    "status", [EventStatus.ONGOING, EventStatus.COMPLETED, EventStatus.CANCELLED]
)
def test_rejects_event_not_upcoming(make_event, status):
    result = decide_admission(
        make_event(status=status), today=TODAY, confirmed_count=0, existing_registration_id=None
    )

    assert isinstance(result, Failure)
    assert isinstance(result.error, EventNotOpenError)
    assert result.error.event_status == status.value


def test_rejects_after_deadline_even_without_capacity(make_event):
    event = make_event(max_capacity=None, registration_deadline=TODAY - timedelta(days=1))

    result = decide_admission(event, today=TODAY, confirmed_count=0, existing_registration_id=None)

    assert isinstance(result, Failure)
    assert isinstance(result.error, DeadlinePassedError)
    assert result.error.registration_deadline == (TODAY - timedelta(days=1)).isoformat()


def test_rejects_existing_registration(make_event):
    existing_id = uuid7()

    result = decide_admission(
        make_event(), today=TODAY, confirmed_count=0, existing_registration_id=existing_id
    )

    assert isinstance(result, Failure)
    assert isinstance(result.error, AlreadyRegisteredError)
    assert result.error.registration_id == str(existing_id)
    assert result.error.is_benign


def test_rejects_full_event(make_event):
    result = decide_admission(
        make_event(max_capacity=2), today=TODAY, confirmed_count=2, existing_registration_id=None
    )

    assert isinstance(result, Failure)
    assert isinstance(result.error, EventFullError)
    assert result.error.max_capacity == 2
    assert result.error.confirmed_count == 2
    assert not result.error.is_benign


def test_status_checked_before_deadline(make_event):
    event = make_event(
        status=EventStatus.COMPLETED, registration_deadline=TODAY - timedelta(days=3)
    )

    result = decide_admission(event, today=TODAY, confirmed_count=0, existing_registration_id=None)

    assert isinstance(result, Failure)
    assert result.error.code == ErrorCode.EVENT_NOT_OPEN


def test_deadline_checked_before_duplicate(make_event):
    event = make_event(registration_deadline=TODAY - timedelta(days=1))

    result = decide_admission(
        event, today=TODAY, confirmed_count=0, existing_registration_id=uuid7()
    )

    assert isinstance(result, Failure)
    assert result.error.code == ErrorCode.REGISTRATION_DEADLINE_PASSED


def test_duplicate_checked_before_capacity(make_event):
    result = decide_admission(
        make_event(max_capacity=1),
        today=TODAY,
        confirmed_count=1,
        existing_registration_id=uuid7(),
    )

    assert isinstance(result, Failure)
    assert result.error.code == ErrorCode.REGISTRATION_ALREADY_EXISTS
