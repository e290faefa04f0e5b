from datetime import date

import pytest
from pydantic import ValidationError as PydanticValidationError

from edunotes.services.notification_service import NotificationRepository


def test_welcome_notification_seeded(store):
    notifications = NotificationRepository(store)
    [welcome] = notifications.list_all()
    assert welcome.id == "1"
    assert welcome.title == "Welcome to EduNotes"
    assert welcome.target_semester == "all"
    assert welcome.date == date.today()
    assert NotificationRepository(store).list_all() == [welcome]


def test_mark_read_clears_unread_count(store):
    notifications = NotificationRepository(store)
    assert notifications.unread_count() == 1

    assert notifications.mark_read("1") is True
    assert notifications.list_all()[0].is_read is True
    assert notifications.unread_count() == 0

    assert notifications.mark_read("1") is False
    assert notifications.mark_read("missing") is False
    assert notifications.unread_count() == 0


def test_broadcast_prepends(store):
    notifications = NotificationRepository(store)
    sent = notifications.broadcast("Exam schedule", "Finals start on Monday", target_semester=3, today=date(2024, 5, 1))

    listed = notifications.list_all()
    assert listed[0] == sent
    assert sent.target_semester == "3"
    assert sent.date == date(2024, 5, 1)
    assert notifications.unread_count() == 2


@pytest.mark.parametrize("target", ["0", "9", "spring"])
def test_broadcast_rejects_bad_targets(store, target):
    with pytest.raises(PydanticValidationError):
        NotificationRepository(store).broadcast("t", "m", target_semester=target)
