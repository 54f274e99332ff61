"""Tests for NotificationManager."""


def test_success_and_error_are_recorded():
    from repocleaner.managers.notification_manager import NotificationManager

    manager = NotificationManager()

    manager.success("Repository deleted", "demo has been permanently deleted")
    manager.error("Error fetching repositories", "401 Unauthorized")

    assert [n.title for n in manager.history] == [
        "Repository deleted",
        "Error fetching repositories",
    ]
    assert len(manager.errors) == 1
    assert manager.errors[0].variant == "destructive"


def test_subscribers_are_notified_until_unsubscribed():
    from repocleaner.managers.notification_manager import NotificationManager

    manager = NotificationManager()
    received = []
    unsubscribe = manager.subscribe(received.append)

    manager.success("One")
    unsubscribe()
    unsubscribe()
    manager.success("Two")

    assert [n.title for n in received] == ["One"]


def test_history_is_bounded():
    from repocleaner.managers.notification_manager import NotificationManager

    manager = NotificationManager(history_size=2)

    for title in ("a", "b", "c"):
        manager.success(title)

    assert [n.title for n in manager.history] == ["b", "c"]

    manager.clear()
    assert manager.history == []


def test_notification_message():
    from repocleaner.managers.notification_manager import Notification

    assert Notification("Saved").message == "Saved"
    assert Notification("Saved", "All good").message == "Saved: All good"
    assert Notification("Oops", variant="destructive").is_error is True
