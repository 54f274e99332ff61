"""Tests for the deletion state machine."""

import pytest


@pytest.fixture
def store(make_repo):
    from repocleaner.managers.view_state_manager import ViewStateStore

    store = ViewStateStore()
    store.replace_mirror(
        [make_repo("keep-me", id=1), make_repo("demo", id=42), make_repo("other", id=3)]
    )
    return store


@pytest.fixture
def notifications():
    from repocleaner.managers.notification_manager import NotificationManager

    return NotificationManager()


@pytest.fixture
def manager(github_transport, store, notifications):
    from repocleaner.managers.deletion_manager import DeletionManager

    return DeletionManager(github_transport, store, notifications)


def _repo(store, repo_id):
    return next(repo for repo in store.mirror if repo.id == repo_id)


@pytest.mark.asyncio
async def test_confirmed_deletion_removes_repository(manager, store, notifications, fake_github):
    from repocleaner.managers.deletion_manager import (
        AwaitingConfirmation,
        Idle,
        InFlight,
        Settled,
    )

    states = []
    manager.subscribe(states.append)
    target = _repo(store, 42)

    manager.request_deletion(target)
    outcome = await manager.confirm_deletion("ghp_abc")

    assert outcome.succeeded is True
    assert [type(s) for s in states] == [AwaitingConfirmation, InFlight, Settled, Idle]
    assert len(store.mirror) == 2
    assert 42 not in [repo.id for repo in store.mirror]

    delete_requests = [r for r in fake_github.requests if r.method == "DELETE"]
    assert len(delete_requests) == 1
    assert delete_requests[0].url.path == "/repos/octocat/demo"
    assert delete_requests[0].headers["Authorization"] == "token ghp_abc"

    assert notifications.errors == []
    assert notifications.history[-1].title == "Repository deleted"
    assert notifications.history[-1].description == "demo has been permanently deleted"


@pytest.mark.asyncio
async def test_rejected_deletion_keeps_mirror(manager, store, notifications, fake_github):
    from repocleaner.managers.deletion_manager import Idle

    fake_github.delete_status["/repos/octocat/demo"] = 403
    before = store.mirror

    manager.request_deletion(_repo(store, 42))
    outcome = await manager.confirm_deletion("ghp_abc")

    assert outcome.succeeded is False
    assert outcome.error.status_code == 403
    assert store.mirror == before
    assert isinstance(manager.state, Idle)
    assert len(notifications.errors) == 1
    assert notifications.errors[0].title == "Error deleting repository"
    assert notifications.errors[0].description.startswith("Failed to delete repository: 403")


def test_cancel_returns_to_idle_without_request(manager, store, fake_github):
    from repocleaner.managers.deletion_manager import Idle

    manager.request_deletion(_repo(store, 42))
    assert manager.can_confirm is True
    assert manager.pending.id == 42

    manager.cancel_deletion()

    assert isinstance(manager.state, Idle)
    assert manager.pending is None
    assert fake_github.requests == []


def test_cancel_when_idle_is_a_no_op(manager):
    from repocleaner.managers.deletion_manager import Idle

    manager.cancel_deletion()

    assert isinstance(manager.state, Idle)


def test_second_request_while_awaiting_confirmation_is_rejected(manager, store):
    from repocleaner.core.errors import IllegalTransitionError

    manager.request_deletion(_repo(store, 42))

    with pytest.raises(IllegalTransitionError):
        manager.request_deletion(_repo(store, 1))
    assert manager.pending.id == 42


@pytest.mark.asyncio
async def test_confirm_without_pending_request_is_rejected(manager):
    from repocleaner.core.errors import IllegalTransitionError

    with pytest.raises(IllegalTransitionError):
        await manager.confirm_deletion("ghp_abc")


@pytest.mark.asyncio
async def test_in_flight_request_cannot_be_dismissed_or_repeated(manager, store, fake_github):
    from repocleaner.core.errors import IllegalTransitionError
    from repocleaner.managers.deletion_manager import InFlight

    observed = []

    def while_in_flight(request):
        observed.append(manager.state)
        assert manager.can_dismiss is False
        with pytest.raises(IllegalTransitionError):
            manager.cancel_deletion()
        with pytest.raises(IllegalTransitionError):
            manager.request_deletion(_repo(store, 1))

    fake_github.before_response = while_in_flight
    manager.request_deletion(_repo(store, 42))

    outcome = await manager.confirm_deletion("ghp_abc")

    assert outcome.succeeded is True
    assert isinstance(observed[0], InFlight)
    assert len([r for r in fake_github.requests if r.method == "DELETE"]) == 1


@pytest.mark.asyncio
async def test_deleting_repository_already_gone_from_mirror(manager, store, make_repo):
    ghost = make_repo("ghost", id=777)

    manager.request_deletion(ghost)
    outcome = await manager.confirm_deletion("ghp_abc")

    assert outcome.succeeded is True
    assert len(store.mirror) == 3


@pytest.mark.asyncio
async def test_listeners_see_permissions_of_each_state(manager, store):
    seen = []
    manager.subscribe(
        lambda state: seen.append(
            (type(state).__name__, manager.can_confirm, manager.can_dismiss)
        )
    )

    manager.request_deletion(_repo(store, 42))
    await manager.confirm_deletion("ghp_abc")

    assert seen == [
        ("AwaitingConfirmation", True, True),
        ("InFlight", False, False),
        ("Settled", False, True),
        ("Idle", False, True),
    ]
