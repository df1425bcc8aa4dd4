"""
Tests for AuthorizationClient and GateSubscription.
"""

import pytest

from privgate.domain import AuthorizationState, SubscriptionError
from privgate.providers.broker import InMemoryBroker
from privgate.runtime.permission import AuthorizationClient


class BrokenBroker(InMemoryBroker):
    def ping(self) -> bool:
        raise OSError("no binder")

    def check_self_permission(self) -> bool:
        raise OSError("no binder")


@pytest.fixture
def broker():
    return InMemoryBroker(reachable=True, granted=False)


@pytest.fixture
def client(broker):
    return AuthorizationClient(broker)


def test_reachability_follows_broker(broker, client):
    assert client.is_broker_reachable() is True
    broker.reachable = False
    assert client.is_broker_reachable() is False


def test_authorization_state_is_read_every_time(broker, client):
    assert client.current_authorization_state() == AuthorizationState.DENIED
    broker.granted = True
    assert client.current_authorization_state() == AuthorizationState.GRANTED
    # Revocation is seen on the next read
    broker.granted = False
    assert client.current_authorization_state() == AuthorizationState.DENIED


def test_broker_errors_read_as_unreachable_and_unknown():
    client = AuthorizationClient(BrokenBroker())

    assert client.is_broker_reachable() is False
    assert client.current_authorization_state() == AuthorizationState.UNKNOWN


def test_tokens_are_unique_and_increasing(client):
    tokens = [client.next_request_token() for _ in range(3)]
    assert tokens == [100, 101, 102]


def test_request_is_forwarded(broker, client):
    client.request_authorization(100)
    assert broker.requested_tokens == [100]


def test_subscription_lifecycle(broker, client):
    received = []
    sub = client.subscribe(lambda token, granted: received.append((token, granted)))

    assert sub.active
    assert broker.listener_count == 1

    broker.deliver(100, True)
    assert received == [(100, True)]

    sub.close()
    assert not sub.active
    assert broker.listener_count == 0

    broker.deliver(101, True)
    assert received == [(100, True)]


def test_closed_subscription_ignores_snapshot_delivery(client):
    received = []
    sub = client.subscribe(lambda token, granted: received.append(token))
    listener = sub._on_decision

    sub.close()
    listener(100, True)

    assert received == []


def test_closing_twice_raises(client):
    sub = client.subscribe(lambda token, granted: None)
    sub.close()

    with pytest.raises(SubscriptionError):
        sub.close()


def test_unreachable_broker_reads_as_unavailable_without_permission_check():
    class CountingBroker(InMemoryBroker):
        checks = 0

        def check_self_permission(self) -> bool:
            CountingBroker.checks += 1
            return True

    broker = CountingBroker(reachable=False)
    client = AuthorizationClient(broker)

    assert client.authorization_state() == AuthorizationState.UNAVAILABLE
    assert CountingBroker.checks == 0

    broker.reachable = True
    assert client.authorization_state() == AuthorizationState.GRANTED
    assert CountingBroker.checks == 1
