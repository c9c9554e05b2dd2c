import pytest

from ipcdemos.broker import Broker


def test_publish_reaches_subscribers_in_order():
    broker = Broker()
    received = []
    broker.subscribe("news", lambda m: received.append(("first", m)))
    broker.subscribe("news", lambda m: received.append(("second", m)))
    broker.publish("news", "hello")
    assert received == [("first", "hello"), ("second", "hello")]


def test_publish_without_subscribers_delivers_nothing():
    broker = Broker()
    received = []
    broker.subscribe("other", received.append)
    broker.publish("news", "hello")
    assert received == []


def test_topics_are_isolated():
    broker = Broker()
    news, sport = [], []
    broker.subscribe("news", news.append)
    broker.subscribe("sport", sport.append)
    broker.publish("news", "n1")
    broker.publish("sport", "s1")
    broker.publish("news", "n2")
    assert news == ["n1", "n2"]
    assert sport == ["s1"]


def test_same_callback_twice_is_called_twice():
    broker = Broker()
    received = []
    broker.subscribe("t", received.append)
    broker.subscribe("t", received.append)
    broker.publish("t", "x")
    assert received == ["x", "x"]


def test_callback_errors_propagate():
    broker = Broker()

    def boom(message):
        raise RuntimeError(message)

    broker.subscribe("t", boom)
    with pytest.raises(RuntimeError, match="bad"):
        broker.publish("t", "bad")