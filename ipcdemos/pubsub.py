"""Named publishers and subscribers that talk through a :class:`Broker`."""

from __future__ import annotations

from dataclasses import dataclass

from .broker import Broker


@dataclass
class Publisher:
    """A named sender of messages."""

    name: str

    def publish(self, broker: Broker, topic: str, message: str) -> None:
        """Announce and publish ``message`` on ``topic``."""
        print(f"发布者 [{self.name}] 发布消息: {message}")
        broker.publish(topic, message)


@dataclass
class Subscriber:
    """A named receiver that prints each message it gets."""

    name: str

    def subscribe_to(self, broker: Broker, topic: str) -> None:
        """Listen on ``topic``, printing each received message."""

        def on_message(message: str) -> None:
            print(f"订阅者 [{self.name}] 收到消息: {message}")

        broker.subscribe(topic, on_message)


def main(argv: list[str] | None = None) -> int:
    """Run the demo: one subscriber, one publisher, one message."""
    broker = Broker()

    subscriber = Subscriber("订阅者1")
    subscriber.subscribe_to(broker, "MessageA")

    publisher = Publisher("发布者1")
    publisher.publish(broker, "MessageA", "你好，这是消息A")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())