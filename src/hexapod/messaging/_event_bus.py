from typing import Callable, Dict, List

from hexapod.messaging._event import EventPayload, EventTopic

EventHandler = Callable[[EventPayload], None]


class EventBus:
    """
    Synchronous publish/subscribe hub between the kinematics core and its observers.

    Handlers run in subscription order on the publishing call stack; there is no
    queueing, a publish returns once every handler has returned.
    """

    def __init__(self) -> None:
        self._handlers: Dict[EventTopic, List[EventHandler]] = {topic: [] for topic in EventTopic}

    def subscribe(self, topic: EventTopic, handler: EventHandler) -> Callable[[], None]:
        """Register ``handler`` for ``topic``. Returns a callable that removes it again."""
        self._handlers[topic].append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers[topic]:
                self._handlers[topic].remove(handler)

        return unsubscribe

    def publish(self, topic: EventTopic, payload: EventPayload) -> None:
        # Copy so handlers may unsubscribe while being notified
        for handler in list(self._handlers[topic]):
            handler(payload)

    def subscriber_count(self, topic: EventTopic) -> int:
        return len(self._handlers[topic])

    def clear(self) -> None:
        for handlers in self._handlers.values():
            handlers.clear()
