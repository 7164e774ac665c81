from hexapod.messaging import AnimationPayload, EventTopic, PosePayload
from hexapod.models import Pose


def test_handlers_run_in_subscription_order(event_bus):
    calls = []
    event_bus.subscribe(EventTopic.POSE_CHANGED, lambda payload: calls.append('first'))
    event_bus.subscribe(EventTopic.POSE_CHANGED, lambda payload: calls.append('second'))

    event_bus.publish(EventTopic.POSE_CHANGED, PosePayload(Pose()))

    assert calls == ['first', 'second']


def test_topics_are_independent(event_bus):
    calls = []
    event_bus.subscribe(EventTopic.ANIMATION_STARTED, calls.append)

    event_bus.publish(EventTopic.ANIMATION_FINISHED, AnimationPayload('walk'))

    assert calls == []


def test_unsubscribe(event_bus):
    calls = []
    unsubscribe = event_bus.subscribe(EventTopic.POSE_CHANGED, calls.append)

    unsubscribe()
    unsubscribe()
    event_bus.publish(EventTopic.POSE_CHANGED, PosePayload(Pose()))

    assert calls == []
    assert event_bus.subscriber_count(EventTopic.POSE_CHANGED) == 0


def test_handler_may_unsubscribe_while_notified(event_bus):
    calls = []

    def once(payload):
        calls.append('once')
        unsubscribe()

    unsubscribe = event_bus.subscribe(EventTopic.POSE_CHANGED, once)
    event_bus.subscribe(EventTopic.POSE_CHANGED, lambda payload: calls.append('always'))

    event_bus.publish(EventTopic.POSE_CHANGED, PosePayload(Pose()))
    event_bus.publish(EventTopic.POSE_CHANGED, PosePayload(Pose()))

    assert calls == ['once', 'always', 'always']


def test_clear(event_bus):
    event_bus.subscribe(EventTopic.POSE_CHANGED, lambda payload: None)
    event_bus.subscribe(EventTopic.ANIMATION_STOPPED, lambda payload: None)

    event_bus.clear()

    assert all(event_bus.subscriber_count(topic) == 0 for topic in EventTopic)
