import pytest

from hexapod import labels
from hexapod.animation import Animation, AnimationAbortedError, AnimatorState, QueueOrder
from hexapod.messaging import EventTopic
from hexapod.models import Point


def _animation_events(event_bus):
    events = []
    for topic in (EventTopic.ANIMATION_STARTED, EventTopic.ANIMATION_FINISHED, EventTopic.ANIMATION_STOPPED):
        event_bus.subscribe(topic, lambda payload, topic=topic: events.append((topic, payload)))
    return events


def _rise(duration=1.0):
    return Animation({'z': [0.2, 0.4]}).set_duration(duration).set_easing('linear')


def test_idle_animator_does_nothing(animator, model):
    animator.tick(0.1)

    assert animator.state is AnimatorState.IDLE
    assert model.pose.z == pytest.approx(0.17)


def test_completes_after_full_duration_and_not_before(animator, model):
    future = animator.queue_animation(Animation({'z': [0.17, 0.3]}).set_duration(0.8))

    for _ in range(7):
        animator.tick(0.1)
        assert not future.done()

    animator.tick(0.1)

    assert future.done()
    assert future.result().duration == 0.8
    assert model.pose.z == pytest.approx(0.3)
    assert animator.state is AnimatorState.IDLE


def test_publishes_start_and_finish(animator, event_bus):
    events = _animation_events(event_bus)
    animation = _rise(0.2)

    animator.queue_animation(animation)
    animator.tick(0.1)
    assert [topic for topic, _ in events] == [EventTopic.ANIMATION_STARTED]
    assert animator.is_running

    animator.tick(0.1)
    assert [topic for topic, _ in events] == [EventTopic.ANIMATION_STARTED, EventTopic.ANIMATION_FINISHED]
    assert events[1][1].animation is animation


def test_linear_sampling(animator, model):
    animator.queue_animation(_rise())

    animator.tick(0.25)
    assert model.pose.z == pytest.approx(0.25)

    animator.tick(0.25)
    assert model.pose.z == pytest.approx(0.3)


def test_timescale_speeds_up_playback(animator):
    future = animator.queue_animation(_rise().set_timescale(2.0))

    animator.tick(0.25)
    assert not future.done()

    animator.tick(0.25)
    assert future.done()


def test_iterations_replay_the_animation(animator, model):
    animation = _rise().set_iterations(2)
    future = animator.queue_animation(animation)

    for _ in range(11):
        animator.tick(0.25)
    assert not future.done()

    animator.tick(0.25)

    assert future.done()
    assert model.pose.z == pytest.approx(0.4)
    # Playback keeps its own counter
    assert animation.iterations == 2


def test_reverse_direction(animator, model):
    animator.queue_animation(_rise().set_direction('reverse'))

    animator.tick(0.25)

    assert model.pose.z == pytest.approx(0.35)


def test_alternate_direction_flips_every_iteration(animator, model):
    future = animator.queue_animation(_rise().set_iterations(1).set_direction('alternate'))
    heights = []

    for _ in range(4):
        animator.tick(0.5)
        heights.append(model.pose.z)

    assert heights == pytest.approx([0.3, 0.4, 0.3, 0.2])
    assert future.done()


def test_alternate_reverse_starts_backwards(animator, model):
    animator.queue_animation(_rise().set_iterations(1).set_direction('alternate-reverse'))
    heights = []

    for _ in range(4):
        animator.tick(0.5)
        heights.append(model.pose.z)

    assert heights == pytest.approx([0.3, 0.2, 0.3, 0.4])


def test_zero_duration_jumps_to_the_end(animator, model):
    future = animator.queue_animation(_rise(0.0))

    animator.tick(0.01)

    assert future.done()
    assert model.pose.z == pytest.approx(0.4)


def test_ik_failure_aborts_and_keeps_last_good_state(animator, model, event_bus):
    events = _animation_events(event_bus)
    future = animator.queue_animation(Animation({'z': [0.17, 0.05]}).set_easing('linear'))

    animator.tick(0.5)
    assert model.pose.z == pytest.approx(0.11)

    animator.tick(0.5)

    assert future.done()
    with pytest.raises(AnimationAbortedError) as error:
        future.result()
    assert error.value.reason == labels.ANIMATION_REASON_IK
    assert model.pose.z == pytest.approx(0.11)
    assert animator.state is AnimatorState.IDLE
    assert events[-1][0] is EventTopic.ANIMATION_STOPPED
    assert events[-1][1].reason == labels.ANIMATION_REASON_IK


def test_queue_continues_after_abort(animator, model):
    failing = animator.queue_animation(Animation({'z': [0.05]}))
    following = animator.queue_animation(_rise(0.1))

    animator.tick(0.1)
    assert isinstance(failing.exception(), AnimationAbortedError)

    animator.tick(0.1)
    assert following.done()
    assert model.pose.z == pytest.approx(0.4)


def test_animations_play_in_queue_order(animator):
    first = _rise()
    second = _rise()
    animator.queue_animation(first)
    animator.queue_animation(second)

    animator.tick(0.1)

    assert animator.current_animation is first
    assert animator.pending == 1


def test_backward_queue_order_plays_latest_first(animator):
    first = _rise()
    second = _rise()
    animator.queue_order = 'backward'
    animator.queue_animation(first)
    animator.queue_animation(second)

    animator.tick(0.1)

    assert animator.queue_order is QueueOrder.BACKWARD
    assert animator.current_animation is second


def test_stop_aborts_at_the_next_tick(animator, model):
    future = animator.queue_animation(_rise())
    animator.tick(0.25)

    animator.stop()
    assert not future.done()

    animator.tick(0.25)

    assert isinstance(future.exception(), AnimationAbortedError)
    assert future.exception().reason == labels.ANIMATION_REASON_STOP
    assert model.pose.z == pytest.approx(0.25)
    assert not animator.is_running


def test_stop_when_idle_is_ignored(animator):
    animator.stop()
    future = animator.queue_animation(_rise(0.1))

    animator.tick(0.1)

    assert future.done()
    assert future.exception() is None


def test_pause_and_resume(animator, model):
    future = animator.queue_animation(_rise())
    animator.tick(0.25)

    animator.pause()
    for _ in range(10):
        animator.tick(0.25)
    assert animator.is_paused
    assert model.pose.z == pytest.approx(0.25)

    animator.resume()
    for _ in range(3):
        animator.tick(0.25)
    assert future.done()


def test_clear_fails_queued_animations(animator):
    future = animator.queue_animation(_rise())

    animator.clear()

    assert isinstance(future.exception(), AnimationAbortedError)
    assert animator.pending == 0


def test_completion_callback_may_queue_more(animator, model):
    follow_up = []

    def queue_next(_):
        follow_up.append(animator.queue_animation(Animation({'z': [0.4, 0.2]}).set_duration(0.1)))

    animator.queue_animation(_rise(0.1)).add_done_callback(queue_next)

    animator.tick(0.1)
    animator.tick(0.1)

    assert follow_up[0].done()
    assert model.pose.z == pytest.approx(0.2)


def test_endpoint_animation_moves_the_feet(animator, model):
    start = [Point(1.0, 0.0, 0.0) for _ in range(6)]
    end = [Point(1.1, 0.0, 0.05) for _ in range(6)]
    future = animator.queue_animation(Animation({'endpoints': [start, end]}).set_easing('linear'))

    animator.tick(1.0)

    assert future.done()
    for endpoint in model.endpoints:
        assert endpoint.is_close(Point(1.1, 0.0, 0.05), 1e-9)
    assert model.pose.z == pytest.approx(0.17)


def test_endpoint_keyframes_of_wrong_size_are_rejected(animator, model, event_bus):
    events = _animation_events(event_bus)
    short = [Point(1.0, 0.0, 0.0) for _ in range(5)]
    future = animator.queue_animation(Animation({'endpoints': [short, short]}))

    assert isinstance(future.exception(), ValueError)
    assert animator.pending == 0

    animator.tick(0.1)

    assert animator.state is AnimatorState.IDLE
    assert events == []
    assert model.pose.z == pytest.approx(0.17)


def test_queue_keeps_playing_after_a_rejected_animation(animator, model):
    short = [Point(1.0, 0.0, 0.0) for _ in range(5)]
    animator.queue_animation(Animation({'endpoints': [short]}))
    future = animator.queue_animation(_rise(0.1))

    animator.tick(0.1)

    assert future.done()
    assert future.exception() is None
    assert model.pose.z == pytest.approx(0.4)
