from collections import deque
from concurrent.futures import Future
from enum import Enum
from typing import Deque, Optional, Tuple

import hexapod.constants as constants
from hexapod import labels
from hexapod.kinematics import HexapodBody
from hexapod.logger import Logger
from hexapod.messaging import AnimationPayload, EventBus, EventTopic
from hexapod.model import HexapodModel

from .animation import Animation

log = Logger().setup_logger('Animator')


class AnimatorState(Enum):
    IDLE = 'idle'
    RUNNING = 'running'


class QueueOrder(Enum):
    FORWARD = 'forward'
    BACKWARD = 'backward'


class AnimationAbortedError(Exception):
    """Set on the completion future of an animation that did not run to its end."""

    def __init__(self, animation: Animation, reason: str):
        super().__init__(labels.ANIMATION_STOPPED.format(animation.id, reason))
        self.animation = animation
        self.reason = reason


class Animator:
    """
    Plays queued animations on the body, one sample per tick.

    Idle until an animation is queued, then Running until it finishes or is
    aborted. Every tick advances normalized time by
    ``timescale * delta / duration``, samples the animation and hands the
    result to ``HexapodBody.update_body_ik``. A rejected sample aborts the
    animation on the spot; the body keeps its last committed state.

    ``queue_animation`` returns a ``concurrent.futures.Future``. It resolves
    with the animation once every iteration has played, and fails with
    ``AnimationAbortedError`` on an IK failure or ``stop()``. Future callbacks
    run inside ``tick``, so a callback may queue the next animation.
    """

    def __init__(self, body: HexapodBody, model: HexapodModel, event_bus: Optional[EventBus] = None):
        self._body = body
        self._model = model
        self._event_bus = event_bus or body.event_bus

        self._queue: Deque[Tuple[Animation, Future]] = deque()
        self._queue_order = QueueOrder.FORWARD

        self._state = AnimatorState.IDLE
        self._current: Optional[Animation] = None
        self._future: Optional[Future] = None
        self._t = 0.0
        self._reverse = False
        self._iterations_left = 0

        self._paused = False
        self._stop_requested = False

    # -----------------------------------------------------------------------
    # Status
    # -----------------------------------------------------------------------
    @property
    def state(self) -> AnimatorState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state == AnimatorState.RUNNING

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def current_animation(self) -> Optional[Animation]:
        return self._current

    @property
    def t(self) -> float:
        return self._t

    @property
    def pending(self) -> int:
        return len(self._queue)

    @property
    def queue_order(self) -> QueueOrder:
        return self._queue_order

    @queue_order.setter
    def queue_order(self, value) -> None:
        self._queue_order = QueueOrder(value)

    # -----------------------------------------------------------------------
    # Control
    # -----------------------------------------------------------------------
    def queue_animation(self, animation: Animation) -> Future:
        future: Future = Future()
        future.set_running_or_notify_cancel()

        leg_count = len(self._body.legs)
        if animation.endpoint_count not in (0, leg_count):
            reason = labels.ANIMATION_REJECTED.format(animation.id, leg_count, animation.endpoint_count)
            log.warning(reason)
            future.set_exception(ValueError(reason))
            return future

        self._queue.append((animation, future))
        log.debug(labels.ANIMATION_QUEUED.format(animation.id, len(self._queue)))
        return future

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        self._paused = False

    def stop(self) -> None:
        """Abort the current animation at the next tick. Queued animations still play."""
        if self.is_running:
            self._stop_requested = True

    def clear(self) -> None:
        """Drop every queued animation, failing their futures."""
        while self._queue:
            animation, future = self._queue.popleft()
            future.set_exception(AnimationAbortedError(animation, labels.ANIMATION_REASON_STOP))

    # -----------------------------------------------------------------------
    # Playback
    # -----------------------------------------------------------------------
    def tick(self, delta: float) -> None:
        """Advance by ``delta`` seconds of wall time."""
        if self._stop_requested:
            self._abort(labels.ANIMATION_REASON_STOP)
            return

        if self._paused:
            return

        if self._state == AnimatorState.IDLE:
            if not self._queue:
                return
            self._start_next()

        animation = self._current

        if animation.duration > 0:
            self._t += animation.timescale * delta / animation.duration
        else:
            self._t = 1.0

        t = min(self._t, 1.0)
        sample_t = 1.0 - t if self._reverse else t

        pose, endpoints = animation.sample(sample_t, self._model.pose, self._model.endpoints)

        if not self._body.update_body_ik(pose, endpoints):
            self._abort(labels.ANIMATION_REASON_IK)
            return

        if self._t >= 1.0 - constants.T_EPSILON:
            if self._iterations_left == 0:
                self._finish()
            else:
                self._iterations_left -= 1
                if animation.direction.alternates:
                    self._reverse = not self._reverse
                self._t = 0.0
                log.debug(labels.ANIMATION_ITERATION.format(animation.id, self._iterations_left))

    def _start_next(self) -> None:
        if self._queue_order == QueueOrder.BACKWARD:
            animation, future = self._queue.pop()
        else:
            animation, future = self._queue.popleft()

        self._current = animation
        self._future = future
        self._t = 0.0
        self._reverse = animation.direction.starts_reversed
        self._iterations_left = animation.iterations
        self._state = AnimatorState.RUNNING

        log.info(labels.ANIMATION_STARTED.format(animation.id))
        self._event_bus.publish(EventTopic.ANIMATION_STARTED, AnimationPayload(animation))

    def _release(self) -> Tuple[Animation, Future]:
        animation, future = self._current, self._future

        self._current = None
        self._future = None
        self._stop_requested = False
        self._state = AnimatorState.IDLE

        return animation, future

    def _finish(self) -> None:
        animation, future = self._release()

        log.info(labels.ANIMATION_FINISHED.format(animation.id))
        self._event_bus.publish(EventTopic.ANIMATION_FINISHED, AnimationPayload(animation))
        future.set_result(animation)

    def _abort(self, reason: str) -> None:
        animation, future = self._release()

        log.info(labels.ANIMATION_STOPPED.format(animation.id, reason))
        self._event_bus.publish(EventTopic.ANIMATION_STOPPED, AnimationPayload(animation, reason))
        future.set_exception(AnimationAbortedError(animation, reason))
