from concurrent.futures import Future
from dataclasses import dataclass, replace
import math
from typing import Optional

from hexapod import labels
from hexapod.animation import Animation, Animator, bezier_points
from hexapod.configuration import HexapodParameters, ParametersProvider
from hexapod.kinematics import HexapodBody
from hexapod.kinematics.utils import deg2rad
from hexapod.logger import Logger
from hexapod.messaging import EventBus, EventTopic
from hexapod.model import HexapodModel
from hexapod.models import JOINT_PARAMETERS, POINT_PARAMETERS, KinematicsFailure

log = Logger().setup_logger('Hexapod controller')


@dataclass
class InputResult:
    """Outcome of a user input: whether it was committed and the value the input should now show."""

    accepted: bool
    value: float

    def __bool__(self) -> bool:
        return self.accepted


def _forward(source: Future, target: Future) -> None:
    error = source.exception()
    if error is not None:
        target.set_exception(error)
    else:
        target.set_result(source.result())


class HexapodController:
    """
    Glue between user input, the animator and the body.

    Owns one event bus shared by the body, the model and the animator. User
    inputs are applied to the body through the same coordinator entry points
    the animator uses, and are refused while an animation runs.
    """

    def __init__(self, parameters: Optional[HexapodParameters] = None, intro: bool = False):
        self._parameters = parameters or ParametersProvider().parameters

        self._event_bus = EventBus()
        self._body = HexapodBody(self._parameters, self._event_bus)
        self._model = HexapodModel(self._parameters)
        self._model.bind(self._event_bus)
        self._animator = Animator(self._body, self._model, self._event_bus)

        self._inputs_enabled = True
        self._event_bus.subscribe(EventTopic.ANIMATION_STARTED, lambda _: self._set_inputs_enabled(False))
        self._event_bus.subscribe(EventTopic.ANIMATION_FINISHED, lambda _: self._set_inputs_enabled(True))
        self._event_bus.subscribe(EventTopic.ANIMATION_STOPPED, lambda _: self._set_inputs_enabled(True))

        if not self._body.update_body_ik(self._model.pose, self._model.endpoints):
            log.warning(labels.CONTROLLER_INITIAL_POSE_FAILED)

        if intro:
            self.play_intro()

    @property
    def parameters(self) -> HexapodParameters:
        return self._parameters

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def body(self) -> HexapodBody:
        return self._body

    @property
    def model(self) -> HexapodModel:
        return self._model

    @property
    def animator(self) -> Animator:
        return self._animator

    @property
    def inputs_enabled(self) -> bool:
        return self._inputs_enabled

    def _set_inputs_enabled(self, enabled: bool) -> None:
        self._inputs_enabled = enabled

    def tick(self, delta: float) -> None:
        self._animator.tick(delta)

    # -----------------------------------------------------------------------
    # Intro animations
    # -----------------------------------------------------------------------
    def stand(self) -> Future:
        """Raise the body from its resting height with a small overshoot."""
        return self._animator.queue_animation(
            Animation({'z': bezier_points([0.17, 0.4, 1, 0.3], 8)}).set_duration(0.8).set_easing('ease-out')
        )

    def wiggle(self, angle_deg: float = 10) -> Future:
        """Center the body, then bob and tilt it around in a circle."""
        tilt = deg2rad(angle_deg)
        pose = self._model.pose

        self._animator.queue_animation(
            Animation(
                {
                    'x': [pose.x, 0],
                    'y': [pose.y, 0],
                    'z': [pose.z, 0.3],
                    'roll': [pose.roll, 0],
                    'pitch': [pose.pitch, 0],
                    'yaw': [pose.yaw, 0],
                }
            ).set_duration(0.1)
        )

        # fmt: off
        roll = [0, tilt, tilt, 0, -tilt, -tilt, -tilt, 0, tilt, tilt,
                tilt, 0, -tilt, -tilt, -tilt, 0, tilt, tilt, 0]
        pitch = [0, 0, tilt, tilt, tilt, 0, -tilt, -tilt, -tilt, 0,
                 tilt, tilt, tilt, 0, -tilt, -tilt, -tilt, 0, 0]
        # fmt: on

        return self._animator.queue_animation(
            Animation({'z': [0.3, 0.6, 0.3, 0.4], 'roll': roll, 'pitch': pitch})
            .set_direction('normal')
            .set_duration(2.5)
            .set_easing('ease-in-out')
        )

    def play_intro(self, angle_deg: float = 10) -> Future:
        """Stand, then wiggle. The wiggle is queued once standing is done so it starts from the final pose."""
        done: Future = Future()
        done.set_running_or_notify_cancel()

        def after_stand(stand: Future) -> None:
            if stand.exception() is not None:
                done.set_exception(stand.exception())
                return
            self.wiggle(angle_deg).add_done_callback(lambda wiggle: _forward(wiggle, done))

        self.stand().add_done_callback(after_stand)
        return done

    # -----------------------------------------------------------------------
    # User input
    # -----------------------------------------------------------------------
    def _refuse(self, category: str, parameter: str, value: float, current: float) -> InputResult:
        log.debug(labels.CONTROLLER_INPUT_DISABLED.format(category, parameter, value))
        return InputResult(False, current)

    def update_body(self, parameter: str, value: float) -> InputResult:
        old_pose = self._model.pose
        new_pose = old_pose.with_value(parameter, value)
        old_value = getattr(old_pose, parameter)

        if not self._inputs_enabled:
            return self._refuse('body', parameter, value, old_value)

        if self._body.update_body_ik(new_pose, self._model.endpoints):
            return InputResult(True, value)

        log.info(labels.CONTROLLER_BODY_FAILURE.format(parameter, old_value))
        return InputResult(False, old_value)

    def update_joint(self, parameter: str, value: float) -> InputResult:
        """Set one joint angle on every selected leg."""
        if parameter not in JOINT_PARAMETERS:
            raise ValueError(f"Unknown joint parameter: {parameter}")

        indexes = self._model.selected_legs
        old_angles = self._model.joint_angles
        old_value = getattr(old_angles[indexes[0]], parameter) if indexes else math.nan

        if not self._inputs_enabled or not indexes:
            return self._refuse('joints', parameter, value, old_value)

        new_angles = [
            angles.with_value(parameter, value) if index in indexes else angles
            for index, angles in enumerate(old_angles)
        ]

        result = self._body.update_body_fk(self._model.pose, new_angles)
        if result is KinematicsFailure.IK_FAILURE:
            log.info(labels.CONTROLLER_JOINT_FAILURE.format(parameter, old_value))
            return InputResult(False, old_value)

        return InputResult(True, value)

    def update_endpoint(self, parameter: str, value: float) -> InputResult:
        """Set one endpoint coordinate on every selected leg."""
        if parameter not in POINT_PARAMETERS:
            raise ValueError(f"Unknown endpoint parameter: {parameter}")

        indexes = self._model.selected_legs
        old_endpoints = self._model.endpoints
        old_value = getattr(old_endpoints[indexes[0]], parameter) if indexes else math.nan

        if not self._inputs_enabled or not indexes:
            return self._refuse('endpoints', parameter, value, old_value)

        new_endpoints = [
            replace(endpoint, **{parameter: value}) if index in indexes else endpoint
            for index, endpoint in enumerate(old_endpoints)
        ]

        if self._body.update_body_ik(self._model.pose, new_endpoints):
            return InputResult(True, value)

        log.info(labels.CONTROLLER_ENDPOINT_FAILURE.format(parameter, old_value))
        return InputResult(False, old_value)
