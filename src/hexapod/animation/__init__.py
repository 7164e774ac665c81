from .animation import ANIMATABLE_PROPERTIES, ENDPOINTS, Animation, Direction
from .animator import AnimationAbortedError, Animator, AnimatorState, QueueOrder
from .bezier import Bezier, bezier_points
from .easing import Easing, cubic_bezier, ease
from .endpoint_interpolator import EndpointInterpolator

__all__ = [
    "ANIMATABLE_PROPERTIES",
    "ENDPOINTS",
    "Animation",
    "AnimationAbortedError",
    "Animator",
    "AnimatorState",
    "Bezier",
    "Direction",
    "Easing",
    "EndpointInterpolator",
    "QueueOrder",
    "bezier_points",
    "cubic_bezier",
    "ease",
]
