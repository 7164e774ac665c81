from .body import HexapodBody
from .leg import Leg

__all__ = ["HexapodBody", "Leg"]
