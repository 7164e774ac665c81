"""
Reusable Singleton metaclass.
"""

from typing import Any, Dict


class Singleton(type):
    """
    Metaclass that enforces single-instance creation for subclasses.

    ``reset`` drops the cached instance so the next call builds a fresh one,
    which is how tests and the runtime reload configuration.
    """

    _instances: Dict[type, Any] = {}

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]

    def reset(cls) -> None:
        cls._instances.pop(cls, None)


__all__ = [
    'Singleton',
]
