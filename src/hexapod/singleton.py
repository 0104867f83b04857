"""
Singleton metaclass shared by process-wide services such as the logger.
"""

from typing import Any, Dict


class Singleton(type):
    """
    Metaclass handing out one instance per class.

    The first call's arguments build the instance; later calls ignore theirs.
    """

    _instances: Dict[type, Any] = {}

    def __call__(cls, *args, **kwargs):
        if cls not in Singleton._instances:
            Singleton._instances[cls] = super().__call__(*args, **kwargs)
        return Singleton._instances[cls]


__all__ = [
    'Singleton',
]
