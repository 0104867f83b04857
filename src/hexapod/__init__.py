"""
Hexapod gait controller.

Drives a six-legged robot over OSC by playing back four-phase tripod gaits.
"""

__version__ = '1.0.0'

__all__ = [
    '__version__',
]
