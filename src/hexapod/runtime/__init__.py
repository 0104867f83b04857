from .command_loop import CommandLoop
from .hexapod_controller import HexapodController
from .intent import INTENT_GAITS, Intent, gait_for

__all__ = ["CommandLoop", "HexapodController", "Intent", "INTENT_GAITS", "gait_for"]
