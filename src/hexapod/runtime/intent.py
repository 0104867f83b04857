from enum import Enum
from typing import Dict, Optional

from hexapod.gait.models import Gait


class Intent(Enum):
    """Directional input events; anything unrecognised is OTHER."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    OTHER = "other"


INTENT_GAITS: Dict[Intent, Gait] = {
    Intent.UP: Gait.FORWARD,
    Intent.DOWN: Gait.BACKWARD,
    Intent.RIGHT: Gait.SPIN_RIGHT,
    Intent.LEFT: Gait.SPIN_LEFT,
}


def gait_for(intent: Intent) -> Optional[Gait]:
    """Gait to play for ``intent``, or None when the intent terminates the loop."""
    return INTENT_GAITS.get(intent)
