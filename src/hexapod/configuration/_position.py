from enum import Enum

from hexapod.configuration._joint_type import JointType


class Position(Enum):
    """Discrete positions a servo can be sent to."""

    FORWARDS = 'forwards'
    BACKWARDS = 'backwards'
    UP = 'up'
    DOWN = 'down'

    @property
    def joint_type(self) -> JointType:
        """The only joint type this position is defined for."""
        if self in (Position.FORWARDS, Position.BACKWARDS):
            return JointType.HIP
        return JointType.KNEE

    @property
    def opposite(self) -> "Position":
        return _OPPOSITES[self]

    def is_valid_for(self, joint_type: JointType) -> bool:
        return self.joint_type is joint_type


_OPPOSITES = {
    Position.FORWARDS: Position.BACKWARDS,
    Position.BACKWARDS: Position.FORWARDS,
    Position.UP: Position.DOWN,
    Position.DOWN: Position.UP,
}
