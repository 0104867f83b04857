"""
This module defines the data making up a gait: phases and cycles.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, Tuple

from hexapod import labels
from hexapod.configuration import JointType, Position, ServoName

Assignment = Tuple[ServoName, Position]


class Gait(Enum):
    """The four locomotion cycles."""

    FORWARD = 'forward'
    BACKWARD = 'backward'
    SPIN_RIGHT = 'spin_right'
    SPIN_LEFT = 'spin_left'

    @property
    def announcement(self) -> str:
        return _ANNOUNCEMENTS[self]


_ANNOUNCEMENTS = {
    Gait.FORWARD: labels.GAIT_FORWARD,
    Gait.BACKWARD: labels.GAIT_BACKWARD,
    Gait.SPIN_RIGHT: labels.GAIT_SPIN_RIGHT,
    Gait.SPIN_LEFT: labels.GAIT_SPIN_LEFT,
}


@dataclass(frozen=True)
class Phase:
    """A batch of servo targets issued together, followed by the settling delay.

    Attributes:
        assignments: (servo, position) pairs in issue order. A servo appears at most once.
    """

    assignments: Tuple[Assignment, ...]

    def __post_init__(self):
        seen = set()
        for servo, _ in self.assignments:
            if servo in seen:
                raise ValueError(labels.PHASE_DUPLICATE_SERVO.format(servo.value))
            seen.add(servo)

    @classmethod
    def of(cls, targets: Dict[ServoName, Position]) -> "Phase":
        return cls(tuple(targets.items()))

    def __iter__(self) -> Iterator[Assignment]:
        return iter(self.assignments)

    def __len__(self) -> int:
        return len(self.assignments)

    def servos(self) -> Tuple[ServoName, ...]:
        return tuple(servo for servo, _ in self.assignments)

    def targets(self) -> Dict[ServoName, Position]:
        return dict(self.assignments)

    def inverted(self) -> "Phase":
        """Same servos, every position swapped for its opposite."""
        return Phase(tuple((servo, position.opposite) for servo, position in self.assignments))


@dataclass(frozen=True)
class GaitCycle:
    """An ordered, non-empty sequence of phases producing one unit of locomotion."""

    gait: Gait
    phases: Tuple[Phase, ...]

    def __post_init__(self):
        if not self.phases:
            raise ValueError(labels.CYCLE_EMPTY.format(self.gait.value))

    def __iter__(self) -> Iterator[Phase]:
        return iter(self.phases)

    def __len__(self) -> int:
        return len(self.phases)

    def command_count(self) -> int:
        return sum(len(phase) for phase in self.phases)


def leg_servos(legs: Iterable[str], joint_type: JointType) -> Tuple[ServoName, ...]:
    """Servos of the given joint type on the given legs, in channel order."""
    legs = set(legs)
    return tuple(servo for servo in ServoName if servo.leg in legs and servo.joint_type is joint_type)
