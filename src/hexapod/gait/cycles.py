"""
The four gait cycles as static data.

Every cycle has the same shape: lift one tripod and plant the other, swing the
hips, swap the tripods, swing the hips back. Only the hip stroke of phase 2
differs between cycles; phase 4 is always its inverse.
"""

from typing import Dict

from hexapod.configuration import JointType, Position, ServoName
from hexapod.gait.models import Gait, GaitCycle, Phase, leg_servos

# Legs moving together in the alternating tripod gait
TRIPOD_A = ('left_front', 'left_back', 'right_middle')
TRIPOD_B = ('right_front', 'right_back', 'left_middle')

F = Position.FORWARDS
B = Position.BACKWARDS

# Hip targets of phase 2, per gait
HIP_STROKES: Dict[Gait, Dict[ServoName, Position]] = {
    Gait.FORWARD: {
        ServoName.LEFT_FRONT_HIP: F,
        ServoName.LEFT_MIDDLE_HIP: B,
        ServoName.LEFT_BACK_HIP: F,
        ServoName.RIGHT_FRONT_HIP: B,
        ServoName.RIGHT_MIDDLE_HIP: F,
        ServoName.RIGHT_BACK_HIP: B,
    },
    Gait.BACKWARD: {
        ServoName.LEFT_FRONT_HIP: B,
        ServoName.LEFT_MIDDLE_HIP: F,
        ServoName.LEFT_BACK_HIP: B,
        ServoName.RIGHT_FRONT_HIP: F,
        ServoName.RIGHT_MIDDLE_HIP: B,
        ServoName.RIGHT_BACK_HIP: F,
    },
    Gait.SPIN_RIGHT: {
        ServoName.LEFT_FRONT_HIP: B,
        ServoName.LEFT_MIDDLE_HIP: F,
        ServoName.LEFT_BACK_HIP: B,
        ServoName.RIGHT_FRONT_HIP: B,
        ServoName.RIGHT_MIDDLE_HIP: F,
        ServoName.RIGHT_BACK_HIP: B,
    },
    Gait.SPIN_LEFT: {
        ServoName.LEFT_FRONT_HIP: F,
        ServoName.LEFT_MIDDLE_HIP: B,
        ServoName.LEFT_BACK_HIP: F,
        ServoName.RIGHT_FRONT_HIP: F,
        ServoName.RIGHT_MIDDLE_HIP: B,
        ServoName.RIGHT_BACK_HIP: F,
    },
}


def knee_phase(lifted, planted) -> Phase:
    """Raise the knees of the ``lifted`` legs and lower those of the ``planted`` legs."""
    targets = {servo: Position.UP for servo in leg_servos(lifted, JointType.KNEE)}
    targets.update({servo: Position.DOWN for servo in leg_servos(planted, JointType.KNEE)})
    # issue in channel order
    return Phase.of({servo: targets[servo] for servo in ServoName if servo in targets})


def build_cycle(gait: Gait, hip_stroke: Dict[ServoName, Position]) -> GaitCycle:
    stroke = Phase.of(hip_stroke)
    return GaitCycle(
        gait,
        (
            knee_phase(lifted=TRIPOD_A, planted=TRIPOD_B),
            stroke,
            knee_phase(lifted=TRIPOD_B, planted=TRIPOD_A),
            stroke.inverted(),
        ),
    )


GAIT_CYCLES: Dict[Gait, GaitCycle] = {gait: build_cycle(gait, stroke) for gait, stroke in HIP_STROKES.items()}
