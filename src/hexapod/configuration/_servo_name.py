from enum import Enum

from hexapod.configuration._joint_type import JointType


class ServoName(Enum):
    """Enum for all 12 servo names, declared in PWM channel order."""

    LEFT_FRONT_HIP = 'left_front_hip'
    LEFT_FRONT_KNEE = 'left_front_knee'
    LEFT_MIDDLE_HIP = 'left_middle_hip'
    LEFT_MIDDLE_KNEE = 'left_middle_knee'
    LEFT_BACK_HIP = 'left_back_hip'
    LEFT_BACK_KNEE = 'left_back_knee'
    RIGHT_FRONT_HIP = 'right_front_hip'
    RIGHT_FRONT_KNEE = 'right_front_knee'
    RIGHT_MIDDLE_HIP = 'right_middle_hip'
    RIGHT_MIDDLE_KNEE = 'right_middle_knee'
    RIGHT_BACK_HIP = 'right_back_hip'
    RIGHT_BACK_KNEE = 'right_back_knee'

    @property
    def index(self) -> int:
        """Zero-based position of the servo in declaration order."""
        return list(ServoName).index(self)

    @property
    def channel(self) -> int:
        """PWM channel of the servo on the controller board (1-12)."""
        return self.index + 1

    @property
    def leg(self) -> str:
        """Leg the servo belongs to, e.g. ``'left_front'``."""
        return self.value.rsplit('_', 1)[0]

    @property
    def joint_type(self) -> JointType:
        return JointType.from_servo_name(self)
