from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hexapod.configuration._servo_name import ServoName


class JointType(Enum):
    """Different types of joints in the robot."""

    HIP = "hip"
    KNEE = "knee"

    @staticmethod
    def from_servo_name(servo_name: "ServoName") -> "JointType":
        """
        Determine the JointType from a given ServoName.

        Args:
            servo_name: A ServoName enum value.

        Returns:
            JointType: The corresponding joint type.
        """
        name_str = servo_name.value.lower()

        if name_str.endswith("hip"):
            return JointType.HIP
        elif name_str.endswith("knee"):
            return JointType.KNEE
        else:
            raise ValueError(f"Unknown joint type in servo name: {servo_name.value}")
