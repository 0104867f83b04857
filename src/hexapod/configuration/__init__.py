from ._config_provider import ConfigProvider, OscSenderConfig
from ._joint_type import JointType
from ._position import Position
from ._servo_name import ServoName

__all__ = ["ConfigProvider", "OscSenderConfig", "JointType", "Position", "ServoName"]
