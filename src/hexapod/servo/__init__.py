"""Servo output: position table, OSC channel and driver."""

from hexapod.servo._position_table import UNREACHABLE, DutyCycle, PositionTable, Unreachable
from hexapod.servo.osc_sender import OscSender
from hexapod.servo.servo_driver import ServoDriver

__all__ = ["PositionTable", "DutyCycle", "Unreachable", "UNREACHABLE", "OscSender", "ServoDriver"]
