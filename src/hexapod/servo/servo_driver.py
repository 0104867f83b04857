"""
Servo driver: turns a named position into one message on the output channel.
"""

from hexapod import labels
from hexapod.configuration import Position, ServoName
from hexapod.logger import Logger
from hexapod.servo._position_table import PositionTable

log = Logger().setup_logger('Servo driver')


class ServoDriver:
    """Resolves positions through the table and sends them over the output channel.

    The sender is anything with a ``send(channel, duty_cycle)`` method; the
    runtime passes an :class:`~hexapod.servo.osc_sender.OscSender`.
    """

    def __init__(self, position_table: PositionTable, sender):
        self._position_table = position_table
        self._sender = sender

    @property
    def position_table(self) -> PositionTable:
        return self._position_table

    def command(self, servo: ServoName, position: Position) -> None:
        """Move ``servo`` to ``position``: exactly one outbound message.

        Raises:
            UnreachablePositionError: If the position is not valid for the servo.
            TransportError: If the sender fails. Not retried.
        """
        duty_cycle = self._position_table.resolve(position, servo)
        log.debug(labels.SERVO_COMMAND.format(servo.value, servo.channel, position.value, duty_cycle))
        self._sender.send(servo.channel, duty_cycle)
