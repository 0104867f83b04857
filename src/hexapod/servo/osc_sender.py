"""
OSC output channel to the servo controller board.

One UDP datagram per servo command: an OSC message addressed to the servo's
PWM channel carrying the duty cycle as a single float32 argument.
"""

import socket
from typing import Optional

from pythonosc.osc_message_builder import OscMessageBuilder

from hexapod import labels
from hexapod.constants import DEFAULT_OSC_HOST, DEFAULT_OSC_PORT, OSC_DUTY_CYCLE_ADDRESS
from hexapod.exceptions import TransportError
from hexapod.logger import Logger

log = Logger().setup_logger('OSC sender')


class OscSender:
    """
    Connected UDP socket speaking OSC to a fixed peer.

    Example:
        with OscSender('169.254.1.1', 9000) as sender:
            sender.send(1, 3.0)
    """

    def __init__(
        self,
        host: str = DEFAULT_OSC_HOST,
        port: int = DEFAULT_OSC_PORT,
        address_pattern: str = OSC_DUTY_CYCLE_ADDRESS,
    ) -> None:
        self._host = host
        self._port = port
        self._address_pattern = address_pattern
        self._socket: Optional[socket.socket] = None

    @classmethod
    def from_config(cls, osc_config) -> "OscSender":
        return cls(osc_config.host, osc_config.port, osc_config.address_pattern)

    @property
    def is_open(self) -> bool:
        return self._socket is not None

    def open(self) -> None:
        """Create the socket and bind it to the peer.

        Raises:
            TransportError: If the socket cannot be created or the peer address is invalid.
        """
        if self._socket is not None:
            return

        log.info(labels.OSC_OPENING.format(self._host, self._port))
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            sock.connect((self._host, self._port))
        except (OSError, OverflowError, TypeError) as e:
            sock.close()
            raise TransportError(labels.OSC_OPEN_ERROR.format(self._host, self._port, e)) from e

        self._socket = sock
        log.info(labels.OSC_OPENED)

    def close(self) -> None:
        if self._socket is None:
            return
        self._socket.close()
        self._socket = None
        log.info(labels.OSC_CLOSED)

    def address_for(self, channel: int) -> str:
        return self._address_pattern.format(channel=channel)

    def build_message(self, channel: int, duty_cycle: float) -> bytes:
        builder = OscMessageBuilder(address=self.address_for(channel))
        builder.add_arg(float(duty_cycle), OscMessageBuilder.ARG_TYPE_FLOAT)
        return builder.build().dgram

    def send(self, channel: int, duty_cycle: float) -> None:
        """Send one "set duty cycle" message. No retries.

        Raises:
            TransportError: If the channel is not open or the datagram cannot be sent.
        """
        if self._socket is None:
            raise TransportError(labels.OSC_NOT_OPEN)

        dgram = self.build_message(channel, duty_cycle)
        try:
            self._socket.send(dgram)
        except OSError as e:
            raise TransportError(
                labels.OSC_SEND_ERROR.format(self.address_for(channel), self._host, self._port, e)
            ) from e

    def __enter__(self) -> "OscSender":
        self.open()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
