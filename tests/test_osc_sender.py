import socket

import pytest
from pythonosc.osc_message import OscMessage

from hexapod.exceptions import TransportError
from hexapod.servo import OscSender
import hexapod.servo.osc_sender as osc_sender_module


@pytest.fixture
def receiver():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(('127.0.0.1', 0))
    sock.settimeout(2.0)
    yield sock
    sock.close()


def test_sends_duty_cycle_message_to_channel_address(receiver):
    port = receiver.getsockname()[1]

    with OscSender('127.0.0.1', port) as sender:
        sender.send(7, 3.0)
        message = OscMessage(receiver.recv(1024))

    assert message.address == '/output/pwm/duty/7'
    assert message.params == [3.0]


def test_one_datagram_per_send(receiver):
    port = receiver.getsockname()[1]

    with OscSender('127.0.0.1', port) as sender:
        sender.send(1, 3.0)
        sender.send(12, 8.5)
        first = OscMessage(receiver.recv(1024))
        second = OscMessage(receiver.recv(1024))

    assert (first.address, first.params) == ('/output/pwm/duty/1', [3.0])
    assert (second.address, second.params) == ('/output/pwm/duty/12', [8.5])


def test_address_pattern_is_configurable():
    sender = OscSender('127.0.0.1', 9000, address_pattern='/servo/{channel}/duty')

    assert sender.address_for(4) == '/servo/4/duty'
    assert OscMessage(sender.build_message(4, 6.5)).params == [6.5]


def test_send_before_open_fails():
    sender = OscSender('127.0.0.1', 9000)

    with pytest.raises(TransportError):
        sender.send(1, 3.0)


def test_close_is_idempotent(receiver):
    sender = OscSender('127.0.0.1', receiver.getsockname()[1])
    sender.open()
    assert sender.is_open

    sender.close()
    sender.close()

    assert not sender.is_open
    with pytest.raises(TransportError):
        sender.send(1, 3.0)


class _BrokenSocket:
    def __init__(self, *args, fail_connect=False, **kwargs):
        self._fail_connect = fail_connect
        self.closed = False

    def connect(self, address):
        if self._fail_connect:
            raise OSError('network is unreachable')

    def send(self, data):
        raise OSError('message too long')

    def close(self):
        self.closed = True


def test_send_failure_is_wrapped(monkeypatch):
    monkeypatch.setattr(osc_sender_module.socket, 'socket', _BrokenSocket)
    sender = OscSender('127.0.0.1', 9000)
    sender.open()

    with pytest.raises(TransportError, match='/output/pwm/duty/3'):
        sender.send(3, 6.5)


def test_open_failure_is_wrapped(monkeypatch):
    created = []

    def factory(*args, **kwargs):
        sock = _BrokenSocket(fail_connect=True)
        created.append(sock)
        return sock

    monkeypatch.setattr(osc_sender_module.socket, 'socket', factory)
    sender = OscSender('169.254.1.1', 9000)

    with pytest.raises(TransportError, match='169.254.1.1:9000'):
        sender.open()

    assert not sender.is_open
    assert created[0].closed


def test_port_out_of_range_is_wrapped(monkeypatch):
    created = []
    real_socket = socket.socket

    def factory(*args, **kwargs):
        sock = real_socket(*args, **kwargs)
        created.append(sock)
        return sock

    monkeypatch.setattr(osc_sender_module.socket, 'socket', factory)
    sender = OscSender('127.0.0.1', 70000)

    with pytest.raises(TransportError, match='127.0.0.1:70000'):
        sender.open()

    assert not sender.is_open
    assert created[0].fileno() == -1
