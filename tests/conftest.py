import pytest

from hexapod.exceptions import TransportError
from hexapod.servo import PositionTable

# Duty cycles of the reference robot, one row per position in channel order
DEFAULT_ROWS = {
    'forwards': [3.0, None, 6.5, None, 4.0, None, 9.0, None, 8.5, None, 9.0, None],
    'backwards': [9.0, None, 8.0, None, 10.0, None, 3.0, None, 7.0, None, 4.5, None],
    'up': [None, 4.5, None, 5.0, None, 4.5, None, 4.5, None, 4.5, None, 4.5],
    'down': [None, 8.5, None, 8.5, None, 8.5, None, 8.5, None, 8.5, None, 8.5],
}


class RecordingSender:
    """Stands in for OscSender and remembers every message."""

    def __init__(self, events=None, fail_on_send=None, fail_on_open=False):
        self.events = events if events is not None else []
        self.sent = []
        self.opened = 0
        self.closed = 0
        self._fail_on_send = fail_on_send
        self._fail_on_open = fail_on_open

    def open(self):
        if self._fail_on_open:
            raise TransportError('network unreachable')
        self.opened += 1

    def close(self):
        self.closed += 1

    def send(self, channel, duty_cycle):
        if self._fail_on_send is not None and len(self.sent) + 1 == self._fail_on_send:
            raise TransportError('send failed')
        self.sent.append((channel, duty_cycle))
        self.events.append(('send', channel, duty_cycle))


class RecordingSleep:
    def __init__(self, events=None):
        self.events = events if events is not None else []
        self.delays = []

    def __call__(self, seconds):
        self.delays.append(seconds)
        self.events.append(('sleep', seconds))


@pytest.fixture
def default_rows():
    return {position: list(row) for position, row in DEFAULT_ROWS.items()}


@pytest.fixture
def position_table(default_rows):
    return PositionTable.from_rows(default_rows)


@pytest.fixture
def events():
    return []


@pytest.fixture
def sender(events):
    return RecordingSender(events)


@pytest.fixture
def sleep(events):
    return RecordingSleep(events)
