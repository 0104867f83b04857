import pytest

from hexapod.configuration import Position, ServoName
from hexapod.exceptions import TransportError, UnreachablePositionError
from hexapod.gait import GAIT_CYCLES, Gait, GaitCycle, GaitSequencer, Phase
from hexapod.servo import ServoDriver

from conftest import RecordingSender, RecordingSleep


@pytest.fixture
def sequencer(position_table, sender, sleep):
    return GaitSequencer(ServoDriver(position_table, sender), phase_delay=0.1, sleep=sleep)


def split_by_sleep(events):
    batches, current = [], []
    for event in events:
        if event[0] == 'sleep':
            batches.append(current)
            current = []
        else:
            current.append(event)
    assert current == []
    return batches


def test_forward_sends_24_commands_and_sleeps_4_times(sequencer, sender, sleep):
    sequencer.run(Gait.FORWARD)

    assert len(sender.sent) == 24
    assert sleep.delays == [0.1, 0.1, 0.1, 0.1]


@pytest.mark.parametrize('gait', list(Gait))
def test_phases_run_in_order_separated_by_delay(sequencer, position_table, events, gait):
    sequencer.run(gait)

    batches = split_by_sleep(events)
    assert len(batches) == 4

    for batch, phase in zip(batches, GAIT_CYCLES[gait]):
        expected = [
            ('send', servo.channel, position_table.resolve(position, servo)) for servo, position in phase
        ]
        assert batch == expected


def test_first_forward_phase_lifts_tripod_a(sequencer, events):
    sequencer.run(Gait.FORWARD)

    first_phase = split_by_sleep(events)[0]
    assert first_phase == [
        ('send', 2, 4.5),
        ('send', 4, 8.5),
        ('send', 6, 4.5),
        ('send', 8, 8.5),
        ('send', 10, 4.5),
        ('send', 12, 8.5),
    ]


def test_second_forward_phase_swings_hips(sequencer, events):
    sequencer.run(Gait.FORWARD)

    second_phase = split_by_sleep(events)[1]
    assert second_phase == [
        ('send', 1, 3.0),
        ('send', 3, 8.0),
        ('send', 5, 4.0),
        ('send', 7, 3.0),
        ('send', 9, 8.5),
        ('send', 11, 4.5),
    ]


def test_transport_failure_aborts_the_cycle(position_table, events):
    sender = RecordingSender(events, fail_on_send=8)
    sleep = RecordingSleep(events)
    sequencer = GaitSequencer(ServoDriver(position_table, sender), phase_delay=0.1, sleep=sleep)

    with pytest.raises(TransportError):
        sequencer.run(Gait.BACKWARD)

    # phase 1 complete, phase 2 stopped at its second command, phases 3 and 4 never start
    assert len(sender.sent) == 7
    assert sleep.delays == [0.1]


def test_unreachable_assignment_aborts_before_sending(position_table, sender, sleep):
    broken = GaitCycle(
        Gait.FORWARD,
        (
            Phase(((ServoName.LEFT_FRONT_KNEE, Position.UP),)),
            Phase(((ServoName.LEFT_FRONT_HIP, Position.DOWN),)),
            Phase(((ServoName.LEFT_FRONT_KNEE, Position.DOWN),)),
        ),
    )
    sequencer = GaitSequencer(
        ServoDriver(position_table, sender), phase_delay=0.1, sleep=sleep, cycles={Gait.FORWARD: broken}
    )

    with pytest.raises(UnreachablePositionError):
        sequencer.run(Gait.FORWARD)

    assert sender.sent == [(2, 4.5)]
    assert sleep.delays == [0.1]


def test_announces_each_cycle(position_table, sender, sleep):
    announced = []
    sequencer = GaitSequencer(
        ServoDriver(position_table, sender), phase_delay=0.0, sleep=sleep, announce=announced.append
    )

    for gait in (Gait.FORWARD, Gait.BACKWARD, Gait.SPIN_RIGHT, Gait.SPIN_LEFT):
        sequencer.run(gait)

    assert announced == ['Step forwards', 'Step backwards', 'Spin right', 'Spin left']


def test_cycles_are_independent_runs(sequencer, sender, sleep):
    sequencer.run(Gait.SPIN_LEFT)
    sequencer.run(Gait.SPIN_RIGHT)

    assert len(sender.sent) == 48
    assert len(sleep.delays) == 8


def test_negative_delay_is_rejected(position_table, sender):
    with pytest.raises(ValueError):
        GaitSequencer(ServoDriver(position_table, sender), phase_delay=-0.1)


def test_cycle_lookup(sequencer):
    assert sequencer.cycle(Gait.SPIN_RIGHT) is GAIT_CYCLES[Gait.SPIN_RIGHT]
    assert sequencer.phase_delay == 0.1
