"""
Gait sequencer: plays a gait cycle phase by phase through the servo driver.
"""

import time
from typing import Callable, Dict, Optional

from hexapod import labels
from hexapod.constants import DEFAULT_PHASE_DELAY
from hexapod.gait.cycles import GAIT_CYCLES
from hexapod.gait.models import Gait, GaitCycle
from hexapod.logger import Logger

log = Logger().setup_logger('Gait sequencer')


class GaitSequencer:
    """
    Runs gait cycles open-loop: every command of phase n is sent and the
    settling delay has fully elapsed before phase n + 1 starts.

    Args:
        servo_driver: Anything with ``command(servo, position)``.
        phase_delay: Settling time after each phase, in seconds.
        sleep: Blocking wait used between phases. Tests pass a recorder.
        cycles: Gait table, defaults to the four built-in cycles.
        announce: Optional callback receiving the gait's announcement text.
    """

    def __init__(
        self,
        servo_driver,
        phase_delay: float = DEFAULT_PHASE_DELAY,
        sleep: Callable[[float], None] = time.sleep,
        cycles: Optional[Dict[Gait, GaitCycle]] = None,
        announce: Optional[Callable[[str], None]] = None,
    ):
        if phase_delay < 0:
            raise ValueError(f"phase_delay must not be negative, got {phase_delay}")

        self._servo_driver = servo_driver
        self._phase_delay = phase_delay
        self._sleep = sleep
        self._cycles = dict(GAIT_CYCLES if cycles is None else cycles)
        self._announce = announce

    @property
    def phase_delay(self) -> float:
        return self._phase_delay

    def cycle(self, gait: Gait) -> GaitCycle:
        return self._cycles[gait]

    def run(self, gait: Gait) -> None:
        """Play one full cycle of ``gait``.

        Any exception raised while commanding a servo aborts the cycle: the
        remaining phases are skipped and the exception propagates.
        """
        cycle = self._cycles[gait]

        log.info(gait.announcement)
        if self._announce is not None:
            self._announce(gait.announcement)

        for number, phase in enumerate(cycle, start=1):
            log.debug(labels.GAIT_PHASE_START.format(number, len(cycle), gait.value, len(phase)))
            try:
                for servo, position in phase:
                    self._servo_driver.command(servo, position)
            except Exception as e:
                log.error(labels.GAIT_CYCLE_ABORTED.format(gait.value, number, e))
                raise
            self._sleep(self._phase_delay)

        log.debug(labels.GAIT_CYCLE_COMPLETE.format(gait.value, cycle.command_count()))
