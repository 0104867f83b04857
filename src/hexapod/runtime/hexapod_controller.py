import hexapod
from hexapod import labels
from hexapod.exceptions import HexapodError
from hexapod.gait import GaitSequencer
from hexapod.logger import Logger
from hexapod.runtime.command_loop import CommandLoop
from hexapod.servo import ServoDriver

log = Logger().setup_logger('Controller')


def banner() -> str:
    major, minor = hexapod.__version__.split('.')[:2]
    return labels.APP_BANNER.format(hexapod.__name__, major, minor)


class HexapodController:
    """
    Owns one interactive session: banner, output channel, command loop, shutdown.

    The output channel is opened once before the loop and closed once after it.
    A fatal error is reported on the display and acknowledged with one key
    before the session ends.

    Args:
        key_source: Provides ``discard_pending()``, ``read_intent()`` and ``wait_for_key()``.
        display: Provides ``show(line)``.
        sender: Output channel with ``open()``, ``close()`` and ``send(channel, duty_cycle)``.
        position_table: Table the servo driver resolves positions against.
        phase_delay: Settling time between gait phases, in seconds.
        sleep: Optional replacement for ``time.sleep`` in the sequencer.
    """

    def __init__(self, key_source, display, sender, position_table, phase_delay, sleep=None):
        self._key_source = key_source
        self._display = display
        self._sender = sender

        sequencer_kwargs = {} if sleep is None else {'sleep': sleep}
        self._gait_sequencer = GaitSequencer(
            ServoDriver(position_table, sender),
            phase_delay=phase_delay,
            announce=display.show,
            **sequencer_kwargs,
        )
        self._command_loop = CommandLoop(key_source, self._gait_sequencer)

    def run(self) -> int:
        """Run the session and return the process exit code."""
        self._display.show(banner())
        self._display.show(labels.APP_USAGE)

        try:
            self._sender.open()
            try:
                self._command_loop.run()
            finally:
                self._sender.close()

        except HexapodError as e:
            log.error(labels.MAIN_FATAL_ERROR.format(e))
            self._display.show(labels.APP_ERROR.format(e))
            self._display.show(labels.APP_PRESS_ANY_KEY)
            self._key_source.wait_for_key()
            return 1

        log.info(labels.MAIN_TERMINATED_NORMAL)
        return 0
