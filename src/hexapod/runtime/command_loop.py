from hexapod import labels
from hexapod.logger import Logger
from hexapod.runtime.intent import gait_for

log = Logger().setup_logger('Command loop')


class CommandLoop:
    """
    Reads one intent at a time and plays the matching gait cycle.

    Each cycle runs to completion before the next intent is read; the key
    source discards anything typed in the meantime.
    """

    def __init__(self, key_source, gait_sequencer):
        self._key_source = key_source
        self._gait_sequencer = gait_sequencer

    def run(self) -> None:
        """Loop until a terminating intent arrives. Errors from the sequencer propagate."""
        log.info(labels.LOOP_STARTED)

        while True:
            self._key_source.discard_pending()
            intent = self._key_source.read_intent()
            log.debug(labels.LOOP_INTENT.format(intent.value))

            gait = gait_for(intent)
            if gait is None:
                log.info(labels.LOOP_TERMINATING)
                break

            self._gait_sequencer.run(gait)
