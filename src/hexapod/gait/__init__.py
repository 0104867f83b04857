"""Gait cycles and the sequencer that plays them."""

from hexapod.gait.cycles import GAIT_CYCLES, TRIPOD_A, TRIPOD_B
from hexapod.gait.gait_sequencer import GaitSequencer
from hexapod.gait.models import Gait, GaitCycle, Phase

__all__ = ["Gait", "GaitCycle", "Phase", "GaitSequencer", "GAIT_CYCLES", "TRIPOD_A", "TRIPOD_B"]
