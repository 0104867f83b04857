"""Duty-cycle lookup for every (position, servo) pair.

Each cell of the table is either a :class:`DutyCycle` or :data:`UNREACHABLE`.
A hip can only move forwards/backwards and a knee only up/down, so half the
cells are unreachable by construction. Resolving one of them is a programming
error and raises instead of handing a meaningless number to the hardware.
"""

import math
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from hexapod import labels
from hexapod.configuration import Position, ServoName
from hexapod.constants import DUTY_CYCLE_MAX, DUTY_CYCLE_MIN, NUM_SERVOS
from hexapod.exceptions import PositionTableError, UnreachablePositionError


@dataclass(frozen=True)
class DutyCycle:
    """PWM duty cycle, in percent."""

    percent: float


class Unreachable:
    """Marker for a table cell that must never be resolved."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'UNREACHABLE'


UNREACHABLE = Unreachable()

Cell = Union[DutyCycle, Unreachable]


class PositionTable:
    """Immutable mapping of (Position, ServoName) to a duty cycle."""

    def __init__(self, cells: Mapping[Tuple[Position, ServoName], Cell]):
        self._cells: Dict[Tuple[Position, ServoName], Cell] = {}

        for position in Position:
            for servo in ServoName:
                cell = cells.get((position, servo), UNREACHABLE)
                self._validate_cell(position, servo, cell)
                self._cells[(position, servo)] = cell

    @staticmethod
    def _validate_cell(position: Position, servo: ServoName, cell: Cell) -> None:
        allowed = position.is_valid_for(servo.joint_type)

        if isinstance(cell, Unreachable):
            if allowed:
                raise PositionTableError(labels.TABLE_CELL_MISSING.format(servo.value, position.value))
            return

        if not allowed:
            raise PositionTableError(
                labels.TABLE_CELL_NOT_ALLOWED.format(
                    position.value, servo.value, servo.joint_type.value, position.value
                )
            )

        if not math.isfinite(cell.percent) or not DUTY_CYCLE_MIN <= cell.percent <= DUTY_CYCLE_MAX:
            raise PositionTableError(
                labels.TABLE_CELL_OUT_OF_RANGE.format(
                    cell.percent, servo.value, position.value, DUTY_CYCLE_MIN, DUTY_CYCLE_MAX
                )
            )

    @classmethod
    def from_rows(cls, rows: Mapping[str, Sequence[Optional[float]]]) -> "PositionTable":
        """Build a table from one row per position, each row in channel order.

        ``None`` and ``NaN`` both mark an unreachable cell.

        Args:
            rows: e.g. ``{'forwards': [3.0, None, ...], 'backwards': [...], 'up': [...], 'down': [...]}``

        Raises:
            PositionTableError: If a row is missing, has the wrong length, or breaks the table invariants.
        """
        cells: Dict[Tuple[Position, ServoName], Cell] = {}

        for position in Position:
            if position.value not in rows:
                raise PositionTableError(labels.TABLE_ROW_MISSING.format(position.value))

            row = rows[position.value]
            if not isinstance(row, (list, tuple)):
                raise PositionTableError(labels.TABLE_ROW_NOT_A_LIST.format(position.value, type(row).__name__))
            if len(row) != NUM_SERVOS:
                raise PositionTableError(labels.TABLE_ROW_LENGTH.format(position.value, len(row), NUM_SERVOS))

            for servo, value in zip(ServoName, row):
                cells[(position, servo)] = _to_cell(value, position, servo)

        return cls(cells)

    @classmethod
    def from_config(cls, config_provider) -> "PositionTable":
        return cls.from_rows(config_provider.get_position_table())

    def lookup(self, position: Position, servo: ServoName) -> Cell:
        """Return the raw cell, reachable or not."""
        return self._cells[(position, servo)]

    def resolve(self, position: Position, servo: ServoName) -> float:
        """Return the duty cycle for ``servo`` at ``position``.

        Raises:
            UnreachablePositionError: If the position is not defined for the servo's joint type.
        """
        cell = self.lookup(position, servo)
        if isinstance(cell, Unreachable):
            raise UnreachablePositionError(
                labels.TABLE_UNREACHABLE.format(position.value, servo.value, servo.joint_type.value)
            )
        return cell.percent

    def valid_positions(self, servo: ServoName) -> List[Position]:
        return [position for position in Position if not isinstance(self._cells[(position, servo)], Unreachable)]


def _to_cell(value: Optional[float], position: Position, servo: ServoName) -> Cell:
    if value is None:
        return UNREACHABLE
    # bool is an int subclass, but a JSON true is not a duty cycle
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PositionTableError(labels.TABLE_CELL_NOT_A_NUMBER.format(value, servo.value, position.value))
    value = float(value)
    if math.isnan(value):
        return UNREACHABLE
    return DutyCycle(value)
