"""Per-event analysis of trajectories and detector hits."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .hits import Hit
from .messages import ConfigurationError

GE_CHANNELS = 14
SIDE_BGO_CHANNELS = 24
TOP_BGO_CHANNELS = 16
GE_UPPER_CHANNELS = 7
SIDE_BGO_UPPER_CHANNELS = 12
TOP_BGO_UPPER_CHANNELS = 8
NO_PARENT = -99
CAPTURE_GAMMA_MIN_ENERGY = 0.2  # MeV

VETO_ON = 1
VETO_OFF = 2

_FIRED = 31
_PLAIN = 0
_RESET = "\x1b[0m"


@dataclass(frozen=True)
class Trajectory:
    """The start of one particle track in an event."""

    track_id: int
    particle_name: str
    parent_id: int
    initial_kinetic_energy: float = 0.0
    initial_momentum: tuple[float, float, float] = (0.0, 0.0, 0.0)
    position: tuple[float, float, float] = (0.0, 0.0, 0.0)

    @property
    def momentum_magnitude(self) -> float:
        return math.sqrt(sum(p * p for p in self.initial_momentum))


def count_capture_gammas(trajectories: Iterable[Trajectory]) -> tuple[int, int]:
    """Count gamma rays emitted by the residual Gd nucleus after capture.

    Returns the number of such gamma rays and the number of them above
    0.2 MeV.  The capture is identified by the last track whose particle
    name contains 'Gd15'; the gamma rays counted share its parent.
    """
    tracks = list(trajectories)
    gd_parent = NO_PARENT
    for track in tracks:
        if "Gd15" in track.particle_name:
            gd_parent = track.parent_id
    gammas = [t for t in tracks if t.particle_name == "gamma" and t.parent_id == gd_parent]
    above = sum(1 for t in gammas if t.initial_kinetic_energy > CAPTURE_GAMMA_MIN_ENERGY)
    return len(gammas), above


@dataclass
class EventRecord:
    """Energies in keV recorded for one event after the veto logic."""

    ge: list[float] = field(default_factory=lambda: [0.0] * GE_CHANNELS)
    bgo_side: list[float] = field(default_factory=lambda: [0.0] * SIDE_BGO_CHANNELS)
    bgo_top: list[float] = field(default_factory=lambda: [0.0] * TOP_BGO_CHANNELS)
    up: float = 0.0
    dw: float = 0.0
    bit: int = 0
    ge_flag_up: int = 0
    ge_flag_low: int = 0
    fired_ge: set[int] = field(default_factory=set)
    fired_side: set[int] = field(default_factory=set)
    fired_top: set[int] = field(default_factory=set)

    def is_stored(self) -> bool:
        """Return True if any Ge crystal has an accepted energy."""
        return self.ge_flag_up > 0 or self.ge_flag_low > 0


def _bgo_flags(hits, values, fired, upper_channels, threshold):
    flag_up = flag_low = 0
    for hit in hits:
        energy = hit.edep * 1000.0
        values[hit.channel] = energy
        if energy > threshold:
            fired.add(hit.channel)
            if hit.channel < upper_channels:
                flag_up += 1
            else:
                flag_low += 1
    return flag_up, flag_low


def build_event_record(
    ge_hits: Sequence[Hit],
    side_hits: Sequence[Hit],
    top_hits: Sequence[Hit],
    veto: int,
    bgo_threshold: float,
    ge_threshold: float,
) -> EventRecord:
    """Combine hits (in MeV) into an event record with energies in keV.

    With the veto on, a Ge energy above ``ge_threshold`` is zeroed when a BGO
    detector on the same side fired above ``bgo_threshold``.  Raises
    ConfigurationError for an unknown veto setting once a Ge hit is above
    threshold.
    """
    record = EventRecord()
    side_up, side_low = _bgo_flags(
        side_hits, record.bgo_side, record.fired_side, SIDE_BGO_UPPER_CHANNELS, bgo_threshold
    )
    top_up, top_low = _bgo_flags(
        top_hits, record.bgo_top, record.fired_top, TOP_BGO_UPPER_CHANNELS, bgo_threshold
    )
    veto_upper = side_up > 0 or top_up > 0
    veto_lower = side_low > 0 or top_low > 0

    for hit in ge_hits:
        channel = hit.channel
        energy = hit.edep * 1000.0
        if energy > ge_threshold:
            if veto == VETO_ON:
                vetoed = veto_upper if channel < GE_UPPER_CHANNELS else veto_lower
                record.ge[channel] = 0.0 if vetoed else energy
            elif veto == VETO_OFF:
                record.ge[channel] = energy
            else:
                raise ConfigurationError(__name__, "VETO")
        if record.ge[channel] > ge_threshold:
            record.fired_ge.add(channel)
            record.bit += 2 ** (GE_CHANNELS - 1 - channel)
            if channel < GE_UPPER_CHANNELS:
                record.ge_flag_up += 1
                record.up += record.ge[channel]
            else:
                record.ge_flag_low += 1
                record.dw += record.ge[channel]
    return record


def format_trajectory(trajectory: Trajectory) -> str:
    """Return a one-line description of a trajectory."""
    x, y, z = trajectory.position
    return (
        f"ID: {trajectory.track_id:02d}, Name: {trajectory.particle_name:*>10}, "
        f"PID: {trajectory.parent_id:02d}, P = {trajectory.momentum_magnitude:03.2f}[MeV], "
        f"X = ({x:.1f},{y:.1f},{z:.1f})"
    )


def _row(label: str, values: Sequence[float], fired: set[int], channels: range) -> str:
    cells = "".join(
        f"\x1b[{_FIRED if i in fired else _PLAIN}m{values[i]:04.0f}:" for i in channels
    )
    return f"{label}{cells}{_RESET} [keV]"


def format_hit_crystals(record: EventRecord) -> str:
    """Return the Ge crystal energies of an event, fired crystals in red."""
    return "\n".join(
        [
            "######## Information of hit crystals ########",
            "////Ge crystals////",
            _row("upper side : ", record.ge, record.fired_ge, range(0, GE_UPPER_CHANNELS)),
            _row("lower side : ", record.ge, record.fired_ge, range(GE_UPPER_CHANNELS, GE_CHANNELS)),
        ]
    )


def format_hit_bgo(record: EventRecord) -> str:
    """Return the BGO energies of an event, fired detectors in red."""
    return "\n".join(
        [
            "////BGO crystals////",
            _row("BGO upper side : ", record.bgo_side, record.fired_side,
                 range(0, SIDE_BGO_UPPER_CHANNELS)),
            _row("BGO lower side : ", record.bgo_side, record.fired_side,
                 range(SIDE_BGO_UPPER_CHANNELS, SIDE_BGO_CHANNELS)),
            _row("BGO upper top : ", record.bgo_top, record.fired_top,
                 range(0, TOP_BGO_UPPER_CHANNELS)),
            _row("BGO lower top : ", record.bgo_top, record.fired_top,
                 range(TOP_BGO_UPPER_CHANNELS, TOP_BGO_CHANNELS)),
        ]
    )