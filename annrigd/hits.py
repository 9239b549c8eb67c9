"""Energy deposits collected per detector channel during an event."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Hit:
    """Total energy deposited in one channel during an event, in MeV."""

    channel: int
    edep: float

    def __str__(self) -> str:
        return f"Hit:{self.channel}::{self.edep} MeV"


class EnergyDepositCollector:
    """Accumulates energy deposits per channel and turns them into hits."""

    def __init__(self, name: str, channels: int) -> None:
        if channels <= 0:
            raise ValueError("number of channels must be positive")
        self.name = name
        self.channels = channels
        self.hits: list[Hit] = []
        self._edep = [0.0] * channels

    def begin_event(self) -> None:
        """Clear the deposit buffer and the hits of the previous event."""
        self._edep = [0.0] * self.channels
        self.hits = []

    def add_deposit(self, channel: int, edep: float) -> None:
        """Add an energy deposit to the given channel."""
        if not 0 <= channel < self.channels:
            raise IndexError(f"channel {channel} out of range for {self.name}")
        self._edep[channel] += edep

    def end_event(self) -> list[Hit]:
        """Return one hit for every channel with a positive deposit, in channel order."""
        self.hits = [Hit(channel, edep) for channel, edep in enumerate(self._edep) if edep > 0.0]
        return list(self.hits)