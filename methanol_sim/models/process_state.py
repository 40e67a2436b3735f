"""Immutable process state representation."""

from __future__ import annotations

from dataclasses import dataclass, asdict, fields, replace
from enum import Enum
from typing import Dict, Optional


class Status(str, Enum):
    """Coarse plant health classification."""

    STARTUP = "STARTUP"
    CRITICAL = "CRITICAL"
    WARNING = "WARNING"
    STEADY = "STEADY"


PRIMARY_FIELDS = ("pressure", "reactor_temp", "soec_temp", "ratio", "catalyst")


@dataclass(frozen=True)
class ProcessState:
    """Snapshot of the SOEC-fed methanol synthesis loop.

    Primary variables are updated by the random walk; conversion,
    selectivity and performance are derived from them each tick.
    """

    pressure: float       # Synthesis loop pressure (bar)
    reactor_temp: float   # Methanol reactor temperature (deg C)
    soec_temp: float      # SOEC stack temperature (deg C)
    ratio: float          # H2/CO2 feed ratio (mol/mol)
    catalyst: float       # Catalyst loading (kg)
    conversion: float = 0.0     # CO2 conversion (%)
    selectivity: float = 0.0    # Methanol selectivity (%)
    performance: Optional[float] = None  # Conversion x selectivity index (%)
    status: Status = Status.STEADY

    def primaries(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in PRIMARY_FIELDS}

    def with_updates(self, **changes) -> ProcessState:
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, object]:
        d = asdict(self)
        d["status"] = self.status.value
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, object]) -> ProcessState:
        valid_keys = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in d.items() if k in valid_keys}
        if "status" in kwargs:
            kwargs["status"] = Status(kwargs["status"])
        return cls(**kwargs)
