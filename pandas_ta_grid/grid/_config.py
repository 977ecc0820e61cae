# -*- coding: utf-8 -*-
"""Grid engine configuration: closed enums and the validated GridConfig.

Textual inputs (``"up"``, ``"35-65"``, ``"med"``, ``"rsx"``) are parsed
here, once.  Everything past this module works on the enums only.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict

from pandas_ta_grid.stateful._base import _param


class ConfigurationError(ValueError):
    """Raised when a grid configuration value is missing or out of domain."""


class Direction(IntEnum):
    """Market bias; the sign matches the signal it lets through."""
    DOWN = -1
    NEUTRAL = 0
    UP = 1

    @classmethod
    def parse(cls, value: Any) -> "Direction":
        if value is None:
            return cls.NEUTRAL
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.name.lower() == key:
                    return member
            raise ConfigurationError(f"[!] Unknown direction: {value!r}")
        return _int_member(cls, value, "direction")


class Aggression(IntEnum):
    LOW = 0
    MEDIUM = 1
    HIGH = 2

    @classmethod
    def parse(cls, value: Any) -> "Aggression":
        if value is None:
            return cls.LOW
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            aliases = {"low": cls.LOW, "med": cls.MEDIUM, "medium": cls.MEDIUM, "high": cls.HIGH}
            if key not in aliases:
                raise ConfigurationError(f"[!] Unknown aggression level: {value!r}")
            return aliases[key]
        return _int_member(cls, value, "aggression")


class NoTradeZone(IntEnum):
    """Half-width of the band around 50 in which signals are suppressed."""
    NONE = 0
    NTZ_45_55 = 5
    NTZ_40_60 = 10
    NTZ_35_65 = 15
    NTZ_30_70 = 20

    @property
    def label(self) -> str:
        if self == NoTradeZone.NONE:
            return "n/a"
        return f"{50 - self.value}-{50 + self.value}"

    @classmethod
    def parse(cls, value: Any) -> "NoTradeZone":
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.label == key:
                    return member
            if key.isdigit():
                return _int_member(cls, int(key), "no-trade zone")
            raise ConfigurationError(f"[!] Unknown no-trade zone: {value!r}")
        return _int_member(cls, value, "no-trade zone")


class RsiType(str, Enum):
    RSI = "rsi"
    RSX = "rsx"

    @property
    def kind(self) -> str:
        """Stateful registry key of the oscillator."""
        return f"grid_{self.value}"

    @classmethod
    def parse(cls, value: Any) -> "RsiType":
        if value is None:
            return cls.RSI
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigurationError(f"[!] Unknown rsi type: {value!r}") from None


def _int_member(enum_cls, value: Any, what: str):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"[!] Invalid {what}: {value!r}")
    try:
        return enum_cls(value)
    except ValueError:
        raise ConfigurationError(f"[!] Invalid {what}: {value!r}") from None


def _positive_int(value: Any, what: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"[!] {what} must be an integer, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"[!] {what} must be an integer, got {value!r}") from None
    if number != value and not isinstance(value, str):
        raise ConfigurationError(f"[!] {what} must be an integer, got {value!r}")
    if number < 1:
        raise ConfigurationError(f"[!] {what} must be >= 1, got {number}")
    return number


@dataclass(frozen=True)
class GridConfig:
    """Validated, immutable settings of one grid strategy.

    length         oscillator period (>= 1)
    grids          number of grid divisions; the ladder has grids + 1 lines
    direction      market bias filter
    no_trade_zone  band around 50 that suppresses signals
    aggression     how close to the last signal line a new one may fire
    rsi_type       oscillator variant
    """
    length: int = 14
    grids: int = 10
    direction: Direction = Direction.NEUTRAL
    no_trade_zone: NoTradeZone = NoTradeZone.NONE
    aggression: Aggression = Aggression.LOW
    rsi_type: RsiType = RsiType.RSI

    def __post_init__(self):
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "length", _positive_int(self.length, "length"))
        object.__setattr__(self, "grids", _positive_int(self.grids, "grids"))
        object.__setattr__(self, "direction", Direction.parse(self.direction))
        object.__setattr__(self, "no_trade_zone", NoTradeZone.parse(self.no_trade_zone))
        object.__setattr__(self, "aggression", Aggression.parse(self.aggression))
        object.__setattr__(self, "rsi_type", RsiType.parse(self.rsi_type))

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "GridConfig":
        """Build from a params dict; None or missing keys take the defaults."""
        unknown = set(params) - {
            "length", "grids", "direction", "no_trade_zone", "aggression", "rsi_type",
        }
        if unknown:
            raise ConfigurationError(f"[!] Unknown grid parameters: {sorted(unknown)}")
        return cls(
            length=_param(params, "length", 14),
            grids=_param(params, "grids", 10),
            direction=_param(params, "direction", Direction.NEUTRAL),
            no_trade_zone=_param(params, "no_trade_zone", NoTradeZone.NONE),
            aggression=_param(params, "aggression", Aggression.LOW),
            rsi_type=_param(params, "rsi_type", RsiType.RSI),
        )

    @property
    def indicator_params(self) -> Dict[str, Any]:
        return {"length": self.length}

    def describe(self) -> str:
        return (
            f"length={self.length}, grids={self.grids}, direction={self.direction.name.lower()}, "
            f"ntz={self.no_trade_zone.label}, aggression={self.aggression.name.lower()}, "
            f"rsi_type={self.rsi_type.value}"
        )
