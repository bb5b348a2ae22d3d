"""
Datamodeller för resemotorn
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

class InvalidArgumentError(ValueError):
    """Kastas när anroparen bryter mot ett kontrakt (NaN, negativt antal osv.)"""

def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidArgumentError(f"{name} måste vara ett ändligt tal, fick {value!r}")

@dataclass(frozen=True)
class Coordinate:
    """En punkt i grader"""
    lat: float
    lon: float

    def __post_init__(self):
        _require_finite("lat", self.lat)
        _require_finite("lon", self.lon)

@dataclass(frozen=True)
class City:
    """Namngiven stad från geokodningen"""
    name: str
    coordinate: Coordinate
    country: Optional[str] = None
    state: Optional[str] = None

@dataclass(frozen=True)
class CandidateCity:
    """Stad med avstånd (km) från startpunkten, används vid ruttval"""
    city: City
    distance_from_origin: float

    def __post_init__(self):
        _require_finite("distance_from_origin", self.distance_from_origin)
        if self.distance_from_origin < 0:
            raise InvalidArgumentError(
                f"distance_from_origin får inte vara negativ, fick {self.distance_from_origin}"
            )

    @property
    def name(self) -> str:
        return self.city.name

    @property
    def coordinate(self) -> Coordinate:
        return self.city.coordinate

@dataclass(frozen=True)
class Route:
    """En resa mellan två städer"""
    start_city: City
    end_city: City
    polyline: Tuple[Coordinate, ...]
    total_distance: float  # km, storcirkelavstånd start -> mål

    def __post_init__(self):
        _require_finite("total_distance", self.total_distance)
        if self.total_distance < 0:
            raise InvalidArgumentError(
                f"total_distance får inte vara negativ, fick {self.total_distance}"
            )
        if len(self.polyline) < 2:
            raise InvalidArgumentError("polyline måste ha minst två punkter")
        if self.polyline[0] != self.start_city.coordinate:
            raise InvalidArgumentError("polyline börjar inte i startstaden")
        if self.polyline[-1] != self.end_city.coordinate:
            raise InvalidArgumentError("polyline slutar inte i målstaden")

@dataclass(frozen=True)
class ActivityRecord:
    """En synkad träningsaktivitet"""
    distance_meters: float
    moving_time_seconds: float
    elevation_gain_meters: float
    activity_type: Optional[str] = None  # "Run", "Ride", ...

    @classmethod
    def from_strava(cls, data: Dict[str, Any]) -> "ActivityRecord":
        """
        Parsa en aktivitet i Stravas format

        Args:
            data: Dict med distance, moving_time, total_elevation_gain och type

        Returns:
            ActivityRecord
        """
        return cls(
            distance_meters=float(data.get("distance", 0)),
            moving_time_seconds=float(data.get("moving_time", 0)),
            elevation_gain_meters=float(data.get("total_elevation_gain", 0)),
            activity_type=data.get("type"),
        )

@dataclass(frozen=True)
class JourneyStats:
    """Sammanställd statistik över aktiviteter"""
    total_distance_km: float
    total_time_seconds: float
    average_pace_min_per_km: float
    total_elevation_gain_meters: float

@dataclass(frozen=True)
class PositionOnRoute:
    """Aktuell position längs en rutt"""
    position: Coordinate
    distance_remaining_km: float
    progress_percentage: float

@dataclass(frozen=True)
class JourneyProgress:
    """Framsteg på resan inklusive statistik"""
    current_position: Coordinate
    distance_traveled_km: float
    distance_remaining_km: float
    progress_percentage: float  # 0-100
    stats: JourneyStats
