"""
Beräknar var på rutten löparen befinner sig och sammanställer statistik
"""

import logging
import math
from typing import List, Sequence

from config import RUN_ACTIVITY_TYPE
from models import (
    ActivityRecord,
    InvalidArgumentError,
    JourneyProgress,
    JourneyStats,
    PositionOnRoute,
    Route,
)
from utils import calculate_distance, interpolate

logger = logging.getLogger(__name__)

def track_position(route: Route, distance_traveled_km: float) -> PositionOnRoute:
    """
    Hitta positionen längs polylinjen efter en viss sprungen distans

    Polylinjen gås igenom segment för segment. I segmentet där distansen
    tar slut interpoleras positionen linjärt, precis som när polylinjen byggs.

    Args:
        route: Rutten
        distance_traveled_km: Sprungen distans i km

    Returns:
        PositionOnRoute, låst till målet när distansen räcker hela vägen
    """
    if not math.isfinite(distance_traveled_km) or distance_traveled_km < 0:
        raise InvalidArgumentError(
            f"distance_traveled_km måste vara ett icke-negativt tal, fick {distance_traveled_km!r}"
        )

    polyline = route.polyline
    finished = PositionOnRoute(
        position=polyline[-1],
        distance_remaining_km=0.0,
        progress_percentage=100.0,
    )

    if distance_traveled_km >= route.total_distance:
        return finished

    remaining = distance_traveled_km
    for segment_start, segment_end in zip(polyline, polyline[1:]):
        segment_distance = calculate_distance(segment_start, segment_end)

        if remaining <= segment_distance:
            fraction = remaining / segment_distance if segment_distance > 0 else 0.0
            return PositionOnRoute(
                position=interpolate(segment_start, segment_end, fraction),
                distance_remaining_km=max(0.0, route.total_distance - distance_traveled_km),
                progress_percentage=min(100.0, distance_traveled_km / route.total_distance * 100),
            )

        remaining -= segment_distance

    # Polylinjen tog slut före total_distance, bara möjligt genom avrundning
    return finished

def calculate_stats(activities: Sequence[ActivityRecord]) -> JourneyStats:
    """
    Sammanställ statistik från aktiviteter

    Args:
        activities: Lista med ActivityRecord

    Returns:
        JourneyStats med distans i km, tid i sekunder och tempo i min/km
    """
    total_distance = sum(a.distance_meters for a in activities) / 1000
    total_time = sum(a.moving_time_seconds for a in activities)
    average_pace = total_time / 60 / total_distance if total_distance > 0 else 0.0
    total_elevation_gain = sum(a.elevation_gain_meters for a in activities)

    return JourneyStats(
        total_distance_km=total_distance,
        total_time_seconds=total_time,
        average_pace_min_per_km=average_pace,
        total_elevation_gain_meters=total_elevation_gain,
    )

def calculate_progress(route: Route, activities: Sequence[ActivityRecord]) -> JourneyProgress:
    """
    Beräkna framsteg på resan utifrån aktiviteterna

    Args:
        route: Vald rutt
        activities: Aktiviteter som räknas mot resan

    Returns:
        JourneyProgress; distance_traveled_km begränsas till ruttens längd
    """
    stats = calculate_stats(activities)
    position = track_position(route, stats.total_distance_km)

    logger.debug(
        "%.1f km av %.1f km, %.1f%%",
        stats.total_distance_km, route.total_distance, position.progress_percentage
    )

    return JourneyProgress(
        current_position=position.position,
        distance_traveled_km=min(stats.total_distance_km, route.total_distance),
        distance_remaining_km=position.distance_remaining_km,
        progress_percentage=position.progress_percentage,
        stats=stats,
    )

def filter_run_activities(
    activities: Sequence[ActivityRecord],
    activity_type: str = RUN_ACTIVITY_TYPE
) -> List[ActivityRecord]:
    """Behåll bara aktiviteter av en viss typ, aktiviteter utan typ räknas inte"""
    return [a for a in activities if a.activity_type == activity_type]
