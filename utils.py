"""
Hjälpfunktioner för resemotorn: geometri, formatering och GPX-export
"""

import math
from typing import Optional

import gpxpy
import gpxpy.gpx

from config import EARTH_RADIUS_KM, GPX_CREATOR
from models import Coordinate, JourneyProgress, Route

def calculate_distance(point1: Coordinate, point2: Coordinate) -> float:
    """
    Beräkna storcirkelavstånd mellan två punkter (Haversine formula)

    Args:
        point1: Startpunkt
        point2: Slutpunkt

    Returns:
        Avstånd i km
    """
    lat1, lon1 = math.radians(point1.lat), math.radians(point1.lon)
    lat2, lon2 = math.radians(point2.lat), math.radians(point2.lon)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = math.sin(dlat/2)**2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon/2)**2
    # Avrundningsfel nära antipoder kan ge a strax utanför [0, 1]
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c

def calculate_bearing(point1: Coordinate, point2: Coordinate) -> float:
    """
    Initial kompassriktning från point1 längs storcirkeln mot point2

    Används av ruttvalet för att sprida destinationerna i olika riktningar.

    Returns:
        Grader i [0, 360), 0 om punkterna är identiska
    """
    phi1 = math.radians(point1.lat)
    phi2 = math.radians(point2.lat)
    delta_lon = math.radians(point2.lon - point1.lon)

    east = math.sin(delta_lon) * math.cos(phi2)
    north = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(delta_lon)

    return (math.degrees(math.atan2(east, north)) + 360) % 360

def bearing_difference(bearing1: float, bearing2: float) -> float:
    """Minsta vinkelskillnad mellan två bäringar, 0-180 grader"""
    diff = abs(bearing1 - bearing2)
    return min(diff, 360 - diff)

def interpolate(start: Coordinate, end: Coordinate, fraction: float) -> Coordinate:
    """
    Linjär interpolation av latitud och longitud var för sig

    Ingen geodetisk interpolation: längre sträckor avviker från storcirkeln
    och longituden lindas inte runt datumlinjen.
    """
    return Coordinate(
        lat=start.lat + (end.lat - start.lat) * fraction,
        lon=start.lon + (end.lon - start.lon) * fraction,
    )

def validate_coordinates(lat: float, lon: float) -> bool:
    """Sållar bort geokodade städer med latitud eller longitud utanför jordklotet"""
    return -90 <= lat <= 90 and -180 <= lon <= 180

def format_pace(min_per_km: float) -> str:
    """
    Formatera tempo som "M:SS /km"

    Args:
        min_per_km: Minuter per km

    Returns:
        Formaterat tempo, "N/A" om tempo saknas
    """
    if min_per_km <= 0:
        return "N/A"
    minutes = int(min_per_km)
    seconds = int((min_per_km - minutes) * 60)
    return f"{minutes}:{seconds:02d} /km"

def format_duration(seconds: float) -> str:
    """
    Formatera tid från sekunder till sträng

    Args:
        seconds: Antal sekunder

    Returns:
        Formaterad tidssträng ("1h 5m" eller "5m")
    """
    hours = int(seconds // 3600)
    mins = int((seconds % 3600) // 60)

    if hours > 0:
        return f"{hours}h {mins}m"
    else:
        return f"{mins}m"

def create_gpx(
    route: Route,
    name: str = GPX_CREATOR,
    progress: Optional[JourneyProgress] = None
) -> str:
    """
    Skapa GPX-fil från en rutt

    Args:
        route: Route-objekt
        name: Namn på spåret
        progress: Framsteg att lägga till som waypoint och beskrivning

    Returns:
        GPX som sträng
    """
    gpx = gpxpy.gpx.GPX()

    # Lägg till metadata
    gpx.creator = GPX_CREATOR
    gpx.description = (
        f"{route.start_city.name} - {route.end_city.name}, {route.total_distance:.1f} km"
    )

    # Skapa track
    gpx_track = gpxpy.gpx.GPXTrack()
    gpx_track.name = name
    gpx_track.type = "running"
    gpx.tracks.append(gpx_track)

    # Skapa segment
    gpx_segment = gpxpy.gpx.GPXTrackSegment()
    gpx_track.segments.append(gpx_segment)

    for point in route.polyline:
        gpx_segment.points.append(gpxpy.gpx.GPXTrackPoint(point.lat, point.lon))

    if progress is not None:
        gpx.waypoints.append(gpxpy.gpx.GPXWaypoint(
            progress.current_position.lat,
            progress.current_position.lon,
            name="Nuvarande position"
        ))
        stats = progress.stats
        gpx_track.description = (
            f"{progress.progress_percentage:.1f}% klart, "
            f"{progress.distance_remaining_km:.1f} km kvar, "
            f"tid: {format_duration(stats.total_time_seconds)}, "
            f"tempo: {format_pace(stats.average_pace_min_per_km)}"
        )

    return gpx.to_xml()
