"""
Bygger rutter mellan städer och sätter ihop ruttförslag
"""

import logging
import math
from typing import List, Sequence

from config import DEFAULT_ROUTE_COUNT, DEFAULT_STEP_KM, MIN_DESTINATION_DISTANCE_KM
from models import City, Coordinate, InvalidArgumentError, Route
from route_selection import find_cities_within_distance, select_diverse_routes
from utils import calculate_distance, interpolate

logger = logging.getLogger(__name__)

def build_polyline(
    start: Coordinate,
    end: Coordinate,
    step_km: float = DEFAULT_STEP_KM
) -> List[Coordinate]:
    """
    Skapa en polylinje mellan två punkter

    Punkterna interpoleras linjärt i latitud och longitud, inte längs
    storcirkeln. Det är en approximation som ruttval och framstegsberäkning
    är kalibrerade mot.

    Args:
        start: Startpunkt
        end: Slutpunkt
        step_km: Ungefärligt avstånd mellan punkterna

    Returns:
        Minst tre punkter, första är start och sista är end
    """
    if not math.isfinite(step_km) or step_km <= 0:
        raise InvalidArgumentError(f"step_km måste vara positiv, fick {step_km!r}")

    total_distance = calculate_distance(start, end)
    num_points = max(2, math.ceil(total_distance / step_km))

    polyline = [start]
    for i in range(1, num_points):
        polyline.append(interpolate(start, end, i / num_points))
    polyline.append(end)

    return polyline

def create_route(start_city: City, end_city: City) -> Route:
    """Skapa en rutt mellan två städer"""
    total_distance = calculate_distance(start_city.coordinate, end_city.coordinate)
    polyline = build_polyline(start_city.coordinate, end_city.coordinate)

    return Route(
        start_city=start_city,
        end_city=end_city,
        polyline=tuple(polyline),
        total_distance=total_distance,
    )

def suggest_routes(
    start_city: City,
    cities: Sequence[City],
    total_distance_km: float,
    count: int = DEFAULT_ROUTE_COUNT,
    min_distance_km: float = MIN_DESTINATION_DISTANCE_KM
) -> List[Route]:
    """
    Föreslå rutter till städer som ryms inom den sprungna distansen

    Args:
        start_city: Startstad
        cities: Kandidatstäder från geokodningen
        total_distance_km: Användarens totala distans
        count: Antal förslag
        min_distance_km: Städer närmare än så hoppas över

    Returns:
        Upp till count rutter, i den ordning destinationerna valdes
    """
    candidates = find_cities_within_distance(
        start_city, cities, total_distance_km, min_distance_km
    )
    selected = select_diverse_routes(start_city.coordinate, candidates, count)

    logger.debug(
        "%d av %d kandidater valdes från %s",
        len(selected), len(candidates), start_city.name
    )

    return [create_route(start_city, candidate.city) for candidate in selected]
