"""
Val av destinationer: sprida förslagen både i avstånd och riktning
"""

import logging
import math
from typing import List, Sequence, Tuple

from models import CandidateCity, City, Coordinate, InvalidArgumentError
from utils import bearing_difference, calculate_bearing, calculate_distance, validate_coordinates

logger = logging.getLogger(__name__)

def find_cities_within_distance(
    origin: City,
    cities: Sequence[City],
    max_distance_km: float,
    min_distance_km: float = 0.0
) -> List[CandidateCity]:
    """
    Hitta städer inom ett visst avstånd från startstaden

    Args:
        origin: Startstad
        cities: Städer att välja bland
        max_distance_km: Största tillåtna avstånd
        min_distance_km: Minsta tillåtna avstånd

    Returns:
        CandidateCity sorterade efter avstånd, startstaden själv utesluten
    """
    if math.isnan(max_distance_km) or math.isnan(min_distance_km):
        raise InvalidArgumentError("Avståndsgränserna får inte vara NaN")

    candidates = []
    for city in cities:
        if not validate_coordinates(city.coordinate.lat, city.coordinate.lon):
            logger.warning("Hoppar över %s: ogiltiga koordinater %s", city.name, city.coordinate)
            continue

        distance = calculate_distance(origin.coordinate, city.coordinate)
        if distance > 0 and min_distance_km <= distance <= max_distance_km:
            candidates.append(CandidateCity(city=city, distance_from_origin=distance))

    candidates.sort(key=lambda c: c.distance_from_origin)
    return candidates

def distance_buckets(max_distance: float, count: int) -> List[Tuple[float, float]]:
    """
    Dela [0, max_distance] i count lika breda intervall

    Gränserna är inklusiva i båda ändar. Sista intervallet slutar exakt på
    max_distance så att den längsta kandidaten alltid får plats.
    """
    buckets = []
    for i in range(count):
        lower = max_distance * i / count
        upper = max_distance if i == count - 1 else max_distance * (i + 1) / count
        buckets.append((lower, upper))
    return buckets

def select_by_distance_buckets(distances: Sequence[float], count: int) -> List[int]:
    """
    Välj närmaste lediga kandidat i varje avståndsintervall

    Ett värde på en gräns tas av det intervall som behandlas först. Vid lika
    avstånd vinner den som kommer först i listan. Tomma intervall hoppas över.

    Returns:
        Index i distances, i den ordning de valdes
    """
    if not distances or count <= 0:
        return []

    selected: List[int] = []
    for lower, upper in distance_buckets(max(distances), count):
        in_bucket = [
            i for i, distance in enumerate(distances)
            if i not in selected and lower <= distance <= upper
        ]
        if in_bucket:
            selected.append(min(in_bucket, key=lambda i: distances[i]))

    return selected

def select_by_bearing_diversity(
    bearings: Sequence[float],
    selected: Sequence[int],
    count: int
) -> List[int]:
    """
    Fyll på urvalet med de kandidater vars riktning skiljer sig mest

    Varje runda väljs den lediga kandidat vars minsta vinkelskillnad mot de
    redan valda är störst. Vid lika vinner den som kommer först i listan.
    Utan tidigare val räknas alla kandidater som 180 grader bort.

    Args:
        bearings: Bäring från startpunkten per kandidat
        selected: Index som redan är valda
        count: Önskat antal totalt

    Returns:
        selected följt av de nya indexen
    """
    selected = list(selected)

    def spread(index: int) -> float:
        if not selected:
            return 180.0
        return min(bearing_difference(bearings[index], bearings[j]) for j in selected)

    while len(selected) < count:
        remaining = [i for i in range(len(bearings)) if i not in selected]
        if not remaining:
            break
        selected.append(max(remaining, key=spread))

    return selected

def select_diverse_routes(
    origin: Coordinate,
    candidates: Sequence[CandidateCity],
    count: int
) -> List[CandidateCity]:
    """
    Välj upp till count destinationer med olika avstånd och riktningar

    Först väljs en kandidat per avståndsintervall, sedan fylls resten på
    efter riktning.

    Args:
        origin: Startpunkt som bäringar räknas från
        candidates: Kandidater med förberäknat avstånd
        count: Högsta antal destinationer

    Returns:
        Valda kandidater i den ordning de valdes
    """
    if count < 0:
        raise InvalidArgumentError(f"count får inte vara negativ, fick {count}")

    candidates = list(candidates)
    if count == 0 or not candidates:
        return []
    if len(candidates) <= count:
        return candidates

    distances = [c.distance_from_origin for c in candidates]
    selected = select_by_distance_buckets(distances, count)
    logger.debug("Avståndsintervallen gav %d av %d destinationer", len(selected), count)

    if len(selected) < count:
        bearings = [calculate_bearing(origin, c.coordinate) for c in candidates]
        selected = select_by_bearing_diversity(bearings, selected, count)

    return [candidates[i] for i in selected]
