import pytest

from models import ActivityRecord, City, Coordinate, InvalidArgumentError
from progress import calculate_progress, calculate_stats, filter_run_activities, track_position
from routing import create_route


@pytest.fixture
def equator_route():
    return create_route(City("Start", Coordinate(0, 0)), City("Mal", Coordinate(0, 10)))


@pytest.fixture
def long_route():
    return create_route(
        City("Stockholm", Coordinate(59.3293, 18.0686)),
        City("Rom", Coordinate(41.9028, 12.4964)),
    )


def test_position_at_start(long_route):
    result = track_position(long_route, 0)
    assert result.position == long_route.polyline[0]
    assert result.progress_percentage == 0
    assert result.distance_remaining_km == long_route.total_distance


def test_position_at_end(long_route):
    result = track_position(long_route, long_route.total_distance)
    assert result.position == long_route.end_city.coordinate
    assert result.progress_percentage == 100
    assert result.distance_remaining_km == 0


def test_position_beyond_end_is_clamped(long_route):
    result = track_position(long_route, long_route.total_distance * 3)
    assert result.position == long_route.end_city.coordinate
    assert result.progress_percentage == 100
    assert result.distance_remaining_km == 0


def test_position_halfway_on_equator(equator_route):
    result = track_position(equator_route, equator_route.total_distance / 2)
    assert result.position.lat == pytest.approx(0, abs=1e-9)
    assert result.position.lon == pytest.approx(5, abs=1e-6)
    assert result.progress_percentage == pytest.approx(50)
    assert result.distance_remaining_km == pytest.approx(equator_route.total_distance / 2)


def test_position_halfway_stays_inside_interpolation_band(long_route):
    result = track_position(long_route, long_route.total_distance / 2)
    start, end = long_route.polyline[0], long_route.polyline[-1]
    assert min(start.lat, end.lat) <= result.position.lat <= max(start.lat, end.lat)
    assert min(start.lon, end.lon) <= result.position.lon <= max(start.lon, end.lon)
    assert result.progress_percentage == pytest.approx(50)


def test_zero_length_route_is_complete():
    point = City("Har", Coordinate(45, 45))
    route = create_route(point, point)
    result = track_position(route, 0)
    assert result.progress_percentage == 100
    assert result.distance_remaining_km == 0
    assert result.position == point.coordinate


@pytest.mark.parametrize("distance", [-1, float("nan"), float("inf")])
def test_invalid_distance_is_rejected(equator_route, distance):
    with pytest.raises(InvalidArgumentError):
        track_position(equator_route, distance)


def test_stats_from_two_activities():
    stats = calculate_stats([
        ActivityRecord(distance_meters=5000, moving_time_seconds=1500, elevation_gain_meters=50),
        ActivityRecord(distance_meters=3000, moving_time_seconds=900, elevation_gain_meters=20),
    ])
    assert stats.total_distance_km == pytest.approx(8)
    assert stats.total_time_seconds == 2400
    assert stats.average_pace_min_per_km == pytest.approx(5.0)
    assert stats.total_elevation_gain_meters == 70


def test_stats_without_activities():
    stats = calculate_stats([])
    assert stats.total_distance_km == 0
    assert stats.total_time_seconds == 0
    assert stats.average_pace_min_per_km == 0
    assert stats.total_elevation_gain_meters == 0


def test_progress_combines_stats_and_position(equator_route):
    activities = [ActivityRecord(100000, 36000, 300, "Run")]

    progress = calculate_progress(equator_route, activities)

    assert progress.stats.total_distance_km == pytest.approx(100)
    assert progress.distance_traveled_km == pytest.approx(100)
    assert progress.current_position == track_position(equator_route, 100).position
    assert progress.progress_percentage == pytest.approx(100 * 100 / equator_route.total_distance)
    assert calculate_progress(equator_route, activities) == progress


def test_progress_past_destination_clamps_traveled_distance(equator_route):
    progress = calculate_progress(equator_route, [ActivityRecord(5_000_000, 1_500_000, 0, "Run")])

    assert progress.distance_traveled_km == equator_route.total_distance
    assert progress.stats.total_distance_km == pytest.approx(5000)
    assert progress.progress_percentage == 100
    assert progress.current_position == equator_route.end_city.coordinate


def test_filter_run_activities_drops_other_and_untyped():
    run = ActivityRecord(5000, 1500, 10, "Run")
    activities = [run, ActivityRecord(20000, 3600, 100, "Ride"), ActivityRecord(3000, 900, 0)]
    assert filter_run_activities(activities) == [run]


def test_activity_from_strava():
    activity = ActivityRecord.from_strava({
        "id": 42,
        "distance": 10012.3,
        "moving_time": 2950,
        "average_speed": 3.39,
        "total_elevation_gain": 37.0,
        "start_date": "2026-10-18T07:30:00Z",
        "type": "Run",
    })
    assert activity == ActivityRecord(10012.3, 2950.0, 37.0, "Run")
