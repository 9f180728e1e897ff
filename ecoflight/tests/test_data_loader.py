"""Tests for data loader module."""

import pytest
from ecoflight.data_loader import load_route_distances, load_route_table


@pytest.fixture
def routes_csv(tmp_path):
    """Write a small routes CSV."""
    path = tmp_path / "routes.csv"
    path.write_text(
        "departure,arrival,distance_km\n"
        " ams ,lhr,370\n"
        "LHR,AMS,370\n"
        "LHR,JFK,5570\n"
        "XXX,YYY,\n"
        "AAA,BBB,not-a-number\n",
        encoding="utf-8",
    )
    return path


def test_load_route_distances(routes_csv):
    """Test CSV rows are normalized and bad rows skipped."""
    distances = load_route_distances(str(routes_csv))
    assert distances == {"AMS-LHR": 370, "LHR-AMS": 370, "LHR-JFK": 5570}


def test_load_route_distances_missing_column(tmp_path):
    """Test a CSV without required columns is rejected."""
    path = tmp_path / "bad.csv"
    path.write_text("from,to,km\nAMS,LHR,370\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_route_distances(str(path))


def test_load_route_table_merges_csv(routes_csv):
    """Test CSV entries extend and override built-in routes."""
    table = load_route_table(str(routes_csv))
    assert table.lookup("AMS", "LHR") == 370
    assert table.lookup("LHR", "JFK") == 5570
    assert table.lookup("JFK", "LHR") == 5550
    assert table.lookup("LAX", "ORD") == 2800


def test_load_route_table_without_csv():
    """Test built-in routes are used when no CSV is configured."""
    table = load_route_table(None)
    assert table.lookup("LHR", "JFK") == 5550
    assert len(table.distances) == 10


def test_load_route_table_missing_file(tmp_path):
    """Test a missing CSV falls back to built-in routes."""
    table = load_route_table(str(tmp_path / "missing.csv"))
    assert table.lookup("SYD", "MEL") == 705


def test_load_route_distances_rounds_halves_up(tmp_path):
    """Test fractional distances round half up and infinite ones are skipped."""
    path = tmp_path / "routes.csv"
    path.write_text(
        "departure,arrival,distance_km\n"
        "AMS,LHR,370.5\n"
        "LHR,AMS,372.5\n"
        "CDG,NCE,686.4\n"
        "AAA,BBB,inf\n"
        "CCC,DDD,-inf\n",
        encoding="utf-8",
    )
    distances = load_route_distances(str(path))
    assert distances == {"AMS-LHR": 371, "LHR-AMS": 373, "CDG-NCE": 686}
