import pytest

from algokit.expedition import main, min_refuels

SAMPLE_STATIONS = [(4, 4), (5, 2), (11, 5), (15, 10)]


def test_sample_case():
    assert min_refuels(SAMPLE_STATIONS, 25, 10) == 2


def test_station_order_does_not_matter():
    assert min_refuels(list(reversed(SAMPLE_STATIONS)), 25, 10) == min_refuels(
        SAMPLE_STATIONS, 25, 10
    )


def test_enough_fuel_needs_no_stop():
    assert min_refuels(SAMPLE_STATIONS, 25, 25) == 0
    assert min_refuels([], 25, 25) == 0


def test_unreachable_without_stations():
    assert min_refuels([], 25, 10) is None


def test_unreachable_when_gap_too_large():
    assert min_refuels([(1, 100)], 25, 10) is None


def test_more_fuel_never_needs_more_stops():
    stops = [min_refuels(SAMPLE_STATIONS, 25, fuel) for fuel in range(10, 26)]
    assert all(s is not None for s in stops)
    assert stops == sorted(stops, reverse=True)


def test_stops_never_exceed_station_count():
    result = min_refuels(SAMPLE_STATIONS, 25, 10)
    assert result is not None and result <= len(SAMPLE_STATIONS)


def test_negative_arguments_rejected():
    with pytest.raises(ValueError):
        min_refuels(SAMPLE_STATIONS, -1, 10)
    with pytest.raises(ValueError):
        min_refuels(SAMPLE_STATIONS, 25, -3)


def test_main_reads_input_file(tmp_path, capsys):
    source = tmp_path / "cases.txt"
    source.write_text("2\n4\n4 4\n5 2\n11 5\n15 10\n25 10\n0\n25 10\n")
    assert main([str(source)]) == 0
    assert capsys.readouterr().out.split() == ["2", "-1"]