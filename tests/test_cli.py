from __future__ import annotations

import pytest

from tsp_tours.cli import cheapest_tour, format_tour, heuristic_tour, main
from tsp_tours.solvers import Tour


FOUR_CITIES = """0 10 15 20
10 0 35 25
15 35 0 30
20 25 30 0
"""


@pytest.fixture
def cities_file(tmp_path):
    path = tmp_path / "four.txt"
    path.write_text(FOUR_CITIES)
    return path


def test_format_tour():
    assert format_tour("optimal", Tour(cities=[0, 2, 1, 0], cost=9)) == "optimal tour: 0 2 1 0 \ntour cost:    9"


def test_cheapest_tour_output(cities_file, capsys):
    assert cheapest_tour(["4", str(cities_file)]) == 0
    out = capsys.readouterr().out
    assert out == "optimal tour: 0 1 3 2 0 \ntour cost:    80\n"


def test_heuristic_tour_output(cities_file, capsys):
    assert heuristic_tour(["4", str(cities_file)]) == 0
    out = capsys.readouterr().out
    assert out == "heuristic tour: 0 1 2 3 0 \ntour cost:    95\n"


@pytest.mark.parametrize("argv", [[], ["4"], ["4", "a.txt", "extra"], ["0", "a.txt"], ["four", "a.txt"]])
def test_usage_errors_exit_with_one(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cheapest_tour(argv)
    assert excinfo.value.code == 1
    assert "usage:" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert heuristic_tour(["4", str(tmp_path / "missing.txt")]) == 1
    assert "Error loading input file" in capsys.readouterr().out


def test_unparseable_file(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("0 1 one 0\n")
    assert cheapest_tour(["2", str(path)]) == 1
    assert "Error loading input file" in capsys.readouterr().out


def test_out_of_range_value(tmp_path, capsys):
    path = tmp_path / "huge.txt"
    path.write_text("0 99999999999999999999 99999999999999999999 0\n")
    assert cheapest_tour(["2", str(path)]) == 1
    assert "Error loading input file" in capsys.readouterr().out


def test_max_cities(cities_file, capsys):
    assert cheapest_tour(["4", str(cities_file), "--max-cities", "3"]) == 1
    assert "exceeds" in capsys.readouterr().out


def test_verbose_logs_to_stderr(cities_file, capsys):
    assert main(["optimal", "4", str(cities_file), "-v"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "optimal tour: 0 1 3 2 0 \ntour cost:    80\n"
    assert "enumerating 3 tours" in captured.err
    assert captured.err.startswith("[")


def test_subcommands(cities_file, capsys):
    assert main(["heuristic", "4", str(cities_file)]) == 0
    assert capsys.readouterr().out.startswith("heuristic tour: ")
    assert main(["compare", "4", str(cities_file)]) == 0
    out = capsys.readouterr().out
    assert "optimal tour: 0 1 3 2 0 \n" in out
    assert "heuristic tour: 0 1 2 3 0 \n" in out
    assert "gap:          18.75%" in out


def test_compare_random_instance(capsys):
    assert main(["compare", "6", "--seed", "5"]) == 0
    out = capsys.readouterr().out
    assert out.count("tour cost:") == 2


def test_missing_subcommand():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 1
