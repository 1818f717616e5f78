"""Tests for the command line entry point."""

import pytest

from src.airline_router import cli


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep handlers off the root logger between tests."""
    monkeypatch.setattr(cli, "setup_logging", lambda level: None)


class TestParser:
    def test_stops_parsed_as_int(self) -> None:
        args = cli.build_parser().parse_args(["stops", "ATL", "MIA", "1"])
        assert args.stops == 1

    def test_unknown_mst_algorithm_rejected(self) -> None:
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["mst", "--algorithm", "boruvka"])

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])


class TestMain:
    """End-to-end runs against a CSV export."""

    def test_route(self, sample_csv: str, capsys: pytest.CaptureFixture) -> None:
        assert cli.main(["--csv", sample_csv, "route", "ATL", "LGA"]) == 0

        assert capsys.readouterr().out.strip() == (
            "Shortest route from ATL to LGA: ATL -> ORD -> LGA. "
            "The length is 1339. The cost is 305."
        )

    def test_state(self, sample_csv: str, capsys: pytest.CaptureFixture) -> None:
        assert cli.main(["--csv", sample_csv, "state", "ATL", "FL"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "The shortest paths from ATL to FL state airports are:"
        assert lines[3:] == ["ATL -> MIA\t595\t130", "ATL -> MCO\t404\t98"]

    def test_stops(self, sample_csv: str, capsys: pytest.CaptureFixture) -> None:
        assert cli.main(["--csv", sample_csv, "stops", "ATL", "MIA", "2"]) == 0

        assert capsys.readouterr().out.strip() == (
            "Shortest route from ATL to MIA with 2 stops: None"
        )

    def test_connections(self, sample_csv: str, capsys: pytest.CaptureFixture) -> None:
        assert cli.main(["--csv", sample_csv, "connections"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[:2] == ["Airport\tConnections", "ATL\t7"]

    def test_mst(self, sample_csv: str, capsys: pytest.CaptureFixture) -> None:
        assert cli.main(["--csv", sample_csv, "mst", "--algorithm", "kruskal"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Minimal Spanning Tree"
        assert "MCO - MIA\t65" in lines
        assert lines[-1] == "Total Cost of MST: 540"

    def test_unknown_airport_exits_nonzero(
        self, sample_csv: str, capsys: pytest.CaptureFixture
    ) -> None:
        assert cli.main(["--csv", sample_csv, "route", "ATL", "XYZ"]) == 1

        assert "Error: Airport 'XYZ' not found" in capsys.readouterr().err

    def test_missing_csv_exits_nonzero(self, tmp_path, capsys: pytest.CaptureFixture) -> None:
        assert cli.main(["--csv", str(tmp_path / "absent.csv"), "connections"]) == 1

        assert "Failed to initialize airline graph" in capsys.readouterr().err
