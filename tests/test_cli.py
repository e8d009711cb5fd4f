"""Tests for the ``python -m wellsite`` command line."""

from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from wellsite.__main__ import NO_PLACEMENT_MESSAGE, main, map_size


class TestMapSize:
    """Tests for WIDTHxHEIGHT parsing."""

    def test_valid(self) -> None:
        assert map_size("10x5") == (10, 5)
        assert map_size("3X2") == (3, 2)

    @pytest.mark.parametrize("value", ["10", "axb", "0x5", "5x0", "1x2x3", "-3x4"])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            map_size(value)


class TestMain:
    """Tests for the CLI entry point."""

    def test_prints_map(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["6x4", "2", "0", "--seed", "3"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 4
        assert all(len(line) == 6 for line in lines)
        text = "".join(lines)
        assert text.count("O") == 1
        assert "H" in text

    def test_distances_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["3x3", "1", "0", "--seed", "1", "--distances"]) == 0
        out = capsys.readouterr().out
        assert "(00)" in out

    def test_no_placement(self, capsys: pytest.CaptureFixture[str]) -> None:
        # A single house fills the whole map, leaving nowhere for a well
        assert main(["1x1", "1", "0"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [NO_PLACEMENT_MESSAGE, "H"]

    def test_config_file(
        self,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        cfg = tmp_path / "cfg.yaml"
        cfg.write_text("seed: 5\nshow_costs: true\n")
        assert main(["4x3", "2", "1", "-c", str(cfg)]) == 0
        out = capsys.readouterr().out
        # map, blank line, cost table
        assert len(out.strip().splitlines()) == 3 + 1 + 3

    def test_missing_config_file(self, tmp_path: Path) -> None:
        assert main(["4x3", "1", "0", "-c", str(tmp_path / "nope.yaml")]) == 1

    @pytest.mark.parametrize(
        "body",
        ["- 1\n- 2\n", "seed: -1\n", "seed: abc\n", "width: [1]\n", "seed: [\n"],
    )
    def test_bad_config_file(
        self,
        body: str,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        cfg = tmp_path / "bad.yaml"
        cfg.write_text(body)
        assert main(["4x3", "1", "0", "-c", str(cfg)]) == 1
        assert "Could not read config" in capsys.readouterr().err

    @pytest.mark.parametrize(
        "argv",
        [
            [],
            ["4x4"],
            ["4x4", "1"],
            ["4x4", "1", "2", "3"],
            ["4by4", "1", "1"],
            ["4x4", "0", "1"],
            ["4x4", "1", "-1"],
        ],
    )
    def test_bad_arguments_show_usage(
        self,
        argv: list[str],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(argv)
        assert excinfo.value.code == 2
        assert "usage: wellsite" in capsys.readouterr().err
