"""Tests for CLI entrypoints."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from step_tracker import cli


@pytest.fixture(autouse=True)
def _keep_log_sinks(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "configure_logging", lambda _level: None)


def test_parse_args_custom_values() -> None:
    ns = cli.parse_args(
        ["--log-level", "debug", "training", "3000,бег,30m", "--weight", "80.5"]
    )
    assert ns.command == "training"
    assert ns.record == "3000,бег,30m"
    assert ns.weight == 80.5
    assert ns.height == cli.DEFAULT_HEIGHT_M
    assert ns.log_level == "DEBUG"


def test_parse_args_rejects_unknown_log_level() -> None:
    with pytest.raises(SystemExit):
        cli.parse_args(["--log-level", "verbose", "day", "1000,45m"])


def test_parse_args_requires_command() -> None:
    with pytest.raises(SystemExit):
        cli.parse_args([])


def test_main_day_happy_path(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["day", "1000,45m", "--weight", "70", "--height", "1.8"])
    assert code == 0
    out = capsys.readouterr().out
    assert out.startswith("Количество шагов: 1000.\n")
    assert "Вы сожгли 28.35 ккал." in out


def test_main_day_bad_record_returns_one(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["day", "1000"])
    assert code == 1
    assert capsys.readouterr().out == ""


def test_main_training_happy_path(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["training", "3000,бег,30m", "--weight", "70", "--height", "1.8"])
    assert code == 0
    assert "Сожгли калорий: 170.10" in capsys.readouterr().out


def test_main_training_error_goes_to_stderr(
    capsys: pytest.CaptureFixture[str],
) -> None:
    code = cli.main(["training", "1000,хоккей,45m"])
    assert code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: неизвестный тип тренировки" in captured.err


def test_main_batch_writes_csv(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    records = tmp_path / "records.txt"
    records.write_text("3000,бег,30m\n1000,хоккей,45m\n", encoding="utf-8")
    out_path = tmp_path / "out" / "reports.csv"

    code = cli.main(
        [
            "batch",
            str(records),
            "--weight",
            "70",
            "--height",
            "1.8",
            "--out",
            str(out_path),
        ]
    )
    assert code == 0
    assert f"OK: Output: {out_path.resolve()}" in capsys.readouterr().out

    df = pd.read_csv(out_path)
    assert df.shape[0] == 2
    assert df.loc[0, "activity"] == "running"
    assert df.loc[0, "calories_kcal"] == pytest.approx(170.1)


def test_main_batch_missing_file_propagates(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        cli.main(["batch", str(tmp_path / "missing.txt")])
