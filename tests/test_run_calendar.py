from __future__ import annotations

import pytest

from unwind import run_calendar
from unwind.config.constants import CONFIG_ENV_VAR


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


def test_prints_requested_month(capsys: pytest.CaptureFixture[str]) -> None:
    assert run_calendar.main(["--year", "2025", "--month", "9", "--active", "18,19"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].strip() == "September 2025"
    assert lines[1].split() == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert len(lines) == 8
    assert lines[2].startswith("(31)")
    assert " 18*" in lines[4] and " 19*" in lines[4]
    assert lines[-1].endswith("(11)")


def test_defaults_come_from_config(capsys: pytest.CaptureFixture[str]) -> None:
    run_calendar.main([])

    out = capsys.readouterr().out
    assert out.splitlines()[0].strip() == "September 2025"
    assert out.count("*") == 6


@pytest.mark.parametrize("argv", [["--month", "13"], ["--month", "0"], ["--active", "a,b"], ["--active", "32"]])
def test_invalid_arguments_exit(argv: list[str]) -> None:
    with pytest.raises(SystemExit):
        run_calendar.main(argv)
