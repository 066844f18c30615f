import os
import subprocess
import sys
from pathlib import Path

import pytest

import main

PROJECT_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def no_config(tmp_path, monkeypatch):
    for name in (
        "TOUCH_DRIVER_DEVICE_TYPE",
        "TOUCH_DRIVER_DEVICE_ID",
        "TOUCH_DRIVER_ADB_PATH",
        "TOUCH_DRIVER_QUERY_TIMEOUT",
        "TOUCH_DRIVER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return ["--config", str(tmp_path / "missing.yaml")]


def test_resolve_against_rect(no_config, capsys):
    code = main.main(["0.5", "0.5", "--rect", "0,0,100,200", "--check-bounds", *no_config])
    assert code == 0
    assert "50,100" in capsys.readouterr().out


def test_rect_with_offset(no_config, capsys):
    code = main.main(["1.0", "0.9", "--rect", "0,0,100,200", "--offset", "10,10", *no_config])
    assert code == 0
    assert "11,190" in capsys.readouterr().out


def test_negative_fraction(no_config, capsys):
    assert main.main(["-0.5", "-0.5", "--rect", "0,0,100,200", *no_config]) == 0
    assert "-50,-100" in capsys.readouterr().out


def test_out_of_bounds_exits_with_error(no_config, capsys):
    code = main.main(["150", "50", "--rect", "0,0,100,200", "--check-bounds", *no_config])
    assert code == 1
    assert "outside of element rect: [0,0][100,200]" in capsys.readouterr().out


def test_element_bounds(no_config, capsys):
    code = main.main(["0.5", "0.5", "--bounds", "[100,200][300,400]", *no_config])
    assert code == 0
    assert "200,300" in capsys.readouterr().out


def test_device_with_static_backend(no_config, capsys):
    code = main.main(["0.5", "0.5", "--device-type", "static", *no_config])
    assert code == 0
    assert "540,1200" in capsys.readouterr().out


def test_device_query_failure(no_config, capsys, monkeypatch):
    from touch_driver.display import adb as adb_display
    from touch_driver.exceptions import DisplayQueryError

    def failing_size(self):
        raise DisplayQueryError("adb wm size failed: no devices")

    monkeypatch.setattr(adb_display.ADBDisplay, "display_size", failing_size)

    code = main.main(["0.5", "0.5", "--device", "--device-type", "adb", *no_config])
    assert code == 1
    assert "Could not query display size" in capsys.readouterr().out


def test_bad_rect_argument(no_config):
    with pytest.raises(SystemExit) as exc_info:
        main.main(["0.5", "0.5", "--rect", "0,0,100", *no_config])
    assert exc_info.value.code == 2


@pytest.mark.parametrize(
    "line, key",
    [
        ("TOUCH_DRIVER_QUERY_TIMEOUT: never", "QUERY_TIMEOUT"),
        ("TOUCH_DRIVER_LOG_LEVEL: loud", "LOG_LEVEL"),
    ],
)
def test_bad_config_value(no_config, tmp_path, capsys, line, key):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(line + "\n")
    code = main.main(["0.5", "0.5", "--rect", "0,0,10,10", "--config", str(config_file)])
    assert code == 2
    assert key in capsys.readouterr().out


def test_bad_environment_value(no_config, monkeypatch, capsys):
    monkeypatch.setenv("TOUCH_DRIVER_QUERY_TIMEOUT", "abc")
    code = main.main(["0.5", "0.5", "--rect", "0,0,100,200", *no_config])
    assert code == 2
    assert "QUERY_TIMEOUT must be a number" in capsys.readouterr().out


def test_bad_environment_value_reported_without_traceback(tmp_path):
    env = {k: v for k, v in os.environ.items() if not k.startswith("TOUCH_DRIVER_")}
    env["TOUCH_DRIVER_QUERY_TIMEOUT"] = "abc"
    result = subprocess.run(
        [
            sys.executable,
            "main.py",
            "0.5",
            "0.5",
            "--rect",
            "0,0,100,200",
            "--config",
            str(tmp_path / "missing.yaml"),
        ],
        capture_output=True,
        text=True,
        timeout=60,
        cwd=PROJECT_ROOT,
        env=env,
    )
    assert result.returncode == 2
    assert "Traceback" not in result.stderr
    assert "QUERY_TIMEOUT" in result.stdout


@pytest.mark.parametrize(
    "extra",
    [
        ["--bounds", "[0,0][10,10]", "--offset", "1,1"],
        ["--bounds", "[0,0][10,10]", "--check-bounds"],
        ["--device", "--offset", "1,1"],
        ["--check-bounds"],
    ],
)
def test_rect_only_options_rejected_elsewhere(no_config, capsys, extra):
    with pytest.raises(SystemExit) as exc_info:
        main.main(["0.5", "0.5", *extra, *no_config])
    assert exc_info.value.code == 2
    assert "can only be used with --rect" in capsys.readouterr().err
