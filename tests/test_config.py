from pathlib import Path

import pytest
from pydantic import ValidationError

from seating_chart.config import Settings, load_settings


def test_defaults():
    settings = load_settings()
    assert settings == Settings()
    assert settings.admin_password == "admin123"
    assert settings.report_filename == "session_report.csv"
    assert settings.alert_threshold_minutes == 90.0


def test_load_yaml_resolves_relative_paths(tmp_path):
    config = tmp_path / "seating.yaml"
    config.write_text(
        "admin_password: s3cret\n"
        "layout_path: data/layout.json\n"
        "alert_threshold_minutes: 45\n"
    )
    settings = load_settings(config)
    assert settings.admin_password == "s3cret"
    assert settings.layout_path == (tmp_path / "data" / "layout.json").resolve()
    assert settings.alert_threshold_minutes == 45
    assert settings.report_dir == Path(".")


def test_empty_yaml_gives_defaults(tmp_path):
    config = tmp_path / "empty.yaml"
    config.write_text("")
    assert load_settings(config) == Settings()


def test_threshold_must_be_positive(tmp_path):
    config = tmp_path / "bad.yaml"
    config.write_text("alert_threshold_minutes: 0\n")
    with pytest.raises(ValidationError):
        load_settings(config)
