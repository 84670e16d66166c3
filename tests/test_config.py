import json

from namegrid.config import LayoutSettings, configure_dependencies, load_layout_settings


def test_load_layout_settings_missing_file_gives_defaults(tmp_path):
    settings = load_layout_settings(str(tmp_path / "layout.json"))
    assert settings == LayoutSettings()
    assert settings.column_bound == 300
    assert settings.gap_half_window == 150
    assert settings.placeholder_text == "Empty"


def test_load_layout_settings_reads_values(tmp_path):
    path = tmp_path / "layout.json"
    path.write_text(json.dumps({
        "column_bound": "250",
        "gap_half_window": 90,
        "tesseract_lang": "hun+eng",
        "unknown_key": True,
    }), encoding="utf-8")
    settings = load_layout_settings(str(path))
    assert settings.column_bound == 250
    assert settings.gap_half_window == 90
    assert settings.tesseract_lang == "hun+eng"
    assert settings.conf_threshold == 30


def test_load_layout_settings_ignores_invalid_values(tmp_path, capsys):
    path = tmp_path / "layout.json"
    path.write_text(json.dumps({"conf_threshold": "high"}), encoding="utf-8")
    settings = load_layout_settings(str(path))
    assert settings.conf_threshold == 30
    assert "Warning" in capsys.readouterr().out


def test_load_layout_settings_bad_json(tmp_path, capsys):
    path = tmp_path / "layout.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_layout_settings(str(path)) == LayoutSettings()
    assert "Warning" in capsys.readouterr().out


def test_with_overrides_skips_none():
    settings = LayoutSettings().with_overrides(column_bound=None, gap_half_window=99)
    assert settings.column_bound == 300
    assert settings.gap_half_window == 99


def test_configure_dependencies_missing_file(tmp_path, capsys):
    assert configure_dependencies(str(tmp_path / "dependencies.json")) is None
    assert "Warning" in capsys.readouterr().out


def test_configure_dependencies_empty_path(tmp_path):
    path = tmp_path / "dependencies.json"
    path.write_text(json.dumps({"tesseract_path": ""}), encoding="utf-8")
    assert configure_dependencies(str(path)) is None
