import pytest

from config import ConfigurationManager, get_config
from scramble.ocr_engine import RowGrouper
from scramble.utils.exceptions import ConfigurationError


def test_defaults_are_loaded():
    assert get_config("interpreter.row_tolerance") == 20
    assert get_config("interpreter.canonical_hole_counts") == [9, 13, 16, 18]
    assert get_config("scoring.stableford")[-1] == 3
    assert get_config("interpreter.missing.key", "fallback") == "fallback"


def test_custom_file_is_layered_over_defaults(tmp_path):
    custom = tmp_path / "event.yaml"
    custom.write_text("interpreter:\n  row_tolerance: 35\nscoring:\n  par: 3\n", encoding="utf-8")

    config = ConfigurationManager(str(custom))

    assert config.get("interpreter.row_tolerance") == 35
    assert config.get("interpreter.default_hole_count") == 18
    assert config.get("scoring.par") == 3
    assert config.get("scoring.handicap_allowance") == 0.1


def test_missing_custom_file(tmp_path):
    with pytest.raises(ConfigurationError):
        ConfigurationManager(str(tmp_path / "nope.yaml"))


def test_non_mapping_file(tmp_path):
    custom = tmp_path / "list.yaml"
    custom.write_text("- one\n- two\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        ConfigurationManager(str(custom))


def test_override_reaches_components():
    ConfigurationManager().set("interpreter.row_tolerance", 5)

    assert RowGrouper().tolerance == 5


def test_relative_paths_are_resolved():
    assert get_config("paths.output_dir").endswith("outputs")
    assert get_config("paths.output_dir") != "outputs"
