import pytest

from prediction.config import Config, RecognitionConfig, load_config
from prediction.dictionary import load_word_list
from prediction.errors import InvalidParameter, NotInitialized


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / "nope.yaml")
    assert config == Config()
    assert config.recognition.k == 7
    assert config.recognition.window_fraction == 0.1
    assert config.recognition.pruning == "combined"
    assert config.keyboard.y_scale == 0.4


def test_yaml_overrides_and_unknown_keys(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "keyboard:\n"
        "  layout: colemak\n"
        "recognition:\n"
        "  k: 3\n"
        "  pruning: endpoint\n"
        "  path_cache: precomputed\n"
        "  cache_density: 0.02\n"
        "  colour: blue\n"
        "camera:\n"
        "  fps: 30\n"
    )
    config = load_config(path)
    assert config.keyboard.layout == "colemak"
    assert config.keyboard.y_scale == 0.4
    assert config.recognition.k == 3
    assert config.recognition.pruning == "endpoint"
    assert config.recognition.path_cache == "precomputed"
    assert config.recognition.cache_density == 0.02
    assert config.dictionary.path == "word_list.txt"


def test_empty_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path) == Config()


def test_invalid_values_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("recognition:\n  k: 0\n")
    with pytest.raises(InvalidParameter):
        load_config(path)


@pytest.mark.parametrize("kwargs", [
    {"k": -1},
    {"window_fraction": -0.5},
    {"pruning": "everything"},
    {"path_cache": "disk"},
    {"workers": 0},
])
def test_recognition_config_validate(kwargs):
    with pytest.raises(InvalidParameter):
        RecognitionConfig(**kwargs).validate()


def test_load_word_list(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Hello\n  world \n\n# comment\nhello\nthe\n")
    assert load_word_list(path) == frozenset({"hello", "world", "the"})


def test_load_word_list_missing(tmp_path):
    with pytest.raises(NotInitialized):
        load_word_list(tmp_path / "missing.txt")


def test_section_must_be_a_mapping(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("recognition: 5\n")
    with pytest.raises(InvalidParameter):
        load_config(path)


def test_null_section_keeps_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("keyboard:\nrecognition:\n  workers: 2\n")
    config = load_config(path)
    assert config.keyboard.layout == "qwerty"
    assert config.recognition.workers == 2
