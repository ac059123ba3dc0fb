import pytest

from mazegen.config import GenerationSettings
from mazegen.exceptions import ConfigurationError


def test_defaults():
    settings = GenerationSettings()
    assert settings.algorithm == "recursive_backtracker"
    assert settings.topology == "rect"
    assert settings.validate() == settings


def test_from_env(monkeypatch):
    monkeypatch.setenv("MAZEGEN_ALGO", "Wilson")
    monkeypatch.setenv("MAZEGEN_TOPOLOGY", "hexa")
    monkeypatch.setenv("MAZEGEN_WIDTH", "12")
    monkeypatch.setenv("MAZEGEN_HEIGHT", "9")
    monkeypatch.setenv("MAZEGEN_SEED", "0x2a")
    monkeypatch.setenv("MAZEGEN_BIAS", "SOUTHWEST")
    settings = GenerationSettings.from_env()
    assert settings.algorithm == "wilson"
    assert settings.topology == "hexa"
    assert (settings.width, settings.height) == (12, 9)
    assert settings.seed == 42
    assert settings.bias == "southwest"


def test_from_env_ignores_empty_and_rejects_garbage():
    assert GenerationSettings.from_env({"MAZEGEN_WIDTH": ""}).width == 20
    with pytest.raises(ConfigurationError):
        GenerationSettings.from_env({"MAZEGEN_WIDTH": "wide"})
    with pytest.raises(ConfigurationError):
        GenerationSettings.from_env({"MAZEGEN_TOPOLOGY": "cube"})


def test_from_yaml(tmp_path):
    path = tmp_path / "maze.yaml"
    path.write_text(
        "maze:\n"
        "  algorithm: eller\n"
        "  topology: ring\n"
        "  rings: 6\n"
        "  seed: 7\n"
        "  join_probability: 0.25\n",
        encoding="utf-8",
    )
    settings = GenerationSettings.from_yaml(path)
    assert settings.algorithm == "eller"
    assert settings.rings == 6
    assert settings.join_probability == 0.25
    assert settings.carry_probability == pytest.approx(1 / 3)


@pytest.mark.parametrize(
    "text",
    [
        "width: -3\n",
        "unknown_key: 1\n",
        "growing_strategy: middle\n",
        "- just\n- a list\n",
        "width: [unclosed\n",
    ],
)
def test_invalid_yaml_settings(tmp_path, text):
    path = tmp_path / "bad.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        GenerationSettings.from_yaml(path)


def test_missing_yaml_file(tmp_path):
    with pytest.raises(ConfigurationError):
        GenerationSettings.from_yaml(tmp_path / "nope.yaml")


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert GenerationSettings.from_yaml(path) == GenerationSettings()
