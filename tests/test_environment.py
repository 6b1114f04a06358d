"""Unit tests for .env loading and variable layering"""

from paystation.core.environment import build_environment, load_env_file


def test_load_env_file_preserves_existing_keys(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("A=from-file\nB=\"quoted\"\n\nnot a pair\n", encoding="utf-8")
    environ = {"A": "existing"}

    merged = load_env_file(str(env_file), environ=environ)

    assert merged == {"A": "existing", "B": "quoted"}
    assert environ["B"] == "quoted"


def test_load_env_file_missing_file(tmp_path):
    environ = {"A": "1"}
    assert load_env_file(str(tmp_path / "absent.env"), environ=environ) == {"A": "1"}


def test_build_environment_layers(tmp_path):
    """File fills gaps in base; overrides always win"""
    env_file = tmp_path / ".env"
    env_file.write_text("A=file\nB=file\nC=file\n", encoding="utf-8")

    environment = build_environment(
        env_file=str(env_file),
        base={"A": "base"},
        overrides={"C": "override"},
    )

    assert environment.get("A") == "base"
    assert environment.get("B") == "file"
    assert environment.get("C") == "override"
    assert environment.get("D", "default") == "default"


def test_build_environment_without_file():
    environment = build_environment(env_file=None, base={"X": "1"})
    assert dict(environment.variables) == {"X": "1"}
