from __future__ import annotations

from pathlib import Path


def test_pyproject_declares_console_script_and_yaml_dependency() -> None:
    pyproject = (Path(__file__).resolve().parents[1] / "pyproject.toml").read_text(encoding="utf-8")
    assert 'sandboxer = "sandboxer.cli:main"' in pyproject
    assert "PyYAML" in pyproject
    assert "[project.optional-dependencies]" in pyproject
    assert "pytest" in pyproject
