"""ValidatorConfigのユニットテスト。"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from ransomcheck.config import ValidatorConfig


class TestValidatorConfig:
    def test_default_paths_are_relative_to_project_root(self) -> None:
        config = ValidatorConfig(project_root=Path("/work/ransom"))
        assert config.stylesheet_path == Path("/work/ransom/css/styles.css")
        assert config.markup_path == Path("/work/ransom/index.html")

    def test_default_relative_paths(self) -> None:
        config = ValidatorConfig()
        assert config.stylesheet == Path("css/styles.css")
        assert config.markup == Path("index.html")
        assert config.stylesheet_path == config.project_root / "css" / "styles.css"

    def test_absolute_paths_are_kept(self, tmp_path: Path) -> None:
        css = tmp_path / "other.css"
        config = ValidatorConfig(project_root=Path("/work/ransom"), stylesheet=css)
        assert config.stylesheet_path == css

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("RANSOMCHECK_PROJECT_ROOT", str(tmp_path))
        monkeypatch.setenv("RANSOMCHECK_MARKUP", "page.html")
        config = ValidatorConfig()
        assert config.markup_path == tmp_path / "page.html"

    def test_log_level_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RANSOMCHECK_LOG_LEVEL", "DEBUG")
        assert ValidatorConfig().log_level == "DEBUG"

    def test_invalid_log_level_is_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RANSOMCHECK_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            ValidatorConfig()
