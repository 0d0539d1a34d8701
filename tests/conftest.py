"""テスト共通フィクスチャ。"""

import shutil
from pathlib import Path

import pytest

from ransomcheck.config import ValidatorConfig
from ransomcheck.reporting.console import ConsoleReporter
from ransomcheck.validators.requirements import RequirementsValidator

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def passing_dir() -> Path:
    """全要件を満たすフィクスチャプロジェクト。"""
    return FIXTURES_DIR / "passing"


@pytest.fixture
def passing_stylesheet(passing_dir: Path) -> str:
    return (passing_dir / "css" / "styles.css").read_text(encoding="utf-8")


@pytest.fixture
def passing_markup(passing_dir: Path) -> str:
    return (passing_dir / "index.html").read_text(encoding="utf-8")


@pytest.fixture
def project_dir(tmp_path: Path, passing_dir: Path) -> Path:
    """書き換え可能なフィクスチャプロジェクトのコピー。"""
    target = tmp_path / "ransom-note"
    shutil.copytree(passing_dir, target)
    return target


@pytest.fixture
def validator_config(project_dir: Path) -> ValidatorConfig:
    """テスト用ValidatorConfig。"""
    return ValidatorConfig(project_root=project_dir)


@pytest.fixture
def reporter() -> ConsoleReporter:
    return ConsoleReporter()


@pytest.fixture
def validator() -> RequirementsValidator:
    """出力なしのRequirementsValidator。"""
    return RequirementsValidator()
