"""ransomcheckの設定管理。"""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

_PACKAGE_ROOT = Path(__file__).parent
_REPO_ROOT = _PACKAGE_ROOT.parent.parent


class ValidatorConfig(BaseSettings):
    """バリデータ設定。環境変数から読み込み可能。"""

    model_config = {"env_prefix": "RANSOMCHECK_"}

    project_root: Path = _REPO_ROOT
    stylesheet: Path = Path("css") / "styles.css"
    markup: Path = Path("index.html")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    def _resolve(self, path: Path) -> Path:
        # 絶対パスはそのまま、相対パスはproject_root基準
        if path.is_absolute():
            return path
        return self.project_root / path

    @property
    def stylesheet_path(self) -> Path:
        return self._resolve(self.stylesheet)

    @property
    def markup_path(self) -> Path:
        return self._resolve(self.markup)
