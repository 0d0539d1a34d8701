"""ransomcheckのカスタム例外クラス。"""

from pathlib import Path


class RansomCheckError(Exception):
    """ransomcheckの基底例外クラス。"""


class InputUnavailableError(RansomCheckError):
    """入力ファイルが存在しない、または読み込めない場合の例外。"""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason
