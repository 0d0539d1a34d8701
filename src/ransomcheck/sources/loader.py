"""入力ファイル（スタイルシート・マークアップ）の読み込み。"""

import logging
from pathlib import Path

from ransomcheck.config import ValidatorConfig
from ransomcheck.models.errors import InputUnavailableError
from ransomcheck.models.validation import SourceDocuments
from ransomcheck.reporting.console import ConsoleReporter

logger = logging.getLogger(__name__)


class SourceLoader:
    """設定されたパスから2つの入力ファイルを読み込む。

    どちらかが読めなければ、チェックを一切実行せずに中断させる。
    """

    def __init__(self, config: ValidatorConfig, reporter: ConsoleReporter) -> None:
        self._config = config
        self._reporter = reporter

    def _read(self, label: str, path: Path) -> str:
        """ファイル全体をUTF-8で読み込む。

        Raises:
            InputUnavailableError: ファイルが存在しない、または読み込めない場合。
        """
        self._reporter.reading(label)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InputUnavailableError(path, str(e)) from e
        logger.debug("Loaded %s (%d chars) from %s", label, len(text), path)
        self._reporter.read_ok(label)
        return text

    def load(self) -> SourceDocuments:
        stylesheet = self._read("CSS", self._config.stylesheet_path)
        markup = self._read("HTML", self._config.markup_path)
        return SourceDocuments(stylesheet=stylesheet, markup=markup)
