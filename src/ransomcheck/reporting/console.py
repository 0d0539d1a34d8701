"""コンソールへの進捗・結果出力（Rich）。

各チェックの見出しと詳細行は、チェック実行直後に逐次出力する。
"""

from rich.console import Console

from ransomcheck.models.errors import RansomCheckError
from ransomcheck.models.validation import CheckResult, ValidationReport

SEPARATOR = "=" * 50


def _plain_console(stderr: bool = False) -> Console:
    # 出力をそのままの文字列で流すため、装飾・自動改行を無効化する
    return Console(stderr=stderr, markup=False, highlight=False, emoji=False, soft_wrap=True)


class ConsoleReporter:
    """バリデーションの進行状況と結果を標準出力へ書き出す。"""

    def __init__(self, console: Console | None = None, error_console: Console | None = None) -> None:
        self._console = console or _plain_console()
        self._error_console = error_console or _plain_console(stderr=True)
        self._sections = 0

    def banner(self) -> None:
        """実行開始のバナーを出力する。見出しの区切りはここでリセットする。"""
        self._sections = 0
        self._console.print("🔍 Validating CSS Ransom Note Requirements...\n")

    def reading(self, label: str) -> None:
        self._console.print(f"Reading {label} file...")

    def read_ok(self, label: str) -> None:
        self._console.print(f"{label} file read successfully")

    def heading(self, title: str) -> None:
        """チェックの見出しを出力する。2件目以降は空行を挟む。"""
        prefix = "\n" if self._sections else ""
        self._sections += 1
        self._console.print(f"{prefix}📋 {title}")

    def details(self, result: CheckResult) -> None:
        for line in result.details:
            self._console.print(line)

    def summary(self, report: ValidationReport) -> None:
        """最終結果をセパレータで囲んで出力する。"""
        self._console.print("\n" + SEPARATOR)
        if report.overall_passed:
            self._console.print("🎉 ALL REQUIREMENTS PASSED! 🎉")
            self._console.print("Your CSS Ransom Note meets all the project requirements.")
        else:
            self._console.print("❌ SOME REQUIREMENTS FAILED")
            self._console.print("Please fix the issues above and run the validation again.")
        self._console.print(SEPARATOR)

    def error(self, exc: RansomCheckError) -> None:
        self._error_console.print(f"Error during validation: {exc}")
