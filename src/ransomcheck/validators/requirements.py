"""ランサムノート課題の要件チェックロジック。

スタイルシートは構文解析せず、正規表現による文字列走査で判定する。
"""

import logging
import re
from collections.abc import Callable

from ransomcheck.models.validation import CheckResult, ValidationReport
from ransomcheck.reporting.console import ConsoleReporter

logger = logging.getLogger(__name__)

MIN_STYLE_GROUPS = 10
MIN_FONT_FAMILIES = 6
MIN_COLOR_SYSTEMS = 2

_STYLE_GROUP_RE = re.compile(r"/\* Style Group \d+.*?\*/")
_FONT_WEIGHT_RE = re.compile(r"font-weight:\s*(bold|normal|400|700)")
_TEXT_DECORATION_RE = re.compile(r"text-decoration:\s*(underline|line-through|overline|none)")
_TEXT_TRANSFORM_RE = re.compile(r"text-transform:\s*(uppercase|capitalize|lowercase)")
_FONT_FAMILY_RE = re.compile(r"font-family:\s*[\"']([^\"']+)[\"']")
_RULE_BLOCK_RE = re.compile(r"([^}]+)\{[^}]*\}")

# rgb( / hsl( は直後に "(" を要求するので rgba( / hsla( とは重複しない
_COLOR_SYSTEM_RES: dict[str, re.Pattern[str]] = {
    "hex": re.compile(r"#[0-9a-fA-F]{3,6}"),
    "rgb": re.compile(r"rgb\([^)]+\)"),
    "hsl": re.compile(r"hsl\([^)]+\)"),
    "rgba": re.compile(r"rgba\([^)]+\)"),
    "hsla": re.compile(r"hsla\([^)]+\)"),
}

_FONT_WEIGHTS = ("bold", "normal", "400", "700")
_TEXT_DECORATIONS = ("underline", "line-through", "overline", "none")


def _tally(pattern: re.Pattern[str], text: str, values: tuple[str, ...]) -> dict[str, int]:
    counts = dict.fromkeys(values, 0)
    for value in pattern.findall(text):
        counts[value] += 1
    return counts


def _presence_result(name: str, counts: dict[str, int]) -> CheckResult:
    """全ての値が1回以上出現しているかを判定する。"""
    details = [
        f"✅ {value}: {count} times" if count > 0 else f"❌ {value}: missing" for value, count in counts.items()
    ]
    return CheckResult(name=name, passed=all(counts.values()), details=details)


class RequirementsValidator:
    """固定のチェックリストに基づいてスタイルシートとマークアップを検証する。"""

    def __init__(self, reporter: ConsoleReporter | None = None) -> None:
        self._reporter = reporter

    def run(self, stylesheet: str, markup: str) -> ValidationReport:
        """全チェックを定義順に実行する。

        途中のチェックが失敗しても残りのチェックは必ず実行する。

        Args:
            stylesheet: スタイルシートの全文。
            markup: HTMLドキュメントの全文。

        Returns:
            各チェック結果をまとめたレポート。
        """
        checks: list[tuple[str, Callable[[], CheckResult]]] = [
            ("Checking for at least 10 unique styles...", lambda: self._check_style_groups(stylesheet)),
            ("Checking font weights...", lambda: self._check_font_weights(stylesheet)),
            ("Checking text decorations...", lambda: self._check_text_decorations(stylesheet)),
            ("Checking text transformations...", lambda: self._check_text_transform(stylesheet)),
            ("Checking Google Fonts...", lambda: self._check_font_families(stylesheet)),
            ("Checking color systems...", lambda: self._check_color_systems(stylesheet)),
            ("Checking for inline styles...", lambda: self._check_inline_styles(markup)),
            ("Checking for grouped selectors...", lambda: self._check_grouped_selectors(stylesheet)),
        ]

        report = ValidationReport()
        for title, check in checks:
            if self._reporter is not None:
                self._reporter.heading(title)
            result = check()
            logger.debug("Check %s: %s", result.name, "passed" if result.passed else "failed")
            if self._reporter is not None:
                self._reporter.details(result)
            report.results.append(result)
        return report

    @staticmethod
    def _check_style_groups(stylesheet: str) -> CheckResult:
        count = len(_STYLE_GROUP_RE.findall(stylesheet))
        details = [f"Style group comments found: {count}"]
        passed = count >= MIN_STYLE_GROUPS
        if passed:
            details.append(f"✅ Found {count} style groups")
        else:
            details.append(f"❌ Need at least {MIN_STYLE_GROUPS} unique style groups")
        return CheckResult(name="style-groups", passed=passed, details=details)

    @staticmethod
    def _check_font_weights(stylesheet: str) -> CheckResult:
        return _presence_result("font-weights", _tally(_FONT_WEIGHT_RE, stylesheet, _FONT_WEIGHTS))

    @staticmethod
    def _check_text_decorations(stylesheet: str) -> CheckResult:
        return _presence_result(
            "text-decorations", _tally(_TEXT_DECORATION_RE, stylesheet, _TEXT_DECORATIONS)
        )

    @staticmethod
    def _check_text_transform(stylesheet: str) -> CheckResult:
        """uppercaseのみ必須。capitalize/lowercaseは検出するが要求しない。"""
        passed = "uppercase" in _TEXT_TRANSFORM_RE.findall(stylesheet)
        detail = "✅ Found uppercase transformation" if passed else "❌ Missing uppercase transformation"
        return CheckResult(name="text-transform", passed=passed, details=[detail])

    @staticmethod
    def _check_font_families(stylesheet: str) -> CheckResult:
        """各font-family宣言の先頭の引用符付きフォント名を重複なしで数える。

        大文字小文字は区別し、出現順を保持する。
        """
        fonts = list(dict.fromkeys(_FONT_FAMILY_RE.findall(stylesheet)))
        passed = len(fonts) >= MIN_FONT_FAMILIES
        if passed:
            detail = f"✅ Found {len(fonts)} unique fonts: {', '.join(fonts)}"
        else:
            detail = f"❌ Need at least {MIN_FONT_FAMILIES} unique fonts, found {len(fonts)}"
        return CheckResult(name="font-families", passed=passed, details=[detail])

    @staticmethod
    def _check_color_systems(stylesheet: str) -> CheckResult:
        counts = {system: len(pattern.findall(stylesheet)) for system, pattern in _COLOR_SYSTEM_RES.items()}
        used = [(system, count) for system, count in counts.items() if count > 0]
        passed = len(used) >= MIN_COLOR_SYSTEMS
        if passed:
            listing = ", ".join(f"{system}({count})" for system, count in used)
            detail = f"✅ Found {len(used)} color systems: {listing}"
        else:
            detail = f"❌ Need at least {MIN_COLOR_SYSTEMS} color systems, found {len(used)}"
        return CheckResult(name="color-systems", passed=passed, details=[detail])

    @staticmethod
    def _check_inline_styles(markup: str) -> CheckResult:
        passed = "style=" not in markup
        detail = "✅ No inline styles found" if passed else "❌ Inline styles found - remove them"
        return CheckResult(name="inline-styles", passed=passed, details=[detail])

    @staticmethod
    def _check_grouped_selectors(stylesheet: str) -> CheckResult:
        """ブロック内で最後の"{"より前のセレクタ部分にカンマを含むルールがあるか判定する。"""
        passed = any("," in selector for selector in _RULE_BLOCK_RE.findall(stylesheet))
        detail = "✅ Found grouped selectors" if passed else "❌ No grouped selectors found"
        return CheckResult(name="grouped-selectors", passed=passed, details=[detail])
