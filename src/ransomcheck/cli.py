"""ransomcheckのコマンドライン実行処理。"""

import logging

from ransomcheck.config import ValidatorConfig
from ransomcheck.models.errors import InputUnavailableError
from ransomcheck.reporting.console import ConsoleReporter
from ransomcheck.sources.loader import SourceLoader
from ransomcheck.validators.requirements import RequirementsValidator

logger = logging.getLogger(__name__)


def main(config: ValidatorConfig | None = None, reporter: ConsoleReporter | None = None) -> int:
    """入力を読み込んで全チェックを実行し、終了コードを返す。

    Returns:
        全チェック合格なら0、それ以外（読み込みエラーを含む）は1。
    """
    config = config or ValidatorConfig()
    reporter = reporter or ConsoleReporter()
    logging.basicConfig(level=config.log_level)

    reporter.banner()
    try:
        sources = SourceLoader(config, reporter).load()
    except InputUnavailableError as e:
        logger.debug("Aborting before checks: %s", e.path)
        reporter.error(e)
        return 1

    report = RequirementsValidator(reporter).run(sources.stylesheet, sources.markup)
    reporter.summary(report)
    if not report.overall_passed:
        logger.info("Failed checks: %s", ", ".join(r.name for r in report.failed))
    return 0 if report.overall_passed else 1


def run() -> None:
    raise SystemExit(main())
