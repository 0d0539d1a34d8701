"""バリデーション関連のデータモデル。"""

from pydantic import BaseModel, ConfigDict, Field


class CheckResult(BaseModel):
    """チェックリスト1項目分の検証結果。"""

    name: str
    passed: bool
    details: list[str] = Field(default_factory=list)


class ValidationReport(BaseModel):
    """全チェック結果の集約。"""

    results: list[CheckResult] = Field(default_factory=list)

    @property
    def overall_passed(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def failed(self) -> list[CheckResult]:
        return [r for r in self.results if not r.passed]


class SourceDocuments(BaseModel):
    """検証対象のスタイルシートとマークアップ。実行中は変更しない。"""

    model_config = ConfigDict(frozen=True)

    stylesheet: str
    markup: str
