"""
データモデル (ComparisonRequest, DiffEntry, DiffSummary) のユニットテスト
"""
import pytest
from pydantic import ValidationError

from src.column_diff.domain.models import (
    ChangeKind,
    ComparisonRequest,
    DiffEntry,
    DiffSummary,
)


class TestComparisonRequest:
    """ComparisonRequest モデルのテスト"""

    def test_comparison_request_instantiation(self):
        """全フィールドを持つ ComparisonRequest の生成"""
        request = ComparisonRequest(
            original_path="./fixtures/orig.csv",
            updated_path="./fixtures/updated.csv",
            header="id"
        )

        assert request.original_path == "./fixtures/orig.csv"
        assert request.updated_path == "./fixtures/updated.csv"
        assert request.header == "id"

    @pytest.mark.parametrize("field", ["original_path", "updated_path", "header"])
    def test_empty_value_raises_validation_error(self, field):
        """空文字列は ValidationError"""
        values = {
            "original_path": "a.csv",
            "updated_path": "b.csv",
            "header": "id",
        }
        values[field] = ""

        with pytest.raises(ValidationError) as exc_info:
            ComparisonRequest(**values)

        assert field in str(exc_info.value)

    def test_whitespace_header_is_accepted(self):
        """空白のみのヘッダー名も空文字列でなければ受け付ける"""
        request = ComparisonRequest(original_path="a.csv", updated_path="b.csv", header=" ")

        assert request.header == " "

    def test_missing_field_raises_validation_error(self):
        """必須フィールド欠損時は ValidationError"""
        with pytest.raises(ValidationError):
            ComparisonRequest(original_path="a.csv", updated_path="b.csv")


class TestDiffEntry:
    """DiffEntry モデルのテスト"""

    def test_added_entry_exposes_added_column_only(self):
        """追加エントリは追加列にのみ値を持つ"""
        entry = DiffEntry(kind=ChangeKind.ADDED, value="4")

        assert entry.added == "4"
        assert entry.dropped is None

    def test_dropped_entry_exposes_dropped_column_only(self):
        """削除エントリは削除列にのみ値を持つ"""
        entry = DiffEntry(kind=ChangeKind.DROPPED, value="1")

        assert entry.added is None
        assert entry.dropped == "1"

    def test_kind_accepts_string_value(self):
        """種別は文字列からも生成できる"""
        entry = DiffEntry(kind="dropped", value="x")

        assert entry.kind == ChangeKind.DROPPED

    def test_invalid_kind_raises_validation_error(self):
        """未知の種別は ValidationError"""
        with pytest.raises(ValidationError):
            DiffEntry(kind="changed", value="x")


class TestDiffSummary:
    """DiffSummary モデルのテスト"""

    def test_diff_summary_default_values(self):
        """DiffSummary のデフォルト値"""
        summary = DiffSummary()

        assert summary.original_count == 0
        assert summary.updated_count == 0
        assert summary.added_count == 0
        assert summary.dropped_count == 0
        assert summary.entries == []
        assert summary.has_changes is False

    def test_added_and_dropped_values(self):
        """追加・削除された値を表示順で取得できる"""
        summary = DiffSummary(
            added_count=2,
            dropped_count=1,
            entries=[
                DiffEntry(kind=ChangeKind.ADDED, value="4"),
                DiffEntry(kind=ChangeKind.ADDED, value="5"),
                DiffEntry(kind=ChangeKind.DROPPED, value="1"),
            ]
        )

        assert summary.added_values == ["4", "5"]
        assert summary.dropped_values == ["1"]
        assert summary.has_changes is True

    def test_negative_count_raises_validation_error(self):
        """負の件数は ValidationError"""
        with pytest.raises(ValidationError):
            DiffSummary(original_count=-1)

    def test_model_dump_json_mode(self):
        """JSON モードで種別が文字列として出力される"""
        summary = DiffSummary(
            header="id",
            entries=[DiffEntry(kind=ChangeKind.ADDED, value="4")]
        )

        dumped = summary.model_dump(mode="json")

        assert dumped["header"] == "id"
        assert dumped["entries"] == [{"kind": "added", "value": "4"}]
