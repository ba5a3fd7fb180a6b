"""差分サマリー出力コンポーネント"""

import json
import sys
from typing import List, Optional, TextIO

from ..domain.models import DiffSummary


class ReportWriter:
    """
    DiffSummary を人間向けの表または JSON として出力

    Responsibilities:
    - タイトルブロック（列名、各ファイルの表示名と件数、追加・削除件数）の生成
    - 追加列・削除列の2列テーブルの生成
    - JSON 形式での出力

    ファイルへの書き込みは行わず、指定ストリームにのみ出力します。
    """

    FORMATS = ("table", "json")

    def write(self, summary: DiffSummary, fmt: str = "table", stream: Optional[TextIO] = None) -> None:
        """
        差分サマリーを出力

        Args:
            summary: 差分サマリー
            fmt: 出力形式（"table" または "json"）
            stream: 出力先（None の場合は標準出力）

        Raises:
            ValueError: 未対応の出力形式が指定された場合
        """
        if fmt == "table":
            text = self.render_table(summary)
        elif fmt == "json":
            text = self.render_json(summary)
        else:
            raise ValueError(f"未対応の出力形式: {fmt}")

        out = stream or sys.stdout
        out.write(text)
        out.write("\n")

    def render_json(self, summary: DiffSummary) -> str:
        """
        差分サマリーを JSON 文字列に変換

        Note:
            - ensure_ascii=False で日本語をそのまま出力
            - indent=2 で人間が読みやすい形式に整形
        """
        return json.dumps(summary.model_dump(mode="json"), ensure_ascii=False, indent=2)

    def render_table(self, summary: DiffSummary) -> str:
        """
        差分サマリーをテキストの表に変換

        Returns:
            str: タイトルブロックと2列テーブル（追加は左寄せ、削除は右寄せ）
        """
        title = [
            f" -- Diff Summary on Header Column {summary.header} --",
            f"  Original file  {summary.original_name} has {summary.original_count} records",
            f"  Updated file  {summary.updated_name} has {summary.updated_count} records",
            f"  Added {summary.added_count} Records // Dropped {summary.dropped_count} Records",
        ]

        added_title = f"Added {summary.added_count}"
        dropped_title = f"Dropped {summary.dropped_count}"
        rows = [
            (self._cell(entry.added), self._cell(entry.dropped))
            for entry in summary.entries
        ]

        left_width = max([len(added_title)] + [len(left) for left, _ in rows])
        right_width = max([len(dropped_title)] + [len(right) for _, right in rows])

        border = f"+{'-' * (left_width + 2)}+{'-' * (right_width + 2)}+"
        lines: List[str] = title + [
            "",
            border,
            f"| {added_title.ljust(left_width)} | {dropped_title.rjust(right_width)} |",
            border,
        ]
        for left, right in rows:
            lines.append(f"| {left.ljust(left_width)} | {right.rjust(right_width)} |")
        lines.append(border)

        return "\n".join(lines)

    @staticmethod
    def _cell(value: Optional[str]) -> str:
        """表のセル用に改行・タブをエスケープ（1行に収める）"""
        if not value:
            return ""
        return value.replace("\r", "\\r").replace("\n", "\\n").replace("\t", "\\t")
