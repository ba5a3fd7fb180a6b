"""差分サマリー組み立て"""

from typing import Set

from .diff_detector import DiffDetector
from .models import ChangeKind, DiffEntry, DiffSummary


class DiffReporter:
    """
    追加・削除された値から表示用の DiffSummary を組み立てる

    Responsibilities:
    - 追加・削除の和集合から種別付きエントリを生成
    - 件数の集計
    - 表示順（追加が先、削除が後）への並び替え

    描画は行わず、ReportWriter などの表示側が DiffSummary を消費します。
    """

    def build_report(
        self,
        original: Set[str],
        updated: Set[str],
        dropped: Set[str],
        added: Set[str],
        header: str = "",
        original_name: str = "",
        updated_name: str = "",
    ) -> DiffSummary:
        """
        差分サマリーを生成

        Args:
            original: 元ファイルの値セット
            updated: 更新ファイルの値セット
            dropped: 削除された値
            added: 追加された値
            header: 比較対象の列名
            original_name: 元ファイルの表示名
            updated_name: 更新ファイルの表示名

        Returns:
            DiffSummary: 件数と表示順に並んだエントリ
        """
        all_changed = DiffDetector.union(dropped, added)

        # 値の辞書順で並べてから「追加か否か」の単一キーで安定ソート
        entries = [
            DiffEntry(
                kind=ChangeKind.DROPPED if value in dropped else ChangeKind.ADDED,
                value=value,
            )
            for value in sorted(all_changed)
        ]
        entries.sort(key=lambda entry: entry.kind != ChangeKind.ADDED)

        return DiffSummary(
            header=header,
            original_name=original_name,
            updated_name=updated_name,
            original_count=len(original),
            updated_count=len(updated),
            added_count=len(added),
            dropped_count=len(dropped),
            entries=entries,
        )
