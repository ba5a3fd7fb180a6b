"""
差分検知ロジック

元ファイルと更新ファイルの値セットを比較し、追加・削除された値を識別します。
"""

from typing import Iterable, Set
from pydantic import BaseModel, Field


class DiffResult(BaseModel):
    """
    差分検知結果

    追加・削除の分類結果を保持します。2つの集合は構成上互いに素です。
    """

    added: Set[str] = Field(default_factory=set, description="更新ファイルにのみ存在する値")
    dropped: Set[str] = Field(default_factory=set, description="元ファイルにのみ存在する値")


class DiffDetector:
    """
    差分検知ロジック

    元ファイルと更新ファイルの値セットを比較し、
    追加・削除された値を識別します。
    """

    @staticmethod
    def difference(a: Iterable[str], b: Iterable[str]) -> Set[str]:
        """
        a に存在し b に存在しない値を返す

        Args:
            a: 基準となる値セット
            b: 比較対象の値セット

        Returns:
            Set[str]: 新しい集合（入力は変更しない）
        """
        result = set(a)
        for value in b:
            result.discard(value)
        return result

    @staticmethod
    def union(a: Iterable[str], b: Iterable[str]) -> Set[str]:
        """
        a または b のいずれかに存在する値を返す

        Args:
            a: 値セット1
            b: 値セット2

        Returns:
            Set[str]: 新しい集合（入力は変更しない）
        """
        result = set(a)
        result.update(b)
        return result

    def detect_diff(self, original: Set[str], updated: Set[str]) -> DiffResult:
        """
        元ファイルと更新ファイルの差分を検知

        Args:
            original: 元ファイルの値セット
            updated: 更新ファイルの値セット

        Returns:
            DiffResult: 追加・削除の分類結果

        Note:
            - 削除: 元ファイルにのみ存在する値
            - 追加: 更新ファイルにのみ存在する値
        """
        return DiffResult(
            dropped=self.difference(original, updated),
            added=self.difference(updated, original),
        )
