"""
データモデル定義

このモジュールは column-diff のドメイン層のデータモデルを定義します:
- ComparisonRequest: 比較対象の2ファイルとヘッダー名
- DiffEntry: 追加または削除された1つの値
- DiffSummary: 件数と並び替え済みエントリを持つ差分サマリー
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


class ChangeKind(str, Enum):
    """差分種別"""
    ADDED = "added"
    DROPPED = "dropped"


class ComparisonRequest(BaseModel):
    """
    比較リクエスト

    CLI などから受け取った3つの入力を保持します。
    いずれも空文字列は許容しません。
    """

    original_path: str = Field(..., description="元（旧）ファイルのパス")
    updated_path: str = Field(..., description="更新（新）ファイルのパス")
    header: str = Field(..., description="比較対象の列名（大文字小文字を区別）")

    @field_validator("original_path", "updated_path", "header")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """
        空文字列チェック（空白のみの値は列名・パスとして許容）

        Raises:
            ValueError: 空文字列の場合
        """
        if not v:
            raise ValueError("空の値は指定できません")
        return v


class DiffEntry(BaseModel):
    """
    差分エントリ

    追加 (ADDED) または削除 (DROPPED) のどちらか一方の値を表します。
    """

    kind: ChangeKind = Field(..., description="差分種別")
    value: str = Field(..., description="対象列の値")

    @property
    def added(self) -> Optional[str]:
        """追加列に表示する値"""
        return self.value if self.kind == ChangeKind.ADDED else None

    @property
    def dropped(self) -> Optional[str]:
        """削除列に表示する値"""
        return self.value if self.kind == ChangeKind.DROPPED else None


class DiffSummary(BaseModel):
    """
    差分サマリー

    各入力の値数、追加・削除件数、および表示順に並んだエントリを保持します。
    entries は追加エントリが先、削除エントリが後に並びます。
    """

    header: str = Field(default="", description="比較対象の列名")
    original_name: str = Field(default="", description="元ファイルの表示名")
    updated_name: str = Field(default="", description="更新ファイルの表示名")
    original_count: int = Field(default=0, ge=0, description="元ファイルの値数")
    updated_count: int = Field(default=0, ge=0, description="更新ファイルの値数")
    added_count: int = Field(default=0, ge=0, description="追加件数")
    dropped_count: int = Field(default=0, ge=0, description="削除件数")
    entries: List[DiffEntry] = Field(default_factory=list, description="差分エントリ一覧")

    @property
    def added_values(self) -> List[str]:
        """追加された値（表示順）"""
        return [entry.value for entry in self.entries if entry.kind == ChangeKind.ADDED]

    @property
    def dropped_values(self) -> List[str]:
        """削除された値（表示順）"""
        return [entry.value for entry in self.entries if entry.kind == ChangeKind.DROPPED]

    @property
    def has_changes(self) -> bool:
        """追加・削除のいずれかがあれば True"""
        return bool(self.entries)
