"""
列抽出ロジック

区切り文字形式のテキストを解析し、指定ヘッダー列の一意な値セットを抽出します。
1行目をフィールド名として扱い、ヘッダー名は収集対象の列を選ぶためだけに使用します。
"""

import csv
import io
import logging
import sys
from typing import List, Optional, Set

from .errors import InvalidInputError, ParseError, ParseFailureReason


def _raise_field_size_limit() -> int:
    """
    csv モジュールのフィールド長上限をプラットフォームの最大値まで引き上げる

    Returns:
        int: 設定した上限値
    """
    limit = sys.maxsize
    while True:
        try:
            csv.field_size_limit(limit)
            return limit
        except OverflowError:
            # C long が 32bit の環境
            limit //= 2


FIELD_SIZE_LIMIT = _raise_field_size_limit()


class ColumnExtractor:
    """
    列抽出クラス

    ファイル全体をメモリ上で解析し、対象列の空でない値を集合として返します。
    行の順序や重複は結果に影響しません。
    """

    def __init__(self, delimiter: str = ","):
        """
        ColumnExtractor を初期化

        Args:
            delimiter: 区切り文字（既定はカンマ）
        """
        self.delimiter = delimiter
        self.logger = logging.getLogger(__name__)

    def extract_column(self, source: str, display_name: str, header: str) -> Set[str]:
        """
        対象列の一意な値セットを抽出

        Args:
            source: ファイル全体のテキスト
            display_name: ファイルの表示名（メッセージ用）
            header: 対象列名（大文字小文字を区別した完全一致）

        Returns:
            Set[str]: 対象列の空でない値の集合

        Raises:
            InvalidInputError: 前提条件を満たさない場合（失敗理由はカンマ区切りで連結）
            ParseError: 抽出結果が空の場合
        """
        problems = self._validate(source, display_name, header)
        if problems:
            message = f"パースできません: {', '.join(problems)}"
            self.logger.error(f"Unable to parse! Message: {', '.join(problems)}")
            raise InvalidInputError(message, path=display_name or None)

        reader = csv.reader(io.StringIO(source, newline=""), delimiter=self.delimiter)
        values: Set[str] = set()
        data_rows = 0

        try:
            fieldnames = next(reader, None) or []
            column_index = self._find_column(fieldnames, header)

            for row in reader:
                if not row:
                    # 空行はデータ行として数えない
                    continue
                data_rows += 1
                if column_index is None or column_index >= len(row):
                    continue
                value = row[column_index]
                if value:
                    values.add(value)
        except csv.Error as e:
            raise ParseError(
                f"{display_name} の解析に失敗しました (line {reader.line_num}): {e}",
                path=display_name,
                reason=ParseFailureReason.MALFORMED,
            ) from e

        if not values:
            reason = self._failure_reason(column_index, data_rows)
            self.logger.error(
                f"Failed to parse {display_name}",
                extra={"header": header, "reason": reason.value}
            )
            raise ParseError(
                f"{display_name} から列 '{header}' の値を取得できませんでした ({reason.value})",
                path=display_name,
                reason=reason,
            )

        self.logger.debug(
            f"Parsed {display_name}: {len(values)} distinct values",
            extra={"header": header, "data_rows": data_rows}
        )
        return values

    @staticmethod
    def _validate(source: str, display_name: str, header: str) -> List[str]:
        """
        前提条件の検証

        Returns:
            List[str]: 失敗した条件ごとのメッセージ（すべて満たせば空リスト）
        """
        problems = []
        if not isinstance(source, str) or not source:
            problems.append("ファイルから読み込んだデータが空または不正です")
        if not isinstance(display_name, str) or not display_name:
            problems.append("ファイル名が不正です")
        if not isinstance(header, str) or not header:
            problems.append("ヘッダー名が不正です")
        return problems

    @staticmethod
    def _find_column(fieldnames: List[str], header: str) -> Optional[int]:
        """フィールド名一覧から対象列の位置を取得（見つからなければ None）"""
        try:
            return fieldnames.index(header)
        except ValueError:
            return None

    @staticmethod
    def _failure_reason(column_index: Optional[int], data_rows: int) -> ParseFailureReason:
        """値セットが空になった原因を判定"""
        if column_index is None:
            return ParseFailureReason.HEADER_NOT_FOUND
        if data_rows == 0:
            return ParseFailureReason.NO_DATA_ROWS
        return ParseFailureReason.ALL_VALUES_BLANK
