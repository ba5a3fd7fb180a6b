"""
エラー定義

列差分処理の各段階で発生するエラーを種別 (ErrorKind) 付きで定義します。
すべての例外は ColumnDiffError を継承し、呼び出し元は kind で分岐できます。
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """エラー種別"""
    INVALID_ARGUMENTS = "invalid_arguments"
    INVALID_PATH = "invalid_path"
    NOT_FOUND = "not_found"
    IO_ERROR = "io_error"
    EMPTY_CONTENT = "empty_content"
    INVALID_INPUT = "invalid_input"
    PARSE_ERROR = "parse_error"


class ParseFailureReason(str, Enum):
    """値セットが空になった原因"""
    NO_DATA_ROWS = "no_data_rows"
    HEADER_NOT_FOUND = "header_not_found"
    ALL_VALUES_BLANK = "all_values_blank"
    MALFORMED = "malformed"


class ColumnDiffError(Exception):
    """
    列差分処理エラーの基底クラス

    Attributes:
        kind: エラー種別
        path: エラーが発生したファイルのパス（該当する場合）
    """

    kind: ErrorKind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str, path: Optional[str] = None):
        """
        Args:
            message: エラーメッセージ
            path: エラーが発生したファイルのパス
        """
        super().__init__(message)
        self.path = path


class InvalidArgumentsError(ColumnDiffError):
    """
    引数エラー例外

    元ファイル・更新ファイル・ヘッダー名のいずれかが未指定または空の場合を表します。
    """

    kind = ErrorKind.INVALID_ARGUMENTS


class InvalidPathError(ColumnDiffError):
    """ファイルパスが空、または文字列でない場合の例外"""

    kind = ErrorKind.INVALID_PATH


class SourceNotFoundError(ColumnDiffError):
    """正規化後のパスにファイルが存在しない場合の例外"""

    kind = ErrorKind.NOT_FOUND


class SourceReadError(ColumnDiffError):
    """
    読み込みエラー例外

    権限不足、ディレクトリ指定、デバイスエラーなど、存在確認以外の I/O 失敗を表します。
    元の例外は cause に保持されます。
    """

    kind = ErrorKind.IO_ERROR

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        cause: Optional[OSError] = None,
    ):
        """
        Args:
            message: エラーメッセージ
            path: 読み込み対象のパス
            cause: 元の OSError
        """
        super().__init__(message, path=path)
        self.cause = cause


class EmptyContentError(ColumnDiffError):
    """ファイルは読み込めたが 0 バイトだった場合の例外"""

    kind = ErrorKind.EMPTY_CONTENT


class InvalidInputError(ColumnDiffError):
    """
    抽出前提条件エラー例外

    ソーステキスト・表示名・ヘッダー名の検証失敗を表します。
    複数の条件が失敗した場合、メッセージはカンマ区切りで連結されます。
    """

    kind = ErrorKind.INVALID_INPUT


class ParseError(ColumnDiffError):
    """
    パースエラー例外

    抽出結果の値セットが空の場合を表します。データ行なし・ヘッダー不一致・
    全値空欄はいずれもこの例外になり、reason で原因を区別できます。
    """

    kind = ErrorKind.PARSE_ERROR

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        reason: Optional[ParseFailureReason] = None,
    ):
        """
        Args:
            message: エラーメッセージ
            path: 対象ファイルの表示名
            reason: 値セットが空になった原因
        """
        super().__init__(message, path=path)
        self.reason = reason
