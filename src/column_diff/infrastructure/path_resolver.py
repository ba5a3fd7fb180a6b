"""ファイルパスの正規化と表示名の生成"""

import logging
import os

logger = logging.getLogger(__name__)


class PathResolver:
    """
    ファイルパス解決クラス

    ユーザー指定のパスを正規化し、メッセージ表示用のファイル名を導出します。
    表示名はログ出力専用で、ファイルアクセスには使用しません。
    """

    INVALID_NAME = "INVALID"

    @staticmethod
    def normalize(path: str) -> str:
        """
        パスを正規化（".", "..", 重複区切り文字を除去）

        Args:
            path: 絶対パスまたは相対パス

        Returns:
            str: 正規化済みパス（空または文字列以外の場合は空文字列）
        """
        if not isinstance(path, str) or not path:
            return ""
        try:
            return os.path.normpath(path)
        except ValueError:
            return ""

    @staticmethod
    def display_name(path: str) -> str:
        """
        正規化済みパスの末尾要素（ファイル名 + 拡張子）を取得

        Args:
            path: 絶対パスまたは相対パス

        Returns:
            str: "orig.csv" のような表示名。不正な入力の場合は "INVALID"
        """
        normalized = PathResolver.normalize(path)
        if not normalized:
            logger.error("Invalid file name provided: could not format")
            return PathResolver.INVALID_NAME
        return os.path.basename(normalized) or normalized
