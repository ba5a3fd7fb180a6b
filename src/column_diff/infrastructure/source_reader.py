"""
ソースファイル読み込み

指定パスのファイル全体をテキストとして読み込みます。
I/O 失敗は種別付きの例外に変換し、元の例外は連鎖させて保持します。
"""

import logging
from pathlib import Path

from ..domain.errors import (
    EmptyContentError,
    InvalidPathError,
    SourceNotFoundError,
    SourceReadError,
)
from .path_resolver import PathResolver


class SourceReader:
    """
    ソースファイル読み込み

    ファイルをバイト列として読み込み、UTF-8 テキストにデコードして返します。
    先頭の BOM は除去し、デコードできないバイトは置換文字に変換します。
    """

    ENCODING = "utf-8-sig"

    def __init__(self):
        """SourceReader を初期化"""
        self.logger = logging.getLogger(__name__)

    def read_source(self, path: str) -> str:
        """
        ファイル全体をテキストとして読み込み

        Args:
            path: 相対パスまたは絶対パス

        Returns:
            str: デコード済みのファイル内容

        Raises:
            InvalidPathError: パスが空または文字列でない場合（I/O 前に検査）
            SourceNotFoundError: 正規化後のパスにファイルが存在しない場合
            SourceReadError: その他の読み込み失敗（権限、ディレクトリ指定など）
            EmptyContentError: ファイルが 0 バイトの場合
        """
        if not isinstance(path, str) or not path:
            self.logger.error("Could not read source: an invalid file path was provided")
            raise InvalidPathError("無効なファイルパスが指定されました", path=None)

        normalized_path = PathResolver.normalize(path)
        name = PathResolver.display_name(path)
        self.logger.info(f"Attempting to read {normalized_path}")

        target = Path(normalized_path)
        if not target.exists():
            self.logger.error(f"The file at path {name} does not exist or cannot be found")
            raise SourceNotFoundError(
                f"ファイルが見つかりません: {name}",
                path=normalized_path,
            )

        try:
            data = target.read_bytes()
        except FileNotFoundError as e:
            # 存在確認後に削除された場合
            self.logger.error(f"Read failed for {name}", extra={"error": str(e)})
            raise SourceNotFoundError(
                f"ファイルが見つかりません: {name}",
                path=normalized_path,
            ) from e
        except OSError as e:
            self.logger.error(f"Read failed for {name}", extra={"error": str(e)})
            raise SourceReadError(
                f"ファイルの読み込みに失敗しました ({name}): {e}",
                path=normalized_path,
                cause=e,
            ) from e

        if not data:
            self.logger.error(f"Read failed for {name}: file is empty")
            raise EmptyContentError(
                f"{name} から有効なデータを読み込めませんでした",
                path=normalized_path,
            )

        self.logger.info(f"Read {name}", extra={"bytes": len(data)})
        return data.decode(self.ENCODING, errors="replace")
