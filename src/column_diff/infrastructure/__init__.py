"""
インフラストラクチャ層

パス解決、ファイル I/O、差分サマリーの出力などの外部依存を提供します。
"""

from .path_resolver import PathResolver
from .source_reader import SourceReader
from .report_writer import ReportWriter

__all__ = ["PathResolver", "SourceReader", "ReportWriter"]
