"""
ドメイン層

列の値抽出・差分検知・差分サマリー組み立てロジックを提供します。
"""

from .models import ChangeKind, ComparisonRequest, DiffEntry, DiffSummary
from .errors import ColumnDiffError, ErrorKind, ParseFailureReason
from .column_extractor import ColumnExtractor
from .diff_detector import DiffDetector, DiffResult
from .diff_reporter import DiffReporter

__all__ = [
    "ChangeKind",
    "ComparisonRequest",
    "DiffEntry",
    "DiffSummary",
    "ColumnDiffError",
    "ErrorKind",
    "ParseFailureReason",
    "ColumnExtractor",
    "DiffDetector",
    "DiffResult",
    "DiffReporter",
]
