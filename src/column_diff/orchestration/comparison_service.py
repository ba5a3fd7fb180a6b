"""比較オーケストレーションサービス"""

from typing import List, Optional, Set
import logging
import time
from pydantic import BaseModel

from ..domain.column_extractor import ColumnExtractor
from ..domain.diff_detector import DiffDetector
from ..domain.diff_reporter import DiffReporter
from ..domain.errors import ColumnDiffError, ErrorKind
from ..domain.models import ComparisonRequest, DiffSummary
from ..infrastructure.path_resolver import PathResolver
from ..infrastructure.report_writer import ReportWriter
from ..infrastructure.source_reader import SourceReader


class ComparisonResult(BaseModel):
    """
    比較結果サマリー

    Attributes:
        success: 比較が成功したか
        summary: 差分サマリー（失敗時は None）
        error_kind: 失敗時のエラー種別
        errors: エラーメッセージリスト
        execution_time_seconds: 実行時間（秒）
    """
    success: bool
    summary: Optional[DiffSummary] = None
    error_kind: Optional[ErrorKind] = None
    errors: List[str] = []
    execution_time_seconds: float = 0.0


class ComparisonService:
    """
    比較処理全体のオーケストレーション

    Responsibilities:
    - 読み込み、列抽出、差分検知、サマリー組み立て、出力の調整
    - エラーハンドリング（最初のエラーで即座に中断、リトライなし）
    - ログ出力

    元ファイルを読み込み・抽出してから更新ファイルを扱います。
    """

    def __init__(
        self,
        source_reader: SourceReader,
        column_extractor: ColumnExtractor,
        diff_detector: DiffDetector,
        diff_reporter: DiffReporter,
        report_writer: ReportWriter,
        output_format: str = "table"
    ):
        """
        ComparisonService を初期化

        Args:
            source_reader: ファイル読み込みサービス
            column_extractor: 列抽出サービス
            diff_detector: 差分検知サービス
            diff_reporter: 差分サマリー組み立てサービス
            report_writer: 差分サマリー出力サービス
            output_format: 出力形式（"table" または "json"）
        """
        self.source_reader = source_reader
        self.column_extractor = column_extractor
        self.diff_detector = diff_detector
        self.diff_reporter = diff_reporter
        self.report_writer = report_writer
        self.output_format = output_format
        self.logger = logging.getLogger(__name__)

    def compare(self, request: ComparisonRequest) -> DiffSummary:
        """
        2ファイルの対象列を比較

        Args:
            request: 比較リクエスト

        Returns:
            DiffSummary: 差分サマリー

        Raises:
            ColumnDiffError: 読み込み・抽出のいずれかが失敗した場合
        """
        original_name = PathResolver.display_name(request.original_path)
        updated_name = PathResolver.display_name(request.updated_path)

        original = self._load_values(request.original_path, original_name, request.header)
        updated = self._load_values(request.updated_path, updated_name, request.header)

        diff_result = self.diff_detector.detect_diff(original, updated)

        return self.diff_reporter.build_report(
            original,
            updated,
            diff_result.dropped,
            diff_result.added,
            header=request.header,
            original_name=original_name,
            updated_name=updated_name,
        )

    def run_comparison(self, request: ComparisonRequest) -> ComparisonResult:
        """
        比較処理を実行して出力

        Returns:
            ComparisonResult: 比較結果サマリー

        Postconditions: 成功時は差分サマリーが出力される
        Invariants: エラー発生時もログ記録と実行時間の記録は行う
        """
        start_time = time.time()

        try:
            self.logger.info(
                f"Beginning diff on header {request.header}",
                extra={
                    "original_path": request.original_path,
                    "updated_path": request.updated_path
                }
            )

            summary = self.compare(request)
            self.report_writer.write(summary, self.output_format)

            execution_time = time.time() - start_time
            self.logger.info(
                "Diff completed",
                extra={
                    "original_count": summary.original_count,
                    "updated_count": summary.updated_count,
                    "added_count": summary.added_count,
                    "dropped_count": summary.dropped_count,
                    "execution_time_seconds": execution_time
                }
            )

            return ComparisonResult(
                success=True,
                summary=summary,
                execution_time_seconds=execution_time
            )

        except ColumnDiffError as e:
            self.logger.error(
                f"Diff failed ({e.kind.value}): {str(e)}",
                extra={"path": e.path}
            )
            return ComparisonResult(
                success=False,
                error_kind=e.kind,
                errors=[str(e)],
                execution_time_seconds=time.time() - start_time
            )

        except Exception as e:
            self.logger.error(f"Diff failed: {str(e)}", exc_info=True)
            return ComparisonResult(
                success=False,
                errors=[str(e)],
                execution_time_seconds=time.time() - start_time
            )

    def _load_values(self, path: str, display_name: str, header: str) -> Set[str]:
        """
        1ファイル分の読み込みと列抽出

        Raises:
            ColumnDiffError: 読み込みまたは抽出に失敗した場合
        """
        source = self.source_reader.read_source(path)
        return self.column_extractor.extract_column(source, display_name, header)
