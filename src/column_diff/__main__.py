"""CLI エントリーポイント"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .orchestration.comparison_service import ComparisonService
from .domain.column_extractor import ColumnExtractor
from .domain.diff_detector import DiffDetector
from .domain.diff_reporter import DiffReporter
from .domain.errors import InvalidArgumentsError
from .domain.models import ComparisonRequest
from .infrastructure.report_writer import ReportWriter
from .infrastructure.source_reader import SourceReader

DEFAULT_ORIGINAL = "./fixtures/orig.csv"
DEFAULT_UPDATED = "./fixtures/updated.csv"
DEFAULT_HEADER = "id"


def build_parser() -> argparse.ArgumentParser:
    """コマンドライン引数パーサーを生成"""
    parser = argparse.ArgumentParser(
        prog="column-diff",
        description="Compare the distinct values of one column between two delimited text files.",
    )
    parser.add_argument(
        "-o", "--orig",
        default=DEFAULT_ORIGINAL,
        help="Full or relative path to the original/older file",
    )
    parser.add_argument(
        "-u", "--updated",
        default=DEFAULT_UPDATED,
        help="Full or relative path to the updated/newer file",
    )
    parser.add_argument(
        "-H", "--header",
        default=DEFAULT_HEADER,
        help="Name of target header column in both original and updated files (case-sensitive)",
    )
    parser.add_argument(
        "-d", "--delimiter",
        default=",",
        help="Field delimiter (default: ',')",
    )
    parser.add_argument(
        "-f", "--format",
        choices=ReportWriter.FORMATS,
        default="table",
        help="Output format for the diff summary",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level",
    )
    return parser


def build_request(args: argparse.Namespace) -> ComparisonRequest:
    """
    解析済み引数から ComparisonRequest を生成

    Raises:
        InvalidArgumentsError: パス・ヘッダー名が空、または区切り文字が1文字でない場合
    """
    if len(args.delimiter or "") != 1:
        raise InvalidArgumentsError(f"区切り文字は1文字である必要があります: {args.delimiter!r}")
    try:
        return ComparisonRequest(
            original_path=args.orig or "",
            updated_path=args.updated or "",
            header=args.header or ""
        )
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors())
        raise InvalidArgumentsError(f"空の引数があります: {fields}") from e


def main(argv: Optional[List[str]] = None):
    """
    CLI エントリーポイント

    Usage:
        python -m src.column_diff -o orig.csv -u updated.csv -H id

    Exit codes:
        0: 成功
        1: 失敗（引数不正、読み込み失敗、パース失敗など）
    """
    args = build_parser().parse_args(argv)

    # ロギング設定
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logger = logging.getLogger(__name__)

    try:
        request = build_request(args)
    except InvalidArgumentsError as e:
        logger.error(
            f"Invalid arguments provided ({str(e)}), got: "
            f"{json.dumps(vars(args), indent=2)}. Exiting."
        )
        sys.exit(1)

    try:
        # 依存関係の初期化
        service = ComparisonService(
            source_reader=SourceReader(),
            column_extractor=ColumnExtractor(delimiter=args.delimiter),
            diff_detector=DiffDetector(),
            diff_reporter=DiffReporter(),
            report_writer=ReportWriter(),
            output_format=args.format
        )

        result = service.run_comparison(request)

        if result.success:
            logger.info("Diff succeeded, exiting.")
            sys.exit(0)
        else:
            logger.error(f"Diff failed: {', '.join(result.errors)}")
            sys.exit(1)

    except Exception as e:
        logger.error(f"Unexpected error: {str(e)}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
