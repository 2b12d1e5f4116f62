"""
cli/ui/console.py - Rich 콘솔 유틸리티

인벤토리 결과 출력과 로깅 설정을 위한 함수들
"""

from __future__ import annotations

import logging
import platform

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from core.config import LogConfig
from core.inventory import InventoryResult

# botocore 노이즈 로그 제한
logging.getLogger("botocore.httpchecksum").setLevel(logging.WARNING)
logging.getLogger("botocore.credentials").setLevel(logging.WARNING)
logging.getLogger("botocore.loaders").setLevel(logging.WARNING)
logging.getLogger("botocore.session").setLevel(logging.WARNING)
logging.getLogger("urllib3.connectionpool").setLevel(logging.WARNING)


def get_console(stderr: bool = False) -> Console:
    """Rich Console 인스턴스를 생성하고 반환합니다."""
    is_windows = platform.system().lower() == "windows"

    return Console(
        stderr=stderr,
        color_system="auto",
        highlight=True,
        soft_wrap=True,
        markup=True,
        emoji=not is_windows,
    )


# 전역 콘솔 인스턴스 (결과는 stdout, 로그/에러는 stderr)
console = get_console()
err_console = get_console(stderr=True)

SYMBOL_SUCCESS = "✓"
SYMBOL_ERROR = "✗"


def setup_logging(verbose: bool = False, config: LogConfig | None = None) -> None:
    """루트 로거에 RichHandler 설정

    Args:
        verbose: True이면 DEBUG 레벨
        config: 로깅 설정 (None이면 환경변수 기반 LogConfig)
    """
    config = config or LogConfig.from_env()
    level = logging.DEBUG if verbose else getattr(logging, config.level, logging.WARNING)

    handler = RichHandler(console=err_console, rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter(config.format, datefmt=config.date_format))

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)


def print_success(message: str) -> None:
    console.print(f"[green]{SYMBOL_SUCCESS} {message}[/green]")


def print_error(message: str) -> None:
    err_console.print(f"[red]{SYMBOL_ERROR} {message}[/red]")


def build_inventory_table(result: InventoryResult) -> Table:
    """수집된 리소스 테이블 생성 (kind, id, name, provider)"""
    table = Table(title="Resource Inventory", show_lines=False)
    table.add_column("Provider", style="cyan", no_wrap=True)
    table.add_column("Kind", style="magenta")
    table.add_column("ID", style="green")
    table.add_column("Name")

    for descriptor in result.get_descriptors():
        table.add_row(descriptor.provider_name, descriptor.kind, descriptor.id, descriptor.name)

    return table


def build_summary_table(result: InventoryResult) -> Table:
    """Generator별 실행 요약 테이블 생성"""
    table = Table(title="Generators")
    table.add_column("Generator", style="cyan")
    table.add_column("Status")
    table.add_column("Resources", justify="right")
    table.add_column("Duration", justify="right", style="dim")

    for outcome in result.outcomes:
        status = "[green]OK[/green]" if outcome.success else "[red]FAIL[/red]"
        count = str(len(outcome.descriptors)) if outcome.success else "-"
        table.add_row(outcome.key, status, count, f"{outcome.duration_ms:.0f}ms")

    return table


def print_inventory(result: InventoryResult) -> None:
    """인벤토리 결과 출력"""
    console.print(build_inventory_table(result))
    console.print(build_summary_table(result))

    if result.error_count:
        print_error(result.get_error_summary())
    else:
        print_success(f"{len(result.get_descriptors())}개 리소스 수집 완료")
