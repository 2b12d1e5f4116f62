"""
cli/ui - 콘솔 출력
"""

from .console import (
    build_inventory_table,
    build_summary_table,
    console,
    err_console,
    print_error,
    print_inventory,
    print_success,
    setup_logging,
)

__all__ = [
    "console",
    "err_console",
    "setup_logging",
    "print_success",
    "print_error",
    "print_inventory",
    "build_inventory_table",
    "build_summary_table",
]
