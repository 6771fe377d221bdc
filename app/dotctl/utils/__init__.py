"""Utility modules for dotctl.

This module exports commonly used utility functions.
"""

from dotctl.utils.formatting import (
    configure_logging,
    console,
    err_console,
    print_backed_up,
    print_error,
    print_header,
    print_info,
    print_linked,
    print_success,
    print_warning,
)
from dotctl.utils.shell import (
    CommandRunner,
    DryRunRunner,
    SubprocessRunner,
    check_call,
    command_exists,
    run_interactive,
)

__all__ = [
    "CommandRunner",
    "DryRunRunner",
    "SubprocessRunner",
    "check_call",
    "command_exists",
    "configure_logging",
    "console",
    "err_console",
    "print_backed_up",
    "print_error",
    "print_header",
    "print_info",
    "print_linked",
    "print_success",
    "print_warning",
    "run_interactive",
]
