from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the CLI controller and reports any unhandled exception
with its full trace on stderr before exiting with a failure code.
"""

import logging
import sys
import traceback
from typing import Any


def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Log and print an unhandled exception, then exit with status 1.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))

    logger = logging.getLogger("statwrap.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {value}\n{stack_trace}")

    print("\n" + "=" * 80, file=sys.stderr)
    print("CRITICAL ERROR (STATWRAP WORKFLOW)", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    print(stack_trace, file=sys.stderr)
    sys.exit(1)


def main() -> int:
    """
    Delegate to the CLI controller.

    Returns:
        int: Process exit code.
    """
    sys.excepthook = global_exception_handler

    from statwrap.interface.cli.app import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
