from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the CLI when arguments are present and to the GUI
otherwise, and installs a global exception hook so fatal crashes are
logged and reported on whichever interface is active.
"""

import logging
import sys
import traceback
from typing import Any, Type

# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: Type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Trap unhandled exceptions and report them on the active interface.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    if issubclass(exctype, KeyboardInterrupt):
        sys.__excepthook__(exctype, value, tb)
        return

    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    error_msg = str(value)

    logger = logging.getLogger("skeldir.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {error_msg}\n{stack_trace}")

    if len(sys.argv) > 1:
        print("\n" + "=" * 80, file=sys.stderr)
        print("CRITICAL ERROR (SKELDIR CLI)", file=sys.stderr)
        print("=" * 80, file=sys.stderr)
        print(stack_trace, file=sys.stderr)
        return

    try:
        import tkinter.messagebox as mb
        from tkinter import Tk
        root = Tk()
        root.withdraw()
        mb.showerror(
            "skeldir - Fatal Error",
            f"A critical error occurred in the interface:\n\n{error_msg}\n\n"
            f"Technical details have been saved to the log file.",
        )
        root.destroy()
    except Exception as e:
        logger.error(f"Crash dialog unavailable: {e}")
        print(f"CRITICAL SYSTEM ERROR: {error_msg}\n{stack_trace}", file=sys.stderr)


sys.excepthook = global_exception_handler


# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main() -> int:
    """
    Delegate to the CLI or the GUI depending on the command line.

    Returns:
        int: Process exit code.
    """
    try:
        if len(sys.argv) > 1:
            from skeldir.interface.cli.app import main as cli_main
            return cli_main()

        from skeldir.interface.gui.app import main as gui_main
        gui_main()
        return 0

    except Exception as e:
        global_exception_handler(type(e), e, sys.exc_info()[2])
        return 1


if __name__ == "__main__":
    sys.exit(main())
