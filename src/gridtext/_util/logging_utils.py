"""Utility functions for logging."""


def _log_debug(message: str) -> None:
    """Append a simple debug line to the gridtext log.

    This is intentionally very small and best-effort so it never interferes
    with CLI output or with library callers drawing into a canvas.

    Writes timestamped lines to ``state_root()/gridtext.log``. Fully
    exception-safe: any IO or config error is ignored so this function never
    raises or affects callers.
    """
    try:
        import time

        from ..core.config import state_root

        log_path = state_root() / "gridtext.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] {message}\n")
    except Exception:
        pass
