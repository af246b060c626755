from __future__ import annotations
import io
from contextlib import redirect_stdout
from typing import Any, Callable


def capture_output(func: Callable[..., Any], *args: Any, **kwargs: Any) -> str:
    """
    Run a print-style hook and return what it wrote to stdout instead of
    letting it reach the real stream. stdout is restored even if the hook raises.
    """
    buf = io.StringIO()
    with redirect_stdout(buf):
        func(*args, **kwargs)
    return buf.getvalue()
