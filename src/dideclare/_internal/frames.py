from __future__ import annotations

import inspect


def caller_module_name(stacklevel: int = 1) -> str:
    """Return the ``__name__`` of the module executing a frame up the stack.

    Args:
        stacklevel: ``1`` is the caller of the function invoking this helper,
            ``2`` its caller, and so on.

    """
    frame = inspect.currentframe()
    try:
        for _ in range(stacklevel + 1):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return "__main__"
        return frame.f_globals.get("__name__", "__main__")
    finally:
        del frame


__all__ = ["caller_module_name"]
