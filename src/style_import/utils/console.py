"""
Console output and logging for style-import.

Everything user-facing goes through the standard `logging` module, rendered by a
`rich.logging.RichHandler` attached to the root logger. The module-level
`console` is a proxy whose backend `set_console` can replace, which is how the
tests capture CLI tables and log lines together.

Transform internals trace through the ``style_import`` logger at DEBUG level
(`log_debug`); enable it with ``logging.getLogger("style_import").setLevel(logging.DEBUG)``.
"""

import logging
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

logger = logging.getLogger("style_import")

_THEME = Theme({"logging.level.success": "green", "path": "bold blue"})


class _ConsoleProxy:
  """
  Stable handle on the active `rich.console.Console`.

  CLI handlers print through it and the ``RichHandler`` on the root logger
  writes to it, so swapping the backend redirects both tables and log lines.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME)
    self._install_handler()

  def use(self, backend: Optional[Console] = None) -> None:
    """
    Switches output to `backend`, or to a fresh stdout console if None.

    Args:
        backend (Optional[Console]): Console receiving prints and log records.
    """
    self._backend = backend if backend is not None else Console(theme=_THEME)
    self._install_handler()

  def _install_handler(self) -> None:
    root_logger = logging.getLogger()
    for handler in [h for h in root_logger.handlers if isinstance(h, RichHandler)]:
      root_logger.removeHandler(handler)

    root_logger.setLevel(logging.INFO)
    root_logger.addHandler(
      RichHandler(
        console=self._backend,
        show_time=False,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
      )
    )

  def print(self, *args: Any, **kwargs: Any) -> None:
    self._backend.print(*args, **kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """Routes CLI output and log records to `new_console` (e.g. a recording console in tests)."""
  console.use(new_console)


def reset_console() -> None:
  console.use()


def log_debug(msg: str, *args: Any) -> None:
  """
  Emits a transform trace message on the ``style_import`` logger.

  Args:
      msg (str): Format string, %-style like `logging`.
      *args: Values interpolated lazily into `msg`.
  """
  logger.debug(msg, *args)


def log_info(msg: str) -> None:
  """
  Logs an informational message via standard logging.

  Args:
      msg (str): The message content. Can include rich markup like [bold].
  """
  logging.info(f"ℹ️  {msg}", extra={"markup": True})


def log_success(msg: str) -> None:
  logging.log(SUCCESS_LEVEL_NUM, f"✅ {msg}", extra={"markup": True})


def log_warning(msg: str) -> None:
  logging.warning(f"⚠️  {msg}", extra={"markup": True})


def log_error(msg: str) -> None:
  logging.error(f"❌ {msg}", extra={"markup": True})
