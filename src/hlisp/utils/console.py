"""
Logging and Console Utilities.

Routes the ``hlisp`` logger hierarchy through a `rich` console. The console
sits behind a proxy so tests (or an embedding application) can swap in a
recording console with `set_console` and read back what was logged, while
modules keep importing the same `console` object.

Library modules log through ``logging.getLogger(__name__)``; the CLI uses the
`log_*` helpers, which add a status prefix and enable Rich markup.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LOGGER_NAME = "hlisp"

# Between INFO (20) and WARNING (30)
SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "path": "bold blue",
  }
)

logger = logging.getLogger(LOGGER_NAME)


class _ConsoleProxy:
  """
  Stable handle on the active Rich console.

  Attributes:
      _backend (Console): The console output currently goes to.
      _handler (RichHandler): The handler bound to ``_backend``.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME)
    self._handler: RichHandler = self._bind()

  def _bind(self) -> RichHandler:
    """Attaches a fresh RichHandler for the current backend, dropping the previous one."""
    old = getattr(self, "_handler", None)
    if old is not None:
      logger.removeHandler(old)
    handler = RichHandler(console=self._backend, show_time=False, show_path=False, markup=True)
    logger.addHandler(handler)
    if logger.level == logging.NOTSET:
      logger.setLevel(logging.INFO)
    return handler

  def set_backend(self, new_console: Console) -> None:
    """
    Redirects output and logging to another console.

    Args:
        new_console (Console): The console to use from now on.
    """
    self._backend = new_console
    self._handler = self._bind()

  def reset(self) -> None:
    """Restores a standard output console."""
    self.set_backend(Console(theme=_THEME))

  @property
  def backend(self) -> Console:
    """The active console."""
    return self._backend

  def print(self, *args: Any, **kwargs: Any) -> None:
    """Forwards to ``Console.print`` on the active backend."""
    self._backend.print(*args, **kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Injects a console instance for output and logging.

  Args:
      new_console (Console): The configured Rich console to use globally.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """Resets output and logging to standard output."""
  console.reset()


def get_console() -> Console:
  """
  Retrieves the currently active console backend.

  Returns:
      Console: The active Rich Console.
  """
  return console.backend


def set_verbose(verbose: bool) -> None:
  """Switches the ``hlisp`` loggers between DEBUG and INFO."""
  logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def log_info(msg: str) -> None:
  """Logs an informational message."""
  logger.info(f"ℹ️  {msg}", extra={"markup": True})


def log_success(msg: str) -> None:
  """Logs a success message at the SUCCESS level."""
  logger.log(SUCCESS_LEVEL_NUM, f"✅ {msg}", extra={"markup": True})


def log_warning(msg: str) -> None:
  """Logs a warning."""
  logger.warning(f"⚠️  {msg}", extra={"markup": True})


def log_error(msg: str) -> None:
  """Logs an error."""
  logger.error(f"❌ {msg}", extra={"markup": True})
