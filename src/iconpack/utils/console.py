"""
Logging and Console Utilities.

Routes the package's log records through a `rich.logging.RichHandler` bound to
a swappable Rich `Console`. Callers embedding the generator (build scripts,
tests) can redirect output with `set_console` without touching the modules
that log.

Attributes:
    console (_ConsoleProxy): Stable reference to the active Rich Console.
    logger (logging.Logger): The package logger all helpers write to.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

# Between INFO and WARNING
SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

LOGGER_NAME = "iconpack"
logger = logging.getLogger(LOGGER_NAME)

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "path": "bold blue",
    "symbol": "bold magenta",
  }
)


class _ConsoleProxy:
  """
  Forwards printing to a replaceable Rich `Console` backend.

  Swapping the backend also rebinds the package logger's handler so log
  records follow the console.

  Attributes:
      _backend (Console): The active Rich Console instance.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME)
    self._configure_logging()

  def set_backend(self, new_console: Console) -> None:
    """
    Args:
        new_console (Console): The new Rich Console instance to use.
    """
    self._backend = new_console
    self._configure_logging()

  def reset(self) -> None:
    """Restores a fresh standard output console."""
    self._backend = Console(theme=_THEME)
    self._configure_logging()

  @property
  def backend(self) -> Console:
    return self._backend

  def _configure_logging(self) -> None:
    for handler in list(logger.handlers):
      if isinstance(handler, RichHandler):
        logger.removeHandler(handler)

    rich_handler = RichHandler(
      console=self._backend,
      show_time=False,
      show_path=False,
      markup=True,
      rich_tracebacks=True,
    )
    logger.setLevel(logging.INFO)
    logger.addHandler(rich_handler)
    logger.propagate = False

  def print(self, *args: Any, **kwargs: Any) -> None:
    self._backend.print(*args, **kwargs)

  def export_text(self, **kwargs: Any) -> str:
    """
    Returns recorded output (requires a console created with ``record=True``).
    """
    return self._backend.export_text(**kwargs)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Injects a console instance for both printing and logging.

  Args:
      new_console (Console): The configured Rich console to use.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  console.reset()


def get_console() -> Console:
  return console.backend


def log_info(msg: str) -> None:
  """
  Args:
      msg (str): The message content. May include rich markup.
  """
  logger.info(f"ℹ️  {msg}", extra={"markup": True})


def log_success(msg: str) -> None:
  logger.log(SUCCESS_LEVEL_NUM, f"✅ {msg}", extra={"markup": True})


def log_warning(msg: str) -> None:
  logger.warning(f"⚠️  {msg}", extra={"markup": True})


def log_error(msg: str) -> None:
  logger.error(f"❌ {msg}", extra={"markup": True})
