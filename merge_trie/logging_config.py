import logging
import sys


def resolve_level(level) -> int:
  """Map a level name such as "debug" to its `logging` constant; unknown names give INFO."""
  value = getattr(logging, str(level).upper(), None)
  return value if isinstance(value, int) else logging.INFO


def configure_logging(level) -> None:
  logging.basicConfig(
      level=resolve_level(level),
      stream=sys.stderr,
      format="%(asctime)s %(levelname)s %(name)s: %(message)s",
  )
