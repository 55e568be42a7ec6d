import os
from dataclasses import dataclass

from merge_trie.dot import SentinelPolicy, check_rankdir
from merge_trie.trie import normalize_line


## === Environment === ##

class Settings:
  """Environment-backed settings, read when the object is created."""

  def __init__(self):
    # Logging
    self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Rendering
    self.RANKDIR: str = os.getenv("MERGE_TRIE_RANKDIR", "LR").strip().upper()


## === Config Class === ##

@dataclass
class DotConfig:
  """
  Configuration for building and rendering a trie
      rankdir: str, Graphviz layout direction (LR, RL, TB or BT)
      sentinel_policy: SentinelPolicy | str, what to do at a sentinel child
      uppercase: bool, fold input lines to upper case before insertion
  """
  rankdir: str = "LR"
  sentinel_policy: SentinelPolicy = SentinelPolicy.STOP
  uppercase: bool = True

  def __post_init__(self):
    self.rankdir = check_rankdir(str(self.rankdir).upper())
    try:
      self.sentinel_policy = SentinelPolicy(self.sentinel_policy)
    except ValueError:
      choices = [p.value for p in SentinelPolicy]
      raise ValueError(f"sentinel_policy must be one of {choices}, got {self.sentinel_policy!r}") from None

  def normalize(self, line):
    return normalize_line(line, uppercase=self.uppercase)

  @classmethod
  def from_env(cls, settings=None, **overrides):
    """Build a config from `Settings`, with keyword overrides winning.

    Raises
    ------
    ValueError
        If the environment or an override holds an invalid value.
    """
    settings = Settings() if settings is None else settings
    params = {"rankdir": settings.RANKDIR}
    params.update({k: v for k, v in overrides.items() if v is not None})
    return cls(**params)
