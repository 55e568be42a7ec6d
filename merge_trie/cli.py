import argparse
import logging
import sys

from merge_trie.config import DotConfig, Settings
from merge_trie.dot import RANKDIRS, SentinelPolicy, write_dot
from merge_trie.logging_config import configure_logging
from merge_trie.node import from_string
from merge_trie.trie import Trie

logger = logging.getLogger("merge-trie")


def build_parser():
  ap = argparse.ArgumentParser(
      prog="merge-trie",
      description="Build a prefix tree from input lines and print it as Graphviz DOT.",
  )
  ap.add_argument("files", nargs="*", metavar="FILE",
                  help="Input files, one word per line. Reads stdin when omitted or '-'.")
  ap.add_argument("--rankdir", type=str.upper, choices=RANKDIRS, default=None,
                  help="Graph layout direction (default: $MERGE_TRIE_RANKDIR or LR).")
  ap.add_argument("--sentinel-policy", choices=[p.value for p in SentinelPolicy], default="stop",
                  help="Stop at a node's first end-of-word child, or skip it and continue.")
  ap.add_argument("--keep-case", action="store_true",
                  help="Insert lines as-is instead of folding them to upper case.")
  ap.add_argument("--log-level", type=str, default=None,
                  help="Logging level for diagnostics on stderr (default: $LOG_LEVEL or INFO).")
  return ap


def read_into(trie, stream, config):
  """Insert every line of `stream` into `trie`; return the number of lines read."""
  n = 0
  for line in stream:
    trie.insert(from_string(config.normalize(line)))
    n += 1
  return n


def build_trie(files, config, stdin=None):
  stdin = sys.stdin if stdin is None else stdin
  trie = Trie()
  for name in files or ["-"]:
    if name == "-":
      n = read_into(trie, stdin, config)
    else:
      with open(name, "r", encoding="utf-8") as f:
        n = read_into(trie, f, config)
    logger.debug("Read %d lines from %s", n, "<stdin>" if name == "-" else name)
  return trie


def main(argv=None, stdin=None, stdout=None):
  parser = build_parser()
  args = parser.parse_args(argv)
  settings = Settings()
  configure_logging(args.log_level or settings.LOG_LEVEL)
  stdout = sys.stdout if stdout is None else stdout

  try:
    config = DotConfig.from_env(
        settings,
        rankdir=args.rankdir,
        sentinel_policy=args.sentinel_policy,
        uppercase=not args.keep_case,
    )
  except ValueError as e:
    parser.error(f"invalid configuration from environment: {e}")

  try:
    trie = build_trie(args.files, config, stdin=stdin)
  except (OSError, UnicodeDecodeError) as e:
    logger.error("Error occurred while reading input: %s", e)
    return 1

  logger.info("Built trie with %d roots and %d nodes", len(trie), trie.count_nodes())
  write_dot(trie, stdout, rankdir=config.rankdir, policy=config.sentinel_policy)
  return 0


if __name__ == "__main__":
  sys.exit(main())
