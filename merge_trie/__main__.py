import sys

from merge_trie.cli import main

sys.exit(main())
