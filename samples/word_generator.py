import random
import math
from collections import defaultdict

from faker.providers.lorem.en_US import Provider as LoremProvider

# Faker's English lorem vocabulary, deduplicated and kept in its original order
WORD_LIST = list(dict.fromkeys(w for w in LoremProvider.word_list if w))


## Created dictionary for words with identical first letters
## This is to generate word sets that share prefixes in the trie
prefix_bucket = defaultdict(list)
for word in WORD_LIST:
  prefix_bucket[word[:1]].append(word)
prefixes = list(prefix_bucket.keys())
prefix_weights = [len(prefix_bucket[p]) for p in prefixes]


def generate_random_words(num_words, seed=None, unique=False):
  """
  Return n random words from WORD_LIST.
  - unique=False: sample with replacement (allows duplicates)
  - unique=True: sample without replacement (requires n <= len(WORD_LIST))
  """
  if num_words < 1 or (unique is True and num_words > len(WORD_LIST)):
    raise ValueError(f"num_words must be between 1 and {len(WORD_LIST)}")
  rng = random.Random(seed)
  if unique:
    return rng.sample(WORD_LIST, num_words)
  return rng.choices(WORD_LIST, k=num_words)


def _p_eff_log(x, max_mean=100) -> float:
  # Logarithmic mapping of prefix frequency to the chance of staying in a bucket
  if x < 0 or x > 1:
    raise ValueError("prefix_freq must be between 0 and 1")
  x = min(0.999999, x)
  p = 1.0 - math.exp(-math.log(max_mean) * x)
  return min(p, 0.999999)


def gen_words_with_prefix_freq(num_words, prefix_freq=0.0, seed=None, unique=False):
  """Generate words in runs that share a first letter.

  A higher prefix_freq makes longer runs from the same bucket, which gives a
  bushier trie with fewer roots. prefix_freq is in [0, 1] and is applied
  logarithmically.
  """
  p_stay = _p_eff_log(prefix_freq)
  if num_words < 1 or (unique is True and num_words > len(WORD_LIST)):
    raise ValueError(f"num_words must be between 1 and {len(WORD_LIST)}")
  rng = random.Random(seed)

  out = []
  seen = set()
  while len(out) < num_words:
    prefix = rng.choices(prefixes, weights=prefix_weights)[0]
    options = prefix_bucket[prefix]
    if unique:
      options = [w for w in options if w not in seen]
      if not options:
        continue
    while options and len(out) < num_words:
      w = rng.choice(options)
      out.append(w)
      if unique:
        seen.add(w)
        options = [o for o in options if o != w]
      if rng.random() >= p_stay:
        break
  return out
