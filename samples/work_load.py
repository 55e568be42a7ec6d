from samples.host_generator import HostConfig, HostGenerator
from samples.word_generator import generate_random_words, gen_words_with_prefix_freq


class WorkLoad:
    """Sample input sets for building tries."""

    def __init__(self, seed=None):
        self.seed = seed

    def words(self, num_words, p_freq=0, unique=False):
        if p_freq > 0:
            return gen_words_with_prefix_freq(num_words, p_freq, self.seed, unique)
        return generate_random_words(num_words, self.seed, unique)

    def hosts(self, num_hosts, kind="ipv4"):
        return HostGenerator(HostConfig(kind=kind, seed=self.seed)).batch(num_hosts)
