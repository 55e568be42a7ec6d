import random
from typing import Optional
from dataclasses import dataclass
from faker import Faker

HOST_KINDS = ("ipv4", "domain")


## === Config Class === ##

@dataclass
class HostConfig:
    """
    Configuration for HostGenerator
        kind: str, "ipv4" for dotted addresses or "domain" for host names
        public_share: float, proportion of public addresses (ipv4 only)
        seed: int, seed for random number generator
    """
    kind: str = "ipv4"
    public_share: float = 0.9
    seed: Optional[int] = None

    def __post_init__(self):
        if self.kind not in HOST_KINDS:
            raise ValueError(f"kind must be one of {HOST_KINDS}")
        if not 0.0 <= self.public_share <= 1.0:
            raise ValueError("public_share must be between 0 and 1")


class HostGenerator:
    """Faker-backed host strings for trie input.

    Dotted addresses share long digit prefixes, so they make bushy tries;
    domain names mostly branch at the root.
    """

    def __init__(self, config: HostConfig):
        self.config = config
        self.rng = random.Random(config.seed)
        self.fake = Faker()
        self.fake.seed_instance(config.seed)

    def single(self):
        if self.config.kind == "domain":
            return self.fake.domain_name()
        if self.rng.random() < self.config.public_share:
            return self.fake.ipv4_public()
        return self.fake.ipv4_private()

    def batch(self, n):
        if n <= 0:
            raise ValueError("n must be positive")
        return [self.single() for _ in range(n)]
