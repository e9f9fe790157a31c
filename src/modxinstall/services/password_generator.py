"""Random manager password generation."""

import hashlib
import random
import time
from typing import Optional

from modxinstall.constants import GENERATED_PASSWORD_LENGTH


def generate_password(rng: Optional[random.Random] = None) -> str:
    """Build a throwaway installer password of 8 to 15 hex characters.

    This is a usability default for the first manager login, not a security
    primitive: the generator is seeded from the clock.
    """
    seed = time.time_ns()
    rng = rng or random.Random(seed)

    characters = list(hashlib.md5(str(seed).encode("ascii")).hexdigest())
    rng.shuffle(characters)

    min_length, max_length = GENERATED_PASSWORD_LENGTH
    return "".join(characters[: rng.randint(min_length, max_length)])
