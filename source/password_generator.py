"""
20261018
Generate a random password with a cryptographically secure random source.

The password is built in three phases on a buffer of the requested length:
one character from every mandatory set, the remaining positions from the
pool (discretionary set plus all mandatory sets) and finally an unbiased
Fisher-Yates shuffle over the whole buffer.
"""

import logging
import secrets

from generator_config import GeneratorConfig
from generator_exceptions import EmptyPoolError, RandomSourceError


def secure_random_index(upper_bound: int) -> int:
    """Return a uniformly distributed integer in [0, upper_bound)."""
    if upper_bound <= 0:
        raise ValueError("Upper bound must be positive, got " + str(upper_bound))
    try:
        return secrets.randbelow(upper_bound)
    except (OSError, NotImplementedError) as e:
        raise RandomSourceError("Secure random source failed: " + str(e)) from e


def select_mandatory(buffer: list, mandatory_sets, random_index=secure_random_index) -> int:
    position = 0
    for mandatory_set in mandatory_sets:
        buffer[position] = mandatory_set[random_index(len(mandatory_set))]
        position += 1
    return position


def build_pool(discretionary_set: str, mandatory_sets) -> str:
    return discretionary_set + "".join(mandatory_sets)


def fill_from_pool(buffer: list, start: int, pool: str, random_index=secure_random_index):
    if start >= len(buffer):
        return
    if len(pool) == 0:
        raise EmptyPoolError("Need some characters to select from.")
    for i in range(start, len(buffer)):
        buffer[i] = pool[random_index(len(pool))]


def secure_shuffle(buffer: list, random_index=secure_random_index):
    buffer_length = len(buffer)
    for i in range(buffer_length - 1):
        j = random_index(buffer_length - i)
        buffer[i], buffer[i + j] = buffer[i + j], buffer[i]


def generate(config: GeneratorConfig, random_index=secure_random_index) -> str:
    config.validate()

    buffer = [""] * config.length
    seeded = select_mandatory(buffer, config.mandatory_sets, random_index)
    logging.debug("Selected " + str(seeded) + " mandatory char(s).")

    pool = build_pool(config.discretionary_set, config.mandatory_sets)
    fill_from_pool(buffer, seeded, pool, random_index)
    logging.debug("Filled " + str(config.length - seeded) + " position(s) from a pool of " +
                  str(len(pool)) + " char(s).")

    secure_shuffle(buffer, random_index)
    return "".join(buffer)
