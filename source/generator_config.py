#
# 20261018
#
# Configuration of a password generation run
#
import logging
import string
from dataclasses import dataclass

from generator_exceptions import InvalidConfigurationError

#
# GLOBAL VARIABLES
#
LOWERS = string.ascii_lowercase
UPPERS = string.ascii_uppercase
DIGITS = string.digits

FLAG_LOWER = "l"
FLAG_UPPER = "u"
FLAG_DIGIT = "d"

# order in which built-in sets are added, independent of the selector order
BUILTIN_SETS = [
    (FLAG_LOWER, LOWERS),
    (FLAG_UPPER, UPPERS),
    (FLAG_DIGIT, DIGITS),
]

DEFAULT_LENGTH = 12
DEFAULT_BUILTIN_SELECTOR = FLAG_LOWER + FLAG_UPPER + FLAG_DIGIT


@dataclass(frozen=True)
class GeneratorConfig:
    length: int
    mandatory_sets: tuple = ()
    discretionary_set: str = ""

    def validate(self):
        """
        Check the constraints that must hold before any random draw is made.
        Raises InvalidConfigurationError naming the violated constraint.
        """
        if self.length <= 0:
            raise InvalidConfigurationError("The length of the password must be positive.",
                                            InvalidConfigurationError.NON_POSITIVE_LENGTH)
        if self.length < len(self.mandatory_sets):
            raise InvalidConfigurationError("The length of the password (" + str(self.length) +
                                            ") must be at least the number of mandatory sets (" +
                                            str(len(self.mandatory_sets)) + ").",
                                            InvalidConfigurationError.LENGTH_BELOW_MANDATORY_COUNT)
        for mandatory_set in self.mandatory_sets:
            if mandatory_set == "":
                raise InvalidConfigurationError("A mandatory set cannot be empty.",
                                                InvalidConfigurationError.EMPTY_MANDATORY_SET)


class GeneratorConfigBuilder:
    """
    Collects the options of the command line (or any other caller) and
    produces a validated GeneratorConfig. Mandatory sets given more than
    once are kept as independent sets.
    """

    def __init__(self, length: int = DEFAULT_LENGTH):
        self._length = length
        self._mandatory_sets = []
        self._discretionary_set = ""

    def set_length(self, length: int):
        self._length = length
        return self

    def add_builtin_sets(self, selector: str):
        for char in selector:
            if char not in (FLAG_LOWER, FLAG_UPPER, FLAG_DIGIT):
                raise InvalidConfigurationError("Unknown built-in set '" + char + "'. Use a combination of '" +
                                                FLAG_LOWER + "' (lower-case), '" + FLAG_UPPER + "' (upper-case) " +
                                                "and '" + FLAG_DIGIT + "' (digits).",
                                                InvalidConfigurationError.UNKNOWN_BUILTIN_SET)
        for flag, charset in BUILTIN_SETS:
            if flag in selector:
                self._mandatory_sets.append(charset)
        return self

    def add_mandatory_set(self, mandatory_set: str):
        if mandatory_set is None or mandatory_set == "":
            raise InvalidConfigurationError("A mandatory set cannot be empty.",
                                            InvalidConfigurationError.EMPTY_MANDATORY_SET)
        self._mandatory_sets.append(mandatory_set)
        return self

    def set_discretionary_set(self, discretionary_set: str):
        self._discretionary_set = discretionary_set or ""
        return self

    def build(self) -> GeneratorConfig:
        config = GeneratorConfig(length=self._length,
                                 mandatory_sets=tuple(self._mandatory_sets),
                                 discretionary_set=self._discretionary_set)
        config.validate()
        logging.debug("Configuration: length " + str(config.length) + ", " +
                      str(len(config.mandatory_sets)) + " mandatory set(s), " +
                      str(len(config.discretionary_set)) + " discretionary char(s).")
        return config


def parse_length(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise InvalidConfigurationError("Invalid password length: '" + str(value) + "'",
                                        InvalidConfigurationError.INVALID_LENGTH)
