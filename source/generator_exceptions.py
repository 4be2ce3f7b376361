#
# 20261018
#
# Errors raised while generating a password
#


class GenerationError(Exception):
    pass


class InvalidConfigurationError(GenerationError):
    NON_POSITIVE_LENGTH = "NON_POSITIVE_LENGTH"
    LENGTH_BELOW_MANDATORY_COUNT = "LENGTH_BELOW_MANDATORY_COUNT"
    EMPTY_MANDATORY_SET = "EMPTY_MANDATORY_SET"
    UNKNOWN_BUILTIN_SET = "UNKNOWN_BUILTIN_SET"
    INVALID_LENGTH = "INVALID_LENGTH"

    def __init__(self, message: str, reason: str):
        super().__init__(message)
        self.reason = reason


class EmptyPoolError(GenerationError):
    pass


class RandomSourceError(GenerationError):
    pass
