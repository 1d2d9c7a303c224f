from enum import Enum, IntEnum


class CommandType(str, Enum):
    PROVISION = "provision"
    SUGGEST = "suggest"
    CHECK_USERNAME = "check-username"
    CHECK_PASSWORD = "check-password"
    VERIFY = "verify"

    def __str__(self):
        return self.value


class ReturnCode(IntEnum):
    SUCCESS = 0
    INVALID_CREDENTIAL = 1
    STORAGE_ERROR = 2
    HASHING_ERROR = 3
    RANDOMNESS_ERROR = 4
    CONFIG_ERROR = 5
    ABORTED = 6
    VERIFICATION_FAILED = 7
