from datetime import datetime

FIXED_NOW = datetime(2024, 1, 15, 10, 30, 0, 123456)
FIXED_TIMESTAMP = "2024-01-15T10:30:00.123456"


def fixed_clock() -> datetime:
    return FIXED_NOW


def chain(error: BaseException, cause: BaseException | None) -> BaseException:
    error.__cause__ = cause
    return error
