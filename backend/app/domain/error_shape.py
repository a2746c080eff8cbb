from enum import Enum


class ErrorShape(str, Enum):
    basic = "basic"
    complete = "complete"
