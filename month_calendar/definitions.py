from enum import StrEnum, auto


class Tag(StrEnum):
    CALENDAR = auto()
    HEALTH = auto()
