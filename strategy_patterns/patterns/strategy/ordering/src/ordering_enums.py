from enum import Enum, auto, unique


@unique
class ContextVariant(str, Enum):
    def _generate_next_value_(name, start, count, last_values):
        return name.lower()

    OBJECT_ORIENTED: str = auto()
    FUNCTIONAL: str = auto()
