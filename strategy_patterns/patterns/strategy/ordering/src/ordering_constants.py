from strategy_patterns.patterns.strategy.ordering.src.ordering_enums import (
    ContextVariant,
)

DEFAULT_JOB_NAME: str = "ordering"
DEFAULT_DATA: tuple[str, ...] = ("a", "b", "c", "d", "e")
DEFAULT_VARIANT: ContextVariant = ContextVariant.OBJECT_ORIENTED

# Keys accepted in the YAML job configuration
CONFIGURATION_KEYS: frozenset[str] = frozenset({"data", "variant"})
