import json
import argparse
import logging
from abc import abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Callable, Any, Iterable, NamedTuple

import yaml

import strategy_patterns.common.base.strategy as strategy
import strategy_patterns.patterns.strategy.ordering.src.ordering_constants as constants
from strategy_patterns.patterns.strategy.ordering.src.ordering_enums import (
    ContextVariant,
)

OrderFunction = Callable[[Iterable[str]], list[str]]


@dataclass
class JobArguments:
    job_name: str
    data: list[str]
    variant: ContextVariant
    config: Optional[Path] = None

    def __post_init__(self):
        # Accept the plain string value as well as the enum member
        self.variant = ContextVariant(self.variant)

    @staticmethod
    def _build_parser():
        # Initialize parser
        parser = argparse.ArgumentParser(
            description="Strategy pattern ordering demonstration."
        )

        # Add arguments
        parser.add_argument(
            "--job_name", "-j",
            type=str,
            default=constants.DEFAULT_JOB_NAME,
            required=False,
            help="Name of the job."
        )
        parser.add_argument(
            "--data", "-d",
            type=parse_data,
            default=None,
            required=False,
            help="Comma-separated strings to order e.g. 'd,b,e,a,c'"
        )
        parser.add_argument(
            "--variant", "-v",
            type=ContextVariant,
            choices=list(ContextVariant),
            default=None,
            required=False,
            help="Context implementation to use."
        )
        parser.add_argument(
            "--config", "-c",
            type=Path,
            default=None,
            required=False,
            help="Path to a YAML job configuration."
        )

        return parser

    @staticmethod
    def _log_args(args: argparse.Namespace):
        # Map namespace into dictionary
        args_to_dict = {arg: value for arg, value in vars(args).items()}
        logging.info(json.dumps(args_to_dict, indent=4, default=str))

    @classmethod
    def from_args(cls, args: Optional[list[str]] = None) -> "JobArguments":
        """
        Parses CLI arguments, falling back to the YAML configuration and then
        to the module defaults for anything not given on the command line.
        """
        parser = cls._build_parser()
        parsed = parser.parse_args(args)

        logging.info("Parsed arguments:")
        cls._log_args(parsed)

        configuration: dict[str, Any] = (
            load_configuration(parsed.config) if parsed.config else {}
        )

        data = parsed.data
        if data is None:
            data = configuration.get("data", list(constants.DEFAULT_DATA))

        variant = parsed.variant
        if variant is None:
            variant = configuration.get("variant", constants.DEFAULT_VARIANT)

        return cls(job_name=parsed.job_name,
                   data=data,
                   variant=variant,
                   config=parsed.config)


def parse_data(value: str) -> list[str]:
    """Split a comma-separated CLI value into its items. Blank means empty."""
    if not value.strip():
        return []

    return [item.strip() for item in value.split(",")]


def _configuration_from_yaml(config_path: Path) -> Any:
    try:
        f = open(config_path, "r", encoding="utf-8")
    except FileNotFoundError:
        logging.error(f"Configuration file {config_path} not found.")
        raise
    else:
        with f:
            try:
                return yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Configuration at {config_path} is not "
                                 f"valid YAML.") from e


def load_configuration(config_path: Path) -> dict[str, Any]:
    """
    Read and validate the YAML job configuration.

    Args:
        config_path (Path): Location of the YAML file.

    Returns:
        dict[str, Any]: The validated configuration. `data` is a list of
                        strings and `variant` a ContextVariant; either key
                        may be absent.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid YAML, is not a mapping, holds
                    unknown keys, or holds values of the wrong shape.
    """
    raw = _configuration_from_yaml(config_path)

    # An empty file is an empty configuration
    if raw is None:
        return {}

    if not isinstance(raw, dict):
        raise ValueError(f"Configuration at {config_path} must be a mapping.")

    unknown = set(raw) - constants.CONFIGURATION_KEYS
    if unknown:
        raise ValueError(f"Unknown configuration keys: {sorted(unknown, key=str)}")

    configuration: dict[str, Any] = {}

    if "data" in raw:
        data = raw["data"]
        if (not isinstance(data, list)
                or not all(isinstance(item, str) for item in data)):
            raise ValueError("Configuration `data` must be a list of strings.")
        configuration["data"] = data

    if "variant" in raw:
        configuration["variant"] = ContextVariant(raw["variant"])

    logging.info(f"Loaded configuration from {config_path}: {configuration}")

    return configuration


# ============================================================================
# Object-oriented strategies
# ============================================================================
class OrderingStrategy(strategy.Strategy):
    """
    Common interface of every ordering algorithm.

    Strategies never mutate the input; they always return a new list.
    """

    @abstractmethod
    def order(self, data: Iterable[str]) -> list[str]:
        pass

    def execute(self, data: Iterable[str]) -> list[str]:
        return self.order(data)


class SortStrategy(OrderingStrategy):
    def order(self, data: Iterable[str]) -> list[str]:
        return sorted(data)


class ReverseStrategy(OrderingStrategy):
    def order(self, data: Iterable[str]) -> list[str]:
        return list(reversed(list(data)))


class OrderingContext(strategy.Context):
    """
    Orders data with whichever OrderingStrategy is currently installed.

    The context neither knows nor cares which concrete strategy it holds.
    """

    @staticmethod
    def _validate(strategy: OrderingStrategy) -> OrderingStrategy:
        if not isinstance(strategy, OrderingStrategy):
            raise TypeError(f"Expected an OrderingStrategy instance, got "
                            f"`{type(strategy).__name__}`.")
        return strategy

    def do_order(self, data: Iterable[str]) -> list[str]:
        return self.execute_strategy(data)


# ============================================================================
# Functional strategies
# ============================================================================
def sort_order(data: Iterable[str]) -> list[str]:
    return sorted(data)


def reverse_order(data: Iterable[str]) -> list[str]:
    return list(reversed(list(data)))


class OrderingFunctions(NamedTuple):
    set_strategy: Callable[[OrderFunction], None]
    do_order: OrderFunction


def _validate_order_function(order_function: OrderFunction) -> OrderFunction:
    if not callable(order_function):
        raise TypeError(f"Expected a callable strategy, got "
                        f"`{type(order_function).__name__}`.")
    return order_function


def ordering_context(order_function: OrderFunction) -> OrderingFunctions:
    """
    Build a context out of two closures sharing one strategy reference.

    Args:
        order_function (OrderFunction): Initial strategy; any callable taking
                                        the data and returning a list.

    Returns:
        OrderingFunctions: `set_strategy` replaces the captured strategy and
                           `do_order` delegates to whichever is current.

    Raises:
        TypeError: If the strategy is not callable.
    """
    _strategy = _validate_order_function(order_function)

    def set_strategy(new_order_function: OrderFunction) -> None:
        nonlocal _strategy
        _strategy = _validate_order_function(new_order_function)
        logging.debug(f"Strategy set to `{getattr(_strategy, '__name__', _strategy)}`.")

    def do_order(data: Iterable[str]) -> list[str]:
        return _strategy(data)

    return OrderingFunctions(set_strategy=set_strategy, do_order=do_order)
