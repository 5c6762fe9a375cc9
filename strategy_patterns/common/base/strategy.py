import logging
from abc import ABC, abstractmethod
from typing import Any


class Strategy(ABC):
    @abstractmethod
    def execute(self, *args, **kwargs) -> Any:
        """
        Execute the algorithm defined by the concrete strategy.

        Args:
            *args: Positional arguments.
            **kwargs: Keyword arguments.

        Returns:
            Any: The result of the strategy execution.
        """
        pass


class Context:
    """
    Holds a reference to exactly one Strategy and delegates work to it.

    The context does not know which concrete strategy is installed; it only
    relies on the `Strategy.execute` interface. The reference can be replaced
    at any time and the next delegation uses the new strategy.
    """

    def __init__(self, strategy: Strategy):
        self._strategy: Strategy = self._validate(strategy)

    @staticmethod
    def _validate(strategy: Strategy) -> Strategy:
        if not isinstance(strategy, Strategy):
            raise TypeError(f"Expected a Strategy instance, got "
                            f"`{type(strategy).__name__}`.")
        return strategy

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: Strategy):
        self._strategy = self._validate(strategy)
        logging.debug(f"Strategy set to `{type(strategy).__name__}`.")

    def set_strategy(self, strategy: Strategy) -> None:
        self.strategy = strategy

    def execute_strategy(self, *args, **kwargs) -> Any:
        logging.debug(f"Delegating to `{type(self._strategy).__name__}`.")
        return self._strategy.execute(*args, **kwargs)
