import logging
from typing import Any

from ulid import ULID

import strategy_patterns.patterns.strategy.ordering.src.ordering_utilities as utilities
from strategy_patterns.patterns.strategy.ordering.src.ordering_enums import (
    ContextVariant,
)


class OrderingJob:
    """
    Client code of the pattern: chooses the concrete strategies and hands
    them to a context. The client must know how the strategies differ in
    order to pick one; the context does not.
    """

    def __init__(self, job_args: utilities.JobArguments):
        self._job_args: utilities.JobArguments = job_args
        self.id: ULID = ULID()

    @property
    def variant(self) -> ContextVariant:
        return self._job_args.variant

    def _strategies(self) -> tuple[Any, Any]:
        """Return the (sort, reverse) strategies for the configured variant."""
        if self.variant is ContextVariant.FUNCTIONAL:
            return utilities.sort_order, utilities.reverse_order

        return utilities.SortStrategy(), utilities.ReverseStrategy()

    def _build_context(self, initial_strategy: Any):
        if self.variant is ContextVariant.FUNCTIONAL:
            return utilities.ordering_context(initial_strategy)

        return utilities.OrderingContext(initial_strategy)

    @staticmethod
    def _order(context, data: list[str]) -> list[str]:
        logging.info("Context: Sorting data using some strategy; which one "
                     "and how it works is not its concern.")
        result = context.do_order(data)
        logging.info(f"Result: {result}")

        return result

    def run(self) -> dict[str, list[str]]:
        logging.info(f"Run `{self.id}` of `{self._job_args.job_name}` with "
                     f"the `{self.variant.value}` context.")
        data = list(self._job_args.data)
        sort_strategy, reverse_strategy = self._strategies()
        results: dict[str, list[str]] = {}

        logging.info("Client: Strategy is set to normal sorting.")
        context = self._build_context(sort_strategy)
        results["sort"] = self._order(context, data)

        logging.info("Client: Strategy is set to reverse sorting.")
        context.set_strategy(reverse_strategy)
        results["reverse"] = self._order(context, data)

        return results
