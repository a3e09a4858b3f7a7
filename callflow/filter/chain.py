# Filter chain that dispatches a call through an ordered sequence of stages.

import logging
from typing import Callable, Optional, Sequence

from callflow.core.call import Call
from callflow.core.handler import Handler, Stage

logger = logging.getLogger(__name__)


class FilterChain:
    """
    Dispatches a call through an ordered sequence of stages before the target.

    Each stage receives the call and a `next_handler` that runs the remaining
    stages and finally the target. A stage's post-processing therefore runs only
    once everything after it has returned. Faults propagate out of the chain
    unless a stage contains them.

    Attributes:
        stages (Sequence[Stage]): The ordered stages.
        target (Handler): The handler reached after the last stage.
        name (str): The name of this chain, used for logging.
    """

    def __init__(self, stages: Sequence[Stage], target: Handler, name: Optional[str] = None):
        if not stages:
            logger.warning(f"Initializing FilterChain '{name}' with an empty stage list.")
        self.stages = list(stages)
        self.target = target
        self.name = name or self.__class__.__name__

    def __call__(self, call: Call) -> None:
        self.handle(call)

    def handle(self, call: Call) -> None:
        """Runs the call through every stage, then the target."""
        logger.debug(f"[{call.call_id}] Entering FilterChain: {self.name}")
        self._dispatch(0, call)
        logger.debug(f"[{call.call_id}] Exiting FilterChain: {self.name}")

    def _dispatch(self, index: int, call: Call) -> None:
        if index == len(self.stages):
            self.target(call)
            return

        stage = self.stages[index]
        logger.debug(
            f"[{call.call_id}] Applying stage {index + 1}/{len(self.stages)} in {self.name}: {_stage_name(stage)}"
        )
        stage(call, lambda c: self._dispatch(index + 1, c))

    def __repr__(self) -> str:
        stage_list_str = ", ".join(_stage_name(s) for s in self.stages)
        return f"<{self.name}(stages=[{stage_list_str}])>"


def filter_stage(
    before: Optional[Callable[[Call], None]] = None,
    after: Optional[Callable[[Call], None]] = None,
) -> Stage:
    """
    Builds a stage from optional hooks run before and after the rest of the chain.

    `after` only runs when the rest of the chain returned normally.

    Args:
        before: Called with the call before delegating.
        after: Called with the call once delegation has returned.

    Returns:
        A stage usable in a FilterChain.
    """

    def stage(call: Call, next_handler: Handler) -> None:
        if before is not None:
            before(call)
        next_handler(call)
        if after is not None:
            after(call)

    return stage


def _stage_name(stage: Stage) -> str:
    return getattr(stage, "name", None) or getattr(stage, "__name__", None) or stage.__class__.__name__
