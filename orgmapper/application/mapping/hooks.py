"""Before/after mapping hooks."""

import enum
import logging
from collections.abc import Callable, Iterable
from typing import Any

from orgmapper.application.exceptions import HookExecutionError
from orgmapper.application.mapping.target import MappingTarget

logger = logging.getLogger(__name__)

MappingHook = Callable[[Any, MappingTarget], None]


class HookPhase(str, enum.Enum):
    """
    Points at which hooks run during a single mapping call.

    Attributes:
        BEFORE: On the empty target, before declared fields are copied
        AFTER: After every declared field has been copied
    """

    BEFORE = "before"
    AFTER = "after"


def hook_name(hook: MappingHook) -> str:
    return getattr(hook, "__qualname__", None) or repr(hook)


def run_hooks(
    phase: HookPhase,
    hooks: Iterable[MappingHook],
    source: Any,
    target: MappingTarget,
) -> None:
    """
    Run hooks in order against the in-progress target.

    Raises:
        HookExecutionError: If a hook raises; the original exception is
            chained as the cause
    """
    for hook in hooks:
        try:
            hook(source, target)
        except Exception as e:
            name = hook_name(hook)
            logger.error(
                f"{phase.value.capitalize()}-mapping hook {name} failed "
                f"for {type(source).__name__}: {e}"
            )
            raise HookExecutionError(phase.value, name, type(source), str(e)) from e
