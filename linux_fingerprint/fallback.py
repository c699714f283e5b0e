import logging
from typing import Callable, Iterable, Tuple

logger = logging.getLogger(__name__)

Resolver = Callable[[], str]
Step = Tuple[str, Resolver]

def first_resolved(steps: Iterable[Step], what: str = "value") -> str:
    """
    Evaluate resolver steps in order and return the first non-empty result.

    Steps are called lazily: once one yields a value the rest are never
    invoked. A step that raises counts as having yielded nothing.
    """
    for name, resolve in steps:
        try:
            value = resolve()
        except Exception as e:
            logger.warning("Unexpected error resolving %s via %s: %s", what, name, e)
            continue

        if value:
            logger.debug("Resolved %s via %s", what, name)
            return value

        logger.debug("No %s from %s", what, name)

    return ""
