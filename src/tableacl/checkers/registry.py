from __future__ import annotations

from contextlib import nullcontext
from typing import Iterable, List, Tuple

from tableacl.auth.models import ExecPlan, RequestContext
from tableacl.common.errors import AccessDeniedError
from tableacl.common.logger import get_logger, trace_context
from .interfaces import AccessChecker

logger = get_logger(__name__)


class AccessCheckerRegistry:
    """
    Ordered collection of AccessCheckers.

    Access is granted only if every registered checker grants it, and is
    granted unconditionally when no checker is registered. Checkers are
    registered once at startup; ``register`` is not synchronized against
    concurrent ``allow`` calls.
    """

    def __init__(self, checkers: Iterable[AccessChecker] = ()):
        self._checkers: List[AccessChecker] = []
        for checker in checkers:
            self.register(checker)

    def register(self, checker: AccessChecker) -> None:
        """Appends a checker. Checkers run in registration order."""
        self._checkers.append(checker)
        logger.info(f"Registered access checker {type(checker).__name__}")

    @property
    def checkers(self) -> Tuple[AccessChecker, ...]:
        return tuple(self._checkers)

    def __len__(self) -> int:
        return len(self._checkers)

    def allow(self, context: RequestContext, plan: ExecPlan) -> None:
        """
        Runs every registered checker, stopping at the first refusal.

        Raises:
            AccessCheckError: The first error raised by a checker.
        """
        scope = trace_context(context.trace_id) if context.trace_id else nullcontext()
        with scope:
            for checker in self._checkers:
                checker.allow(context, plan)

    def is_allowed(self, context: RequestContext, plan: ExecPlan) -> bool:
        """Boolean form of ``allow``. Only denials map to False."""
        try:
            self.allow(context, plan)
        except AccessDeniedError:
            return False
        return True
