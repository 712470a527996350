from typing import Protocol, runtime_checkable

from tableacl.auth.models import ExecPlan, RequestContext


@runtime_checkable
class AccessChecker(Protocol):
    """Protocol for a single access policy.

    Several checkers can be registered; a request is granted only if all of
    them grant it.
    """

    def load(self, config: bytes) -> None:
        """
        Parse and load an access configuration.

        Raises:
            AccessCheckError: If the configuration is invalid.
        """
        ...

    def allow(self, context: RequestContext, plan: ExecPlan) -> None:
        """
        Check access for a context on a plan. Returns None when allowed.

        Raises:
            AccessDeniedError: With the reason access is denied.
        """
        ...
