# tableacl package

from .context import AccessControlContext
from .checkers import AccessChecker, AccessCheckerRegistry, TableAccessChecker, LoadMode

# Also expose core models, roles and errors
from .auth import Role, PlanType, RequestContext, ExecPlan, role_by_name, role_by_plan_type
from .common.errors import (
    ErrorCode,
    AccessCheckError,
    ConfigParseError,
    PatternCompileError,
    UnknownRoleError,
    UnmappedPlanTypeError,
    AccessDeniedError,
)

__all__ = [
    "AccessControlContext",
    "AccessChecker",
    "AccessCheckerRegistry",
    "TableAccessChecker",
    "LoadMode",
    "Role",
    "PlanType",
    "RequestContext",
    "ExecPlan",
    "role_by_name",
    "role_by_plan_type",
    "ErrorCode",
    "AccessCheckError",
    "ConfigParseError",
    "PatternCompileError",
    "UnknownRoleError",
    "UnmappedPlanTypeError",
    "AccessDeniedError",
]
