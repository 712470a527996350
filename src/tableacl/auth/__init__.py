from .roles import Role, role_by_name, role_name
from .plans import PlanType, ROLE_BY_PLAN_TYPE, role_by_plan_type
from .models import RequestContext, ExecPlan

__all__ = [
    "Role",
    "role_by_name",
    "role_name",
    "PlanType",
    "ROLE_BY_PLAN_TYPE",
    "role_by_plan_type",
    "RequestContext",
    "ExecPlan",
]
