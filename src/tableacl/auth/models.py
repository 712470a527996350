from pydantic import BaseModel, Field
from typing import Optional
from pydantic import ConfigDict

from .plans import PlanType


class RequestContext(BaseModel):
    """Identity of the caller a request executes on behalf of."""
    username: str = Field(..., description="Principal name, matched case-sensitively against ACL entries.")
    trace_id: Optional[str] = Field(default=None, description="Correlation ID attached to access check logs.")
    model_config = ConfigDict(extra="ignore", frozen=True)


class ExecPlan(BaseModel):
    """The parts of an execution plan an access check consults.

    Only a single table is checked; plans touching several tables are
    checked against their primary table.
    """
    plan_type: PlanType = Field(..., description="Plan classification produced by the planner.")
    table_name: str = Field(..., description="Table the plan runs against.")
    model_config = ConfigDict(extra="ignore", frozen=True)
