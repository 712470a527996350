from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

from tableacl.common.errors import UnmappedPlanTypeError
from .roles import Role


class PlanType(str, Enum):
    """Execution plan classifications produced by the query planner."""
    PASS_SELECT = "PASS_SELECT"
    PK_EQUAL = "PK_EQUAL"
    PK_IN = "PK_IN"
    SELECT_SUBQUERY = "SELECT_SUBQUERY"
    SET = "SET"
    PASS_DML = "PASS_DML"
    DML_PK = "DML_PK"
    DML_SUBQUERY = "DML_SUBQUERY"
    INSERT_PK = "INSERT_PK"
    INSERT_SUBQUERY = "INSERT_SUBQUERY"
    DDL = "DDL"


ROLE_BY_PLAN_TYPE: Mapping[PlanType, Role] = MappingProxyType({
    PlanType.PASS_SELECT: Role.READER,
    PlanType.PK_EQUAL: Role.READER,
    PlanType.PK_IN: Role.READER,
    PlanType.SELECT_SUBQUERY: Role.READER,
    PlanType.SET: Role.READER,
    PlanType.PASS_DML: Role.WRITER,
    PlanType.DML_PK: Role.WRITER,
    PlanType.DML_SUBQUERY: Role.WRITER,
    PlanType.INSERT_PK: Role.WRITER,
    PlanType.INSERT_SUBQUERY: Role.WRITER,
    PlanType.DDL: Role.ADMIN,
})


def role_by_plan_type(plan_type: Union[PlanType, str]) -> Role:
    """Returns the minimum role required to run a plan type.

    Raises:
        UnmappedPlanTypeError: If the tag is unknown or has no mapping.
    """
    try:
        return ROLE_BY_PLAN_TYPE[PlanType(plan_type)]
    except (KeyError, ValueError):
        raise UnmappedPlanTypeError(plan_type) from None
