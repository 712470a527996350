import itertools

import pytest

from tableacl.auth import PlanType, ROLE_BY_PLAN_TYPE, Role, role_by_name, role_by_plan_type, role_name
from tableacl.common.errors import UnknownRoleError, UnmappedPlanTypeError


def test_roles_are_ordered():
    assert Role.READER < Role.WRITER < Role.ADMIN


@pytest.mark.parametrize("a, b", list(itertools.product(Role, Role)))
def test_grants_follows_rank(a, b):
    assert a.grants(b) == (list(Role).index(a) >= list(Role).index(b))


@pytest.mark.parametrize("name", ["READER", "reader", "Reader", "wRiTeR", "admin"])
def test_role_by_name_is_case_insensitive(name):
    assert role_by_name(name).canonical_name == name.upper()


@pytest.mark.parametrize("name", ["SOMEROLE", "", "READERS", " READER"])
def test_role_by_name_rejects_unknown(name):
    with pytest.raises(UnknownRoleError) as exc:
        role_by_name(name)
    assert exc.value.role == name


def test_role_name_out_of_range():
    assert role_name(Role.ADMIN) == "ADMIN"
    assert role_name(0) == "READER"
    assert role_name(3) == ""
    assert role_name(-1) == ""


def test_plan_mapping_is_total():
    assert set(ROLE_BY_PLAN_TYPE) == set(PlanType)


@pytest.mark.parametrize("plan_type, role", [
    (PlanType.PASS_SELECT, Role.READER),
    (PlanType.PK_IN, Role.READER),
    (PlanType.SET, Role.READER),
    (PlanType.INSERT_PK, Role.WRITER),
    (PlanType.DML_SUBQUERY, Role.WRITER),
    (PlanType.DDL, Role.ADMIN),
])
def test_role_by_plan_type(plan_type, role):
    assert role_by_plan_type(plan_type) == role


def test_role_by_plan_type_accepts_string_tag():
    assert role_by_plan_type("DDL") == Role.ADMIN


def test_unmapped_plan_type_is_an_error():
    with pytest.raises(UnmappedPlanTypeError) as exc:
        role_by_plan_type("PLAN_NEXTVAL")
    assert exc.value.plan_type == "PLAN_NEXTVAL"


def test_plan_mapping_is_immutable():
    with pytest.raises(TypeError):
        ROLE_BY_PLAN_TYPE[PlanType.DDL] = Role.READER
