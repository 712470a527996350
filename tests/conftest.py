import pytest

from tableacl.auth import ExecPlan, PlanType, RequestContext
from tableacl.checkers import TableAccessChecker


@pytest.fixture
def ctx():
    """Returns a request context for a regular user."""
    return RequestContext(username="username", trace_id="trace-1")


@pytest.fixture
def make_plan():
    def _make(plan_type: PlanType, table_name: str = "table1") -> ExecPlan:
        return ExecPlan(plan_type=plan_type, table_name=table_name)
    return _make


@pytest.fixture
def load_checker():
    """Returns a factory building a TableAccessChecker loaded with a document."""
    def _load(config, mode="merge") -> TableAccessChecker:
        checker = TableAccessChecker(mode=mode)
        checker.load(config)
        return checker
    return _load
