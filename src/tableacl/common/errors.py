from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Standardized error codes for access checks."""
    CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"
    PATTERN_COMPILE_ERROR = "PATTERN_COMPILE_ERROR"
    UNKNOWN_ROLE = "UNKNOWN_ROLE"
    UNMAPPED_PLAN_TYPE = "UNMAPPED_PLAN_TYPE"
    ACCESS_DENIED = "ACCESS_DENIED"


class AccessCheckError(Exception):
    """Base class for all access check failures.

    Attributes:
        message (str): A human-readable error message.
        error_code (ErrorCode): The standardized error code.
    """

    error_code: ErrorCode = ErrorCode.ACCESS_DENIED

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigParseError(AccessCheckError):
    """The configuration bytes are not a well-formed ACL document."""

    error_code = ErrorCode.CONFIG_PARSE_ERROR


class PatternCompileError(AccessCheckError):
    error_code = ErrorCode.PATTERN_COMPILE_ERROR

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"regexp compile error {pattern}: {reason}")
        self.pattern = pattern
        self.reason = reason


class UnknownRoleError(AccessCheckError):
    error_code = ErrorCode.UNKNOWN_ROLE

    def __init__(self, role: str):
        super().__init__(f"parse error, invalid role {role}")
        self.role = role


class UnmappedPlanTypeError(AccessCheckError):
    """A plan type has no minimum role. Programming error, never an allow."""

    error_code = ErrorCode.UNMAPPED_PLAN_TYPE

    def __init__(self, plan_type: object):
        super().__init__(f"no required role defined for plan type {plan_type!r}")
        self.plan_type = plan_type


class AccessDeniedError(AccessCheckError):
    """The principal lacks a sufficient role for the table and plan."""

    error_code = ErrorCode.ACCESS_DENIED

    def __init__(self, principal: Optional[str], required_role: str, table_name: str):
        super().__init__(
            f"user {principal} has no {required_role} access on table {table_name}"
        )
        self.principal = principal
        self.required_role = required_role
        self.table_name = table_name
