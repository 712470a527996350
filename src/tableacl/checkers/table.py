from __future__ import annotations

import pathlib
from enum import Enum
from typing import Dict, List, Optional, Union

from tableacl.auth.models import ExecPlan, RequestContext
from tableacl.auth.plans import role_by_plan_type
from tableacl.common.errors import AccessDeniedError
from tableacl.common.locks import ReadWriteLock
from tableacl.common.logger import get_logger
from tableacl.configs.manager import ConfigManager
from tableacl.configs.table_acl import TableRule, WILDCARD_PRINCIPAL, load_table_acl

logger = get_logger(__name__)


class LoadMode(str, Enum):
    """How ``TableAccessChecker.load`` combines a new document with the current rules."""
    MERGE = "merge"
    REPLACE = "replace"


class TableAccessChecker:
    """Per table AccessChecker driven by regex table patterns.

    Rules are kept in the order their patterns were first loaded and
    ``allow`` applies the first rule whose pattern matches the table.
    Tables matching no pattern are allowed for every plan type.
    """

    def __init__(self, mode: Union[LoadMode, str] = LoadMode.MERGE):
        self.mode = LoadMode(mode)
        self._lock = ReadWriteLock()
        self._rules: Dict[str, TableRule] = {}

    @classmethod
    def from_file(
        cls,
        path: Optional[Union[str, pathlib.Path]] = None,
        mode: Union[LoadMode, str] = LoadMode.MERGE,
        config_manager: Optional[ConfigManager] = None,
    ) -> "TableAccessChecker":
        """Creates a checker loaded from a JSON config file."""
        cm = config_manager or ConfigManager()
        checker = cls(mode=mode)
        checker.load(cm.load_table_acl(path))
        return checker

    def load(self, config: Union[bytes, str]) -> None:
        """Loads a JSON document using the checker's configured mode."""
        if self.mode == LoadMode.REPLACE:
            self.replace_load(config)
        else:
            self.merge_load(config)

    def merge_load(self, config: Union[bytes, str]) -> None:
        """Merges a document into the current rules.

        Grants for pattern/principal pairs absent from the document persist.
        New patterns are appended after the existing ones.

        The document is validated completely before anything is applied, so
        an invalid document leaves the current rules untouched.
        """
        incoming = load_table_acl(config)
        with self._lock.write_lock():
            for rule in incoming:
                existing = self._rules.get(rule.pattern)
                if existing is None:
                    self._rules[rule.pattern] = rule
                else:
                    existing.grants.update(rule.grants)
            total = len(self._rules)
        logger.info(
            f"Merged table ACL: {len(incoming)} pattern(s) loaded, {total} active",
            extra={"mode": LoadMode.MERGE.value},
        )

    def replace_load(self, config: Union[bytes, str]) -> None:
        """Replaces the current rules with a document, all or nothing."""
        incoming = load_table_acl(config)
        rules = {rule.pattern: rule for rule in incoming}
        with self._lock.write_lock():
            self._rules = rules
        logger.info(
            f"Replaced table ACL: {len(rules)} pattern(s) active",
            extra={"mode": LoadMode.REPLACE.value},
        )

    def allow(self, context: RequestContext, plan: ExecPlan) -> None:
        """
        Implements AccessChecker.allow.

        For an unmatched table, all access is allowed. If a pattern matches,
        the wildcard grant is checked first, then the grant for the
        context's user.
        """
        min_role = role_by_plan_type(plan.plan_type)
        username = context.username

        with self._lock.read_lock():
            for rule in self._rules.values():
                # TODO: check every table once ExecPlan carries more than one
                if not rule.matches(plan.table_name):
                    continue

                default_role = rule.grants.get(WILDCARD_PRINCIPAL)
                if default_role is not None and default_role.grants(min_role):
                    return

                my_role = rule.grants.get(username)
                if my_role is not None and my_role.grants(min_role):
                    return

                logger.warning(
                    f"Denied {min_role.canonical_name} access on {plan.table_name}",
                    extra={
                        "principal": username,
                        "table": plan.table_name,
                        "required_role": min_role.canonical_name,
                        "pattern": rule.pattern,
                    },
                )
                raise AccessDeniedError(username, min_role.canonical_name, plan.table_name)

        logger.debug(f"No table pattern matches {plan.table_name}, allowing")

    def rules(self) -> List[TableRule]:
        """Returns a snapshot of the active rules in match order."""
        with self._lock.read_lock():
            return [rule.copy() for rule in self._rules.values()]

    def __len__(self) -> int:
        with self._lock.read_lock():
            return len(self._rules)
