from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

import re2
from pydantic import ConfigDict, RootModel, ValidationError

from tableacl.auth.roles import Role, role_by_name
from tableacl.common.errors import ConfigParseError, PatternCompileError

WILDCARD_PRINCIPAL = "*"
PRINCIPAL_SEPARATOR = ","


class TableAclFileConfig(RootModel):
    """File-level schema for the table ACL document.

    Sample configuration::

        {
            "<tableRegexPattern1>": {"READER": "*", "WRITER": "<user2>,<user4>", "ADMIN": "<user5>"},
            "<tableRegexPattern2>": {"ADMIN": "<user5>"}
        }
    """
    model_config = ConfigDict(strict=True)

    root: Dict[str, Dict[str, str]]


@dataclass
class TableRule:
    """Compiled grants for one table pattern.

    Patterns use RE2 syntax and are matched unanchored, in linear time.
    """
    pattern: str
    regex: Any
    grants: Dict[str, Role] = field(default_factory=dict)

    def matches(self, table_name: str) -> bool:
        return self.regex.search(table_name) is not None

    def copy(self) -> "TableRule":
        return TableRule(self.pattern, self.regex, dict(self.grants))


def parse_table_acl(config: Union[bytes, str]) -> TableAclFileConfig:
    """Parses raw configuration bytes into the document model.

    Raises:
        ConfigParseError: If the bytes are not JSON of the expected shape.
    """
    try:
        return TableAclFileConfig.model_validate_json(config)
    except ValidationError as e:
        raise ConfigParseError(f"invalid table acl config: {e}") from e


def compile_table_acl(doc: TableAclFileConfig) -> List[TableRule]:
    """Compiles a parsed document into rules, in document order.

    Raises:
        PatternCompileError: If a table pattern is not a valid regex.
        UnknownRoleError: If a role name is not a defined role.
    """
    rules: List[TableRule] = []
    for table_pattern, access_map in doc.root.items():
        try:
            regex = re2.compile(table_pattern)
        except re2.error as e:
            raise PatternCompileError(table_pattern, str(e)) from e

        rule = TableRule(pattern=table_pattern, regex=regex)
        for role_str, users_str in access_map.items():
            role = role_by_name(role_str)
            for user in users_str.split(PRINCIPAL_SEPARATOR):
                rule.grants[user] = role
        rules.append(rule)
    return rules


def load_table_acl(config: Union[bytes, str]) -> List[TableRule]:
    """Parses and compiles a table ACL document in one step."""
    return compile_table_acl(parse_table_acl(config))
