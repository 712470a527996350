from .table_acl import (
    TableAclFileConfig,
    TableRule,
    WILDCARD_PRINCIPAL,
    parse_table_acl,
    compile_table_acl,
    load_table_acl,
)
from .manager import ConfigManager
