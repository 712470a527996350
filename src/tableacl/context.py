from __future__ import annotations
import pathlib
from typing import Optional, Union

from tableacl.checkers import AccessCheckerRegistry, LoadMode, TableAccessChecker
from tableacl.common.logger import get_logger
from tableacl.common.settings import settings
from tableacl.configs import ConfigManager

logger = get_logger(__name__)


class AccessControlContext:
    """
    Application context that builds the checker registry at startup.

    Construct it once and hand ``registry`` to the serving pipeline. The
    table checker is registered only when a table ACL path is configured.
    """

    def __init__(
        self,
        table_acl_config_path: Optional[Union[str, pathlib.Path]] = None,
        reload_mode: Optional[Union[LoadMode, str]] = None,
        config_manager: Optional[ConfigManager] = None,
    ):
        """
        Resolves defaults from global settings if arguments are not provided.

        Raises:
            FileNotFoundError: If a configured table ACL file does not exist.
            AccessCheckError: If the table ACL file is invalid.
        """
        self.config_manager = config_manager or ConfigManager()
        self.registry = AccessCheckerRegistry()
        self.table_checker: Optional[TableAccessChecker] = None

        self._table_acl_path = self.config_manager.table_acl_path(table_acl_config_path)
        mode = LoadMode(reload_mode or settings.table_acl_reload_mode)

        if self._table_acl_path is None:
            logger.info("No table ACL configured, table access checks disabled")
            return

        self.table_checker = TableAccessChecker.from_file(
            self._table_acl_path, mode=mode, config_manager=self.config_manager
        )
        self.registry.register(self.table_checker)

    def reload_table_acl(self, path: Optional[Union[str, pathlib.Path]] = None) -> None:
        """Re-reads the table ACL file into the registered table checker.

        On failure the error propagates and the previous rules keep serving.
        """
        if self.table_checker is None:
            raise RuntimeError("Table access checker is not registered.")

        target = self.config_manager.table_acl_path(path) if path else self._table_acl_path
        try:
            self.table_checker.load(self.config_manager.load_table_acl(target))
        except Exception as e:
            logger.error(f"Table ACL reload from {target} rejected, keeping current rules: {e}")
            raise
