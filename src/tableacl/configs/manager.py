import pathlib
from typing import Optional, Union

from tableacl.common.settings import settings


class ConfigManager:
    """
    Centralized reader for access checker configuration files.
    Hands raw bytes to the checkers, which own parsing and validation.
    """

    def __init__(self, project_root: Optional[pathlib.Path] = None):
        """
        Args:
            project_root: Optional override for project root.
                          If None, relative paths resolve against the CWD.
        """
        self.project_root = project_root

    def resolve(self, path: Union[str, pathlib.Path]) -> pathlib.Path:
        path = pathlib.Path(path)
        if path.is_absolute():
            return path
        return (self.project_root or pathlib.Path.cwd()) / path

    def table_acl_path(self, path: Optional[Union[str, pathlib.Path]] = None) -> Optional[pathlib.Path]:
        """Returns the table ACL path, falling back to settings. None when unset."""
        target = path or settings.table_acl_config_path
        if not target:
            return None
        return self.resolve(target)

    def load_table_acl(self, path: Optional[Union[str, pathlib.Path]] = None) -> bytes:
        """
        Reads the table ACL document as raw bytes.

        Raises:
            FileNotFoundError: If no path is configured or the file is missing.
        """
        target_path = self.table_acl_path(path)
        if target_path is None:
            raise FileNotFoundError("Table ACL config path is not set (TABLE_ACL_CONFIG).")

        if not target_path.exists():
            raise FileNotFoundError(f"Table ACL config not found: {target_path}")

        return target_path.read_bytes()
