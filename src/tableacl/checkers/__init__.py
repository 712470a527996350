from .interfaces import AccessChecker
from .registry import AccessCheckerRegistry
from .table import TableAccessChecker, LoadMode

__all__ = ["AccessChecker", "AccessCheckerRegistry", "TableAccessChecker", "LoadMode"]
