"""工具模組。"""

from . import path_utils, url_utils
from .error_handler import ErrorHandler

__all__ = ["path_utils", "url_utils", "ErrorHandler"]
