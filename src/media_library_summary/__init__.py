"""media-library-summary：影像 metadata 內容摘要工具。"""

__version__ = "0.1.0"
