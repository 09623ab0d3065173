"""依副檔名分組累積摘要列，並輸出 Markdown 內容摘要。"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence

from ..config import defaults
from ..models import MetadataDirectory, SummaryRow
from ..utils.url_utils import build_raw_url, encode_file_name
from .row_builder import build_row

TITLE = "# Image Database Summary"
COLUMNS = (
    "File",
    "Manufacturer",
    "Model",
    "Dir Count",
    "Exif?",
    "Makernote",
    "Thumbnail",
    "All Data",
)
METADATA_FOLDER = "metadata"


def _sort_key(value: Optional[str]) -> tuple[bool, str]:
    # None 排在任何字串之前，字串以 code point 比較
    return (value is not None, value or "")


def _cell(value: object) -> str:
    return "" if value is None else str(value)


class ContentSummary:
    """單次掃描的摘要狀態：副檔名 -> 依到達順序排列的摘要列。"""

    def __init__(
        self,
        extension_equivalence: Optional[Mapping[str, str]] = None,
        raw_base_url: str = defaults.DEFAULT_RAW_BASE_URL,
        file_name: str = defaults.DEFAULT_OUTPUT_FILE_NAME,
    ) -> None:
        if extension_equivalence is None:
            extension_equivalence = defaults.DEFAULT_EXTENSION_EQUIVALENCE
        self.extension_equivalence = MappingProxyType(
            {str(key).lower().lstrip("."): str(value).lower().lstrip(".")
             for key, value in extension_equivalence.items()}
        )
        self.raw_base_url = raw_base_url
        self.file_name = file_name
        self._rows_by_extension: Dict[str, List[SummaryRow]] = {}

    @classmethod
    def from_config(cls, config) -> "ContentSummary":
        return cls(
            extension_equivalence=config.get("extension_equivalence"),
            raw_base_url=config.get("output.raw_base_url", defaults.DEFAULT_RAW_BASE_URL),
            file_name=config.get("output.file_name", defaults.DEFAULT_OUTPUT_FILE_NAME),
        )

    def __len__(self) -> int:
        return sum(len(rows) for rows in self._rows_by_extension.values())

    @property
    def extensions(self) -> list[str]:
        return list(self._rows_by_extension)

    def rows_for(self, extension: str) -> list[SummaryRow]:
        return list(self._rows_by_extension.get(extension, []))

    def normalize_extension(self, file_path: str) -> Optional[str]:
        name = str(file_path).replace("\\", "/").rsplit("/", 1)[-1]
        if "." not in name:
            return None
        extension = name.rsplit(".", 1)[1].lower()
        if not extension:
            return None
        return self.extension_equivalence.get(extension, extension)

    def record_file(
        self,
        file_path: str,
        directories: Sequence[MetadataDirectory],
        relative_path: str,
    ) -> Optional[SummaryRow]:
        extension = self.normalize_extension(file_path)
        if extension is None:
            return None

        row = build_row(str(file_path), directories, relative_path)
        self._rows_by_extension.setdefault(extension, []).append(row)
        return row

    def sorted_rows(self, extension: str) -> list[SummaryRow]:
        return sorted(
            self._rows_by_extension.get(extension, []),
            key=lambda row: (_sort_key(row.manufacturer), _sort_key(row.model)),
        )

    def format_row(self, row: SummaryRow) -> str:
        file_name = row.file_name
        encoded_name = encode_file_name(file_name)
        file_url = build_raw_url(self.raw_base_url, row.relative_path, encoded_name)
        metadata_url = build_raw_url(
            self.raw_base_url,
            row.relative_path,
            METADATA_FOLDER,
            f"{encoded_name.lower()}.txt",
        )
        cells = [
            f"[{file_name}]({file_url})",
            row.manufacturer,
            row.model,
            row.directory_count,
            row.exif_version,
            row.makernote,
            row.thumbnail,
            f"[metadata]({metadata_url})",
        ]
        return "|".join(_cell(cell) for cell in cells)

    def render(self) -> str:
        lines = [TITLE, ""]
        for extension in self._rows_by_extension:
            lines.append(f"## {extension.upper()} Files")
            lines.append("")
            lines.append("|".join(COLUMNS))
            lines.append("|".join("-" * len(column) for column in COLUMNS))
            for row in self.sorted_rows(extension):
                lines.append(self.format_row(row))
            lines.append("")
        return "\n".join(lines) + "\n"

    def write(self, output_dir: Path) -> Path:
        output_path = Path(output_dir) / self.file_name
        text = self.render()
        with output_path.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(text)
        return output_path
