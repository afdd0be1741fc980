"""Inventory of Express-style ``app.<method>(path)`` route declarations."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

_METHOD_PATTERN = re.compile(r"app\.([^(]+)\(")
_PATH_PATTERN = re.compile(r"\(\s*['\"`]([^'\"`]+)['\"`]")
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class Endpoint:
    method: str
    path: str


def _collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def extract_endpoints(source: str) -> list[Endpoint]:
    """Extract route declarations from the text of one source file.

    The path may start on the line following ``app.<method>(``. Declarations
    whose method or path cannot be read are kept with an empty field.
    """

    lines = source.split("\n")
    endpoints: list[Endpoint] = []
    for index, raw_line in enumerate(lines):
        line = raw_line.strip()
        if not line.startswith("app."):
            continue
        method_match = _METHOD_PATTERN.search(line)
        next_line = lines[index + 1] if index + 1 < len(lines) else ""
        path_match = _PATH_PATTERN.search(_collapse_whitespace(line + next_line))
        endpoints.append(
            Endpoint(
                method=method_match.group(1) if method_match else "",
                path=path_match.group(1) if path_match else "",
            )
        )
    return endpoints


def scan_directory(directory: Path | str) -> dict[str, list[Endpoint]]:
    """Scan every regular file directly inside ``directory``."""

    base = Path(directory)
    results: dict[str, list[Endpoint]] = {}
    for path in sorted(base.iterdir()):
        if not path.is_file():
            continue
        results[path.name] = extract_endpoints(path.read_text(encoding="utf-8", errors="replace"))
    return results


def format_endpoints(endpoints: Mapping[str, list[Endpoint]]) -> str:
    """Render a Markdown list grouped by file name."""

    blocks = []
    for file_name in sorted(endpoints):
        ordered = sorted(
            endpoints[file_name], key=lambda endpoint: (endpoint.method + endpoint.path).casefold()
        )
        endpoint_lines = "\n".join(f"\t* {endpoint.method}: `{endpoint.path}`" for endpoint in ordered)
        blocks.append(f" * **{file_name}**\n{endpoint_lines}")
    return "\n".join(blocks)


__all__ = ["Endpoint", "extract_endpoints", "format_endpoints", "scan_directory"]
