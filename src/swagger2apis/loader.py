"""Load swagger documents from disk."""

from pathlib import Path

import yaml


class DocumentError(Exception):
    """The file could not be read as a swagger document."""


def load_document(file_path: Path) -> dict:
    """Read a YAML or JSON document into a dict.

    JSON is valid YAML, so ``yaml.safe_load`` handles both.
    """
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentError(f"Cannot read {file_path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentError(f"Cannot parse {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise DocumentError(f"{file_path} does not contain a mapping")
    return data


def is_swagger_document(data: dict) -> bool:
    return "swagger" in data or "openapi" in data
