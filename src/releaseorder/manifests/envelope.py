"""
Envelope extraction.

Reads only the fields needed for classification and ordering (kind,
apiVersion, metadata.name, metadata.annotations). The rest of the
document is carried verbatim and never interpreted.
"""

from __future__ import annotations

from typing import Any

import yaml

from releaseorder.core.errors import ManifestParseError
from releaseorder.manifests.models import Envelope


def _as_str(value: Any, field_name: str, path: str) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ManifestParseError(
            f"'{field_name}' must be a scalar in {path or 'document'}",
            details={"path": path},
        )
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _mapping(value: Any, field_name: str, path: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ManifestParseError(
            f"'{field_name}' must be a mapping in {path or 'document'}",
            details={"path": path},
        )
    return value


def extract_envelope(content: str, path: str = "") -> Envelope:
    """
    Parse the structural envelope of one sub-document.

    A document that holds nothing but comments yields an empty envelope;
    its kind is blank and it sorts with unknown kinds.

    Args:
        content: Text of a single YAML document
        path: Source key, used in error details

    Returns:
        The document's Envelope

    Raises:
        ManifestParseError: If the document is not valid YAML, its top
            level, metadata or annotations are not mappings, or kind,
            apiVersion, name or an annotation value is not a scalar
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ManifestParseError(
            f"Invalid YAML in {path or 'document'}: {e}", details={"path": path}
        ) from e

    if data is None:
        return Envelope()

    if not isinstance(data, dict):
        raise ManifestParseError(
            f"Document must be a YAML mapping: {path or 'document'}",
            details={"path": path},
        )

    metadata = _mapping(data.get("metadata"), "metadata", path)
    annotations = _mapping(metadata.get("annotations"), "metadata.annotations", path)

    return Envelope(
        kind=_as_str(data.get("kind"), "kind", path),
        api_version=_as_str(data.get("apiVersion"), "apiVersion", path),
        name=_as_str(metadata.get("name"), "metadata.name", path),
        annotations={
            _as_str(k, "metadata.annotations", path): _as_str(
                v, f"metadata.annotations.{k}", path
            )
            for k, v in annotations.items()
        },
    )
