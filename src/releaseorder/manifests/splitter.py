"""
Document splitting for rendered release bundles.

A bundle maps source keys (usually template paths) to rendered text. Each
text may hold several YAML documents separated by ``---`` lines.
"""

from __future__ import annotations

import re
from pathlib import PurePosixPath
from typing import Iterable, Mapping

import structlog

from releaseorder.manifests.models import Document

logger = structlog.get_logger()

# A line holding only the document separator
_SEPARATOR = re.compile(r"^---[ \t]*\r?$", re.MULTILINE)

_SPLIT_KEY = re.compile(r"^manifest-(\d+)$")


def is_private_path(path: str, prefix: str = "_") -> bool:
    """Whether the last segment of a source key marks a partial/include file."""
    return PurePosixPath(path).name.startswith(prefix)


def _split_content(content: str) -> list[str]:
    chunks = []
    for chunk in _SEPARATOR.split(content):
        chunk = chunk.strip("\r\n")
        if chunk.strip():
            chunks.append(chunk)
    return chunks


def split_documents(
    files: Mapping[str, str], private_prefix: str = "_"
) -> list[Document]:
    """
    Split every source file into its non-empty sub-documents.

    Files with blank content and files whose base name starts with the
    private prefix are skipped. Sub-documents keep their parent's key.
    Keys are visited in sorted order so the result does not depend on
    mapping iteration order.

    Args:
        files: Mapping of source key to rendered content
        private_prefix: Base-name prefix marking partial templates

    Returns:
        Sub-documents in key order, then in order of appearance
    """
    documents: list[Document] = []

    for path in sorted(files):
        content = files[path]

        if not content or not content.strip():
            logger.debug("document_skipped", path=path, reason="empty")
            continue

        if is_private_path(path, private_prefix):
            logger.debug("document_skipped", path=path, reason="private")
            continue

        for chunk in _split_content(content):
            documents.append(Document(path=path, content=chunk))

    return documents


def split_manifests(bigfile: str) -> dict[str, str]:
    """
    Split a single rendered release manifest into numbered documents.

    Keys are ``manifest-0``, ``manifest-1`` and so on, counting only
    non-empty documents.
    """
    return {f"manifest-{i}": chunk for i, chunk in enumerate(_split_content(bigfile))}


def split_manifest_keys_in_order(keys: Iterable[str]) -> list[str]:
    """Order ``manifest-N`` keys by their number rather than lexically."""

    def _index(key: str) -> tuple[int, str]:
        match = _SPLIT_KEY.match(key)
        if match is None:
            return (-1, key)
        return (int(match.group(1)), key)

    return sorted(keys, key=_index)
