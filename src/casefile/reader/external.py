# Copyright 2026 CaseFile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Resolution of ``==== ExternalSource: ... ====`` references.

An external source pulls the content of a separate file into the source map
of a test case.  The payload is either ``path`` or ``name=path``; in the
second form the file is registered under *name* instead of its path.

The direct imports of the external file are pulled in as well, each one
registered twice: under the import path as written, and under that path
joined with the directory of the external source.  Imports of imported
files are not followed.
"""

from __future__ import annotations

import logging
import posixpath
from pathlib import Path, PurePosixPath

from casefile.errors import CaseFileIOError, ConfigurationError, FormatError, SourceNotFoundError
from casefile.reader.imports import ImportExtractor, extract_imports

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def resolve_external_source(
    payload: str,
    base_dir: Path,
    *,
    import_extractor: ImportExtractor = extract_imports,
    encoding: str = "utf-8",
) -> dict[str, str]:
    """Read an external source and its direct imports.

    Args:
        payload: The text between the ``ExternalSource:`` marker and the
            closing ``====``, either ``path`` or ``name=path``.
        base_dir: Directory of the test case document; the external path is
            resolved relative to it.
        import_extractor: Returns the import paths declared in a source text.
        encoding: Text encoding of the external and imported files.

    Returns:
        A mapping from source name to content, to be merged into the caller's
        source map.  Empty if the registration name is empty.

    Raises:
        FormatError: If the external path or an import path is absolute.
        SourceNotFoundError: If the external source or an import does not exist.
        CaseFileIOError: If a file exists but cannot be read or decoded.
        ConfigurationError: If *encoding* is not a known text encoding.
    """
    name, path = _split_remapping(payload)

    relative_path = PurePosixPath(path)
    if relative_path.is_absolute() or Path(path).is_absolute():
        raise FormatError("External Source need to be relative.")

    full_path = base_dir / path
    if not full_path.exists():
        raise SourceNotFoundError(f"External Source '{path}' not found.")
    content = _read(full_path, encoding)

    if not name:
        return {}

    resolved: dict[str, str] = {}
    source_dir = relative_path.parent.as_posix()
    if source_dir == ".":
        source_dir = ""

    for import_path in import_extractor(content):
        if PurePosixPath(import_path).is_absolute():
            raise FormatError(f"Import '{import_path}' of external source '{path}' needs to be relative.")
        import_file = base_dir / source_dir / import_path
        if not import_file.exists():
            raise SourceNotFoundError(f"Import '{import_path}' of external source '{path}' not found.")
        imported = _read(import_file, encoding)
        composed = posixpath.normpath(posixpath.join(source_dir, import_path))
        logger.debug("External source '%s' imports '%s' (registered as '%s')", name, import_path, composed)
        resolved[composed] = imported
        resolved[import_path] = imported

    resolved[name] = content
    logger.debug("Registered external source '%s' from '%s'", name, full_path)
    return resolved


# ################
# Implementation
# ################


def _split_remapping(payload: str) -> tuple[str, str]:
    """Split ``name=path`` into its trimmed parts; a bare ``path`` is its own name."""
    payload = payload.strip()
    if "=" not in payload:
        return payload, payload
    name, _, path = payload.partition("=")
    return name.strip(), path.strip()


def _read(path: Path, encoding: str) -> str:
    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise CaseFileIOError(f"Cannot read source file '{path}': {exc}") from exc
    except LookupError as exc:
        raise ConfigurationError(f"Unknown source file encoding '{encoding}'") from exc
