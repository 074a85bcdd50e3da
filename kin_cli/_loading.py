"""Per-tier document loaders.

Each loader surfaces success as a flag rather than raising. Loaders never
substitute defaults: on failure they hand back the zero-value model and let
the resolver decide what to fall back to.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, TypeVar

from pydantic import BaseModel, ValidationError

from kin_cli._jsonc import Reader, read_document
from kin_cli.identity import (
    BootstrapConfig,
    DocumentError,
    FullInstanceIdentity,
    FullUserIdentity,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class LoadResult(Generic[T]):
    value: T
    ok: bool
    error: DocumentError | None = None


def _load(label: str, path: str | Path, model: type[T], reader: Reader) -> LoadResult[T]:
    # Failures log at debug; the resolver logs the warning
    if not str(path):
        logger.debug(f"No path configured for {label} document")
        return LoadResult(model(), False, DocumentError.NOT_FOUND)

    read = reader(path)
    if not read.found:
        logger.debug(f"{label.capitalize()} document not found at {path}")
        return LoadResult(model(), False, DocumentError.NOT_FOUND)

    # A top-level null decodes to the zero value, like a null field
    document = {} if read.parseable and read.document is None else read.document
    if not read.parseable or not isinstance(document, dict):
        logger.debug(f"{label.capitalize()} document at {path} could not be parsed as a JSON object")
        return LoadResult(model(), False, DocumentError.UNPARSEABLE)

    # Type mismatches fail the whole document, same as a malformed one
    try:
        value = model.model_validate(document)
    except ValidationError as e:
        logger.debug(
            f"{label.capitalize()} document at {path} has {e.error_count()} invalid field(s)"
        )
        return LoadResult(model(), False, DocumentError.UNPARSEABLE)

    logger.info(f"Loaded {label} document from {path}")
    return LoadResult(value, True)


def load_bootstrap(path: str | Path, reader: Reader = read_document) -> LoadResult[BootstrapConfig]:
    """Load the bootstrap pointer document (``system_paths`` + ``display``)."""
    return _load("bootstrap", path, BootstrapConfig, reader)


def load_instance(path: str | Path, reader: Reader = read_document) -> LoadResult[FullInstanceIdentity]:
    """Load the full instance identity document."""
    return _load("instance", path, FullInstanceIdentity, reader)


def load_user(path: str | Path, reader: Reader = read_document) -> LoadResult[FullUserIdentity]:
    """Load the full user (operator) identity document."""
    return _load("user", path, FullUserIdentity, reader)
