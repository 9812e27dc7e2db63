"""Convert between an edit session and its persisted sprite document."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError as PydanticValidationError

from spritefactory.editor.preview import TICKS_PER_FRAME
from spritefactory.editor.session import EditSession
from spritefactory.errors import DocumentLoadError, ImageLoadError, PathResolutionError
from spritefactory.models.animation import AnimationCycle
from spritefactory.models.document import AnimationEntry, SpriteDocument, TilesetContent
from spritefactory.models.enums import SpriteMode
from spritefactory.pipeline.imaging import read_image_size
from spritefactory.validation import validate_document_json

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


def _relative_reference(image_path: Path, document_dir: Path) -> str:
    try:
        relative = os.path.relpath(image_path, document_dir)
    except ValueError as exc:
        msg = f"cannot reference {image_path} relative to {document_dir}: {exc}"
        raise PathResolutionError(msg) from None
    return PurePosixPath(*Path(relative).parts).as_posix()


def save_document(session: EditSession, document_path: Path) -> SpriteDocument:
    """Build the persisted form of *session* for a document at *document_path*.

    The session is not modified.

    Raises
    ------
    PathResolutionError
        If the session has no image or its path cannot be expressed relative
        to the document's directory.
    """
    if session.image_path is None:
        msg = "no image selected; nothing for the document to reference"
        raise PathResolutionError(msg)

    document_dir = Path(document_path).absolute().parent
    texture = _relative_reference(session.image_path.absolute(), document_dir)

    return SpriteDocument(
        texture=texture,
        mode=SpriteMode.TILESET,
        content=TilesetContent(
            tile_width=session.tile_width,
            tile_height=session.tile_height,
        ),
        animations=[
            AnimationEntry(name=cycle.name, frames=cycle.to_index_array())
            for cycle in session.animations
        ],
    )


def load_session(
    document_path: Path | str | None,
    document: SpriteDocument,
    *,
    ticks_per_frame: int = TICKS_PER_FRAME,
) -> EditSession:
    """Rebuild an edit session from *document*.

    The image path is only constructed here, never opened; an empty
    *document_path* means an unsaved document, so no image is referenced.
    """
    session = EditSession(
        tile_width=document.content.tile_width,
        tile_height=document.content.tile_height,
        ticks_per_frame=ticks_per_frame,
    )

    if document_path and document.texture:
        session.image_path = Path(document_path).parent / document.texture
    else:
        session.image_path = None

    cycles = []
    for entry in document.animations:
        cycle = AnimationCycle.create(entry.name)
        for frame in entry.frames:
            cycle.append(frame)
        cycles.append(cycle)
    session.animations.replace(cycles)
    return session


def write_document(path: Path, document: SpriteDocument) -> Path:
    """Write *document* as JSON, replacing any existing file in one step."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(f".{path.name}.tmp")
    try:
        tmp_path.write_text(document.model_dump_json(indent=2), encoding="utf-8")
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    return path


def read_document(path: Path) -> SpriteDocument:
    """Load and validate a sprite document from *path*."""
    if path.is_dir():
        msg = f"document path is a directory: {path}"
        raise DocumentLoadError(msg)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        msg = f"document not found: {path}"
        raise DocumentLoadError(msg) from None
    except PermissionError:
        msg = f"permission denied reading document: {path}"
        raise DocumentLoadError(msg) from None
    except UnicodeDecodeError as exc:
        msg = f"document is not valid UTF-8 JSON: {exc}"
        raise DocumentLoadError(msg) from None
    except OSError as exc:
        msg = f"cannot read document {path}: {exc}"
        raise DocumentLoadError(msg) from None
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"document contains invalid JSON: {exc}"
        raise DocumentLoadError(msg) from None
    try:
        validate_document_json(data)
    except SchemaValidationError as exc:
        msg = f"document does not match schema: {exc.message}"
        raise DocumentLoadError(msg) from None
    try:
        return SpriteDocument.model_validate(data)
    except PydanticValidationError as exc:
        msg = f"document has invalid structure: {exc}"
        raise DocumentLoadError(msg) from None


def store_document(session: EditSession, path: Path) -> SpriteDocument:
    """Save *session* to *path*. Nothing is written if the image path cannot be resolved."""
    document = save_document(session, path)
    write_document(path, document)
    logger.info(
        "Saved %s (%d animations, texture=%s)", path, len(document.animations), document.texture,
    )
    return document


def open_document(
    path: Path,
    *,
    image_provider: Callable[[Path], tuple[int, int]] = read_image_size,
    ticks_per_frame: int = TICKS_PER_FRAME,
) -> EditSession:
    """Read the document at *path* and load its image dimensions.

    A missing or unreadable image does not fail the load: the session keeps
    its geometry and animations with no image, and the caller can check
    ``session.has_image``.
    """
    document = read_document(path)
    session = load_session(path, document, ticks_per_frame=ticks_per_frame)
    try:
        session.load_image(image_provider)
    except ImageLoadError as exc:
        logger.warning("Opened %s without its image: %s", path, exc)
    logger.info("Loaded %s (%d animations)", path, len(session.animations))
    return session
