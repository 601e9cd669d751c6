"""
File ensurer — make sure the AI helper file exists at the target path.

Three terminal states:

    target present            → ALREADY_EXISTS  (nothing touched)
    template given and found  → COPIED_FROM_TEMPLATE
    otherwise                 → CREATED_DEFAULT

Both the copy and the default write open the target with exclusive
create, so a file that appears between the existence check and the
write is left alone and reported as ALREADY_EXISTS.  There is no
locking and no retry.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Callable

from aifile.core.generators.ai_stub import DEFAULT_FILENAME, generate_ai_stub
from aifile.core.models.request import Outcome

logger = logging.getLogger(__name__)


def resolve_target(directory: str | Path, filename: str) -> Path:
    """Absolute path of ``directory/filename``.

    Symlinks are not followed: a link named *filename* is the target.
    """
    return Path(os.path.abspath(Path(directory) / filename))


def file_exists(path: Path) -> bool:
    """True if any directory entry exists at *path*.

    Presence only: files, directories and dangling symlinks all count,
    and nothing is opened or permission-checked.
    """
    return os.path.lexists(path)


def copy_template(template_path: Path, destination_path: Path) -> None:
    """Copy *template_path* to *destination_path* byte for byte.

    Raises:
        FileExistsError: If the destination appeared since it was checked.
        OSError: If the template cannot be read or the destination
            cannot be written (e.g. its directory is missing).
    """
    with open(template_path, "rb") as src:
        with open(destination_path, "xb") as dst:
            try:
                shutil.copyfileobj(src, dst)
            except OSError:
                dst.close()
                destination_path.unlink()
                raise


def create_default_file(destination_path: Path) -> None:
    """Write the default AI helper stub to *destination_path* as UTF-8.

    Raises:
        FileExistsError: If the destination appeared since it was checked.
        OSError: If the destination cannot be written.
    """
    stub = generate_ai_stub(destination_path.name)
    logger.debug("Writing %s: %s", stub.path, stub.reason)
    with open(destination_path, "x", encoding="utf-8", newline="") as fh:
        fh.write(stub.content)


def ensure(
    directory: str | Path = ".",
    filename: str = DEFAULT_FILENAME,
    template_path: str | Path | None = None,
    on_template_missing: Callable[[Path], None] | None = None,
) -> Outcome:
    """Guarantee that ``directory/filename`` exists.

    Args:
        directory: Target directory (must already exist).
        filename: Name of the helper file.
        template_path: Optional file whose bytes are copied to the target.
            A missing template is logged and the default stub is written
            instead.
        on_template_missing: Called with the resolved template path when
            the template is missing and the default stub is used.

    Returns:
        The Outcome reached.

    Raises:
        OSError: If the copy or the write fails.
    """
    target = resolve_target(directory, filename)

    if file_exists(target):
        logger.debug("Target present: %s", target)
        return Outcome.ALREADY_EXISTS

    if template_path:
        template = Path(os.path.abspath(template_path))
        if template.exists():
            try:
                copy_template(template, target)
            except FileExistsError:
                logger.debug("Target appeared during copy: %s", target)
                return Outcome.ALREADY_EXISTS
            return Outcome.COPIED_FROM_TEMPLATE
        logger.warning("Template not found at %s, generating default file.", template)
        if on_template_missing is not None:
            on_template_missing(template)

    try:
        create_default_file(target)
    except FileExistsError:
        logger.debug("Target appeared during write: %s", target)
        return Outcome.ALREADY_EXISTS
    return Outcome.CREATED_DEFAULT
