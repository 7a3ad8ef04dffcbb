"""JSON persistence for the catalog.

The whole catalog is written on every save and read back in full on load;
there is no incremental update.
"""

import json
import logging
import os
import shutil
import tempfile
from typing import Union

from library_catalog.errors import CatalogFileError
from library_catalog.library import Library

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = "library_data.json"

PathLike = Union[str, "os.PathLike[str]"]


def save(library: Library, path: PathLike = DEFAULT_DATA_FILE) -> None:
    """Write the catalog to ``path`` as pretty-printed JSON.

    The document goes to a temporary file in the same directory first and is
    then moved into place, so an interrupted write leaves the old file intact.
    OSError propagates to the caller.
    """
    path = os.fspath(path)
    data = json.dumps(library.to_dict(), indent=2, ensure_ascii=False)
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(prefix=".library-", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(data)
        _copy_mode(path, tmp_path)
        os.replace(tmp_path, path)
    except OSError:
        logger.error("Could not save catalog to %s", path)
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
    logger.info(
        "Catalog saved to %s (%d books, %d readers)",
        path,
        len(library.books),
        len(library.readers),
    )


def _copy_mode(path: str, tmp_path: str) -> None:
    """Give the temporary file the permissions the data file has, or would get if new.

    mkstemp creates files as 0600.
    """
    if os.path.exists(path):
        shutil.copymode(path, tmp_path)
        return
    umask = os.umask(0)
    os.umask(umask)
    os.chmod(tmp_path, 0o666 & ~umask)


def load(path: PathLike = DEFAULT_DATA_FILE) -> Library:
    """Read a catalog previously written by :func:`save`.

    A missing file raises FileNotFoundError; a file that is not a valid
    catalog document raises CatalogFileError.
    """
    path = os.fspath(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.info("Catalog file %s does not exist", path)
        raise
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error("Catalog file %s is not valid JSON: %s", path, e)
        raise CatalogFileError(f"Файл данных '{path}' повреждён: {e}") from e

    try:
        library = Library.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        logger.error("Catalog file %s has an unexpected layout: %s", path, e)
        raise CatalogFileError(f"Файл данных '{path}' имеет неверный формат: {e}") from e

    logger.info(
        "Catalog loaded from %s (%d books, %d readers)",
        path,
        len(library.books),
        len(library.readers),
    )
    return library
