"""Write a coverage document to disk."""

import logging
import tempfile
from contextlib import suppress
from pathlib import Path

from .CoverageDocument import CoverageDocument

logger = logging.getLogger(__name__)


def write_document(document: CoverageDocument, path: Path, *, indent: int = 2) -> None:
    """Serialize ``document`` as JSON and replace ``path`` atomically.

    Raises:
        RuntimeError: If the file cannot be written
    """
    path = Path(path)
    content = document.model_dump_json(by_alias=True, indent=indent)

    tmp_path: Path | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        # Temporary file in the target directory to avoid cross-device renames
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            delete=False,
            prefix=f"{path.name}.",
            suffix=".tmp",
        ) as fh:
            tmp_path = Path(fh.name)
            fh.write(content + "\n")
        tmp_path.replace(path)
    except OSError as exc:
        with suppress(OSError):
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
        raise RuntimeError(f"Failed to write coverage report to {path}: {exc}") from exc

    logger.info("Wrote coverage report to %s", path)
