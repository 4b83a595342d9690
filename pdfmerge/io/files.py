import fnmatch
import logging
from pathlib import Path
from typing import List, Union

from ..config import DEFAULT_TARGET_DIR, PDF_PATTERN
from ..errors import InvalidDirectory, NoPdfFiles

log = logging.getLogger(__name__)


def resolve_target_dir(path: Union[str, Path, None] = None) -> Path:
    if path is None:
        path = DEFAULT_TARGET_DIR
    target = Path(path)
    if not target.is_dir():
        raise InvalidDirectory(path)
    return target


def is_pdf_name(name: str) -> bool:
    return fnmatch.fnmatchcase(name.lower(), PDF_PATTERN)


def list_pdf_files(input_dir: Path) -> List[Path]:
    """
    Direct children of input_dir named *.pdf (any case), regular files only
    (symlinks excluded), sorted by full path.
    """
    try:
        found = [
            p for p in input_dir.iterdir()
            if is_pdf_name(p.name) and p.is_file() and not p.is_symlink()
        ]
    except OSError as e:
        raise InvalidDirectory(input_dir, reason=e.strerror or str(e)) from e
    found.sort(key=str)
    log.debug("Discovered %d PDF file(s) in %s", len(found), input_dir)
    if not found:
        raise NoPdfFiles(input_dir)
    return found


def print_pdf_listing(pdf_files: List[Path]):
    print("Found the following PDF files:")
    for p in pdf_files:
        print(f"  {p.name}")
    print()
