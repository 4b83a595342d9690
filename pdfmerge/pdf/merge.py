import logging
import os
import shutil
import subprocess
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Sequence

from ..config import MERGE_TOOL_PRIORITY
from ..errors import MergeToolFailure, MissingDependency

log = logging.getLogger(__name__)


class MergeTool(Enum):
    PDFUNITE = "pdfunite"
    PDFTK = "pdftk"

    @property
    def executable(self) -> str:
        return self.value

    def build_command(self, pdf_paths: Sequence[Path], output_path: Path) -> List[str]:
        return _COMMAND_BUILDERS[self](
            self.executable, [_path_arg(p) for p in pdf_paths], _path_arg(output_path)
        )


def _path_arg(path: Path) -> str:
    # keep names like "-x.pdf" from being read as options
    s = str(path)
    return os.path.join(".", s) if s.startswith("-") else s


def _pdfunite_command(exe: str, inputs: List[str], output: str) -> List[str]:
    return [exe, *inputs, output]


def _pdftk_command(exe: str, inputs: List[str], output: str) -> List[str]:
    return [exe, *inputs, "cat", "output", output]


_COMMAND_BUILDERS: Dict[MergeTool, Callable[[str, List[str], str], List[str]]] = {
    MergeTool.PDFUNITE: _pdfunite_command,
    MergeTool.PDFTK: _pdftk_command,
}


def resolve_merge_tool() -> MergeTool:
    for name in MERGE_TOOL_PRIORITY:
        found = shutil.which(name)
        log.debug("Probe %s: %s", name, found or "not found")
        if found:
            return MergeTool(name)
    raise MissingDependency(MERGE_TOOL_PRIORITY)


def merge_pdfs_in_order(tool: MergeTool, pdf_paths: Sequence[Path], output_path: Path):
    cmd = tool.build_command(pdf_paths, output_path)
    print(f"Merging PDF files using '{tool.executable}'...")
    log.debug("Running: %s", cmd)
    try:
        result = subprocess.run(cmd)
    except OSError as e:
        raise MergeToolFailure(tool.executable, reason=str(e)) from e
    if result.returncode != 0:
        raise MergeToolFailure(tool.executable, returncode=result.returncode)
    print(f"✓ Merged PDF created: {output_path}")
