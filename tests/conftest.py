import subprocess
from pathlib import Path

import pytest


@pytest.fixture
def make_files(tmp_path):
    def _make(*names, root: Path = tmp_path):
        paths = []
        for name in names:
            p = root / name
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_bytes(b"%PDF-1.4\n")
            paths.append(p)
        return paths
    return _make


@pytest.fixture
def answers(monkeypatch):
    """Feed canned lines to input(); the prompts seen are recorded."""
    prompts = []

    def _feed(*lines):
        remaining = iter(lines)

        def fake_input(prompt=""):
            prompts.append(prompt)
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr("builtins.input", fake_input)
        return prompts
    return _feed


@pytest.fixture
def installed(monkeypatch):
    """Pretend only the named executables are on PATH."""
    def _install(*names):
        monkeypatch.setattr(
            "shutil.which", lambda name: f"/usr/bin/{name}" if name in names else None
        )
    return _install


@pytest.fixture
def runs(monkeypatch):
    """Capture subprocess.run calls; set .returncode to simulate a tool failure."""
    class Recorder:
        def __init__(self):
            self.calls = []
            self.returncode = 0

        def __call__(self, cmd, *args, **kwargs):
            self.calls.append(list(cmd))
            return subprocess.CompletedProcess(cmd, self.returncode)

    rec = Recorder()
    monkeypatch.setattr("subprocess.run", rec)
    return rec
