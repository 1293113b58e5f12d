import builtins
import textwrap

import pytest

from flatini import reader


@pytest.fixture
def write_ini(tmp_path):
    """Factory writing dedented ini content into ``tmp_path``, returning its path."""
    def _write(name, content):
        path = tmp_path / name
        path.write_text(textwrap.dedent(content))
        return str(path)
    return _write


@pytest.fixture
def opened_handles(monkeypatch):
    """Record every file handle the reader opens."""
    handles = []

    def tracking_open(*args, **kwargs):
        handle = builtins.open(*args, **kwargs)
        handles.append(handle)
        return handle

    monkeypatch.setattr(reader, 'open', tracking_open, raising=False)
    return handles
