from __future__ import annotations
import pytest
from meta_emit.emitters.fs import FileSystemEmitter, FileSystemEmitterConfig
from meta_emit.metadata import SOURCE_PATH, Metadata


def _make_record(source_path=None, **fields):
    md = Metadata()
    if source_path is not None:
        md.set(SOURCE_PATH, source_path)
    for name, value in fields.items():
        md.set(name, value)
    return md


@pytest.fixture
def out_dir(tmp_path):
    return tmp_path / "out"


@pytest.fixture
def fs_emitter(out_dir):
    return FileSystemEmitter(FileSystemEmitterConfig(name="fs", base_path=str(out_dir)))


@pytest.fixture
def batch():
    return [
        _make_record("docs/report.pdf", title="Quarterly report", author=["A. Writer", "B. Editor"]),
        _make_record(None, title="embedded image", content_type="image/png"),
    ]


@pytest.fixture
def make_record():
    return _make_record
