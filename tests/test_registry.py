import pytest
from meta_emit.emitters.base import Emitter, require_batch
from meta_emit.emitters.fs import FileSystemEmitter
from meta_emit.emitters.manager import EmitterManager
from meta_emit.emitters.registry import (
    list_emitter_kinds,
    make_emitter,
    register_emitter,
    unregister_emitter,
)
from meta_emit.errors import InvalidBatch
from meta_emit.metadata import SOURCE_PATH, Metadata


class RecordingEmitter(Emitter):
    def __init__(self, name):
        self._name = name
        self.batches = []

    @property
    def name(self):
        return self._name

    def emit(self, batch):
        self.batches.append(list(require_batch(batch)))


@pytest.fixture
def recording_kind():
    register_emitter("recording", lambda params: RecordingEmitter(params["name"]))
    yield "recording"
    unregister_emitter("recording")


def test_emitter_is_abstract():
    with pytest.raises(TypeError):
        Emitter()


def test_require_batch():
    with pytest.raises(InvalidBatch):
        require_batch(None)
    with pytest.raises(InvalidBatch):
        require_batch([])
    batch = [Metadata()]
    assert require_batch(batch) is batch


def test_fs_is_builtin_and_default():
    assert list_emitter_kinds()["fs"] == "static"
    emitter = make_emitter({"name": "out", "base_path": "/tmp/x"})
    assert isinstance(emitter, FileSystemEmitter)
    assert emitter.name == "out"


def test_unknown_kind():
    with pytest.raises(ValueError, match="Unknown emitter kind"):
        make_emitter({"name": "x", "kind": "nope"})


def test_dynamic_registration(recording_kind):
    assert list_emitter_kinds()[recording_kind] == "dynamic"
    emitter = make_emitter({"name": "rec", "kind": recording_kind})
    assert isinstance(emitter, RecordingEmitter)


def test_duplicate_kind_rejected(recording_kind):
    with pytest.raises(ValueError):
        register_emitter(recording_kind, lambda params: None)
    with pytest.raises(ValueError):
        register_emitter("fs", lambda params: None)


def test_manager_from_config(tmp_path, recording_kind):
    cfg = {
        "emitters": [
            {"name": "fs", "kind": "fs", "base_path": str(tmp_path)},
            {"name": "rec", "kind": recording_kind},
        ]
    }
    manager = EmitterManager.from_config(cfg)
    assert manager.names() == ["fs", "rec"]

    batch = [Metadata({SOURCE_PATH: "a.txt"})]
    manager.emit("fs", batch)
    manager.emit("rec", batch)
    assert (tmp_path / "a.txt.json").is_file()
    assert manager.get("rec").batches == [batch]


def test_manager_duplicate_names():
    cfg = {"emitters": [{"name": "fs"}, {"name": "fs", "file_extension": "txt"}]}
    with pytest.raises(ValueError, match="already configured"):
        EmitterManager.from_config(cfg)


def test_manager_unknown_name():
    manager = EmitterManager([RecordingEmitter("a")])
    with pytest.raises(KeyError, match="Available"):
        manager.get("b")


@pytest.mark.parametrize("cfg", [{"emitters": {"name": "fs"}}, {"emitters": ["fs"]}])
def test_manager_rejects_malformed_config(cfg):
    with pytest.raises(ValueError):
        EmitterManager.from_config(cfg)


def test_manager_empty_config():
    assert EmitterManager.from_config(None).names() == []
    assert EmitterManager.from_config({}).names() == []
