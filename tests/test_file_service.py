import pytest

from staticdoc.services.file_service import FileService


def test_file_service_read_write_atomic_success(tmp_path):
    fs = FileService()
    p = tmp_path / "nested" / "index.html"
    fs.write_text_atomic(p, "héllo <pre>\n\t</pre>")
    assert p.read_bytes() == "héllo <pre>\n\t</pre>".encode("utf-8")
    assert fs.read_text(p) == "héllo <pre>\n\t</pre>"


def test_file_service_read_text_missing(tmp_path):
    fs = FileService()
    with pytest.raises(FileNotFoundError):
        fs.read_text(tmp_path / "missing.html")


def test_file_service_write_atomic_open_fail(monkeypatch, tmp_path):
    class FakeQSaveFile:
        def __init__(self, *_):
            pass

        def open(self, *_):
            return False

    fs = FileService()
    monkeypatch.setattr("staticdoc.services.file_service.QSaveFile", FakeQSaveFile, raising=True)
    with pytest.raises(OSError):
        fs.write_text_atomic(tmp_path / "x.html", "data")


def test_file_service_write_atomic_commit_fail(monkeypatch, tmp_path):
    class FakeQSaveFile:
        def __init__(self, *_):
            self._data = b""

        def open(self, *_):
            return True

        def write(self, b):
            self._data += b

        def commit(self):
            return False

    fs = FileService()
    p = tmp_path / "x.html"
    monkeypatch.setattr("staticdoc.services.file_service.QSaveFile", FakeQSaveFile, raising=True)
    with pytest.raises(OSError):
        fs.write_text_atomic(p, "data")
    assert not p.exists()
