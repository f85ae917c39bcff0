import tempfile

import pytest

from ui_demo_streamlit.app import _parse_uploaded, preview


class _Upload:
    def __init__(self, name, payload):
        self.name = name
        self._payload = payload

    def getbuffer(self):
        return memoryview(self._payload)


def test_parse_uploaded_removes_temp_file(tmp_path, monkeypatch):
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
    upload = _Upload("examples.csv", b"title,category\nFix server error,technical\n")

    examples = _parse_uploaded(upload)

    assert len(examples) == 1
    assert list(tmp_path.iterdir()) == []


def test_parse_uploaded_removes_temp_file_on_error(tmp_path, monkeypatch):
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
    upload = _Upload("examples.csv", b"title,category\nFix it,gardening\n")

    with pytest.raises(ValueError):
        _parse_uploaded(upload)
    assert list(tmp_path.iterdir()) == []


def test_preview_marks_overrides():
    result = preview("Fix server error", "", "finance", None)
    assert result["classified"]["category"] == "technical"
    assert result["final"]["category"] == "finance"
    assert result["overridden"] is True
