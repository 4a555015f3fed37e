"""Tests for the output module."""

import io
import sys

import pytest

from nk_message.output import build_filename, write_message, write_stdout


class TestBuildFilename:
    def test_host_and_timestamp(self):
        assert build_filename("host1", "20240101120000") == "message-host1-20240101120000.xml"

    def test_empty_host_looked_up(self):
        name = build_filename("", "20240101120000", host_func=lambda: "box1")
        assert name == "message-box1-20240101120000.xml"

    def test_lookup_not_called_when_host_given(self):
        def fail():
            raise AssertionError("lookup should not run")

        assert build_filename("h", "20240101120000", host_func=fail) == "message-h-20240101120000.xml"


class TestWriteMessage:
    def test_writes_content(self, tmp_path):
        path = tmp_path / "out.xml"
        write_message(str(path), "<messages/>\n")
        assert path.read_text(encoding="utf-8") == "<messages/>\n"

    def test_overwrites_existing(self, tmp_path):
        path = tmp_path / "out.xml"
        path.write_text("old content that is longer")
        write_message(str(path), "new")
        assert path.read_text() == "new"

    def test_undecodable_bytes_written_unchanged(self, tmp_path):
        path = tmp_path / "out.xml"
        write_message(str(path), "<subject>caf\udce9</subject>")
        assert path.read_bytes() == b"<subject>caf\xe9</subject>"

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(OSError):
            write_message(str(tmp_path / "missing" / "out.xml"), "x")


class TestWriteStdout:
    def test_writes_text(self, capsys):
        write_stdout("<messages/>\n")
        assert capsys.readouterr().out == "<messages/>\n"

    def test_undecodable_bytes_written_unchanged(self, monkeypatch):
        raw = io.BytesIO()
        stream = io.TextIOWrapper(raw, encoding="utf-8")
        monkeypatch.setattr(sys, "stdout", stream)

        write_stdout("already buffered ")
        write_stdout("caf\udce9\n")

        assert raw.getvalue() == b"already buffered caf\xe9\n"

    def test_stream_without_buffer(self, monkeypatch):
        stream = io.StringIO()
        monkeypatch.setattr(sys, "stdout", stream)
        write_stdout("plain\n")
        assert stream.getvalue() == "plain\n"
