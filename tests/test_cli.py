"""Tests for the emojify command-line interface.

WHY: The CLI sits in pipelines, so its framing rules matter as much as
the conversion: arguments get a trailing newline, stdin does not, empty
input produces no output, and conflicting flags fail before any text is
processed.

HOW: main(argv) is called directly. capsys captures stdout/stderr;
monkeypatch swaps stdin for a binary-backed text stream so the raw-bytes
path is exercised.
"""

import io

import pytest

from emojify import __version__
from emojify.cli import build_parser, main


def _set_stdin(monkeypatch, data: bytes):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(data), encoding="utf-8"))


class TestParser:
    """Flag definitions."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.text == []
        assert not args.list
        assert not args.encode
        assert not args.decode

    def test_short_flags(self):
        args = build_parser().parse_args(["-l", "-d", "word"])
        assert args.list
        assert args.decode
        assert args.text == ["word"]


class TestArguments:
    """Processing text given as arguments."""

    @pytest.mark.parametrize(
        "argv, expected",
        [
            (["Hello :wink: world"], "Hello \U0001f609 world\n"),
            (["Hello", ":smile:", "world", ":heart:"], "Hello \U0001f604 world \u2764\ufe0f\n"),
            (["Test :100: :+1: :-1:"], "Test \U0001f4af \U0001f44d \U0001f44e\n"),
            (["Just plain text"], "Just plain text\n"),
            ([""], ""),
        ],
    )
    def test_encode_arguments(self, capsys, argv, expected):
        main(argv)
        assert capsys.readouterr().out == expected

    def test_explicit_encode_flag(self, capsys):
        main(["--encode", ":tada:"])
        assert capsys.readouterr().out == "\U0001f389\n"

    def test_decode_arguments(self, capsys):
        main(["--decode", "Perfect! \U0001f4af"])
        assert capsys.readouterr().out == "Perfect! :100:\n"


class TestStdin:
    """Processing text piped on stdin."""

    @pytest.mark.parametrize(
        "data, expected",
        [
            ("Hello :smile: world", "Hello \U0001f604 world"),
            ("Line 1 :100:\nLine 2 :rocket:\nLine 3 :heart:", "Line 1 \U0001f4af\nLine 2 \U0001f680\nLine 3 \u2764\ufe0f"),
            ("", ""),
            ("Just plain text\nAnother line", "Just plain text\nAnother line"),
            ("test :smile:\n", "test \U0001f604\n"),
            ("\n", "\n"),
        ],
    )
    def test_encode_stdin(self, capsys, monkeypatch, data, expected):
        _set_stdin(monkeypatch, data.encode("utf-8"))
        main([])
        assert capsys.readouterr().out == expected

    def test_decode_stdin(self, capsys, monkeypatch):
        _set_stdin(monkeypatch, "Perfect! \U0001f4af\n".encode("utf-8"))
        main(["-d"])
        assert capsys.readouterr().out == "Perfect! :100:\n"

    def test_crlf_preserved(self, capsysbinary, monkeypatch):
        _set_stdin(monkeypatch, b"a :smile:\r\nb\r\n")
        main([])
        assert capsysbinary.readouterr().out == "a \U0001f604\r\nb\r\n".encode("utf-8")

    def test_invalid_utf8_passes_through(self, capsysbinary, monkeypatch):
        _set_stdin(monkeypatch, b"bad \xff byte :tada:")
        main([])
        assert capsysbinary.readouterr().out == b"bad \xff byte " + "\U0001f389".encode("utf-8")

    def test_read_error_exits_1(self, capsys, monkeypatch):
        class _Broken:
            def read(self):
                raise OSError("boom")

        monkeypatch.setattr("sys.stdin", _Broken())
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1
        assert "Error: error reading from stdin: boom" in capsys.readouterr().err


class TestFlags:
    """--list, --version and conflicting flags."""

    def test_list(self, capsys, table):
        main(["--list"])
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == len(table)
        assert ":smile: \U0001f604" in lines

    def test_list_ignores_text(self, capsys, table):
        main(["-l", "ignored :smile:"])
        out = capsys.readouterr().out
        assert "ignored" not in out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert capsys.readouterr().out == "{}\n".format(__version__)

    def test_encode_and_decode_conflict(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--encode", "--decode", ":smile:"])
        assert exc.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "mutually exclusive" in captured.err
