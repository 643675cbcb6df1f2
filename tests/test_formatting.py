import pytest

from conftest import build_tree
from objread.formatting import SEPARATOR, format_object, render_report
from objread.hexdump import hex_dump
from objread.models import ObjectType, parse_object

COMMIT_BODY = (
    "tree 4b825dc642cb6eb9a060e54bf8d69288fbee4904\n"
    "author Zoë <zoe@example.com> 1700000000 +0100\n"
    "committer Zoë <zoe@example.com> 1700000000 +0100\n"
    "\n"
    "Initial commit\n"
).encode()


class TestFormatObject:
    @pytest.mark.parametrize("obj_type", ["commit", "tag", ObjectType.COMMIT])
    def test_text_types_are_verbatim(self, obj_type):
        assert format_object(obj_type, COMMIT_BODY) == COMMIT_BODY.decode()

    @pytest.mark.parametrize("obj_type", ["commit", "tag"])
    def test_text_types_keep_invalid_utf8(self, obj_type):
        body = COMMIT_BODY + b"\xff\xfe\x00\n"
        rendered = format_object(obj_type, body)
        assert rendered.encode("utf-8", "surrogateescape") == body

    def test_tree(self, id1, id2):
        content = build_tree([("100644", "a.txt", id1), ("40000", "dir", id2)])
        assert format_object("tree", content).split("\n") == [
            f"100644 {id1.hex()}\ta.txt",
            f"40000 {id2.hex()}\tdir",
        ]

    def test_blob(self, caplog):
        body = b"hello world\n\x00\x01"
        assert format_object("blob", body) == hex_dump(body)
        assert caplog.records == []

    def test_unknown_type(self, caplog):
        body = b"some notes"
        assert format_object("note", body) == hex_dump(body)
        assert "Unknown object type, showing hex representation: note" in caplog.text

    def test_type_match_is_exact(self, caplog):
        assert format_object("Commit", b"hi") == hex_dump(b"hi")
        assert "Commit" in caplog.text


class TestRenderReport:
    def test_blob_report(self):
        obj = parse_object(b"blob 5\x00hello")
        assert render_report(obj) == (
            f"signature: {obj.signature}\n"
            "type: blob\n"
            "size: 5\n"
            "----------------------------------------\n"
            "68 65 6c 6c 6f " + " " * 37 + "hello\n"
        )

    def test_separator(self):
        assert SEPARATOR == "-" * 40

    def test_commit_report(self):
        raw = f"commit {len(COMMIT_BODY)}".encode() + b"\x00" + COMMIT_BODY
        report = render_report(parse_object(raw))
        header, _, body = report.partition(SEPARATOR + "\n")
        assert header.splitlines()[1:] == ["type: commit", f"size: {len(COMMIT_BODY)}"]
        assert body == COMMIT_BODY.decode() + "\n"

    def test_declared_size_is_reported(self, caplog):
        report = render_report(parse_object(b"blob 99\x00hello"))
        assert "size: 99\n" in report
        assert report.endswith("hello\n")
        assert "Size mismatch" in caplog.text

    def test_empty_tree(self):
        report = render_report(parse_object(b"tree 0\x00"))
        assert report.endswith(SEPARATOR + "\n\n")
