import io

import pytest

from gptkit.forms import FormBuilder


class _WriterFailed(Exception):
    pass


class _FailingWriter:
    def write(self, data):
        raise _WriterFailed("mock writer failed")


def _boundary(builder):
    content_type = builder.content_type()
    prefix = "multipart/form-data; boundary="
    assert content_type.startswith(prefix)
    return content_type[len(prefix):]


def test_failing_writer_error_propagates(tmp_path):
    path = tmp_path / "upload.jsonl"
    path.write_bytes(b"")
    with path.open("rb") as handle:
        builder = FormBuilder(_FailingWriter())
        with pytest.raises(_WriterFailed):
            builder.create_form_file("file", handle)


def test_closed_file_raises(tmp_path):
    path = tmp_path / "upload.jsonl"
    path.write_bytes(b"data")
    handle = path.open("rb")
    handle.close()
    builder = FormBuilder(io.BytesIO())
    with pytest.raises(ValueError):
        builder.create_form_file("file", handle)


def test_empty_filename_is_rejected():
    builder = FormBuilder(io.BytesIO())
    with pytest.raises(ValueError, match="filename cannot be empty"):
        builder.create_form_file("file", io.BytesIO(b"x"))


def test_form_layout_with_field_and_reader():
    body = io.BytesIO()
    builder = FormBuilder(body)
    builder.write_field("purpose", "fine-tune")
    builder.create_form_file_reader("file", io.BytesIO(b"foo"), "dir/sub/foo")
    builder.close()
    boundary = _boundary(builder)
    expected = (
        f"--{boundary}\r\n"
        'Content-Disposition: form-data; name="purpose"\r\n'
        "\r\n"
        "fine-tune\r\n"
        f"--{boundary}\r\n"
        'Content-Disposition: form-data; name="file"; filename="foo"\r\n'
        "Content-Type: application/octet-stream\r\n"
        "\r\n"
        "foo\r\n"
        f"--{boundary}--\r\n"
    ).encode()
    assert body.getvalue() == expected


def test_file_part_uses_file_name(tmp_path):
    path = tmp_path / "image.png"
    path.write_bytes(b"\x89PNG")
    body = io.BytesIO()
    builder = FormBuilder(body)
    with path.open("rb") as handle:
        builder.create_form_file("image", handle)
    builder.close()
    content = body.getvalue()
    assert f'filename="{path}"'.encode() in content
    assert b"\r\n\r\n\x89PNG\r\n" in content


def test_close_without_parts():
    body = io.BytesIO()
    builder = FormBuilder(body)
    builder.close()
    assert body.getvalue() == f"--{_boundary(builder)}--\r\n".encode()


def test_quotes_in_names_are_escaped():
    body = io.BytesIO()
    builder = FormBuilder(body)
    builder.write_field('a"b', "v")
    assert b'name="a\\"b"' in body.getvalue()


def test_boundaries_differ_between_builders():
    first = FormBuilder(io.BytesIO())
    second = FormBuilder(io.BytesIO())
    assert first.content_type() != second.content_type()
    assert len(_boundary(first)) == 60