import pytest

from gptkit.files import (
    File,
    FileBytesRequest,
    FileRequest,
    FilesList,
    PurposeType,
    build_file_bytes_form,
    build_file_form,
)


class MockBuilder:
    def __init__(self):
        self.write_error = None
        self.file_error = None
        self.reader_error = None
        self.close_error = None
        self.calls = []

    def __call__(self, body):
        self.body = body
        return self

    def write_field(self, fieldname, value):
        self.calls.append(("field", fieldname, value))
        if self.write_error is not None:
            raise self.write_error

    def create_form_file(self, fieldname, file):
        self.calls.append(("file", fieldname))
        if self.file_error is not None:
            raise self.file_error

    def create_form_file_reader(self, fieldname, reader, filename):
        self.calls.append(("reader", fieldname, filename, reader.read()))
        if self.reader_error is not None:
            raise self.reader_error

    def close(self):
        self.calls.append(("close",))
        if self.close_error is not None:
            raise self.close_error

    def content_type(self):
        return ""


BYTES_REQUEST = FileBytesRequest(name="foo", bytes=b"foo", purpose=PurposeType.ASSISTANTS)


def test_file_bytes_upload_write_field_failure():
    mock = MockBuilder()
    mock.write_error = RuntimeError("mockWriteField error")
    with pytest.raises(RuntimeError) as info:
        build_file_bytes_form(BYTES_REQUEST, mock)
    assert info.value is mock.write_error


def test_file_bytes_upload_reader_failure():
    mock = MockBuilder()
    mock.reader_error = RuntimeError("mockCreateFormFile error")
    with pytest.raises(RuntimeError) as info:
        build_file_bytes_form(BYTES_REQUEST, mock)
    assert info.value is mock.reader_error


def test_file_bytes_upload_close_failure():
    mock = MockBuilder()
    mock.close_error = RuntimeError("mockClose error")
    with pytest.raises(RuntimeError) as info:
        build_file_bytes_form(BYTES_REQUEST, mock)
    assert info.value is mock.close_error


def test_file_bytes_upload_call_order():
    mock = MockBuilder()
    body, content_type = build_file_bytes_form(BYTES_REQUEST, mock)
    assert content_type == ""
    assert body == b""
    assert mock.calls == [
        ("field", "purpose", "assistants"),
        ("reader", "file", "foo", b"foo"),
        ("close",),
    ]


@pytest.fixture
def local_file(tmp_path):
    path = tmp_path / "data.jsonl"
    path.write_bytes(b'{"prompt": "a"}\n')
    return path


def test_file_upload_write_field_failure(local_file):
    mock = MockBuilder()
    mock.write_error = RuntimeError("mockWriteField error")
    request = FileRequest(file_name="test.go", file_path=str(local_file), purpose="fine-tune")
    with pytest.raises(RuntimeError) as info:
        build_file_form(request, mock)
    assert info.value is mock.write_error


def test_file_upload_create_form_file_failure(local_file):
    mock = MockBuilder()
    mock.file_error = RuntimeError("mockCreateFormFile error")
    request = FileRequest(file_name="test.go", file_path=str(local_file), purpose="fine-tune")
    with pytest.raises(RuntimeError) as info:
        build_file_form(request, mock)
    assert info.value is mock.file_error


def test_file_upload_close_failure(local_file):
    mock = MockBuilder()
    mock.close_error = RuntimeError("mockClose error")
    request = FileRequest(file_name="test.go", file_path=str(local_file), purpose="fine-tune")
    with pytest.raises(RuntimeError) as info:
        build_file_form(request, mock)
    assert info.value is mock.close_error


def test_file_upload_with_non_existent_path(tmp_path):
    request = FileRequest(
        file_path=str(tmp_path / "some non existent file path" / "F616FD18")
    )
    with pytest.raises(FileNotFoundError):
        build_file_form(request)


def test_file_bytes_form_with_real_builder():
    request = FileBytesRequest(name="dir/report.jsonl", bytes=b"hello", purpose=PurposeType.BATCH)
    body, content_type = build_file_bytes_form(request)
    assert content_type.startswith("multipart/form-data; boundary=")
    boundary = content_type.split("boundary=", 1)[1]
    assert body.endswith(f"--{boundary}--\r\n".encode())
    assert b'name="purpose"\r\n\r\nbatch' in body
    assert b'filename="report.jsonl"' in body
    assert b"\r\n\r\nhello\r\n" in body


def test_file_form_with_real_builder(local_file):
    request = FileRequest(file_path=str(local_file), purpose="fine-tune")
    body, content_type = build_file_form(request)
    assert content_type.startswith("multipart/form-data; boundary=")
    assert b'name="purpose"\r\n\r\nfine-tune' in body
    assert b'{"prompt": "a"}\n' in body
    assert b'name="file"' in body


def test_file_from_dict():
    file = File.from_dict(
        {
            "bytes": 120,
            "created_at": 1677610602,
            "id": "file-abc123",
            "filename": "mydata.jsonl",
            "object": "file",
            "status": "processed",
            "purpose": "fine-tune",
            "status_details": "",
        }
    )
    assert file == File(
        bytes=120,
        created_at=1677610602,
        id="file-abc123",
        file_name="mydata.jsonl",
        object="file",
        status="processed",
        purpose="fine-tune",
        status_details="",
    )


def test_files_list_from_dict():
    files = FilesList.from_dict({"data": [{"id": "a"}, {"id": "b"}]})
    assert [f.id for f in files.files] == ["a", "b"]
    assert FilesList.from_dict({}).files == []