"""Thread messages of the assistants API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import urlencode

MESSAGES_SUFFIX = "messages"


@dataclass
class MessageText:
    """Text content of a message."""

    value: str = ""
    annotations: Optional[list[Any]] = None


@dataclass
class ImageFile:
    """An image file referenced by a message."""

    file_id: str = ""


@dataclass
class ImageURL:
    """An image URL referenced by a message."""

    url: str = ""
    detail: str = ""


@dataclass
class MessageContent:
    """One content part of a message."""

    type: str = ""
    text: Optional[MessageText] = None
    image_file: Optional[ImageFile] = None
    image_url: Optional[ImageURL] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MessageContent":
        text = data.get("text")
        image_file = data.get("image_file")
        image_url = data.get("image_url")
        return cls(
            type=data.get("type") or "",
            text=None
            if text is None
            else MessageText(
                value=text.get("value") or "",
                annotations=None if text.get("annotations") is None else list(text["annotations"]),
            ),
            image_file=None
            if image_file is None
            else ImageFile(file_id=image_file.get("file_id") or ""),
            image_url=None
            if image_url is None
            else ImageURL(url=image_url.get("url") or "", detail=image_url.get("detail") or ""),
        )


@dataclass
class Message:
    """A message in a thread."""

    id: str = ""
    object: str = ""
    created_at: int = 0
    thread_id: str = ""
    role: str = ""
    content: list[MessageContent] = field(default_factory=list)
    file_ids: list[str] = field(default_factory=list)
    assistant_id: Optional[str] = None
    run_id: Optional[str] = None
    metadata: Optional[dict[str, Any]] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Message":
        metadata = data.get("metadata")
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created_at=data.get("created_at") or 0,
            thread_id=data.get("thread_id") or "",
            role=data.get("role") or "",
            content=[MessageContent.from_dict(c or {}) for c in data.get("content") or []],
            file_ids=list(data.get("file_ids") or []),
            assistant_id=data.get("assistant_id"),
            run_id=data.get("run_id"),
            metadata=None if metadata is None else dict(metadata),
        )


@dataclass
class MessagesList:
    """A page of messages in a thread."""

    messages: list[Message] = field(default_factory=list)
    object: str = ""
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MessagesList":
        return cls(
            messages=[Message.from_dict(item or {}) for item in data.get("data") or []],
            object=data.get("object") or "",
            first_id=data.get("first_id"),
            last_id=data.get("last_id"),
            has_more=bool(data.get("has_more")),
        )


def _encode(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    return to_dict() if callable(to_dict) else value


@dataclass
class MessageRequest:
    """A request to create a message."""

    role: str = ""
    content: str = ""
    file_ids: Optional[list[str]] = None
    metadata: Optional[dict[str, Any]] = None
    attachments: Optional[list[Any]] = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body, leaving out optional fields that are empty."""
        out: dict[str, Any] = {"role": self.role, "content": self.content}
        if self.file_ids:
            out["file_ids"] = list(self.file_ids)
        if self.metadata:
            out["metadata"] = dict(self.metadata)
        if self.attachments:
            out["attachments"] = [_encode(item) for item in self.attachments]
        return out


@dataclass
class MessageFile:
    """A file attached to a message."""

    id: str = ""
    object: str = ""
    created_at: int = 0
    message_id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MessageFile":
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created_at=data.get("created_at") or 0,
            message_id=data.get("message_id") or "",
        )


@dataclass
class MessageFilesList:
    """The files attached to a message."""

    message_files: list[MessageFile] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MessageFilesList":
        return cls(
            message_files=[MessageFile.from_dict(item or {}) for item in data.get("data") or []]
        )


@dataclass
class MessageDeletionStatus:
    """The deletion status of a message."""

    id: str = ""
    object: str = ""
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MessageDeletionStatus":
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            deleted=bool(data.get("deleted")),
        )


def messages_path(
    thread_id: str, message_id: Optional[str] = None, file_id: Optional[str] = None
) -> str:
    """Return the URL path of a thread's messages, one message, or its files.

    With ``file_id`` set to ``""`` the path names the message's file collection.
    """
    path = f"/threads/{thread_id}/{MESSAGES_SUFFIX}"
    if message_id is None:
        if file_id is not None:
            raise ValueError("a file id needs a message id")
        return path
    path += f"/{message_id}"
    if file_id is None:
        return path
    path += "/files"
    if file_id:
        path += f"/{file_id}"
    return path


def list_messages_path(
    thread_id: str,
    limit: Optional[int] = None,
    order: Optional[str] = None,
    after: Optional[str] = None,
    before: Optional[str] = None,
    run_id: Optional[str] = None,
) -> str:
    """Return the URL path listing a thread's messages with optional paging parameters."""
    params: list[tuple[str, str]] = []
    if limit is not None:
        params.append(("limit", str(int(limit))))
    if order is not None:
        params.append(("order", order))
    if after is not None:
        params.append(("after", after))
    if before is not None:
        params.append(("before", before))
    if run_id is not None:
        params.append(("run_id", run_id))
    path = messages_path(thread_id)
    if params:
        path += "?" + urlencode(sorted(params))
    return path


def modify_message_body(metadata: Optional[dict[str, str]]) -> dict[str, Any]:
    """Return the JSON body of a modify-message request."""
    return {"metadata": None if metadata is None else dict(metadata)}