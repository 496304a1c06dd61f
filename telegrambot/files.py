"""File references accepted by the upload-capable endpoints.

A file is referenced in one of three ways:

* :class:`FileID`: a file already stored on the Telegram servers.
* :class:`FileURL`: an HTTP URL Telegram downloads by itself.
* :class:`FileReader`: raw content uploaded with the request as a
  ``multipart/form-data`` part.

The first two serialise to plain strings inside the JSON payload.  A
``FileReader`` serialises to ``attach://<name>`` where ``<name>`` is the form
field carrying its bytes; the name is assigned by the request encoder and
passed in through the serialisation context, so the reference itself is never
mutated.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, SerializationInfo, model_serializer

# Serialisation-context key under which the encoder publishes ``id(reader) -> name``.
ATTACH_NAMES_KEY = "attach_names"

ATTACH_PREFIX = "attach://"


class FileID(BaseModel):
    """Identifier of a file already stored on the Telegram servers."""

    file_id: str

    model_config = {"populate_by_name": True}

    def __init__(self, file_id: str, **data: Any) -> None:
        super().__init__(file_id=file_id, **data)

    @model_serializer
    def ser_model(self) -> str:
        return self.file_id


class FileURL(BaseModel):
    """HTTP URL of a file to be fetched by Telegram."""

    url: str

    model_config = {"populate_by_name": True}

    def __init__(self, url: str, **data: Any) -> None:
        super().__init__(url=url, **data)

    @model_serializer
    def ser_model(self) -> str:
        return self.url


class FileReader(BaseModel):
    """Local content uploaded as a multipart form-file part.

    Args:
        name: File name reported in the form part (``filename=``).
        reader: ``bytes`` or a binary stream with a ``read()`` method.
        attach_name: Optional fixed form field name.  When omitted the encoder
            assigns one per request.
    """

    name: str
    reader: Any
    attach_name: Optional[str] = None

    model_config = {"populate_by_name": True, "arbitrary_types_allowed": True}

    def __init__(self, name: str, reader: Any, attach_name: Optional[str] = None, **data: Any) -> None:
        super().__init__(name=name, reader=reader, attach_name=attach_name, **data)

    @model_serializer
    def ser_model(self, info: SerializationInfo) -> str:
        names = (info.context or {}).get(ATTACH_NAMES_KEY) or {}
        attach_name = names.get(id(self)) or self.attach_name
        if not attach_name:
            raise ValueError(
                f"FileReader {self.name!r} has no attach name; "
                "pass it in the request's file list"
            )
        return f"{ATTACH_PREFIX}{attach_name}"

    def read_content(self) -> bytes:
        """Return the full content, rewinding seekable streams afterwards.

        Streams are read from their current position.  Seekable streams are
        put back at that position so the same reference can be encoded again
        (e.g. when a call is re-issued after a chat migration).
        """
        if isinstance(self.reader, (bytes, bytearray, memoryview)):
            return bytes(self.reader)
        if not hasattr(self.reader, "read"):
            raise TypeError(f"FileReader {self.name!r}: reader must be bytes or a binary stream")

        seekable = bool(getattr(self.reader, "seekable", lambda: False)())
        position = self.reader.tell() if seekable else None
        content = self.reader.read()
        if position is not None:
            self.reader.seek(position)
        if isinstance(content, str):
            content = content.encode("utf-8")
        return bytes(content)


InputFile = Union[FileID, FileURL, FileReader]


def needs_upload(file: Optional[InputFile]) -> bool:
    """Return ``True`` when *file* must travel as a multipart part."""
    return isinstance(file, FileReader)
