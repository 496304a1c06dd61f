"""Request body encoding: JSON for plain calls, multipart when files are uploaded."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import BaseModel, TypeAdapter
from pydantic_core import PydanticSerializationError
from urllib3 import encode_multipart_formdata

from telegrambot.exceptions import EncodeException
from telegrambot.files import ATTACH_NAMES_KEY, FileReader, needs_upload

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"

_MAPPING_ADAPTER = TypeAdapter(Dict[str, Any])


@dataclass(frozen=True)
class EncodedRequest:
    """An encoded request body together with its ``Content-Type`` header value."""

    content_type: str
    body: bytes


def collect_uploads(files: Optional[Iterable[Any]]) -> List[Tuple[str, FileReader]]:
    """Pick the references that need upload and give each a distinct attach name.

    ``None`` entries and non-uploading references are skipped.  A reference
    listed twice keeps a single name.  Pre-assigned ``attach_name`` values are
    kept; the others get ``file<N>`` by position.
    """
    uploads: List[Tuple[str, FileReader]] = []
    seen: Dict[int, str] = {}
    taken = set()
    for file in files or ():
        if not needs_upload(file) or id(file) in seen:
            continue
        name = file.attach_name
        if not name or name in taken:
            index = len(uploads)
            name = f"file{index}"
            while name in taken:
                index += 1
                name = f"file{index}"
        seen[id(file)] = name
        taken.add(name)
        uploads.append((name, file))
    return uploads


def dump_params(params: Any, attach_names: Optional[Mapping[int, str]] = None) -> Dict[str, Any]:
    """Serialise *params* to a JSON-compatible field map, omitting unset fields.

    Raises:
        EncodeException: The parameters cannot be serialised.
    """
    if params is None:
        return {}
    context = {ATTACH_NAMES_KEY: dict(attach_names or {})}
    try:
        if isinstance(params, BaseModel):
            return params.model_dump(mode="json", by_alias=True, exclude_none=True, context=context)
        if isinstance(params, Mapping):
            fields = {key: value for key, value in params.items() if value is not None}
            return _MAPPING_ADAPTER.dump_python(
                fields, mode="json", by_alias=True, exclude_none=True, context=context
            )
    except (PydanticSerializationError, ValueError, TypeError) as exc:
        raise EncodeException(f"cannot serialise {type(params).__name__}: {exc}") from exc
    raise EncodeException(f"unsupported parameter object: {type(params).__name__}")


def _form_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def encode_request(params: Any = None, files: Optional[Iterable[Any]] = None) -> EncodedRequest:
    """Encode one Bot API call.

    Args:
        params: Pydantic params model, plain mapping or ``None``.
        files: File references carried by *params*; entries may be ``None``.

    Returns:
        JSON body when nothing needs upload, otherwise a ``multipart/form-data``
        body holding every parameter as a form field plus one file part per
        :class:`~telegrambot.files.FileReader`.

    Raises:
        EncodeException: Parameters or file content cannot be serialised.
    """
    uploads = collect_uploads(files)
    fields = dump_params(params, {id(reader): name for name, reader in uploads})

    if not uploads:
        try:
            body = json.dumps(fields, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise EncodeException(f"cannot encode JSON body: {exc}") from exc
        return EncodedRequest(JSON_CONTENT_TYPE, body)

    try:
        form: List[Tuple[str, Any]] = [(key, _form_value(value)) for key, value in fields.items()]
    except (TypeError, ValueError) as exc:
        raise EncodeException(f"cannot encode form field: {exc}") from exc
    for name, reader in uploads:
        try:
            content = reader.read_content()
        except (OSError, TypeError) as exc:
            raise EncodeException(f"cannot read file {reader.name!r}: {exc}") from exc
        form.append((name, (reader.name, content)))

    body, content_type = encode_multipart_formdata(form)
    logger.debug(
        "Encoded multipart request",
        extra={"field_count": len(fields), "upload_count": len(uploads)},
    )
    return EncodedRequest(content_type, body)
