"""Shared fixtures: scripted transport and multipart body parsing."""

import email.policy
import os
import sys
from email.parser import BytesParser
from typing import Any, Dict, List
from unittest.mock import MagicMock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))


@pytest.fixture
def make_transport():
    """Return a factory for MagicMock transports answering with the given bodies in order."""

    def _factory(*bodies: Any) -> MagicMock:
        return MagicMock(side_effect=list(bodies))

    return _factory


@pytest.fixture
def parse_multipart():
    """Return a parser turning ``(content_type, body)`` into a list of part dicts."""

    def _parse(content_type: str, body: bytes) -> List[Dict[str, Any]]:
        raw = b"Content-Type: " + content_type.encode("ascii") + b"\r\n\r\n" + body
        message = BytesParser(policy=email.policy.default).parsebytes(raw)
        parts = []
        for part in message.iter_parts():
            parts.append({
                "name": part.get_param("name", header="content-disposition"),
                "filename": part.get_filename(),
                "content": part.get_payload(decode=True),
            })
        return parts

    return _parse
