"""multipart/form-data encoding for file uploads.

The transport contract carries an already encoded body, so uploads are
encoded up front. Encoding is delegated to ``httpx.Request`` which produces
the body and the matching ``Content-Type`` header (with boundary).
"""

from __future__ import annotations

from typing import Dict, Tuple, Union

import httpx


def encode_multipart(
    fields: Dict[str, str],
    file_field: str,
    filename: str,
    content: Union[str, bytes],
    content_type: str = "application/octet-stream",
) -> Tuple[bytes, str]:
    """Encode ``fields`` plus one file part.

    Returns:
        ``(body, content_type_header)``.
    """
    data = content.encode("utf-8") if isinstance(content, str) else content
    request = httpx.Request(
        "POST",
        "http://multipart.invalid/",
        data=fields,
        files={file_field: (filename, data, content_type)},
    )
    body = request.read()
    return body, request.headers["Content-Type"]


__all__ = ["encode_multipart"]
