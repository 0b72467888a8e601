import hashlib
import json
from typing import Any

from fastapi import Request, Response
from fastapi.responses import JSONResponse


CACHE_CONTROL = 'private, max-age=0, must-revalidate'


def generate_etag(document: Any) -> str:
    """
    Generate an ETag for a rendered document.

    Rendering is deterministic, so hashing the canonical JSON form (sorted keys,
    compact separators) gives the same tag for the same resource graph.
    """
    content = json.dumps(document, sort_keys=True, separators=(",", ":"), default=str)

    etag_hash = hashlib.md5(content.encode('utf-8')).hexdigest()
    return f'"{etag_hash}"'


def client_has_current(request: Request, etag: str) -> bool:
    """True when If-None-Match names `etag` (or `*`) among its comma-separated tags."""
    if_none_match = request.headers.get('if-none-match')
    if not if_none_match:
        return False

    client_etags = {tag.strip() for tag in if_none_match.split(',')}
    return '*' in client_etags or etag in client_etags


def document_response(request: Request, document: Any, media_type: str) -> Response:
    """
    Build the response for a rendered document.

    Sends 304 with no body when the client already holds the same document,
    otherwise the JSON body under the format's media type. Both carry the ETag.
    """
    etag = generate_etag(document)
    headers = {'ETag': etag, 'Cache-Control': CACHE_CONTROL}

    if client_has_current(request, etag):
        return Response(status_code=304, headers=headers)

    return JSONResponse(content=document, media_type=media_type, headers=headers)
