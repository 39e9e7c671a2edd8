"""
HTTP executors backed by httpx.

Send requests straight to the Elasticsearch REST API and turn non-2xx
responses into ApiError.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from es_sql.core.models import HttpResponse, PerformRequestOptions
from es_sql.errors import ApiError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def _header_pairs(
    default_headers: Dict[str, str], headers: Dict[str, List[str]]
) -> List[Tuple[str, str]]:
    """Merge default and request headers. Request headers replace defaults."""
    overridden = {name.lower() for name in headers}
    pairs = [
        (name, value)
        for name, value in default_headers.items()
        if name.lower() not in overridden
    ]
    for name, values in headers.items():
        pairs.extend((name, value) for value in values)
    return pairs


def _to_response(response: httpx.Response) -> HttpResponse:
    if not response.is_success:
        raise _api_error(response)
    return HttpResponse(
        status_code=response.status_code,
        body=response.content,
        headers=dict(response.headers),
    )


def _api_error(response: httpx.Response) -> ApiError:
    """Build an ApiError from the Elasticsearch error envelope, if present."""
    error: Optional[Dict[str, Any]] = None
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        raw_error = payload.get("error")
        if isinstance(raw_error, dict):
            error = raw_error
        elif isinstance(raw_error, str):
            error = {"reason": raw_error}

    logger.debug("Elasticsearch returned %s: %s", response.status_code, response.text)
    return ApiError(response.status_code, body=response.content, error=error)


class HttpxExecutor:
    """
    Synchronous executor.

    Implements the IHttpExecutor interface on top of httpx.Client.
    """

    default_headers = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the executor.

        Args:
            base_url: Elasticsearch URL, e.g. "http://localhost:9200"
            timeout: Default timeout in seconds
            headers: Headers sent with every request
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers=headers,
            transport=transport,
        )

    def perform_request(self, options: PerformRequestOptions) -> HttpResponse:
        response = self.client.request(
            options.method,
            options.path,
            params=options.params,
            content=_encode_body(options.body),
            headers=_header_pairs(self.default_headers, options.headers),
            timeout=options.timeout if options.timeout is not None else self.timeout,
        )
        return _to_response(response)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "HttpxExecutor":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class AsyncHttpxExecutor:
    """
    Async executor.

    Implements the IAsyncHttpExecutor interface on top of httpx.AsyncClient.
    """

    default_headers = HttpxExecutor.default_headers

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers=headers,
            transport=transport,
        )

    async def perform_request(self, options: PerformRequestOptions) -> HttpResponse:
        response = await self.client.request(
            options.method,
            options.path,
            params=options.params,
            content=_encode_body(options.body),
            headers=_header_pairs(self.default_headers, options.headers),
            timeout=options.timeout if options.timeout is not None else self.timeout,
        )
        return _to_response(response)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "AsyncHttpxExecutor":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def _encode_body(body: Any) -> Optional[bytes]:
    if body is None:
        return None
    return json.dumps(body).encode("utf-8")
