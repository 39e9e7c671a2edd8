"""
HTTP executor backed by the official Elasticsearch client.

Lets the SQL builders reuse an existing Elasticsearch connection, including
its node pool, retries and TLS settings.
"""

import json
from typing import Any, Dict

from elasticsearch import Elasticsearch

from es_sql.core.models import HttpResponse, PerformRequestOptions


class ESClientExecutor:
    """
    Executes requests through Elasticsearch.perform_request.

    Implements the IHttpExecutor interface. Errors raised by the client
    (ApiError, ConnectionError, ...) are not translated.

    The client decodes JSON bodies itself, so HttpResponse.body holds a
    json.dumps re-encoding of the document, not the bytes on the wire.
    Translate results keep their content but lose server formatting such as
    pretty=true. Use HttpxExecutor when the exact body matters.
    """

    def __init__(self, es_client: Elasticsearch):
        """
        Initialize the executor.

        Args:
            es_client: Configured Elasticsearch client
        """
        self.es_client = es_client

    @classmethod
    def from_host(cls, es_host: str, **client_kwargs: Any) -> "ESClientExecutor":
        """
        Create an executor connected to a single host.

        Args:
            es_host: Elasticsearch host URL
            **client_kwargs: Extra arguments for the Elasticsearch constructor
        """
        return cls(Elasticsearch(hosts=[es_host], **client_kwargs))

    def perform_request(self, options: PerformRequestOptions) -> HttpResponse:
        client = self.es_client
        if options.timeout is not None:
            client = client.options(request_timeout=options.timeout)

        response = client.perform_request(
            options.method,
            options.path,
            params=options.params or None,
            headers=self._headers(options),
            body=options.body,
        )

        body = response.body
        if isinstance(body, bytes):
            raw = body
        elif isinstance(body, str):
            raw = body.encode("utf-8")
        else:
            # The client has already decoded the JSON body
            raw = json.dumps(body).encode("utf-8")

        return HttpResponse(
            status_code=response.meta.status,
            body=raw,
            headers=dict(response.meta.headers),
        )

    @staticmethod
    def _headers(options: PerformRequestOptions) -> Dict[str, str]:
        headers = {
            "accept": "application/json",
            "content-type": "application/json",
        }
        for name, values in options.headers.items():
            headers[name.lower()] = ",".join(values)
        return headers

    def close(self) -> None:
        self.es_client.close()
