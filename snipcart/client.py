from typing import Optional, Any, List, Tuple
from urllib.parse import quote

import requests

from .auth import Credential
from .config import ClientConfig
from .http import QueryParams, json_request, query_pairs, request_json


class SnipcartClient:
    """Handle holding the API credential and connection settings.

    The instance carries no per-call state, so it can be shared between
    threads that each issue their own calls.
    """

    def __init__(self, api_key: str, config: Optional[ClientConfig] = None) -> None:
        self._credential = Credential.from_key(api_key)
        self._config = config or ClientConfig()

    def __repr__(self) -> str:
        return f"SnipcartClient(base_url={self._config.base_url!r}, limit={self.limit})"

    @property
    def credential(self) -> Credential:
        return self._credential

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def limit(self) -> int:
        return self._config.page_limit

    def url(self, path: str, *segments: str) -> str:
        uri = self._config.base_url.rstrip("/") + path
        for segment in segments:
            uri += "/" + quote(segment, safe="")
        return uri

    def paged(self, queries: Optional[QueryParams] = None) -> List[Tuple[str, str]]:
        """Return ``queries`` as ordered pairs with ``limit`` appended if absent."""
        pairs = query_pairs(queries)
        if not any(key == "limit" for key, _ in pairs):
            pairs.append(("limit", str(self.limit)))
        return pairs

    def open(
        self,
        method: str,
        uri: str,
        *,
        queries: Optional[QueryParams] = None,
        body: Optional[Any] = None,
    ) -> requests.Response:
        return json_request(
            method,
            uri,
            self._credential.scheme,
            self._credential.auth_base64,
            queries=queries,
            body=body,
            timeout=self._config.timeout,
        )

    def request(
        self,
        method: str,
        uri: str,
        *,
        queries: Optional[QueryParams] = None,
        body: Optional[Any] = None,
        expected: type = dict,
    ) -> Any:
        return request_json(
            method,
            uri,
            self._credential.scheme,
            self._credential.auth_base64,
            queries=queries,
            body=body,
            timeout=self._config.timeout,
            expected=expected,
        )
