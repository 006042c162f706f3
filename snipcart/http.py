from typing import Optional, Dict, Any, List, Mapping, Sequence, Tuple, Union
import json
import logging
import requests

from .errors import TransportError, StatusError, DecodeError, ValidationError

logger = logging.getLogger(__name__)

QueryParams = Union[Mapping[str, Any], Sequence[Tuple[str, Any]]]


def query_pairs(queries: Optional[QueryParams]) -> List[Tuple[str, str]]:
    if not queries:
        return []
    items = queries.items() if isinstance(queries, Mapping) else queries
    return [(str(key), str(value)) for key, value in items]


def status_text(response: requests.Response) -> str:
    reason = response.reason or ""
    return f"{response.status_code} {reason}".strip()


def json_request(
    method: str,
    uri: str,
    auth_scheme: str,
    auth_value: str,
    *,
    queries: Optional[QueryParams] = None,
    body: Optional[Any] = None,
    timeout: Optional[float] = None,
) -> requests.Response:
    """Issue one authenticated JSON request and return the open response.

    The body is streamed; callers must ``close()`` the response once done
    with it, also when decoding fails. A request body that cannot be
    encoded as JSON raises :class:`ValidationError` before anything is sent.
    """
    headers: Dict[str, str] = {
        "Accept": "application/json",
        "Authorization": f"{auth_scheme} {auth_value}",
    }
    params = query_pairs(queries)
    kwargs: Dict[str, Any] = {}
    if params:
        kwargs["params"] = params
    if body is not None:
        try:
            kwargs["data"] = json.dumps(body, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"request body is not JSON serializable: {exc}") from exc
        headers["Content-Type"] = "application/json"

    logger.debug(f"{method} {uri} params={params}")
    try:
        return requests.request(method, uri, headers=headers, timeout=timeout, stream=True, **kwargs)
    except requests.RequestException as exc:
        raise TransportError(str(exc)) from exc


def ensure_success(response: requests.Response) -> None:
    code = response.status_code
    if code < 200 or code >= 300:
        status = status_text(response)
        logger.warning(f"Unexpected response from {response.url}: {status}")
        raise StatusError(f"unexpected response received: {status}", code, status)


def decode_json(response: requests.Response, expected: type = dict) -> Any:
    try:
        data = response.json()
    except ValueError as exc:
        raise DecodeError(f"failed to decode JSON response: {exc}") from exc
    if expected is not None and not isinstance(data, expected):
        raise DecodeError(
            f"expected JSON {expected.__name__}, got {type(data).__name__}"
        )
    return data


def request_json(
    method: str,
    uri: str,
    auth_scheme: str,
    auth_value: str,
    *,
    queries: Optional[QueryParams] = None,
    body: Optional[Any] = None,
    timeout: Optional[float] = None,
    expected: type = dict,
) -> Any:
    response = json_request(
        method,
        uri,
        auth_scheme,
        auth_value,
        queries=queries,
        body=body,
        timeout=timeout,
    )
    try:
        ensure_success(response)
        return decode_json(response, expected)
    finally:
        response.close()
