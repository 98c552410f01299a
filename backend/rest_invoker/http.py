"""HTTP dispatch and result pipeline for REST calls."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Iterator, Optional
from urllib.parse import quote, urlsplit, urlunsplit

import requests

from rest_invoker import envelope
from rest_invoker.auth import NoAuth, TokenAuth, assemble_headers
from rest_invoker.body import normalize_body
from rest_invoker.config import settings
from rest_invoker.errors import HtmlResponseError
from rest_invoker.models import Credential, RequestSpec, Result

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[HtmlResponseError], None]

_NO_CONTENT = object()


def resolve_content_type(spec: RequestSpec) -> str:
    """Explicit content_type, else a Content-Type header from the caller, else the default."""
    if spec.content_type:
        return spec.content_type
    for key, value in (spec.headers or {}).items():
        if key.lower() == "content-type" and value:
            return value
    return settings.default_content_type


def _proxy_url(proxy: str, credential: Optional[Credential]) -> str:
    if credential is None:
        return proxy
    parts = urlsplit(proxy)
    userinfo = f"{quote(credential.username, safe='')}:{quote(credential.password.get_secret_value(), safe='')}"
    host = parts.netloc.rsplit("@", 1)[-1]
    return urlunsplit((parts.scheme, f"{userinfo}@{host}", parts.path, parts.query, parts.fragment))


def to_request_options(spec: RequestSpec) -> dict[str, Any]:
    """Map a RequestSpec onto keyword arguments for requests.request()."""
    token = spec.credential_token.get_secret_value() if spec.credential_token else None
    headers = assemble_headers(spec.headers, token) or {}
    content_type = resolve_content_type(spec)
    headers = {k: v for k, v in headers.items() if k.lower() != "content-type"}
    headers["Content-Type"] = content_type

    options: dict[str, Any] = {
        "method": spec.method or settings.default_method.upper(),
        "url": spec.url,
        "headers": headers,
        "data": normalize_body(spec.body),
        "timeout": spec.timeout,
        "verify": spec.verify,
    }

    # auth is always set: an empty value lets requests read netrc on its own
    if spec.credential is not None:
        options["auth"] = (spec.credential.username, spec.credential.password.get_secret_value())
    elif token is not None:
        options["auth"] = TokenAuth(token)
    elif spec.use_default_credentials:
        options["auth"] = requests.utils.get_netrc_auth(spec.url) or NoAuth()
    else:
        options["auth"] = NoAuth()

    if spec.proxy:
        proxy = _proxy_url(spec.proxy, spec.proxy_credential)
        options["proxies"] = {"http": proxy, "https": proxy}

    return options


def _decode(resp: requests.Response) -> Any:
    """JSON when the body parses, otherwise text. Empty body decodes to nothing."""
    if not resp.content:
        return _NO_CONTENT
    try:
        return resp.json()
    except requests.exceptions.JSONDecodeError:
        return resp.text


def _send(spec: RequestSpec, session: Optional[requests.Session]) -> Any:
    options = to_request_options(spec)
    logger.debug("%s %s", options["method"], options["url"])
    sender = session.request if session is not None else requests.request
    resp = sender(**options)
    resp.raise_for_status()
    return _decode(resp)


def _report(error: HtmlResponseError, on_error: Optional[ErrorHandler]) -> None:
    if on_error is not None:
        on_error(error)
    else:
        logger.error(str(error))


def _results(decoded: Any, spec: RequestSpec, on_error: Optional[ErrorHandler]) -> Iterator[Result]:
    if decoded is _NO_CONTENT:
        return

    kind = envelope.classify(decoded)
    logger.debug("response classified as %s", kind.value)
    payload = envelope.unwrap(decoded)

    for item in envelope.iter_items(payload):
        if envelope.looks_like_html(item):
            _report(HtmlResponseError(), on_error)
            logger.debug("%s", envelope.as_text(item))
            continue

        result = Result(item)
        if spec.result_type_labels is not None:
            result.relabel(spec.result_type_labels)
        yield result


def invoke(
    spec: RequestSpec,
    *,
    session: Optional[requests.Session] = None,
    on_error: Optional[ErrorHandler] = None,
) -> Iterator[Result]:
    """Send one request and return its post-processed results.

    The request is sent before this returns, so transport and HTTP status
    errors raise here. The returned iterator is lazy and single-use.

    Args:
        spec: What to send
        session: Optional requests.Session to send through (cookies, pooling, adapters)
        on_error: Called with each HtmlResponseError; defaults to logging at ERROR

    Returns:
        Iterator of Result
    """
    decoded = _send(spec, session)
    return _results(decoded, spec, on_error)


def invoke_url(url: str, **fields: Any) -> Iterator[Result]:
    """Shortcut: invoke(RequestSpec(url=url, **fields))."""
    return invoke(RequestSpec(url=url, **fields))


def invoke_all(
    specs: Iterable[RequestSpec],
    *,
    session: Optional[requests.Session] = None,
    on_error: Optional[ErrorHandler] = None,
) -> Iterator[Result]:
    """One independent invoke per spec, in order, results chained."""
    for spec in specs:
        yield from invoke(spec, session=session, on_error=on_error)
