"""Authorization header assembly for personal access tokens."""

import base64
from typing import Mapping, Optional

from requests.auth import AuthBase


def basic_auth_value(token: str) -> str:
    """Basic auth value for a token with an empty username.

    The token is opaque; any ':' inside it is kept as-is after the leading colon.
    """
    encoded = base64.b64encode(f":{token}".encode("utf-8")).decode("ascii")
    return f"Basic {encoded}"


def assemble_headers(headers: Optional[Mapping[str, str]], token: Optional[str]) -> Optional[dict[str, str]]:
    """Merge a token's Authorization header into the caller's headers.

    Returns a new dict; the caller's mapping is left untouched. Without a
    token the headers are returned as a plain copy (or None).
    """
    if token is None:
        return dict(headers) if headers else None

    merged = dict(headers) if headers else {}
    # Drop any differently-cased Authorization so only one goes on the wire
    for key in [k for k in merged if k.lower() == "authorization" and k != "Authorization"]:
        del merged[key]
    merged["Authorization"] = basic_auth_value(token)
    return merged


class TokenAuth(AuthBase):
    """Sets the personal access token's Basic header on the prepared request.

    Passing a truthy auth object also keeps requests from filling in
    credentials from netrc.
    """

    def __init__(self, token: str):
        self.token = token

    def __call__(self, r):
        r.headers["Authorization"] = basic_auth_value(self.token)
        return r


class NoAuth(AuthBase):
    """Leaves the request as-is; stops requests from falling back to netrc."""

    def __call__(self, r):
        return r
