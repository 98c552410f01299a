"""Pydantic models for rest_invoker requests and results."""

from dataclasses import dataclass
from typing import Any, Literal, Optional, Union
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, SecretStr, field_validator, model_validator

HttpMethod = Literal["GET", "DELETE", "HEAD", "MERGE", "OPTIONS", "PATCH", "POST", "PUT", "TRACE"]


def _check_absolute_url(value: str, allowed_schemes: tuple[str, ...]) -> str:
    parts = urlsplit(value)
    if parts.scheme.lower() not in allowed_schemes or not parts.netloc:
        raise ValueError(f"expected an absolute {'/'.join(allowed_schemes)} URL, got {value!r}")
    return value


# --- Request Models ---


class Credential(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    password: SecretStr


class RequestSpec(BaseModel):
    """Everything needed for one REST call.

    Only `url` is required. `content_type` stays None unless the caller sets
    it, so the invoker can tell an explicit value from the default.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    method: Optional[HttpMethod] = None
    body: Any = None
    content_type: Optional[str] = None
    headers: Optional[dict[str, str]] = None
    credential_token: Optional[SecretStr] = None
    proxy: Optional[str] = None
    result_type_labels: Optional[list[str]] = None
    # Pass-through options for the HTTP client
    credential: Optional[Credential] = None
    proxy_credential: Optional[Credential] = None
    use_default_credentials: bool = False
    timeout: Optional[Union[float, tuple[Optional[float], Optional[float]]]] = None
    verify: Union[bool, str] = True

    @field_validator("url")
    @classmethod
    def url_is_absolute(cls, v: str) -> str:
        return _check_absolute_url(v, ("http", "https"))

    @field_validator("proxy")
    @classmethod
    def proxy_is_absolute(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return _check_absolute_url(v, ("http", "https", "socks5", "socks5h"))

    @field_validator("method", mode="before")
    @classmethod
    def method_upper(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @model_validator(mode="after")
    def single_authorization_source(self) -> "RequestSpec":
        if self.credential is not None and self.credential_token is not None:
            raise ValueError("credential and credential_token both set an Authorization header; pass only one")
        return self


# --- Result Models ---


def default_type_labels(value: Any) -> list[str]:
    """Type labels a value reports before any relabeling, most specific first."""
    return [cls.__qualname__ for cls in type(value).__mro__]


@dataclass
class Result:
    """One item produced by an invocation.

    `type_labels` is a client-side tag for downstream display/dispatch.
    It never changes `value`.
    """

    value: Any
    type_labels: Optional[list[str]] = None

    def __post_init__(self):
        if self.type_labels is None:
            self.type_labels = default_type_labels(self.value)

    def relabel(self, labels: list[str]) -> "Result":
        self.type_labels.clear()
        for label in labels:
            self.type_labels.append(label)
        return self
