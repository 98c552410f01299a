"""REST API invocation helper.

Usage:
    from rest_invoker import RequestSpec, invoke

    for result in invoke(RequestSpec(url="https://dev.example.com/_apis/projects",
                                     credential_token=pat)):
        print(result.value["name"])
"""

from rest_invoker.config import settings
from rest_invoker.errors import HtmlResponseError, RestInvokerError
from rest_invoker.http import invoke, invoke_all, invoke_url
from rest_invoker.logging_conf import setup_logging
from rest_invoker.models import Credential, RequestSpec, Result

__all__ = [
    # Invocation
    "invoke",
    "invoke_all",
    "invoke_url",
    # Models
    "RequestSpec",
    "Credential",
    "Result",
    # Errors
    "RestInvokerError",
    "HtmlResponseError",
    # Config
    "settings",
    "setup_logging",
]
