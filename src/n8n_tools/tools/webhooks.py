"""Webhook test tool - send a test request to an n8n webhook.

Lets an agent check a webhook configuration with a custom payload, method,
headers and basic auth, and reports status, body and timing.

Webhooks are served from the n8n root, not the versioned API path, so the
target URL is `{api_url without /api/v1}/webhook/{workflowName}`. The
workflow name is inserted as-is: callers must supply a path-safe name.
"""

import logging
import time
from typing import Any, ClassVar, Literal

import httpx
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from n8n_tools.env import N8nSettings, get_env_config
from n8n_tools.exceptions import InvalidArgumentError, MissingArgumentError
from n8n_tools.tools.base import ToolCallResult, ToolDefinition, ToolHandler

logger = logging.getLogger(__name__)

HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]

HTTP_METHODS: tuple[str, ...] = ("GET", "POST", "PUT", "DELETE", "PATCH")
BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})
DEFAULT_HEADERS = {"Content-Type": "application/json"}
API_PATH_SUFFIX = "/api/v1"


class BasicAuthCredentials(BaseModel):
    """Basic auth pair. A missing half is sent as an empty string."""

    username: str = ""
    password: str = ""

    @field_validator("username", "password", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class WebhookTestRequest(BaseModel):
    """Arguments of the test_webhook tool."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    workflow_name: str
    method: HttpMethod = "POST"
    data: dict[str, Any] | None = None
    headers: dict[str, str] | None = None
    auth: BasicAuthCredentials | None = None

    @field_validator("method", mode="before")
    @classmethod
    def _normalize_method(cls, value: Any) -> Any:
        if value is None:
            return "POST"
        if isinstance(value, str):
            return value.upper()
        return value

    @property
    def sends_body(self) -> bool:
        return self.method in BODY_METHODS and self.data is not None


class WebhookResponseReport(BaseModel):
    """Outcome of a completed HTTP exchange, whatever the status code."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool
    status_code: int
    status_text: str
    response_time: str
    data: Any = None
    headers: dict[str, str] = {}


class WebhookFailureReport(BaseModel):
    """Outcome when the webhook could not be reached at all."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = False
    error: str
    response_time: str
    url: str


def parse_webhook_request(args: dict[str, Any]) -> WebhookTestRequest:
    """Validate raw tool arguments.

    Raises:
        MissingArgumentError: workflowName is absent or empty.
        InvalidArgumentError: any argument has the wrong type or value.
    """
    if not args.get("workflowName"):
        raise MissingArgumentError("workflowName")

    try:
        return WebhookTestRequest.model_validate(args)
    except PydanticValidationError as e:
        error = e.errors()[0]
        argument = ".".join(str(part) for part in error["loc"]) or "arguments"
        raise InvalidArgumentError(argument, error["msg"]) from e


def build_webhook_url(api_url: str, workflow_name: str) -> str:
    """Build the webhook URL for a workflow from the n8n API URL.

    >>> build_webhook_url("https://n8n.example.com/api/v1", "orders")
    'https://n8n.example.com/webhook/orders'
    """
    base_url = api_url.removesuffix(API_PATH_SUFFIX)
    return f"{base_url}/webhook/{workflow_name}"


def format_elapsed(started: float) -> str:
    """Milliseconds since a time.perf_counter() reading, e.g. '42ms'."""
    return f"{round((time.perf_counter() - started) * 1000)}ms"


def _response_body(response: httpx.Response) -> Any:
    """Parsed JSON when the body is JSON, the raw text otherwise."""
    if not response.content:
        return ""
    try:
        return response.json()
    except ValueError:
        return response.text


class WebhookTestHandler(ToolHandler):
    """Handler for the test_webhook tool.

    Usage:
        handler = WebhookTestHandler()
        result = await handler.execute({
            "workflowName": "enhance-specs",
            "method": "POST",
            "data": {"spec": "..."},
        })
        print(result.text)

    Args:
        settings: n8n settings; defaults to get_env_config() at call time.
        transport: Optional httpx transport, e.g. httpx.MockTransport.
    """

    name: ClassVar[str] = "test_webhook"

    def __init__(
        self,
        settings: N8nSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    def definition(self) -> ToolDefinition:
        return get_test_webhook_tool_definition()

    async def execute(self, args: dict[str, Any]) -> ToolCallResult:
        """Send one test request to the workflow's webhook.

        Any completed exchange is a normal result, with success set from the
        status code. Only a failure to complete the exchange is flagged as
        an error.

        Raises:
            MissingArgumentError: workflowName is absent or empty.
            InvalidArgumentError: an argument has the wrong type or value.
            ConfigurationError: the n8n API URL is not configured.
        """
        request = parse_webhook_request(args)
        settings = self._settings or get_env_config()
        url = build_webhook_url(settings.n8n_api_url, request.workflow_name)

        logger.info("Testing webhook: %s %s", request.method, url)
        started = time.perf_counter()
        try:
            # Header encoding happens here too: a non-ASCII value is a client failure.
            headers = httpx.Headers(DEFAULT_HEADERS)
            if request.headers:
                headers.update(request.headers)

            request_kwargs: dict[str, Any] = {"headers": headers}
            if request.sends_body:
                request_kwargs["json"] = request.data
            if request.auth is not None:
                request_kwargs["auth"] = (request.auth.username, request.auth.password)

            client_kwargs: dict[str, Any] = {}
            if self._transport is not None:
                client_kwargs["transport"] = self._transport
            if settings.request_timeout is not None:
                client_kwargs["timeout"] = settings.request_timeout

            async with httpx.AsyncClient(**client_kwargs) as client:
                response = await client.request(request.method, url, **request_kwargs)
        except Exception as e:  # noqa: BLE001
            response_time = format_elapsed(started)
            message = str(e) or "Unknown error"
            logger.warning("Webhook %s unreachable after %s: %s", url, response_time, message)
            return self.text_result(
                WebhookFailureReport(error=message, response_time=response_time, url=url),
                is_error=True,
            )

        response_time = format_elapsed(started)
        logger.info("Webhook %s responded %d in %s", url, response.status_code, response_time)

        return self.text_result(
            WebhookResponseReport(
                success=200 <= response.status_code < 300,
                status_code=response.status_code,
                status_text=response.reason_phrase,
                response_time=response_time,
                data=_response_body(response),
                headers=dict(response.headers),
            )
        )


def get_test_webhook_tool_definition() -> ToolDefinition:
    """Get tool definition for test_webhook."""
    return ToolDefinition(
        name=WebhookTestHandler.name,
        description=(
            "Test an n8n webhook endpoint by sending a test request. "
            "Allows programmatic testing of webhook configurations with custom payloads, "
            "methods, and headers. "
            "Returns response status, data, and timing information."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "workflowName": {
                    "type": "string",
                    "description": (
                        'Name of the workflow webhook to test (e.g., "enhance-specs" '
                        "for /webhook/enhance-specs)"
                    ),
                },
                "method": {
                    "type": "string",
                    "enum": list(HTTP_METHODS),
                    "description": "HTTP method to use (default: POST)",
                },
                "data": {
                    "type": "object",
                    "description": "Request payload to send (for POST/PUT/PATCH)",
                },
                "headers": {
                    "type": "object",
                    "description": "Additional HTTP headers to include in the request",
                },
                "auth": {
                    "type": "object",
                    "properties": {
                        "username": {
                            "type": "string",
                            "description": "Username for basic authentication",
                        },
                        "password": {
                            "type": "string",
                            "description": "Password for basic authentication",
                        },
                    },
                    "description": "Basic authentication credentials (if webhook requires auth)",
                },
            },
            "required": ["workflowName"],
        },
    )
