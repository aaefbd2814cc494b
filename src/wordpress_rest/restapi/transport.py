"""HTTP transport for the WordPress REST API.

Wraps httpx with basic authentication, a manual redirect policy and
optional request/response logging. Connections are never kept alive.
"""

import base64
import threading
import time

import httpx
import structlog

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 30.0

MAX_REDIRECTS = 10

# Bodies larger than this are logged by size only
MAX_LOGGED_BODY = 4096


def basic_auth_header(username: str, password: str) -> str:
    """Build the value of a basic ``Authorization`` header."""
    credentials = f"{username}:{password}".encode()
    return "Basic " + base64.b64encode(credentials).decode("ascii")


def _body_for_log(content: bytes | None, content_type: str) -> str | None:
    if not content:
        return None
    is_text = "json" in content_type or content_type.startswith("text/")
    if not is_text or len(content) > MAX_LOGGED_BODY:
        return f"<{len(content)} bytes>"
    return content.decode("utf-8", errors="replace")


class HttpTransport:
    """Sends single HTTP exchanges on behalf of the request pipeline.

    Redirects are followed here rather than by httpx so that credentials
    are re-attached on every hop. After ``MAX_REDIRECTS`` hops the last
    redirect response is returned as-is.

    Thread-safe through thread-local storage of httpx.Client instances.
    """

    def __init__(
        self,
        username: str | None = None,
        password: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        debug: bool = False,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the transport.

        Args:
            username: Basic auth username.
            password: Basic auth password. Requests are only authenticated
                when both username and password are set.
            timeout: Request timeout in seconds (default: 30.0).
            debug: Log every request, redirect and response.
            transport: Optional httpx transport, e.g. ``httpx.MockTransport``.

        Raises:
            ValueError: If timeout is not positive.
        """
        if timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)

        self._timeout = timeout
        self._debug = debug
        self._transport = transport
        self._authorization = (
            basic_auth_header(username, password) if username and password else None
        )

        self._local = threading.local()

    @property
    def authenticated(self) -> bool:
        """Whether requests carry basic auth credentials."""
        return self._authorization is not None

    @property
    def client(self) -> httpx.Client:
        """Get or create the thread-local httpx client."""
        if not hasattr(self._local, "client") or self._local.client.is_closed:
            self._local.client = httpx.Client(
                timeout=self._timeout,
                follow_redirects=False,
                limits=httpx.Limits(max_keepalive_connections=0),
                transport=self._transport,
            )
        return self._local.client

    def close(self):
        """Close the thread-local HTTP client if open."""
        if hasattr(self._local, "client") and not self._local.client.is_closed:
            self._local.client.close()

    def _authenticate(self, request: httpx.Request) -> None:
        if self._authorization is not None:
            request.headers["Authorization"] = self._authorization

    def send(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        content: bytes | None = None,
    ) -> httpx.Response:
        """Perform one HTTP exchange.

        Args:
            method: HTTP method.
            url: Absolute URL, query string included.
            headers: Request headers.
            content: Raw request body.

        Returns:
            Response with its body fully read.

        Raises:
            httpx.HTTPError: On connection, DNS or timeout failures.
        """
        request = self.client.build_request(method, url, headers=headers, content=content)
        self._authenticate(request)

        if self._debug:
            logger.info(
                "Sending request",
                method=method,
                url=str(request.url),
                body=_body_for_log(content, request.headers.get("Content-Type", "")),
            )

        start_time = time.time()
        try:
            response = self._send_following_redirects(request)
        except httpx.HTTPError:
            logger.exception(
                "Request failed",
                method=method,
                url=str(request.url),
                duration_seconds=round(time.time() - start_time, 3),
            )
            raise

        if self._debug:
            logger.info(
                "Received response",
                status_code=response.status_code,
                url=str(response.request.url),
                body=_body_for_log(
                    response.content,
                    response.headers.get("Content-Type", ""),
                ),
                duration_seconds=round(time.time() - start_time, 3),
            )
        return response

    def _send_following_redirects(self, request: httpx.Request) -> httpx.Response:
        response = self.client.send(request)
        hops = 0
        while response.next_request is not None:
            if hops >= MAX_REDIRECTS:
                logger.warning(
                    "Redirect limit reached, returning last response",
                    url=str(response.request.url),
                    hops=hops,
                )
                break
            next_request = response.next_request
            response.close()
            hops += 1
            self._authenticate(next_request)
            if self._debug:
                logger.info("Following redirect", url=str(next_request.url), hops=hops)
            response = self.client.send(next_request)
        return response
