"""HTTP node reader.

Asks a specific node whether a tenant exists:

    HEAD {node}/v1/schema/{class}/tenants/{tenant}
    consistency: false

The header keeps the target node from forwarding the read again, so the
answer comes from the node the router picked.

Status mapping:
    200              -> Success(True)
    404              -> Success(False)
    timeout, connect -> transient NODE_UNAVAILABLE
    5xx              -> transient NODE_UNAVAILABLE
    anything else    -> permanent NODE_READ_FAILED

Architecture:
    - Infrastructure layer (adapter for node-to-node HTTP)
    - Uses httpx for async HTTP
    - Returns Result types (no exceptions for expected failures)
"""

from urllib.parse import quote

import httpx
import structlog

from clusterauthz.core.enums import ErrorCode
from clusterauthz.core.result import Failure, Result, Success
from clusterauthz.domain.errors.cluster_error import ClusterError


class HttpNodeReader:
    """NodeReaderProtocol implementation over HTTP.

    Attributes:
        _timeout: HTTP request timeout in seconds.
        _client: Optional shared client; a short-lived one is used otherwise.
        _logger: Structured logger.
    """

    def __init__(
        self,
        *,
        timeout: float = 5.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._timeout = timeout
        self._client = client
        self._logger = structlog.get_logger("node_reader")

    async def tenant_exists(
        self,
        node: str,
        class_name: str,
        tenant_name: str,
    ) -> Result[bool, ClusterError]:
        """Ask one node whether a tenant exists.

        Args:
            node: Node base URL.
            class_name: Collection (class) name.
            tenant_name: Tenant name.

        Returns:
            Success(bool) or Failure(ClusterError).
        """
        url = (
            f"{node.rstrip('/')}/v1/schema/{quote(class_name, safe='')}"
            f"/tenants/{quote(tenant_name, safe='')}"
        )

        try:
            response = await self._head(url)
        except httpx.TimeoutException as e:
            self._logger.warning("node_read_timeout", node=node, error=str(e))
            return Failure(
                error=ClusterError(
                    code=ErrorCode.NODE_UNAVAILABLE,
                    message=f"node {node} timed out",
                    node=node,
                    transient=True,
                )
            )
        except httpx.RequestError as e:
            self._logger.warning("node_read_connection_error", node=node, error=str(e))
            return Failure(
                error=ClusterError(
                    code=ErrorCode.NODE_UNAVAILABLE,
                    message=f"failed to connect to node {node}: {e}",
                    node=node,
                    transient=True,
                )
            )

        status = response.status_code
        if status == 200:
            return Success(value=True)
        if status == 404:
            return Success(value=False)

        if status >= 500:
            self._logger.warning("node_read_server_error", node=node, status_code=status)
            return Failure(
                error=ClusterError(
                    code=ErrorCode.NODE_UNAVAILABLE,
                    message=f"node {node} returned {status}",
                    node=node,
                    transient=True,
                )
            )

        self._logger.warning("node_read_failed", node=node, status_code=status)
        return Failure(
            error=ClusterError(
                code=ErrorCode.NODE_READ_FAILED,
                message=f"node {node} returned {status}",
                node=node,
                transient=False,
            )
        )

    async def _head(self, url: str) -> httpx.Response:
        headers = {"consistency": "false"}
        if self._client is not None:
            return await self._client.head(url, headers=headers, timeout=self._timeout)
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await client.head(url, headers=headers)
