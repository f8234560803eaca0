"""Consistency router for schema metadata reads.

Routes a read either to the cluster leader (strong consistency) or to the
local replica (eventual consistency).

Routing:
    strong=True  -> leader. The answer reflects the latest committed write.
                    While no leader is known, or the leader read fails with
                    a transient error, retry with linear backoff up to
                    ``max_attempts`` times, then fail with a transient
                    LEADER_UNAVAILABLE error.
    strong=False -> local replica. Never waits on the leader, never retries.

Permanent node errors are returned at once in both modes.
"""

import asyncio

from clusterauthz.core.enums import ErrorCode
from clusterauthz.core.result import Failure, Result, Success
from clusterauthz.domain.errors.cluster_error import ClusterError
from clusterauthz.domain.protocols.cluster_membership_protocol import (
    ClusterMembershipProtocol,
)
from clusterauthz.domain.protocols.logger_protocol import LoggerProtocol
from clusterauthz.domain.protocols.node_reader_protocol import NodeReaderProtocol


class ConsistencyRouter:
    """Picks the node that answers a consistency-sensitive read.

    Attributes:
        _membership: Leader location.
        _reader: Per-node schema reads.
        _logger: Structured logger.
        _max_attempts: Leader attempts before giving up (>= 1).
        _backoff_seconds: Backoff step; attempt N waits N * step.
    """

    def __init__(
        self,
        membership: ClusterMembershipProtocol,
        reader: NodeReaderProtocol,
        logger: LoggerProtocol,
        *,
        max_attempts: int = 3,
        backoff_seconds: float = 0.2,
    ) -> None:
        self._membership = membership
        self._reader = reader
        self._logger = logger
        self._max_attempts = max(1, max_attempts)
        self._backoff_seconds = backoff_seconds

    async def tenant_exists(
        self,
        class_name: str,
        tenant_name: str,
        *,
        strong: bool = True,
    ) -> Result[bool, ClusterError]:
        """Check tenant existence with the requested consistency.

        Args:
            class_name: Collection (class) name.
            tenant_name: Tenant name.
            strong: Route to the leader when True (default).

        Returns:
            Success(bool) with the node's answer.
            Failure(ClusterError); ``transient`` tells the caller whether
            retrying later may succeed.
        """
        if not strong:
            node = self._membership.local_node()
            self._logger.debug(
                "schema_read_routed",
                node=node,
                consistency="eventual",
            )
            return await self._reader.tenant_exists(node, class_name, tenant_name)

        return await self._read_from_leader(class_name, tenant_name)

    async def _read_from_leader(
        self, class_name: str, tenant_name: str
    ) -> Result[bool, ClusterError]:
        last_error = ClusterError(
            code=ErrorCode.LEADER_UNAVAILABLE,
            message="leader not found",
            transient=True,
        )

        for attempt in range(1, self._max_attempts + 1):
            leader = await self._membership.leader()
            if leader is None:
                last_error = ClusterError(
                    code=ErrorCode.LEADER_UNAVAILABLE,
                    message="leader not found",
                    transient=True,
                )
            else:
                self._logger.debug(
                    "schema_read_routed",
                    node=leader,
                    consistency="strong",
                    attempt=attempt,
                )
                result = await self._reader.tenant_exists(
                    leader, class_name, tenant_name
                )
                if isinstance(result, Success):
                    return result
                if not result.error.transient:
                    return result
                last_error = result.error

            if attempt < self._max_attempts:
                self._logger.warning(
                    "leader_read_retry",
                    attempt=attempt,
                    max_attempts=self._max_attempts,
                    reason=last_error.message,
                )
                await asyncio.sleep(self._backoff_seconds * attempt)

        self._logger.error(
            "leader_read_failed",
            attempts=self._max_attempts,
            reason=last_error.message,
        )
        return Failure(
            error=ClusterError(
                code=ErrorCode.LEADER_UNAVAILABLE,
                message=f"leader unavailable after {self._max_attempts} attempts: "
                f"{last_error.message}",
                node=last_error.node,
                transient=True,
            )
        )
