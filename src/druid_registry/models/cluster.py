"""Druid cluster descriptor models.

A ``DruidCluster`` points at one Druid broker: where it lives, how to
authenticate, and some descriptive metadata. Construction stores values as
given; ``validate()`` is the gate that checks and normalizes a descriptor
before it is saved or used.
"""

from collections.abc import Iterable, Set
from typing import Any, NoReturn

from pydantic import Field, PrivateAttr

from druid_registry.config import get_settings, parse_broker_list
from druid_registry.errors import InvalidConfigError
from druid_registry.observability import get_logger
from druid_registry.services.health import is_broker_reachable

from .base import RegistryBaseModel
from .common import ClusterHealth

logger = get_logger(__name__)

# Positional order accepted by DruidCluster(...)
CONSTRUCTOR_FIELDS = (
    "id",
    "name",
    "description",
    "broker_host",
    "broker_port",
    "broker_endpoint",
    "hours_of_lag",
    "use_ssl_auth",
    "principal_name",
)

INVALID_HOST_CHARACTERS = ("/", ":")


def broker_key(host: str, port: int) -> str:
    """Build the ``host:port`` key used by the broker allow-list."""
    return f"{host}:{port}"


def is_allowed_broker(key: str, allowed_brokers: Set[str]) -> bool:
    """Exact membership check; no wildcard or prefix matching."""
    return key in allowed_brokers


class DruidCluster(RegistryBaseModel):
    """Connection descriptor for a Druid broker.

    Fields can be passed positionally in ``CONSTRUCTOR_FIELDS`` order, by
    field name, or by their camelCase alias. The optional ``allowed_brokers``
    keyword injects the broker allow-list, parsed the same way as
    ``DRUID_ALLOWED_BROKERS`` (a comma-separated string or a collection of
    ``host:port`` strings); without it the configured value is used.
    """

    id: int | None = Field(default=None, alias="clusterId")
    name: str | None = Field(default=None, alias="clusterName")
    description: str | None = Field(default=None, alias="clusterDescription")
    broker_host: str | None = Field(default=None, alias="brokerHost")
    broker_port: int | None = Field(default=None, alias="brokerPort")
    broker_endpoint: str | None = Field(default=None, alias="brokerEndpoint")
    hours_of_lag: int | None = Field(
        default=None,
        alias="hoursOfLag",
        description="Time shift applied to queries against this cluster",
    )
    use_ssl_auth: bool | None = Field(default=None, alias="isSSLAuth")
    principal_name: str | None = Field(default=None, alias="principalName")

    _allowed_brokers: frozenset[str] | None = PrivateAttr(default=None)

    def __init__(
        self,
        *args: Any,
        allowed_brokers: str | Iterable[str] | None = None,
        **data: Any,
    ) -> None:
        if len(args) > len(CONSTRUCTOR_FIELDS):
            raise TypeError(
                f"DruidCluster takes at most {len(CONSTRUCTOR_FIELDS)} positional "
                f"arguments but {len(args)} were given"
            )
        for field_name, value in zip(CONSTRUCTOR_FIELDS, args):
            if field_name in data:
                raise TypeError(f"DruidCluster got multiple values for argument '{field_name}'")
            data[field_name] = value
        super().__init__(**data)
        if allowed_brokers is not None:
            if not isinstance(allowed_brokers, (str, bytes)):
                allowed_brokers = list(allowed_brokers)
            self._allowed_brokers = parse_broker_list(allowed_brokers)

    def validate(self) -> None:  # type: ignore[override]
        """Check the descriptor and normalize it in place.

        Checks run in a fixed order and stop at the first failure, so the
        error always names the first offending field. On success every leading
        and trailing slash is stripped from the broker endpoint (not just one
        of each, so a second call changes nothing) and a missing description
        becomes an empty string.

        Raises:
            InvalidConfigError: If a required field is missing or malformed
        """
        if not self.name:
            self._reject("Cluster name cannot be empty")
        if not self.broker_host:
            self._reject("Broker host cannot be empty")
        if any(c in self.broker_host for c in INVALID_HOST_CHARACTERS):
            self._reject("Broker host should not contain any '/' or ':' characters")
        if self.broker_port is None:
            self._reject("Broker port cannot be empty")
        if self.broker_port < 0:
            self._reject("Broker port must be a non-negative number")

        endpoint = (self.broker_endpoint or "").strip("/")
        if not endpoint:
            self._reject("Broker endpoint cannot be empty")

        self.broker_endpoint = endpoint
        if self.description is None:
            self.description = ""

        logger.debug(
            "Cluster descriptor validated",
            cluster_name=self.name,
            broker=self.broker_key,
        )

    def _reject(self, message: str) -> NoReturn:
        logger.debug("Cluster descriptor rejected", cluster_name=self.name, reason=message)
        raise InvalidConfigError(message)

    @property
    def broker_key(self) -> str:
        """``host:port`` of this descriptor's broker."""
        return broker_key(self.broker_host, self.broker_port)

    def get_base_url(self) -> str:
        """Broker root URL. Always plain http, whatever ``use_ssl_auth`` says."""
        return f"http://{self.broker_host}:{self.broker_port}/"

    def get_broker_url(self) -> str:
        """Query URL. Expects ``broker_endpoint`` already trimmed by validate()."""
        return f"{self.get_base_url()}{self.broker_endpoint}/"

    def get_status(self, timeout: float | None = None) -> ClusterHealth:
        """Probe the broker base URL once.

        Never raises; any failure is reported as ``ClusterHealth.ERROR``.
        """
        if timeout is None:
            timeout = get_settings().druid.status_timeout_seconds
        if is_broker_reachable(self.get_base_url(), timeout=timeout):
            return ClusterHealth.OK
        return ClusterHealth.ERROR

    def _is_allowed_host(self, host: str, port: int) -> bool:
        allowed = self._allowed_brokers
        if allowed is None:
            allowed = get_settings().druid.allowed_brokers
        return is_allowed_broker(broker_key(host, port), allowed)


class DruidClusterUpdate(RegistryBaseModel):
    """Partial descriptor submitted from an edit form.

    Only fields explicitly present in the payload are copied onto the
    target cluster.
    """

    name: str | None = Field(default=None, alias="clusterName")
    description: str | None = Field(default=None, alias="clusterDescription")
    broker_host: str | None = Field(default=None, alias="brokerHost")
    broker_port: int | None = Field(default=None, alias="brokerPort")
    broker_endpoint: str | None = Field(default=None, alias="brokerEndpoint")
    hours_of_lag: int | None = Field(default=None, alias="hoursOfLag")
    use_ssl_auth: bool | None = Field(default=None, alias="isSSLAuth")
    principal_name: str | None = Field(default=None, alias="principalName")

    def apply_to(self, cluster: DruidCluster) -> DruidCluster:
        """Copy the explicitly set fields onto ``cluster`` and return it."""
        for field_name in self.model_fields_set:
            setattr(cluster, field_name, getattr(self, field_name))
        return cluster
