# clients.py
"""
Factories for the OMS client.

Builds a transport and a ready-to-use OmsApiClient from config.
"""

import logging
from typing import Optional

import config
from api_client import OmsApiClient, RequestExecutor
from serializer import PydanticSerializer
from transport import HttpxTransport, RequestsTransport, Transport

logger = logging.getLogger(__name__)

TRANSPORTS = {
    "requests": RequestsTransport,
    "httpx": HttpxTransport,
}


def build_transport(
    name: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> Transport:
    """
    Create a transport by name.

    Args:
        name: "requests" or "httpx". Defaults to config.OMS_TRANSPORT.
        base_url: OMS base URL. Defaults to config.OMS_BASE_URL.
        timeout: Timeout in seconds. Defaults to config.OMS_TIMEOUT.

    Returns:
        Configured transport instance.

    Raises:
        ValueError: If the transport name is unknown.
    """
    name = name or config.OMS_TRANSPORT
    try:
        transport_cls = TRANSPORTS[name]
    except KeyError:
        raise ValueError(
            f"Unknown transport {name!r}, expected one of: {', '.join(TRANSPORTS)}"
        )

    base_url = base_url or config.OMS_BASE_URL
    timeout = timeout if timeout is not None else config.OMS_TIMEOUT
    logger.debug(
        "Creating %s transport: base_url=%s, timeout=%.1f", name, base_url, timeout
    )
    return transport_cls(base_url, timeout=timeout)


def get_oms_client(transport: Optional[Transport] = None) -> OmsApiClient:
    """
    Create an OmsApiClient wired with the Pydantic serializer.

    Args:
        transport: Transport to use. Built from config when omitted.

    Returns:
        Configured OmsApiClient.
    """
    transport = transport or build_transport()
    return OmsApiClient(RequestExecutor(transport), PydanticSerializer())
