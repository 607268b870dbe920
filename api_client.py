# api_client.py
"""
HTTP client for the OMS IC buffer API.

RequestExecutor dispatches authenticated requests and normalizes failures.
OmsApiClient exposes the buffer status, fetch codes and close array
operations on top of it.
"""

import logging
from typing import Any, Mapping, Optional

from errors import BadResponseError, GeneralError, OmsClientError, RequestError
from schemas import (
    CloseICArrayResponse,
    Extension,
    GetICBufferStatusResponse,
    GetICsFromOrderResponse,
)
from serializer import Serializer
from transport import Transport, TransportResponse

logger = logging.getLogger(__name__)

TOKEN_HEADER = "clientToken"


class RequestExecutor:
    """Sends one request per call and returns the raw body text."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def request(
        self,
        token: str,
        method: str,
        uri: str,
        query: Optional[Mapping[str, Any]] = None,
        body: Optional[str] = None,
    ) -> str:
        """
        Send a request to the OMS.

        Args:
            token: Client token sent in the clientToken header.
            method: HTTP method, GET or POST.
            uri: Request path; a leading slash is stripped.
            query: Query parameters. None values are left out.
            body: Pre-serialized request body, if any.

        Returns:
            Response body text of a 2xx response.

        Raises:
            RequestError: If the OMS returned a non-2xx status.
            GeneralError: If the request could not be completed.
        """
        headers = {
            "Content-Type": "application/json",
            TOKEN_HEADER: token,
        }
        params = {k: v for k, v in (query or {}).items() if v is not None}
        uri = uri.lstrip("/")

        logger.debug("Dispatching %s %s params=%s", method, uri, params)
        try:
            response = self.transport.send(
                method, uri, headers=headers, query=params, body=body
            )
            raise_for_status(response)
        except Exception as e:
            raise handle_request_exception(e) from e

        return response.text


def raise_for_status(response: TransportResponse) -> None:
    """Raise BadResponseError for a non-2xx response."""
    if not response.ok:
        raise BadResponseError(response.status_code, response.text)


def handle_request_exception(error: Exception) -> OmsClientError:
    """
    Map a dispatch failure onto the client error taxonomy.

    Args:
        error: Exception raised by the transport or by the status check.

    Returns:
        RequestError for bad HTTP responses, GeneralError for anything else.
    """
    if isinstance(error, BadResponseError):
        logger.error(
            "OMS returned HTTP %d: %s", error.status_code, error.body[:200]
        )
        return RequestError.because_of_error(error.status_code, error.body, error)

    logger.error("OMS request failed: %s", error)
    return GeneralError.because_of_error(error)


class OmsApiClient:
    """Client for the OMS v2 IC buffer endpoints."""

    def __init__(self, executor: RequestExecutor, serializer: Serializer) -> None:
        self.executor = executor
        self.serializer = serializer

    def get_ic_buffer_status(
        self,
        extension: Extension,
        token: str,
        oms_id: str,
        order_id: str,
        gtin: str,
    ) -> GetICBufferStatusResponse:
        """Fetch the buffer status for an order and GTIN."""
        url = f"/api/v2/{extension}/buffer/status"
        result = self.executor.request(
            token,
            "GET",
            url,
            {"omsId": oms_id, "orderId": order_id, "gtin": gtin},
        )
        return self.serializer.deserialize(GetICBufferStatusResponse, result)

    def get_ics_from_order(
        self,
        extension: Extension,
        token: str,
        oms_id: str,
        order_id: str,
        gtin: str,
        quantity: int,
        last_block_id: str = "0",
    ) -> GetICsFromOrderResponse:
        """
        Fetch a block of codes from an order buffer.

        Args:
            extension: Product group namespace.
            token: Client token.
            oms_id: OMS identifier.
            order_id: Order identifier.
            gtin: Product GTIN.
            quantity: Number of codes to fetch.
            last_block_id: blockId of the previous block, "0" for the first one.

        Returns:
            The codes and the blockId to continue from.
        """
        url = f"/api/v2/{extension}/codes"
        result = self.executor.request(
            token,
            "GET",
            url,
            {
                "omsId": oms_id,
                "orderId": order_id,
                "gtin": gtin,
                "quantity": quantity,
                "lastBlockId": last_block_id,
            },
        )
        return self.serializer.deserialize(GetICsFromOrderResponse, result)

    def close_ic_array(
        self,
        extension: Extension,
        token: str,
        oms_id: str,
        order_id: str,
        gtin: str,
        last_block_id: str,
    ) -> CloseICArrayResponse:
        """Close the code array of an order buffer after the given block."""
        url = f"/api/v2/{extension}/buffer/close"
        result = self.executor.request(
            token,
            "POST",
            url,
            {
                "omsId": oms_id,
                "orderId": order_id,
                "gtin": gtin,
                "lastBlockId": last_block_id,
            },
        )
        return self.serializer.deserialize(CloseICArrayResponse, result)
