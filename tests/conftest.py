import json

import pytest

from api_client import OmsApiClient, RequestExecutor
from serializer import PydanticSerializer
from transport import TransportResponse

BUFFER_STATUS = {
    "omsId": "cdf12109-10d3-11e6-8b6f-0050569977a1",
    "orderId": "b024ae09-ef7c-449e-b461-05d8eb116c79",
    "gtin": "04607177964089",
    "bufferStatus": "ACTIVE",
    "leftInBuffer": 250,
    "totalCodes": 1000,
    "unavailableCodes": 0,
    "availableCodes": 250,
    "totalPassed": 750,
    "poolsExhausted": False,
    "poolInfos": [
        {
            "status": "READY",
            "quantity": 1000,
            "leftInRegistrar": 0,
            "registrarId": "registrar-1",
            "isRegistrarReady": True,
            "registrarErrorCount": 0,
            "lastRegistrarErrorTimestamp": 0,
        }
    ],
}

CODES_BLOCK = {
    "omsId": "cdf12109-10d3-11e6-8b6f-0050569977a1",
    "codes": [
        "010460717796408921xZ1tFOd5A5eXb",
        "010460717796408921AB1cXhq4pGuNt",
    ],
    "blockId": "9bbf2d4c-7f6b-4b3c-8c2a-2d3e6f1c0a11",
}

CLOSE_RESULT = {"omsId": "cdf12109-10d3-11e6-8b6f-0050569977a1"}


class StubTransport:
    """Records every call and answers with a canned response or error."""

    def __init__(self, response=None, error=None):
        self.response = response or TransportResponse(200, "{}")
        self.error = error
        self.calls = []
        self.closed = False

    def send(self, method, url, *, headers, query, body=None):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "headers": dict(headers),
                "query": dict(query),
                "body": body,
            }
        )
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


def ok(payload: dict) -> TransportResponse:
    return TransportResponse(200, json.dumps(payload))


@pytest.fixture
def stub_transport():
    return StubTransport()


@pytest.fixture
def make_client():
    def _make(response=None, error=None):
        transport = StubTransport(response=response, error=error)
        client = OmsApiClient(RequestExecutor(transport), PydanticSerializer())
        return client, transport

    return _make
