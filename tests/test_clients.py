from unittest.mock import patch

import pytest

import clients
from api_client import OmsApiClient
from conftest import CLOSE_RESULT, StubTransport, ok
from errors import GeneralError
from schemas import Extension
from transport import HttpxTransport, RequestsTransport


class TestBuildTransport:
    def test_requests(self):
        transport = clients.build_transport("requests", "https://oms.example", 7)

        assert isinstance(transport, RequestsTransport)
        assert transport.base_url == "https://oms.example/"
        assert transport.timeout == 7
        transport.close()

    def test_httpx(self):
        transport = clients.build_transport("httpx", "https://oms.example", 7)

        assert isinstance(transport, HttpxTransport)
        transport.close()

    def test_defaults_from_config(self):
        with patch.multiple(
            "config",
            OMS_TRANSPORT="httpx",
            OMS_BASE_URL="https://configured.example",
            OMS_TIMEOUT=12.0,
        ):
            transport = clients.build_transport()

        assert isinstance(transport, HttpxTransport)
        assert transport.base_url == "https://configured.example/"
        assert transport.timeout == 12.0
        transport.close()

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown transport 'urllib'"):
            clients.build_transport("urllib")


class TestGetOmsClient:
    def test_wires_transport(self):
        transport = StubTransport(response=ok(CLOSE_RESULT))

        client = clients.get_oms_client(transport)
        result = client.close_ic_array(Extension.MILK, "t", "o", "r", "g", "b")

        assert isinstance(client, OmsApiClient)
        assert result.omsId == CLOSE_RESULT["omsId"]
        assert transport.calls[0]["url"] == "api/v2/milk/buffer/close"

    def test_transport_fault_wrapped(self):
        transport = StubTransport(error=OSError("network unreachable"))

        client = clients.get_oms_client(transport)

        with pytest.raises(GeneralError):
            client.get_ic_buffer_status(Extension.WATER, "t", "o", "r", "g")
