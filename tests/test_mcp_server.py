"""Tests for the FastMCP registration surface, driven through an in-memory client."""

import asyncio
from datetime import datetime

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from core.logistics import LIQUIDATIONS_PATH, NO_TRANSPORTS_MESSAGE, TRANSPORTS_PATH
from core.weather import NO_ALERTS_MESSAGE
from payloads import TOOL_NAMES, liquidation, transport
from tools.mcp_server import create_server


@pytest.fixture
def server(weather_api, logistics_api):
    return create_server(
        weather_connection=weather_api.provider,
        logistics_connection=logistics_api.provider,
        clock=lambda: datetime(2024, 1, 2, 3, 4, 5),
    )


def call_tool(server, name, arguments=None):
    async def invoke():
        async with Client(server) as client:
            result = await client.call_tool(name, arguments or {})
            return result.content[0].text

    return asyncio.run(invoke())


def list_tools(server):
    async def invoke():
        async with Client(server) as client:
            return await client.list_tools()

    return {tool.name: tool for tool in asyncio.run(invoke())}


class TestRegistration:
    def test_all_tools_registered(self, server):
        assert set(list_tools(server)) == TOOL_NAMES

    def test_descriptions(self, server):
        tools = list_tools(server)

        assert tools["get_alerts"].description == "Get weather alerts for a US state."
        assert tools["get_forecast"].description == "Get weather forecast for a location."
        assert tools["send_email"].description == "Envío de un correo electrónico."

    def test_parameter_metadata(self, server):
        tools = list_tools(server)

        alerts = tools["get_alerts"].inputSchema
        assert alerts["required"] == ["state"]
        assert "2 letter abbreviation" in alerts["properties"]["state"]["description"]

        forecast = tools["get_forecast"].inputSchema
        assert set(forecast["required"]) == {"latitude", "longitude"}
        assert forecast["properties"]["latitude"]["type"] == "number"

        transports = tools["get_transports"].inputSchema
        assert "required" not in transports or transports["required"] == []
        assert transports["properties"]["only_active"]["default"] is True
        assert "Texto de búsqueda" in transports["properties"]["search"]["description"]

        liquidations = tools["get_recent_liquidations"].inputSchema
        assert "id_transport" in liquidations["properties"]
        assert "required" not in liquidations or liquidations["required"] == []


class TestInvocation:
    def test_get_alerts(self, server, weather_api):
        weather_api.routes["/alerts/active/area/NY"] = {"features": []}

        assert call_tool(server, "get_alerts", {"state": "NY"}) == NO_ALERTS_MESSAGE

    def test_get_forecast(self, server, weather_api):
        weather_api.routes["/points/39.7456,-97.0892"] = {
            "properties": {"forecast": "https://api.weather.gov/gridpoints/TOP/32,81/forecast"}
        }
        weather_api.routes["/gridpoints/TOP/32,81/forecast"] = {
            "properties": {
                "periods": [
                    {
                        "name": "Today",
                        "temperature": 80,
                        "windSpeed": "10 mph",
                        "windDirection": "S",
                        "detailedForecast": "Sunny.",
                    }
                ]
            }
        }

        result = call_tool(server, "get_forecast", {"latitude": 39.7456, "longitude": -97.0892})

        assert result == "Today\nTemperature: 80°F\nWind: 10 mph S\nForecast: Sunny."

    def test_send_email(self, server, weather_api, logistics_api):
        result = call_tool(server, "send_email", {"to": "ops@example.com", "subject": "Aviso", "body": "Hola"})

        assert result == "Correo enviado exitosamente a ops@example.com el 2024-01-02 03:04:05.\nAsunto: Aviso"
        assert weather_api.requests == []
        assert logistics_api.requests == []

    def test_get_transports_defaults_to_active_only(self, server, logistics_api):
        logistics_api.routes[TRANSPORTS_PATH] = [transport("T9", "Nueve", is_active=False)]

        assert call_tool(server, "get_transports") == NO_TRANSPORTS_MESSAGE

    def test_get_transports_include_inactive(self, server, logistics_api):
        logistics_api.routes[TRANSPORTS_PATH] = [transport("T9", "Nueve", is_active=False)]

        result = call_tool(server, "get_transports", {"search": "Nue", "only_active": False})

        assert "Estado: Inactivo" in result
        assert logistics_api.requests[0].url.params["search"] == "Nue"

    def test_get_recent_liquidations(self, server, logistics_api):
        logistics_api.routes[LIQUIDATIONS_PATH] = [liquidation(7, id_transport=5), liquidation(8, id_transport=6)]

        result = call_tool(server, "get_recent_liquidations", {"id_transport": 6})

        assert result.startswith("Lote: 8\n")
        assert "\n=====\n" not in result


class TestFailures:
    def test_missing_forecast_url_is_a_tool_error(self, server, weather_api):
        weather_api.routes["/points/39.7456,-97.0892"] = {"properties": {}}

        with pytest.raises(ToolError) as exc_info:
            call_tool(server, "get_forecast", {"latitude": 39.7456, "longitude": -97.0892})

        assert "No forecast URL provided" in str(exc_info.value)

    def test_http_failure_is_a_tool_error(self, server):
        with pytest.raises(ToolError):
            call_tool(server, "get_alerts", {"state": "NY"})

    def test_invalid_argument_type_is_rejected(self, server):
        with pytest.raises(ToolError):
            call_tool(server, "get_recent_liquidations", {"id_transport": "not-a-number"})
