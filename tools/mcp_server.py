# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Registers every MCP tool the agent can call.  Each tool is a thin
#   wrapper around a core/ coroutine: it opens a connection for the call,
#   hands it to core/, logs the exchange and returns the text.
#
# HOW IT WORKS (the flow):
#   1. The agent picks a tool by name (e.g., "get_forecast")
#   2. FastMCP validates the arguments against the function signature
#   3. The wrapper opens a scoped connection from its provider
#   4. core/ fetches, validates, filters and formats
#   5. The connection is closed and the text goes back to the agent
#
# CONNECTION PROVIDERS:
#   create_server() takes one provider for the weather API and one for the
#   logistics backend.  Tests pass providers built on httpx.MockTransport;
#   the default instance at the bottom uses the real endpoints from config.
#
# ERRORS:
#   Tools do not catch failures.  A network error or a malformed document
#   is logged here and re-raised; FastMCP turns it into an MCP error result.
#
# RUNNING THIS SERVER:
#     a) Standalone:  python -m tools.mcp_server
#     b) Spawned by the agent client (agent/weather_agent.py) over stdio
# =============================================================================

import logging
import sys
from datetime import datetime
from typing import Annotated, Callable, Optional

from fastmcp import FastMCP
from pydantic import Field

from core.config import Settings, get_settings
from core.http_client import ConnectionProvider, open_json_client
from core.logistics import get_recent_liquidations as fetch_recent_liquidations
from core.logistics import get_transports as fetch_transports
from core.mail import send_email as build_email_confirmation
from core.models import LiquidationQuery, TransportQuery
from core.weather import get_alerts as fetch_alerts
from core.weather import get_forecast as fetch_forecast

SERVER_NAME = "weather"

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: STDOUT carries the stdio MCP transport, and anything
# else written there corrupts the JSON-RPC stream.
#
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for responses
#     - YELLOW for intermediate status
#     - RED for failures
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"

logger = logging.getLogger("mcp_server")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: str) -> str:
    """Log the tool response (first line and size) in GREEN, then return it."""
    first_line = result.split("\n", 1)[0]
    logger.info(f"{_GREEN}  ← {tool_name} response ({len(result)} chars): {first_line}{_RESET}")
    return result


def _log_failure(tool_name: str, exc: Exception) -> None:
    logger.error(f"{_RED}  ✗ {tool_name} failed: {type(exc).__name__}: {exc}{_RESET}")


# =============================================================================
# Default connection providers
# =============================================================================
def weather_provider(settings: Settings) -> ConnectionProvider:
    """Per-call connection to the NWS API (base URL + required User-Agent)."""
    def provider():
        return open_json_client(
            settings.weather_api_base_url,
            headers={"User-Agent": settings.weather_user_agent},
            timeout=settings.http_timeout_seconds,
        )
    return provider


def logistics_provider(settings: Settings) -> ConnectionProvider:
    """Per-call connection to the logistics backend."""
    def provider():
        return open_json_client(
            settings.logistics_api_base_url,
            timeout=settings.http_timeout_seconds,
        )
    return provider


# =============================================================================
# Server factory
# =============================================================================
def create_server(
    weather_connection: Optional[ConnectionProvider] = None,
    logistics_connection: Optional[ConnectionProvider] = None,
    clock: Callable[[], datetime] = datetime.now,
) -> FastMCP:
    """Build the FastMCP server with all five tools registered.

    Args:
        weather_connection: Provider for api.weather.gov (default from config).
        logistics_connection: Provider for the logistics backend (default from config).
        clock: Time source for send_email confirmations.
    """
    settings = get_settings()
    weather_connection = weather_connection or weather_provider(settings)
    logistics_connection = logistics_connection or logistics_provider(settings)

    mcp = FastMCP(SERVER_NAME)

    # -------------------------------------------------------------------------
    # Weather (English)
    # -------------------------------------------------------------------------
    @mcp.tool()
    async def get_alerts(
        state: Annotated[
            str,
            Field(description="The US state to get alerts for. Use the 2 letter abbreviation for the state (e.g. NY)."),
        ],
    ) -> str:
        """Get weather alerts for a US state."""
        _log_request("get_alerts", state=state)
        try:
            async with weather_connection() as client:
                result = await fetch_alerts(client, state)
        except Exception as exc:
            _log_failure("get_alerts", exc)
            raise
        return _log_response("get_alerts", result)

    @mcp.tool()
    async def get_forecast(
        latitude: Annotated[float, Field(description="Latitude of the location.")],
        longitude: Annotated[float, Field(description="Longitude of the location.")],
    ) -> str:
        """Get weather forecast for a location."""
        _log_request("get_forecast", latitude=latitude, longitude=longitude)
        try:
            async with weather_connection() as client:
                result = await fetch_forecast(client, latitude, longitude)
        except Exception as exc:
            _log_failure("get_forecast", exc)
            raise
        return _log_response("get_forecast", result)

    # -------------------------------------------------------------------------
    # Business (Spanish)
    # -------------------------------------------------------------------------
    @mcp.tool()
    def send_email(
        to: Annotated[str, Field(description="Dirección de correo electrónico del destinatario.")],
        subject: Annotated[str, Field(description="Asunto del correo.")],
        body: Annotated[str, Field(description="Cuerpo del mensaje.")],
    ) -> str:
        """Envío de un correo electrónico."""
        _log_request("send_email", to=to, subject=subject)
        _log_status(f"Simulated delivery, body of {len(body)} chars not sent")
        return _log_response("send_email", build_email_confirmation(to, subject, body, now=clock))

    @mcp.tool()
    async def get_transports(
        search: Annotated[
            Optional[str],
            Field(description="Texto de búsqueda para filtrar por nombre o código. Opcional."),
        ] = None,
        only_active: Annotated[
            bool,
            Field(description="Filtrar solo transportes activos. Por defecto: true."),
        ] = True,
    ) -> str:
        """Obtiene información de los transportes registrados, con opciones de filtrado por nombre, código o estado."""
        _log_request("get_transports", search=search, only_active=only_active)
        query = TransportQuery(search=search, only_active=only_active)
        try:
            async with logistics_connection() as client:
                result = await fetch_transports(client, query)
        except Exception as exc:
            _log_failure("get_transports", exc)
            raise
        return _log_response("get_transports", result)

    @mcp.tool()
    async def get_recent_liquidations(
        id_transport: Annotated[
            Optional[int],
            Field(description="ID del transporte para filtrar liquidaciones. Si es null, devuelve todas."),
        ] = None,
    ) -> str:
        """Obtiene las liquidaciones recientes de viajes. Permite filtrar por ID de transporte."""
        _log_request("get_recent_liquidations", id_transport=id_transport)
        query = LiquidationQuery(id_transport=id_transport)
        try:
            async with logistics_connection() as client:
                result = await fetch_recent_liquidations(client, query)
        except Exception as exc:
            _log_failure("get_recent_liquidations", exc)
            raise
        return _log_response("get_recent_liquidations", result)

    return mcp


# =============================================================================
# Default server instance
# =============================================================================
# The agent client spawns this module; it discovers the tools above.
mcp = create_server()


if __name__ == "__main__":
    configure_logging(get_settings().log_level)
    mcp.run()
