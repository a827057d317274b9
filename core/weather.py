# =============================================================================
# core/weather.py  -  National Weather Service lookups
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads alerts and forecasts from api.weather.gov and renders them as
#   plain text for an agent to read.
#
# THE FORECAST LOCATOR:
#   The NWS API does not serve a forecast for raw coordinates.  The first
#   request (/points/{lat},{lon}) returns a "locator" document whose
#   properties.forecast field is the absolute URL of the gridpoint forecast.
#   The second request follows that URL.  Both go through the same client,
#   one after the other.
#
# Messages in this module are English; the logistics module is Spanish.
# =============================================================================

import logging

from core.errors import MissingFieldError
from core.http_client import JsonClient
from core.models import Alert, ForecastPeriod, read_array, read_object

NO_ALERTS_MESSAGE = "No active alerts for this state."
NO_FORECAST_MESSAGE = "No forecast periods available for this location."

ALERT_DELIMITER = "\n--\n"
FORECAST_DELIMITER = "\n---\n"

logger = logging.getLogger(__name__)


def format_coordinate(value: float) -> str:
    """Render a coordinate the way the NWS path expects it.

    Shortest round-trip form, "." as the decimal separator, and no
    trailing ".0" on whole numbers (40.0 -> "40"); exponents are upper
    case (1e-05 -> "1E-05").
    """
    text = repr(float(value))
    if "e" in text:
        return text.upper()
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_alert(alert: Alert) -> str:
    return (
        f"Event: {alert.event}\n"
        f"Area: {alert.area_desc}\n"
        f"Severity: {alert.severity}\n"
        f"Description: {alert.description}\n"
        f"Instruction: {alert.instruction}"
    )


def format_period(period: ForecastPeriod) -> str:
    return (
        f"{period.name}\n"
        f"Temperature: {period.temperature}°F\n"
        f"Wind: {period.wind_speed} {period.wind_direction}\n"
        f"Forecast: {period.detailed_forecast}"
    )


async def get_alerts(client: JsonClient, state: str) -> str:
    """Active alerts for a US state.

    Args:
        client: Connection to the NWS API.
        state: Two-letter state code (e.g., "NY").

    Returns:
        One block per alert joined by "\\n--\\n", or NO_ALERTS_MESSAGE.
    """
    document = await client.fetch_json(f"/alerts/active/area/{state}")
    alerts = [Alert.from_feature(feature) for feature in read_array(document, "features", "AlertCollection")]
    logger.info("%d active alerts for %s", len(alerts), state)

    if not alerts:
        return NO_ALERTS_MESSAGE

    return ALERT_DELIMITER.join(format_alert(alert) for alert in alerts)


async def resolve_forecast_url(client: JsonClient, latitude: float, longitude: float) -> str:
    """Follow /points/{lat},{lon} to the forecast URL it advertises.

    Raises:
        MissingFieldError: the locator has no usable properties.forecast.
    """
    point_path = f"points/{format_coordinate(latitude)},{format_coordinate(longitude)}"
    locator = await client.fetch_json(f"/{point_path}")

    properties = read_object(locator, "properties", "PointLocator")
    forecast_url = properties.get("forecast")
    if not isinstance(forecast_url, str) or not forecast_url:
        base = client.base_url if client.base_url.endswith("/") else client.base_url + "/"
        raise MissingFieldError(
            "PointLocator",
            "forecast",
            f"No forecast URL provided by {base}{point_path}",
        )
    return forecast_url


async def get_forecast(client: JsonClient, latitude: float, longitude: float) -> str:
    """Forecast periods for a point.

    Returns:
        One block per period joined by "\\n---\\n", or NO_FORECAST_MESSAGE.
    """
    forecast_url = await resolve_forecast_url(client, latitude, longitude)

    forecast = await client.fetch_json(forecast_url)
    properties = read_object(forecast, "properties", "Forecast")
    periods = [ForecastPeriod.from_json(item) for item in read_array(properties, "periods", "Forecast")]
    logger.info("%d forecast periods from %s", len(periods), forecast_url)

    if not periods:
        return NO_FORECAST_MESSAGE

    return FORECAST_DELIMITER.join(format_period(period) for period in periods)
