# =============================================================================
# core/models.py  -  Data Models (one shape per remote endpoint)
# =============================================================================
#
# The remote APIs return loosely shaped JSON.  Each tool only reads a handful
# of fields, so each endpoint gets a small dataclass holding exactly those
# fields, plus a from_json() constructor that checks presence and JSON type.
#
# A bad document never produces a half-filled record: from_json() raises
# MissingFieldError or FieldTypeError and the whole invocation aborts.
#
# STRING FIELDS:
#   Must be present.  A JSON null is accepted and read as "" (the NWS API
#   sends "instruction": null for many alerts).
# =============================================================================

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional

from core.errors import FieldTypeError, MissingFieldError


# -----------------------------------------------------------------------------
# Field readers
# -----------------------------------------------------------------------------
def _require(data: Any, key: str, record: str) -> Any:
    if not isinstance(data, dict):
        raise FieldTypeError(record, key, "an object", data)
    if key not in data:
        raise MissingFieldError(record, key)
    return data[key]


def read_object(data: Any, key: str, record: str) -> dict:
    value = _require(data, key, record)
    if not isinstance(value, dict):
        raise FieldTypeError(record, key, "an object", value)
    return value


def read_array(data: Any, key: str, record: str) -> list:
    value = _require(data, key, record)
    if not isinstance(value, list):
        raise FieldTypeError(record, key, "an array", value)
    return value


def read_str(data: Any, key: str, record: str) -> str:
    value = _require(data, key, record)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise FieldTypeError(record, key, "a string", value)
    return value


def read_int(data: Any, key: str, record: str) -> int:
    value = _require(data, key, record)
    # bool is a subclass of int, but true/false is not a number in JSON
    if isinstance(value, bool) or not isinstance(value, int):
        raise FieldTypeError(record, key, "an integer", value)
    return value


def read_bool(data: Any, key: str, record: str) -> bool:
    value = _require(data, key, record)
    if not isinstance(value, bool):
        raise FieldTypeError(record, key, "a boolean", value)
    return value


def read_decimal(data: Any, key: str, record: str) -> Decimal:
    value = _require(data, key, record)
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise FieldTypeError(record, key, "a number", value)
    # str() first so a float 0.1 stays 0.1 instead of its binary expansion
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    if not amount.is_finite():
        raise FieldTypeError(record, key, "a finite number", value)
    return amount


def read_root_array(data: Any, record: str) -> list:
    """Return a response body that must be a top-level JSON array."""
    if not isinstance(data, list):
        raise FieldTypeError(record, "$", "an array", data)
    return data


# -----------------------------------------------------------------------------
# Alert - one entry of GET /alerts/active/area/{state} -> features[].properties
# -----------------------------------------------------------------------------
@dataclass
class Alert:
    """An active weather alert issued by the National Weather Service."""

    event: str                         # "Flood Warning"
    area_desc: str                     # "Kings, NY; Queens, NY"
    severity: str                      # "Severe", "Moderate", ...
    description: str
    instruction: str                   # often null upstream -> ""

    @classmethod
    def from_feature(cls, feature: Any) -> "Alert":
        properties = read_object(feature, "properties", "Alert")
        return cls(
            event=read_str(properties, "event", "Alert"),
            area_desc=read_str(properties, "areaDesc", "Alert"),
            severity=read_str(properties, "severity", "Alert"),
            description=read_str(properties, "description", "Alert"),
            instruction=read_str(properties, "instruction", "Alert"),
        )


# -----------------------------------------------------------------------------
# ForecastPeriod - one entry of GET {forecast url} -> properties.periods[]
# -----------------------------------------------------------------------------
@dataclass
class ForecastPeriod:
    """A named forecast period ("Tonight", "Wednesday", ...)."""

    name: str
    temperature: int                   # Fahrenheit, as reported
    wind_speed: str                    # "5 to 10 mph"
    wind_direction: str                # "NW"
    detailed_forecast: str

    @classmethod
    def from_json(cls, data: Any) -> "ForecastPeriod":
        return cls(
            name=read_str(data, "name", "ForecastPeriod"),
            temperature=read_int(data, "temperature", "ForecastPeriod"),
            wind_speed=read_str(data, "windSpeed", "ForecastPeriod"),
            wind_direction=read_str(data, "windDirection", "ForecastPeriod"),
            detailed_forecast=read_str(data, "detailedForecast", "ForecastPeriod"),
        )


# -----------------------------------------------------------------------------
# Transport - one entry of GET /backend/api/v1.0/business/transports
# -----------------------------------------------------------------------------
@dataclass
class Transport:
    """A registered transport company."""

    code: str
    name: str
    tax_identification: str            # RIF
    is_active: bool

    @classmethod
    def from_json(cls, data: Any) -> "Transport":
        return cls(
            code=read_str(data, "code", "Transport"),
            name=read_str(data, "name", "Transport"),
            tax_identification=read_str(data, "tax_identification", "Transport"),
            is_active=read_bool(data, "is_active", "Transport"),
        )


# -----------------------------------------------------------------------------
# Liquidation - one entry of GET /backend/api/v1.0/logistics/liquidations/recent
# -----------------------------------------------------------------------------
@dataclass
class LiquidationDetail:
    """Amount applied to one route inside a liquidation batch."""

    route_name: str
    applied_amount: Decimal
    calculation_details: str           # the pricing rule that produced the amount

    @classmethod
    def from_json(cls, data: Any) -> "LiquidationDetail":
        return cls(
            route_name=read_str(data, "route_name", "LiquidationDetail"),
            applied_amount=read_decimal(data, "applied_amount", "LiquidationDetail"),
            calculation_details=read_str(data, "calculation_details", "LiquidationDetail"),
        )


@dataclass
class Liquidation:
    """A settled batch of trips for one transport."""

    id_transport: int
    liquidation_batch_id: int
    transport_name: str
    subtotal: Decimal
    currency: str                      # "USD", "VES", ...
    total: Decimal
    status: str
    liquidation_date: str              # passed through as sent
    details: list[LiquidationDetail] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> "Liquidation":
        return cls(
            id_transport=read_int(data, "id_transport", "Liquidation"),
            liquidation_batch_id=read_int(data, "liquidation_batch_id", "Liquidation"),
            transport_name=read_str(data, "transport_name", "Liquidation"),
            subtotal=read_decimal(data, "subtotal", "Liquidation"),
            currency=read_str(data, "currency", "Liquidation"),
            total=read_decimal(data, "total", "Liquidation"),
            status=read_str(data, "status", "Liquidation"),
            liquidation_date=read_str(data, "liquidation_date", "Liquidation"),
            details=[
                LiquidationDetail.from_json(item)
                for item in read_array(data, "details", "Liquidation")
            ],
        )


# -----------------------------------------------------------------------------
# Query options - optional tool parameters with their defaults
# -----------------------------------------------------------------------------
@dataclass
class TransportQuery:
    """Options for the transport listing."""

    search: Optional[str] = None       # name/code text, matched by the backend
    only_active: bool = True


@dataclass
class LiquidationQuery:
    """Options for the recent-liquidations listing."""

    id_transport: Optional[int] = None  # None -> every transport
