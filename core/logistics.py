# =============================================================================
# core/logistics.py  -  Transports and liquidations (business backend)
# =============================================================================
#
# Two read-only listings from the logistics backend.  Both endpoints return a
# bare JSON array; filtering happens here (is_active, id_transport) except the
# free-text search, which is delegated to the backend as ?search=.
#
# Output is Spanish, as the backend's users expect.
# =============================================================================

import logging
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional
from urllib.parse import quote

from core.http_client import JsonClient
from core.models import (
    Liquidation,
    LiquidationDetail,
    LiquidationQuery,
    Transport,
    TransportQuery,
    read_root_array,
)

TRANSPORTS_PATH = "/backend/api/v1.0/business/transports"
LIQUIDATIONS_PATH = "/backend/api/v1.0/logistics/liquidations/recent"

NO_TRANSPORTS_MESSAGE = "No se encontraron transportes que coincidan con los criterios especificados."
NO_LIQUIDATIONS_MESSAGE = "No se encontraron liquidaciones para los criterios especificados."

TRANSPORT_DELIMITER = "\n---\n"
LIQUIDATION_DELIMITER = "\n=====\n"

_CENTS = Decimal("0.01")
_MIN_PRECISION = 34

logger = logging.getLogger(__name__)


def format_amount(value: Decimal) -> str:
    """Two decimals, half away from zero, comma thousands (1234.5 -> "1,234.50")."""
    with localcontext() as context:
        # quantize needs every integer digit plus two decimals within precision
        context.prec = max(_MIN_PRECISION, value.adjusted() + 3)
        return f"{value.quantize(_CENTS, rounding=ROUND_HALF_UP):,.2f}"


def build_transports_path(search: Optional[str]) -> str:
    if search is None or not search.strip():
        return TRANSPORTS_PATH
    return f"{TRANSPORTS_PATH}?search={quote(search, safe='')}"


def format_transport(transport: Transport) -> str:
    return (
        f"Código: {transport.code}\n"
        f"Nombre: {transport.name}\n"
        f"RIF: {transport.tax_identification}\n"
        f"Estado: {'Activo' if transport.is_active else 'Inactivo'}"
    )


def format_detail(detail: LiquidationDetail) -> str:
    return (
        f"  Ruta: {detail.route_name}"
        f" | Monto: {format_amount(detail.applied_amount)}"
        f" | Regla: {detail.calculation_details}"
    )


def format_liquidation(liquidation: Liquidation) -> str:
    details = "\n".join(format_detail(detail) for detail in liquidation.details)
    return (
        f"Lote: {liquidation.liquidation_batch_id}\n"
        f"Transporte: {liquidation.transport_name}\n"
        f"Subtotal: {format_amount(liquidation.subtotal)} {liquidation.currency}\n"
        f"Total: {format_amount(liquidation.total)} {liquidation.currency}\n"
        f"Estado: {liquidation.status}\n"
        f"Fecha: {liquidation.liquidation_date}\n"
        f"Detalles:\n"
        f"{details}"
    )


async def get_transports(client: JsonClient, query: Optional[TransportQuery] = None) -> str:
    """Registered transports, optionally searched and limited to active ones.

    Args:
        client: Connection to the logistics backend.
        query: Search text and active-only flag (defaults: no search, active only).

    Returns:
        One block per transport joined by "\\n---\\n", or NO_TRANSPORTS_MESSAGE.
    """
    query = query or TransportQuery()

    document = await client.fetch_json(build_transports_path(query.search))
    transports = [Transport.from_json(item) for item in read_root_array(document, "TransportList")]

    total = len(transports)
    if query.only_active:
        transports = [transport for transport in transports if transport.is_active]
    logger.info("%d of %d transports kept (only_active=%s)", len(transports), total, query.only_active)

    if not transports:
        return NO_TRANSPORTS_MESSAGE

    return TRANSPORT_DELIMITER.join(format_transport(transport) for transport in transports)


async def get_recent_liquidations(client: JsonClient, query: Optional[LiquidationQuery] = None) -> str:
    """Recent liquidation batches, optionally for a single transport."""
    query = query or LiquidationQuery()

    document = await client.fetch_json(LIQUIDATIONS_PATH)
    liquidations = [Liquidation.from_json(item) for item in read_root_array(document, "LiquidationList")]

    total = len(liquidations)
    if query.id_transport is not None:
        liquidations = [item for item in liquidations if item.id_transport == query.id_transport]
    logger.info("%d of %d liquidations kept (id_transport=%s)", len(liquidations), total, query.id_transport)

    if not liquidations:
        return NO_LIQUIDATIONS_MESSAGE

    return LIQUIDATION_DELIMITER.join(format_liquidation(item) for item in liquidations)
