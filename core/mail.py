"""Simulated e-mail delivery (the send_email tool).

Nothing is sent: the tool only builds the confirmation an agent would get
back from a real mail gateway.
"""

from datetime import datetime
from typing import Callable

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def send_email(
    to: str,
    subject: str,
    body: str,
    now: Callable[[], datetime] = datetime.now,
) -> str:
    """Return the delivery confirmation for a message to `to`.

    The body is accepted for parity with a real gateway and is not echoed.
    """
    sent_at = now().strftime(TIMESTAMP_FORMAT)
    return f"Correo enviado exitosamente a {to} el {sent_at}.\nAsunto: {subject}"
