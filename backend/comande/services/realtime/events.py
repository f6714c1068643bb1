# =============================================================================
# COMANDE v1.0 - REAL-TIME EVENTS
# =============================================================================
# Contratto eventi con il canale di aggiornamento (trasporto esterno)
# =============================================================================

import json
from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, Field

from ...utils.dates import utc_now


class NomeEvento:
    """Nomi evento del canale real-time."""
    ORDER_NEW = "order:new"
    ORDER_UPDATE = "order:update"
    ORDER_STATUS_CHANGE = "order:status-change"
    ORDER_ITEM_UPDATE = "order:item:update"
    ORDER_READY = "order:ready"
    ORDER_DELIVERED = "order:delivered"
    ORDER_PAID = "order:paid"
    ORDER_SENT = "order:sent"
    ORDER_CANCELLED = "order:cancelled"
    ORDER_OUT_OF_STOCK = "order:out-of-stock"
    NOTIFICATION_NEW = "notification:new"
    NOTIFICATION_REMINDER = "notification:reminder"
    SYSTEM_ANNOUNCEMENT = "system:announcement"
    SYSTEM_HEARTBEAT = "system:heartbeat"
    USER_ACTIVITY = "user:activity"
    STATION_STATUS = "station:status"


NOMI_EVENTO = [
    v for k, v in vars(NomeEvento).items() if not k.startswith('_')
]

# Commento SSE inviato periodicamente dal trasporto per tenere viva la connessione
HEARTBEAT_FRAME = ":heartbeat\n\n"


class EventoSSE(BaseModel):
    """Evento pubblicato sul canale real-time."""
    evento: str
    dati: Dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=utc_now)


def formatta_sse(evento: EventoSSE) -> str:
    """Frame testuale Server-Sent Events (event + data JSON)."""
    payload = json.dumps(
        {**evento.dati, "timestamp": evento.timestamp.isoformat()},
        ensure_ascii=False,
        default=str
    )
    return f"event: {evento.evento}\ndata: {payload}\n\n"
