# cargoshop/core/realtime.py
"""
Canal de tempo real: avisa todos os clientes conectados que uma coleção
mudou. Os eventos não carregam dados; o cliente deve buscar a lista de novo.
"""
import asyncio
import logging
from typing import List, Optional, Protocol

from fastapi import Request

from cargoshop.config.settings import settings

logger = logging.getLogger(__name__)

PRODUCT_UPDATED = "productUpdated"
PECHINCHA_UPDATED = "pechinchaUpdated"
PEDIDO_UPDATED = "pedidoUpdated"
REVIEW_UPDATED = "reviewUpdated"

EVENTS = (PRODUCT_UPDATED, PECHINCHA_UPDATED, PEDIDO_UPDATED, REVIEW_UPDATED)


class Connection(Protocol):
    async def send_json(self, data) -> None: ...


class ConnectionManager:
    """Registro das conexões abertas e fan-out de eventos"""

    def __init__(self, send_timeout: Optional[float] = None):
        self.active_connections: List[Connection] = []
        self.send_timeout = settings.broadcast_send_timeout if send_timeout is None else send_timeout

    def register(self, connection: Connection) -> None:
        self.active_connections.append(connection)
        logger.info(f"🔌 Cliente conectado ({len(self.active_connections)} ativos)")

    def unregister(self, connection: Connection) -> None:
        if connection in self.active_connections:
            self.active_connections.remove(connection)
            logger.info(f"🔌 Cliente desconectado ({len(self.active_connections)} ativos)")

    async def _send(self, connection: Connection, event: str) -> None:
        await asyncio.wait_for(connection.send_json({"event": event}), timeout=self.send_timeout)

    async def broadcast(self, event: str) -> int:
        """
        Envia o evento a todos em paralelo; retorna quantos clientes receberam.

        Conexões que falham ou estouram o timeout são removidas.
        """
        connections = list(self.active_connections)
        results = await asyncio.gather(
            *(self._send(connection, event) for connection in connections),
            return_exceptions=True
        )

        delivered = 0
        for connection, result in zip(connections, results):
            if isinstance(result, BaseException):
                logger.warning(f"⚠️ Falha enviando '{event}', removendo conexão: {result!r}")
                self.unregister(connection)
            else:
                delivered += 1
        logger.info(f"📣 {event} enviado a {delivered} cliente(s)")
        return delivered


def get_broadcaster(request: Request) -> ConnectionManager:
    """Dependency: broadcaster da aplicação"""
    return request.app.state.broadcaster
