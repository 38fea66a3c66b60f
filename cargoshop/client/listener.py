# cargoshop/client/listener.py
import json
import logging
from typing import Optional

import websockets

from .state import MarketplaceState

logger = logging.getLogger(__name__)


async def handle_message(state: MarketplaceState, message: str) -> Optional[str]:
    """Interpreta uma mensagem {"event": ...} e recarrega o recurso"""
    try:
        event = json.loads(message).get("event")
    except (ValueError, AttributeError):
        logger.warning(f"⚠️ Mensagem inválida no canal: {message!r}")
        return None
    return await state.handle_event(event)


async def listen(url: str, state: MarketplaceState, max_events: Optional[int] = None) -> int:
    """
    Escuta o canal /socket e recarrega o recurso de cada aviso.

    Não há replay: avisos perdidos durante uma reconexão não são reenviados.
    """
    handled = 0
    async with websockets.connect(url) as websocket:
        logger.info(f"🔌 Conectado a {url}")
        async for message in websocket:
            await handle_message(state, message)
            handled += 1
            if max_events is not None and handled >= max_events:
                break
    return handled
