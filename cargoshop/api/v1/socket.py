# cargoshop/api/v1/socket.py
import logging
from fastapi import APIRouter, WebSocket

logger = logging.getLogger(__name__)

router = APIRouter()

@router.websocket("/socket")
async def realtime_socket(websocket: WebSocket):
    """Canal de avisos: o servidor só envia; mensagens do cliente são ignoradas"""
    broadcaster = websocket.app.state.broadcaster

    await websocket.accept()
    broadcaster.register(websocket)
    try:
        while True:
            # texto ou binário, tanto faz: só o disconnect encerra o laço
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
    finally:
        broadcaster.unregister(websocket)
