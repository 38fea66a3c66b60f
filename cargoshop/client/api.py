# cargoshop/client/api.py
import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

RESOURCES = ("products", "pechinchas", "pedidos", "reviews")


class ApiClientError(Exception):
    """Resposta de erro da API, com a mensagem que o servidor enviou"""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class MarketplaceClient:
    """Cliente HTTP da API"""

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 30
    ):
        self.base_url = base_url
        self.username: Optional[str] = None
        self.token: Optional[str] = None
        self.admin = False
        self._client = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self):
        await self._client.aclose()

    def _get_headers(self) -> Dict[str, str]:
        headers = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        response = await self._client.request(method, path, headers=self._get_headers(), **kwargs)

        if response.is_success:
            return response.json()

        try:
            body = response.json()
        except ValueError:
            body = {}
        message = body.get("error") or body.get("message") or response.text or response.reason_phrase
        logger.warning(f"⚠️ {method} {path} -> {response.status_code}: {message}")
        raise ApiClientError(response.status_code, message)

    # ==================== USUÁRIOS ====================

    async def signup(self, username: str, password: str) -> Dict[str, Any]:
        data = await self._request("POST", "/users/signup", json={"username": username, "password": password})
        self.username, self.token, self.admin = data["username"], data["token"], False
        return data

    async def login(self, username: str, password: str) -> Dict[str, Any]:
        data = await self._request("POST", "/users/login", json={"username": username, "password": password})
        self.username, self.token, self.admin = data["username"], data["token"], data["admin"]
        return data

    async def logout(self) -> Dict[str, Any]:
        data = await self._request("GET", "/users/logout")
        self.username, self.token, self.admin = None, None, False
        return data

    # ==================== RECURSOS ====================

    async def list(self, resource: str) -> List[Dict[str, Any]]:
        return await self._request("GET", f"/{resource}")

    async def get(self, resource: str, item_id: str) -> Dict[str, Any]:
        return await self._request("GET", f"/{resource}/{item_id}")

    async def create(self, resource: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", f"/{resource}", json=data)

    async def update(self, resource: str, item_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PUT", f"/{resource}/{item_id}", json=data)

    async def delete(self, resource: str, item_id: str) -> Dict[str, Any]:
        return await self._request("DELETE", f"/{resource}/{item_id}")

    async def upload_image(self, filename: str, content: bytes, content_type: str = "image/png") -> Dict[str, Any]:
        files = {"imageFile": (filename, content, content_type)}
        return await self._request("POST", "/imageUpload", files=files)
