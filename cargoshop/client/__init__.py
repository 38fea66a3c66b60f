# cargoshop/client/__init__.py
"""
Cliente Python do Cargoshop

Equivalente aos slices e formulários do frontend:
- api.py: chamadas HTTP (httpx) com o bearer token
- state.py: cache por recurso e refetch ao receber avisos
- forms.py: validação dos formulários antes do envio
- negotiation.py: fluxo da pechincha (propor, aceitar, pagar)
- catalog.py: cadastro e edição de produtos
- listener.py: consumo do canal /socket
"""

from .api import ApiClientError, MarketplaceClient
from .state import MarketplaceState, ResourceSlice
from .negotiation import NegotiationFlow
from .catalog import CatalogActions

__all__ = [
    "ApiClientError",
    "MarketplaceClient",
    "MarketplaceState",
    "ResourceSlice",
    "NegotiationFlow",
    "CatalogActions"
]
