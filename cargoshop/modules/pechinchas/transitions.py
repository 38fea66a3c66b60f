# cargoshop/modules/pechinchas/transitions.py
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple


class PechinchaStatus(str, Enum):
    PENDENTE = "pendente"
    ACEITO = "aceito"
    FINALIZADO = "finalizado"


class ActorRole(str, Enum):
    BUYER = "buyer"
    SELLER = "seller"
    OTHER = "other"


BOTH = frozenset({ActorRole.BUYER, ActorRole.SELLER})

# (estado atual, estado pedido) -> papéis que podem fazer a transição
ALLOWED_TRANSITIONS: Dict[Tuple[PechinchaStatus, PechinchaStatus], FrozenSet[ActorRole]] = {
    (PechinchaStatus.PENDENTE, PechinchaStatus.PENDENTE): BOTH,
    (PechinchaStatus.PENDENTE, PechinchaStatus.ACEITO): frozenset({ActorRole.SELLER}),
    (PechinchaStatus.ACEITO, PechinchaStatus.ACEITO): BOTH,
    (PechinchaStatus.ACEITO, PechinchaStatus.FINALIZADO): frozenset({ActorRole.BUYER}),
    (PechinchaStatus.FINALIZADO, PechinchaStatus.FINALIZADO): BOTH,
}


def actor_role(username: str, pechincha: dict) -> ActorRole:
    """Papel do usuário na pechincha"""
    if username == pechincha.get("seller"):
        return ActorRole.SELLER
    if username == pechincha.get("buyer"):
        return ActorRole.BUYER
    return ActorRole.OTHER


def check_transition(current: str, requested: str, role: ActorRole) -> Optional[str]:
    """
    Verifica se o papel pode levar a pechincha de `current` para `requested`.

    Retorna None se a transição é válida, ou a mensagem de erro.
    """
    try:
        key = (PechinchaStatus(current), PechinchaStatus(requested))
    except ValueError:
        return f"Status inválido: '{current}' -> '{requested}'"

    allowed = ALLOWED_TRANSITIONS.get(key)
    if allowed is None:
        return f"Transição não permitida: '{current}' -> '{requested}'"
    if role not in allowed:
        return f"'{role.value}' não pode mudar a pechincha de '{current}' para '{requested}'"
    return None
