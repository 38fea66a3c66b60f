# cargoshop/shared/database/document_store.py
"""
Acesso ao document store.

Cada coleção é um conjunto de documentos planos (dicts JSON) identificados
por uma chave. As operações seguem o modelo do DynamoDB DocumentClient
usado pelo backend original: scan, get, put, update e delete.
"""
import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .models import Document

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Falha na operação do document store"""

    def __init__(self, operation: str, collection: str, original: Exception):
        self.operation = operation
        self.collection = collection
        self.original = original
        super().__init__(f"{operation} em {collection} falhou: {original}")


class DocumentStore:
    def __init__(self, db: Session):
        self.db = db
        self._atomic_depth = 0

    @contextmanager
    def atomic(self):
        """Agrupa várias operações em uma única transação"""
        self._atomic_depth += 1
        try:
            yield self
        except Exception:
            self._atomic_depth -= 1
            if self._atomic_depth == 0:
                self.db.rollback()
            raise
        else:
            self._atomic_depth -= 1
            if self._atomic_depth == 0:
                self._commit("atomic", "*")

    def _commit(self, operation: str, collection: str):
        if self._atomic_depth:
            try:
                self.db.flush()
            except SQLAlchemyError as e:
                raise self._fail(operation, collection, e) from e
            return
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(operation, collection, e) from e

    def _fail(self, operation: str, collection: str, error: SQLAlchemyError) -> StoreError:
        self.db.rollback()
        return StoreError(operation, collection, error)

    def _find(self, collection: str, key: str) -> Optional[Document]:
        return self.db.get(Document, (collection, key))

    def scan(self, collection: str) -> List[Dict[str, Any]]:
        """Todos os documentos da coleção, sem filtro nem paginação"""
        try:
            rows = (
                self.db.query(Document)
                .filter(Document.collection == collection)
                .order_by(Document.created_at)
                .all()
            )
        except SQLAlchemyError as e:
            raise self._fail("scan", collection, e) from e
        return [dict(row.body) for row in rows]

    def get(self, collection: str, key: str) -> Optional[Dict[str, Any]]:
        try:
            row = self._find(collection, key)
        except SQLAlchemyError as e:
            raise self._fail("get", collection, e) from e
        return dict(row.body) if row is not None else None

    def put(self, collection: str, key: str, item: Dict[str, Any]) -> Dict[str, Any]:
        """Insere ou substitui o documento inteiro (last-write-wins)"""
        try:
            row = self._find(collection, key)
            if row is None:
                self.db.add(Document(collection=collection, key=key, body=dict(item)))
            else:
                row.body = dict(item)
        except SQLAlchemyError as e:
            raise self._fail("put", collection, e) from e
        self._commit("put", collection)
        return dict(item)

    def put_if_absent(self, collection: str, key: str, item: Dict[str, Any]) -> bool:
        """Insere somente se a chave não existir. Retorna False se já existia."""
        try:
            if self._find(collection, key) is not None:
                return False
            self.db.add(Document(collection=collection, key=key, body=dict(item)))
        except SQLAlchemyError as e:
            raise self._fail("put", collection, e) from e
        self._commit("put", collection)
        return True

    def update(self, collection: str, key: str, attributes: Dict[str, Any]) -> Dict[str, Any]:
        """
        Sobrescreve os atributos informados e retorna o documento completo.

        Se a chave não existir o documento é criado (upsert), como o
        UpdateItem do DynamoDB.
        """
        try:
            row = self._find(collection, key)
            if row is None:
                body = {"id": key, **attributes}
                self.db.add(Document(collection=collection, key=key, body=body))
            else:
                # reatribuir para o SQLAlchemy detectar a mudança no JSON
                body = {**row.body, **attributes}
                row.body = body
        except SQLAlchemyError as e:
            raise self._fail("update", collection, e) from e
        self._commit("update", collection)
        return dict(body)

    def delete(self, collection: str, key: str) -> None:
        """Remove o documento; chave inexistente não é erro"""
        try:
            row = self._find(collection, key)
            if row is not None:
                self.db.delete(row)
        except SQLAlchemyError as e:
            raise self._fail("delete", collection, e) from e
        self._commit("delete", collection)
