# cargoshop/shared/database/models.py
from datetime import datetime
from sqlalchemy import Column, String, DateTime, JSON, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Nomes das coleções, iguais às tabelas do DynamoDB original
PRODUCTS = "CargoshopProducts"
PECHINCHAS = "CargoshopPechinchas"
ORDERS = "CargoshopOrders"
REVIEWS = "CargoshopReviews"
USERS = "CargoshopUsers"


class TimestampMixin:
    """Mixin que adiciona os campos created_at e updated_at"""
    created_at = Column(DateTime, nullable=False, default=datetime.now, server_default=func.current_timestamp())
    updated_at = Column(DateTime, nullable=False, default=datetime.now, server_default=func.current_timestamp(), onupdate=datetime.now)


class Document(Base, TimestampMixin):
    """Documento plano de uma coleção, identificado por (collection, key)"""
    __tablename__ = "documents"

    collection = Column(String(64), primary_key=True)
    key = Column(String(255), primary_key=True)
    body = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False)

    def __repr__(self):
        return f"<Document {self.collection}/{self.key}>"
