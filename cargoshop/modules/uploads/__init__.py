# cargoshop/modules/uploads/__init__.py
"""
Módulo de Upload de Imagens

Recebe a imagem do produto (campo multipart 'imageFile') e devolve o nome
e a URL pública, servida em /images ou pelo Cloudinary.
"""

from .router import router

__all__ = ["router"]
