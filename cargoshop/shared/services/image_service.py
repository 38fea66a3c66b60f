# cargoshop/shared/services/image_service.py
import logging
import re
import uuid
from datetime import datetime
from pathlib import Path
from typing import Optional

import cloudinary
import cloudinary.exceptions
import cloudinary.uploader
from fastapi import UploadFile

from cargoshop.config.settings import settings
from cargoshop.core.exceptions import UploadError

logger = logging.getLogger(__name__)

class ImageService:
    """Armazena as imagens dos produtos no Cloudinary ou no disco local"""

    def __init__(self, images_dir: Optional[str] = None):
        self.images_dir = Path(images_dir or settings.images_dir)
        self.configured = all([
            settings.cloudinary_cloud_name,
            settings.cloudinary_api_key,
            settings.cloudinary_api_secret
        ])

        if self.configured:
            cloudinary.config(
                cloud_name=settings.cloudinary_cloud_name,
                api_key=settings.cloudinary_api_key,
                api_secret=settings.cloudinary_api_secret,
                secure=True
            )

    def _sanitize_filename(self, filename: str) -> str:
        """Nome seguro, sem diretórios nem caracteres especiais"""
        name = Path(filename).name
        return re.sub(r"[^A-Za-z0-9._-]", "_", name)

    def validate(self, image_file: UploadFile) -> str:
        """Valida a extensão e retorna o nome sanitizado"""
        if not image_file.filename:
            raise UploadError("You can upload only image files!")

        filename = self._sanitize_filename(image_file.filename)
        extension = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
        if extension not in settings.allowed_image_extensions:
            raise UploadError("You can upload only image files!")
        return filename

    def public_url(self, filename: str) -> str:
        return f"{settings.public_base_url.rstrip('/')}/images/{filename}"

    async def upload(self, image_file: UploadFile) -> dict:
        """Salvar a imagem e retornar {filename, url}"""
        filename = self.validate(image_file)

        await image_file.seek(0)
        content = await image_file.read()

        if len(content) > settings.max_image_size:
            raise UploadError(
                f"A imagem não deve passar de {settings.max_image_size // (1024*1024)}MB"
            )

        if self.configured:
            return self._upload_to_cloudinary(filename, content)

        self.images_dir.mkdir(parents=True, exist_ok=True)
        (self.images_dir / filename).write_bytes(content)
        logger.info(f"📤 Imagem salva localmente: {filename} ({len(content)} bytes)")

        return {"filename": filename, "url": self.public_url(filename)}

    def _upload_to_cloudinary(self, filename: str, content: bytes) -> dict:
        stem = filename.rsplit(".", 1)[0]
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        public_id = f"products/{stem}_{timestamp}_{str(uuid.uuid4())[:8]}"

        logger.info(f"📤 Subindo imagem: {public_id}")
        try:
            result = cloudinary.uploader.upload(
                content,
                public_id=public_id,
                folder=settings.cloudinary_folder,
                resource_type="image",
                overwrite=False
            )
        except cloudinary.exceptions.Error as e:
            logger.error(f"❌ Erro subindo imagem ao Cloudinary: {str(e)}")
            raise UploadError(f"Erro subindo imagem: {str(e)}", status_code=500)

        if 'secure_url' not in result:
            raise UploadError("Cloudinary não retornou URL válida", status_code=500)

        logger.info(f"✅ Imagem subida: {result['secure_url']}")
        return {"filename": filename, "url": result["secure_url"]}
