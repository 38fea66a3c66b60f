# cargoshop/modules/uploads/router.py
from fastapi import APIRouter, Depends, File, UploadFile

from cargoshop.core.auth.dependencies import verify_user
from cargoshop.core.exceptions import UploadError
from cargoshop.shared.services.image_service import ImageService

router = APIRouter()

def get_image_service() -> ImageService:
    return ImageService()

@router.post("")
async def upload_image(
    imageFile: UploadFile = File(..., description="Imagem do produto"),
    current_user: dict = Depends(verify_user),
    image_service: ImageService = Depends(get_image_service)
):
    """
    Subir imagem de produto

    **Aceita:** jpg, jpeg, png, gif

    **Returns:** {filename, url}
    """
    return await image_service.upload(imageFile)

@router.api_route("", methods=["GET", "PUT", "DELETE"])
async def unsupported_operation(current_user: dict = Depends(verify_user)):
    raise UploadError("operation not supported on /imageUpload", status_code=403)
