"""Multipart image upload endpoints."""

from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods, require_POST

from docledger.core.exceptions import ValidationError
from docledger.core.responses import success_response

from . import storage


def _image_to_dict(image) -> dict:
    return {
        "filename": image.filename,
        "originalName": image.original_name,
        "url": image.url,
        "size": image.size,
        "mimetype": image.content_type,
    }


@csrf_exempt
@require_POST
def upload_image(request):
    upload = request.FILES.get("image")
    if upload is None:
        raise ValidationError("Please choose an image file")
    image = storage.save_image(upload)
    return success_response(_image_to_dict(image), "Image uploaded", status=201)


@csrf_exempt
@require_POST
def upload_images(request):
    uploads = request.FILES.getlist("images")
    if not uploads:
        raise ValidationError("Please choose at least one image file")
    images = storage.save_images(uploads)
    return success_response([_image_to_dict(i) for i in images], "Images uploaded", status=201)


@csrf_exempt
@require_http_methods(["DELETE"])
def delete_image(request, filename: str):
    storage.delete_image(filename)
    return success_response(None, "Image deleted")
