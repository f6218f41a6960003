"""
dogceo - async client for the Dog CEO image API (https://dog.ceo/dog-api/).

Every function wraps a single endpoint: it issues a GET, checks the
response envelope and returns the unwrapped ``message`` payload, raising
``DogAPIException`` on any failure.
"""

__version__ = "0.1.0"

from dogceo.api import (
    breeds_list,
    images_by_breed,
    images_by_sub_breed,
    multiple_random_images,
    multiple_random_images_by_breed,
    multiple_random_images_by_sub_breed,
    random_image,
    random_image_by_breed,
    random_image_by_sub_breed,
    sub_breeds_list,
)
from dogceo.config import Settings, get_settings
from dogceo.exceptions import DogAPIException
from dogceo.models import ApiEnvelope, BreedsMap

__all__ = [
    "ApiEnvelope",
    "BreedsMap",
    "DogAPIException",
    "Settings",
    "get_settings",
    "breeds_list",
    "images_by_breed",
    "images_by_sub_breed",
    "multiple_random_images",
    "multiple_random_images_by_breed",
    "multiple_random_images_by_sub_breed",
    "random_image",
    "random_image_by_breed",
    "random_image_by_sub_breed",
    "sub_breeds_list",
    "__version__",
]
