"""
Dog CEO API endpoints.

One coroutine per endpoint. Each call opens its own client, performs a
single GET and closes the client again, so calls share no state and may
run concurrently.
"""

from typing import Any, List

import httpx
from pydantic import TypeAdapter, ValidationError

from dogceo.config import get_settings
from dogceo.exceptions import DogAPIException
from dogceo.models import ApiEnvelope, BreedsMap
from dogceo.transport import build_async_client
from dogceo.utils.logging import get_logger

logger = get_logger(__name__)

NO_SUB_BREEDS_MESSAGE = "the breed does not have sub-breeds"

_URL = TypeAdapter(str)
_STRINGS = TypeAdapter(List[str])
_BREEDS = TypeAdapter(BreedsMap)


def _describe(error: Exception) -> str:
    """Human-readable text for a wrapped exception."""
    return str(error) or type(error).__name__


async def _get(path: str, adapter: TypeAdapter) -> Any:
    """
    GET ``path`` relative to the base URL and unwrap the envelope.

    Args:
        path: Endpoint path, without a leading slash
        adapter: Validator for the expected ``message`` payload

    Returns:
        The validated ``message`` payload

    Raises:
        DogAPIException: On transport, parse, status or payload failure
    """
    settings = get_settings()
    url = f"{settings.base_url}{path}"
    logger.debug(f"GET {url}")

    # Error envelopes arrive with 4xx codes, so the HTTP status is not checked
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        envelope = ApiEnvelope.model_validate(response.json())
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
        logger.warning(f"Dog API request to {url} failed: {_describe(e)}")
        raise DogAPIException(_describe(e)) from e

    if not envelope.is_success:
        message = envelope.message
        if not isinstance(message, str):
            message = str(message)
        logger.warning(f"Dog API returned status '{envelope.status}' for {url}: {message}")
        raise DogAPIException(message)

    try:
        return adapter.validate_python(envelope.message)
    except ValidationError as e:
        logger.warning(f"Unexpected payload from {url}: {e}")
        raise DogAPIException(_describe(e)) from e


async def random_image() -> str:
    """
    Single random image from all dogs collection.

    Returns:
        Image URL
    """
    return await _get("breeds/image/random", _URL)


async def multiple_random_images(images_number: int) -> List[str]:
    """
    Multiple random images from all dogs collection.

    The service returns at most 50 images whatever ``images_number`` is.

    Args:
        images_number: Number of images to request

    Returns:
        List of image URLs
    """
    return await _get(f"breeds/image/random/{images_number}", _STRINGS)


async def random_image_by_breed(breed: str) -> str:
    """
    Random image from a breed collection.

    Args:
        breed: Breed name, e.g. "hound"

    Returns:
        Image URL
    """
    return await _get(f"breed/{breed.strip()}/images/random", _URL)


async def multiple_random_images_by_breed(breed: str, images_number: int) -> List[str]:
    """
    Multiple random images from a breed collection.

    Args:
        breed: Breed name, e.g. "hound"
        images_number: Number of images to request

    Returns:
        List of image URLs
    """
    return await _get(f"breed/{breed.strip()}/images/random/{images_number}", _STRINGS)


async def images_by_breed(breed: str) -> List[str]:
    """
    All images from a breed collection.

    Args:
        breed: Breed name, e.g. "hound"

    Returns:
        List of image URLs
    """
    return await _get(f"breed/{breed.strip()}/images", _STRINGS)


async def random_image_by_sub_breed(breed: str, sub_breed: str) -> str:
    """
    Single random image from a sub-breed collection.

    Args:
        breed: Breed name, e.g. "hound"
        sub_breed: Sub-breed name, e.g. "afghan"

    Returns:
        Image URL
    """
    return await _get(f"breed/{breed.strip()}/{sub_breed.strip()}/images/random", _URL)


async def multiple_random_images_by_sub_breed(
    breed: str, sub_breed: str, images_number: int
) -> List[str]:
    """
    Multiple random images from a sub-breed collection.

    Args:
        breed: Breed name, e.g. "hound"
        sub_breed: Sub-breed name, e.g. "afghan"
        images_number: Number of images to request

    Returns:
        List of image URLs
    """
    return await _get(
        f"breed/{breed.strip()}/{sub_breed.strip()}/images/random/{images_number}",
        _STRINGS,
    )


async def images_by_sub_breed(breed: str, sub_breed: str) -> List[str]:
    """
    All images from a sub-breed collection.

    Args:
        breed: Breed name, e.g. "hound"
        sub_breed: Sub-breed name, e.g. "afghan"

    Returns:
        List of image URLs
    """
    return await _get(f"breed/{breed.strip()}/{sub_breed.strip()}/images", _STRINGS)


async def breeds_list() -> BreedsMap:
    """
    List all breeds.

    Returns:
        Mapping of breed name to its sub-breed names (empty list if none)
    """
    return await _get("breeds/list/all", _BREEDS)


async def sub_breeds_list(breed: str) -> List[str]:
    """
    List the sub-breeds of a breed.

    Args:
        breed: Breed name, e.g. "hound"

    Returns:
        Sub-breed names, in the order the service lists them

    Raises:
        DogAPIException: Also when the breed has no sub-breeds
    """
    sub_breeds = await _get(f"breed/{breed.strip()}/list", _STRINGS)
    if not sub_breeds:
        logger.debug(f"Breed '{breed.strip()}' has no sub-breeds")
        raise DogAPIException(NO_SUB_BREEDS_MESSAGE)
    return sub_breeds
