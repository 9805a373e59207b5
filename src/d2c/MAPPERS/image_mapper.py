"""
Maps the image reference of a container.
"""
from ..MODELS.inspected_container import InspectedContainer


def map_image(container: InspectedContainer) -> str:
    """
    Returns the image reference the container was started with, as is.

    The reference is not resolved: if the image has been retagged or
    removed since the container started, it may no longer point at the
    image the container runs.
    """
    return container.image
