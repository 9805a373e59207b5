"""
Derives service names from container names.
"""
from typing import Optional

NAME_SEPARATOR = "/"


def synthetic_name(index: int) -> str:
    return f"service-{index}"


def map_name(raw_name: Optional[str], index: int) -> str:
    """
    Strips the single leading separator the engine puts in front of
    container names. Containers without a usable name are named after
    their position in the batch.

    :param raw_name: The name as reported by the engine, e.g. ``/web``.
    :param index: Zero-based position of the container in the batch.
    :return: The service name.
    """
    name = raw_name or ""
    if name.startswith(NAME_SEPARATOR):
        name = name[1:]
    if not name:
        return synthetic_name(index)
    return name
