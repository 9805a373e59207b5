"""
Maps a container's entrypoint and command.
"""
from typing import List, Optional
from ..MODELS.inspected_container import InspectedContainer


def map_entrypoint(container: InspectedContainer) -> Optional[List[str]]:
    """
    Returns the entrypoint unchanged. An empty list stays an empty list
    (the image entrypoint was cleared); None means the engine reported no
    entrypoint at all.
    """
    if container.entrypoint is None:
        return None
    return list(container.entrypoint)


def map_command(container: InspectedContainer) -> Optional[List[str]]:
    """
    Returns the command, or None when it is empty so that the service does
    not get an explicit empty command.
    """
    if not container.cmd:
        return None
    return list(container.cmd)
