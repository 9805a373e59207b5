# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Maps legacy bind strings and structured mounts to Compose volume entries.
"""
from typing import Iterable, List, Optional
from ..MODELS.inspected_container import MountRecord
from ..MODELS.service_spec import MountSpec, MountType, MountBind, MountVolume, MountTmpfs
from ..UTILS.logger import get_logger

logger = get_logger(__name__)


def map_bind(bind: str) -> Optional[MountSpec]:
    """
    Parses a ``source:target[:mode]`` bind string.

    Binds are read-only unless the mode is exactly ``rw``; any other mode
    is ignored.

    :param bind: The bind string from ``HostConfig.Binds``.
    :return: A bind MountSpec, or None when the string has no target.
    """
    parts = bind.split(':')
    if len(parts) < 2:
        logger.warning("unable to process bind mount: %s", bind)
        return None

    mount = MountSpec(
        type=MountType.BIND.value,
        source=parts[0],
        target=parts[1],
        read_only=True,
    )
    if len(parts) == 3 and parts[2] == 'rw':
        mount.read_only = False
    return mount


def map_mount(record: MountRecord) -> MountSpec:
    """
    Copies a structured mount, including whichever option block the
    engine reported for it.

    :param record: One entry of ``HostConfig.Mounts``.
    :return: The equivalent MountSpec.
    """
    mount = MountSpec(
        type=record.type,
        source=record.source,
        target=record.target,
        read_only=record.read_only,
        consistency=record.consistency,
    )
    if record.bind_options is not None:
        mount.bind = MountBind(
            propagation=record.bind_options.propagation,
            create_host_path=record.bind_options.create_mountpoint,
        )
    if record.volume_options is not None:
        mount.volume = MountVolume(
            nocopy=record.volume_options.no_copy,
            subpath=record.volume_options.subpath,
        )
    if record.tmpfs_options is not None:
        mount.tmpfs = MountTmpfs(
            size=record.tmpfs_options.size_bytes,
            mode=record.tmpfs_options.mode,
        )
    return mount


def map_mounts(binds: Iterable[str], mounts: Iterable[MountRecord]) -> List[MountSpec]:
    """
    Maps all mounts of a container, legacy binds first. Malformed bind
    strings are skipped.

    :param binds: ``HostConfig.Binds`` entries.
    :param mounts: ``HostConfig.Mounts`` entries.
    :return: The service's volume list.
    """
    volumes = []
    for bind in binds:
        mount = map_bind(bind)
        if mount is not None:
            volumes.append(mount)

    for record in mounts:
        volumes.append(map_mount(record))

    return volumes
