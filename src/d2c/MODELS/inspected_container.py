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
Models for the runtime snapshot of a container, as returned by the
engine's inspect endpoint.
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict


class PortBinding(BaseModel):
    """
    A single host address a container port is published on.
    """
    host_ip: str = ""
    host_port: str = ""


class BindOptions(BaseModel):
    propagation: str = ""
    create_mountpoint: bool = False


class VolumeOptions(BaseModel):
    no_copy: bool = False
    subpath: str = ""


class TmpfsOptions(BaseModel):
    size_bytes: int = 0
    mode: int = 0


class MountRecord(BaseModel):
    """
    Engine-native mount descriptor from ``HostConfig.Mounts``.
    """
    type: str = ""
    source: str = ""
    target: str = ""
    read_only: bool = False
    consistency: str = ""
    bind_options: Optional[BindOptions] = None
    volume_options: Optional[VolumeOptions] = None
    tmpfs_options: Optional[TmpfsOptions] = None

    @classmethod
    def from_inspect(cls, data: Dict[str, Any]) -> "MountRecord":
        """
        Builds a mount record from its inspect JSON form.

        :param data: One entry of ``HostConfig.Mounts``.
        :return: A MountRecord instance.
        """
        bind = data.get("BindOptions")
        volume = data.get("VolumeOptions")
        tmpfs = data.get("TmpfsOptions")
        return cls(
            type=data.get("Type") or "",
            source=data.get("Source") or "",
            target=data.get("Target") or "",
            read_only=bool(data.get("ReadOnly")),
            consistency=data.get("Consistency") or "",
            bind_options=BindOptions(
                propagation=bind.get("Propagation") or "",
                create_mountpoint=bool(bind.get("CreateMountpoint")),
            ) if bind is not None else None,
            volume_options=VolumeOptions(
                no_copy=bool(volume.get("NoCopy")),
                subpath=volume.get("Subpath") or "",
            ) if volume is not None else None,
            tmpfs_options=TmpfsOptions(
                size_bytes=tmpfs.get("SizeBytes") or 0,
                mode=tmpfs.get("Mode") or 0,
            ) if tmpfs is not None else None,
        )


class InspectedContainer(BaseModel):
    """
    The subset of a container's inspect record that is translated into a
    service definition. Instances are never modified once built.
    """
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    image: str = ""

    env: List[str] = []
    # None when the engine reports null, [] when it reports an empty list
    entrypoint: Optional[List[str]] = None
    cmd: Optional[List[str]] = None

    # "80/tcp" -> bindings; a None or empty list means the port is not bound
    port_bindings: Dict[str, Optional[List[PortBinding]]] = {}
    exposed_ports: List[str] = []

    binds: List[str] = []
    mounts: List[MountRecord] = []

    @classmethod
    def from_inspect(cls, data: Dict[str, Any]) -> "InspectedContainer":
        """
        Builds the model from the raw JSON document of ``docker inspect``.
        Sections missing from the document are treated as empty.

        :param data: The decoded inspect document.
        :return: An InspectedContainer instance.
        """
        config = data.get("Config") or {}
        host_config = data.get("HostConfig") or {}

        port_bindings = {}
        for port, bindings in (host_config.get("PortBindings") or {}).items():
            if bindings is None:
                port_bindings[port] = None
                continue
            port_bindings[port] = [
                PortBinding(host_ip=b.get("HostIp") or "", host_port=b.get("HostPort") or "")
                for b in bindings
            ]

        return cls(
            name=data.get("Name"),
            image=config.get("Image") or "",
            env=config.get("Env") or [],
            entrypoint=config.get("Entrypoint"),
            cmd=config.get("Cmd"),
            port_bindings=port_bindings,
            exposed_ports=list((config.get("ExposedPorts") or {}).keys()),
            binds=host_config.get("Binds") or [],
            mounts=[MountRecord.from_inspect(m) for m in host_config.get("Mounts") or []],
        )
