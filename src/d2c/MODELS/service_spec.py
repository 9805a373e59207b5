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
Models for generated services, including published ports and mounts.
"""
from typing import List, Dict, Optional
from pydantic import BaseModel
from enum import Enum


class MountType(str, Enum):
    """
    Mount types known to Compose. Engines may report others; those are
    carried through as raw strings.
    """
    BIND = "bind"
    VOLUME = "volume"
    TMPFS = "tmpfs"
    NPIPE = "npipe"
    CLUSTER = "cluster"


class ServicePort(BaseModel):
    """
    A container port published on a host address.
    """
    target: int
    published: str = ""
    host_ip: str = ""
    protocol: str = "tcp"


class MountBind(BaseModel):
    propagation: str = ""
    create_host_path: bool = False


class MountVolume(BaseModel):
    nocopy: bool = False
    subpath: str = ""


class MountTmpfs(BaseModel):
    size: int = 0
    mode: int = 0


class MountSpec(BaseModel):
    """
    A volume entry of a service. ``type`` is one of MountType's values or
    whatever the engine reported for it.
    """
    type: str
    source: str = ""
    target: str = ""
    read_only: bool = False
    consistency: str = ""

    bind: Optional[MountBind] = None
    volume: Optional[MountVolume] = None
    tmpfs: Optional[MountTmpfs] = None


class ServiceSpec(BaseModel):
    """
    A single Compose service recovered from a running container.
    """
    name: str
    image: str = ""

    # Execution
    entrypoint: Optional[List[str]] = None
    command: Optional[List[str]] = None  # None when omitted

    # Environment; None values are keys without an assignment
    environment: Dict[str, Optional[str]] = {}

    # Networking
    expose: List[str] = []
    ports: List[ServicePort] = []

    # Storage
    volumes: List[MountSpec] = []
