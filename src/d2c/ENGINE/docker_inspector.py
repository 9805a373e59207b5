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
Access to the Docker engine's inspect API.
"""
from typing import Optional

import docker

from ..MODELS.inspected_container import InspectedContainer


class DockerInspector:
    """
    Fetches inspect records from a Docker engine.

    Engine errors such as ``docker.errors.NotFound`` are not caught here;
    callers decide what a failed lookup means for their run.
    """

    def __init__(self, client: Optional[docker.DockerClient] = None):
        """
        Initialize the inspector.

        Args:
            client: A Docker client. Defaults to one configured from the
                environment (DOCKER_HOST, DOCKER_TLS_VERIFY, ...).
        """
        self.client = client or docker.from_env()

    def inspect(self, identifier: str) -> InspectedContainer:
        """
        Inspect a container.

        Args:
            identifier: Container ID or name.

        Returns:
            The container's runtime snapshot.
        """
        # The low-level API returns the document as the engine sent it, so
        # a null entrypoint is still distinguishable from an empty one.
        data = self.client.api.inspect_container(identifier)
        return InspectedContainer.from_inspect(data)

    def close(self) -> None:
        self.client.close()
