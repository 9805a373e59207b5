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
Assembles a service definition from an inspected container.
"""
from ..MODELS.inspected_container import InspectedContainer
from ..MODELS.service_spec import ServiceSpec
from ..MAPPERS.name_mapper import map_name
from ..MAPPERS.port_mapper import map_ports
from ..MAPPERS.env_mapper import map_environment
from ..MAPPERS.command_mapper import map_entrypoint, map_command
from ..MAPPERS.mount_mapper import map_mounts
from ..MAPPERS.image_mapper import map_image


class ServiceAssembler:
    """
    Runs every field mapper over one container and combines the results.
    """

    def assemble(self, container: InspectedContainer, index: int) -> ServiceSpec:
        """
        Builds the service for a container.

        :param container: The inspected container.
        :param index: Position of the container in the batch, used to name
            containers the engine reports without a name.
        :return: The assembled ServiceSpec.
        """
        ports, expose = map_ports(container.port_bindings, container.exposed_ports)

        service = ServiceSpec(
            name=map_name(container.name, index),
            image=map_image(container),
            entrypoint=map_entrypoint(container),
            environment=map_environment(container.env),
            expose=expose,
            ports=ports,
            volumes=map_mounts(container.binds, container.mounts),
        )

        command = map_command(container)
        if command:
            service.command = command

        return service
