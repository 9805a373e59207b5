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
Drives generation of a Compose project from a list of running containers.
"""
from typing import Callable, List, Optional
from ..BUILDERS.project_aggregator import ProjectAggregator
from ..BUILDERS.service_assembler import ServiceAssembler
from ..MODELS.project_spec import ProjectSpec
from ..UTILS.project_options import ProjectOptions
from ..UTILS.logger import get_logger
from ..errors import GenerationCancelled

logger = get_logger(__name__)


class ProjectGenerator:
    """
    Inspects containers one at a time, in the order given, and aggregates
    the resulting services into a project.
    """
    def __init__(self, inspector, options: Optional[ProjectOptions] = None):
        """
        Initializes the generator.

        :param inspector: Any object with an ``inspect(identifier)`` method
            returning an InspectedContainer, e.g. a DockerInspector.
        :param options: Project name and working directory overrides.
        """
        self.inspector = inspector
        self.options = options or ProjectOptions()
        self.assembler = ServiceAssembler()

    def generate(self, identifiers: List[str],
                 should_stop: Optional[Callable[[], bool]] = None) -> ProjectSpec:
        """
        Builds the project for the given containers.

        The first failing inspect call aborts the whole run and its error is
        raised unchanged; no partial project is returned.

        :param identifiers: Container IDs or names, at least one.
        :param should_stop: Polled before each inspect call; when it returns
            True the run is abandoned.
        :return: The aggregated project.
        :raises ValueError: If no identifiers are given.
        :raises GenerationCancelled: If should_stop asked to stop.
        """
        if not identifiers:
            raise ValueError("at least one container is required")

        aggregator = ProjectAggregator(
            name=self.options.resolve_name(),
            working_dir=self.options.resolve_working_dir(),
        )

        for index, identifier in enumerate(identifiers):
            if should_stop is not None and should_stop():
                raise GenerationCancelled(remaining=len(identifiers) - index)

            logger.debug("inspecting container %s", identifier)
            container = self.inspector.inspect(identifier)
            service = self.assembler.assemble(container, index)
            aggregator.add(service)

        return aggregator.build()
