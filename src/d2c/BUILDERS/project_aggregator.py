"""
Collects assembled services into a Compose project.
"""
from typing import Dict
from ..MODELS.project_spec import ProjectSpec
from ..MODELS.service_spec import ServiceSpec
from ..UTILS.logger import get_logger

logger = get_logger(__name__)


class ProjectAggregator:
    """
    Accumulates services keyed by name. Insertion order is kept so the
    generated document lists services in the order containers were given.
    """
    def __init__(self, name: str = "", working_dir: str = ""):
        """
        :param name: The project name.
        :param working_dir: The project working directory.
        """
        self.name = name
        self.working_dir = working_dir
        self.services: Dict[str, ServiceSpec] = {}

    def add(self, service: ServiceSpec) -> None:
        """
        Inserts a service. A service with the same name is replaced.
        """
        if service.name in self.services:
            logger.warning("service %s defined more than once, keeping the last definition", service.name)
        self.services[service.name] = service

    def build(self) -> ProjectSpec:
        return ProjectSpec(
            name=self.name,
            working_dir=self.working_dir,
            services=dict(self.services),
        )
