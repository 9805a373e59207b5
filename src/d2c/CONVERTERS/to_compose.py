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
Converters for rendering a generated project as a Compose document.
"""
import json
from typing import Any, Dict
import yaml
from ..MODELS.project_spec import ProjectSpec
from ..MODELS.service_spec import ServiceSpec, ServicePort, MountSpec
from ..UTILS.logger import get_logger

logger = get_logger(__name__)

FORMATS = ("yaml", "json")


class ComposeConverter:
    """
    Renders a ProjectSpec in Compose's long syntax.
    """

    def __init__(self, project: ProjectSpec, fmt: str = "yaml"):
        """
        Initializes the converter.

        :param project: The project to render.
        :param fmt: Either "yaml" or "json".
        """
        if fmt not in FORMATS:
            raise ValueError(f"unsupported format: {fmt}")
        self.project = project
        self.fmt = fmt

    def to_dict(self) -> Dict[str, Any]:
        """
        Builds the document as plain data.

        :return: The Compose document.
        """
        document: Dict[str, Any] = {}
        if self.project.name:
            document['name'] = self.project.name
        document['services'] = {
            name: self._service_to_dict(svc) for name, svc in self.project.services.items()
        }
        return document

    def convert(self) -> str:
        """
        Serializes the project.

        If the document as a whole cannot be serialized, the failure is
        logged and services are rendered one by one; services that still
        fail are left out.

        :return: The serialized document, possibly partial.
        """
        document = self.to_dict()
        try:
            return self._dump(document)
        except (yaml.YAMLError, TypeError, ValueError) as e:
            logger.error("unable to serialize project: %s", e)

        partial: Dict[str, Any] = {k: v for k, v in document.items() if k != 'services'}
        partial['services'] = {}
        for name, service in document['services'].items():
            try:
                self._dump({name: service})
            except (yaml.YAMLError, TypeError, ValueError) as e:
                logger.error("leaving out service %s: %s", name, e)
                continue
            partial['services'][name] = service

        try:
            return self._dump(partial)
        except (yaml.YAMLError, TypeError, ValueError) as e:
            logger.error("unable to serialize partial project: %s", e)
            return ""

    def _dump(self, document: Dict[str, Any]) -> str:
        if self.fmt == "json":
            return json.dumps(document, indent=2) + "\n"
        return yaml.safe_dump(document, sort_keys=False, default_flow_style=False)

    def _service_to_dict(self, svc: ServiceSpec) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if svc.image:
            data['image'] = svc.image
        # An empty entrypoint is meaningful: it clears the image's entrypoint
        if svc.entrypoint is not None:
            data['entrypoint'] = list(svc.entrypoint)
        if svc.command is not None:
            data['command'] = list(svc.command)
        if svc.environment:
            data['environment'] = dict(svc.environment)
        if svc.expose:
            data['expose'] = list(svc.expose)
        if svc.ports:
            data['ports'] = [self._port_to_dict(p) for p in svc.ports]
        if svc.volumes:
            data['volumes'] = [self._volume_to_dict(v) for v in svc.volumes]
        return data

    @staticmethod
    def _port_to_dict(port: ServicePort) -> Dict[str, Any]:
        data: Dict[str, Any] = {'target': port.target}
        if port.published:
            data['published'] = port.published
        if port.host_ip:
            data['host_ip'] = port.host_ip
        data['protocol'] = port.protocol
        return data

    @staticmethod
    def _volume_to_dict(mount: MountSpec) -> Dict[str, Any]:
        data: Dict[str, Any] = {'type': mount.type}
        if mount.source:
            data['source'] = mount.source
        if mount.target:
            data['target'] = mount.target
        if mount.read_only:
            data['read_only'] = True
        if mount.consistency:
            data['consistency'] = mount.consistency

        if mount.bind is not None:
            bind: Dict[str, Any] = {}
            if mount.bind.propagation:
                bind['propagation'] = mount.bind.propagation
            if mount.bind.create_host_path:
                bind['create_host_path'] = True
            data['bind'] = bind
        if mount.volume is not None:
            volume: Dict[str, Any] = {}
            if mount.volume.nocopy:
                volume['nocopy'] = True
            if mount.volume.subpath:
                volume['subpath'] = mount.volume.subpath
            data['volume'] = volume
        if mount.tmpfs is not None:
            tmpfs: Dict[str, Any] = {}
            if mount.tmpfs.size:
                tmpfs['size'] = mount.tmpfs.size
            if mount.tmpfs.mode:
                tmpfs['mode'] = mount.tmpfs.mode
            data['tmpfs'] = tmpfs
        return data
