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
Maps host port bindings and exposed ports to Compose ``ports`` and ``expose``.
"""
from typing import Dict, Iterable, List, Optional, Set, Tuple
from ..MODELS.inspected_container import PortBinding
from ..MODELS.service_spec import ServicePort

DEFAULT_PROTOCOL = "tcp"


def split_port(port_key: str) -> Tuple[str, str]:
    """
    Splits an engine port key such as ``80/tcp`` into port and protocol.

    :param port_key: The port key, with or without a protocol suffix.
    :return: A (port, protocol) tuple; the protocol defaults to tcp.
    """
    port, _, protocol = port_key.partition("/")
    return port, protocol or DEFAULT_PROTOCOL


def expose_token(port: str, protocol: str) -> str:
    if protocol == DEFAULT_PROTOCOL:
        return port
    return f"{port}/{protocol}"


def map_ports(port_bindings: Dict[str, Optional[List[PortBinding]]],
              exposed_ports: Iterable[str]) -> Tuple[List[ServicePort], List[str]]:
    """
    Classifies container ports as published or merely exposed.

    Every host binding of a bound port becomes its own published entry, so
    a port bound on both IPv4 and IPv6 yields two entries. A port that is
    published is never listed as exposed, even though the engine reports
    it in both places. Ports are compared by number only.

    :param port_bindings: Container port key to host bindings.
    :param exposed_ports: Port keys declared as exposed.
    :return: A (published ports, exposed tokens) tuple.
    """
    ports: List[ServicePort] = []
    published: Set[str] = set()

    for port_key, bindings in port_bindings.items():
        if not bindings:
            continue
        port, protocol = split_port(port_key)
        for binding in bindings:
            ports.append(ServicePort(
                target=int(port),
                published=binding.host_port,
                host_ip=binding.host_ip,
                protocol=protocol,
            ))
        published.add(port)

    expose: List[str] = []
    for port_key in exposed_ports:
        port, protocol = split_port(port_key)
        if port in published:
            continue
        expose.append(expose_token(port, protocol))

    return ports, expose
