"""
Shared fixtures: raw inspect documents and an in-memory engine.
"""
import pytest
import docker
from d2c.MODELS.inspected_container import InspectedContainer


def _record(name="", image="nginx:latest", env=None, entrypoint=None, cmd=None,
            port_bindings=None, exposed=None, binds=None, mounts=None):
    return {
        "Id": "0123456789ab",
        "Name": name,
        "Config": {
            "Image": image,
            "Env": env,
            "Entrypoint": entrypoint,
            "Cmd": cmd,
            "ExposedPorts": {port: {} for port in exposed or []},
        },
        "HostConfig": {
            "PortBindings": port_bindings or {},
            "Binds": binds,
            "Mounts": mounts,
        },
    }


class FakeInspector:
    """Serves inspect documents from a dict, like a tiny engine."""

    def __init__(self, records):
        self.records = records
        self.calls = []
        self.closed = False

    def inspect(self, identifier):
        self.calls.append(identifier)
        if identifier not in self.records:
            raise docker.errors.NotFound(f"No such container: {identifier}")
        return InspectedContainer.from_inspect(self.records[identifier])

    def close(self):
        self.closed = True


@pytest.fixture
def make_record():
    return _record


@pytest.fixture
def make_container():
    def factory(**kwargs):
        return InspectedContainer.from_inspect(_record(**kwargs))
    return factory


@pytest.fixture
def fake_inspector():
    return FakeInspector
