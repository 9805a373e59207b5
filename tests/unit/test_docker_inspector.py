from unittest.mock import MagicMock
import docker
import pytest
from d2c.ENGINE.docker_inspector import DockerInspector

def test_inspect_uses_low_level_api(make_record):
    client = MagicMock()
    client.api.inspect_container.return_value = make_record(name="/web", entrypoint=[])
    container = DockerInspector(client).inspect("web")
    client.api.inspect_container.assert_called_once_with("web")
    assert container.name == "/web"
    assert container.entrypoint == []

def test_inspect_errors_propagate():
    client = MagicMock()
    client.api.inspect_container.side_effect = docker.errors.NotFound("No such container: nope")
    with pytest.raises(docker.errors.NotFound):
        DockerInspector(client).inspect("nope")

def test_close():
    client = MagicMock()
    DockerInspector(client).close()
    client.close.assert_called_once_with()
