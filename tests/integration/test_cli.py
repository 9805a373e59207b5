import pytest
import yaml
import docker
from click.testing import CliRunner
from d2c.CLI import main as cli_main
from d2c.CLI.main import cli

@pytest.fixture
def engine(monkeypatch, make_record, fake_inspector):
    inspector = fake_inspector({
        "web": make_record(
            name="/web",
            exposed=["80/tcp"],
            port_bindings={"80/tcp": [{"HostIp": "0.0.0.0", "HostPort": "8080"}]},
        ),
        "worker": make_record(name="", image="alpine", cmd=["sh", "-c", "run"]),
    })
    monkeypatch.setattr(cli_main, "DockerInspector", lambda: inspector)
    return inspector

def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(cli, ['--help'])
    assert result.exit_code == 0
    assert 'Docker to Compose' in result.output

def test_cli_generate_requires_container():
    runner = CliRunner()
    result = runner.invoke(cli, ['generate'])
    assert result.exit_code != 0

def test_cli_generate(engine):
    runner = CliRunner()
    result = runner.invoke(cli, ['-p', 'demo', 'generate', 'web', 'worker'])
    assert result.exit_code == 0
    doc = yaml.safe_load(result.stdout)
    assert doc['name'] == 'demo'
    assert doc['services']['web']['ports'][0]['published'] == '8080'
    assert 'expose' not in doc['services']['web']
    assert 'command' not in doc['services']['web']
    assert doc['services']['service-1']['command'] == ['sh', '-c', 'run']
    assert engine.closed

def test_cli_project_name_from_env_file(engine, tmp_path, monkeypatch):
    monkeypatch.delenv('COMPOSE_PROJECT_NAME', raising=False)
    env_file = tmp_path / '.env'
    env_file.write_text('COMPOSE_PROJECT_NAME=fromfile\n')
    runner = CliRunner()
    result = runner.invoke(cli, ['--env-file', str(env_file), 'generate', 'web'])
    assert result.exit_code == 0
    assert yaml.safe_load(result.stdout)['name'] == 'fromfile'
    monkeypatch.delenv('COMPOSE_PROJECT_NAME', raising=False)

def test_cli_generate_missing_container(engine):
    runner = CliRunner()
    result = runner.invoke(cli, ['generate', 'web', 'nope'])
    assert result.exit_code == 1
    assert result.stdout == ''
    assert 'failed to inspect container' in result.stderr
    assert engine.closed

def test_cli_engine_unavailable(monkeypatch):
    def unavailable():
        raise docker.errors.DockerException("Error while fetching server API version")
    monkeypatch.setattr(cli_main, "DockerInspector", unavailable)
    runner = CliRunner()
    result = runner.invoke(cli, ['generate', 'web'])
    assert result.exit_code == 1
    assert 'unable to connect' in result.stderr
