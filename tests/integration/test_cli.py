import json
from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner

from oneview_cli import __main__ as cli
from oneview_client import OVClient

runner = CliRunner()


@pytest.fixture
def cli_env(monkeypatch, appliance):
    monkeypatch.setenv("ONEVIEW_OV_USER", "admin")
    monkeypatch.setenv("ONEVIEW_OV_PASSWORD", "secret")
    monkeypatch.setenv("ONEVIEW_OV_ENDPOINT", "https://oneview.test")
    monkeypatch.setenv("ONEVIEW_APIVERSION", "800")
    monkeypatch.setenv("ONEVIEW_TASK_POLL_INTERVAL", "0")
    monkeypatch.setattr(cli, "OVClient", lambda settings: OVClient(settings, transport=httpx.MockTransport(appliance.handle)))
    return appliance


def test_scopes_listing(cli_env):
    for name in ("b-scope", "a-scope"):
        cli_env.add("/rest/scopes", name=name)
    r = runner.invoke(cli.app, ["scopes"])
    assert r.exit_code == 0, r.output
    assert r.output.splitlines() == ["a-scope", "b-scope"]


def test_scope_create_rename_delete(cli_env):
    r = runner.invoke(cli.app, ["scope-create", "new-scope", "--description", "from cli", "--resource", "/rest/ethernet-networks/e1"])
    assert r.exit_code == 0, r.output
    stored = cli_env.find("/rest/scopes", "new-scope")
    assert stored["addedResourceUris"] == ["/rest/ethernet-networks/e1"]

    r = runner.invoke(cli.app, ["scope-rename", "new-scope", "update-scope"])
    assert r.exit_code == 0, r.output
    assert cli_env.find("/rest/scopes", "update-scope") is not None

    r = runner.invoke(cli.app, ["scope-delete", "update-scope"])
    assert r.exit_code == 0, r.output
    assert not cli_env.resources["/rest/scopes"]


def test_scope_show_missing(cli_env):
    r = runner.invoke(cli.app, ["scope-show", "ghost"])
    assert r.exit_code == 1
    assert "not found" in r.output


def test_fc_network_create(cli_env):
    r = runner.invoke(cli.app, ["fc-network-create", "fc1", "--link-stability-time", "20"])
    assert r.exit_code == 0, r.output
    stored = cli_env.find("/rest/fc-networks", "fc1")
    assert stored["linkStabilityTime"] == 20
    assert stored["fabricType"] == "FabricAttach"


def test_ssh_access_set(cli_env):
    r = runner.invoke(cli.app, ["ssh-access-set", "--deny"])
    assert r.exit_code == 0, r.output
    assert cli_env.ssh_access["allowSshAccess"] is False

    r = runner.invoke(cli.app, ["ssh-access"])
    assert json.loads(r.output)["allowSshAccess"] is False


def test_failed_task_exits_nonzero(cli_env):
    cli_env.task_script = ["Error"]
    cli_env.task_errors = [{"message": "duplicate name"}]
    r = runner.invoke(cli.app, ["scope-create", "dup"])
    assert r.exit_code == 1
    assert "duplicate name" in r.output


def test_config_file_option(cli_env, tmp_path: Path, monkeypatch):
    monkeypatch.delenv("ONEVIEW_OV_ENDPOINT")
    cfg = tmp_path / "oneview_config.json"
    cfg.write_text(json.dumps({"UserName": "admin", "Password": "secret", "Endpoint": "https://oneview.test", "ApiVersion": 800}))
    r = runner.invoke(cli.app, ["--config", str(cfg), "fc-networks"])
    assert r.exit_code == 0, r.output


def test_profile_delete(cli_env):
    hw = cli_env.add("/rest/server-hardware", name="bay1", powerState="On")
    cli_env.add("/rest/server-profiles", name="web01", serverHardwareUri=hw["uri"])
    r = runner.invoke(cli.app, ["profile-delete", "web01"])
    assert r.exit_code == 0, r.output
    assert cli_env.find("/rest/server-profiles", "web01") is None
    assert hw["powerState"] == "Off"


def test_malformed_environment_exits_cleanly(cli_env, monkeypatch):
    monkeypatch.setenv("ONEVIEW_TASK_TIMEOUT", "abc")
    r = runner.invoke(cli.app, ["scopes"])
    assert r.exit_code == 1
    assert "Error:" in r.output
    assert "ONEVIEW" in r.output
