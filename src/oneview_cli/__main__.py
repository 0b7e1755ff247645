import json
from contextlib import contextmanager

import typer

from oneview_client import OVClient, OneViewError
from oneview_client.config import load_settings
from oneview_client.log import setup_logging
from oneview_client.models import ApplianceSshAccess, FCNetwork, ResourceScope, Scope

app = typer.Typer(add_completion=False, help="OneView CLI")

state: dict = {"config": None}


@contextmanager
def ov_client():
    """Client for one command; errors become exit code 1."""
    try:
        with OVClient(load_settings(state["config"])) as client:
            yield client
    except OneViewError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def echo_json(data) -> None:
    if hasattr(data, "to_wire"):
        data = data.to_wire()
    typer.echo(json.dumps(data, indent=2))


@app.callback()
def main(
    config: str = typer.Option("", "--config", "-c", help="oneview_config.json to read instead of the environment"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    state["config"] = config or None
    setup_logging(verbose)


@app.command()
def version():
    """Show the appliance API version"""
    with ov_client() as client:
        typer.echo(str(client.connection.get_api_version()))


# Scopes
@app.command()
def scopes(sort: str = "name:asc", filter: str = ""):
    """List scopes"""
    with ov_client() as client:
        for s in client.scopes.list(filter=filter, sort=sort).members:
            typer.echo(s.name)


@app.command()
def scope_show(name: str):
    with ov_client() as client:
        scope = client.scopes.get_by_name(name)
        if scope is None:
            typer.echo(f"Error: scope {name} not found", err=True)
            raise typer.Exit(code=1)
        echo_json(scope)


@app.command()
def scope_create(name: str, description: str = "", initial_scope: list[str] = typer.Option([], "--initial-scope"), resource: list[str] = typer.Option([], "--resource")):
    scope = Scope(
        name=name,
        description=description or None,
        initial_scope_uris=initial_scope or None,
        added_resource_uris=resource or None,
    )
    with ov_client() as client:
        client.scopes.create(scope).wait()
        typer.echo(f"Scope {name} created")


@app.command()
def scope_rename(name: str, new_name: str):
    with ov_client() as client:
        scope = client.scopes.get_by_name(name)
        if scope is None:
            typer.echo(f"Error: scope {name} not found", err=True)
            raise typer.Exit(code=1)
        scope.name = new_name
        client.scopes.update(scope).wait()
        typer.echo(f"Scope renamed to {new_name}")


@app.command()
def scope_delete(name: str):
    with ov_client() as client:
        client.scopes.delete(name).wait()
        typer.echo("Deleted")


@app.command()
def resource_scopes(resource_uri: str, set_scope: list[str] = typer.Option([], "--set", help="Replace the resource's scopes with these URIs")):
    """Show (or replace) the scopes assigned to a resource"""
    with ov_client() as client:
        if set_scope:
            client.scopes.update_for_resource(ResourceScope(resource_uri=resource_uri, scope_uris=set_scope)).wait()
        echo_json(client.scopes.get_for_resource(resource_uri))


# FC networks
@app.command()
def fc_networks(sort: str = "name:asc", filter: str = ""):
    with ov_client() as client:
        for n in client.fc_networks.list(filter=filter, sort=sort).members:
            typer.echo(n.name)


@app.command()
def fc_network_create(
    name: str,
    description: str = "",
    fabric_type: str = "FabricAttach",
    link_stability_time: int = 30,
    auto_login_redistribution: bool = False,
    initial_scope: list[str] = typer.Option([], "--initial-scope"),
):
    network = FCNetwork(
        name=name,
        description=description or None,
        fabric_type=fabric_type,
        link_stability_time=link_stability_time,
        auto_login_redistribution=auto_login_redistribution,
        initial_scope_uris=initial_scope or None,
    )
    with ov_client() as client:
        client.fc_networks.create(network).wait()
        typer.echo(f"FC network {name} created")


@app.command()
def fc_network_rename(name: str, new_name: str):
    with ov_client() as client:
        network = client.fc_networks.get_by_name(name)
        if network is None:
            typer.echo(f"Error: fc network {name} not found", err=True)
            raise typer.Exit(code=1)
        network.name = new_name
        client.fc_networks.update(network).wait()
        typer.echo(f"FC network renamed to {new_name}")


@app.command()
def fc_network_delete(name: str):
    with ov_client() as client:
        client.fc_networks.delete(name).wait()
        typer.echo("Deleted")


# Appliance
@app.command()
def ssh_access():
    with ov_client() as client:
        echo_json(client.appliance.get_ssh_access())


@app.command()
def ssh_access_set(allow: bool = typer.Option(..., "--allow/--deny")):
    with ov_client() as client:
        client.appliance.set_ssh_access(ApplianceSshAccess(allow_ssh_access=allow)).wait()
        typer.echo("Appliance SSH access set")


# Server profiles
@app.command()
def profiles(filter: str = "", sort: str = "name:asc"):
    with ov_client() as client:
        for p in client.server_profiles.get_profiles(filter=filter, sort=sort).members:
            typer.echo(f"{p.name}\t{p.status or ''}\t{p.server_hardware_uri or ''}")


@app.command()
def profile_from_template(name: str, template: str, hardware_uri: str):
    """Create a profile for a blade by cloning an existing profile"""
    with ov_client() as client:
        tmpl = client.server_profiles.get_by_name(template)
        if tmpl is None:
            typer.echo(f"Error: template profile {template} not found", err=True)
            raise typer.Exit(code=1)
        blade = client.server_hardware.get_by_uri(hardware_uri)
        client.server_profiles.create_from_template(name, tmpl, blade)
        typer.echo(f"Profile {name} created")


@app.command()
def profile_delete(name: str):
    with ov_client() as client:
        client.server_profiles.delete_profile(name)
        typer.echo("Deleted")


# Tasks
@app.command()
def task_watch(task_uri: str):
    with ov_client() as client:
        task = client.tasks.get(task_uri)
        typer.echo(json.dumps({"state": task.state, "percent": task.percent_complete}))
        task.wait()
        typer.echo(json.dumps({"state": task.state, "percent": task.percent_complete}))


if __name__ == "__main__":
    app()
