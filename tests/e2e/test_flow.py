from oneview_client.models import FCNetwork, ResourceScope, Scope


def test_scope_and_network_flow(client, appliance):
    """Same sequence the scopes example runs, against the fake appliance."""
    client.scopes.create(Scope(name="ScopeTest", description="Test from script")).wait()
    parent = client.scopes.get_by_name("ScopeTest")
    eth = appliance.add("/rest/ethernet-networks", name="Auto-ethernet_network")
    network = client.ethernet_networks.get_by_name("Auto-ethernet_network")

    client.scopes.create(
        Scope(name="new-scope", initial_scope_uris=[parent.uri], added_resource_uris=[network.uri])
    ).wait()
    created = client.scopes.get_by_name("new-scope")
    created.name = "update-scope"
    client.scopes.update(created).wait()

    names = [s.name for s in client.scopes.list(sort="name:desc").members]
    assert names == ["update-scope", "ScopeTest"]

    in_resource = client.scopes.get_for_resource(eth["uri"])
    in_resource.scope_uris = [created.uri]
    client.scopes.update_for_resource(in_resource).wait()
    assert client.scopes.get_for_resource(eth["uri"]) == ResourceScope(
        type="ScopedResource",
        uri=f"/rest/scopes/resources{eth['uri']}",
        resource_uri=eth["uri"],
        scope_uris=[created.uri],
    )

    client.scopes.delete("update-scope").wait()
    assert [s.name for s in client.scopes.list().members] == ["ScopeTest"]


def test_fc_network_flow(client, appliance):
    client.fc_networks.create(FCNetwork(name="TestFCNetwork", fabric_type="FabricAttach", link_stability_time=30)).wait()
    assert [n.name for n in client.fc_networks.list(sort="name:desc").members] == ["TestFCNetwork"]
    fc = client.fc_networks.get_by_name("TestFCNetwork")
    fc.name = "RenamedFCNetwork"
    client.fc_networks.update(fc).wait()
    client.fc_networks.delete("RenamedFCNetwork").wait()
    assert client.fc_networks.list().total == 0
    # every mutation went through a task
    assert len(appliance.tasks) == 3
