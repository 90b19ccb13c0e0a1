import json

from nacoskit import vo
from nacoskit.model import Instance
from nacoskit.params import transform_object_to_param


def test_register_instance_params_omit_empty_optionals():
    p = vo.RegisterInstanceParam(
        ip="10.0.0.1", port=8848, weight=10, enable=True, healthy=True, service_name="svc"
    )
    params = transform_object_to_param(p)
    assert set(params) == {
        "ip",
        "port",
        "weight",
        "enabled",
        "healthy",
        "ephemeral",
        "serviceName",
    }
    assert params["ip"] == "10.0.0.1"
    assert params["port"] == str(8848)
    assert params["weight"] == "10"
    assert params["enabled"] == "true"


def test_register_instance_metadata_is_json():
    p = vo.RegisterInstanceParam(service_name="svc", metadata={"b": "2", "a": "1"})
    params = transform_object_to_param(p)
    assert params["metadata"] == '{"a":"1","b":"2"}'
    assert json.loads(params["metadata"]) == p.metadata


def test_update_matches_register_params():
    fields = dict(
        ip="10.0.0.1",
        port=80,
        weight=1.5,
        enable=True,
        healthy=False,
        cluster_name="c",
        service_name="svc",
        group_name="g",
        ephemeral=True,
    )
    assert transform_object_to_param(
        vo.UpdateInstanceParam(**fields)
    ) == transform_object_to_param(vo.RegisterInstanceParam(**fields))


def test_batch_register_instances_are_not_params():
    p = vo.BatchRegisterInstanceParam(
        service_name="svc",
        group_name="g",
        instances=[vo.RegisterInstanceParam(ip="10.0.0.1")],
    )
    assert transform_object_to_param(p) == {"serviceName": "svc", "groupName": "g"}
    assert p.instances[0].ip == "10.0.0.1"


def test_deregister_params_use_cluster_name():
    p = vo.DeregisterInstanceParam(ip="10.0.0.1", port=80, cluster="c", service_name="svc")
    params = transform_object_to_param(p)
    assert params["cluster"] == "c"
    assert "clusterName" not in params


def test_get_service_joins_clusters():
    p = vo.GetServiceParam(clusters=["c1", "c2"], service_name="svc")
    assert transform_object_to_param(p) == {"clusters": "c1,c2", "serviceName": "svc"}


def test_get_all_service_info_pages():
    p = vo.GetAllServiceInfoParam(name_space="ns", page_no=1, page_size=10)
    assert transform_object_to_param(p) == {
        "nameSpace": "ns",
        "pageNo": str(1),
        "pageSize": str(10),
    }


def test_subscribe_callback_not_a_param_and_callable():
    received = []
    p = vo.SubscribeParam(
        service_name="svc",
        subscribe_callback=lambda services, err: received.append((services, err)),
    )
    assert transform_object_to_param(p) == {"serviceName": "svc"}
    hosts = [Instance(ip="10.0.0.1")]
    p.subscribe_callback(hosts, None)
    assert received == [(hosts, None)]


def test_config_param_listener_not_a_param():
    calls = []
    p = vo.ConfigParam(
        data_id="d",
        group="g",
        content="hello",
        on_change=lambda ns, group, data_id, data: calls.append(data),
    )
    assert transform_object_to_param(p) == {"dataId": "d", "group": "g", "content": "hello"}
    p.on_change("ns", "g", "d", "new")
    assert calls == ["new"]


def test_search_config_param_names():
    p = vo.SearchConfigParam(search="blur", data_id="d", app_name="app", page_no=2, page_size=5)
    params = transform_object_to_param(p)
    assert params["search"] == "blur"
    assert params["appName"] == "app"
    assert params["pageNo"] == str(2)
    assert params["pageSize"] == str(5)


def test_select_params():
    healthy = vo.SelectInstancesParam(service_name="svc", healthy_only=True)
    assert transform_object_to_param(healthy)["healthyOnly"] == "true"
    one = vo.SelectOneHealthInstanceParam(clusters=["c"], service_name="svc", group_name="g")
    every = vo.SelectAllInstancesParam(clusters=["c"], service_name="svc", group_name="g")
    assert transform_object_to_param(one) == transform_object_to_param(every)
    assert transform_object_to_param(one)["clusters"] == "c"