# nacoskit

This package provides building blocks for service-registry and configuration
clients. It needs nothing outside the standard library.

## Modules

- `nacoskit.uuids` provides the mutable 16-byte `UUID` type.
  - It parses canonical, hash-like (32 hex digits), braced and URN text.
  - Text converts with `marshal_text`/`unmarshal_text`. Bytes convert with
    `marshal_binary`/`unmarshal_binary` and `bytes()`.
  - It reads and sets the version and variant bits with `version()`,
    `variant()`, `set_version()` and `set_variant()`.
  - `value()` returns the canonical string and `scan()` loads a value in the
    database style. `scan()` accepts 16 raw bytes, or text as `bytes` or `str`.
  - `NullUUID` is a nullable wrapper around `UUID`. Its `value()` returns `None`
    when it is not valid.
  - The module-level helpers are `equal`, `from_bytes`, `from_bytes_or_nil`,
    `from_string` and `from_string_or_nil`.
  - The enums are `Version`, `Variant` and `Domain`.
  - The constants are `NIL`, `NAMESPACE_DNS`, `NAMESPACE_URL`, `NAMESPACE_OID`
    and `NAMESPACE_X500`.
  - Bad input raises `ValueError`. `scan()` of an unsupported type raises
    `TypeError`.
- `nacoskit.uuid_gen` generates RFC 4122 UUIDs of versions 1 to 5.
  - `Generator(epoch_func, hw_addr_func, rand)` takes its clock, its
    hardware-address lookup and its random source as arguments. All three
    default to the system ones.
  - The module-level `new_v1` to `new_v5` share one default generator.
  - `default_hw_addr()` reads interface addresses from `/sys/class/net`. It
    raises `OSError` when it finds none, and the generator then uses a random
    multicast node address.
- `nacoskit.model` holds dataclasses for configuration and naming records.
  - The configuration records are `ConfigItem`, `ConfigPage`,
    `ConfigListenContext` and `ConfigContext`.
  - The naming records are `Instance`, `Service`, `ServiceDetail`,
    `ServiceInfo`, `ServiceSelector`, `Cluster`, `ClusterHealthChecker`,
    `BeatInfo`, `ExpressionSelector` and `ServiceList`. `State` is an enum.
  - Every model has `from_dict()` and `to_dict()`, which use the JSON field
    names (`serviceName`, `clusterName`, …).
  - `from_dict()` raises `ValueError` on data of the wrong shape.
- `nacoskit.vo` holds the request parameter dataclasses:
  - `ConfigParam` and `SearchConfigParam`
  - `RegisterInstanceParam`, `BatchRegisterInstanceParam`,
    `DeregisterInstanceParam` and `UpdateInstanceParam`
  - `GetServiceParam`, `GetAllServiceInfoParam` and `SubscribeParam`
  - `SelectAllInstancesParam`, `SelectInstancesParam` and
    `SelectOneHealthInstanceParam`
- `nacoskit.params` declares and flattens parameter fields.
  - `param(name, **kwargs)` declares a dataclass field that is sent under the
    request parameter `name`.
  - `transform_object_to_param(obj)` flattens such a dataclass into a
    `dict[str, str]`.
    - Numbers and booleans are always included.
    - Empty strings, `None` maps and empty string lists are left out.
    - Maps become compact JSON and string lists are joined with commas.
- `nacoskit.common` holds small helpers:
  - `current_millis`
  - `json_to_service`, which returns `None` on bad JSON
  - `to_json_string`, which returns `""` for data it cannot encode
  - `local_ip`, which returns a non-loopback IPv4 address or `""`
  - `get_duration_with_default`
  - `get_url_formed_map`, which gives a query string sorted by key
  - `get_status_code`, which returns `"NA"` when there is no response
  - `deep_copy_map`
- The three smallest modules:
  - `nacoskit.digest` has `md5(content)`, which returns the lower-case hex
    digest, or `""` for empty content.
  - `nacoskit.content` has `truncate_content(content)`. It keeps at most the
    first 100 UTF-8 bytes.
  - `nacoskit.semaphore` has `Semaphore(concurrency)`. Its methods are
    `acquire`, `try_acquire`, `release` and `available_permits`. It also works
    as a context manager.

## Examples

```python
from nacoskit.uuids import NAMESPACE_DNS, Version, from_string
from nacoskit.uuid_gen import new_v5
from nacoskit.digest import md5

u = new_v5(NAMESPACE_DNS, "www.example.com")
print(str(u))                      # 2ed6657d-e927-568b-95e1-2665a8aea6a2
print(u.version() == Version.V5)   # True
print(from_string("urn:uuid:" + str(u)) == u)  # True

print(md5("demo"))                 # fe01ce2a7fbac8fafaed7c982a04e229
```

Turn a request object into query parameters:

```python
from nacoskit.vo import RegisterInstanceParam
from nacoskit.params import transform_object_to_param

p = RegisterInstanceParam(ip="10.0.0.1", port=8848, weight=1.0,
                          enable=True, healthy=True, service_name="demo")
print(transform_object_to_param(p))
# {'ip': '10.0.0.1', 'port': '8848', 'weight': '1', 'enabled': 'true',
#  'healthy': 'true', 'serviceName': 'demo', 'ephemeral': 'false'}
```

## What it does not do

There is no client in this package. It does not connect to a registry or
configuration server. It does not send heartbeats, poll for configuration
changes or call the `on_change` and `subscribe_callback` functions that the
parameter objects can hold. It also has no command-line tool. It only supplies
the data types and helpers that such a client is built from.

## Running the tests

```
pip install -e ".[test]"
pytest
```