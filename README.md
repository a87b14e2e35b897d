# corecontracts

Data contracts shared by edge device services: device readings, value
descriptors, device profile building blocks, transmission records, state
values and operating-state update requests. Each model encodes to compact
JSON in a fixed field order and drops empty fields where the wire format
expects that. Models with rules of their own validate their contents and
raise `ContractInvalidError` when a rule is broken.

The package has no runtime dependencies.

## Installation

```
pip install corecontracts
```

For running the test suite:

```
pip install "corecontracts[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `corecontracts.contract` | `ContractInvalidError`, the `Validator` base class, `validate_fields`, `marshal` |
| `corecontracts.timestamps` | `Timestamps` with `compare_to` |
| `corecontracts.enums` | `OperatingState`, `NotificationsSeverity`, `NotificationsStatus`, `TransmissionStatus`; `parse_operating_state`, `validate_operating_state`, `get_operating_state`, `parse_notifications_severity`, `is_notifications_severity`, `parse_notifications_status`, `is_notifications_status`, `parse_transmission_status`, `is_transmission_status` |
| `corecontracts.units` | `Units` |
| `corecontracts.propertyvalue` | `PropertyValue`, the `BASE64_ENCODING` and `E_NOTATION` float encodings |
| `corecontracts.profileproperty` | `ProfileProperty` |
| `corecontracts.resourceoperation` | `ResourceOperation` |
| `corecontracts.profileresource` | `ProfileResource` |
| `corecontracts.response` | `Response` with `equals` |
| `corecontracts.put` | `Put` with `all_associated_value_descriptors` |
| `corecontracts.transmissionrecord` | `TransmissionRecord` |
| `corecontracts.operation` | `Operation` |
| `corecontracts.reading` | `Reading` |
| `corecontracts.valuedescriptor` | `ValueDescriptor` |
| `corecontracts.operatingupdate` | `OperatingStateUpdateRequest` |

Every model offers `to_dict()` for the encoded mapping and `to_json()` for
the compact text; `str()` of a model gives the same text as `to_json()`
(except `OperatingStateUpdateRequest`, which only has `to_json()`).
`Operation`, `Reading`, `ValueDescriptor` and `OperatingStateUpdateRequest`
can also be decoded with the `from_json()` class method.

`contract.marshal` produces compact JSON with `<`, `>`, `&`, U+2028 and
U+2029 escaped as `\uXXXX`, encodes objects through their `to_dict()`
method and byte strings as base64 text.

## Usage

Encoding a reading; fields that are empty or zero are left out of the JSON,
and binary data is written as base64:

```python
from corecontracts.reading import Reading

reading = Reading(name="Temperature", value="45", device="example-sensor")
print(reading.to_json())
# {"device":"example-sensor","name":"Temperature","value":"45"}
```

Decoding validates the result and raises `ContractInvalidError` when the
contract is broken:

```python
from corecontracts.contract import ContractInvalidError
from corecontracts.reading import Reading

try:
    Reading.from_json('{"device": "example-sensor", "value": "0"}')
except ContractInvalidError as exc:
    print(exc)  # name for reading's value descriptor not specified
```

A value descriptor needs a name, and its `formatting`, if set, must contain
a printf-style format specifier:

```python
from corecontracts.valuedescriptor import ValueDescriptor

ValueDescriptor(name="Temperature", formatting="%d").validate()  # True
ValueDescriptor(name="Temperature", formatting="wut?").validate()  # raises ContractInvalidError
```

State values:

```python
from corecontracts.enums import get_operating_state, is_transmission_status

print(get_operating_state("enabled"))  # ENABLED (lookup ignores case)
print(is_transmission_status("SENT"))  # True
```

`parse_operating_state` upper-cases the decoded string; the notification and
transmission parsers accept only the exact upper-case names and raise
`ValueError` otherwise.

Update requests check the state they carry:

```python
from corecontracts.operatingupdate import OperatingStateUpdateRequest

request = OperatingStateUpdateRequest.from_json('{"operatingState": "disabled"}')
print(request.to_json())  # {"operatingState":"DISABLED"}
```

A transmission record always writes its three fields, with an empty response
as `null`:

```python
from corecontracts.enums import TransmissionStatus
from corecontracts.transmissionrecord import TransmissionRecord

print(TransmissionRecord(status=TransmissionStatus.SENT, sent=123).to_json())
# {"status":"SENT","response":null,"sent":123}
```

## What this package does not do

It holds data models only. It has no command-line tool, no service or HTTP
client that sends or receives these models, and no storage for them. It
covers only the models listed above; there are no device, device profile,
device service, addressable, notification, channel, subscription,
transmission, registration, provision-watcher or admin-state models here.