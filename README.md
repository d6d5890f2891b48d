# zbjobs

A small library for building "complete job" requests for a workflow engine
gateway. You choose the job, attach its result variables as a JSON object,
and send the request through a gateway object that you supply.

## Installation

```
pip install .
```

To run the test suite, install the test extra:

```
pip install ".[test]"
pytest
```

## Completing a job

`new_complete_job_command(gateway, should_retry)` in `zbjobs.complete_job`
returns a new `CompleteJobCommand`.

- `gateway` is any object with a `complete_job(request)` method. The method
  receives the command's `CompleteJobRequest`, which is a dataclass with the
  fields `job_key` (int, default `0`) and `variables` (str, default `""`).
  `send()` returns whatever this method returns. A `CompleteJobResponse`
  dataclass is provided for gateways that want a response type.
- `should_retry(error)` is called with any exception that `complete_job`
  raises. If it returns true, the request is sent again. If it returns false,
  the exception is raised out of `send()`.

The setter methods return the command itself, so calls can be chained:

```python
from zbjobs.complete_job import CompleteJobResponse, new_complete_job_command


class Gateway:
    def complete_job(self, request):
        print(request.job_key, request.variables)
        return CompleteJobResponse()


command = new_complete_job_command(Gateway(), lambda error: False)
response = command.job_key(123).variables_from_map({"foo": "bar"}).send()
# prints: 123 {"foo":"bar"}
```

The request being built is available as `command.request`.

## Setting variables

- `variables_from_string(text)`: stores `text` unchanged. The text must
  decode to a JSON object. Otherwise `InvalidVariablesError` is raised.
- `variables_from_stringer(obj)`: does the same with `str(obj)`.
- `variables_from_map(mapping)`: serialises a mapping. This is the same as
  `variables_from_object`.
- `variables_from_object(obj)`: serialises a mapping or a dataclass instance
  to compact JSON (no spaces, non-ASCII characters kept as they are). Nested
  dataclasses, mappings, lists and tuples are converted too. Dataclass fields
  declared with `omitempty()` are left out when their value is falsy.
- `variables_from_object_ignore_omitempty(obj)`: works like
  `variables_from_object`, but keeps every field.

If the value cannot be serialised, or if it does not serialise to a JSON
object, `InvalidVariablesError` is raised. This error is a subclass of
`ValueError`.

```python
from dataclasses import dataclass

from zbjobs.variables import omitempty


@dataclass
class Result:
    foo: str = omitempty("")


command.job_key(123).variables_from_object(Result())
# command.request.variables == "{}"
command.job_key(123).variables_from_object_ignore_omitempty(Result())
# command.request.variables == '{"foo":""}'
```

`omitempty(default=None)` returns a dataclass field with the given default
that is marked to be left out when empty.

## The serializer on its own

`JSONStringSerializer` in `zbjobs.variables` does the work behind the
command:

- `validate(name, value)` checks that `value` is a JSON object string and
  returns it decoded as a dict. `name` is used in the error message.
- `as_json(name, value, ignore_omitempty)` returns the compact JSON string
  for `value`.

## What this package does not do

zbjobs has no network client of its own. It does not connect to a gateway,
handle credentials, activate or stream jobs, or run job workers. It only
builds the completion request and passes it to the gateway object you give
it.