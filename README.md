# gptkit

Building blocks for talking to OpenAI-compatible HTTP APIs: client
configuration, request and response models, request checks, multipart
form building, URL paths for paged listings and API error parsing.

The package uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Configuration

`gptkit.config` holds `ClientConfig`, the `APIType` enum and three
factory functions:

```python
from gptkit.config import default_config, default_azure_config, default_anthropic_config

config = default_config("placeholder")           # https://api.openai.com/v1, assistant version "v2"

azure = default_azure_config("placeholder", "https://example.com/")
azure.azure_deployment_for("gpt-3.5-turbo")      # "gpt-35-turbo" (dots and colons removed)

anthropic = default_anthropic_config("placeholder", "")
anthropic.base_url                               # "https://api.anthropic.com/v1"
anthropic.api_version                            # "2023-06-01"
```

A custom `azure_model_mapper` callable on a `ClientConfig` replaces the
default model-to-deployment mapping.

## Completions

`gptkit.completion` defines model name constants, `CompletionRequest`,
`CompletionResponse` and the checks the completion endpoint needs.
`check_completion_request` raises `CompletionStreamNotSupportedError` for
streaming requests, `CompletionUnsupportedModelError` for models that
`/completions` does not serve, and `CompletionPromptTypeError` for prompts
that are neither a string nor a list of strings; otherwise it returns the
JSON body:

```python
from gptkit.completion import CompletionRequest, check_completion_request

request = CompletionRequest(model="babbage-002", prompt="Lorem ipsum", max_tokens=5)
body = check_completion_request(request)
# {"model": "babbage-002", "prompt": "Lorem ipsum", "max_tokens": 5}
```

`endpoint_supports_model(endpoint, model)` and `is_valid_prompt(prompt)`
are available on their own.

## Embeddings

```python
from gptkit.embeddings import Embedding, EmbeddingResponseBase64

a = Embedding(embedding=[1.0, 2.0, 3.0])
b = Embedding(embedding=[2.0, 4.0, 6.0])
a.dot_product(b)   # 28.0; vectors of different length raise VectorLengthMismatchError

response = EmbeddingResponseBase64.from_dict(
    {"data": [{"embedding": "pHCdP4XrkUDhevxA"}]}
).to_embedding_response()
response.data[0].embedding   # three float32 values, about [1.23, 4.56, 7.89]
```

`EmbeddingRequest`, `EmbeddingRequestStrings` and `EmbeddingRequestTokens`
all `convert()` to an `EmbeddingRequest`, whose `to_dict()` gives the JSON
body. `decode_base64_embedding` raises `ValueError` on malformed base64.

## Errors

```python
from gptkit.errors import APIError

error = APIError.from_json('{"message": ["foo", "bar"], "code": 418}')
error.message   # "foo, bar"
error.code      # 418
```

`APIError.from_json` accepts a message given as a string, a list of
strings or null, reads Azure content-filter details into `InnerError`, and
raises `ValueError` on malformed input. `ErrorResponse.from_json` unwraps
the `{"error": ...}` envelope. `RequestError` describes a failed request
that carries no structured error body; its `err` becomes `__cause__`.

## Multipart forms and uploads

`gptkit.forms.FormBuilder` writes multipart/form-data to a binary stream
(`write_field`, `create_form_file`, `create_form_file_reader`, `close`,
`content_type`). The upload helpers build a complete form and return the
body with its content type:

```python
from gptkit.files import FileBytesRequest, PurposeType, build_file_bytes_form

body, content_type = build_file_bytes_form(
    FileBytesRequest(name="data.jsonl", bytes=b"{}", purpose=PurposeType.FINE_TUNE)
)
```

`build_file_form` does the same for a file on disk (a missing path raises
`FileNotFoundError`), and `gptkit.images` provides `build_edit_image_form`
and `build_variation_image_form`. Each accepts an optional
`builder_factory` that is called with the body stream in place of
`FormBuilder`.

## Paths for paged listings

```python
from gptkit.fine_tuning_job import job_events_path
from gptkit.messages import list_messages_path, messages_path

job_events_path("ftjob-1", after="evt-1", limit=10)
# "/fine_tuning/jobs/ftjob-1/events?after=evt-1&limit=10"

list_messages_path("thread_abc123", limit=1, order="desc")
# "/threads/thread_abc123/messages?limit=1&order=desc"

messages_path("thread_abc123", "msg_abc123", "")
# "/threads/thread_abc123/messages/msg_abc123/files"
```

`gptkit.messages.modify_message_body(metadata)` returns the body of a
modify-message request.

## Requests

`gptkit.request_builder.RequestBuilder.build(method, url, body, headers)`
returns a `Request` dataclass. Bytes and file-like bodies are used as
they are; any other body is encoded with `JSONMarshaller`, which calls
`to_dict()` on objects that have it. `JSONUnmarshaler` decodes JSON.
`gptkit.accumulator.ErrorAccumulator` collects raw error bytes.

## Response models

`from_dict` constructors are provided for the models in `gptkit.models`,
`gptkit.engines`, `gptkit.edits`, `gptkit.files`, `gptkit.fine_tunes`,
`gptkit.fine_tuning_job`, `gptkit.images` and `gptkit.messages`.

## What the package does not do

- It does not send requests. `RequestBuilder` produces `Request` objects,
  and the path and body helpers produce what goes in them, but there is no
  HTTP client, no authentication handling and no streaming of responses.
- It has no JSON Schema tools: there is no schema generation from Python
  types and no validation of data against a schema.
- It offers no command-line program.