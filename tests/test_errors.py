import pytest

from gptkit.errors import APIError, ErrorResponse, InnerError, RequestError


@pytest.mark.parametrize(
    "response, expected",
    [
        ('{"message":"foo","type":"invalid_request_error","param":null,"code":null}', "foo"),
        ('{"message":["foo"],"type":"invalid_request_error","param":null,"code":null}', "foo"),
        (
            '{"message":["foo", "bar", "baz"],"type":"invalid_request_error","param":null,"code":null}',
            "foo, bar, baz",
        ),
        ('{"message":[],"type":"invalid_request_error","param":null,"code":null}', ""),
        ('{"message":null,"type":"invalid_request_error","param":null,"code":null}', ""),
    ],
)
def test_message_parsing(response, expected):
    assert APIError.from_json(response).message == expected


@pytest.mark.parametrize(
    "response",
    [
        '{"message":{},"type":"invalid_request_error","param":null,"code":null}',
        '{"message":1,"type":"invalid_request_error","param":null,"code":null}',
        '{"message":0.1,"type":"invalid_request_error","param":null,"code":null}',
        '{"message":true,"type":"invalid_request_error","param":null,"code":null}',
        '{"type":"invalid_request_error","param":null,"code":null}',
        '{"code":418,"message":"I\'m a teapot","param":true,"type":"teapot_error"}',
        '{"code":418,"message":"I\'m a teapot","param":"prompt","type":true}',
        '--- {"code":418,"message":"I\'m a teapot","param":"prompt","type":"teapot_error"}',
        '{"message": "","type": null,"param": "","code": "","status": 0,"innererror": "test"}',
    ],
)
def test_malformed_errors_raise(response):
    with pytest.raises(ValueError):
        APIError.from_json(response)


def test_inner_error_with_content_filter():
    response = """{
        "message": "test message",
        "type": null,
        "param": "prompt",
        "code": "content_filter",
        "status": 400,
        "innererror": {
            "code": "ResponsibleAIPolicyViolation",
            "content_filter_result": {
                "hate": {"filtered": false, "severity": "safe"},
                "self_harm": {"filtered": false, "severity": "safe"},
                "sexual": {"filtered": true, "severity": "medium"},
                "violence": {"filtered": false, "severity": "safe"}
            }
        }
    }"""
    error = APIError.from_json(response)
    assert error.message == "test message"
    assert error.type == ""
    assert error.param == "prompt"
    assert error.code == "content_filter"
    assert error.inner_error == InnerError(
        code="ResponsibleAIPolicyViolation",
        content_filter_results={
            "hate": {"filtered": False, "severity": "safe"},
            "self_harm": {"filtered": False, "severity": "safe"},
            "sexual": {"filtered": True, "severity": "medium"},
            "violence": {"filtered": False, "severity": "safe"},
        },
    )


def test_empty_inner_error():
    response = '{"message": "","type": null,"param": "","code": "","status": 0,"innererror": {}}'
    assert APIError.from_json(response).inner_error == InnerError()


def test_code_integer():
    response = '{"code":418,"message":"I\'m a teapot","param":"prompt","type":"teapot_error"}'
    error = APIError.from_json(response)
    assert error.code == 418
    assert isinstance(error.code, int)
    assert error.type == "teapot_error"


def test_code_string():
    response = '{"code":"teapot","message":"I\'m a teapot","param":"prompt","type":"teapot_error"}'
    assert APIError.from_json(response).code == "teapot"


def test_code_missing():
    response = '{"message":"I\'m a teapot","param":"prompt","type":"teapot_error"}'
    error = APIError.from_json(response)
    assert error.code is None
    assert error.inner_error is None


def test_param_null():
    error = APIError.from_json('{"message":"foo","param":null}')
    assert error.param is None


def test_api_error_str():
    assert str(APIError(message="boom")) == "boom"
    error = APIError(message="boom", http_status="418 I'm a teapot", http_status_code=418)
    assert str(error) == "error, status code: 418, status: 418 I'm a teapot, message: boom"


def test_request_error():
    cause = RuntimeError("i am a teapot")
    error = RequestError(http_status_code=418, err=cause)
    assert error.http_status_code == 418
    assert error.__cause__ is cause
    assert str(error) == "error, status code: 418, status: , message: i am a teapot, body: "
    with pytest.raises(RequestError):
        raise error


def test_error_response_wraps_api_error():
    response = ErrorResponse.from_json('{"error":{"message":"bad","type":"x","code":"c"}}')
    assert response.error.message == "bad"
    assert response.error.code == "c"
    assert ErrorResponse.from_json('{"error":null}').error is None
    with pytest.raises(ValueError):
        ErrorResponse.from_json("[1]")