from asyncnet.errors import (
    CANCELLED_ERROR_CODE,
    TIMEOUT_ERROR_CODE,
    NetworkError,
    NetworkLogicError,
    NetworkRuntimeError,
)


def test_runtime_error_keeps_message_and_code():
    error = NetworkRuntimeError("request aborted", CANCELLED_ERROR_CODE)
    assert error.code == CANCELLED_ERROR_CODE
    assert str(error) == "request aborted"
    assert error.message == "request aborted"


def test_runtime_error_is_a_network_error():
    error = NetworkRuntimeError("timed out", TIMEOUT_ERROR_CODE)
    assert isinstance(error, NetworkError)
    assert error.code == TIMEOUT_ERROR_CODE
    assert error.message == "timed out"


def test_logic_error_is_not_a_runtime_error():
    error = NetworkLogicError("bad option", 3)
    assert isinstance(error, NetworkError)
    assert not isinstance(error, NetworkRuntimeError)
    assert error.code == 3
    assert str(error) == "bad option"


def test_repr_names_class_and_code():
    error = NetworkLogicError("bad option", 3)
    assert repr(error).startswith("NetworkLogicError(")
    assert "code=3" in repr(error)