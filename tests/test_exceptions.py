import pytest
from milvus_response.exceptions import (
    DataTypeNotSupportException,
    ErrorCode,
    IllegalResponseException,
    IndexOutOfRangeException,
    JsonOnlyOperationException,
    MalformedJsonException,
    MilvusException,
    NotAVectorFieldException,
    NumberParseException,
    ParamError,
    SizeMismatchException,
)


class TestExceptions:
    def test_str(self):
        e = MilvusException(message="boom")
        assert e.code == ErrorCode.UNEXPECTED_ERROR
        assert e.message == "boom"
        assert str(e) == "<MilvusException: (code=1, message=boom)>"

    @pytest.mark.parametrize(
        "exc_class, base, code",
        [
            (NotAVectorFieldException, IllegalResponseException, ErrorCode.ILLEGAL_RESPONSE),
            (SizeMismatchException, IllegalResponseException, ErrorCode.ILLEGAL_RESPONSE),
            (JsonOnlyOperationException, IllegalResponseException, ErrorCode.ILLEGAL_RESPONSE),
            (
                DataTypeNotSupportException,
                IllegalResponseException,
                ErrorCode.DATA_TYPE_NOT_SUPPORTED,
            ),
            (IndexOutOfRangeException, ParamError, ErrorCode.ILLEGAL_ARGUMENT),
            (MalformedJsonException, MilvusException, ErrorCode.UNEXPECTED_ERROR),
            (NumberParseException, MilvusException, ErrorCode.UNEXPECTED_ERROR),
        ],
    )
    def test_hierarchy_and_default_code(self, exc_class, base, code):
        e = exc_class(message="m")
        assert isinstance(e, base)
        assert isinstance(e, MilvusException)
        assert e.code == code

    def test_custom_code(self):
        assert SizeMismatchException(code=42, message="x").code == 42
