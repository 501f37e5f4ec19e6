# Copyright (C) 2019-2021 Zilliz. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except
# in compliance with the License. You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express
# or implied. See the License for the specific language governing permissions and limitations under
# the License.

from enum import IntEnum


class ErrorCode(IntEnum):
    SUCCESS = 0
    UNEXPECTED_ERROR = 1
    ILLEGAL_ARGUMENT = 5
    ILLEGAL_RESPONSE = 6
    DATA_TYPE_NOT_SUPPORTED = 7


class MilvusException(Exception):
    def __init__(
        self,
        code: int = ErrorCode.UNEXPECTED_ERROR,
        message: str = "",
    ) -> None:
        super().__init__()
        self._code = code
        self._message = message

    @property
    def code(self):
        return self._code

    @property
    def message(self):
        return self._message

    def __str__(self) -> str:
        return f"<{type(self).__name__}: (code={self.code}, message={self.message})>"


class ParamError(MilvusException):
    """Raise when params are incorrect"""

    def __init__(self, code: int = ErrorCode.ILLEGAL_ARGUMENT, message: str = "") -> None:
        super().__init__(code=code, message=message)


class IndexOutOfRangeException(ParamError):
    """Raise when a row index is outside of the field data"""


class IllegalResponseException(MilvusException):
    """Raise when the field data returned by the server is inconsistent"""

    def __init__(self, code: int = ErrorCode.ILLEGAL_RESPONSE, message: str = "") -> None:
        super().__init__(code=code, message=message)


class NotAVectorFieldException(IllegalResponseException):
    """Raise when a vector-only operation is called on a non-vector field"""


class SizeMismatchException(IllegalResponseException):
    """Raise when vector data length doesn't match the dimension"""


class DataTypeNotSupportException(IllegalResponseException):
    """Raise when datatype isn't supported"""

    def __init__(
        self, code: int = ErrorCode.DATA_TYPE_NOT_SUPPORTED, message: str = ""
    ) -> None:
        super().__init__(code=code, message=message)


class JsonOnlyOperationException(IllegalResponseException):
    """Raise when a JSON-only operation is called on a non-JSON field"""


class MalformedJsonException(MilvusException):
    """Raise when a JSON row can't be decoded into an object"""


class NumberParseException(MilvusException):
    """Raise when a JSON value can't be converted to the requested number type"""


class ExceptionsMessage:
    FieldDataNone = "Field data must not be None."
    IndexType = "Row index must be an int, but %r is given."
    IndexOutOfRange = "Index %s out of range, the field has %s rows."
    NotVectorField = "Field {%s} is not a vector field."
    InvalidDimension = "Field {%s} has an invalid vector dimension: %s."
    BinaryDimNotMultipleOf8 = "Binary vector dimension must be a multiple of 8, but got %s."
    FloatVectorSizeMismatch = (
        "Returned float vector field data array size %s doesn't match dimension %s."
    )
    BinaryVectorSizeMismatch = (
        "Returned binary vector field data array size %s bytes doesn't match dimension %s."
    )
    UnsupportedDataType = "Unsupported data type returned by FieldData: %s."
    UnsupportedElementType = "Unsupported array element type: %s."
    JsonOnlyOperation = "Only JSON type support this operation, field {%s} is of type %s."
    JsonNotObject = "JSON row %s of field {%s} is not an object."
    JsonDecodeFailed = "Failed to decode JSON row %s of field {%s}: %s"
    NotInteger = "Value %r of key %r is not an integer literal."
    NotDouble = "Value %r of key %r is not a floating-point literal."
    FieldNotExist = "Field {%s} doesn't exist in the returned field data."
