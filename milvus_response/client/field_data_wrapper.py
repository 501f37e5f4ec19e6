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

from typing import Any, Dict, Iterator, Optional

import numpy as np

from milvus_response.exceptions import (
    ExceptionsMessage,
    IndexOutOfRangeException,
    JsonOnlyOperationException,
    NotAVectorFieldException,
    ParamError,
)
from milvus_response.grpc_gen import schema_pb2

from . import utils
from .data_types import DataType
from .type_handlers import JsonHandler, TypeHandler, get_type_handler


class FieldDataWrapper:
    """
    Wraps one ``FieldData`` message of a query or search response.

    Every accessor reads the wrapped message directly and builds a fresh result,
    nothing is cached between calls. Row values are returned according to the
    field type:

        * FLOAT_VECTOR: list of ``list[float]``, each ``dim`` long
        * BINARY_VECTOR: list of ``bytes``, each ``dim / 8`` long
        * INT64 / INT32 / INT16 / INT8: list of ``int``
        * BOOL: list of ``bool``
        * FLOAT / DOUBLE: list of ``float``
        * VARCHAR / STRING: list of ``str``
        * JSON: list of ``bytes``, one serialized document per row
        * ARRAY: list of ``list`` of the element type
    """

    def __init__(self, field_data: schema_pb2.FieldData) -> None:
        if field_data is None:
            raise ParamError(message=ExceptionsMessage.FieldDataNone)
        self._field_data = field_data

    @property
    def field_data(self) -> schema_pb2.FieldData:
        return self._field_data

    @property
    def field_name(self) -> str:
        return self._field_data.field_name

    @property
    def field_id(self) -> int:
        return self._field_data.field_id

    @property
    def data_type(self) -> DataType:
        return DataType.from_wire(self._field_data.type)

    def is_vector_field(self) -> bool:
        return self._field_data.type in (DataType.FLOAT_VECTOR, DataType.BINARY_VECTOR)

    def is_json_field(self) -> bool:
        return self._field_data.type == DataType.JSON

    def is_dynamic_field(self) -> bool:
        return self.is_json_field() and bool(self._field_data.is_dynamic)

    def get_dim(self) -> int:
        """
        Gets the dimension of a vector field.

        :raises NotAVectorFieldException: if the field is not a vector field.
        """
        if not self.is_vector_field():
            raise NotAVectorFieldException(
                message=ExceptionsMessage.NotVectorField % self.field_name
            )
        return int(self._field_data.vectors.dim)

    def _handler(self) -> TypeHandler:
        return get_type_handler(self._field_data.type)

    def get_row_count(self) -> int:
        """
        Gets the row count of the field.

        :raises SizeMismatchException: if vector data doesn't divide by the dimension.
        :raises DataTypeNotSupportException: if the field type can't be decoded.
        """
        return self._handler().get_row_count(self._field_data)

    def get_field_data(self) -> list:
        """
        Unpacks the whole field into a list of row values, see the class docstring
        for the value type of each data type.

        :raises SizeMismatchException: if vector data doesn't divide by the dimension.
        :raises DataTypeNotSupportException: if the field type can't be decoded.
        """
        return self._handler().extract_rows(self._field_data)

    def value_by_idx(self, index: int) -> Any:
        """
        Returns the value of one row. The field is unpacked again on every call.

        :raises IndexOutOfRangeException: if ``index`` is negative or past the last row.
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise ParamError(message=ExceptionsMessage.IndexType % index)

        rows = self.get_field_data()
        if index < 0 or index >= len(rows):
            raise IndexOutOfRangeException(
                message=ExceptionsMessage.IndexOutOfRange % (index, len(rows))
            )
        return rows[index]

    def to_numpy(self) -> np.ndarray:
        """
        Returns a vector field as a 2-D numpy array, ``float32`` rows of ``dim``
        for float vectors and ``uint8`` rows of ``dim / 8`` for binary vectors.
        """
        if not self.is_vector_field():
            raise NotAVectorFieldException(
                message=ExceptionsMessage.NotVectorField % self.field_name
            )
        return self._handler().to_numpy(self._field_data)

    def _check_json_field(self):
        if not self.is_json_field():
            raise JsonOnlyOperationException(
                message=ExceptionsMessage.JsonOnlyOperation
                % (self.field_name, self.data_type.name)
            )

    def _parse_object_data(self, index: int) -> Dict[str, Any]:
        return JsonHandler.load_object(self.value_by_idx(index), index, self.field_name)

    def get_json(self, index: int) -> Dict[str, Any]:
        """Returns the decoded JSON object of one row."""
        self._check_json_field()
        return self._parse_object_data(index)

    def get(self, index: int, key: str) -> Any:
        """Returns the raw JSON value stored under ``key`` in row ``index``, or None."""
        self._check_json_field()
        return self._parse_object_data(index).get(key)

    def get_as_string(self, index: int, key: str) -> Optional[str]:
        self._check_json_field()
        value = self._parse_object_data(index).get(key)
        return None if value is None else utils.json_value_to_str(value)

    def get_as_int(self, index: int, key: str) -> Optional[int]:
        self._check_json_field()
        result = self.get_as_string(index, key)
        return None if result is None else utils.parse_int(result, key)

    def get_as_bool(self, index: int, key: str) -> Optional[bool]:
        """Any text other than a case-insensitive "true" is returned as False."""
        self._check_json_field()
        result = self.get_as_string(index, key)
        return None if result is None else utils.parse_bool(result)

    def get_as_double(self, index: int, key: str) -> Optional[float]:
        self._check_json_field()
        result = self.get_as_string(index, key)
        return None if result is None else utils.parse_double(result, key)

    def __len__(self) -> int:
        return self.get_row_count()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.get_field_data())

    def __getitem__(self, index: int) -> Any:
        return self.value_by_idx(index)

    def __str__(self) -> str:
        return f"FieldDataWrapper(field_name={self.field_name!r}, type={self.data_type.name})"

    __repr__ = __str__
