"""
Scalar type handlers.

This module contains handlers for scalar data types:
- BOOL, INT8, INT16, INT32, INT64
- FLOAT, DOUBLE
- VARCHAR, STRING
"""

from typing import Any

from milvus_response.client.data_types import DataType
from milvus_response.grpc_gen import schema_pb2

from .base import TypeHandler


class BoolHandler(TypeHandler):
    """Handler for BOOL type."""

    @property
    def data_type(self):
        return DataType.BOOL

    def get_raw_data(self, field_data: schema_pb2.FieldData) -> Any:
        """Get raw bool data."""
        return field_data.scalars.bool_data.data

    def extract_from_scalar_field(self, scalar_field: schema_pb2.ScalarField) -> list:
        """Extract bool data from ScalarField."""
        return list(scalar_field.bool_data.data)


class IntHandler(TypeHandler):
    """Handler for INT8, INT16, INT32 types, all carried as 32-bit ints on the wire."""

    def __init__(self, data_type: DataType):
        """
        Initialize int handler.

        Args:
            data_type: The DataType enum value (INT8, INT16, or INT32)
        """
        self._data_type = data_type

    @property
    def data_type(self):
        return self._data_type

    def get_raw_data(self, field_data: schema_pb2.FieldData) -> Any:
        """Get raw int data."""
        return field_data.scalars.int_data.data

    def extract_from_scalar_field(self, scalar_field: schema_pb2.ScalarField) -> list:
        """Extract int data from ScalarField."""
        return list(scalar_field.int_data.data)


class Int64Handler(TypeHandler):
    """Handler for INT64 type."""

    @property
    def data_type(self):
        return DataType.INT64

    def get_raw_data(self, field_data: schema_pb2.FieldData) -> Any:
        """Get raw int64 data."""
        return field_data.scalars.long_data.data

    def extract_from_scalar_field(self, scalar_field: schema_pb2.ScalarField) -> list:
        """Extract int64 data from ScalarField."""
        return list(scalar_field.long_data.data)


class FloatHandler(TypeHandler):
    """Handler for FLOAT type."""

    @property
    def data_type(self):
        return DataType.FLOAT

    def get_raw_data(self, field_data: schema_pb2.FieldData) -> Any:
        """Get raw float data."""
        return field_data.scalars.float_data.data

    def extract_from_scalar_field(self, scalar_field: schema_pb2.ScalarField) -> list:
        """Extract float data from ScalarField."""
        return list(scalar_field.float_data.data)


class DoubleHandler(TypeHandler):
    """Handler for DOUBLE type."""

    @property
    def data_type(self):
        return DataType.DOUBLE

    def get_raw_data(self, field_data: schema_pb2.FieldData) -> Any:
        """Get raw double data."""
        return field_data.scalars.double_data.data

    def extract_from_scalar_field(self, scalar_field: schema_pb2.ScalarField) -> list:
        """Extract double data from ScalarField."""
        return list(scalar_field.double_data.data)


class VarcharHandler(TypeHandler):
    """Handler for VARCHAR and the legacy STRING type, both stored in string_data."""

    def __init__(self, data_type: DataType = DataType.VARCHAR):
        self._data_type = data_type

    @property
    def data_type(self):
        return self._data_type

    def get_raw_data(self, field_data: schema_pb2.FieldData) -> Any:
        """Get raw varchar data."""
        return field_data.scalars.string_data.data

    def extract_from_scalar_field(self, scalar_field: schema_pb2.ScalarField) -> list:
        """Extract varchar data from ScalarField."""
        return list(scalar_field.string_data.data)
