"""
Vector type handlers.

This module contains handlers for the fixed-dimension vector types:
- FLOAT_VECTOR
- BINARY_VECTOR
"""

from typing import Any, Optional

import numpy as np

from milvus_response.client.data_types import DataType
from milvus_response.exceptions import ExceptionsMessage, SizeMismatchException
from milvus_response.grpc_gen import schema_pb2

from .base import VectorHandler


class FloatVectorHandler(VectorHandler):
    """Handler for FLOAT_VECTOR type."""

    @property
    def data_type(self):
        return DataType.FLOAT_VECTOR

    def get_raw_data(self, field_data: schema_pb2.FieldData) -> Any:
        """Get raw float vector data."""
        return field_data.vectors.float_vector.data

    def get_row_count(self, field_data: schema_pb2.FieldData) -> int:
        dim = self.get_dim(field_data)
        size = len(self.get_raw_data(field_data))
        if size % dim != 0:
            raise SizeMismatchException(
                message=ExceptionsMessage.FloatVectorSizeMismatch % (size, dim)
            )
        return size // dim

    def _pack_row(self, chunk: Any) -> list:
        return list(chunk)

    def get_bytes_per_vector(self, dim: int) -> int:
        """Get bytes per vector for float vector (counted by elements)."""
        return dim

    def get_numpy_dtype(self) -> Optional[np.dtype]:
        return np.float32

    def to_numpy(self, field_data: schema_pb2.FieldData) -> np.ndarray:
        count = self.get_row_count(field_data)
        return np.array(self.get_raw_data(field_data), dtype=np.float32).reshape(
            count, self.get_dim(field_data)
        )


class BinaryVectorHandler(VectorHandler):
    """Handler for BINARY_VECTOR type, each row is a block of dim / 8 bytes."""

    @property
    def data_type(self):
        return DataType.BINARY_VECTOR

    def get_raw_data(self, field_data: schema_pb2.FieldData) -> Any:
        """Get raw binary vector bytes."""
        return field_data.vectors.binary_vector

    def get_dim(self, field_data: schema_pb2.FieldData) -> int:
        dim = super().get_dim(field_data)
        if dim % 8 != 0:
            raise SizeMismatchException(message=ExceptionsMessage.BinaryDimNotMultipleOf8 % dim)
        return dim

    def get_row_count(self, field_data: schema_pb2.FieldData) -> int:
        dim = self.get_dim(field_data)
        bits = len(self.get_raw_data(field_data)) * 8
        if bits % dim != 0:
            raise SizeMismatchException(
                message=ExceptionsMessage.BinaryVectorSizeMismatch % (bits // 8, dim)
            )
        return bits // dim

    def _pack_row(self, chunk: Any) -> bytes:
        return bytes(chunk)

    def get_bytes_per_vector(self, dim: int) -> int:
        return dim // 8

    def get_numpy_dtype(self) -> Optional[np.dtype]:
        return np.uint8

    def to_numpy(self, field_data: schema_pb2.FieldData) -> np.ndarray:
        count = self.get_row_count(field_data)
        bytes_per_vector = self.get_bytes_per_vector(self.get_dim(field_data))
        raw = np.frombuffer(self.get_raw_data(field_data), dtype=np.uint8)
        return raw.reshape(count, bytes_per_vector).copy()
