"""
Base classes for type handlers.

This module contains the abstract base classes and common utilities
for all type handlers used to decode field data.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

import numpy as np

from milvus_response.client.data_types import DataType
from milvus_response.exceptions import ExceptionsMessage, SizeMismatchException
from milvus_response.grpc_gen import schema_pb2


class TypeHandler(ABC):
    """Base class for data type handlers.

    Handlers encapsulate type-specific logic for:
    - Locating the payload inside FieldData (get_raw_data)
    - Counting rows (get_row_count)
    - Unpacking the payload into per-row values (extract_rows)
    - Unpacking one ScalarField when used as an array element

    Non-type-specific logic (index checks, JSON key lookup) is handled by
    the caller, not in handlers.
    """

    @property
    @abstractmethod
    def data_type(self) -> DataType:
        """The data type this handler supports."""

    @abstractmethod
    def get_raw_data(self, field_data: schema_pb2.FieldData) -> Any:
        """
        Get the raw data container from FieldData.

        This method knows which protobuf field path to access
        for this specific type (e.g., scalars.bool_data.data for BOOL).

        Args:
            field_data: The FieldData protobuf object

        Returns:
            The raw data container
        """

    def get_row_count(self, field_data: schema_pb2.FieldData) -> int:
        """Number of rows carried by the field data. Scalars hold one value per row."""
        return len(self.get_raw_data(field_data))

    def extract_rows(self, field_data: schema_pb2.FieldData) -> list:
        """
        Unpack the whole payload into a freshly built list of rows.

        Args:
            field_data: The FieldData protobuf object

        Returns:
            List with one entry per row, in payload order
        """
        return list(self.get_raw_data(field_data))

    def extract_from_scalar_field(self, scalar_field: schema_pb2.ScalarField) -> list:
        """
        Extract data from ScalarField (used for array element extraction).

        Only implement in handlers that can be array elements (scalars).

        Args:
            scalar_field: The ScalarField protobuf object

        Returns:
            List of extracted values
        """
        msg = f"extract_from_scalar_field not implemented for {self.data_type}"
        raise NotImplementedError(msg)


class VectorHandler(TypeHandler):
    """Abstract base class for fixed-dimension vector type handlers.

    The flat payload is cut into rows of get_bytes_per_vector(dim) items; a
    payload that doesn't divide evenly raises SizeMismatchException.
    """

    @abstractmethod
    def get_bytes_per_vector(self, dim: int) -> int:
        """
        Get the number of bytes (or elements for float) per vector.

        Args:
            dim: Vector dimension

        Returns:
            Number of bytes per vector (or number of elements for FLOAT_VECTOR)
        """

    @abstractmethod
    def get_numpy_dtype(self) -> Optional[np.dtype]:
        """
        Return the numpy dtype for this vector type.

        Returns:
            numpy dtype for this vector type
        """

    @abstractmethod
    def to_numpy(self, field_data: schema_pb2.FieldData) -> np.ndarray:
        """Return the payload as a 2-D array with one row per vector."""

    def get_dim(self, field_data: schema_pb2.FieldData) -> int:
        dim = int(field_data.vectors.dim)
        if dim <= 0:
            raise SizeMismatchException(
                message=ExceptionsMessage.InvalidDimension % (field_data.field_name, dim)
            )
        return dim

    def extract_rows(self, field_data: schema_pb2.FieldData) -> list:
        count = self.get_row_count(field_data)
        step = self.get_bytes_per_vector(self.get_dim(field_data))
        data = self.get_raw_data(field_data)
        return [self._pack_row(data[i * step : (i + 1) * step]) for i in range(count)]

    def _pack_row(self, chunk: Any) -> Any:
        return chunk
