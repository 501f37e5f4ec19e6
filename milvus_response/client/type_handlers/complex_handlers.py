"""
Complex type handlers.

This module contains handlers for complex data types:
- JSON (rows stay serialized until a key is looked up)
- ARRAY
"""

import logging
from typing import Any, Dict

import orjson

from milvus_response.client.data_types import DataType
from milvus_response.exceptions import (
    DataTypeNotSupportException,
    ExceptionsMessage,
    MalformedJsonException,
)
from milvus_response.grpc_gen import schema_pb2
from milvus_response.settings import Config

from .base import TypeHandler

logger = logging.getLogger(__name__)


class JsonHandler(TypeHandler):
    """Handler for JSON type."""

    @property
    def data_type(self):
        return DataType.JSON

    def get_raw_data(self, field_data: schema_pb2.FieldData) -> Any:
        """Get raw JSON data."""
        return field_data.scalars.json_data.data

    def extract_rows(self, field_data: schema_pb2.FieldData) -> list:
        """One serialized JSON document per row, left unparsed."""
        return [bytes(row) for row in self.get_raw_data(field_data)]

    def extract_from_scalar_field(self, scalar_field: schema_pb2.ScalarField) -> list:
        """Extract JSON data from ScalarField."""
        return [bytes(row) for row in scalar_field.json_data.data]

    @staticmethod
    def load_object(raw: bytes, index: int, field_name: str) -> Dict[str, Any]:
        """
        Decode one serialized row into a dict.

        Args:
            raw: The serialized JSON row
            index: Row index, used in error messages
            field_name: Field name, used in error messages

        Returns:
            The decoded JSON object
        """
        try:
            json_dict = orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            logger.error(
                f"JsonHandler::load_object::Failed to load JSON data: {e}, "
                f"original data: {raw[:Config.JSON_LOG_PREVIEW]!r}"
            )
            raise MalformedJsonException(
                message=ExceptionsMessage.JsonDecodeFailed % (index, field_name, e)
            ) from e

        if not isinstance(json_dict, dict):
            raise MalformedJsonException(
                message=ExceptionsMessage.JsonNotObject % (index, field_name)
            )
        return json_dict


class ArrayHandler(TypeHandler):
    """Handler for ARRAY type."""

    @property
    def data_type(self):
        return DataType.ARRAY

    def get_raw_data(self, field_data: schema_pb2.FieldData) -> Any:
        """Get raw array data."""
        return field_data.scalars.array_data.data

    def extract_rows(self, field_data: schema_pb2.FieldData) -> list:
        """Unpack every ScalarField with the handler of the declared element type."""
        array_data = self.get_raw_data(field_data)
        if len(array_data) == 0:
            return []

        element_type = field_data.scalars.array_data.element_type

        from .registry import get_type_registry  # noqa: PLC0415

        element_handler = get_type_registry().get_handler(element_type)
        try:
            return [element_handler.extract_from_scalar_field(row) for row in array_data]
        except NotImplementedError:
            raise DataTypeNotSupportException(
                message=ExceptionsMessage.UnsupportedElementType
                % DataType.from_wire(element_type).name
            ) from None
