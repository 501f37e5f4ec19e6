"""Tests for type_handlers module."""

import numpy as np
import pytest
from milvus_response.client.data_types import DataType
from milvus_response.client.type_handlers import (
    ArrayHandler,
    BinaryVectorHandler,
    FloatVectorHandler,
    IntHandler,
    JsonHandler,
    TypeHandler,
    TypeHandlerRegistry,
    VarcharHandler,
    get_type_handler,
    get_type_registry,
)
from milvus_response.exceptions import DataTypeNotSupportException
from milvus_response.grpc_gen import schema_pb2


class TestTypeHandlerBase:
    """Test TypeHandler base class methods."""

    def _mock_handler(self):
        class MockHandler(TypeHandler):
            @property
            def data_type(self):
                return DataType.INT64

            def get_raw_data(self, field_data):
                return field_data.scalars.long_data.data

        return MockHandler()

    def test_default_row_count_and_rows(self):
        handler = self._mock_handler()
        field_data = schema_pb2.FieldData()
        field_data.scalars.long_data.data.extend([3, 4])
        assert handler.get_row_count(field_data) == 2
        assert handler.extract_rows(field_data) == [3, 4]

    def test_extract_from_scalar_field_not_implemented(self):
        """Test that extract_from_scalar_field raises NotImplementedError by default."""
        with pytest.raises(NotImplementedError):
            self._mock_handler().extract_from_scalar_field(schema_pb2.ScalarField())

    def test_vector_handler_not_array_element(self):
        with pytest.raises(NotImplementedError):
            FloatVectorHandler().extract_from_scalar_field(schema_pb2.ScalarField())


class TestTypeHandlerRegistry:
    """Test TypeHandlerRegistry."""

    def test_get_handler(self):
        registry = TypeHandlerRegistry()
        handler = registry.get_handler(DataType.INT64)
        assert handler.data_type == DataType.INT64

    def test_get_handler_by_wire_value(self):
        handler = TypeHandlerRegistry().get_handler(int(DataType.FLOAT_VECTOR))
        assert isinstance(handler, FloatVectorHandler)

    @pytest.mark.parametrize("data_type", [DataType.NONE, DataType.INT8_VECTOR, 999, 4242])
    def test_get_handler_not_found(self, data_type):
        registry = TypeHandlerRegistry()
        with pytest.raises(DataTypeNotSupportException, match="Unsupported data type"):
            registry.get_handler(data_type)

    def test_supported_types(self):
        assert get_type_registry().get_supported_types() == {
            DataType.FLOAT_VECTOR,
            DataType.BINARY_VECTOR,
            DataType.BOOL,
            DataType.INT8,
            DataType.INT16,
            DataType.INT32,
            DataType.INT64,
            DataType.FLOAT,
            DataType.DOUBLE,
            DataType.VARCHAR,
            DataType.STRING,
            DataType.JSON,
            DataType.ARRAY,
        }

    def test_get_numpy_dtype(self):
        registry = TypeHandlerRegistry()
        assert registry.get_numpy_dtype(DataType.FLOAT_VECTOR) == np.float32
        assert registry.get_numpy_dtype(DataType.BINARY_VECTOR) == np.uint8
        assert registry.get_numpy_dtype(DataType.INT64) is None

    def test_register_override(self):
        registry = TypeHandlerRegistry()
        handler = VarcharHandler(DataType.STRING)
        registry.register(handler)
        assert registry.get_handler(DataType.STRING) is handler

    def test_global_registry_is_shared(self):
        assert get_type_registry() is get_type_registry()
        assert isinstance(get_type_handler(DataType.JSON), JsonHandler)
        assert isinstance(get_type_handler(DataType.ARRAY), ArrayHandler)


class TestHandlers:
    def test_int_handler_types(self):
        for data_type in (DataType.INT8, DataType.INT16, DataType.INT32):
            assert IntHandler(data_type).data_type == data_type

    def test_bytes_per_vector(self):
        assert FloatVectorHandler().get_bytes_per_vector(128) == 128
        assert BinaryVectorHandler().get_bytes_per_vector(128) == 16

    def test_scalar_field_extraction(self):
        scalar_field = schema_pb2.ScalarField()
        scalar_field.string_data.data.extend(["a", "b"])
        assert VarcharHandler().extract_from_scalar_field(scalar_field) == ["a", "b"]

    def test_json_scalar_field_extraction(self):
        scalar_field = schema_pb2.ScalarField()
        scalar_field.json_data.data.append(b"{}")
        assert JsonHandler().extract_from_scalar_field(scalar_field) == [b"{}"]

    def test_json_load_object(self):
        assert JsonHandler.load_object(b'{"a": [1]}', 0, "f") == {"a": [1]}
