import pytest
from milvus_response import (
    FieldDataWrapper,
    get_dynamic_field_wrapper,
    get_field_wrapper,
    wrap_fields_data,
)
from milvus_response.client.data_types import DataType
from milvus_response.exceptions import ParamError
from milvus_response.grpc_gen import schema_pb2


@pytest.fixture
def fields_data():
    pk = schema_pb2.FieldData(type=DataType.INT64, field_name="id")
    pk.scalars.long_data.data.extend([1, 2])

    vec = schema_pb2.FieldData(type=DataType.FLOAT_VECTOR, field_name="vec")
    vec.vectors.dim = 2
    vec.vectors.float_vector.data.extend([0.5, 1.0, 1.5, 2.0])

    meta = schema_pb2.FieldData(type=DataType.JSON, field_name="$meta", is_dynamic=True)
    meta.scalars.json_data.data.extend([b'{"color": "red"}', b'{"color": "blue"}'])
    return [pk, vec, meta]


class TestEntityHelper:
    def test_wrap_fields_data(self, fields_data):
        wrappers = wrap_fields_data(fields_data)
        assert list(wrappers) == ["id", "vec", "$meta"]
        assert all(isinstance(w, FieldDataWrapper) for w in wrappers.values())
        assert wrappers["vec"].get_field_data() == [[0.5, 1.0], [1.5, 2.0]]

    def test_wrap_duplicate_names_keeps_last(self, fields_data):
        other = schema_pb2.FieldData(type=DataType.INT64, field_name="id")
        other.scalars.long_data.data.extend([9])
        wrappers = wrap_fields_data([*fields_data, other])
        assert wrappers["id"].get_field_data() == [9]

    def test_get_field_wrapper(self, fields_data):
        wrapper = get_field_wrapper(fields_data, "id")
        assert wrapper.get_field_data() == [1, 2]

    def test_get_field_wrapper_missing(self, fields_data):
        with pytest.raises(ParamError, match="doesn't exist"):
            get_field_wrapper(fields_data, "nope")

    def test_get_dynamic_field_wrapper(self, fields_data):
        wrapper = get_dynamic_field_wrapper(fields_data)
        assert wrapper.field_name == "$meta"
        assert wrapper.get_as_string(1, "color") == "blue"

    def test_get_dynamic_field_wrapper_absent(self, fields_data):
        assert get_dynamic_field_wrapper(fields_data[:2]) is None
