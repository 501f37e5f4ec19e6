from milvus_response.client.data_types import DataType
from milvus_response.grpc_gen import schema_pb2


class TestSchemaMessages:
    def test_data_type_values(self):
        assert DataType.BOOL == 1
        assert DataType.INT64 == 5
        assert DataType.VARCHAR == 21
        assert DataType.JSON == 23
        assert DataType.BINARY_VECTOR == 100
        assert DataType.FLOAT_VECTOR == 101
        assert str(DataType.FLOAT_VECTOR) == "101"

    def test_from_wire(self):
        assert DataType.from_wire(101) is DataType.FLOAT_VECTOR
        assert DataType.from_wire(31337) is DataType.UNKNOWN

    def test_field_data_wire_round_trip(self):
        field_data = schema_pb2.FieldData(
            type=DataType.ARRAY, field_name="tags", field_id=101, is_dynamic=False
        )
        field_data.scalars.array_data.element_type = DataType.VARCHAR
        field_data.scalars.array_data.data.add().string_data.data.extend(["a", "b"])

        parsed = schema_pb2.FieldData.FromString(field_data.SerializeToString())
        assert parsed == field_data
        assert parsed.WhichOneof("field") == "scalars"
        assert parsed.scalars.WhichOneof("data") == "array_data"

    def test_vectors_oneof(self):
        field_data = schema_pb2.FieldData(type=DataType.BINARY_VECTOR)
        field_data.vectors.dim = 8
        field_data.vectors.binary_vector = b"\xff"
        assert field_data.WhichOneof("field") == "vectors"
        assert field_data.vectors.WhichOneof("data") == "binary_vector"

    def test_known_field_numbers(self):
        assert schema_pb2.FieldData.IS_DYNAMIC_FIELD_NUMBER == 6
        assert schema_pb2.ScalarField.JSON_DATA_FIELD_NUMBER == 9
        assert schema_pb2.VectorField.BINARY_VECTOR_FIELD_NUMBER == 3
