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

"""
Field data messages of the Milvus schema protocol.

Only the messages needed to carry one column of a query or search result are
described here. Field numbers follow ``schema.proto`` so that payloads produced
by a Milvus server parse unchanged; the descriptors live under their own proto
package so they never collide with another copy of the Milvus stubs loaded in
the same process.
"""

from google.protobuf import descriptor_pb2 as _descriptor_pb2
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf.internal import builder as _builder

_PACKAGE = "milvus_response.schema"
_FIELD = _descriptor_pb2.FieldDescriptorProto

_DATA_TYPES = (
    ("None", 0),
    ("Bool", 1),
    ("Int8", 2),
    ("Int16", 3),
    ("Int32", 4),
    ("Int64", 5),
    ("Float", 10),
    ("Double", 11),
    ("String", 20),
    ("VarChar", 21),
    ("Array", 22),
    ("JSON", 23),
    ("Geometry", 24),
    ("Text", 25),
    ("Timestamptz", 26),
    ("BinaryVector", 100),
    ("FloatVector", 101),
    ("Float16Vector", 102),
    ("BFloat16Vector", 103),
    ("SparseFloatVector", 104),
    ("Int8Vector", 105),
    ("ArrayOfVector", 200),
    ("ArrayOfStruct", 201),
)

# (message name, element type of its repeated ``data`` field)
_FLAT_ARRAYS = (
    ("BoolArray", _FIELD.TYPE_BOOL),
    ("IntArray", _FIELD.TYPE_INT32),
    ("LongArray", _FIELD.TYPE_INT64),
    ("FloatArray", _FIELD.TYPE_FLOAT),
    ("DoubleArray", _FIELD.TYPE_DOUBLE),
    ("BytesArray", _FIELD.TYPE_BYTES),
    ("StringArray", _FIELD.TYPE_STRING),
    ("JSONArray", _FIELD.TYPE_BYTES),
)


def _type_name(name: str) -> str:
    return f".{_PACKAGE}.{name}"


def _add_field(message, name, number, field_type, type_name=None, repeated=False, oneof=None):
    field = message.field.add(
        name=name,
        number=number,
        type=field_type,
        label=_FIELD.LABEL_REPEATED if repeated else _FIELD.LABEL_OPTIONAL,
    )
    if type_name is not None:
        field.type_name = _type_name(type_name)
    if oneof is not None:
        field.oneof_index = oneof
    return field


def _build_file_descriptor() -> _descriptor_pb2.FileDescriptorProto:
    file_proto = _descriptor_pb2.FileDescriptorProto(
        name="milvus_response/schema.proto",
        package=_PACKAGE,
        syntax="proto3",
    )

    data_type = file_proto.enum_type.add(name="DataType")
    for name, number in _DATA_TYPES:
        data_type.value.add(name=name, number=number)

    for name, element_type in _FLAT_ARRAYS:
        message = file_proto.message_type.add(name=name)
        _add_field(message, "data", 1, element_type, repeated=True)

    array_array = file_proto.message_type.add(name="ArrayArray")
    _add_field(array_array, "data", 1, _FIELD.TYPE_MESSAGE, "ScalarField", repeated=True)
    _add_field(array_array, "element_type", 2, _FIELD.TYPE_ENUM, "DataType")

    scalar_field = file_proto.message_type.add(name="ScalarField")
    scalar_field.oneof_decl.add(name="data")
    for number, (name, type_name) in enumerate(
        (
            ("bool_data", "BoolArray"),
            ("int_data", "IntArray"),
            ("long_data", "LongArray"),
            ("float_data", "FloatArray"),
            ("double_data", "DoubleArray"),
            ("string_data", "StringArray"),
            ("bytes_data", "BytesArray"),
            ("array_data", "ArrayArray"),
            ("json_data", "JSONArray"),
        ),
        start=1,
    ):
        _add_field(scalar_field, name, number, _FIELD.TYPE_MESSAGE, type_name, oneof=0)

    vector_field = file_proto.message_type.add(name="VectorField")
    vector_field.oneof_decl.add(name="data")
    _add_field(vector_field, "dim", 1, _FIELD.TYPE_INT64)
    _add_field(vector_field, "float_vector", 2, _FIELD.TYPE_MESSAGE, "FloatArray", oneof=0)
    _add_field(vector_field, "binary_vector", 3, _FIELD.TYPE_BYTES, oneof=0)

    field_data = file_proto.message_type.add(name="FieldData")
    field_data.oneof_decl.add(name="field")
    _add_field(field_data, "type", 1, _FIELD.TYPE_ENUM, "DataType")
    _add_field(field_data, "field_name", 2, _FIELD.TYPE_STRING)
    _add_field(field_data, "scalars", 3, _FIELD.TYPE_MESSAGE, "ScalarField", oneof=0)
    _add_field(field_data, "vectors", 4, _FIELD.TYPE_MESSAGE, "VectorField", oneof=0)
    _add_field(field_data, "field_id", 5, _FIELD.TYPE_INT64)
    _add_field(field_data, "is_dynamic", 6, _FIELD.TYPE_BOOL)
    _add_field(field_data, "valid_data", 7, _FIELD.TYPE_BOOL, repeated=True)

    return file_proto


DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(
    _build_file_descriptor().SerializeToString()
)

_globals = globals()
_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, _globals)
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, "milvus_response.grpc_gen.schema_pb2", _globals)
