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

from .client import __version__
from .client.data_types import DataType
from .client.entity_helper import (
    get_dynamic_field_wrapper,
    get_field_wrapper,
    wrap_fields_data,
)
from .client.field_data_wrapper import FieldDataWrapper
from .exceptions import (
    DataTypeNotSupportException,
    ExceptionsMessage,
    IllegalResponseException,
    IndexOutOfRangeException,
    JsonOnlyOperationException,
    MalformedJsonException,
    MilvusException,
    NotAVectorFieldException,
    NumberParseException,
    ParamError,
    SizeMismatchException,
)
from .settings import Config

__all__ = [
    "Config",
    "DataType",
    "DataTypeNotSupportException",
    "ExceptionsMessage",
    "FieldDataWrapper",
    "IllegalResponseException",
    "IndexOutOfRangeException",
    "JsonOnlyOperationException",
    "MalformedJsonException",
    "MilvusException",
    "NotAVectorFieldException",
    "NumberParseException",
    "ParamError",
    "SizeMismatchException",
    "__version__",
    "get_dynamic_field_wrapper",
    "get_field_wrapper",
    "wrap_fields_data",
]
