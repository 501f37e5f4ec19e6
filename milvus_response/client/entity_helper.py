"""Helpers to look up the wrapped columns of a query or search result."""

import logging
from typing import Dict, Iterable, Optional

from milvus_response.exceptions import ExceptionsMessage, ParamError
from milvus_response.grpc_gen import schema_pb2

from .field_data_wrapper import FieldDataWrapper

logger = logging.getLogger(__name__)


def wrap_fields_data(fields_data: Iterable[schema_pb2.FieldData]) -> Dict[str, FieldDataWrapper]:
    """Wrap every column of a result, keyed by field name.

    A later column with an already seen name replaces the earlier one.
    """
    wrappers = {}
    for field_data in fields_data:
        if field_data.field_name in wrappers:
            logger.warning(f"duplicate field {field_data.field_name!r} in result, keep the last one")
        wrappers[field_data.field_name] = FieldDataWrapper(field_data)
    return wrappers


def get_field_wrapper(
    fields_data: Iterable[schema_pb2.FieldData], field_name: str
) -> FieldDataWrapper:
    for field_data in fields_data:
        if field_data.field_name == field_name:
            return FieldDataWrapper(field_data)
    raise ParamError(message=ExceptionsMessage.FieldNotExist % field_name)


def get_dynamic_field_wrapper(
    fields_data: Iterable[schema_pb2.FieldData],
) -> Optional[FieldDataWrapper]:
    for field_data in fields_data:
        wrapper = FieldDataWrapper(field_data)
        if wrapper.is_dynamic_field():
            return wrapper
    return None
