"""
Type handler registry for data type processing.

This package provides a strategy pattern-based approach to decode the different
data types a FieldData message can carry, instead of one if/elif chain per
operation.

Usage:
    from milvus_response.client.type_handlers import get_type_handler

    handler = get_type_handler(DataType.FLOAT_VECTOR)
    rows = handler.extract_rows(field_data)
"""

# Export base classes
from .base import (
    TypeHandler,
    VectorHandler,
)

# Export complex handlers
from .complex_handlers import (
    ArrayHandler,
    JsonHandler,
)

# Export registry and convenience functions
from .registry import (
    TypeHandlerRegistry,
    get_type_handler,
    get_type_registry,
)

# Export scalar handlers
from .scalar_handlers import (
    BoolHandler,
    DoubleHandler,
    FloatHandler,
    Int64Handler,
    IntHandler,
    VarcharHandler,
)

# Export vector handlers
from .vector_handlers import (
    BinaryVectorHandler,
    FloatVectorHandler,
)

__all__ = [
    "ArrayHandler",
    "BinaryVectorHandler",
    "BoolHandler",
    "DoubleHandler",
    "FloatHandler",
    "FloatVectorHandler",
    "Int64Handler",
    "IntHandler",
    "JsonHandler",
    "TypeHandler",
    "TypeHandlerRegistry",
    "VarcharHandler",
    "VectorHandler",
    "get_type_handler",
    "get_type_registry",
]
