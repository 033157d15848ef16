"""
Pydantic schemas for connection arguments and results.

These models are the public shape handed back to query-serving callers.
"""

# Re-export schemas for convenient imports.
from .connection import Connection as Connection
from .connection import ConnectionArguments as ConnectionArguments
from .connection import Edge as Edge
from .connection import PageInfo as PageInfo
