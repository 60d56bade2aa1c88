"""An MCP tool server that adds two integers.

```python
from mcp_add_numbers import add

add(2, 3)
# AdditionResult(number1=2, number2=3, result=5, operation='2 + 3 = 5')
```
"""

from .addition import INT64_MAX, INT64_MIN, AdditionResult, add
from .exceptions import AdderError, ArithmeticOverflowError, InvalidInputError
from .registry import ToolEntry, ToolRegistry, default_registry
from .server import create_server
from .settings import ServerSettings

__all__ = [
    "AdderError",
    "AdditionResult",
    "ArithmeticOverflowError",
    "INT64_MAX",
    "INT64_MIN",
    "InvalidInputError",
    "ServerSettings",
    "ToolEntry",
    "ToolRegistry",
    "add",
    "create_server",
    "default_registry",
]
