import sys

from mcp_add_numbers.cli import main

sys.exit(main())  # type: ignore[call-arg]
