from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# PUBLIC_INTERFACE
@dataclass
class Todo:
    """
    The Todo entity as held by the service and the storage backends.

    Fields:
    - title: Free text, no length or emptiness constraint
    - completed: Completion flag, False until explicitly set
    - id: Unique integer identifier; None until the storage layer assigns one

    Construction forms:
        Todo()                      # all defaults, no id
        Todo("Buy milk", False)     # title and completed, no id
    """

    title: Optional[str] = None
    completed: bool = False
    id: Optional[int] = None
