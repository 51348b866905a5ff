"""Core types for the memory module.

Defines Issue, the fact a View Issue action leaves behind for later steps.
"""

from pydantic import BaseModel, ConfigDict, Field


class Issue(BaseModel):
    """An issue seen by a previous action.

    Frozen, so instances are hashable and stored by value in set slots.

    Attributes:
        key: Issue key (e.g. "ABC-1")
        editable: Whether the simulated user may edit the issue
        id: Server-assigned issue id
        type: Issue type name (e.g. "Bug")
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1)
    editable: bool
    id: int
    type: str
