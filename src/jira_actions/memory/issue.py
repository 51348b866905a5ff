"""Memory of issues whose attributes were observed during a journey."""

from jira_actions.memory.base import SetMemory
from jira_actions.memory.types import Issue


class IssueMemory(SetMemory[Issue]):
    """Issues fetched by View Issue actions.

    remember() merges issues into the set. Issues are frozen, so a stored
    issue never changes under a reader. recall(predicate) picks a random
    issue satisfying the predicate, for example only editable ones:

        >>> memory.recall(lambda issue: issue.editable)
    """
