"""Memory of issue keys seen during a journey."""

from jira_actions.memory.base import SetMemory


class IssueKeyMemory(SetMemory[str]):
    """Issue keys discovered by earlier actions (e.g. a JQL search).

    remember() merges keys into the set; recall() returns a random known key
    or None when no key has been discovered yet.
    """
