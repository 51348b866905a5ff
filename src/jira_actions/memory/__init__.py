"""Memory module.

Provides set-valued slots shared between the actions of a journey:
issue keys, issues and JQL queries. A slot is created once per journey
and passed into each action's constructor.
"""

from jira_actions.memory.base import SetMemory
from jira_actions.memory.issue import IssueMemory
from jira_actions.memory.issue_key import IssueKeyMemory
from jira_actions.memory.jql import JqlMemory
from jira_actions.memory.types import Issue

__all__ = ["Issue", "IssueKeyMemory", "IssueMemory", "JqlMemory", "SetMemory"]
