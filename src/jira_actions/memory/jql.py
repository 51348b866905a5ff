"""Memory of JQL queries worth running later in a journey."""

from jira_actions.memory.base import SetMemory
from jira_actions.page import IssuePage


def project_key(issue_key: str) -> str:
    """Return the project part of an issue key ("ABC-1" -> "ABC")."""
    project, _, number = issue_key.rpartition("-")
    if not project or not number:
        return issue_key
    return project


class JqlMemory(SetMemory[str]):
    """Search context shared between actions.

    remember() merges queries into the set. observe() derives queries from a
    fetched issue page instead of taking them directly, so a search step can
    follow a view step without either knowing about the other.
    """

    def observe(self, page: IssuePage) -> None:
        """Derive queries from an issue page and merge them in.

        Args:
            page: A page whose issue has finished loading
        """
        queries = [
            f"project = {project_key(page.issue_key)}",
            f'issuetype = "{page.get_issue_type()}"',
        ]
        self.remember(queries)
