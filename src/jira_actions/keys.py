"""Action-kind tags used to key observations and metrics."""

VIEW_ISSUE = "View Issue"
SEARCH_WITH_JQL = "Search with JQL"
