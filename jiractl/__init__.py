"""JQL query building, Atlassian document translation and plain-text views of Jira data."""

__version__ = "0.1.0"