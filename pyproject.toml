[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jiractl"
version = "0.1.0"
description = "JQL query building, Atlassian document translation and plain-text views of Jira issues, boards, projects and sprints"
requires-python = ">=3.10"
dependencies = []
keywords = ["jira", "jql", "adf", "markdown", "issue-tracker"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Bug Tracking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jiractl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
