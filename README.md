# jiractl

A library of building blocks for a Jira client, using only the standard library.

## What it contains

- `jiractl.query`: `IssueQuery(project, flags)` reads command flags from a
  `FlagParser` and builds a JQL string with `get()`. The flags cover history,
  watching, type, resolution, status, priority, reporter, assignee, component,
  parent, labels, created and updated dates, raw JQL, ordering and direction.
  A date flag of `today`, `week`, `month` or `year` becomes `startOfDay()` and
  the like. A date such as `2020-12-31` is limited to that one day.
  `SprintQuery(flags).get()` builds the sprint state filter, for example
  `state=active,closed`.
- `jiractl.adf`: `ADF.from_dict` / `ADF.to_dict` load and dump Atlassian
  Document Format documents. `ADF.replace_all` rewrites text nodes.
  `Translator(doc, translator).translate()` walks a document.
- `jiractl.markdown.MarkdownTranslator` renders ADF nodes as Markdown. This
  covers headings, lists, tables, code blocks, panels, marks, mentions and
  links. `jiractl.jira_markdown.JiraMarkdownTranslator` does the same, except
  that panels become `{panel:bgColor=...}` blocks.
- `jiractl.models`: dataclasses `Issue`, `IssueFields`, `Comment`,
  `IssueLink`, `User`, `Board`, `Project` and `Sprint`.
- Views:
  - `BoardView` and `ProjectView` write tab-separated tables.
  - `IssueList` has `header()`, `data()`, `render_plain(writer)` and
    `render()`, and takes a `DisplayFormat` (plain, no headers, no truncate,
    columns).
  - `IssueView` shows a single issue with its description, linked issues and
    latest comments. `str(view)` and `render_plain(writer)` give the plain
    form.
  - `SprintList` provides `data()` for sidebar entries, `table_data()`,
    `render_plain(writer)` and `render()`.
  - `EpicList` provides `data()` and `render()`.
- `jiractl.helper`: date formatting, title preparation, padding and gray
  colouring used by the views.
- `jiractl.browser.browse(url)` opens a URL. It runs the command named in
  `JIRA_BROWSER` or `BROWSER` if one is set, and otherwise uses the system
  default browser.
- `jiractl.version.info()` returns a line of version and build information.

When standard output is a terminal, `render()` sends the text through the
pager named in `JIRA_PAGER` or `PAGER`, and falls back to `less -r`.
Otherwise it prints the text.

## What it does not do

- There is no command-line program.
- There is no client for the Jira REST API. Issues, boards, projects and
  sprints must be fetched elsewhere and filled into the `jiractl.models`
  dataclasses.
- The views produce paged plain text, not an interactive full-screen
  interface.
- `IssueView.rendered_out(renderer)` takes an optional callable for the
  Markdown parts. No terminal Markdown renderer is included.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Translate an ADF document to Markdown:

```python
from jiractl.adf import ADF, Translator
from jiractl.markdown import MarkdownTranslator

doc = ADF.from_dict({
    "version": 1,
    "type": "doc",
    "content": [
        {"type": "paragraph", "content": [{"type": "text", "text": "Hello"}]},
    ],
})
print(Translator(doc, MarkdownTranslator()).translate())
```

Build a JQL query from flag values:

```python
from jiractl.query import IssueQuery

class Flags:
    def __init__(self, values):
        self.values = values

    def get_bool(self, name):
        return bool(self.values.get(name, False))

    def get_string(self, name):
        return self.values.get(name, "")

    def get_string_array(self, name):
        return self.values.get(name, [])

    def get_uint(self, name):
        return self.values.get(name, 0)

    def set(self, name, value):
        self.values[name] = value

query = IssueQuery("DEMO", Flags({"status": "In Progress", "order-by": "created"}))
print(query.get())
# project="DEMO" AND status="In Progress" ORDER BY created DESC
```