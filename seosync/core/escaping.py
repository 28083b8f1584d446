"""Escaping Primitive — neutralizes HTML-significant characters in free text.

Invariants:
    - Every free-text value assigned to a tag attribute passes through escape()
    - Output never contains <, >, &, " or ' in raw form

Design Decisions:
    - html.escape(quote=True): the same primitive the audit tooling uses for
      report output; the attribute value stored in the document is the escaped
      text, matching the browser-side setAttribute(escape(value)) contract
"""

from html import escape as _html_escape


def escape(value: object) -> str:
    """Escape a value for safe use as attribute or text content."""
    return _html_escape(str(value), quote=True)
