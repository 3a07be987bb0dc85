"""Rich rendering of registry contents."""

from rich.markup import escape
from rich.table import Table

from datamodels.core.registry import Registry
from datamodels.core.value import as_string


def build_attribute_table(registry: Registry) -> Table:
    """Build a table of every attribute's name, kind, source, and resolved value.

    Entries shadowed by an earlier entry with the same name are marked.
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("name", style="cyan", no_wrap=True)
    table.add_column("type", no_wrap=True)
    table.add_column("source", no_wrap=True)
    table.add_column("value")

    seen: set[str] = set()
    for attribute, (name, value) in zip(registry.attributes, registry.for_each(), strict=True):
        if name in seen:
            source = "[dim]shadowed[/dim]"
        elif attribute.is_computed:
            source = "computed"
        else:
            source = "stored"
        seen.add(name)
        table.add_row(escape(name), value.kind.name, source, escape(as_string(value)))
    return table
