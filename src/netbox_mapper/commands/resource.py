"""Resource commands — CRUD for any registered kind.

Kinds are NetBox object types by short name, for example:
  - ``vlan``
  - ``ip-address``
  - ``virtual-machine``

Use ``kinds`` to list every registered kind with its collection path.
"""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console

from netbox_mapper.client.errors import error_handler
from netbox_mapper.commands._common import (
    DataOpt,
    FormatOpt,
    KeyOpt,
    ProfileOpt,
    TokenOpt,
    UrlOpt,
    make_client,
    parse_data,
    parse_pairs,
)
from netbox_mapper.mapper.resource import Resource
from netbox_mapper.models import SCHEMAS, PaginatedResponse, get_schema
from netbox_mapper.output.formatter import output

app = typer.Typer(
    name="resource",
    help="Create, read, update and delete NetBox objects by kind.",
)
console = Console()

KindArg = Annotated[str, typer.Argument(help="Resource kind (e.g. vlan, ip-address)")]
IdArg = Annotated[str, typer.Argument(help="Object id")]


@error_handler
def kinds(fmt: FormatOpt = "table") -> None:
    """List registered resource kinds."""
    columns = ["Kind", "Title", "Path", "Natural keys"]
    rows = [
        [s.kind, s.title, s.path, ", ".join(s.lookup_fields)]
        for s in SCHEMAS.values()
    ]
    data = [
        {"kind": s.kind, "title": s.title, "path": s.path, "lookup": list(s.lookup_fields)}
        for s in SCHEMAS.values()
    ]
    output(data, fmt, columns=columns, rows=rows, title="Resource kinds")


@app.command("list")
@error_handler
def list_resources(
    kind: KindArg,
    filters: Annotated[
        Optional[list[str]],
        typer.Option("--filter", help="Query filter key=value (repeatable)"),
    ] = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    key: KeyOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List objects of a kind (one page, as returned by the API)."""
    schema = get_schema(kind)
    params = parse_pairs(filters, "--filter")
    with make_client(profile, url, key, token) as client:
        data = Resource(client, schema).list(params)
        page = PaginatedResponse.model_validate(data)
        columns = ["ID", "Display", *schema.lookup_fields]
        rows = [
            [item.get("id"), item.get("display"), *(item.get(f) for f in schema.lookup_fields)]
            for item in page.results
        ]
        shown = f"{len(page.results)} of {page.count}"
        output(data, fmt, columns=columns, rows=rows, title=f"{schema.title} ({shown})")


@app.command()
@error_handler
def show(
    kind: KindArg,
    object_id: Annotated[
        Optional[str],
        typer.Argument(help="Object id (omit to look up by --by)"),
    ] = None,
    lookup: Annotated[
        Optional[list[str]],
        typer.Option("--by", "-b", help="Natural key field=value (repeatable)"),
    ] = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    key: KeyOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show one object, by id or by natural key."""
    schema = get_schema(kind)
    with make_client(profile, url, key, token) as client:
        res = Resource(client, schema, id=object_id, **parse_pairs(lookup, "--by"))
        res.load()
        output(res, fmt, kv=True, title=f"{schema.title} {res.id}")


@app.command()
@error_handler
def create(
    kind: KindArg,
    data: DataOpt,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    key: KeyOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Create an object from a JSON field map."""
    schema = get_schema(kind)
    fields = parse_data(data)
    with make_client(profile, url, key, token) as client:
        res = Resource(client, schema, **fields).create()
        console.print(f"[green]{schema.title} {res.id} created.[/]")
        if fmt != "table":
            output(res, fmt)


def _modify(kind: str, object_id: str, data: str, mode: str, conn: tuple) -> Resource:
    schema = get_schema(kind)
    fields = parse_data(data)
    with make_client(*conn) as client:
        res = Resource(client, schema, id=object_id).load()
        res.set(**fields)
        return res.edit() if mode == "edit" else res.update()


@app.command()
@error_handler
def update(
    kind: KindArg,
    object_id: IdArg,
    data: DataOpt,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    key: KeyOpt = None,
    token: TokenOpt = None,
) -> None:
    """Partially update an object (PATCH) after loading its current state."""
    res = _modify(kind, object_id, data, "update", (profile, url, key, token))
    console.print(f"[green]{res.schema.title} {res.id} updated.[/]")


@app.command()
@error_handler
def edit(
    kind: KindArg,
    object_id: IdArg,
    data: DataOpt,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    key: KeyOpt = None,
    token: TokenOpt = None,
) -> None:
    """Replace an object (PUT) after loading its current state."""
    res = _modify(kind, object_id, data, "edit", (profile, url, key, token))
    console.print(f"[green]{res.schema.title} {res.id} replaced.[/]")


@app.command()
@error_handler
def delete(
    kind: KindArg,
    object_id: IdArg,
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    key: KeyOpt = None,
    token: TokenOpt = None,
) -> None:
    """Delete an object."""
    schema = get_schema(kind)
    if not force:
        from rich.prompt import Confirm

        if not Confirm.ask(f"Delete {schema.title} {object_id}?"):
            console.print("Cancelled.")
            return
    with make_client(profile, url, key, token) as client:
        Resource(client, schema, id=object_id).delete()
        console.print(f"[green]{schema.title} {object_id} deleted.[/]")
