"""Generic CRUD engine over a ResourceSchema."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from netbox_mapper.client.errors import (
    AmbiguousResultError,
    FieldError,
    MissingKeyError,
    NotFoundError,
    ResponseDecodeError,
    ValidationError,
)
from netbox_mapper.mapper import codec
from netbox_mapper.mapper.fields import FieldKind, ResourceSchema

if TYPE_CHECKING:
    from netbox_mapper.client.gateway import NetboxClient

logger = logging.getLogger(__name__)


class Resource:
    """One NetBox object of a given kind, held in memory.

    Writable fields are read and written as attributes (``vlan.name``), by
    item access (``vlan["name"]``) or fluently with :meth:`set`. Read-only
    fields are readable the same way but only ever change when a response
    is decoded. ``id`` is ``None`` until the object exists on the service.

    Example::

        vlan = Resource(client, VLAN, vid=3999, name="test-vlan")
        vlan.create()
        vlan.description = "uplink"
        vlan.update()
    """

    def __init__(
        self,
        client: NetboxClient,
        schema: ResourceSchema,
        *,
        id: str | int | None = None,
        **fields: Any,
    ) -> None:
        object.__setattr__(self, "_client", client)
        object.__setattr__(self, "_schema", schema)
        object.__setattr__(self, "_id", codec.extract_id(id))
        object.__setattr__(self, "_values", codec.initial_values(schema))
        object.__setattr__(self, "_read_only", codec.initial_read_only(schema))
        object.__setattr__(self, "_expanded", {})
        self.set(**fields)

    # --- identity and field access ---

    @property
    def schema(self) -> ResourceSchema:
        return self._schema

    @property
    def client(self) -> NetboxClient:
        return self._client

    @property
    def id(self) -> str | None:
        return self._id

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    @property
    def values(self) -> dict[str, Any]:
        """Copy of the writable fields."""
        return copy.deepcopy(self._values)

    @property
    def read_only(self) -> dict[str, Any]:
        """Copy of the read-only fields from the last response."""
        return copy.deepcopy(self._read_only)

    @property
    def expanded(self) -> dict[str, Any]:
        """Nested objects of expandable foreign keys from the last response."""
        return copy.deepcopy(self._expanded)

    def get(self, name: str) -> Any:
        if name == "id":
            return self._id
        if name in self._values:
            return self._values[name]
        if name in self._read_only:
            return self._read_only[name]
        raise FieldError(f"{self._schema.title} has no field '{name}'")

    def set(self, **fields: Any) -> Resource:
        """Assign writable fields; returns ``self`` for chaining."""
        for name, value in fields.items():
            if name == "id":
                object.__setattr__(self, "_id", codec.extract_id(value))
                continue
            if not self._schema.has_field(name):
                raise FieldError(f"{self._schema.title} has no field '{name}'")
            spec = self._schema.field(name)
            if not spec.writable:
                raise FieldError(f"Field '{name}' of {self._schema.title} is read-only")
            if spec.kind is FieldKind.FOREIGN_KEY:
                value = codec.extract_id(value)
            elif spec.kind is FieldKind.FOREIGN_KEY_LIST:
                value = codec.extract_id_list(value)
            elif spec.kind is FieldKind.ENUM:
                value = codec.extract_enum(value, spec.default)
            self._values[name] = value
        return self

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self.get(name)
        except FieldError:
            raise AttributeError(
                f"{type(self).__name__} of kind '{self._schema.kind}' has no attribute '{name}'"
            ) from None

    def __setattr__(self, name: str, value: Any) -> None:
        self.set(**{name: value})

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(**{name: value})

    def add_to_list(self, name: str, *identifiers: str | int) -> Resource:
        """Append identifiers to a list-of-foreign-key field, skipping duplicates."""
        current = self._list_field(name)
        for ident in identifiers:
            ident = str(ident)
            if ident not in current:
                current.append(ident)
        return self.set(**{name: current})

    def remove_from_list(self, name: str, *identifiers: str | int) -> Resource:
        """Remove identifiers from a list-of-foreign-key field."""
        drop = {str(i) for i in identifiers}
        return self.set(**{name: [i for i in self._list_field(name) if i not in drop]})

    def _list_field(self, name: str) -> list[str]:
        if not self._schema.has_field(name) or (
            self._schema.field(name).kind is not FieldKind.FOREIGN_KEY_LIST
        ):
            raise FieldError(f"'{name}' is not a list of references on {self._schema.title}")
        return list(self._values.get(name) or [])

    def payload(self) -> dict[str, Any]:
        """The request body create, edit and update would send."""
        return codec.build_payload(self._schema, self._values)

    def as_dict(self) -> dict[str, Any]:
        return {"id": self._id, **self.values, **self.read_only}

    def __repr__(self) -> str:
        keys = ", ".join(
            f"{k}={self._values.get(k)!r}" for k in self._schema.lookup_fields
            if not codec.is_empty(self._values.get(k))
        )
        return f"<{self._schema.title} id={self._id!r}{', ' + keys if keys else ''}>"

    # --- operations ---

    def create(self) -> Resource:
        """POST the payload and take the created object's state."""
        missing = codec.missing_required(self._schema, self._values)
        if missing:
            raise ValidationError(
                f"Missing {', '.join(missing)} for {self._schema.title}"
            )
        logger.debug("create %s", self._schema.kind)
        self._apply(self._client.post(self._schema.path, self.payload()))
        return self

    def load(self) -> Resource:
        """Refresh from the service by id, or find by natural key."""
        if self._id is not None:
            logger.debug("load %s id=%s", self._schema.kind, self._id)
            self._apply(self._client.get(self._schema.item_path(self._id)))
            return self

        params = self._lookup_params()
        logger.debug("load %s by %s", self._schema.kind, params)
        data = self._client.get(self._schema.path, params)
        if not isinstance(data, Mapping):
            raise ResponseDecodeError(
                f"Expected a list response object for {self._schema.title}, got {type(data).__name__}",
                body=data,
            )
        count = data.get("count") or 0
        criteria = ", ".join(f"{k}={v!r}" for k, v in params.items())
        if count == 0:
            raise NotFoundError(f"{self._schema.title} not found for {criteria}")
        if count > 1:
            raise AmbiguousResultError(
                f"Multiple {self._schema.title} entries ({count}) found for {criteria}"
            )
        results = data.get("results") or []
        if not results:
            raise ResponseDecodeError(
                f"{self._schema.title} list response reports count=1 but has no results",
                body=data,
            )
        self._apply(results[0])
        return self

    def list(self, filters: Mapping[str, Any] | None = None) -> Any:
        """GET the collection with caller filters, returning the raw page."""
        logger.debug("list %s %s", self._schema.kind, dict(filters or {}))
        return self._client.get(self._schema.path, filters)

    def edit(self) -> Resource:
        """Full replace (PUT)."""
        path = self._require_id("edit")
        self._apply(self._client.put(path, self.payload()))
        return self

    def update(self) -> Resource:
        """Partial update (PATCH) with the same payload as edit."""
        path = self._require_id("update")
        self._apply(self._client.patch(path, self.payload()))
        return self

    def delete(self) -> Resource:
        """DELETE, then forget the identifier; local fields are kept."""
        path = self._require_id("delete")
        self._client.delete(path)
        object.__setattr__(self, "_id", None)
        return self

    # --- helpers ---

    def _require_id(self, operation: str) -> str:
        if self._id is None:
            raise MissingKeyError(f"Can't {operation} {self._schema.title} without 'id'")
        logger.debug("%s %s id=%s", operation, self._schema.kind, self._id)
        return self._schema.item_path(self._id)

    def _lookup_params(self) -> dict[str, Any]:
        schema = self._schema
        params: dict[str, Any] = {}
        identifying = 0
        for key in schema.lookup:
            value = self._values.get(key.field)
            if codec.is_empty(value):
                if schema.lookup_requires_all and not key.scope:
                    params.clear()
                    identifying = 0
                    break
                continue
            params[key.query_param(value)] = value
            if not key.scope:
                identifying += 1
        if identifying == 0:
            names = [k.field for k in schema.lookup if not k.scope]
            joiner = " and " if schema.lookup_requires_all else " or "
            hint = f" or ({joiner.join(names)})" if names else ""
            raise MissingKeyError(f"Can't load {schema.title} without 'id'{hint}")
        return params

    def _apply(self, response: Any) -> None:
        if not isinstance(response, Mapping):
            raise ResponseDecodeError(
                f"Expected a {self._schema.title} object, got {type(response).__name__}",
                body=response,
            )
        state = codec.decode(self._schema, response, self._values)
        object.__setattr__(self, "_id", state.identifier)
        object.__setattr__(self, "_values", state.values)
        object.__setattr__(self, "_read_only", state.read_only)
        object.__setattr__(self, "_expanded", state.expanded)


def resources(
    client: NetboxClient,
    schema: ResourceSchema,
    items: Iterable[Mapping[str, Any]],
) -> list[Resource]:
    """Wrap raw list results into resources without another request."""
    wrapped = []
    for item in items:
        res = Resource(client, schema)
        res._apply(item)
        wrapped.append(res)
    return wrapped
