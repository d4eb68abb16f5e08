# clinic/resources/remote.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Type

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from clinic.extensions import db
from clinic.domain.invariants.exceptions import (
    ClinicError,
    QueryError,
    ValidationError,
)
from clinic.normalizers.content import normalize_row
from clinic.utils.media import upload_image
from clinic.utils.transaction import transactional


@dataclass(frozen=True, eq=False)
class Query:
    """
    One logical read against a single table.

    filters maps a model column to the name of a resource parameter. A
    parameter whose value is None does not constrain the query. validate,
    when set, checks and cleans values before they are written.
    """
    model: Type[Any]
    many: bool = False
    filters: Mapping[str, str] = field(default_factory=dict)
    static_filters: Mapping[str, Any] = field(default_factory=dict)
    where: Optional[Callable[[Any, Mapping[str, Any]], Any]] = None
    order_by: Optional[str] = None
    descending: bool = False
    default: Optional[Callable[[Mapping[str, Any]], Dict[str, Any]]] = None
    mapper: Callable[[Any], Any] = normalize_row
    validate: Optional[Callable[..., Dict[str, Any]]] = None

    def bound_values(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        values = dict(self.static_filters)
        for column, param in self.filters.items():
            if params.get(param) is not None:
                values[column] = params[param]
        return values

    def scoped(self, params: Mapping[str, Any]):
        query = self.model.query.filter_by(**self.bound_values(params))
        if self.where is not None:
            query = self.where(query, params)
        return query

    def find(self, params: Mapping[str, Any], row_id: str):
        """The row with this id, if it is one the resource can see."""
        return self.scoped(params).filter(self.model.id == row_id).first()

    def run(self, params: Mapping[str, Any]) -> Any:
        query = self.scoped(params)

        if self.order_by:
            column = getattr(self.model, self.order_by)
            query = query.order_by(column.desc() if self.descending else column.asc())

        if self.many:
            return [self.mapper(row) for row in query.all()]

        row = query.first()
        if row is None:
            return self.default(params) if self.default else None
        return self.mapper(row)


class RemoteResource:
    """
    Bridges one or more tables to a {data, is_loading, error} state.

    Every content type of the site is an instance of this class (see
    clinic.resources.registry). Failures never escape fetch/update/insert:
    they are logged, kept in ``error`` and reported as ``False``.
    """

    def __init__(
        self,
        name: str,
        queries: Mapping[str, Query],
        *,
        image_purpose: Optional[str] = None,
        **params: Any,
    ) -> None:
        if not queries:
            raise ValueError("A resource needs at least one query")

        self.name = name
        self.queries: Dict[str, Query] = dict(queries)
        self.image_purpose = image_purpose or name
        self.params: Dict[str, Any] = dict(params)

        self.data: Any = None
        self.is_loading = False
        self.error: Optional[Exception] = None

    @property
    def primary(self) -> str:
        return next(iter(self.queries))

    # -------------------------------------------------
    # Reads
    # -------------------------------------------------
    def fetch(self) -> "RemoteResource":
        self.is_loading = True
        self.error = None
        try:
            results = {
                key: query.run(self.params)
                for key, query in self.queries.items()
            }
        except (SQLAlchemyError, ClinicError) as exc:
            db.session.rollback()
            current_app.logger.error("Error fetching %s: %s", self.name, exc)
            self.error = QueryError(f"Failed to load {self.name}")
        else:
            self.data = results[self.primary] if len(results) == 1 else results
        finally:
            self.is_loading = False
        return self

    def refresh(self) -> "RemoteResource":
        return self.fetch()

    def set_params(self, **params: Any) -> "RemoteResource":
        changed = any(self.params.get(key) != value for key, value in params.items())
        self.params.update(params)
        if changed:
            self.fetch()
        return self

    def current(self, key: Optional[str] = None) -> Any:
        key = key or self.primary
        if len(self.queries) == 1:
            return self.data
        return (self.data or {}).get(key)

    # -------------------------------------------------
    # Writes
    # -------------------------------------------------
    def update(
        self,
        patch: Mapping[str, Any],
        image: Any = None,
        *,
        target: Optional[str] = None,
        row_id: Optional[str] = None,
    ) -> bool:
        key = target or self.primary
        try:
            query = self._query(key)
            values = self._checked(query, patch, allow_empty=image is not None, partial=True)

            if row_id is None:
                row_id = self._current_id(key, query)

            if image is not None:
                if "image_url" not in query.model.EDITABLE_FIELDS:
                    raise ValidationError(f"{self.name} does not accept images")
                values["image_url"] = upload_image(
                    image, purpose=self.image_purpose, entity=self.name
                )

            with transactional():
                if row_id:
                    row = query.find(self.params, row_id)
                    if row is None:
                        raise ValidationError(f"{self.name} not found")
                else:
                    row = query.scoped(self.params).first() or self._materialize_default(query)
                for field_name, value in values.items():
                    setattr(row, field_name, value)
        except (SQLAlchemyError, ClinicError) as exc:
            current_app.logger.error("Error updating %s: %s", self.name, exc)
            self.error = exc
            return False

        self.fetch()
        return True

    def insert(self, values: Mapping[str, Any], *, target: Optional[str] = None) -> bool:
        key = target or self.primary
        try:
            query = self._query(key)
            checked = self._checked(query, values)
            for column, value in query.bound_values(self.params).items():
                checked.setdefault(column, value)
            if query.validate is not None:
                checked = query.validate(checked, partial=False)

            with transactional():
                db.session.add(query.model(**checked))
        except (SQLAlchemyError, ClinicError) as exc:
            current_app.logger.error("Error adding to %s: %s", self.name, exc)
            self.error = exc
            return False

        self.fetch()
        return True

    def to_json(self) -> Dict[str, Any]:
        return {
            "data": self.data,
            "is_loading": self.is_loading,
            "error": str(self.error) if self.error else None,
        }

    # -------------------------------------------------
    # Helpers
    # -------------------------------------------------
    def _query(self, key: str) -> Query:
        if key not in self.queries:
            raise ValidationError(f"Unknown part '{key}' for {self.name}")
        return self.queries[key]

    def _checked(self, query, values, *, allow_empty=False, partial=False) -> Dict[str, Any]:
        values = dict(values or {})
        unknown = sorted(set(values) - query.model.EDITABLE_FIELDS)
        if unknown:
            raise ValidationError(
                f"Fields not editable on {self.name}: {', '.join(unknown)}"
            )
        if not values and not allow_empty:
            raise ValidationError("No valid fields provided for update")
        if partial and values and query.validate is not None:
            values = query.validate(values, partial=True)
        return values

    def _current_id(self, key: str, query: Query) -> Optional[str]:
        if query.many:
            raise ValidationError("row_id is required to update a list item")
        current = self.current(key)
        if isinstance(current, dict):
            return current.get("id")
        return None

    def _materialize_default(self, query: Query):
        # Editing a page that still shows its built-in default creates the
        # row the first time.
        if query.many or query.default is None:
            raise ValidationError(f"{self.name} not found")

        seed = {
            k: v for k, v in query.default(self.params).items()
            if k in query.model.EDITABLE_FIELDS
        }
        seed.update(query.bound_values(self.params))
        row = query.model(**seed)
        db.session.add(row)
        return row
