"""Data gateway: the single boundary through which pages read and write rows.

A ``DataGateway`` is built per request from a database session and the
caller's bearer token, and handed to the page controllers. Every table is
reached through a ``TableGateway`` that speaks in plain dicts, validates
payloads against the entity schemas and reports any store failure as a
``RemoteError``.
"""
import uuid
from typing import Any, Iterable

from pydantic import BaseModel, ValidationError
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from app.models.application import Application
from app.models.job import Job
from app.models.profile import Profile
from app.schemas.application import ApplicationInsert, ApplicationRow, ApplicationUpdate
from app.schemas.auth import Identity
from app.schemas.job import JobInsert, JobRow, JobUpdate
from app.schemas.profile import ProfileInsert, ProfileRow, ProfileUpdate
from app.services.auth_service import identity_for_token
from app.utils.timestamps import utcnow_iso

_GENERATED_TIMESTAMPS = ("created_at", "updated_at")


class RemoteError(Exception):
    """A read or write was rejected by the data store."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def _describe(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def _describe_validation(table: str, exc: ValidationError) -> str:
    err = exc.errors()[0]
    field = err["loc"][0] if err["loc"] else "row"
    if err["type"] == "extra_forbidden":
        return f"Could not find the '{field}' column of '{table}'"
    return f"Invalid value for '{field}' in '{table}': {err['msg']}"


class TableGateway:
    def __init__(
        self,
        db: Session,
        model,
        row_schema: type[BaseModel],
        insert_schema: type[BaseModel],
        update_schema: type[BaseModel],
    ):
        self._db = db
        self._model = model
        self._row_schema = row_schema
        self._insert_schema = insert_schema
        self._update_schema = update_schema

    @property
    def table(self) -> str:
        return self._model.__tablename__

    def _column(self, name: str):
        if name not in self._model.__table__.columns:
            raise RemoteError(f"column {self.table}.{name} does not exist")
        return getattr(self._model, name)

    def _relationship(self, name: str, columns: Iterable[str]):
        rel = self._model.__mapper__.relationships.get(name)
        if rel is None:
            raise RemoteError(f"Could not find a relationship between '{self.table}' and '{name}'")
        for column in columns:
            if column not in rel.mapper.columns:
                raise RemoteError(f"column {rel.target.name}.{column} does not exist")
        return getattr(self._model, name)

    def _to_dict(self, obj, embed: dict[str, list[str]] | None = None) -> dict:
        data = self._row_schema.model_validate(obj, from_attributes=True).model_dump()
        for name, columns in (embed or {}).items():
            parent = getattr(obj, name)
            data[name] = {c: getattr(parent, c) for c in columns} if parent is not None else None
        return data

    def _prepare_insert(self, row: dict) -> dict:
        try:
            data = self._insert_schema.model_validate(row).model_dump(exclude_unset=True)
        except ValidationError as exc:
            raise RemoteError(_describe_validation(self.table, exc)) from exc
        data.setdefault("id", str(uuid.uuid4()))
        now = utcnow_iso()
        for column in _GENERATED_TIMESTAMPS:
            if column in self._model.__table__.columns:
                data.setdefault(column, now)
        return data

    def select(
        self,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
        embed: dict[str, list[str]] | None = None,
    ) -> list[dict]:
        query = self._db.query(self._model)
        for name, value in (filters or {}).items():
            query = query.filter(self._column(name) == value)
        for name, columns in (embed or {}).items():
            query = query.options(joinedload(self._relationship(name, columns)))
        if order_by:
            column = self._column(order_by)
            query = query.order_by(column.desc() if descending else column.asc())
        try:
            rows = query.all()
            return [self._to_dict(row, embed) for row in rows]
        except SQLAlchemyError as exc:
            self._db.rollback()
            raise RemoteError(_describe(exc)) from exc

    def select_one(self, filters: dict[str, Any]) -> dict:
        rows = self.select(filters)
        if len(rows) != 1:
            raise RemoteError("JSON object requested, multiple (or no) rows returned")
        return rows[0]

    def insert(self, rows: dict | list[dict]) -> list[dict]:
        if isinstance(rows, dict):
            rows = [rows]
        objs = [self._model(**self._prepare_insert(row)) for row in rows]
        try:
            self._db.add_all(objs)
            self._db.commit()
            return [self._to_dict(obj) for obj in objs]
        except SQLAlchemyError as exc:
            self._db.rollback()
            raise RemoteError(_describe(exc)) from exc

    def upsert(self, row: dict, on_conflict: str) -> dict:
        """Insert ``row``, or overwrite the row sharing its ``on_conflict`` value."""
        self._column(on_conflict)
        data = self._prepare_insert(row)
        changes = {
            k: v for k, v in data.items()
            if k not in ("id", "created_at", on_conflict)
        }
        try:
            changes = self._update_schema.model_validate(changes).model_dump(exclude_unset=True)
        except ValidationError as exc:
            raise RemoteError(_describe_validation(self.table, exc)) from exc

        stmt = sqlite_insert(self._model.__table__).values(**data)
        stmt = stmt.on_conflict_do_update(index_elements=[on_conflict], set_=changes)
        try:
            self._db.execute(stmt)
            self._db.commit()
        except SQLAlchemyError as exc:
            self._db.rollback()
            raise RemoteError(_describe(exc)) from exc
        return self.select_one({on_conflict: data[on_conflict]})


class DataGateway:
    def __init__(self, db: Session, access_token: str | None = None):
        self._db = db
        self._access_token = access_token
        self.jobs = TableGateway(db, Job, JobRow, JobInsert, JobUpdate)
        self.applications = TableGateway(db, Application, ApplicationRow, ApplicationInsert, ApplicationUpdate)
        self.profiles = TableGateway(db, Profile, ProfileRow, ProfileInsert, ProfileUpdate)

    def current_identity(self) -> Identity | None:
        try:
            return identity_for_token(self._db, self._access_token)
        except SQLAlchemyError as exc:
            self._db.rollback()
            raise RemoteError(_describe(exc)) from exc
