"""Shared lifecycle for the page controllers.

A page controller owns the transient state of one page: the current view,
a submitting flag and a request generation. Every load or submit takes a new
generation; ``unmount()`` bumps it, so a result that arrives after the page
was left is dropped instead of overwriting state nobody renders any more.
"""
import logging
from typing import Any, Callable, Mapping

from pydantic import BaseModel

from app.pages.errors import AuthRequired, FetchError, ValidationError, WriteError
from app.schemas.auth import Identity
from app.schemas.forms import parse_form
from app.schemas.pages import SubmissionView, SubmitState
from app.services.gateway import DataGateway, RemoteError

logger = logging.getLogger("app.pages")

ALREADY_SUBMITTING = "A submission is already in progress"


class PageController:
    def __init__(self, gateway: DataGateway):
        self.gateway = gateway
        self.view: BaseModel | None = None
        self.submission = SubmissionView(state=SubmitState.IDLE)
        self.submitting = False
        self.mounted = True
        self._generation = 0

    # -- request generations -------------------------------------------------

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    def is_current(self, generation: int) -> bool:
        return self.mounted and generation == self._generation

    def unmount(self):
        self.mounted = False
        self._generation += 1

    def _publish(self, generation: int, view: BaseModel) -> BaseModel | None:
        if self.is_current(generation):
            self.view = view
        else:
            logger.debug("Dropping stale %s for %s", type(view).__name__, type(self).__name__)
        return self.view

    # -- gateway calls -------------------------------------------------------

    def _fetch(self, read: Callable[[], Any]) -> Any:
        try:
            return read()
        except RemoteError as exc:
            raise FetchError(exc.message) from exc

    def _write(self, write: Callable[[], Any]) -> Any:
        try:
            return write()
        except RemoteError as exc:
            raise WriteError(exc.message) from exc

    def _require_identity(self, message: str) -> Identity:
        identity = self._write(self.gateway.current_identity)
        if identity is None:
            raise AuthRequired(message)
        return identity

    # -- submission ----------------------------------------------------------

    def _validate(self, form_model: type[BaseModel], data: Mapping[str, Any] | None) -> BaseModel:
        form, errors = parse_form(form_model, data)
        if errors:
            raise ValidationError(errors)
        return form

    def _submit(
        self,
        form_model: type[BaseModel],
        data: Mapping[str, Any] | None,
        perform: Callable[[BaseModel], SubmissionView],
    ) -> SubmissionView:
        """Validate, then run ``perform`` with the submitting flag held.

        Validation failures never reach the gateway. Auth and write failures
        come back as a FAILED view carrying the message verbatim, with the
        submitted values kept so the form can be corrected and retried.
        """
        values = dict(data or {})
        try:
            form = self._validate(form_model, data)
        except ValidationError as exc:
            self.submission = SubmissionView(
                state=SubmitState.INVALID, field_errors=exc.field_errors, values=values,
            )
            return self.submission

        if self.submitting:
            return SubmissionView(
                state=SubmitState.FAILED, error=ALREADY_SUBMITTING, error_code="busy", values=values,
            )

        generation = self._next_generation()
        self.submitting = True
        self.submission = SubmissionView(state=SubmitState.SUBMITTING, values=values)
        try:
            result = perform(form)
        except (AuthRequired, WriteError) as exc:
            logger.warning("%s submission failed: %s", type(self).__name__, exc)
            code = "auth_required" if isinstance(exc, AuthRequired) else "write_error"
            result = SubmissionView(state=SubmitState.FAILED, error=str(exc), error_code=code, values=values)
        finally:
            self.submitting = False

        if self.is_current(generation):
            self.submission = result
        return result
