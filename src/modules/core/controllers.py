"""Generic server-rendered CRUD controller.

``CrudController`` maps the administration URL scheme onto a
``CrudService``::

    GET  /<plural>?keyword=     -> <plural>/<plural>.html
    GET  /<plural>/new          -> <plural>/<singular>_form.html
    POST /<plural>/save         -> 302 /<plural> + CREATED_MESSAGE
    GET  /<plural>/detail/<id>  -> <plural>/<singular>_detail.html
    GET  /<plural>/edit/<id>    -> <plural>/<singular>_edit.html
    POST /<plural>/edit/<id>    -> 302 /<plural> + UPDATED_MESSAGE
    GET  /<plural>/delete/<id>  -> 302 /<plural> + DELETED_MESSAGE

A fresh controller (and so a fresh service) is built for every request,
the same way Django instantiates class-based views.  Domain exceptions are
translated here: ``EntityNotFound`` becomes a 404, ``EntityAlreadyExists``
becomes the duplicate form error.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Type

import structlog
from django.contrib import messages
from django.db import models
from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.urls import path
from django.views.decorators.http import require_http_methods
from pydantic import BaseModel as DTO
from pydantic import ValidationError as PydanticValidationError

from modules.core.constants import (
    CREATED_MESSAGE,
    DELETED_MESSAGE,
    NON_FIELD_ERRORS,
    UPDATED_MESSAGE,
)
from modules.core.exceptions import EntityAlreadyExists, EntityNotFound
from modules.core.services import CrudService

logger = structlog.get_logger(__name__)

FormErrors = Dict[str, List[str]]


def pydantic_errors(exc: PydanticValidationError) -> FormErrors:
    """Flatten a pydantic error into ``{field: [messages]}``.

    Messages raised by our own validators are shown as written, without
    pydantic's ``"Value error, "`` prefix.
    """
    errors: FormErrors = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or NON_FIELD_ERRORS
        raised = error.get("ctx", {}).get("error")
        message = str(raised) if isinstance(raised, Exception) else error["msg"]
        errors.setdefault(field, []).append(message)
    return errors


class CrudController:
    """Base controller for one entity's administration screens."""

    entity_plural: str
    entity_singular: str
    model: Type[models.Model]
    dto_class: Type[DTO]
    duplicate_message: str

    def __init__(self) -> None:
        self._service = self.build_service()

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def build_service(self) -> CrudService:
        raise NotImplementedError

    @property
    def list_context_name(self) -> str:
        return f"list{self.entity_plural.capitalize()}"

    def form_context(self, entity: models.Model) -> Dict[str, Any]:
        """Extra context (option lists) for the new/edit forms."""
        return {}

    def build_dto(self, request: HttpRequest, entity: models.Model) -> DTO:
        return self.dto_class(**request.POST.dict())

    def apply_dto(self, dto: DTO, entity: models.Model) -> models.Model:
        for field, value in dto.model_dump().items():
            setattr(entity, field, value)
        return entity

    def validate_upload(self, request: HttpRequest) -> Optional[str]:
        """Return an error message when an uploaded file is unacceptable."""
        return None

    def validate_references(self, entity: models.Model) -> FormErrors:
        """Errors for related ids that do not point at an existing row."""
        return {}

    def save_entity(self, request: HttpRequest, entity: models.Model) -> models.Model:
        return self._service.save(entity)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def index(self, request: HttpRequest) -> HttpResponse:
        keyword = request.GET.get("keyword")
        entities = self._service.list_all(keyword)
        return render(
            request,
            self._template(self.entity_plural),
            {self.list_context_name: entities, "keyword": keyword},
        )

    def new(self, request: HttpRequest) -> HttpResponse:
        return self._render_form(request, "form", self.model())

    def save(self, request: HttpRequest) -> HttpResponse:
        return self._persist(request, self.model(), "form", CREATED_MESSAGE)

    def detail(self, request: HttpRequest, id: int) -> HttpResponse:
        entity = self._get_or_404(id)
        return render(
            request,
            self._template(f"{self.entity_singular}_detail"),
            {self.entity_singular: entity},
        )

    def edit(self, request: HttpRequest, id: int) -> HttpResponse:
        entity = self._get_or_404(id)
        if request.method == "POST":
            return self._persist(request, entity, "edit", UPDATED_MESSAGE)
        return self._render_form(request, "edit", entity)

    def delete(self, request: HttpRequest, id: int) -> HttpResponse:
        self._service.delete(id)
        messages.success(request, DELETED_MESSAGE)
        return redirect(f"{self.entity_plural}:list")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _template(self, name: str) -> str:
        return f"{self.entity_plural}/{name}.html"

    def _get_or_404(self, id: int) -> models.Model:
        try:
            return self._service.get(id)
        except EntityNotFound as exc:
            raise Http404(str(exc)) from exc

    def _render_form(
        self,
        request: HttpRequest,
        form: str,
        entity: models.Model,
        errors: Optional[FormErrors] = None,
    ) -> HttpResponse:
        context = {self.entity_singular: entity, "errors": errors or {}}
        context.update(self.form_context(entity))
        return render(
            request, self._template(f"{self.entity_singular}_{form}"), context
        )

    def _persist(
        self,
        request: HttpRequest,
        entity: models.Model,
        form: str,
        success_message: str,
    ) -> HttpResponse:
        try:
            dto = self.build_dto(request, entity)
        except (PydanticValidationError, ValueError) as exc:
            errors = (
                pydantic_errors(exc)
                if isinstance(exc, PydanticValidationError)
                else {NON_FIELD_ERRORS: [str(exc)]}
            )
            return self._render_form(request, form, entity, errors)

        entity = self.apply_dto(dto, entity)

        reference_errors = self.validate_references(entity)
        if reference_errors:
            return self._render_form(request, form, entity, reference_errors)

        upload_error = self.validate_upload(request)
        if upload_error:
            return self._render_form(
                request, form, entity, {NON_FIELD_ERRORS: [upload_error]}
            )

        duplicate = {self._service.key_field: [self.duplicate_message]}
        if not self._service.check_unique(entity):
            return self._render_form(request, form, entity, duplicate)

        try:
            self.save_entity(request, entity)
        except EntityAlreadyExists:
            return self._render_form(request, form, entity, duplicate)

        messages.success(request, success_message)
        return redirect(f"{self.entity_plural}:list")

    # ------------------------------------------------------------------
    # URL wiring
    # ------------------------------------------------------------------

    @classmethod
    def as_view(cls, action: str, methods: Sequence[str]):
        @require_http_methods(list(methods))
        def view(request: HttpRequest, *args, **kwargs) -> HttpResponse:
            return getattr(cls(), action)(request, *args, **kwargs)

        view.__name__ = f"{cls.__name__}.{action}"
        return view

    @classmethod
    def urlpatterns(cls) -> list:
        prefix = cls.entity_plural
        return [
            path(prefix, cls.as_view("index", ["GET"]), name="list"),
            path(f"{prefix}/new", cls.as_view("new", ["GET"]), name="new"),
            path(f"{prefix}/save", cls.as_view("save", ["POST"]), name="save"),
            path(
                f"{prefix}/detail/<int:id>",
                cls.as_view("detail", ["GET"]),
                name="detail",
            ),
            path(
                f"{prefix}/edit/<int:id>",
                cls.as_view("edit", ["GET", "POST"]),
                name="edit",
            ),
            path(
                f"{prefix}/delete/<int:id>",
                cls.as_view("delete", ["GET"]),
                name="delete",
            ),
        ]
