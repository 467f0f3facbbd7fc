from typing import Any

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ...document import ContentDocument
from ...editor_schema import Form
from ...enums import UIGroup
from ...errors import PersistenceError, SubmissionPendingError, SubmissionValidationError
from ...media import page_links
from ...session import FormSession, MutationResult
from ...utils import PathSegment

router = APIRouter(prefix="/sessions", tags=["sessions"])


class OpenSessionRequest(BaseModel):
    section_type: str | None = None
    page_id: int | None = None
    section_id: int | None = None
    order_index: int = Field(default=0, ge=0)
    published: bool = False


class SessionResponse(BaseModel):
    success: bool = True
    session_id: str
    content_id: int | None
    read_only: bool
    form: Form


class MutationResponse(BaseModel):
    success: bool
    result: MutationResult
    form: Form


class SetScalarRequest(BaseModel):
    path: list[PathSegment]
    value: Any = None


class SpliceRequest(BaseModel):
    path: list[PathSegment]
    index: int
    count: int = 0
    items: list[Any] = []


class MoveRequest(BaseModel):
    path: list[PathSegment]
    source: int
    target: int


class ToggleRequest(BaseModel):
    path: list[PathSegment] = []
    group: UIGroup


class PlacementRequest(BaseModel):
    published: bool | None = None
    order_index: Any = None


class SubmitRequest(BaseModel):
    page_id: int | None = None


class FieldError(BaseModel):
    loc: str
    msg: str


class SubmitResponse(BaseModel):
    success: bool
    content_id: int | None = None
    error: str | None = None
    errors: list[FieldError] = []


def get_session(request: Request, session_id: str) -> FormSession:
    session = request.app.state.sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def mutation_response(session: FormSession, result: MutationResult):
    response = MutationResponse(success=result.ok, result=result, form=session.render())
    if result.ok:
        return response
    return JSONResponse(status_code=400, content=response.model_dump(mode="json"))


@router.post("", response_model=SessionResponse)
def open_session(payload: OpenSessionRequest, request: Request):
    state = request.app.state
    links = page_links(state.store.list_known_pages())
    threshold = state.config.editor.repair_alert_threshold

    if payload.section_id is not None:
        stored = state.store.get_content(payload.section_id)
        if stored is None:
            raise HTTPException(status_code=404, detail="Section not found")
        document = ContentDocument(
            section_type=stored.section_type,
            order_index=stored.order_index,
            published=stored.published,
            data=stored.data,
        )
        session = FormSession(
            state.registry.get_contract(stored.section_type),
            document,
            content_id=stored.id,
            page_id=stored.page_id,
            page_links=links,
            repair_threshold=threshold,
        )
    else:
        if not payload.section_type:
            raise HTTPException(status_code=400, detail="section_type or section_id is required")
        contract = state.registry.get_contract(payload.section_type)
        if contract is None:
            raise HTTPException(
                status_code=404, detail=f"Unknown section type: {payload.section_type}"
            )
        session = FormSession.new(
            contract,
            page_id=payload.page_id,
            order_index=payload.order_index,
            published=payload.published,
            page_links=links,
            repair_threshold=threshold,
        )

    if state.config.editor.expand_advanced:
        session.toggle_group((), UIGroup.ADVANCED)

    session_id = state.sessions.open(session)
    return SessionResponse(
        session_id=session_id,
        content_id=session.content_id,
        read_only=session.read_only,
        form=session.render(),
    )


@router.get("/{session_id}", response_model=SessionResponse)
def get_form(session_id: str, request: Request):
    session = get_session(request, session_id)
    return SessionResponse(
        session_id=session_id,
        content_id=session.content_id,
        read_only=session.read_only,
        form=session.render(),
    )


@router.delete("/{session_id}")
def cancel_session(session_id: str, request: Request):
    if not request.app.state.sessions.close(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return {"success": True}


@router.post("/{session_id}/set", response_model=MutationResponse)
def set_scalar(session_id: str, payload: SetScalarRequest, request: Request):
    session = get_session(request, session_id)
    return mutation_response(session, session.set_scalar(payload.path, payload.value))


@router.post("/{session_id}/splice", response_model=MutationResponse)
def splice_array(session_id: str, payload: SpliceRequest, request: Request):
    session = get_session(request, session_id)
    result = session.splice_array(payload.path, payload.index, payload.count, payload.items)
    return mutation_response(session, result)


@router.post("/{session_id}/move", response_model=MutationResponse)
def move_array_item(session_id: str, payload: MoveRequest, request: Request):
    session = get_session(request, session_id)
    result = session.move_array_item(payload.path, payload.source, payload.target)
    return mutation_response(session, result)


@router.post("/{session_id}/toggle", response_model=MutationResponse)
def toggle_group(session_id: str, payload: ToggleRequest, request: Request):
    session = get_session(request, session_id)
    return mutation_response(session, session.toggle_group(payload.path, payload.group))


@router.post("/{session_id}/placement", response_model=MutationResponse)
def set_placement(session_id: str, payload: PlacementRequest, request: Request):
    session = get_session(request, session_id)
    result = MutationResult(ok=True)
    if payload.published is not None:
        result = session.set_published(payload.published)
    if result.ok and payload.order_index is not None:
        result = session.set_order_index(payload.order_index)
    return mutation_response(session, result)


@router.post("/{session_id}/submit", response_model=SubmitResponse)
def submit(session_id: str, payload: SubmitRequest, request: Request):
    session = get_session(request, session_id)
    try:
        result = session.submit(request.app.state.store, page_id=payload.page_id)
    except SubmissionPendingError as e:
        return JSONResponse(
            status_code=409,
            content=SubmitResponse(success=False, error=str(e)).model_dump(),
        )
    except SubmissionValidationError as e:
        return JSONResponse(
            status_code=400,
            content=SubmitResponse(
                success=False,
                error=str(e),
                errors=[FieldError(loc=loc, msg=msg) for loc, msg in e.errors],
            ).model_dump(),
        )
    except PersistenceError as e:
        return JSONResponse(
            status_code=502,
            content=SubmitResponse(success=False, error=str(e)).model_dump(),
        )

    return SubmitResponse(success=True, content_id=result.content_id)
