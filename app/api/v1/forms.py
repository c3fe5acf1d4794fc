from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from app.api.v1.schemas import (
    CitySelectionSchema, CoordinateSchema, FieldsPatchSchema, FieldsSchema,
    FormCreatedSchema, FormViewSchema, GeolocationReportSchema, ItemTileSchema,
    MapSchema, SelectedRegionSchema, SelectOptionSchema, StateSelectionSchema,
    SubmissionPayloadSchema, SubmitResponseSchema, TileLayerSchema, ToggleResultSchema,
)
from app.application.dto.form_view import FormView
from app.application.exceptions import (
    FormNotFoundError, MissingRequiredFieldError, SubmissionBlockedError, UnknownCityError,
    UpstreamServiceError,
)
from app.application.use_cases.create_point_form import CreatePointForm
from app.domain.entities.coordinate import Coordinate
from app.infrastructure.geolocation.client_reported import ClientReportedGeolocation
from app.infrastructure.store.memory_form_store import MemoryFormStore
from app.wiring.dependencies import build_form, get_form_store

router = APIRouter()
logger = logging.getLogger(__name__)


def _get_form(form_id: str, store: MemoryFormStore) -> CreatePointForm:
    try:
        return store.get(form_id)
    except FormNotFoundError:
        raise HTTPException(status_code=404, detail="Form not found")


def _view_schema(view: FormView) -> FormViewSchema:
    return FormViewSchema(
        form_id=view.form_id,
        fields=FieldsSchema(name=view.fields.name, email=view.fields.email, whatsapp=view.fields.whatsapp),
        region=SelectedRegionSchema(state=view.region.state_code, city=view.region.city_name),
        states=[SelectOptionSchema(value=o.value, label=o.label) for o in view.state_options],
        cities=[SelectOptionSchema(value=o.value, label=o.label) for o in view.city_options],
        items=[
            ItemTileSchema(id=t.id, title=t.title, image_url=t.image_url, selected=t.selected)
            for t in view.items
        ],
        map=MapSchema(
            center=CoordinateSchema(lat=view.map.center.lat, lng=view.map.center.lng),
            marker=CoordinateSchema(lat=view.map.marker.lat, lng=view.map.marker.lng),
            zoom=view.map.config.zoom,
            tiles=TileLayerSchema(
                id=view.map.config.style_id,
                url=view.map.config.tile_url,
                access_token=view.map.config.access_token,
                attribution=view.map.config.attribution,
            ),
        ),
        point_resolved=view.point_resolved,
        missing_fields=list(view.missing_fields),
        can_submit=view.can_submit,
        submission_status=view.submission_status,
        notice=view.notice,
    )


@router.post("/forms", response_model=FormCreatedSchema, status_code=201)
async def create_form(store: MemoryFormStore = Depends(get_form_store)):
    form = build_form()
    store.put(form)
    await form.mount()
    return FormCreatedSchema(form_id=form.form_id, view=_view_schema(form.render()))


@router.get("/forms/{form_id}", response_model=FormViewSchema)
async def get_form(
    form_id: str,
    wait: float = Query(0.0, ge=0.0, le=30.0, description="Seconds to wait for pending fetches"),
    store: MemoryFormStore = Depends(get_form_store),
):
    form = _get_form(form_id, store)
    if wait > 0:
        await form.wait_idle(timeout=wait)
    return _view_schema(form.render())


@router.delete("/forms/{form_id}", status_code=204)
async def delete_form(form_id: str, store: MemoryFormStore = Depends(get_form_store)) -> Response:
    try:
        store.discard(form_id)
    except FormNotFoundError:
        raise HTTPException(status_code=404, detail="Form not found")
    return Response(status_code=204)


@router.patch("/forms/{form_id}/fields", response_model=FormViewSchema)
async def patch_fields(
    form_id: str,
    req: FieldsPatchSchema,
    store: MemoryFormStore = Depends(get_form_store),
):
    form = _get_form(form_id, store)
    form.update_fields(**req.model_dump(exclude_none=True))
    return _view_schema(form.render())


@router.put("/forms/{form_id}/state", response_model=FormViewSchema)
async def select_state(
    form_id: str,
    req: StateSelectionSchema,
    store: MemoryFormStore = Depends(get_form_store),
):
    form = _get_form(form_id, store)
    form.handle_select_state_change(req.code)
    return _view_schema(form.render())


@router.put("/forms/{form_id}/city", response_model=FormViewSchema)
async def select_city(
    form_id: str,
    req: CitySelectionSchema,
    store: MemoryFormStore = Depends(get_form_store),
):
    form = _get_form(form_id, store)
    try:
        form.handle_select_city_change(req.name)
    except UnknownCityError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _view_schema(form.render())


@router.post("/forms/{form_id}/items/{item_id}/toggle", response_model=ToggleResultSchema)
async def toggle_item(form_id: str, item_id: int, store: MemoryFormStore = Depends(get_form_store)):
    form = _get_form(form_id, store)
    return ToggleResultSchema(item_id=item_id, selected=form.handle_item_click(item_id))


@router.post("/forms/{form_id}/map/click", response_model=FormViewSchema)
async def map_click(
    form_id: str,
    req: CoordinateSchema,
    store: MemoryFormStore = Depends(get_form_store),
):
    form = _get_form(form_id, store)
    form.handle_map_click(req.lat, req.lng)
    return _view_schema(form.render())


@router.post("/forms/{form_id}/marker/dragend", response_model=FormViewSchema)
async def marker_dragend(
    form_id: str,
    req: CoordinateSchema,
    store: MemoryFormStore = Depends(get_form_store),
):
    form = _get_form(form_id, store)
    form.handle_marker_dragend(req.lat, req.lng)
    return _view_schema(form.render())


@router.post("/forms/{form_id}/geolocation", response_model=FormViewSchema)
async def report_geolocation(
    form_id: str,
    req: GeolocationReportSchema,
    store: MemoryFormStore = Depends(get_form_store),
):
    form = _get_form(form_id, store)
    geolocation = form.geolocation
    if not isinstance(geolocation, ClientReportedGeolocation):
        raise HTTPException(status_code=409, detail="Form does not accept reported positions")

    if req.denied:
        geolocation.deny(req.reason or "Position denied by the client")
    elif req.lat is None or req.lng is None:
        raise HTTPException(status_code=400, detail="lat and lng are required unless denied")
    else:
        accepted = geolocation.report(Coordinate(lat=req.lat, lng=req.lng))
        if not accepted:
            logger.info("Ignoring repeated geolocation report", extra={"form_id": form_id})

    await form.resolver.wait_done()
    return _view_schema(form.render())


@router.post("/forms/{form_id}/submit", response_model=SubmitResponseSchema)
async def submit(form_id: str, store: MemoryFormStore = Depends(get_form_store)):
    form = _get_form(form_id, store)
    try:
        payload = await form.handle_submit()
    except MissingRequiredFieldError as e:
        raise HTTPException(status_code=422, detail={"missing": e.fields})
    except SubmissionBlockedError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except UpstreamServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))

    data = payload.to_dict()
    return SubmitResponseSchema(
        payload=SubmissionPayloadSchema(**data),
        notice=form.state.notice,
    )
