from pydantic import BaseModel, Field


class CoordinateSchema(BaseModel):
    lat: float
    lng: float


class FieldsPatchSchema(BaseModel):
    name: str | None = None
    email: str | None = None
    whatsapp: str | None = None


class StateSelectionSchema(BaseModel):
    code: str


class CitySelectionSchema(BaseModel):
    name: str


class GeolocationReportSchema(BaseModel):
    lat: float | None = None
    lng: float | None = None
    denied: bool = False
    reason: str | None = None


class SelectOptionSchema(BaseModel):
    value: str
    label: str


class ItemTileSchema(BaseModel):
    id: int
    title: str
    image_url: str
    selected: bool


class TileLayerSchema(BaseModel):
    id: str
    url: str
    access_token: str
    attribution: str


class MapSchema(BaseModel):
    center: CoordinateSchema
    marker: CoordinateSchema
    zoom: int
    tiles: TileLayerSchema


class FieldsSchema(BaseModel):
    name: str
    email: str
    whatsapp: str


class SelectedRegionSchema(BaseModel):
    state: str
    city: str


class FormViewSchema(BaseModel):
    form_id: str
    fields: FieldsSchema
    region: SelectedRegionSchema
    states: list[SelectOptionSchema]
    cities: list[SelectOptionSchema]
    items: list[ItemTileSchema]
    map: MapSchema
    point_resolved: bool
    missing_fields: list[str] = Field(default_factory=list)
    can_submit: bool
    submission_status: str
    notice: str | None = None


class FormCreatedSchema(BaseModel):
    form_id: str
    view: FormViewSchema


class ToggleResultSchema(BaseModel):
    item_id: int
    selected: bool


class SubmissionPayloadSchema(BaseModel):
    name: str
    email: str
    phones: list[str]
    state: str
    city: str
    coordinates: CoordinateSchema
    items: list[int]


class SubmitResponseSchema(BaseModel):
    payload: SubmissionPayloadSchema
    notice: str | None = None
