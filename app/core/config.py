from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    BACKEND_PROVIDER: str = "http"  # "http" or "mock"
    API_BASE_URL: str = "http://localhost:3333"
    IBGE_BASE_URL: str = "https://servicodados.ibge.gov.br/api/v1/localidades"
    HTTP_TIMEOUT_SECONDS: float = 10.0

    DEFAULT_LAT: float | None = None
    DEFAULT_LNG: float | None = None

    MAP_ZOOM: int = 15
    MAP_STYLE_ID: str = "mapbox/streets-v11"
    MAP_TILE_URL: str = "https://api.mapbox.com/styles/v1/{id}/tiles/{z}/{x}/{y}?access_token={accessToken}"
    MAPBOX_ACCESS_TOKEN: str = ""
    MAP_ATTRIBUTION: str = (
        'Map data © <a href="https://www.openstreetmap.org/">OpenStreetMap</a> contributors, '
        '<a href="https://creativecommons.org/licenses/by-sa/2.0/">CC-BY-SA</a>, '
        'Imagery (c) <a href="https://www.mapbox.com/">Mapbox</a>'
    )

    FORM_SESSION_LIMIT: int = 500
    CONFIRMATION_NOTICE: str = "Ponto de Coleta cadastrado com sucesso."


settings = Settings()
