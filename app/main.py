import logging

from fastapi import FastAPI

from app.api.v1.forms import router as forms_router
from app.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("form_id", "state_code", "city", "item_id", "selected", "lat", "lng", "count", "generation", "latest", "status", "path", "url", "notice", "payload", "error"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title="Ecoleta - Create Collection Point", version="1.0.0")

app.include_router(forms_router, prefix="/api/v1", tags=["forms"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
