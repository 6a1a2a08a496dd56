import logging

from fastapi import FastAPI

from app.api.webhooks import router as webhooks_router
from app.core.config import settings

# Every `extra` key logged by the stages, the router, the store adapters and the wiring.
CONTEXT_KEYS = (
    "stage",
    "session",
    "match_count",
    "ordinals",
    "selected_count",
    "missing",
    "booking_id",
    "provider",
    "collection",
    "document_id",
    "error",
)


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = [
            f"{key}={getattr(record, key)}"
            for key in CONTEXT_KEYS
            if getattr(record, key, None) not in (None, "")
        ]
        base = super().format(record)
        return f"{base} | {' '.join(extras)}" if extras else base


def configure_logging(level: str) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)


configure_logging(settings.LOG_LEVEL)

app = FastAPI(title="Wedding Dress Finder Webhooks", version="1.0.0")

app.include_router(webhooks_router, tags=["webhooks"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
