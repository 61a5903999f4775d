from __future__ import annotations

import logging
import os

from fastapi import FastAPI

from .routes.tree import router as tree_router

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Family Tree Layout API", version="0.1.0")
app.include_router(tree_router)


@app.get("/health")
def health() -> dict[str, bool]:
    return {"ok": True}
