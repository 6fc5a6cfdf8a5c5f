"""
HTTP API for the career profile service.

Every route acts on behalf of the single owner user from settings.
"""
from __future__ import annotations

import logging
import sqlite3
from typing import Iterator, Optional

import uvicorn
from fastapi import Depends, FastAPI, File, HTTPException, Request, UploadFile
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.profile_fields import CAREER_GOALS_DEFAULTS
from config.settings import Settings, get_settings
from db import schema
from db.connection import get_connection
from db.repos.career_goals_repo import CareerGoalsRepo
from db.repos.interests_repo import InterestsRepo
from db.repos.profiles_repo import ProfilesRepo
from db.repos.saved_items_repo import SavedItemsRepo
from feeds import recommendations
from models.career_goals_record import CareerGoalsInput
from models.interests_record import InterestsInput
from models.saved_item_record import SavedItemInput
from models.stored_profile import ProfileUpdate
from pipelines.ingest_profile import ingest_profile
from services.interests import suggest_interests
from utils.logging_setup import init_logging

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"

app = FastAPI(title="Career Profile API")


@app.on_event("startup")
def startup():
    init_logging()


def get_conn(settings: Settings = Depends(get_settings)) -> Iterator[sqlite3.Connection]:
    conn = get_connection(settings.db_path)
    try:
        schema.bootstrap(conn, settings.owner_user_id)
        yield conn
    finally:
        conn.close()


def _dump(model) -> dict:
    return model.model_dump(mode="json", by_alias=True)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unexpected error in {request.url.path}")
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


@app.post("/api/profile/upload")
def upload_profile(
    pdf: Optional[UploadFile] = File(None),
    conn: sqlite3.Connection = Depends(get_conn),
    settings: Settings = Depends(get_settings),
):
    if pdf is None:
        raise HTTPException(status_code=400, detail="No file uploaded")
    if pdf.content_type != PDF_CONTENT_TYPE:
        raise HTTPException(status_code=400, detail="Only PDF files are allowed")
    data = pdf.file.read(settings.upload_max_bytes + 1)
    if len(data) > settings.upload_max_bytes:
        raise HTTPException(status_code=400, detail="File exceeds the upload size limit")

    ctx = ingest_profile(conn, data, filename=pdf.filename, content_type=pdf.content_type, settings=settings)
    logger.info(
        f"Stored profile {ctx.stored.id} from {pdf.filename}",
        extra={"owner_id": settings.owner_user_id, "status": "ok"},
    )
    return _dump(ctx.stored)


@app.get("/api/profile")
def read_profile(conn: sqlite3.Connection = Depends(get_conn), settings: Settings = Depends(get_settings)):
    profile = ProfilesRepo(conn).get_by_user(settings.owner_user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return _dump(profile)


@app.put("/api/profile")
def update_profile(
    body: ProfileUpdate,
    conn: sqlite3.Connection = Depends(get_conn),
    settings: Settings = Depends(get_settings),
):
    repo = ProfilesRepo(conn)
    profile = repo.get_by_user(settings.owner_user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return _dump(repo.update(profile.id, body.changes()))


@app.get("/api/interests/suggestions")
def interest_suggestions(conn: sqlite3.Connection = Depends(get_conn), settings: Settings = Depends(get_settings)):
    profile = ProfilesRepo(conn).get_by_user(settings.owner_user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return suggest_interests(profile)


@app.post("/api/interests")
def save_interests(
    body: InterestsInput,
    conn: sqlite3.Connection = Depends(get_conn),
    settings: Settings = Depends(get_settings),
):
    record = InterestsRepo(conn).upsert(settings.owner_user_id, body.model_dump(exclude_unset=True))
    return _dump(record)


@app.get("/api/interests")
def read_interests(conn: sqlite3.Connection = Depends(get_conn), settings: Settings = Depends(get_settings)):
    record = InterestsRepo(conn).get_by_user(settings.owner_user_id)
    if not record:
        return {"topics": [], "skills": []}
    return _dump(record)


@app.get("/api/recommendations/networking")
def networking_recommendations():
    return recommendations("networking")


@app.get("/api/recommendations/jobs")
def job_recommendations():
    return recommendations("jobs")


@app.post("/api/career-goals")
def save_career_goals(
    body: CareerGoalsInput,
    conn: sqlite3.Connection = Depends(get_conn),
    settings: Settings = Depends(get_settings),
):
    record = CareerGoalsRepo(conn).upsert(settings.owner_user_id, body.model_dump(exclude_unset=True))
    return _dump(record)


@app.get("/api/career-goals")
def read_career_goals(conn: sqlite3.Connection = Depends(get_conn), settings: Settings = Depends(get_settings)):
    record = CareerGoalsRepo(conn).get_by_user(settings.owner_user_id)
    if not record:
        return _dump(CareerGoalsInput(**CAREER_GOALS_DEFAULTS))
    return _dump(record)


@app.post("/api/saved-items")
def save_item(
    body: SavedItemInput,
    conn: sqlite3.Connection = Depends(get_conn),
    settings: Settings = Depends(get_settings),
):
    return _dump(SavedItemsRepo(conn).create(settings.owner_user_id, body))


@app.get("/api/saved-items")
def list_saved_items(
    type: Optional[str] = None,
    conn: sqlite3.Connection = Depends(get_conn),
    settings: Settings = Depends(get_settings),
):
    items = SavedItemsRepo(conn).list(settings.owner_user_id, type)
    return [_dump(item) for item in items]


@app.delete("/api/saved-items/{item_id}")
def delete_saved_item(item_id: int, conn: sqlite3.Connection = Depends(get_conn)):
    if not SavedItemsRepo(conn).delete(item_id):
        raise HTTPException(status_code=404, detail="Saved item not found")
    return {"success": True}


def main():
    settings = get_settings()
    init_logging(settings.log_level)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
