# main.py

import logging
from typing import List, Optional

from fastapi import FastAPI, Depends, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from sqlalchemy.ext.asyncio import AsyncSession
from contextlib import asynccontextmanager

from config import settings
from database import get_db, create_tables, engine # Import engine for lifespan
from errors import NotFound
from logging_config import setup_logging
from lookup import get_post, list_posts_by_category
from sql_repository import SqlAlchemyPostRepository

logger = logging.getLogger(__name__)

# --- Pydantic Models --- 

class PostRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    category_id: Optional[int] = None
    title: Optional[str] = None
    content: Optional[str] = None

# --- Lifespan Management (for DB setup/teardown) --- 

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, settings.log_file or None)
    logger.info("Application startup: creating database tables")
    await create_tables()
    yield
    logger.info("Application shutdown")
    await engine.dispose()

# --- FastAPI App --- 

app = FastAPI(lifespan=lifespan, title=settings.project_name, version=settings.api_version)

@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse(status_code=404, content={"detail": str(exc)})

# --- Dependencies --- 

async def get_repository(session: AsyncSession = Depends(get_db)) -> SqlAlchemyPostRepository:
    return SqlAlchemyPostRepository(session)

# --- API Endpoints --- 

@app.get("/posts/", response_model=List[PostRead])
async def read_posts_by_category(
    category: str = Query(..., description="Category key to list posts for"),
    repository: SqlAlchemyPostRepository = Depends(get_repository),
):
    """
    List the posts belonging to the category with the given key.
    Unknown keys answer 404.
    """
    return await list_posts_by_category(repository, category)

@app.get("/posts/{post_id}", response_model=PostRead)
async def read_post(post_id: int, repository: SqlAlchemyPostRepository = Depends(get_repository)):
    return await get_post(repository, post_id)

# --- Root Endpoint --- 

@app.get("/")
async def root():
    return {"message": "Welcome to the Content Lookup API. Go to /docs for documentation."}

# --- Run with Uvicorn (for local testing) --- 
# Use: uvicorn main:app --reload
