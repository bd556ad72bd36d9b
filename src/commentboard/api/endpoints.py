"""FastAPI endpoints for the comment board."""

from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import AsyncGenerator, List, Optional

from fastapi import Depends, FastAPI, Form, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from commentboard.api.models import (
    CommittedResponse,
    FeedbackRecord,
    HealthResponse,
    PersistenceErrorResponse,
    ValidationErrorResponse,
)
from commentboard.cache import COMMENTS_TAG, FEEDBACK_TAG, TagCache
from commentboard.config.settings import Settings
from commentboard.lib.exceptions import PersistenceException, format_exception_details
from commentboard.mutations import (
    Committed,
    MutationHandler,
    MutationResult,
    PersistenceFailed,
    SubmitComment,
    SubmitFeedback,
    comment_mutation,
    feedback_mutation,
)
from commentboard.search import filter_records
from commentboard.store import JsonRecordStore
from commentboard.utils.logger import setup_logger


api_logger = setup_logger("commentboard.api")


@dataclass
class BoardServices:
    """Everything a request needs, built once per application."""
    comment_store: JsonRecordStore
    feedback_store: JsonRecordStore
    cache: TagCache
    comments: MutationHandler
    feedback: MutationHandler


def build_services(data_dir: Optional[Path] = None, cache: Optional[TagCache] = None) -> BoardServices:
    comment_store = JsonRecordStore(Settings.comments_path(data_dir), record_type=str)
    feedback_store = JsonRecordStore(Settings.feedback_path(data_dir), record_type=dict)
    cache = cache or TagCache()
    return BoardServices(
        comment_store=comment_store,
        feedback_store=feedback_store,
        cache=cache,
        comments=comment_mutation(comment_store, cache),
        feedback=feedback_mutation(feedback_store, cache),
    )


def get_services(request: Request) -> BoardServices:
    return request.app.state.services


def mutation_response(result: MutationResult) -> JSONResponse:
    """
    Map a MutationResult onto an HTTP response.

    Committed → 200, PersistenceFailed → 503 (retryable),
    ValidationFailed → 422 with errors and echoed values.
    """
    if isinstance(result, Committed):
        return JSONResponse(status_code=200, content=CommittedResponse().model_dump())

    if isinstance(result, PersistenceFailed):
        return JSONResponse(
            status_code=503,
            content=PersistenceErrorResponse(reason=result.reason).model_dump()
        )

    return JSONResponse(
        status_code=422,
        content=ValidationErrorResponse(errors=result.errors, values=result.values).model_dump()
    )


def read_comments(services: BoardServices) -> List[str]:
    """Read the comment log through the cache, mapping store failures to 500."""
    try:
        return services.cache.read(COMMENTS_TAG, services.comment_store.read_all)
    except PersistenceException as e:
        api_logger.error("comments_read_failed", extra={
            "data": {"error": format_exception_details(e)}
        })
        raise HTTPException(status_code=500, detail="Failed to read comments")


def create_app(data_dir: Optional[Path] = None, cache: Optional[TagCache] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        data_dir: Directory holding the JSON logs (default: Settings.DATA_DIRECTORY)
        cache: Tag cache to share (default: a new one owned by the app)

    Returns:
        Configured application; its cache is closed on shutdown
    """
    services = build_services(data_dir, cache)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator:
        api_logger.info("app_started", extra={
            "data": {
                "comments_file": str(services.comment_store.path),
                "feedback_file": str(services.feedback_store.path)
            }
        })
        yield
        services.cache.close()
        api_logger.info("app_stopped")

    app = FastAPI(
        title="Comment Board API",
        description="Append-only comment board with tag-based cache invalidation",
        version=Settings.APP_VERSION,
        lifespan=lifespan
    )
    app.state.services = services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Settings.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"]
    )

    @app.get("/health", response_model=HealthResponse)
    async def health_check(services: BoardServices = Depends(get_services)):
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            comments_file=str(services.comment_store.path),
            feedback_file=str(services.feedback_store.path),
            cache_open=not services.cache.closed
        )

    @app.get("/comments", response_model=List[str])
    def list_comments(services: BoardServices = Depends(get_services)):
        """Return the full comment log in insertion order."""
        return read_comments(services)

    @app.get("/search", response_model=List[str])
    def search_comments(query: Optional[str] = None,
                        services: BoardServices = Depends(get_services)):
        """Return comments containing `query`, case-insensitively."""
        return filter_records(read_comments(services), query)

    @app.post(
        "/comments",
        response_model=CommittedResponse,
        responses={
            422: {"model": ValidationErrorResponse},
            503: {"model": PersistenceErrorResponse}
        }
    )
    def submit_comment(comment: str = Form(""),
                       services: BoardServices = Depends(get_services)):
        """Append a comment and invalidate the comment listing."""
        result = services.comments.handle(SubmitComment(comment=comment))
        return mutation_response(result)

    @app.get("/feedback", response_model=List[FeedbackRecord])
    def list_feedback(services: BoardServices = Depends(get_services)):
        """Return every accepted feedback submission."""
        try:
            return services.cache.read(FEEDBACK_TAG, services.feedback_store.read_all)
        except PersistenceException as e:
            api_logger.error("feedback_read_failed", extra={
                "data": {"error": format_exception_details(e)}
            })
            raise HTTPException(status_code=500, detail="Failed to read feedback")

    @app.post(
        "/feedback",
        response_model=CommittedResponse,
        responses={
            422: {"model": ValidationErrorResponse},
            503: {"model": PersistenceErrorResponse}
        }
    )
    def submit_feedback(name: str = Form(""),
                        email: str = Form(""),
                        feedback: str = Form(""),
                        services: BoardServices = Depends(get_services)):
        """Validate and store a feedback form."""
        result = services.feedback.handle(
            SubmitFeedback(name=name, email=email, feedback=feedback)
        )
        return mutation_response(result)

    return app


app = create_app()
