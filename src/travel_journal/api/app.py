"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, File, Request, UploadFile, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from travel_journal.api.client_ui import router as client_ui_router
from travel_journal.api.dependencies import get_container, require_user_id
from travel_journal.api.errors import register_error_handlers
from travel_journal.api.schemas import (
    AuthResponse,
    CaptionOut,
    CaptionRequest,
    CaptionResponse,
    CreateAccountRequest,
    HealthResponse,
    LoginRequest,
    StoriesResponse,
    UploadResponse,
    UserOut,
    UserResponse,
)
from travel_journal.app_logging import configure_logging
from travel_journal.config import parse_allowed_origins
from travel_journal.containers import AppContainer
from travel_journal.services.uploads import UPLOADS_PATH


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            await app.state.container.open_resources()
        except Exception:
            logger.exception("Failed to open the document store")
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Travel Journal", lifespan=lifespan)
    app.state.container = container

    origins = parse_allowed_origins(container.settings.cors_allowed_origins)
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["GET", "POST", "PUT", "DELETE"],
            allow_headers=["Content-Type", "Authorization"],
        )
    register_error_handlers(app)
    app.include_router(client_ui_router)
    app.mount(
        UPLOADS_PATH,
        StaticFiles(directory=container.image_store.directory, check_dir=False),
        name="uploads",
    )

    @app.get("/health")
    async def health() -> HealthResponse:
        """Simple health check endpoint."""
        return HealthResponse(status="OK", message="Server is running")

    @app.post("/create-account", status_code=status.HTTP_201_CREATED)
    async def create_account(
        payload: CreateAccountRequest,
        state_container: AppContainer = Depends(get_container),
    ) -> AuthResponse:
        """Register a new account and return its first access token."""
        result = await state_container.auth_service.register(
            payload.full_name, payload.email, payload.password
        )
        return AuthResponse(
            user=UserOut.from_domain(result.user),
            access_token=result.access_token,
            message="Registration Successful",
        )

    @app.post("/login")
    async def login(
        payload: LoginRequest,
        state_container: AppContainer = Depends(get_container),
    ) -> AuthResponse:
        """Exchange credentials for an access token."""
        result = await state_container.auth_service.login(
            payload.email, payload.password
        )
        return AuthResponse(
            user=UserOut.from_domain(result.user),
            access_token=result.access_token,
            message="Login successful",
        )

    @app.get("/get-user")
    async def get_user(
        user_id: str = Depends(require_user_id),
        state_container: AppContainer = Depends(get_container),
    ) -> UserResponse:
        """Return the profile of the authenticated caller."""
        user = await state_container.auth_service.get_profile(user_id)
        return UserResponse(
            user=UserOut.from_domain(user),
            message="User data retrieved successfully",
        )

    @app.post("/caption", status_code=status.HTTP_201_CREATED)
    async def create_caption(
        payload: CaptionRequest,
        user_id: str = Depends(require_user_id),
        state_container: AppContainer = Depends(get_container),
    ) -> CaptionResponse:
        """Create a caption owned by the authenticated caller."""
        caption = await state_container.caption_service.create_caption(
            user_id=user_id,
            title=payload.title,
            story=payload.story,
            visited_location=payload.visited_location,
            image_url=payload.image_url,
            visited_date=payload.visited_date,
        )
        return CaptionResponse(
            caption=CaptionOut.from_domain(caption),
            message="Caption created successfully",
        )

    @app.get("/get-caption")
    async def get_captions(
        user_id: str = Depends(require_user_id),
        state_container: AppContainer = Depends(get_container),
    ) -> StoriesResponse:
        """List the captions owned by the authenticated caller."""
        captions = await state_container.caption_service.list_captions(user_id)
        return StoriesResponse(
            stories=[CaptionOut.from_domain(caption) for caption in captions]
        )

    @app.post("/image-upload", status_code=status.HTTP_201_CREATED)
    def image_upload(
        request: Request,
        image: UploadFile | None = File(default=None),
        state_container: AppContainer = Depends(get_container),
    ) -> UploadResponse:
        """Store a single uploaded image and return its public URL."""
        base_url = state_container.settings.public_base_url or str(request.base_url)
        stored = state_container.upload_service.store_image(
            image.file if image else None,
            image.filename if image else None,
            image.content_type if image else None,
            base_url=base_url,
        )
        return UploadResponse(image_url=stored.url)

    return app
