# verification_gateway/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException

from .config import Settings, configure_logging, load_settings
from .exceptions import (
    GatewayError, gateway_exception_handler, http_exception_handler, validation_exception_handler,
)
from .middleware import ErrorHandlingMiddleware, LoggingMiddleware, SecurityMiddleware
from .routers import pricing_router, verification_router
from .application.services import PricingService, VerificationService
from .application.ports.audit_logger import AuditLogger
from .application.ports.pricing_source import PricingSource
from .application.ports.pricing_store import PricingStore
from .application.ports.verification_provider import VerificationProvider
from .infrastructure.audit.std_logger import StdAuditLogger
from .infrastructure.pricing.static_source import StaticPricingSource
from .infrastructure.storage.json_file_store import JsonFilePricingStore
from .infrastructure.verify.twilio_provider import TwilioVerifyProvider

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings,
    verification_provider: Optional[VerificationProvider] = None,
    pricing_source: Optional[PricingSource] = None,
    pricing_store: Optional[PricingStore] = None,
    audit_logger: Optional[AuditLogger] = None,
) -> FastAPI:
    """Wire the gateway from explicit settings and collaborators.

    Collaborators left as ``None`` get their production implementation:
    Twilio Verify, the static pricing stub, the JSON file store under
    ``PRICES_FILE`` and the stdlib audit logger.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}...")
        logger.info(f"Pricing snapshot path: {settings.PRICES_FILE}")
        yield
        logger.info(f"Shutting down {settings.APP_NAME}...")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url=("/docs" if settings.DOCS_ENABLED else None),
        redoc_url=("/redoc" if settings.DOCS_ENABLED else None),
        openapi_url=("/openapi.json" if settings.DOCS_ENABLED else None),
    )

    app.state.settings = settings
    app.state.verification_service = VerificationService(
        provider=verification_provider or TwilioVerifyProvider.from_settings(settings),
        audit_logger=audit_logger or StdAuditLogger(),
        channel=settings.VERIFICATION_CHANNEL,
    )
    app.state.pricing_service = PricingService(
        source=pricing_source or StaticPricingSource(),
        store=pricing_store or JsonFilePricingStore(settings.PRICES_FILE),
    )

    app.add_exception_handler(GatewayError, gateway_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.add_middleware(ErrorHandlingMiddleware, debug=settings.DEBUG)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(SecurityMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(verification_router.router)
    app.include_router(pricing_router.router)

    return app


def main() -> None:
    load_dotenv()
    configure_logging()
    settings = load_settings()
    configure_logging(settings)
    app = create_app(settings)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
