import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import sessionmaker

from career_guidance import config
from career_guidance.college_service.routes import build_router as college_router
from career_guidance.middleware import auth_middleware
from career_guidance.profile_service.routes import build_router as profile_router
from career_guidance.quiz_service.routes import build_router as quiz_router
from career_guidance.roadmap_service.routes import build_router as roadmap_router
from career_guidance.shared.database import init_db, make_engine, make_session_local
from career_guidance.suggestion_service.routes import build_router as suggestion_router

logger = logging.getLogger(__name__)

SERVICE_NAME = "career-guidance"
VERSION = "1.0.0"


def create_app(SessionLocal: sessionmaker | None = None) -> FastAPI:
    if SessionLocal is None:
        engine = make_engine(config.DATABASE_URL)
        init_db(engine)
        SessionLocal = make_session_local(engine)

    app = FastAPI(title="Career Guidance API", version=VERSION)

    # Browsers reject "*" with credentials
    allow_credentials = config.CORS_ORIGINS != ["*"]

    app.middleware("http")(auth_middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(profile_router(SessionLocal), prefix="/profile", tags=["Profile"])
    app.include_router(quiz_router(SessionLocal), prefix="/quiz", tags=["Quiz"])
    app.include_router(suggestion_router(), prefix="/ai", tags=["AI Suggestions"])
    app.include_router(college_router(SessionLocal), prefix="/colleges", tags=["Colleges"])
    app.include_router(roadmap_router(SessionLocal), prefix="/roadmaps", tags=["Roadmaps"])

    @app.get("/health", operation_id="health_check", tags=["Health"])
    async def health_check():
        return {"status": "healthy", "service": SERVICE_NAME}

    @app.get("/", operation_id="root", tags=["Root"])
    async def root():
        return {
            "service": "Career Guidance API",
            "version": VERSION,
            "routers": ["profile", "quiz", "ai", "colleges", "roadmaps"],
            "docs": "/docs",
            "openapi": "/openapi.json",
        }

    logger.info("Application created (db=%s)", SessionLocal.kw.get("bind"))
    return app
