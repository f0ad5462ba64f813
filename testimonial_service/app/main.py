from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.database import Base, engine
from shared.core.log_config import setup_logging
from shared.helpers.exception_handler import setup_exception_handlers
from shared.models import users, spaces, reviews
from .router import embed_router, reviews_router, spaces_router

setup_logging()

app = FastAPI(title="TestiFlow Testimonial Service")

# Create all tables
Base.metadata.create_all(bind=engine)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

setup_exception_handlers(app)

# Include routers
app.include_router(spaces_router.router)
app.include_router(reviews_router.router)
app.include_router(embed_router.router)


@app.get("/api/health")
def health():
    return {"status": "healthy"}
