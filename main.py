import uvicorn, logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import sys, asyncio
from app.config.settings import settings
from app.database.connection import MongoConnection
from app.utils.responses import ApiError, error_body

from app.routes.destination_route import router as destination_route
from app.routes.tourPackage_route import router as package_route
from app.routes.blog_route import router as blog_route
from app.routes.health_route import router as health_route

log_handlers = [logging.StreamHandler()]
if settings.LOG_FILE:
    log_handlers.append(logging.FileHandler(settings.LOG_FILE))

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=log_handlers
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await app.state.mongo.close()


app = FastAPI(
    title="Tours & Travels Catalog API",
    description="Destinations, tour packages and travel blog content",
    version=settings.API_VERSION,
    lifespan=lifespan
)
app.state.mongo = MongoConnection(settings)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, exc.details))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Rejected request to {request.url.path}: {exc.errors()}")
    details = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()]
    return JSONResponse(status_code=400, content=error_body("Invalid request", details))


# register the routes
app.include_router(destination_route, prefix="/api/destinations", tags=["destinations"])
app.include_router(package_route, prefix="/api/packages", tags=["packages"])
app.include_router(blog_route, prefix="/api/blog", tags=["blog"])
app.include_router(health_route, prefix="/api/health", tags=["health"])

@app.get("/")
def root():
    return {"message": "Tours & Travels catalog backend is running"}


async def run_seed():
    from app.services.seed_service import seed_database

    connection = MongoConnection(settings)
    try:
        await seed_database(connection)
    finally:
        await connection.close()


if __name__ == "__main__" :

    if len(sys.argv) > 1 and sys.argv[1] == "seed":
        # Load the sample catalog into the configured database
        asyncio.run(run_seed())

    else:
        uvicorn.run(app, host = settings.HOST, port = settings.PORT, log_level = "info")
