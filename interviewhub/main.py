# interviewhub/main.py

# ------------------------
# load .env before anything reads settings
# ------------------------
from dotenv import load_dotenv
load_dotenv()

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from interviewhub.config import settings
from interviewhub.db.base import Base, engine
from interviewhub.models import registry  # noqa: F401  (registers every table)

from interviewhub.routers import admin as admin_router
from interviewhub.routers import comments as comments_router
from interviewhub.routers import custom_questions as custom_questions_router
from interviewhub.routers import interviews as interviews_router
from interviewhub.routers import live_code as live_code_router
from interviewhub.routers import mock_interviews as mock_interviews_router
from interviewhub.routers import resumes as resumes_router
from interviewhub.routers import skills_profile as skills_profile_router
from interviewhub.routers import users as users_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # no migration tool: tables are created on startup
    Base.metadata.create_all(bind=engine)
    logger.info("InterviewHub API started (env=%s)", settings.app_env)
    yield


# ------------------------
# 1) app
# ------------------------
app = FastAPI(title="InterviewHub API", lifespan=lifespan)

# ------------------------
# 2) CORS
# ------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ------------------------
# 3) routers
# ------------------------
app.include_router(users_router.router)
app.include_router(interviews_router.router)
app.include_router(live_code_router.router)
app.include_router(custom_questions_router.router)
app.include_router(comments_router.router)
app.include_router(mock_interviews_router.router)
app.include_router(skills_profile_router.router)
app.include_router(resumes_router.router)
app.include_router(admin_router.router)


# ------------------------
# 4) health check
# ------------------------
@app.get("/")
def root():
    return {"ok": True}
