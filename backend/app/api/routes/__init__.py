from fastapi import APIRouter

from app.api.routes import admin, health, interviews, news, posts

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(interviews.router, tags=["interviews"])
api_router.include_router(posts.router)
api_router.include_router(news.router)
api_router.include_router(admin.router)
