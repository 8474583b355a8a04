from fastapi import APIRouter

from app.api import awards, badges, behaviors, classes, group_works, students, system, teachers

api_router = APIRouter()
api_router.include_router(system.router)
api_router.include_router(teachers.router)
api_router.include_router(behaviors.router)
api_router.include_router(classes.router)
api_router.include_router(students.router)
api_router.include_router(group_works.router)
api_router.include_router(awards.router)
api_router.include_router(badges.router)
