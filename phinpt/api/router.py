from fastapi import APIRouter
from phinpt.api.v1.auth import router as auth_router
from phinpt.api.v1.site import router as site_router
from phinpt.api.v1.portal import router as portal_router
from phinpt.api.v1.admin import router as admin_router
from phinpt.api.v1.workout_plans import router as workout_plans_router
from phinpt.api.v1.meal_plans import router as meal_plans_router
from phinpt.api.v1.weight_records import router as weight_records_router
from phinpt.api.v1.content import testimonials_router, videos_router
from phinpt.api.v1.site_settings import router as site_settings_router
from phinpt.api.v1.uploads import router as uploads_router

api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(site_router, prefix="/site", tags=["site"])
api_router.include_router(portal_router, prefix="/portal", tags=["portal"])
api_router.include_router(admin_router, prefix="/admin", tags=["admin"])
api_router.include_router(workout_plans_router, prefix="/admin/workout-plans", tags=["workout-plans"])
api_router.include_router(meal_plans_router, prefix="/admin/meal-plans", tags=["meal-plans"])
api_router.include_router(weight_records_router, prefix="/admin/weight-records", tags=["weight-records"])
api_router.include_router(testimonials_router, prefix="/admin/testimonials", tags=["testimonials"])
api_router.include_router(videos_router, prefix="/admin/videos", tags=["videos"])
api_router.include_router(site_settings_router, prefix="/admin/settings", tags=["settings"])
api_router.include_router(uploads_router, prefix="/admin/uploads", tags=["uploads"])
