from pydantic import BaseModel
from typing import List

from phinpt.schemas.content import TestimonialRead, VideoRead
from phinpt.schemas.meal import MealPlanRead
from phinpt.schemas.site_settings import ContactInfoRead, HomeContentRead
from phinpt.schemas.user import UserRead
from phinpt.schemas.weight import WeightRecordRead
from phinpt.schemas.workout import WorkoutPlanRead


class SiteSnapshot(BaseModel):
    home_content: HomeContentRead
    contact_info: ContactInfoRead
    testimonials: List[TestimonialRead]
    videos: List[VideoRead]
    # Коллекции, которые не удалось загрузить (отданы пустыми/по умолчанию)
    failed: List[str] = []


class AdminDashboard(SiteSnapshot):
    workout_plans: List[WorkoutPlanRead]
    meal_plans: List[MealPlanRead]
    weight_records: List[WeightRecordRead]
    users: List[UserRead]
