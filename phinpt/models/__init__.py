from phinpt.models.user import User, RoleEnum
from phinpt.models.workout import WorkoutPlan, WorkoutDay, Exercise, ExerciseSet, PlanAuthorEnum
from phinpt.models.meal import MealPlan, Meal, MealFood, MacroTypeEnum
from phinpt.models.weight import WeightRecord
from phinpt.models.content import Testimonial, Video
from phinpt.models.site_settings import ContactInfo, HomeContent

__all__ = [
    "User", "RoleEnum",
    "WorkoutPlan", "WorkoutDay", "Exercise", "ExerciseSet", "PlanAuthorEnum",
    "MealPlan", "Meal", "MealFood", "MacroTypeEnum",
    "WeightRecord",
    "Testimonial", "Video",
    "ContactInfo", "HomeContent",
]
