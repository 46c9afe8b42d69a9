import enum

from sqlalchemy import Column, Integer, String, Text, ForeignKey, Enum
from sqlalchemy.orm import relationship

from phinpt.core.base import Base, uuid_pk, created_at_column, updated_at_column


class MacroTypeEnum(str, enum.Enum):
    carb = "Carb"
    protein = "Pro"
    fat = "Fat"


class MealPlan(Base):
    __tablename__ = "meal_plans"

    id = uuid_pk()
    name = Column(String, nullable=False)
    client_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    total_calories = Column(Integer, default=0, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = created_at_column()
    updated_at = updated_at_column()

    meals = relationship(
        "Meal",
        back_populates="plan",
        order_by="Meal.meal_order",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class Meal(Base):
    __tablename__ = "meals"

    id = uuid_pk()
    meal_plan_id = Column(String(36), ForeignKey("meal_plans.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    total_calories = Column(Integer, default=0, nullable=False)
    meal_order = Column(Integer, nullable=False)
    created_at = created_at_column()

    plan = relationship("MealPlan", back_populates="meals")
    foods = relationship(
        "MealFood",
        back_populates="meal",
        order_by="MealFood.food_order",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class MealFood(Base):
    __tablename__ = "meal_foods"

    id = uuid_pk()
    meal_id = Column(String(36), ForeignKey("meals.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    macro_type = Column(Enum(MacroTypeEnum, values_callable=lambda e: [m.value for m in e]), nullable=False)
    calories = Column(Integer, default=0, nullable=False)
    notes = Column(Text, nullable=True)
    food_order = Column(Integer, nullable=False)
    created_at = created_at_column()

    meal = relationship("Meal", back_populates="foods")
