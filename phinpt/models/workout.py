import enum

from sqlalchemy import Column, Integer, String, Date, ForeignKey, Boolean, Float, Enum
from sqlalchemy.orm import relationship

from phinpt.core.base import Base, uuid_pk, created_at_column, updated_at_column


class PlanAuthorEnum(str, enum.Enum):
    admin = "admin"
    client = "client"


class WorkoutPlan(Base):
    __tablename__ = "workout_plans"

    id = uuid_pk()
    name = Column(String, nullable=False)
    client_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    week_number = Column(Integer, default=1, nullable=False)
    start_date = Column(Date, nullable=False)
    created_by = Column(Enum(PlanAuthorEnum), default=PlanAuthorEnum.admin, nullable=False)
    created_at = created_at_column()
    updated_at = updated_at_column()

    days = relationship(
        "WorkoutDay",
        back_populates="plan",
        order_by="WorkoutDay.day_order",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class WorkoutDay(Base):
    __tablename__ = "workout_days"

    id = uuid_pk()
    workout_plan_id = Column(String(36), ForeignKey("workout_plans.id", ondelete="CASCADE"), nullable=False, index=True)
    day_name = Column(String, nullable=False)
    day_order = Column(Integer, nullable=False)
    is_rest_day = Column(Boolean, default=False, nullable=False)
    created_at = created_at_column()

    plan = relationship("WorkoutPlan", back_populates="days")
    exercises = relationship(
        "Exercise",
        back_populates="day",
        order_by="Exercise.exercise_order",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class Exercise(Base):
    __tablename__ = "exercises"

    id = uuid_pk()
    workout_day_id = Column(String(36), ForeignKey("workout_days.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    exercise_order = Column(Integer, nullable=False)
    created_at = created_at_column()
    updated_at = updated_at_column()

    day = relationship("WorkoutDay", back_populates="exercises")
    sets = relationship(
        "ExerciseSet",
        back_populates="exercise",
        order_by="ExerciseSet.set_number",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class ExerciseSet(Base):
    __tablename__ = "exercise_sets"

    id = uuid_pk()
    exercise_id = Column(String(36), ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False, index=True)
    set_number = Column(Integer, nullable=False)
    reps = Column(Integer, default=0, nullable=False)
    reality = Column(Integer, nullable=True)
    weight = Column(Float, nullable=True)
    volume = Column(Float, nullable=True)
    created_at = created_at_column()
    updated_at = updated_at_column()

    exercise = relationship("Exercise", back_populates="sets")
