from vikfit.models.workout import Workout
from vikfit.models.exercise import Exercise
from vikfit.models.schedule_entry import ScheduleEntry
from vikfit.models.workout_log import WorkoutLog, WorkoutStatus
from vikfit.models.set_log import SetLog
from vikfit.models.meal import Meal
from vikfit.models.meal_log import MealLog
from vikfit.models.macro_goal import MacroGoal
from vikfit.models.weight_entry import WeightEntry

__all__ = [
    "Workout", "Exercise", "ScheduleEntry", "WorkoutLog", "WorkoutStatus", "SetLog",
    "Meal", "MealLog", "MacroGoal", "WeightEntry",
]
