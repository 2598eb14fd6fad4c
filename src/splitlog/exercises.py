"""Exercise catalog: static exercises per workout day, with display metadata."""

from __future__ import annotations

from dataclasses import dataclass

from splitlog.models import WorkoutType

MINUTES_PER_EXERCISE = 8


@dataclass(frozen=True)
class Exercise:
    exercise_id: str
    name: str
    muscle_group: str
    rep_range: tuple[int, int]  # inclusive (lower, upper) target reps
    equipment: str
    notes: str | None = None

    def __post_init__(self) -> None:
        lo, hi = self.rep_range
        if lo < 0 or lo > hi:
            raise ValueError(f"invalid rep_range {self.rep_range!r} for {self.exercise_id}")


def _ex(
    exercise_id: str,
    name: str,
    muscle_group: str,
    rep_range: tuple[int, int],
    equipment: str,
    notes: str | None = None,
) -> Exercise:
    return Exercise(
        exercise_id=exercise_id,
        name=name,
        muscle_group=muscle_group,
        rep_range=rep_range,
        equipment=equipment,
        notes=notes,
    )


# Order within each workout day is the order exercises are performed.
EXERCISES_BY_WORKOUT: dict[WorkoutType, tuple[Exercise, ...]] = {
    "push": (
        _ex("flat_bench_press", "Flat Bench Press", "Chest", (8, 15), "Barbell",
            "Focus on controlled movement"),
        _ex("incline_dumbbell_press", "Incline Dumbbell Press", "Chest", (8, 15), "Dumbbells",
            "Upper chest focus"),
        _ex("chest_machine_flyes", "Chest Machine Flyes", "Chest", (8, 15), "Machine",
            "Stretch at bottom"),
        _ex("dumbbell_shoulder_press", "Dumbbell Shoulder Press", "Shoulders", (8, 15), "Dumbbells",
            "Control the negative"),
        _ex("dumbbell_lateral_raises", "Dumbbell Lateral Raises", "Shoulders", (12, 20), "Dumbbells",
            "Light weight, focus on form"),
        _ex("single_arm_tricep_extension", "Single Arm Tricep Extension", "Triceps", (8, 15),
            "Dumbbell", "Keep elbow stable"),
        _ex("skull_crushers", "Skull Crushers", "Triceps", (8, 12), "EZ Bar",
            "Lower to forehead"),
    ),
    "pull": (
        _ex("lat_pulldown", "Shoulder Grip Lat Pulldown", "Lats", (8, 15), "Cable machine",
            "Shoulder-width grip"),
        _ex("machine_rowing", "Machine Rowing", "Back", (8, 15), "Machine",
            "Squeeze shoulder blades"),
        _ex("single_arm_dumbbell_rows", "Single Arm Dumbbell Rows", "Back", (12, 12), "Dumbbell",
            "Support with bench"),
        _ex("reverse_pec_dec", "Reverse Pec Dec", "Rear Delts", (8, 15), "Machine",
            "Light weight, focus on rear delts"),
        _ex("face_pulls", "Face Pulls", "Rear Delts", (8, 15), "Cable", "Pull to face level"),
        _ex("supinated_bicep_curls", "Supinated Alternating Bicep Curls", "Biceps", (8, 15),
            "Dumbbells", "Rotate as you curl"),
        _ex("bicep_preacher_curl", "Bicep Preacher Curl", "Biceps", (8, 12), "Preacher bench",
            "Control the negative"),
    ),
    "legs": (
        _ex("squats", "Squats", "Legs", (10, 15), "Barbell", "Depth below parallel"),
        _ex("machine_leg_extensions", "Machine Leg Extensions", "Quadriceps", (12, 20), "Machine",
            "Squeeze at top"),
        _ex("machine_hamstring_curls", "Machine Hamstring Curls", "Hamstrings", (10, 15), "Machine",
            "Full range of motion"),
        _ex("leg_press", "Leg Press", "Legs", (10, 20), "Machine", "Control the weight"),
        _ex("weighted_cable_crunches", "Weighted Cable Crunches", "Abs", (10, 15), "Cable",
            "Crunch down"),
        _ex("leg_raises", "Leg Raises", "Abs", (8, 12), "None", "Control the movement"),
    ),
    "arms": (
        _ex("ez_bar_bicep_curls", "EZ Bar Bicep Curls", "Biceps", (8, 12), "EZ Bar", "Go heavy"),
        _ex("incline_dumbbell_curls", "Incline Dumbbell Curls", "Biceps", (10, 15), "Dumbbells",
            "Focus on reps"),
        _ex("tricep_pushdowns", "Tricep Pushdowns", "Triceps", (8, 15), "Cable",
            "Keep elbows at sides"),
        _ex("overhead_cable_tricep_extensions", "Overhead Cable Tricep Extensions", "Triceps",
            (8, 15), "Cable", "Keep elbows up"),
        _ex("wrist_curls", "Wrist Curls", "Forearms", (15, 30), "Dumbbells",
            "Light weight, high reps"),
        _ex("hammer_curls", "Hammer Curls", "Biceps", (8, 12), "Dumbbells", "Neutral grip"),
    ),
    "upper": (
        _ex("weighted_dips", "Weighted Dips", "Chest/Triceps", (8, 12), "Dip station",
            "Lean forward for chest"),
        _ex("cable_crossovers", "Cable Crossovers", "Chest", (8, 15), "Cable", "Squeeze at center"),
        _ex("pull_ups", "Pull-ups", "Back", (8, 12), "Pull-up bar", "Full range of motion"),
        _ex("barbell_rowing", "Barbell Rowing", "Back", (8, 15), "Barbell", "Row to lower chest"),
        _ex("cable_lateral_raises", "Cable Lateral Raises", "Shoulders", (10, 20), "Cable",
            "Constant tension"),
        _ex("shrugs", "Shrugs", "Traps", (10, 20), "Dumbbells", "Squeeze at top"),
    ),
    "lower": (
        _ex("hamstring_curls_lower", "Hamstring Curls", "Hamstrings", (8, 15), "Machine",
            "Slow eccentric"),
        _ex("hip_thrusts", "Hip Thrusts", "Glutes", (8, 15), "Barbell", "Squeeze glutes at top"),
        _ex("calf_raises", "Calf Raises", "Calves", (10, 20), "Machine",
            "Full stretch and contraction"),
        _ex("russian_splits", "Russian Splits", "Legs", (8, 15), "Dumbbells",
            "Control the descent"),
        _ex("planks", "Planks", "Core", (60, 180), "None", "1 minute x 3 sets"),  # seconds held
        _ex("dumbbell_pullovers", "Dumbbell Pullovers", "Lats/Chest", (8, 15), "Dumbbell",
            "Feel the stretch"),
    ),
}

EXERCISES: dict[str, Exercise] = {
    ex.exercise_id: ex
    for exercises in EXERCISES_BY_WORKOUT.values()
    for ex in exercises
}

WORKOUT_DISPLAY_NAMES: dict[WorkoutType, str] = {
    "push": "Push Day",
    "pull": "Pull Day",
    "legs": "Legs & Abs",
    "arms": "Arms Day",
    "upper": "Upper Body",
    "lower": "Lower Body & Abs",
}

WORKOUT_MUSCLE_GROUPS: dict[WorkoutType, str] = {
    "push": "Chest, Shoulders, Triceps",
    "pull": "Back, Biceps, Rear Delts",
    "legs": "Quads, Hamstrings, Glutes, Abs",
    "arms": "Biceps, Triceps, Forearms",
    "upper": "Chest, Back, Shoulders",
    "lower": "Glutes, Hamstrings, Calves, Core",
}


def exercises_for(workout_type: WorkoutType) -> tuple[Exercise, ...]:
    """Ordered exercises for a workout day. Unknown types yield an empty tuple."""
    return EXERCISES_BY_WORKOUT.get(workout_type, ())


def get_exercise(exercise_id: str) -> Exercise | None:
    """Look up an exercise by ID, returning None if it is not in the catalog."""
    return EXERCISES.get(exercise_id)


def workout_display_name(workout_type: WorkoutType) -> str:
    return WORKOUT_DISPLAY_NAMES[workout_type]


def workout_muscle_groups(workout_type: WorkoutType) -> str:
    return WORKOUT_MUSCLE_GROUPS[workout_type]


def estimated_duration(workout_type: WorkoutType) -> str:
    """Rough duration label, e.g. "46-66 min" for a seven-exercise day."""
    minutes = len(exercises_for(workout_type)) * MINUTES_PER_EXERCISE
    return f"{minutes - 10}-{minutes + 10} min"
