"""
Module containing the exercise catalog used to canonicalize exercise names.

Each entry lists every spelling (English, Russian, abbreviations) that should
resolve to the same stored exercise. Declaration order matters: when two
entries share an alias, the later entry owns it.
"""

from typing import List

from .models import ExerciseCategory, ExerciseDefinition

EXERCISES_DATABASE: List[ExerciseDefinition] = [
    # === CHEST ===
    ExerciseDefinition(
        id="bench_press",
        canonical_name="Bench press",
        display_name="Bench Press",
        display_name_local="Жим лёжа",
        aliases=(
            "bench press", "bench", "bench press barbell", "barbell bench press", "bp",
            "flat bench", "flat bench press", "жим лежа", "жим лёжа", "жим штанги лежа",
        ),
        category=ExerciseCategory.CHEST,
        muscle_groups=("chest", "triceps", "shoulders"),
        equipment="barbell",
    ),
    ExerciseDefinition(
        id="bench_incline_press",
        canonical_name="Bench incline press",
        display_name="Incline Bench Press",
        display_name_local="Наклонный жим",
        aliases=(
            "bench incline press", "incline bench", "incline press", "incline bench press",
            "incline dumbbell press", "incline dumbbell", "наклонный жим", "жим на наклонной",
            "жим на наклонной скамье", "incline",
        ),
        category=ExerciseCategory.CHEST,
        muscle_groups=("chest", "shoulders", "triceps"),
        equipment="barbell",
    ),
    ExerciseDefinition(
        id="fly_dumbbell",
        canonical_name="Fly dumbbell",
        display_name="Dumbbell Fly",
        display_name_local="Разводка с гантелями",
        aliases=(
            "fly dumbbell", "dumbbell fly", "chest fly", "fly", "flyes",
            "разводка", "разводка гантелей", "разведение гантелей",
        ),
        category=ExerciseCategory.CHEST,
        muscle_groups=("chest",),
        equipment="dumbbell",
    ),
    ExerciseDefinition(
        id="pushups",
        canonical_name="Push-ups",
        display_name="Push-ups",
        display_name_local="Отжимания",
        aliases=("push-ups", "pushups", "push ups", "pushup", "отжимания", "отжимания от пола"),
        category=ExerciseCategory.CHEST,
        muscle_groups=("chest", "triceps", "core"),
        is_bodyweight=True,
    ),
    ExerciseDefinition(
        id="dips",
        canonical_name="Dips",
        display_name="Dips",
        display_name_local="Отжимания на брусьях",
        aliases=("dips", "dip", "брусья", "отжимания на брусьях", "диплы"),
        category=ExerciseCategory.CHEST,
        muscle_groups=("chest", "triceps", "shoulders"),
        is_bodyweight=True,
    ),

    # === BACK ===
    ExerciseDefinition(
        id="chinup_pullup",
        canonical_name="Chinup pullup",
        display_name="Pull-ups",
        display_name_local="Подтягивания",
        aliases=(
            "chinup pullup", "chin up", "chinup", "pull up", "pullup", "pullups", "chinups",
            "chin-up", "pull-up", "подтягивания", "подтягивание", "турник",
        ),
        category=ExerciseCategory.BACK,
        muscle_groups=("back", "biceps"),
        is_bodyweight=True,
    ),
    ExerciseDefinition(
        id="bent_row_dumbbells",
        canonical_name="Bent row dumbbells",
        display_name="Dumbbell Row",
        display_name_local="Тяга гантелей в наклоне",
        aliases=(
            "bent row dumbbells", "bent over row", "dumbbell row", "db row", "bent row",
            "тяга гантелей", "тяга в наклоне", "тяга гантели в наклоне", "тяга гантелей в наклоне",
        ),
        category=ExerciseCategory.BACK,
        muscle_groups=("back", "biceps"),
        equipment="dumbbell",
    ),
    ExerciseDefinition(
        id="barbell_row",
        canonical_name="Barbell row",
        display_name="Barbell Row",
        display_name_local="Тяга штанги в наклоне",
        aliases=(
            "barbell row", "bb row", "bent over barbell row", "pendlay row",
            "тяга штанги", "тяга штанги в наклоне",
        ),
        category=ExerciseCategory.BACK,
        muscle_groups=("back", "biceps"),
        equipment="barbell",
    ),
    ExerciseDefinition(
        id="lat_pulldown",
        canonical_name="Lat pulldown",
        display_name="Lat Pulldown",
        display_name_local="Тяга верхнего блока",
        aliases=(
            "lat pulldown", "pulldown", "lat pull down", "cable pulldown",
            "тяга верхнего блока", "верхний блок", "тяга блока к груди",
        ),
        category=ExerciseCategory.BACK,
        muscle_groups=("back", "biceps"),
        equipment="cable",
    ),
    ExerciseDefinition(
        id="deadlift",
        canonical_name="Deadlift",
        display_name="Deadlift",
        display_name_local="Становая тяга",
        aliases=("deadlift", "dead lift", "становая", "становая тяга", "мертвая тяга"),
        category=ExerciseCategory.BACK,
        muscle_groups=("back", "legs", "core"),
        equipment="barbell",
    ),
    ExerciseDefinition(
        id="hyperextension",
        canonical_name="Hyperextension",
        display_name="Hyperextension",
        display_name_local="Гиперэкстензия",
        aliases=(
            "hyperextension", "hyper", "hyperextensions", "back extension",
            "гиперэкстензия", "разгибание спины", "экстензия",
        ),
        category=ExerciseCategory.BACK,
        muscle_groups=("back", "glutes"),
        is_bodyweight=True,
    ),

    # === SHOULDERS ===
    ExerciseDefinition(
        id="overhead_press_barbell",
        canonical_name="Overhead press barbell",
        display_name="Overhead Press",
        display_name_local="Жим штанги стоя",
        aliases=(
            "overhead press barbell", "overhead press", "ohp", "military press", "shoulder press",
            "press", "standing press", "жим стоя", "армейский жим", "жим штанги стоя",
            "жим над головой", "жим штанги над головой",
        ),
        category=ExerciseCategory.SHOULDERS,
        muscle_groups=("shoulders", "triceps"),
        equipment="barbell",
    ),
    ExerciseDefinition(
        id="overhead_press_dumbbell",
        canonical_name="Overhead press dumbbell",
        display_name="Dumbbell Shoulder Press",
        display_name_local="Жим гантелей сидя",
        aliases=(
            "overhead press dumbbell", "dumbbell press", "db press", "seated dumbbell press",
            "dumbbell shoulder press", "жим гантелей", "жим гантелей сидя", "жим гантелей стоя",
        ),
        category=ExerciseCategory.SHOULDERS,
        muscle_groups=("shoulders", "triceps"),
        equipment="dumbbell",
    ),
    ExerciseDefinition(
        id="lateral_raise",
        canonical_name="Lateral raise",
        display_name="Lateral Raise",
        display_name_local="Махи в стороны",
        aliases=(
            "lateral raise", "side raise", "lateral raises", "side raises",
            "махи в стороны", "разведение гантелей в стороны", "махи гантелями",
        ),
        category=ExerciseCategory.SHOULDERS,
        muscle_groups=("shoulders",),
        equipment="dumbbell",
    ),
    ExerciseDefinition(
        id="front_raise",
        canonical_name="Front raise",
        display_name="Front Raise",
        display_name_local="Подъём гантелей перед собой",
        aliases=("front raise", "front raises", "подъем перед собой", "махи перед собой"),
        category=ExerciseCategory.SHOULDERS,
        muscle_groups=("shoulders",),
        equipment="dumbbell",
    ),

    # === ARMS ===
    ExerciseDefinition(
        id="biceps_dumbbell",
        canonical_name="Biceps dumbbell",
        display_name="Dumbbell Bicep Curl",
        display_name_local="Подъём на бицепс с гантелями",
        aliases=(
            "biceps dumbbell", "dumbbell curl", "bicep curl", "biceps curl", "curls",
            "dumbbell bicep curl", "db curl", "бицепс гантели", "подъем на бицепс",
            "сгибание на бицепс", "бицепс с гантелями",
        ),
        category=ExerciseCategory.ARMS,
        muscle_groups=("biceps",),
        equipment="dumbbell",
    ),
    ExerciseDefinition(
        id="biceps_cable",
        canonical_name="Biceps cable",
        display_name="Cable Bicep Curl",
        display_name_local="Бицепс на блоке",
        aliases=(
            "biceps cable", "cable curl", "cable bicep", "cable curls",
            "бицепс блок", "бицепс на блоке", "сгибание на блоке",
        ),
        category=ExerciseCategory.ARMS,
        muscle_groups=("biceps",),
        equipment="cable",
    ),
    ExerciseDefinition(
        id="biceps_barbell",
        canonical_name="Biceps barbell",
        display_name="Barbell Curl",
        display_name_local="Подъём штанги на бицепс",
        aliases=(
            "biceps barbell", "barbell curl", "bb curl", "ez curl", "ez bar curl",
            "biceps curl barbell", "barbell bicep curl", "bicep curl barbell",
            "подъем штанги на бицепс", "бицепс со штангой", "бицепс штанга",
        ),
        category=ExerciseCategory.ARMS,
        muscle_groups=("biceps",),
        equipment="barbell",
    ),
    ExerciseDefinition(
        id="triceps_cable",
        canonical_name="Triceps cable",
        display_name="Cable Tricep Pushdown",
        display_name_local="Трицепс на блоке",
        aliases=(
            "triceps cable", "cable triceps", "pushdown", "tricep pushdown", "cable pushdown",
            "rope pushdown", "трицепс блок", "трицепс на блоке", "разгибание на трицепс",
            "разгибание трицепс",
        ),
        category=ExerciseCategory.ARMS,
        muscle_groups=("triceps",),
        equipment="cable",
    ),
    ExerciseDefinition(
        id="triceps_dumbbell",
        canonical_name="Triceps dumbbell",
        display_name="Dumbbell Tricep Extension",
        display_name_local="Французский жим с гантелей",
        aliases=(
            "triceps dumbbell", "tricep extension", "overhead tricep extension",
            "dumbbell tricep", "французский жим", "разгибание с гантелей",
        ),
        category=ExerciseCategory.ARMS,
        muscle_groups=("triceps",),
        equipment="dumbbell",
    ),
    ExerciseDefinition(
        id="skull_crushers",
        canonical_name="Skull crushers",
        display_name="Skull Crushers",
        display_name_local="Французский жим лёжа",
        aliases=(
            "skull crushers", "skull crusher", "lying tricep extension",
            "французский жим лежа", "французский жим лёжа",
        ),
        category=ExerciseCategory.ARMS,
        muscle_groups=("triceps",),
        equipment="barbell",
    ),

    # === LEGS ===
    ExerciseDefinition(
        id="squat",
        canonical_name="Squat",
        display_name="Squat",
        display_name_local="Приседания",
        aliases=(
            "squat", "squats", "back squat", "barbell squat",
            "приседания", "присед", "приседания со штангой",
        ),
        category=ExerciseCategory.LEGS,
        muscle_groups=("quads", "glutes", "core"),
        equipment="barbell",
    ),
    ExerciseDefinition(
        id="squat_dumbbell",
        canonical_name="Squat dumbbell",
        display_name="Goblet Squat",
        display_name_local="Приседания с гантелями",
        aliases=(
            "squat dumbbell", "dumbbell squat", "goblet squat", "db squat",
            "dumbbell squats", "приседания с гантелями", "гоблет присед", "присед с гантелями",
        ),
        category=ExerciseCategory.LEGS,
        muscle_groups=("quads", "glutes", "core"),
        equipment="dumbbell",
    ),
    ExerciseDefinition(
        id="leg_press",
        canonical_name="Leg press",
        display_name="Leg Press",
        display_name_local="Жим ногами",
        aliases=("leg press", "legpress", "жим ногами", "жим ног"),
        category=ExerciseCategory.LEGS,
        muscle_groups=("quads", "glutes"),
        equipment="machine",
    ),
    ExerciseDefinition(
        id="lunges",
        canonical_name="Lunges alternating",
        display_name="Lunges",
        display_name_local="Выпады",
        aliases=(
            "lunges alternating", "lunges", "lunge", "walking lunges", "forward lunges",
            "lunges alternating dumbbell", "dumbbell lunges", "alternating lunges",
            "выпады", "выпады попеременные", "шагающие выпады", "выпады с гантелями",
        ),
        category=ExerciseCategory.LEGS,
        muscle_groups=("quads", "glutes"),
        equipment="dumbbell",
    ),
    ExerciseDefinition(
        id="leg_curl",
        canonical_name="Leg curl",
        display_name="Leg Curl",
        display_name_local="Сгибание ног",
        aliases=(
            "leg curl", "hamstring curl", "lying leg curl", "seated leg curl",
            "сгибание ног", "сгибание ног лежа",
        ),
        category=ExerciseCategory.LEGS,
        muscle_groups=("hamstrings",),
        equipment="machine",
    ),
    ExerciseDefinition(
        id="leg_extension",
        canonical_name="Leg extension",
        display_name="Leg Extension",
        display_name_local="Разгибание ног",
        aliases=("leg extension", "quad extension", "разгибание ног", "разгибание ног сидя"),
        category=ExerciseCategory.LEGS,
        muscle_groups=("quads",),
        equipment="machine",
    ),
    ExerciseDefinition(
        id="calf_raises",
        canonical_name="Calf raises",
        display_name="Calf Raises",
        display_name_local="Подъём на носки",
        aliases=(
            "calf raises", "calf raise", "standing calf raise", "seated calf raise",
            "подъем на носки", "икры", "икроножные",
        ),
        category=ExerciseCategory.LEGS,
        muscle_groups=("calves",),
        equipment="machine",
    ),

    # === CORE ===
    ExerciseDefinition(
        id="situp",
        canonical_name="Sit-up",
        display_name="Sit-ups",
        display_name_local="Скручивания",
        aliases=(
            "sit-up", "situp", "situps", "sit-ups", "sit up", "crunch", "crunches",
            "скручивания", "пресс", "подъем туловища",
        ),
        category=ExerciseCategory.CORE,
        muscle_groups=("abs",),
        is_bodyweight=True,
    ),
    ExerciseDefinition(
        id="plank",
        canonical_name="Plank",
        display_name="Plank",
        display_name_local="Планка",
        aliases=("plank", "планка", "планки"),
        category=ExerciseCategory.CORE,
        muscle_groups=("core",),
        is_bodyweight=True,
    ),
    ExerciseDefinition(
        id="legs_hanging_raise",
        canonical_name="Legs hanging raise",
        display_name="Hanging Leg Raise",
        display_name_local="Подъём ног в висе",
        aliases=(
            "legs hanging raise", "hanging leg raise", "leg raise", "hanging raises",
            "leg hanging raise", "hanging leg raises", "knee raises", "knee raise",
            "подъем ног", "подъём ног", "подъем ног в висе", "ноги в висе",
        ),
        category=ExerciseCategory.CORE,
        muscle_groups=("abs", "hip_flexors"),
        is_bodyweight=True,
    ),
    ExerciseDefinition(
        id="russian_twist",
        canonical_name="Russian twist",
        display_name="Russian Twist",
        display_name_local="Русский твист",
        aliases=("russian twist", "russian twists", "русский твист", "твист"),
        category=ExerciseCategory.CORE,
        muscle_groups=("abs", "obliques"),
        is_bodyweight=True,
    ),

    # === CARDIO ===
    ExerciseDefinition(
        id="running",
        canonical_name="Running",
        display_name="Running",
        display_name_local="Бег",
        aliases=("running", "run", "jog", "jogging", "бег", "пробежка"),
        category=ExerciseCategory.CARDIO,
        muscle_groups=("legs", "cardio"),
    ),
    ExerciseDefinition(
        id="cycling",
        canonical_name="Cycling",
        display_name="Cycling",
        display_name_local="Велосипед",
        aliases=("cycling", "bike", "bicycle", "велосипед", "вело", "велотренажер"),
        category=ExerciseCategory.CARDIO,
        muscle_groups=("legs", "cardio"),
        equipment="machine",
    ),
    ExerciseDefinition(
        id="rowing",
        canonical_name="Rowing",
        display_name="Rowing",
        display_name_local="Гребля",
        aliases=("rowing", "row machine", "гребля", "гребной тренажер"),
        category=ExerciseCategory.CARDIO,
        muscle_groups=("back", "arms", "cardio"),
        equipment="machine",
    ),
]
