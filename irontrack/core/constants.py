"""Application constants."""

# Backup document format
BACKUP_VERSION = "1.0"
BACKUP_FILENAME_PREFIX = "irontrack-backup"

DEFAULT_WEIGHT_UNIT = "lbs"
DEFAULT_DISTANCE_UNIT = "miles"

# Seeded on every startup; a row is only inserted when its name is not taken yet
BUILT_IN_CARDIO_TYPES: list[dict] = [
    {"name": "Outdoor Run", "category": "run", "show_distance": True, "show_pace": True, "show_speed": False,
     "pace_unit": "min/mile", "default_distance_unit": "miles"},
    {"name": "Treadmill Run", "category": "run", "show_distance": True, "show_pace": True, "show_speed": False,
     "pace_unit": "min/mile", "default_distance_unit": "miles"},
    {"name": "Walk/Hike", "category": "run", "show_distance": True, "show_pace": True, "show_speed": False,
     "pace_unit": "min/mile", "default_distance_unit": "miles"},
    {"name": "Outdoor Cycling", "category": "cycle", "show_distance": True, "show_pace": False, "show_speed": True,
     "speed_unit": "mph", "default_distance_unit": "miles"},
    {"name": "Stationary Cycling", "category": "cycle", "show_distance": True, "show_pace": False, "show_speed": True,
     "speed_unit": "mph", "default_distance_unit": "miles"},
    {"name": "Rowing (Erg)", "category": "row", "show_distance": True, "show_pace": True, "show_speed": False,
     "pace_unit": "min/500m", "default_distance_unit": "meters"},
    {"name": "Elliptical", "category": "other", "show_distance": False, "show_pace": False, "show_speed": False},
    {"name": "Stair Climber", "category": "other", "show_distance": False, "show_pace": False, "show_speed": False},
    {"name": "Swimming", "category": "swim", "show_distance": True, "show_pace": True, "show_speed": False,
     "pace_unit": "min/100m", "default_distance_unit": "meters"},
    {"name": "Jump Rope", "category": "other", "show_distance": False, "show_pace": False, "show_speed": False},
    {"name": "HIIT/Intervals", "category": "other", "show_distance": False, "show_pace": False, "show_speed": False},
    {"name": "Other Cardio", "category": "other", "show_distance": True, "show_pace": False, "show_speed": False},
]
