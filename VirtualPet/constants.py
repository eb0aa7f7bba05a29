import os

# --- RUNTIME CONFIGURATION ---
LOG_LEVEL = os.getenv("VIRTUALPET_LOG_LEVEL", "WARNING")
NO_COLOR = os.getenv("VIRTUALPET_NO_COLOR", "") == "1"
MUTE = os.getenv("VIRTUALPET_MUTE", "") == "1"
SOUND_DIR = os.getenv("VIRTUALPET_SOUND_DIR", "assets/sounds")

# --- STAT BOUNDS ---
MIN_STAT = 0
MAX_STAT = 100

# --- AGE STAGES (minutes since birth) ---
BABY_MAX_AGE = 5.0
ADULT_MAX_AGE = 15.0
# Elderly from 15 minutes on

BABY_DECAY_MULTIPLIER = 1.3
ADULT_DECAY_MULTIPLIER = 1.0
ELDERLY_DECAY_MULTIPLIER = 0.7

# --- DECAY RATES (points per second, before age multiplier) ---
HUNGER_DECAY_RATE = 2.0
CLEANLINESS_DECAY_RATE = 1.0
HAPPINESS_DECAY_RATE = 1.0  # only while hunger or cleanliness is critical
HEALTH_DECAY_RATE = 0.5     # while 2+ stats are low, or while ill

CRITICAL_STAT_THRESHOLD = 30  # below this, happiness decays
LOW_STAT_THRESHOLD = 20       # below this, a stat counts towards health decay

# --- ACTION EFFECTS ---
FEED_HUNGER_INCREASE = 20
FEED_HAPPINESS_INCREASE = 5

PLAY_HAPPINESS_INCREASE = 20
PLAY_HUNGER_DECREASE = 10

SLEEP_HEALTH_INCREASE = 20
SLEEP_HUNGER_DECREASE = 5

CLEAN_CLEANLINESS_INCREASE = 40
CLEAN_HAPPINESS_INCREASE = 10

# --- ILLNESS ---
ILLNESS_CURE_THRESHOLD = 60
ILLNESS_HEALTH_DECAY_MULTIPLIER = 2.5
CLEANLINESS_LOW_THRESHOLD = 30
CLEANLINESS_CRITICAL_THRESHOLD = 10
ILLNESS_CHANCE_LOW = 0.075
ILLNESS_CHANCE_CRITICAL = 0.175
ILLNESS_NAMES = ("Cold", "Fever", "Fleas", "Stomach Bug", "Infection")

# --- SPECIAL ABILITIES ---
# Dog - Loyalty
LOYALTY_DURATION = 60.0  # seconds
LOYALTY_HAPPINESS_REDUCTION = 0.5
DOG_PLAY_HAPPINESS = 20
DOG_PLAY_HUNGER = 10

# Cat - Nine Lives
MAX_LIVES = 9
CAT_PLAY_HAPPINESS_BONUS = 18
CAT_PLAY_HUNGER_RESTORE = 5

# Bird - Song
SONG_COOLDOWN = 120.0  # seconds
SONG_HUNGER_BOOST = 20
SONG_HAPPINESS_BOOST = 25
SONG_HEALTH_BOOST = 15
SONG_CLEANLINESS_BOOST = 20
BIRD_PLAY_HUNGER_RESTORE = 2

# Happiness gained from a friendly interaction, per species
INTERACT_HAPPINESS = {"Dog": 5, "Cat": 3, "Bird": 4}

# --- MENU ---
MENU_MIN = 1
MENU_MAX = 8
PET_CHOICE_MIN = 1
PET_CHOICE_MAX = 3

# --- CONSOLE UI ---
PROGRESS_BAR_CELLS = 10
WARNING_THRESHOLD = 30
