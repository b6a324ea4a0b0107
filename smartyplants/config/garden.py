"""Garden, pest and win-condition constants."""

# Garden layout
NUM_PLANTERS = 4  # Fixed number of garden slots
MAX_SEEDS = 4  # Capacity of the seed tray
STARTING_SEASON = 1

# Pest attrition
PEST_DESTRUCTION_THRESHOLD = 5  # Plants with lower pest resistance are at risk
PEST_DESTRUCTION_CHANCE = 0.1  # Destruction chance per point of resistance deficit

# Win condition
GOAL_INTELLIGENCE = 10  # A plant this smart wins the game

# Presentation hints
STAT_BAR_MAX = 10  # Stat bars are drawn for values in [0, STAT_BAR_MAX]
