"""
Numeric thresholds used by the structural checker and the validator.

Values come from the Arma Reforger server configuration documentation.
"""

# View distance (meters)
VIEW_DISTANCE_MINIMUM = 500
VIEW_DISTANCE_RECOMMENDED_MAX = 2500
VIEW_DISTANCE_ABSOLUTE_MAX = 10000
NETWORK_VIEW_DISTANCE_MAX = 5000
NETWORK_VIEW_DISTANCE_RECOMMENDED_RATIO = 0.9

# Player slots
PLAYER_COUNT_MINIMUM = 1
PLAYER_COUNT_RECOMMENDED_MAX = 96
PLAYER_COUNT_ABSOLUTE_MAX = 128

# Grass render distance: 0 disables the override, otherwise 50-150
GRASS_DISTANCE_MINIMUM = 50
GRASS_DISTANCE_MAXIMUM = 150
GRASS_DISTANCE_HIGH_PERFORMANCE_IMPACT = 100

AI_LIMIT_HIGH_PERFORMANCE_IMPACT = 80

# Game port range accepted by the structural check
PORT_MINIMUM = 1024
PORT_MAXIMUM = 65535

# Remote console
PASSWORD_MINIMUM_LENGTH = 3
RCON_MAX_CLIENTS_MINIMUM = 1
RCON_MAX_CLIENTS_MAXIMUM = 16
RCON_PERMISSIONS = ("admin", "monitor")

# Game section
GAME_NAME_MAX_LENGTH = 100
ADMINS_MAX_COUNT = 20
SUPPORTED_PLATFORMS = ("PLATFORM_PC", "PLATFORM_XBL", "PLATFORM_PSN")

# Operating section
SLOT_RESERVATION_TIMEOUT_MINIMUM = 5
SLOT_RESERVATION_TIMEOUT_MAXIMUM = 300
JOIN_QUEUE_MAX_SIZE_MINIMUM = 0
JOIN_QUEUE_MAX_SIZE_MAXIMUM = 50

# Bind address meaning "all interfaces"
ANY_ADDRESS = "0.0.0.0"
