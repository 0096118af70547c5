class ErrorCodes:
    VALIDATION_ERROR = "BE_GEN_001"
    INVALID_BET_GEOMETRY = "BE_ROU_001"
    BET_BELOW_MINIMUM = "BE_ROU_002"
    BET_ABOVE_MAXIMUM = "BE_ROU_003"
    INSUFFICIENT_FUNDS = "BE_ROU_004"
    GAME_LOGIC_ERROR = "BE_GAME_001"
    CONFIGURATION_ERROR = "BE_CFG_001"
    INTERNAL_SERVER_ERROR = "BE_GEN_500"
