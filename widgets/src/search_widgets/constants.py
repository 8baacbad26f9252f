POKEAPI_BASE_URL = "https://pokeapi.co/api/v2"
GIPHY_BASE_URL = "https://api.giphy.com/v1"
GIPHY_DASHBOARD_URL = "https://developers.giphy.com/dashboard"

# Giphy rejects this key; it has to be swapped for a provisioned one
PLACEHOLDER_API_KEY = "YOUR_API_KEY"
GIPHY_RESULT_LIMIT = 10

# stat bars are drawn against this ceiling, base stats above it overflow
STAT_MAX = 150

FALLBACK_TEXT = "n/a"
UNTITLED_GIF = "Untitled"

DEFAULT_POKEMON = "pikachu"
DEFAULT_GIF_SEARCH = "funny cats"
