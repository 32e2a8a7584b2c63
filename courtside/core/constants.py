"""Global constants for the courtside application."""

# Collection names
PLAYERS_COLLECTION = "players"
VENUES_COLLECTION = "venues"
MATCHES_COLLECTION = "matches"

# Entity kinds handled by the directory resolver
KIND_PLAYER = "player"
KIND_VENUE = "venue"

# Player fields
PLAYER_NICKNAME = "nickname"
PLAYER_PROFILE_FIELDS = (
    "nickname",
    "firstName",
    "lastName",
    "phoneNumber",
    "email",
    "city",
    "avatar",
    "isDefault",
)

# Venue fields
VENUE_NAME = "name"
VENUE_MEMBER_RATE = "pricePerHour"
VENUE_GUEST_RATE = "guestPricePerHour"
VENUE_LIGHT_RATE = "lightPricePerHour"
VENUE_HEATING_RATE = "heatingPricePerHour"
VENUE_RATE_FIELDS = (
    VENUE_MEMBER_RATE,
    VENUE_GUEST_RATE,
    VENUE_LIGHT_RATE,
    VENUE_HEATING_RATE,
)
VENUE_PROFILE_FIELDS = (
    "name",
    "address",
    "phoneNumber",
    "website",
    "coordinates",
    "surface",
    "description",
    "isDefault",
    *VENUE_RATE_FIELDS,
)

# Match fields
MATCH_OWNER_ID = "ownerId"
MATCH_DATE = "date"
MATCH_CREATED_AT = "createdAt"
MATCH_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_PLAYER1_NAME = "Me"

# Statistics
RECENT_FORM_LENGTH = 5
RECENT_MATCHES_LIMIT = 5

# Storage
DEFAULT_FIRESTORE_TIMEOUT = 10.0
