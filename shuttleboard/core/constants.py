"""Global constants for the shuttleboard application."""

# Firestore collections
MEMBERS_COLLECTION = "members"
TOURNAMENTS_COLLECTION = "tournaments"

# Genders
MALE = "Male"
FEMALE = "Female"
GENDERS = (MALE, FEMALE)

# Tournament formats
MENS_SINGLES = "Men's Singles"
WOMENS_SINGLES = "Women's Singles"
MENS_DOUBLES = "Men's Doubles"
WOMENS_DOUBLES = "Women's Doubles"
MIXED_DOUBLES = "Mixed Doubles"
TOURNAMENT_FORMATS = (
    MENS_SINGLES,
    WOMENS_SINGLES,
    MENS_DOUBLES,
    WOMENS_DOUBLES,
    MIXED_DOUBLES,
)
SINGLES_FORMATS = (MENS_SINGLES, WOMENS_SINGLES)
DOUBLES_FORMATS = (MENS_DOUBLES, WOMENS_DOUBLES, MIXED_DOUBLES)

# Tournament statuses
STATUS_UPCOMING = "Upcoming"
STATUS_IN_PROGRESS = "In Progress"
STATUS_COMPLETED = "Completed"

# Participant kinds
KIND_MEMBER = "member"
KIND_GUEST = "guest"

# Bracket construction
MIN_SINGLES_PLAYERS = 2
MIN_DOUBLES_PLAYERS = 4
BYE_NAME = "BYE"
TEAM_NAME_POOL = (
    "Alpha",
    "Bravo",
    "Charlie",
    "Delta",
    "Echo",
    "Foxtrot",
    "Golf",
    "Hotel",
    "India",
    "Juliet",
    "Kilo",
    "Lima",
    "Mike",
    "November",
    "Oscar",
    "Papa",
)
