from datetime import timedelta
from typing import Final

from observer.models.discovery import PlaceType
from observer.models.observed_profile import AvoidanceCategory, InterestCategory

# Saturation points (evidence units needed for full confidence)
FAVOURITE_SATURATION: Final[float] = 5.0
CONTENT_SATURATION: Final[float] = 3.0
AVOIDANCE_SATURATION: Final[float] = 4.0

# Avoidances need corroboration before they are asserted
AVOIDANCE_MIN_EVIDENCE: Final[int] = 2
SELECTIVE_REMOVAL_COUNT: Final[int] = 3

# Merge: a second source reinforces at half strength
MERGE_DECAY: Final[float] = 0.5

# Interests below this are not reported
CONFIDENCE_LOW: Final[float] = 0.3

TOP_INTERESTS_LIMIT: Final[int] = 3

# Pace thresholds (average nights per city)
PACE_SLOW_NIGHTS: Final[float] = 3.0
PACE_MODERATE_NIGHTS: Final[float] = 2.0

# Behaviour summary thresholds
FAVOURITE_RATE_NOTABLE: Final[float] = 0.3
REMOVAL_RATE_NOTABLE: Final[float] = 0.4

ACTIVE_WINDOW: Final[timedelta] = timedelta(seconds=60)

# Hidden gems win when they are more than half of all favourites
HIDDEN_GEM_SHARE: Final[float] = 0.5

DEFAULT_CITY_NIGHTS: Final[int] = 1

PLACE_TYPE_TO_INTEREST: Final[dict[PlaceType, tuple[InterestCategory, ...]]] = {
    PlaceType.RESTAURANT: (InterestCategory.FOODIE,),
    PlaceType.CAFE: (InterestCategory.FOODIE,),
    PlaceType.BAR: (InterestCategory.NIGHTLIFE, InterestCategory.FOODIE),
    PlaceType.MUSEUM: (InterestCategory.CULTURE_BUFF,),
    PlaceType.GALLERY: (InterestCategory.CULTURE_BUFF, InterestCategory.PHOTOGRAPHY),
    PlaceType.PARK: (InterestCategory.NATURE_LOVER, InterestCategory.RELAXATION),
    PlaceType.LANDMARK: (InterestCategory.CULTURE_BUFF, InterestCategory.PHOTOGRAPHY),
    PlaceType.SHOP: (InterestCategory.SHOPPING,),
    PlaceType.MARKET: (InterestCategory.SHOPPING, InterestCategory.LOCAL_EXPLORER),
    PlaceType.VIEWPOINT: (InterestCategory.PHOTOGRAPHY, InterestCategory.NATURE_LOVER),
    PlaceType.EXPERIENCE: (InterestCategory.ADVENTURE_SEEKER, InterestCategory.LOCAL_EXPLORER),
}

# Substring keyword -> interests, scanned in this order
CITY_CHARACTERISTICS: Final[dict[str, tuple[InterestCategory, ...]]] = {
    # Coastal
    "beach": (InterestCategory.BEACH_PERSON,),
    "coastal": (InterestCategory.BEACH_PERSON,),
    "seaside": (InterestCategory.BEACH_PERSON,),
    "mediterranean": (InterestCategory.BEACH_PERSON,),
    "riviera": (InterestCategory.BEACH_PERSON,),
    # Mountain / nature
    "mountain": (InterestCategory.NATURE_LOVER, InterestCategory.ADVENTURE_SEEKER),
    "alpine": (InterestCategory.NATURE_LOVER, InterestCategory.ADVENTURE_SEEKER),
    "valley": (InterestCategory.NATURE_LOVER,),
    "national_park": (InterestCategory.NATURE_LOVER,),
    "hiking": (InterestCategory.NATURE_LOVER, InterestCategory.ADVENTURE_SEEKER),
    # Urban / culture
    "historic": (InterestCategory.CULTURE_BUFF,),
    "medieval": (InterestCategory.CULTURE_BUFF,),
    "art": (InterestCategory.CULTURE_BUFF,),
    "capital": (InterestCategory.CULTURE_BUFF,),
    # Nightlife
    "party": (InterestCategory.NIGHTLIFE,),
    "nightlife": (InterestCategory.NIGHTLIFE,),
    "clubbing": (InterestCategory.NIGHTLIFE,),
}

# Avoidance -> keywords that suggest it when found in a removed city
AVOIDANCE_KEYWORDS: Final[dict[AvoidanceCategory, tuple[str, ...]]] = {
    AvoidanceCategory.HIKING: ("mountain", "alpine", "hiking"),
}

# Provenance tag used in removal signals
AVOIDANCE_SIGNAL_TAGS: Final[dict[AvoidanceCategory, str]] = {
    AvoidanceCategory.HIKING: "mountain/hiking",
}
