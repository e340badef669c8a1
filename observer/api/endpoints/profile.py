from fastapi import APIRouter
from loguru import logger

from observer.models.observed_profile import ObservedProfile
from observer.models.snapshot import DiscoverySnapshot
from observer.services.profile import compute_profile_from_snapshot

router = APIRouter(tags=["profile"])


@router.post("/profile", summary="Infer an observed profile from a discovery snapshot")
async def observe_profile(snapshot: DiscoverySnapshot) -> ObservedProfile:
    """
    Recompute the profile for the posted session state.

    Stateless: the host posts its full action log and counters every time.
    """
    profile = compute_profile_from_snapshot(snapshot)
    logger.info(
        f"Profile computed from {len(snapshot.actions)} actions: "
        f"top={[c.value for c in profile.top_interests]}, pace={profile.travel_style.pace}"
    )
    return profile
