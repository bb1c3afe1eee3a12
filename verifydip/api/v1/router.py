from fastapi import APIRouter

from verifydip.api.v1.health import router as health_router
from verifydip.api.v1.users import router as users_router
from verifydip.api.v1.ip_assets import router as ip_assets_router
from verifydip.api.v1.verify import router as verify_router
from verifydip.api.v1.royalties import router as royalties_router
from verifydip.api.v1.derivatives import router as derivatives_router
from verifydip.api.v1.story import router as story_router
from verifydip.api.v1.idgt import router as idgt_router
from verifydip.api.v1.defi import router as defi_router


v1_router = APIRouter()

# ------------------------------------------------------------------
# SYSTEM
# ------------------------------------------------------------------
v1_router.include_router(health_router, tags=["health"])

# ------------------------------------------------------------------
# REGISTRY (backed by the entity store)
# ------------------------------------------------------------------
v1_router.include_router(users_router, tags=["users"])
v1_router.include_router(ip_assets_router, tags=["ip-assets"])
v1_router.include_router(verify_router, tags=["verify"])
v1_router.include_router(royalties_router, tags=["royalties"])
v1_router.include_router(derivatives_router, tags=["derivatives"])

# ------------------------------------------------------------------
# SIMULATED CHAIN INTEGRATIONS
# ------------------------------------------------------------------
v1_router.include_router(story_router, tags=["story"])
v1_router.include_router(idgt_router, tags=["idgt"])
v1_router.include_router(defi_router, tags=["defi"])
