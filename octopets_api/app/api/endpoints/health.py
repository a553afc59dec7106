"""
Health endpoint.

Reports that the service is up together with the feature flags the
next request would see.  No authentication, no repository access.
"""

from typing import Dict, Union

from fastapi import APIRouter, Depends

from octopets_api.app.api.deps import get_feature_flags
from octopets_api.app.core.config import FeatureFlags

router = APIRouter()


@router.get("", response_model=Dict[str, Union[str, bool]], name="Health")
async def health(flags: FeatureFlags = Depends(get_feature_flags)) -> Dict[str, Union[str, bool]]:
    return {"status": "ok", "errors": flags.errors, "enable_crud": flags.enable_crud}
