from fastapi import APIRouter, Depends

from classboard.api.deps import get_registry
from classboard.schemas.classes import ClassStats, DashboardOut
from classboard.services.registry import ClassRegistry

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardOut)
def dashboard(registry: ClassRegistry = Depends(get_registry)):
    classes = registry.classes_with_activities()
    return DashboardOut(stats=registry.stats_for(classes), classes=classes)


@router.get("/stats", response_model=ClassStats)
def dashboard_stats(registry: ClassRegistry = Depends(get_registry)):
    return registry.aggregate_stats()
