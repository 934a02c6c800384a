from fastapi import APIRouter, Depends, status

from classboard.api.deps import get_registry
from classboard.schemas.activities import ActivityCreateRequest, ActivityRecord
from classboard.schemas.classes import ClassCreateRequest, ClassRecord
from classboard.services.registry import ClassRegistry

router = APIRouter(prefix="/classes", tags=["classes"])


@router.get("", response_model=list[ClassRecord])
def list_classes(registry: ClassRegistry = Depends(get_registry)):
    return registry.list_classes()


@router.post("", response_model=ClassRecord, status_code=status.HTTP_201_CREATED)
def create_class(payload: ClassCreateRequest, registry: ClassRegistry = Depends(get_registry)):
    return registry.create_class(payload)


@router.get("/{class_id}/activities", response_model=list[ActivityRecord])
def list_activities(class_id: str, registry: ClassRegistry = Depends(get_registry)):
    return registry.activities_for_class(class_id)


@router.post("/{class_id}/activities", response_model=ActivityRecord, status_code=status.HTTP_201_CREATED)
def create_activity(
    class_id: str,
    payload: ActivityCreateRequest,
    registry: ClassRegistry = Depends(get_registry),
):
    return registry.create_activity(class_id, payload)
