from typing import List

from fastapi import APIRouter, HTTPException

from .. import presets, schemas

router = APIRouter(prefix="/presets", tags=["presets"])


@router.get("/", response_model=List[schemas.PresetInfo])
def list_presets():
    return presets.list_presets()


@router.get("/{key}", response_model=schemas.PresetInfo)
def get_preset(key: str):
    try:
        return presets.get_preset(key)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
