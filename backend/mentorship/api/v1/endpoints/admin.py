from fastapi import APIRouter, Depends, status

from ....database import get_store
from ....repositories import SessionStore

router = APIRouter()


@router.delete("/data", status_code=status.HTTP_204_NO_CONTENT)
def clear_all_data(store: SessionStore = Depends(get_store)):
    """Empty every registry and persist the empty state"""
    store.clear()
