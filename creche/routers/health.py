# ================================
# file: creche/routers/health.py
# ================================
from fastapi import APIRouter

from creche.utils.datetime import utcnow

router = APIRouter()


@router.get("/health")
def health():
    return {"ok": True, "time": utcnow().isoformat()}
