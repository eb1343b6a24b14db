import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.provider import TransportType
from app.schemas.transport import ProviderOut, provider_out
from app.services import catalog_service

router = APIRouter(tags=["providers"])
logger = logging.getLogger(__name__)


@router.get("/transport-providers", response_model=list[ProviderOut])
def list_providers(db: Session = Depends(get_db)):
    try:
        return [provider_out(p) for p in catalog_service.list_providers(db)]
    except SQLAlchemyError:
        logger.exception("listing transport providers failed")
        raise HTTPException(status_code=500, detail="Failed to fetch transport providers")


@router.get("/transport-providers/{transport_type}", response_model=list[ProviderOut])
def list_providers_by_type(transport_type: str, db: Session = Depends(get_db)):
    t = TransportType.parse(transport_type)
    if t is None:
        raise HTTPException(status_code=400, detail="Invalid transport type")
    try:
        return [provider_out(p) for p in catalog_service.list_providers_by_type(db, t)]
    except SQLAlchemyError:
        logger.exception("listing %s providers failed", t.value)
        raise HTTPException(status_code=500, detail="Failed to fetch transport providers")
