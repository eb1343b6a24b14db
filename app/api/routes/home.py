import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.transport import OfferOut, RouteWithDetails, offer_out
from app.services import catalog_service
from app.services.route_details_service import list_popular_routes_with_details

router = APIRouter(tags=["home"])
logger = logging.getLogger(__name__)


@router.get("/popular-routes", response_model=list[RouteWithDetails])
def popular_routes(db: Session = Depends(get_db)):
    """Curated homepage routes, most booked first. Entries whose route, schedule or provider is gone are left out."""
    try:
        return list_popular_routes_with_details(db)
    except SQLAlchemyError:
        logger.exception("listing popular routes failed")
        raise HTTPException(status_code=500, detail="Failed to fetch popular routes")


@router.get("/offers", response_model=list[OfferOut])
def offers(db: Session = Depends(get_db)):
    """Offers that have not expired yet."""
    try:
        return [offer_out(o) for o in catalog_service.list_offers(db, active_only=True)]
    except SQLAlchemyError:
        logger.exception("listing offers failed")
        raise HTTPException(status_code=500, detail="Failed to fetch offers")
