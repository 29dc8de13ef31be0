from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..application.services import PricingService
from ..dependencies import get_pricing_service
from ..exceptions import PricingUpdateError
from ..schemas import UpdatePricesResponse

router = APIRouter(prefix="", tags=["Pricing"])


@router.post("/update-prices", response_model=UpdatePricesResponse, response_model_exclude_none=True)
def update_prices(service: PricingService = Depends(get_pricing_service)):
    try:
        service.refresh()
    except PricingUpdateError as e:
        return JSONResponse(status_code=500, content={"ok": False, "error": e.message})
    return UpdatePricesResponse(ok=True, message="Prices updated successfully")
