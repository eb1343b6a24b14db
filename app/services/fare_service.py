from app.schemas.transport import FareBreakdown

GST_PERCENT = 5
SERVICE_CHARGE_PERCENT = 4


def _percent_rounded_up(amount: int, percent: int) -> int:
    return -(-amount * percent // 100)


def fare_breakdown(base_fare: int) -> FareBreakdown:
    """Base fare plus 5% GST and a 4% service charge, each rounded up to the next rupee."""
    if base_fare < 0:
        raise ValueError("base_fare must be >= 0")
    gst = _percent_rounded_up(base_fare, GST_PERCENT)
    service_charge = _percent_rounded_up(base_fare, SERVICE_CHARGE_PERCENT)
    return FareBreakdown(
        baseFare=base_fare,
        gst=gst,
        serviceCharge=service_charge,
        totalAmount=base_fare + gst + service_charge,
    )
