from __future__ import annotations

import random
from datetime import datetime, timedelta

from fastapi import APIRouter

from server import contracts


router = APIRouter()

FORECAST_DAYS = 5
MIN_TEMPERATURE_C = -20
MAX_TEMPERATURE_C = 55
SUMMARIES = (
    'Freezing',
    'Bracing',
    'Chilly',
    'Cool',
    'Mild',
    'Warm',
    'Balmy',
    'Hot',
    'Sweltering',
    'Scorching',
)

_rng = random.Random()


def generate_forecasts(
    rng: random.Random | None = None, now: datetime | None = None
) -> list[contracts.ForecastRecord]:
    """
    Generate FORECAST_DAYS synthetic records, one per day starting tomorrow.
    Every call draws fresh values; nothing is cached between calls.
    """
    rng = rng or _rng
    now = now or datetime.now()
    return [
        contracts.ForecastRecord(
            date=now + timedelta(days=day),
            temperature_c=rng.randrange(MIN_TEMPERATURE_C, MAX_TEMPERATURE_C),
            summary=rng.choice(SUMMARIES),
        )
        for day in range(1, FORECAST_DAYS + 1)
    ]


@router.get(
    "/weatherforecast/weather",
    response_model=list[contracts.ForecastRecord],
)
async def weather_forecast() -> list[contracts.ForecastRecord]:
    return generate_forecasts()
