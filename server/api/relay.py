from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated

import httpx
from fastapi import APIRouter, Depends
from pydantic import TypeAdapter, ValidationError

from config.settings import ClientSetting
from server import contracts
from server.exceptions import ConfigurationError


router = APIRouter()
logger = logging.getLogger(__name__)

FORECAST_PATH = "api/weatherforecast/weather"
ACCEPTED_SCHEMES = ('http', 'https')

forecast_list_adapter = TypeAdapter(list[contracts.ForecastRecord])


class FetchFailure(str, Enum):
    CONFIGURATION = 'configuration'
    NETWORK = 'network'
    STATUS = 'status'
    DECODE = 'decode'
    UNEXPECTED = 'unexpected'


@dataclass
class FetchResult:
    forecasts: list[contracts.ForecastRecord] = field(default_factory=list)
    failure: FetchFailure | None = None
    detail: str = ''

    @property
    def ok(self) -> bool:
        return self.failure is None


def parse_base_address(address: str) -> httpx.URL:
    try:
        url = httpx.URL(address)
    except httpx.InvalidURL as exc:
        raise ConfigurationError(f"Invalid base address {address!r}") from exc

    if url.scheme not in ACCEPTED_SCHEMES or not url.host:
        raise ConfigurationError(
            f"Base address must be an absolute http(s) URL, got {address!r}"
        )
    return url


class TargetForecastFetcher:
    """
    Relays forecasts from the target service.

    A new HTTP client is opened for every call and closed afterwards. Callers
    of fetch_forecasts never see an exception: every failure is logged and
    turned into an empty list.
    """

    def __init__(
        self,
        settings: ClientSetting,
        logger: logging.Logger,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._logger = logger
        self._transport = transport

    async def fetch_forecasts(self) -> list[contracts.ForecastRecord]:
        result = await self.request_forecasts()
        if not result.ok:
            self._logger.warning(
                "Fetching forecasts failed (%s): %s",
                result.failure.value,
                result.detail,
            )
        return result.forecasts

    async def request_forecasts(self) -> FetchResult:
        try:
            base_url = parse_base_address(
                self._settings.api_service_base_address
            )
            # Resolved like a browser link: a base path without a trailing
            # slash loses its last segment.
            forecast_url = base_url.join(FORECAST_PATH)
            async with httpx.AsyncClient(
                headers={'Accept': 'application/json'},
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(forecast_url)

                if not response.is_success:
                    return FetchResult(
                        failure=FetchFailure.STATUS,
                        detail=f"Upstream responded {response.status_code}",
                    )

                forecasts = forecast_list_adapter.validate_json(
                    response.content
                )
                return FetchResult(forecasts=forecasts)

        except (ConfigurationError, httpx.InvalidURL) as exc:
            return FetchResult(
                failure=FetchFailure.CONFIGURATION, detail=str(exc)
            )
        except httpx.HTTPError as exc:
            return FetchResult(failure=FetchFailure.NETWORK, detail=str(exc))
        except ValidationError as exc:
            return FetchResult(failure=FetchFailure.DECODE, detail=str(exc))
        except Exception as exc:  # pylint: disable=broad-except
            return FetchResult(
                failure=FetchFailure.UNEXPECTED, detail=repr(exc)
            )


def get_client_settings() -> ClientSetting:
    # Built per request so configuration changes apply without a restart.
    return ClientSetting()


def get_forecast_fetcher(
    settings: Annotated[ClientSetting, Depends(get_client_settings)],
) -> TargetForecastFetcher:
    return TargetForecastFetcher(settings, logger)


@router.get("/weatherforecast", response_model=list[contracts.ForecastRecord])
async def relay_weather_forecast(
    fetcher: Annotated[TargetForecastFetcher, Depends(get_forecast_fetcher)],
) -> list[contracts.ForecastRecord]:
    return await fetcher.fetch_forecasts()
