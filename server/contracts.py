from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ForecastRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: datetime
    temperature_c: int = Field(alias='temperatureC')
    summary: str | None = None

    @computed_field(alias='temperatureF')
    @property
    def temperature_f(self) -> int:
        return 32 + round(self.temperature_c / (5 / 9))
