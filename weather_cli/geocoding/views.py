from pydantic import BaseModel, ConfigDict, Field


class GeoCodingData(BaseModel):
    """Direct mapping to one geocode.maps.co search result."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    lat: str
    lon: str
    display_name: str

    place_id: int | None = None
    licence: str | None = None
    powered_by: str | None = None
    osm_type: str | None = None
    osm_id: int | None = None
    boundingbox: list[str] = []
    place_class: str | None = Field(default=None, alias="class")
    type: str | None = None
    importance: float | None = None

    @property
    def coordinates(self) -> tuple[float, float]:
        return float(self.lat), float(self.lon)
