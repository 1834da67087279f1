"""Row models for the pre-aggregated summary workbooks.

The summaries are produced outside this service and uploaded next to the
release workbook; the API only reshapes their rows.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class SummaryKind(str, Enum):
    TOP_ARTISTS = "top-artists"
    COUNTRY_YEAR = "country-year"
    TOP_COUNTRIES = "top-countries"


DEFAULT_SUMMARY_FILES: dict[SummaryKind, str] = {
    SummaryKind.TOP_ARTISTS: "SummaryTopArtists.xlsx",
    SummaryKind.COUNTRY_YEAR: "SummaryCountryYear.xlsx",
    SummaryKind.TOP_COUNTRIES: "SummaryTopCountries.xlsx",
}


class TopArtistRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    artist: str
    releases: int | float = 0


class CountryYearRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int | float
    country: str
    releases: int | float = 0


class TopCountryRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    country: str
    releases: int | float = 0


SummaryRow = TopArtistRow | CountryYearRow | TopCountryRow
