"""
Typed view of the tracking state DHL embeds in its tracking page.

Upstream field names are German; each field carries the upstream name as its
alias while the attribute uses the English name. Both spellings are accepted
when validating, and dumps use the English names.
"""

from datetime import datetime
from typing import Optional, Tuple

from dateutil import parser
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, field_validator


class DHLModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class HistoryEvent(DHLModel):
    """A single stop in the parcel history."""

    date: StrictStr = Field(alias="datum")
    status: StrictStr
    return_shipment: StrictBool = Field(alias="ruecksendung")
    # Not every event has a location, handoffs between centers usually don't
    location: Optional[StrictStr] = Field(default=None, alias="ort")

    def timestamp(self) -> datetime:
        return parser.isoparse(self.date)


class History(DHLModel):
    events: Optional[Tuple[HistoryEvent, ...]] = None
    current_status: Optional[StrictStr] = Field(default=None, alias="aktuellerStatus")
    current_status_date: Optional[StrictStr] = Field(default=None, alias="datumAktuellerStatus")
    # Progress indicator from upstream, unrelated to len(events)
    steps: StrictInt = Field(alias="fortschritt", ge=0)

    @property
    def last_event(self) -> Optional[HistoryEvent]:
        if not self.events:
            return None
        return self.events[-1]


class NotFoundInfo(DHLModel):
    """Why a tracking code returned no shipment data."""

    no_data_available: StrictBool = Field(alias="keineDatenVerfuegbar")
    not_a_dhl_package: StrictBool = Field(alias="keineDhlPaketSendung")


class ItemDetails(DHLModel):
    history: History = Field(alias="sendungsverlauf")
    destination_country: Optional[StrictStr] = Field(default=None, alias="zielland")
    delivered: Optional[StrictBool] = Field(default=None, alias="istZugestellt")


class TrackingItem(DHLModel):
    """One shipment returned for the queried tracking code.

    ``not_found`` is only set when DHL has no data for the code, in which
    case ``details`` should not be relied upon.
    """

    id: StrictStr
    has_complete_details: StrictBool = Field(alias="hasCompleteDetails")
    details: Optional[ItemDetails] = Field(default=None, alias="sendungsdetails")
    not_found: Optional[NotFoundInfo] = Field(default=None, alias="sendungNichtGefunden")

    @field_validator("id", mode="before")
    @classmethod
    def opaque_id(cls, value):
        # Codes look numeric but are text, keep numbers as their literal text
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def found(self) -> bool:
        return self.not_found is None

    @property
    def last_event(self) -> Optional[HistoryEvent]:
        if self.details is None:
            return None
        return self.details.history.last_event


class TrackingStatus(DHLModel):
    items: Tuple[TrackingItem, ...] = Field(alias="sendungen")
