"""
Stored record types.

Every record shares the envelope {id, user_id, created, updated}. The
fourteen resume section kinds are one tagged union discriminated by the
`section` field, with SECTION_KINDS mapping each tag to its schemas.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Annotated, ClassVar, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, TypeAdapter

from recordbook.errors import (
    ERR_BAD_SECTION_NUMBER,
    ERR_BOOKMARK_CONFLICT,
    ERR_EVENT_SECTION_CONFLICT,
    ValidationError,
)
from recordbook.timestamps import time_now

RequiredStr = Annotated[str, StringConstraints(min_length=1)]


def new_id() -> str:
    return uuid.uuid4().hex


class Record(BaseModel):
    """Common envelope for persisted documents."""

    model_config = ConfigDict(extra="ignore")

    container: ClassVar[str]
    unique_fields: ClassVar[tuple[str, ...]] = ()
    conflict_message: ClassVar[Optional[str]] = None

    id: str
    user_id: str
    created: str
    updated: str

    @classmethod
    def create(cls, user_id: str, **fields):
        """Build a new record with a fresh id and created == updated."""
        timestamp = time_now()
        return cls(
            id=new_id(),
            user_id=user_id,
            created=timestamp,
            updated=timestamp,
            **fields,
        )

    def revise(self, **fields):
        """Copy with new field values, keeping `created` and refreshing `updated`."""
        return self.model_copy(update={**fields, "updated": time_now()})

    def unique_key(self) -> Optional[str]:
        if not self.unique_fields:
            return None
        return "/".join(str(getattr(self, name)) for name in self.unique_fields)


class User(Record):
    container: ClassVar[str] = "users"

    email: str = ""
    birthdate: str = ""
    first_name: str = ""
    middle_name_initial: str = ""
    last_name_initial: str = ""
    county_name: str = ""
    join_date: str = ""

    @classmethod
    def create(cls, user_id: str, **fields):
        timestamp = time_now()
        fields.setdefault("join_date", timestamp)
        return cls(
            id=user_id, user_id=user_id, created=timestamp, updated=timestamp, **fields
        )


class Bookmark(Record):
    container: ClassVar[str] = "bookmarks"
    unique_fields: ClassVar[tuple[str, ...]] = ("link",)
    conflict_message: ClassVar[Optional[str]] = ERR_BOOKMARK_CONFLICT

    link: str
    label: str


class Project(Record):
    container: ClassVar[str] = "projects"

    year: str
    name: str
    description: str
    type: str
    start_date: str
    end_date: str


class Animal(Record):
    container: ClassVar[str] = "animals"

    name: str
    species: str
    birth_date: str
    purchase_date: str
    sire_breed: str
    dam_breed: str
    animal_cost: float
    sale_price: float
    yield_grade: str
    quality_grade: str
    project_id: str
    beginning_weight: float = 0
    beginning_date: str = ""
    end_weight: float = 0
    end_date: str = ""


class Feed(Record):
    container: ClassVar[str] = "feeds"

    name: str
    project_id: str


class FeedPurchase(Record):
    container: ClassVar[str] = "feedpurchases"

    date_purchased: str
    amount_purchased: float
    total_cost: float
    feed_id: str
    project_id: str


class DailyFeed(Record):
    container: ClassVar[str] = "dailyfeeds"

    feed_date: str
    feed_amount: float
    animal_id: str
    feed_id: str
    feed_purchase_id: str
    project_id: str


class Expense(Record):
    container: ClassVar[str] = "expenses"

    date: str
    items: str
    quantity: float
    cost: float
    project_id: str


class Supply(Record):
    container: ClassVar[str] = "supplies"

    description: str
    start_value: float
    end_value: float
    project_id: str


class Event(Record):
    container: ClassVar[str] = "events"

    name: str
    start_date: str
    end_date: str
    location: str
    description: str


class EventSection(Record):
    """Links an event to one resume section of a given kind."""

    container: ClassVar[str] = "eventsections"
    unique_fields: ClassVar[tuple[str, ...]] = ("event_id", "section_id")
    conflict_message: ClassVar[Optional[str]] = ERR_EVENT_SECTION_CONFLICT

    event_id: str
    section_number: int
    section_id: str


# Resume sections. The *Fields models are the writable schema of each kind
# and double as request bodies.


class SectionFields(BaseModel):
    year: RequiredStr


class Section1Fields(SectionFields):
    nickname: RequiredStr
    grade: int
    club_name: RequiredStr
    num_in_club: int
    club_leader: RequiredStr
    meetings_held: int
    meetings_attended: int


class Section2Fields(SectionFields):
    project_name: RequiredStr
    project_scope: RequiredStr


class Section3Fields(SectionFields):
    nickname: RequiredStr
    activity_kind: RequiredStr
    things_learned: RequiredStr
    level: RequiredStr


class Section4Fields(SectionFields):
    nickname: RequiredStr
    activity_kind: RequiredStr
    scope: RequiredStr
    level: RequiredStr


class Section5Fields(SectionFields):
    nickname: RequiredStr
    leadership_role: RequiredStr
    hours_spent: int
    num_people_reached: int


class Section6Fields(SectionFields):
    nickname: RequiredStr
    organization_name: RequiredStr
    leadership_role: RequiredStr
    hours_spent: int
    num_people_reached: int


class Section7Fields(SectionFields):
    nickname: RequiredStr
    club_member_activities: RequiredStr
    hours_spent: int
    num_people_reached: int


class Section8Fields(SectionFields):
    nickname: RequiredStr
    individual_group_activities: RequiredStr
    hours_spent: int
    num_people_reached: int


class Section9Fields(SectionFields):
    nickname: RequiredStr
    communication_type: RequiredStr
    topic: RequiredStr
    times_given: int
    location: RequiredStr
    audience_size: int


class Section10Fields(Section9Fields):
    pass


class Section11Fields(SectionFields):
    nickname: RequiredStr
    event_and_level: RequiredStr
    exhibits_or_division: RequiredStr
    ribbon_or_placings: RequiredStr


class Section12Fields(SectionFields):
    nickname: RequiredStr
    contest_or_event: RequiredStr
    recognition_received: RequiredStr
    level: RequiredStr


class Section13Fields(SectionFields):
    nickname: RequiredStr
    recognition_type: RequiredStr


class Section14Fields(Section13Fields):
    pass


class SectionRecord(Record):
    container: ClassVar[str] = "sections"

    section: int


class Section1(SectionRecord, Section1Fields):
    section: Literal[1] = 1


class Section2(SectionRecord, Section2Fields):
    section: Literal[2] = 2


class Section3(SectionRecord, Section3Fields):
    section: Literal[3] = 3


class Section4(SectionRecord, Section4Fields):
    section: Literal[4] = 4


class Section5(SectionRecord, Section5Fields):
    section: Literal[5] = 5


class Section6(SectionRecord, Section6Fields):
    section: Literal[6] = 6


class Section7(SectionRecord, Section7Fields):
    section: Literal[7] = 7


class Section8(SectionRecord, Section8Fields):
    section: Literal[8] = 8


class Section9(SectionRecord, Section9Fields):
    section: Literal[9] = 9


class Section10(SectionRecord, Section10Fields):
    section: Literal[10] = 10


class Section11(SectionRecord, Section11Fields):
    section: Literal[11] = 11


class Section12(SectionRecord, Section12Fields):
    section: Literal[12] = 12


class Section13(SectionRecord, Section13Fields):
    section: Literal[13] = 13


class Section14(SectionRecord, Section14Fields):
    section: Literal[14] = 14


Section = Annotated[
    Union[
        Section1,
        Section2,
        Section3,
        Section4,
        Section5,
        Section6,
        Section7,
        Section8,
        Section9,
        Section10,
        Section11,
        Section12,
        Section13,
        Section14,
    ],
    Field(discriminator="section"),
]

section_adapter: TypeAdapter[Section] = TypeAdapter(Section)


@dataclass(frozen=True)
class SectionKind:
    number: int
    fields_model: type[SectionFields]
    record_model: type[SectionRecord]

    @property
    def item_key(self) -> str:
        return f"section_{self.number}"

    @property
    def data_key(self) -> str:
        return f"section_{self.number}_data"


SECTION_KINDS: dict[int, SectionKind] = {
    kind.number: kind
    for kind in (
        SectionKind(1, Section1Fields, Section1),
        SectionKind(2, Section2Fields, Section2),
        SectionKind(3, Section3Fields, Section3),
        SectionKind(4, Section4Fields, Section4),
        SectionKind(5, Section5Fields, Section5),
        SectionKind(6, Section6Fields, Section6),
        SectionKind(7, Section7Fields, Section7),
        SectionKind(8, Section8Fields, Section8),
        SectionKind(9, Section9Fields, Section9),
        SectionKind(10, Section10Fields, Section10),
        SectionKind(11, Section11Fields, Section11),
        SectionKind(12, Section12Fields, Section12),
        SectionKind(13, Section13Fields, Section13),
        SectionKind(14, Section14Fields, Section14),
    )
}


def section_kind(number: int) -> SectionKind:
    try:
        return SECTION_KINDS[number]
    except KeyError:
        raise ValidationError(ERR_BAD_SECTION_NUMBER) from None
