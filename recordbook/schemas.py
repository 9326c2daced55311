"""
Pydantic schemas for request bodies and responses.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, StrictInt

from recordbook.records import (
    Animal,
    Bookmark,
    DailyFeed,
    Event,
    EventSection,
    Expense,
    Feed,
    FeedPurchase,
    Project,
    RequiredStr,
    Supply,
    User,
)
from recordbook.timestamps import DateString
from recordbook.upc import Product


class MessageResponse(BaseModel):
    message: str


# Users


class SignInPayload(BaseModel):
    id: RequiredStr


class SignUpPayload(BaseModel):
    email: RequiredStr
    birthdate: RequiredStr
    first_name: RequiredStr
    middle_name_initial: RequiredStr
    last_name_initial: RequiredStr
    county_name: RequiredStr


class UpdateUserPayload(BaseModel):
    email: str = ""
    birthdate: str = ""
    first_name: str = ""
    middle_name_initial: str = ""
    last_name_initial: str = ""
    county_name: str = ""


class TokenResponse(BaseModel):
    access_token: str


class UserResponse(BaseModel):
    user: User


class SignUpResponse(BaseModel):
    user: User
    access_token: str


# Bookmarks


class BookmarkPayload(BaseModel):
    link: RequiredStr
    label: RequiredStr


class BookmarkResponse(BaseModel):
    bookmark: Bookmark


class BookmarksResponse(BaseModel):
    bookmarks: list[Bookmark]
    next: Optional[str] = None


# Projects


class ProjectPayload(BaseModel):
    year: RequiredStr
    name: RequiredStr
    description: RequiredStr
    type: RequiredStr
    start_date: DateString
    end_date: DateString


class ProjectResponse(BaseModel):
    project: Project


class ProjectsResponse(BaseModel):
    projects: list[Project]
    next: Optional[str] = None


# Animals and feed


class AnimalPayload(BaseModel):
    name: RequiredStr
    species: RequiredStr
    birth_date: DateString
    purchase_date: DateString
    sire_breed: RequiredStr
    dam_breed: RequiredStr
    animal_cost: float
    sale_price: float
    yield_grade: RequiredStr
    quality_grade: RequiredStr
    project_id: RequiredStr


class RateOfGainPayload(BaseModel):
    beginning_weight: float
    beginning_date: DateString
    end_weight: float
    end_date: DateString


class AnimalResponse(BaseModel):
    animal: Animal


class AnimalsResponse(BaseModel):
    animals: list[Animal]


class FeedPayload(BaseModel):
    name: RequiredStr
    project_id: RequiredStr


class FeedResponse(BaseModel):
    feed: Feed


class FeedsResponse(BaseModel):
    feeds: list[Feed]


class FeedPurchasePayload(BaseModel):
    date_purchased: DateString
    amount_purchased: float
    total_cost: float
    feed_id: RequiredStr
    project_id: RequiredStr


class FeedPurchaseResponse(BaseModel):
    feed_purchase: FeedPurchase


class FeedPurchasesResponse(BaseModel):
    feed_purchases: list[FeedPurchase]


class DailyFeedPayload(BaseModel):
    feed_date: DateString
    feed_amount: float
    animal_id: RequiredStr
    feed_id: RequiredStr
    feed_purchase_id: RequiredStr
    project_id: RequiredStr


class DailyFeedResponse(BaseModel):
    daily_feed: DailyFeed


class DailyFeedsResponse(BaseModel):
    daily_feeds: list[DailyFeed]


# Expenses and supplies


class ExpensePayload(BaseModel):
    date: DateString
    items: RequiredStr
    quantity: float
    cost: float
    project_id: RequiredStr


class ExpenseResponse(BaseModel):
    expense: Expense


class ExpensesResponse(BaseModel):
    expenses: list[Expense]


class SupplyPayload(BaseModel):
    description: RequiredStr
    start_value: float
    end_value: float
    project_id: RequiredStr


class SupplyResponse(BaseModel):
    supply: Supply


class SuppliesResponse(BaseModel):
    supplies: list[Supply]


# Events


class EventPayload(BaseModel):
    name: RequiredStr
    start_date: DateString
    end_date: DateString
    location: RequiredStr
    description: RequiredStr


class EventSectionPayload(BaseModel):
    section_number: StrictInt
    section_id: RequiredStr


class EventResponse(BaseModel):
    event: Event


class EventDetailResponse(BaseModel):
    event: Event
    sections: list[dict]


class EventsResponse(BaseModel):
    events: list[Event]
    next: Optional[str] = None


class EventSectionResponse(BaseModel):
    event_section: EventSection


class EventSectionDetailResponse(BaseModel):
    event_section: EventSection
    section: dict


# UPC


class UpcProductResponse(BaseModel):
    product: Product
