"""
Animal, feed, feed purchase and daily feed routes.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response

from recordbook.auth import Claims, get_claims
from recordbook.dependencies import get_repositories
from recordbook.records import Animal, DailyFeed, Feed, FeedPurchase
from recordbook.repositories import Repositories
from recordbook.schemas import (
    AnimalPayload,
    AnimalResponse,
    AnimalsResponse,
    DailyFeedPayload,
    DailyFeedResponse,
    DailyFeedsResponse,
    FeedPayload,
    FeedPurchasePayload,
    FeedPurchaseResponse,
    FeedPurchasesResponse,
    FeedResponse,
    FeedsResponse,
    RateOfGainPayload,
)

router = APIRouter()


# Animals


@router.get("/animal", response_model=AnimalsResponse, tags=["Animal"])
def get_animals(
    project_id: str = Query(..., alias="projectID", min_length=1),
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    return AnimalsResponse(animals=repos.animals.list(claims.id, project_id=project_id))


@router.get("/animal/{animal_id}", response_model=AnimalResponse, tags=["Animal"])
def get_animal(
    animal_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    return AnimalResponse(animal=repos.animals.get(claims.id, animal_id))


@router.post("/animal", response_model=AnimalResponse, status_code=201, tags=["Animal"])
def add_animal(
    payload: AnimalPayload,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    animal = Animal.create(claims.id, **payload.model_dump())
    return AnimalResponse(animal=repos.animals.upsert(animal))


@router.put("/animal/{animal_id}", status_code=204, tags=["Animal"])
def update_animal(
    animal_id: str,
    payload: AnimalPayload,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    animal = repos.animals.get(claims.id, animal_id)
    repos.animals.upsert(animal.revise(**payload.model_dump()))
    return Response(status_code=204)


@router.put("/rate-of-gain/{animal_id}", status_code=204, tags=["Animal"])
def update_rate_of_gain(
    animal_id: str,
    payload: RateOfGainPayload,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    """Record beginning and end weights, leaving the rest of the animal as is."""
    animal = repos.animals.get(claims.id, animal_id)
    repos.animals.upsert(animal.revise(**payload.model_dump()))
    return Response(status_code=204)


@router.delete("/animal/{animal_id}", status_code=204, tags=["Animal"])
def delete_animal(
    animal_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    repos.animals.delete(claims.id, animal_id)
    return Response(status_code=204)


# Feeds


@router.get("/feed", response_model=FeedsResponse, tags=["Feed"])
def get_feeds(
    project_id: str = Query(..., alias="projectID", min_length=1),
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    return FeedsResponse(feeds=repos.feeds.list(claims.id, project_id=project_id))


@router.get("/feed/{feed_id}", response_model=FeedResponse, tags=["Feed"])
def get_feed(
    feed_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    return FeedResponse(feed=repos.feeds.get(claims.id, feed_id))


@router.post("/feed", response_model=FeedResponse, status_code=201, tags=["Feed"])
def add_feed(
    payload: FeedPayload,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    feed = Feed.create(claims.id, **payload.model_dump())
    return FeedResponse(feed=repos.feeds.upsert(feed))


@router.put("/feed/{feed_id}", status_code=204, tags=["Feed"])
def update_feed(
    feed_id: str,
    payload: FeedPayload,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    feed = repos.feeds.get(claims.id, feed_id)
    repos.feeds.upsert(feed.revise(**payload.model_dump()))
    return Response(status_code=204)


@router.delete("/feed/{feed_id}", status_code=204, tags=["Feed"])
def delete_feed(
    feed_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    repos.feeds.delete(claims.id, feed_id)
    return Response(status_code=204)


# Feed purchases


@router.get("/feed-purchase", response_model=FeedPurchasesResponse, tags=["Feed Purchase"])
def get_feed_purchases(
    project_id: str = Query(..., alias="projectID", min_length=1),
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    purchases = repos.feed_purchases.list(claims.id, project_id=project_id)
    return FeedPurchasesResponse(feed_purchases=purchases)


@router.get(
    "/feed-purchase/{feed_purchase_id}",
    response_model=FeedPurchaseResponse,
    tags=["Feed Purchase"],
)
def get_feed_purchase(
    feed_purchase_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    purchase = repos.feed_purchases.get(claims.id, feed_purchase_id)
    return FeedPurchaseResponse(feed_purchase=purchase)


@router.post(
    "/feed-purchase",
    response_model=FeedPurchaseResponse,
    status_code=201,
    tags=["Feed Purchase"],
)
def add_feed_purchase(
    payload: FeedPurchasePayload,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    purchase = FeedPurchase.create(claims.id, **payload.model_dump())
    return FeedPurchaseResponse(feed_purchase=repos.feed_purchases.upsert(purchase))


@router.put("/feed-purchase/{feed_purchase_id}", status_code=204, tags=["Feed Purchase"])
def update_feed_purchase(
    feed_purchase_id: str,
    payload: FeedPurchasePayload,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    purchase = repos.feed_purchases.get(claims.id, feed_purchase_id)
    repos.feed_purchases.upsert(purchase.revise(**payload.model_dump()))
    return Response(status_code=204)


@router.delete(
    "/feed-purchase/{feed_purchase_id}", status_code=204, tags=["Feed Purchase"]
)
def delete_feed_purchase(
    feed_purchase_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    repos.feed_purchases.delete(claims.id, feed_purchase_id)
    return Response(status_code=204)


# Daily feed


@router.get("/daily-feed", response_model=DailyFeedsResponse, tags=["Daily Feed"])
def get_daily_feeds(
    project_id: str = Query(..., alias="projectID", min_length=1),
    animal_id: str = Query(..., alias="animalID", min_length=1),
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    daily_feeds = repos.daily_feeds.list(
        claims.id, project_id=project_id, animal_id=animal_id
    )
    return DailyFeedsResponse(daily_feeds=daily_feeds)


@router.get(
    "/daily-feed/{daily_feed_id}", response_model=DailyFeedResponse, tags=["Daily Feed"]
)
def get_daily_feed(
    daily_feed_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    return DailyFeedResponse(daily_feed=repos.daily_feeds.get(claims.id, daily_feed_id))


@router.post(
    "/daily-feed", response_model=DailyFeedResponse, status_code=201, tags=["Daily Feed"]
)
def add_daily_feed(
    payload: DailyFeedPayload,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    daily_feed = DailyFeed.create(claims.id, **payload.model_dump())
    return DailyFeedResponse(daily_feed=repos.daily_feeds.upsert(daily_feed))


@router.put("/daily-feed/{daily_feed_id}", status_code=204, tags=["Daily Feed"])
def update_daily_feed(
    daily_feed_id: str,
    payload: DailyFeedPayload,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    daily_feed = repos.daily_feeds.get(claims.id, daily_feed_id)
    repos.daily_feeds.upsert(daily_feed.revise(**payload.model_dump()))
    return Response(status_code=204)


@router.delete("/daily-feed/{daily_feed_id}", status_code=204, tags=["Daily Feed"])
def delete_daily_feed(
    daily_feed_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    repos.daily_feeds.delete(claims.id, daily_feed_id)
    return Response(status_code=204)
