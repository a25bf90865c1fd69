"""Backend relay for timeline data, authenticated with the session's bearer token."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from timeline.core.modules.backend.models import Tweet
from timeline.web.deps import AppDep, SessionDep
from timeline.web.openapi import ErrorResponse

router = APIRouter(tags=["tweets"])


class CreateTweetRequest(BaseModel):
    content: str = Field(..., description="Tweet text")


@router.get(
    "/timeline",
    summary="Get timeline",
    operation_id="getTimeline",
    responses={
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        503: {"model": ErrorResponse, "description": "Backend unavailable"},
    },
)
async def get_timeline(app: AppDep, session: SessionDep) -> list[Tweet]:
    return await app.get_timeline(session)


@router.post(
    "/tweets",
    summary="Post tweet",
    operation_id="createTweet",
    status_code=201,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid tweet"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def create_tweet(request: CreateTweetRequest, app: AppDep, session: SessionDep) -> Tweet:
    return await app.create_tweet(session, request.content)


@router.get(
    "/tweets/{tweet_id}",
    summary="Get tweet",
    operation_id="getTweet",
    responses={
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Tweet not found"},
    },
)
async def get_tweet(tweet_id: str, app: AppDep, session: SessionDep) -> Tweet:
    return await app.get_tweet(session, tweet_id)


@router.delete(
    "/tweets/{tweet_id}",
    summary="Delete tweet",
    operation_id="deleteTweet",
    status_code=204,
    responses={401: {"model": ErrorResponse, "description": "Not authenticated"}},
)
async def delete_tweet(tweet_id: str, app: AppDep, session: SessionDep) -> None:
    await app.delete_tweet(session, tweet_id)
