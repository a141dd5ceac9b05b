"""Link routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, ConfigDict, Field

from rsvp.application.usecase.link import (
    CreateLinkRequest,
    CreateLinkUseCase,
    GetLinkRequest,
    GetLinkResponse,
    GetLinkUseCase,
)
from rsvp.application.usecase.notification import (
    SendNotificationRequest,
    SendNotificationResponse,
    SendNotificationUseCase,
)
from rsvp.domain.error import (
    AlreadyAnsweredError,
    DeliveryError,
    ExpiredError,
    NotFoundError,
    ValidationError,
)

router = APIRouter(prefix="/api", tags=["links"], route_class=DishkaRoute)


class CreateLinkAPIRequest(BaseModel):
    """API request for creating a link."""

    email: str | None = None
    name: str | None = None


class CreateLinkAPIResponse(BaseModel):
    """API response with the new link."""

    model_config = ConfigDict(populate_by_name=True)

    link_id: str = Field(serialization_alias="linkId")
    link_url: str = Field(serialization_alias="linkUrl")
    message: str


class SendNotificationAPIRequest(BaseModel):
    """API request submitted when the recipient answers."""

    model_config = ConfigDict(populate_by_name=True)

    link_id: str | None = Field(default=None, alias="linkId")
    response: str | None = None
    email: str | None = None
    name: str | None = None


@router.post(
    "/generate-link",
    response_model=CreateLinkAPIResponse,
    response_model_by_alias=True,
)
async def generate_link(
    request: CreateLinkAPIRequest,
    create_link_use_case: FromDishka[CreateLinkUseCase],
) -> CreateLinkAPIResponse:
    """Create an invitation link.

    Raises:
        HTTPException: 400 if email or name is invalid
    """
    try:
        response = await create_link_use_case.execute(
            CreateLinkRequest(email=request.email, name=request.name)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return CreateLinkAPIResponse(
        link_id=response.link_id,
        link_url=response.link_url,
        message=response.message,
    )


@router.get("/get-link", response_model=GetLinkResponse)
async def get_link(
    get_link_use_case: FromDishka[GetLinkUseCase],
    link_id: str | None = Query(default=None, alias="id"),
) -> GetLinkResponse:
    """Resolve a link to the recipient's name and email.

    Raises:
        HTTPException: 400 missing id, 404 unknown link, 410 expired link
    """
    try:
        return await get_link_use_case.execute(GetLinkRequest(link_id=link_id))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Link not found"
        )
    except ExpiredError:
        raise HTTPException(
            status_code=status.HTTP_410_GONE, detail="Link has expired"
        )


@router.post("/send-notification", response_model=SendNotificationResponse)
async def send_notification(
    request: SendNotificationAPIRequest,
    send_notification_use_case: FromDishka[SendNotificationUseCase],
) -> SendNotificationResponse:
    """Record the recipient's answer and email the link's creator.

    Raises:
        HTTPException: 400 invalid input, 409 already answered, 500 delivery failure
    """
    try:
        return await send_notification_use_case.execute(
            SendNotificationRequest(
                link_id=request.link_id,
                response=request.response,
                email=request.email,
                name=request.name,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except AlreadyAnsweredError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Link has already been answered",
        )
    except DeliveryError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Failed to send notification", "details": e.details},
        )
