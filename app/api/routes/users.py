"""User signup and login endpoints."""

from fastapi import APIRouter, status

from app.api.deps import AuthServiceDep
from app.api.validation import ValidLogin, ValidSignup
from app.dtos.factory import DtoFactory, ResponseType
from app.dtos.request import UserLoginSchema, UserSignupSchema
from app.dtos.response import AuthResponseDto

router = APIRouter()


def _body_docs(schema: type) -> dict:
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema.model_json_schema(by_alias=True)}},
        },
    }


@router.post(
    "/signup",
    response_model=AuthResponseDto,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    openapi_extra=_body_docs(UserSignupSchema),
)
async def signup(data: ValidSignup, service: AuthServiceDep) -> AuthResponseDto:
    """Register a new user account.

    - **username**: 3-30 letters, numbers or underscores (must be unique)
    - **email**: Valid email address (must be unique)
    - **password**: Min 8 characters, must contain a letter and a number

    Returns an access token and the created user (without sensitive data).
    """
    user, token = await service.signup(data)
    return DtoFactory.create_response(
        ResponseType.AUTH,
        user,
        {"message": "User registered successfully", "token": token},
    )


@router.post(
    "/login",
    response_model=AuthResponseDto,
    summary="Login",
    openapi_extra=_body_docs(UserLoginSchema),
)
async def login(data: ValidLogin, service: AuthServiceDep) -> AuthResponseDto:
    """Authenticate with email and password.

    Returns an access token to send as ``Authorization: Bearer <token>``.
    """
    user, token = await service.login(data)
    return DtoFactory.create_response(
        ResponseType.AUTH,
        user,
        {"message": "Login successful", "token": token},
    )
