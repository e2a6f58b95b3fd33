import logging
from fastapi import APIRouter, Depends, Request

from ..application.services.auth_service import AuthService
from ..core.config import settings
from ..exceptions import create_success_response, json_response, validation_message
from ..infrastructure.audit.std_logger import StdAuditLogger
from ..infrastructure.persistence.mongo.repositories.user_repository_mongo import MongoUserRepository
from ..persistence.database import MongoGateway, get_gateway
from ..schemas import AuthResponse, ErrorResponse, LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Authentication"])

_audit_logger = StdAuditLogger()


def get_user_repo(gateway: MongoGateway = Depends(get_gateway)) -> MongoUserRepository:
    return MongoUserRepository(gateway.users)


def get_auth_service(user_repo=Depends(get_user_repo)) -> AuthService:
    return AuthService(user_repo=user_repo, audit_logger=_audit_logger, token_prefix=settings.TOKEN_PREFIX)


def _client_ip(request: Request):
    return request.client.host if request.client else None


@router.post(
    "/register",
    status_code=201,
    response_model=AuthResponse,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    dependencies=[validation_message("Name, email, and password required")],
)
def register(body: RegisterRequest, request: Request, service: AuthService = Depends(get_auth_service)):
    user = service.register(body.name, body.email, body.password, ip_address=_client_ip(request))
    logger.info(f"Registered user {user.id}")
    return json_response(
        create_success_response(
            data={"id": user.id, "name": user.name, "email": user.email, "role": user.role},
            message="User registered successfully",
            token=service.token_for(user),
        ),
        status_code=201,
    )


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    dependencies=[validation_message("Email and password required")],
)
def login(body: LoginRequest, request: Request, service: AuthService = Depends(get_auth_service)):
    user = service.login(body.email, body.password, ip_address=_client_ip(request))
    return json_response(
        create_success_response(
            data={"id": user.id, "name": user.name, "email": user.email, "role": user.role},
            message="Login successful",
            token=service.token_for(user),
        )
    )
