from typing import Optional

from fastapi import APIRouter, Depends

from ..application.services.doctor_service import DoctorService
from ..core.config import settings
from ..exceptions import create_success_response, json_response, validation_message
from ..infrastructure.persistence.mongo.repositories.doctor_repository_mongo import MongoDoctorRepository
from ..persistence.database import MongoGateway, get_gateway
from ..schemas import DataResponse, DoctorCreate, DoctorUpdate, ErrorResponse, MessageResponse

router = APIRouter(prefix="/api/doctors", tags=["Doctors"])

NOT_FOUND = {404: {"model": ErrorResponse}}


def get_doctor_repo(gateway: MongoGateway = Depends(get_gateway)) -> MongoDoctorRepository:
    return MongoDoctorRepository(gateway.doctors)


def get_doctor_service(repo=Depends(get_doctor_repo)) -> DoctorService:
    return DoctorService(repo=repo, latest_limit=settings.LATEST_DOCTORS_LIMIT)


@router.get("", response_model=DataResponse)
def list_doctors(service: DoctorService = Depends(get_doctor_service)):
    return json_response(create_success_response(data=service.list_all()))


# Literal routes must stay above "/{doctor_id}" so they are matched first.
@router.get("/latest", response_model=DataResponse)
def latest_doctors(service: DoctorService = Depends(get_doctor_service)):
    return json_response(create_success_response(data=service.list_latest()))


@router.get("/specialty/{specialty}", response_model=DataResponse)
def doctors_by_specialty(specialty: str, service: DoctorService = Depends(get_doctor_service)):
    return json_response(create_success_response(data=service.list_by_specialty(specialty)))


@router.get("/{doctor_id}", response_model=DataResponse, responses=NOT_FOUND)
def get_doctor(doctor_id: str, service: DoctorService = Depends(get_doctor_service)):
    return json_response(create_success_response(data=service.get(doctor_id)))


@router.post(
    "",
    status_code=201,
    response_model=DataResponse,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    dependencies=[validation_message("All fields required")],
)
def create_doctor(body: DoctorCreate, service: DoctorService = Depends(get_doctor_service)):
    doctor = service.create(body)
    return json_response(
        create_success_response(data=doctor, message="Doctor added successfully"),
        status_code=201,
    )


@router.put(
    "/{doctor_id}",
    response_model=MessageResponse,
    responses=NOT_FOUND,
    dependencies=[validation_message("Invalid doctor fields")],
)
def update_doctor(doctor_id: str, body: Optional[DoctorUpdate] = None, service: DoctorService = Depends(get_doctor_service)):
    service.update(doctor_id, body if body is not None else DoctorUpdate())
    return json_response(create_success_response(message="Doctor updated successfully"))


@router.delete("/{doctor_id}", response_model=MessageResponse, responses=NOT_FOUND)
def delete_doctor(doctor_id: str, service: DoctorService = Depends(get_doctor_service)):
    service.delete(doctor_id)
    return json_response(create_success_response(message="Doctor deleted successfully"))
