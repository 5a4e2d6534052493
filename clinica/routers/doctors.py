from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request, Response, status

from clinica import services
from clinica.models import MAX_ID
from clinica.routers import error_boundary
from clinica.schemas import DoctorEdit, DoctorListOut, DoctorOut
from clinica.store import ClinicStore, get_store

router = APIRouter(prefix="/doctors", tags=["doctors"])


@router.get("", response_model=list[DoctorListOut])
def list_doctors(
    sort_by: str = Query("FullName", alias="sortBy"),
    page: int = Query(1, ge=1, le=MAX_ID),
    page_size: int = Query(services.DEFAULT_PAGE_SIZE, ge=1, le=MAX_ID, alias="pageSize"),
    store: ClinicStore = Depends(get_store),
) -> list[DoctorListOut]:
    with error_boundary("getting doctors", "doctors"):
        return services.list_doctors(store, sort_by, page, page_size)


@router.get("/{doctor_id}", response_model=DoctorEdit)
def get_doctor(doctor_id: int, store: ClinicStore = Depends(get_store)) -> DoctorEdit:
    with error_boundary("getting the doctor", "doctors"):
        return services.get_doctor(store, doctor_id)


@router.post("", response_model=DoctorOut, status_code=status.HTTP_201_CREATED)
def create_doctor(
    payload: DoctorEdit,
    request: Request,
    response: Response,
    store: ClinicStore = Depends(get_store),
) -> DoctorOut:
    with error_boundary("saving the doctor", "doctors", data_verb="saving"):
        created = services.create_doctor(store, payload)

    response.headers["Location"] = str(request.url_for("get_doctor", doctor_id=created.id))
    return created


@router.put("/{doctor_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def update_doctor(doctor_id: int, payload: DoctorEdit, store: ClinicStore = Depends(get_store)) -> Response:
    with error_boundary("updating the doctor", "doctors", data_verb="updating"):
        services.update_doctor(store, doctor_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{doctor_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_doctor(doctor_id: int, store: ClinicStore = Depends(get_store)) -> Response:
    with error_boundary("deleting the doctor", "doctors", data_verb="deleting"):
        services.delete_doctor(store, doctor_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
