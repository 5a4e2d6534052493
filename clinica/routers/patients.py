from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request, Response, status

from clinica import services
from clinica.models import MAX_ID
from clinica.routers import error_boundary
from clinica.schemas import PatientEdit, PatientListOut
from clinica.store import ClinicStore, get_store

router = APIRouter(prefix="/patients", tags=["patients"])


@router.get("", response_model=list[PatientListOut])
def list_patients(
    sort_by: str = Query("LastName", alias="sortBy"),
    page: int = Query(1, ge=1, le=MAX_ID),
    page_size: int = Query(services.DEFAULT_PAGE_SIZE, ge=1, le=MAX_ID, alias="pageSize"),
    store: ClinicStore = Depends(get_store),
) -> list[PatientListOut]:
    with error_boundary("getting patients", "patients"):
        return services.list_patients(store, sort_by, page, page_size)


@router.get("/{patient_id}", response_model=PatientEdit)
def get_patient(patient_id: int, store: ClinicStore = Depends(get_store)) -> PatientEdit:
    with error_boundary("getting the patient", "patients"):
        return services.get_patient(store, patient_id)


@router.post("", response_model=PatientEdit, status_code=status.HTTP_201_CREATED)
def create_patient(
    payload: PatientEdit,
    request: Request,
    response: Response,
    store: ClinicStore = Depends(get_store),
) -> PatientEdit:
    with error_boundary("saving the patient", "patients", data_verb="saving"):
        created = services.create_patient(store, payload)

    response.headers["Location"] = str(request.url_for("get_patient", patient_id=created.id))
    return created


@router.put("/{patient_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def update_patient(patient_id: int, payload: PatientEdit, store: ClinicStore = Depends(get_store)) -> Response:
    with error_boundary("updating the patient", "patients", data_verb="updating"):
        services.update_patient(store, patient_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{patient_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_patient(patient_id: int, store: ClinicStore = Depends(get_store)) -> Response:
    with error_boundary("deleting the patient", "patients", data_verb="deleting"):
        services.delete_patient(store, patient_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
