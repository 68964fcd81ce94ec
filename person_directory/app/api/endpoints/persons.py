"""
Person endpoints.

These routes expose CRUD operations over persons.  Create and update
read the request body by hand instead of declaring a pydantic body
parameter: a request that does not declare JSON is answered with 415
and a body that cannot be decoded with 400, rather than FastAPI's
generic 422.  Path identifiers are parsed by hand for the same reason.

``PersonService`` talks to ``sqlite3`` synchronously, so its methods
must never run on the event loop: plain ``def`` handlers are run in
FastAPI's threadpool, and the ``async`` handlers, which have to await
the request body, hand storage work to ``run_in_threadpool``.
"""

import json
import logging
import re
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError

from person_directory.app.schemas.person import PersonRead, PersonWrite
from person_directory.app.services.person_service import (
    PersonService,
    StorageError,
    get_person_service,
)

logger = logging.getLogger(__name__)

router = APIRouter()

JSON_MEDIA_TYPE = "application/json"

# SQLite integers are signed 64-bit; anything outside cannot be bound.
_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_ID_MIN = -(2**63)
_ID_MAX = 2**63 - 1


def parse_person_id(raw: str) -> Optional[int]:
    """Return ``raw`` as a storable integer id, or ``None`` if it is not one."""
    if not _ID_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if not _ID_MIN <= value <= _ID_MAX:
        return None
    return value


def _require_json(request: Request) -> None:
    # Media type parameters such as ``charset`` are accepted.
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type != JSON_MEDIA_TYPE:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Content-Type must be application/json",
        )


async def _read_person_body(request: Request) -> PersonWrite:
    body = await request.body()
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Error decoding JSON: {e}",
        ) from e
    try:
        return PersonWrite.model_validate(payload)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'body'}: {err['msg']}"
            for err in e.errors()
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid person: {problems}",
        ) from e


def _storage_failure(exc: StorageError) -> HTTPException:
    logger.error("%s", exc)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Person not found")


@router.get("", response_model=List[PersonRead])
def list_persons(service: PersonService = Depends(get_person_service)) -> List[PersonRead]:
    """Return all persons; an empty list when there are none."""
    try:
        return service.list_persons()
    except StorageError as e:
        raise _storage_failure(e) from e


@router.post("", response_model=PersonRead)
async def create_person(
    request: Request,
    service: PersonService = Depends(get_person_service),
) -> PersonRead:
    """Create a person from a JSON body ``{"name": ...}``.

    Any ``id`` in the body is ignored; storage assigns a new one.
    """
    _require_json(request)
    data = await _read_person_body(request)
    try:
        return await run_in_threadpool(service.create_person, data)
    except StorageError as e:
        raise _storage_failure(e) from e


@router.get("/{person_id}", response_model=PersonRead)
def get_person(
    person_id: str,
    service: PersonService = Depends(get_person_service),
) -> PersonRead:
    """Retrieve a single person by ID.

    An ID that is not an integer can never match a row and is
    reported as 404 like any other unknown ID.
    """
    parsed_id = parse_person_id(person_id)
    if parsed_id is None:
        raise _not_found()
    try:
        person = service.get_person(parsed_id)
    except StorageError as e:
        raise _storage_failure(e) from e
    if person is None:
        raise _not_found()
    return person


@router.put("/{person_id}", response_model=PersonRead)
async def update_person(
    person_id: str,
    request: Request,
    service: PersonService = Depends(get_person_service),
) -> PersonRead:
    """Rename an existing person."""
    _require_json(request)
    parsed_id = parse_person_id(person_id)
    if parsed_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid ID")
    data = await _read_person_body(request)
    try:
        person = await run_in_threadpool(service.update_person, parsed_id, data)
    except StorageError as e:
        raise _storage_failure(e) from e
    if person is None:
        raise _not_found()
    return person


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_person(
    person_id: str,
    service: PersonService = Depends(get_person_service),
) -> None:
    """Delete a person.

    Answers 204 whether or not the person existed.
    """
    parsed_id = parse_person_id(person_id)
    if parsed_id is None:
        return None
    try:
        service.delete_person(parsed_id)
    except StorageError as e:
        raise _storage_failure(e) from e
    return None
