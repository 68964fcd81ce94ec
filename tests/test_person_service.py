import pytest

from person_directory.app.core.db import Database
from person_directory.app.schemas.person import PersonWrite
from person_directory.app.services.person_service import PersonService, StorageError


@pytest.fixture
def service(tmp_path):
    db = Database(str(tmp_path / "service.db"))
    db.init_schema()
    return PersonService(db)


def test_create_assigns_increasing_ids(service):
    first = service.create_person(PersonWrite(name="Ana"))
    second = service.create_person(PersonWrite(name="Bruno"))
    assert second.id > first.id
    assert service.get_person(first.id).name == "Ana"


def test_update_and_delete_report_missing_rows(service):
    assert service.update_person(42, PersonWrite(name="X")) is None
    assert service.delete_person(42) is False

    person = service.create_person(PersonWrite(name="Ana"))
    assert service.delete_person(person.id) is True
    assert service.get_person(person.id) is None


def test_driver_errors_become_storage_errors(tmp_path):
    service = PersonService(Database(str(tmp_path / "empty.db")))
    with pytest.raises(StorageError, match="Error fetching persons: no such table"):
        service.list_persons()
