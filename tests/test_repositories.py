from threading import Thread

import pytest

from birthday_api.birth_date import DatedBirthday, UndatedBirthday
from birthday_api.errors import NotFoundError
from birthday_api.repositories import InMemoryBirthdayRepository
from birthday_api.schemas import BirthdayCreate


def payload(first_name="Anna", birth_date="1990-03-15", comment=None) -> BirthdayCreate:
    return BirthdayCreate(first_name=first_name, last_name="Lee", birth_date=birth_date, comment=comment)


class TestCreate:
    def test_assigns_increasing_ids(self):
        repo = InMemoryBirthdayRepository()
        first = repo.create(payload())
        second = repo.create(payload())
        assert first["id"] == 1
        assert second["id"] == 2
        assert first["birth_date"] == DatedBirthday(1990, 3, 15)
        assert first["created_at"] is not None

    def test_ids_not_reused_after_delete(self):
        repo = InMemoryBirthdayRepository()
        repo.create(payload())
        last = repo.create(payload())
        repo.delete(last["id"])
        assert repo.create(payload())["id"] == last["id"] + 1

    def test_returned_record_is_a_copy(self):
        repo = InMemoryBirthdayRepository()
        created = repo.create(payload())
        created["first_name"] = "Mutated"
        assert repo.get(created["id"])["first_name"] == "Anna"

    def test_concurrent_creates_get_distinct_ids(self):
        repo = InMemoryBirthdayRepository()
        threads = [Thread(target=lambda: [repo.create(payload()) for _ in range(50)]) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        ids = [b["id"] for b in repo.list()]
        assert sorted(ids) == list(range(1, 201))


class TestUpdate:
    def test_full_replace(self):
        repo = InMemoryBirthdayRepository()
        created = repo.create(payload(comment="note"))
        updated = repo.update(created["id"], payload(first_name="Anne", birth_date="--12-01"))
        assert updated["id"] == created["id"]
        assert updated["created_at"] == created["created_at"]
        assert updated["first_name"] == "Anne"
        assert updated["birth_date"] == UndatedBirthday(12, 1)
        assert updated["comment"] is None
        assert repo.get(created["id"]) == updated

    def test_missing_id_raises(self):
        repo = InMemoryBirthdayRepository()
        with pytest.raises(NotFoundError) as excinfo:
            repo.update(99, payload())
        assert excinfo.value.birthday_id == 99


class TestDelete:
    def test_delete_twice_same_state(self):
        repo = InMemoryBirthdayRepository()
        keep = repo.create(payload())
        gone = repo.create(payload())

        assert repo.delete(gone["id"]) is True
        after_once = repo.list()
        assert repo.delete(gone["id"]) is False
        assert repo.list() == after_once
        assert [b["id"] for b in after_once] == [keep["id"]]

    def test_delete_missing_is_noop(self):
        repo = InMemoryBirthdayRepository()
        assert repo.delete(12345) is False
        assert repo.list() == []


class TestList:
    def test_sorted_by_month_day_then_insertion(self):
        repo = InMemoryBirthdayRepository()
        for name, birth_date in [
            ("a", "2001-07-04"),
            ("b", "--03-15"),
            ("c", "1950-07-04"),
            ("d", "1990-03-01"),
        ]:
            repo.create(payload(first_name=name, birth_date=birth_date))

        assert [b["first_name"] for b in repo.list()] == ["d", "b", "a", "c"]

    def test_get_missing_returns_none(self):
        assert InMemoryBirthdayRepository().get(1) is None
