import pytest

from app.modules.user_management.domain.services.asset_intake import AssetIntake, IncomingAsset
from app.modules.user_management.domain.services.credentials import CredentialPolicy
from app.modules.user_management.domain.services.user_service import UserRecordService
from app.shared.core.exceptions import (
	DuplicateKeyError,
	EmptyUpdateError,
	InvalidBatchError,
	InvalidIdentifierError,
	MissingIdentifierError,
	RecordNotFoundError,
	UnsupportedMediaTypeError,
	ValidationError,
)

PNG = IncomingAsset("me.png", "image/png", b"\x89PNG-data")
PDF = IncomingAsset("cv.pdf", "application/pdf", b"%PDF-1.4")


class PrefixCredentialPolicy(CredentialPolicy):
	def prepare(self, raw):
		return f"hashed:{raw}"


async def test_create_defaults_unparsable_numbers(service):
	user = await service.create({"name": "Ana", "likes": "lots", "stars": "4.5"})
	assert user.id == 1
	assert user.likes == 0
	assert user.reviews == 0
	assert user.stars == 4.5
	assert user.profile_photo is None


async def test_create_then_get_round_trip(service):
	fields = {
		"name": "Ana",
		"email": "ana@example.com",
		"password": "secret",
		"description": "Nutritionist",
		"specialty": "Nutrition",
		"likes": "3",
		"reviews": 2,
		"stars": "4.0",
	}
	created = await service.create(fields)
	fetched = await service.get_by_id(str(created.id))

	assert fetched == created
	assert fetched.password == "secret"
	assert (fetched.likes, fetched.reviews, fetched.stars) == (3, 2, 4.0)


async def test_create_ignores_client_id(service):
	user = await service.create({"id": 50, "name": "Ana"})
	assert user.id == 1


async def test_create_with_photo_stores_filename(service, file_manager):
	user = await service.create({"name": "Ana"}, PNG)
	assert user.profile_photo.endswith(".png")
	assert file_manager.resolve(user.profile_photo).read_bytes() == PNG.data


async def test_create_with_pdf_creates_nothing(service, memory_repository, file_manager):
	with pytest.raises(UnsupportedMediaTypeError):
		await service.create({"name": "Ana"}, PDF)

	assert memory_repository.rows == {}
	assert list(file_manager.upload_dir.iterdir()) == []


async def test_duplicate_email_is_a_conflict(service):
	await service.create({"email": "same@example.com"})
	with pytest.raises(DuplicateKeyError) as exc_info:
		await service.create({"email": "same@example.com"})
	assert exc_info.value.status_code == 409
	assert exc_info.value.details["field"] == "email"


async def test_get_by_id_errors(service):
	with pytest.raises(InvalidIdentifierError):
		await service.get_by_id("abc")
	with pytest.raises(RecordNotFoundError):
		await service.get_by_id("404")


async def test_list_all_in_id_order(service):
	await service.create({"name": "A"})
	await service.create({"name": "B"})
	assert [u.name for u in await service.list_all()] == ["A", "B"]


async def test_update_is_a_full_replace(service):
	user = await service.create(
		{"name": "Ana", "specialty": "Nutrition", "likes": 10, "reviews": 4, "stars": 5}
	)
	updated = await service.update(user.id, {"name": "Ana Maria", "likes": "11"})

	assert updated.name == "Ana Maria"
	assert updated.likes == 11
	assert updated.specialty is None
	assert updated.reviews == 0
	assert updated.stars == 0.0
	assert await service.get_by_id(user.id) == updated


async def test_update_without_fields_is_rejected_before_storage(service, memory_repository):
	user = await service.create({"name": "Ana"})
	with pytest.raises(EmptyUpdateError):
		await service.update(user.id, {})
	with pytest.raises(EmptyUpdateError):
		await service.update(user.id, {"id": user.id, "nickname": "x"})
	assert memory_repository.update_calls == []


async def test_update_invalid_id_and_missing_record(service):
	with pytest.raises(InvalidIdentifierError):
		await service.update("x1", {"name": "A"})
	with pytest.raises(RecordNotFoundError):
		await service.update(9, {"name": "A"})


async def test_update_photo_rules(service):
	user = await service.create({"name": "Ana"}, PNG)

	kept = await service.update(user.id, {"name": "Ana", "profilePhoto": user.profile_photo})
	assert kept.profile_photo == user.profile_photo

	cleared = await service.update(user.id, {"name": "Ana"})
	assert cleared.profile_photo is None

	replaced = await service.update(user.id, {"profilePhoto": "ignored.png"}, PNG)
	assert replaced.profile_photo not in (None, "ignored.png")


async def test_update_with_only_a_photo(service):
	user = await service.create({"name": "Ana", "likes": 5})
	updated = await service.update(user.id, {}, PNG)
	assert updated.profile_photo is not None
	assert updated.name is None
	assert updated.likes == 0


async def test_update_bulk_is_a_partial_merge(service):
	user = await service.create({"name": "Ana", "specialty": "Nutrition", "likes": 10, "stars": 4.5})
	[updated] = await service.update_bulk([{"id": user.id, "likes": "12"}])

	assert updated.likes == 12
	assert updated.name == "Ana"
	assert updated.specialty == "Nutrition"
	assert updated.stars == 4.5


async def test_update_bulk_preserves_input_order(service):
	first = await service.create({"name": "A"})
	second = await service.create({"name": "B"})
	result = await service.update_bulk([
		{"id": str(second.id), "reviews": 1},
		{"id": first.id, "reviews": 2},
	])
	assert [u.id for u in result] == [second.id, first.id]


async def test_update_bulk_stops_at_missing_id(service, memory_repository):
	a = await service.create({"name": "A", "likes": 1})
	b = await service.create({"name": "B", "likes": 1})
	c = await service.create({"name": "C", "likes": 1})

	with pytest.raises(MissingIdentifierError) as exc_info:
		await service.update_bulk([
			{"id": a.id, "likes": 100},
			{"likes": 200},
			{"id": c.id, "likes": 300},
		])

	assert exc_info.value.details["failed_index"] == 1
	assert exc_info.value.details["committed_ids"] == [a.id]
	assert (await service.get_by_id(a.id)).likes == 100
	assert (await service.get_by_id(b.id)).likes == 1
	assert (await service.get_by_id(c.id)).likes == 1
	assert memory_repository.update_calls == [a.id]


async def test_update_bulk_unknown_record_aborts(service):
	a = await service.create({"name": "A"})
	with pytest.raises(RecordNotFoundError) as exc_info:
		await service.update_bulk([{"id": a.id, "name": "A2"}, {"id": 999, "name": "ghost"}])

	assert exc_info.value.details["failed_index"] == 1
	assert exc_info.value.details["committed_ids"] == [a.id]
	assert (await service.get_by_id(a.id)).name == "A2"


async def test_update_bulk_invalid_id_reports_index(service):
	with pytest.raises(InvalidIdentifierError) as exc_info:
		await service.update_bulk([{"id": "seven"}])
	assert exc_info.value.details["index"] == 0
	assert exc_info.value.details["failed_index"] == 0


async def test_update_bulk_entry_with_only_id(service):
	a = await service.create({"name": "A", "likes": 2})
	assert await service.update_bulk([{"id": a.id}]) == [a]
	with pytest.raises(RecordNotFoundError):
		await service.update_bulk([{"id": 77}])


async def test_update_bulk_input_shapes(service):
	assert await service.update_bulk([]) == []
	with pytest.raises(InvalidBatchError):
		await service.update_bulk({"id": 1})
	with pytest.raises(InvalidBatchError) as exc_info:
		await service.update_bulk(["not-an-object"])
	assert exc_info.value.details["index"] == 0


async def test_create_bulk_counts_records(service):
	count = await service.create_bulk([
		{"name": "A", "likes": "x"},
		{"name": "B", "email": "b@example.com"},
	])
	assert count == 2
	users = await service.list_all()
	assert [u.likes for u in users] == [0, 0]


@pytest.mark.parametrize("records", [[], {}, "abc", None, [{"name": "A"}, 3]])
async def test_create_bulk_rejects_bad_batches(service, memory_repository, records):
	with pytest.raises(InvalidBatchError):
		await service.create_bulk(records)
	assert memory_repository.rows == {}


async def test_create_bulk_duplicate_creates_nothing(service, memory_repository):
	with pytest.raises(DuplicateKeyError):
		await service.create_bulk([{"email": "x@example.com"}, {"email": "x@example.com"}])
	assert memory_repository.rows == {}


async def test_delete_returns_snapshot_then_not_found(service):
	user = await service.create({"name": "Ana"})
	result = await service.delete(str(user.id))

	assert result.message == f"User with ID {user.id} deleted successfully"
	assert result.record == user
	with pytest.raises(RecordNotFoundError):
		await service.get_by_id(user.id)
	with pytest.raises(RecordNotFoundError):
		await service.delete(user.id)
	with pytest.raises(InvalidIdentifierError):
		await service.delete("1.5")


async def test_credential_policy_applies_everywhere(memory_repository, file_manager):
	service = UserRecordService(
		memory_repository,
		AssetIntake(file_manager),
		credentials=PrefixCredentialPolicy(),
	)
	created = await service.create({"password": "a"})
	assert created.password == "hashed:a"

	replaced = await service.update(created.id, {"password": "b"})
	assert replaced.password == "hashed:b"

	[merged] = await service.update_bulk([{"id": created.id, "password": "c"}])
	assert merged.password == "hashed:c"

	no_password = await service.update(created.id, {"name": "n"})
	assert no_password.password is None


async def test_create_rejects_non_string_text(service, memory_repository):
	with pytest.raises(ValidationError) as exc_info:
		await service.create({"name": 123, "email": "a@example.com"})
	assert exc_info.value.details["field"] == "name"
	assert memory_repository.rows == {}


async def test_create_bulk_text_error_names_the_entry(service, memory_repository):
	with pytest.raises(ValidationError) as exc_info:
		await service.create_bulk([{"name": "A"}, {"name": ["x"]}])
	assert exc_info.value.details["index"] == 1
	assert memory_repository.rows == {}


async def test_update_bulk_text_error_reports_progress(service):
	a = await service.create({"name": "A"})
	b = await service.create({"name": "B"})

	with pytest.raises(ValidationError) as exc_info:
		await service.update_bulk([{"id": a.id, "name": "A2"}, {"id": b.id, "specialty": 5}])

	assert exc_info.value.details["field"] == "specialty"
	assert exc_info.value.details["failed_index"] == 1
	assert exc_info.value.details["committed_ids"] == [a.id]
	assert (await service.get_by_id(b.id)).specialty is None


async def test_huge_counters_fall_back_to_zero(service):
	user = await service.create({"likes": "99999999999999999999999", "reviews": 2 ** 31})
	assert (user.likes, user.reviews) == (0, 0)


async def test_failed_create_removes_the_stored_photo(service, file_manager):
	await service.create({"email": "taken@example.com"})

	with pytest.raises(DuplicateKeyError):
		await service.create({"email": "taken@example.com"}, PNG)
	with pytest.raises(ValidationError):
		await service.create({"name": 1}, PNG)

	assert list(file_manager.upload_dir.iterdir()) == []


async def test_failed_update_removes_the_stored_photo(service, file_manager):
	with pytest.raises(RecordNotFoundError):
		await service.update(404, {"name": "ghost"}, PNG)
	assert list(file_manager.upload_dir.iterdir()) == []


async def test_successful_update_keeps_the_photo(service, file_manager):
	user = await service.create({"name": "Ana"})
	updated = await service.update(user.id, {"name": "Ana"}, PNG)
	assert file_manager.resolve(updated.profile_photo).exists()
