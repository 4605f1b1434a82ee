import pytest

from app.modules.user_management.domain.services.asset_intake import AssetIntake, IncomingAsset
from app.shared.core.exceptions import (
	FileStorageError,
	FileTooLargeError,
	UnsupportedMediaTypeError,
)
from app.shared.infrastructure.storage import file_manager as file_manager_module

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image"


def test_generate_filename_keeps_extension(file_manager):
	name = file_manager.generate_filename("portrait.JPG")
	stem, ext = name.split(".")
	assert stem.isdigit()
	assert ext == "JPG"


def test_generate_filename_without_extension(file_manager):
	assert file_manager.generate_filename("noext").isdigit()
	assert file_manager.generate_filename(None).isdigit()


def test_filenames_are_distinct_within_the_same_millisecond(file_manager, monkeypatch):
	monkeypatch.setattr(file_manager_module.time, "time", lambda: 1700000000.0)
	first = file_manager.generate_filename("a.png")
	second = file_manager.generate_filename("b.png")
	assert first == "1700000000000.png"
	assert second == "1700000000001.png"


async def test_save_writes_bytes(file_manager):
	name = await file_manager.save(PNG_BYTES, "me.png")
	assert file_manager.resolve(name).read_bytes() == PNG_BYTES


async def test_save_never_overwrites(file_manager, monkeypatch):
	existing = file_manager.upload_dir / "123.png"
	existing.write_bytes(b"original")
	monkeypatch.setattr(file_manager, "generate_filename", lambda _original: "123.png")

	with pytest.raises(FileStorageError):
		await file_manager.save(PNG_BYTES, "me.png")
	assert existing.read_bytes() == b"original"


def test_resolve_strips_directories(file_manager):
	assert file_manager.resolve("../../etc/passwd") == file_manager.upload_dir / "passwd"


async def test_intake_without_asset_returns_none(file_manager):
	assert await AssetIntake(file_manager).accept(None) is None


async def test_intake_stores_allowed_types(file_manager):
	intake = AssetIntake(file_manager)
	for content_type in ("image/jpeg", "image/png", "image/gif"):
		name = await intake.accept(IncomingAsset("photo.img", content_type, PNG_BYTES))
		assert file_manager.resolve(name).exists()


async def test_intake_rejects_pdf_without_writing(file_manager):
	intake = AssetIntake(file_manager)
	with pytest.raises(UnsupportedMediaTypeError) as exc_info:
		await intake.accept(IncomingAsset("cv.pdf", "application/pdf", b"%PDF-1.4"))

	assert exc_info.value.status_code == 415
	assert exc_info.value.details["actual_type"] == "application/pdf"
	assert list(file_manager.upload_dir.iterdir()) == []


async def test_intake_rejects_oversized_files(file_manager):
	intake = AssetIntake(file_manager)
	with pytest.raises(FileTooLargeError) as exc_info:
		await intake.accept(IncomingAsset("big.png", "image/png", b"x" * 2048))

	assert exc_info.value.details["max_size_bytes"] == 1024
	assert list(file_manager.upload_dir.iterdir()) == []


async def test_delete_removes_stored_file(file_manager):
	name = await file_manager.save(PNG_BYTES, "me.png")
	assert await file_manager.delete(name) is True
	assert not file_manager.resolve(name).exists()
	assert await file_manager.delete(name) is False


async def test_discard_ignores_missing_files(file_manager):
	intake = AssetIntake(file_manager)
	await intake.discard(None)
	await intake.discard("never-stored.png")
	assert list(file_manager.upload_dir.iterdir()) == []
