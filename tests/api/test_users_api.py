from pathlib import Path

from httpx import AsyncClient

USERS = "/api/v1/users"
PNG_BYTES = b"\x89PNG\r\n\x1a\napi-image"


async def _create(client: AsyncClient, **fields):
	response = await client.post(USERS, json=fields)
	assert response.status_code == 201, response.text
	return response.json()


async def test_create_with_form_and_photo(api_client: AsyncClient):
	response = await api_client.post(
		USERS,
		data={"name": "Ana", "email": "ana@example.com", "likes": "many", "stars": "4.5"},
		files={"profilePhoto": ("me.png", PNG_BYTES, "image/png")},
	)

	assert response.status_code == 201
	body = response.json()
	assert body["id"] == 1
	assert body["name"] == "Ana"
	assert body["likes"] == 0
	assert body["reviews"] == 0
	assert body["stars"] == 4.5
	assert body["profilePhoto"].endswith(".png")

	photo = await api_client.get(f"/uploads/{body['profilePhoto']}")
	assert photo.status_code == 200
	assert photo.content == PNG_BYTES


async def test_create_with_form_fields_only(api_client: AsyncClient):
	response = await api_client.post(USERS, data={"name": "Bea", "reviews": "3"})
	assert response.status_code == 201
	assert response.json()["reviews"] == 3
	assert response.json()["profilePhoto"] is None


async def test_create_rejects_pdf(api_client: AsyncClient):
	response = await api_client.post(
		USERS,
		data={"name": "Ana"},
		files={"profilePhoto": ("cv.pdf", b"%PDF-1.4", "application/pdf")},
	)

	assert response.status_code == 415
	assert response.json()["error"]["code"] == "UNSUPPORTED_MEDIA_TYPE"
	assert (await api_client.get(USERS)).json() == []


async def test_create_duplicate_email(api_client: AsyncClient):
	await _create(api_client, email="dup@example.com")
	response = await api_client.post(USERS, json={"email": "dup@example.com"})

	assert response.status_code == 409
	error = response.json()["error"]
	assert error["code"] == "DUPLICATE_KEY"
	assert error["details"]["field"] == "email"


async def test_get_user(api_client: AsyncClient):
	created = await _create(api_client, name="Ana", password="secret")
	response = await api_client.get(f"{USERS}/{created['id']}")
	assert response.status_code == 200
	assert response.json() == created


async def test_get_user_errors(api_client: AsyncClient):
	invalid = await api_client.get(f"{USERS}/abc")
	assert invalid.status_code == 400
	assert invalid.json()["error"]["code"] == "INVALID_IDENTIFIER"

	missing = await api_client.get(f"{USERS}/42")
	assert missing.status_code == 404
	assert missing.json()["error"]["code"] == "RECORD_NOT_FOUND"


async def test_put_replaces_every_field(api_client: AsyncClient):
	created = await _create(api_client, name="Ana", specialty="Nutrition", likes=7, stars=5)
	response = await api_client.put(f"{USERS}/{created['id']}", json={"name": "Ana Maria"})

	assert response.status_code == 200
	body = response.json()
	assert body["name"] == "Ana Maria"
	assert body["specialty"] is None
	assert body["likes"] == 0
	assert body["stars"] == 0.0


async def test_put_with_multipart_photo(api_client: AsyncClient):
	created = await _create(api_client, name="Ana")
	response = await api_client.put(
		f"{USERS}/{created['id']}",
		data={"name": "Ana"},
		files={"profilePhoto": ("new.gif", b"GIF89a", "image/gif")},
	)
	assert response.status_code == 200
	assert response.json()["profilePhoto"].endswith(".gif")


async def test_put_without_fields(api_client: AsyncClient):
	created = await _create(api_client, name="Ana")
	response = await api_client.put(f"{USERS}/{created['id']}", json={})

	assert response.status_code == 400
	assert response.json()["error"]["code"] == "EMPTY_UPDATE"


async def test_put_missing_user(api_client: AsyncClient):
	response = await api_client.put(f"{USERS}/99", json={"name": "ghost"})
	assert response.status_code == 404


async def test_bulk_create(api_client: AsyncClient):
	response = await api_client.post(
		f"{USERS}/bulk",
		json=[{"name": "A", "likes": "2"}, {"name": "B", "stars": "bad"}],
	)
	assert response.status_code == 201
	assert response.json() == {"count": 2}

	users = (await api_client.get(USERS)).json()
	assert [(u["name"], u["likes"], u["stars"]) for u in users] == [("A", 2, 0.0), ("B", 0, 0.0)]


async def test_bulk_create_rejects_empty_list(api_client: AsyncClient):
	response = await api_client.post(f"{USERS}/bulk", json=[])
	assert response.status_code == 400
	assert response.json()["error"]["code"] == "INVALID_BATCH"
	assert (await api_client.get(USERS)).json() == []


async def test_bulk_update_merges_fields(api_client: AsyncClient):
	a = await _create(api_client, name="A", specialty="Cardio", likes=1)
	b = await _create(api_client, name="B", reviews=2)

	response = await api_client.patch(
		f"{USERS}/bulk",
		json=[{"id": a["id"], "likes": 5}, {"id": str(b["id"]), "name": "B2"}],
	)

	assert response.status_code == 200
	first, second = response.json()
	assert (first["name"], first["specialty"], first["likes"]) == ("A", "Cardio", 5)
	assert (second["name"], second["reviews"]) == ("B2", 2)


async def test_bulk_update_aborts_at_missing_id(api_client: AsyncClient):
	a = await _create(api_client, name="A")
	c = await _create(api_client, name="C")

	response = await api_client.patch(
		f"{USERS}/bulk",
		json=[{"id": a["id"], "name": "A2"}, {"name": "orphan"}, {"id": c["id"], "name": "C2"}],
	)

	assert response.status_code == 400
	error = response.json()["error"]
	assert error["code"] == "MISSING_IDENTIFIER"
	assert error["details"]["failed_index"] == 1
	assert error["details"]["committed_ids"] == [a["id"]]
	assert (await api_client.get(f"{USERS}/{a['id']}")).json()["name"] == "A2"
	assert (await api_client.get(f"{USERS}/{c['id']}")).json()["name"] == "C"


async def test_bulk_update_requires_a_list(api_client: AsyncClient):
	response = await api_client.patch(f"{USERS}/bulk", json={"id": 1})
	assert response.status_code == 400
	assert response.json()["error"]["code"] == "INVALID_BATCH"

	empty = await api_client.patch(f"{USERS}/bulk", json=[])
	assert empty.status_code == 200
	assert empty.json() == []


async def test_delete_user(api_client: AsyncClient):
	created = await _create(api_client, name="Ana")
	response = await api_client.delete(f"{USERS}/{created['id']}")

	assert response.status_code == 200
	assert response.json() == {
		"message": f"User with ID {created['id']} deleted successfully",
		"user": created,
	}
	assert (await api_client.get(f"{USERS}/{created['id']}")).status_code == 404


async def test_malformed_json_body(api_client: AsyncClient):
	response = await api_client.post(
		USERS, content=b"{not json", headers={"content-type": "application/json"}
	)
	assert response.status_code == 422
	assert response.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_request_id_is_echoed(api_client: AsyncClient):
	response = await api_client.get(USERS, headers={"X-Request-ID": "req-123"})
	assert response.headers["X-Request-ID"] == "req-123"

	error = await api_client.get(f"{USERS}/abc", headers={"X-Request-ID": "req-456"})
	assert error.json()["error"]["request_id"] == "req-456"


async def test_health(api_client: AsyncClient):
	response = await api_client.get("/api/v1/health")
	assert response.status_code == 200
	body = response.json()
	assert body["status"] == "healthy"
	assert body["components"]["database"]["status"] == "healthy"
	assert body["components"]["uploads"]["exists"] is True


async def test_non_string_text_is_a_validation_error(api_client: AsyncClient):
	created = await api_client.post(USERS, json={"name": 123, "email": "a@example.com"})
	assert created.status_code == 422
	error = created.json()["error"]
	assert error["code"] == "VALIDATION_ERROR"
	assert error["details"]["field"] == "name"

	bulk = await api_client.post(f"{USERS}/bulk", json=[{"name": ["x"]}])
	assert bulk.status_code == 422
	assert bulk.json()["error"]["details"]["index"] == 0
	assert (await api_client.get(USERS)).json() == []

	user = await _create(api_client, name="Ana")
	replaced = await api_client.put(f"{USERS}/{user['id']}", json={"email": False})
	assert replaced.status_code == 422
	assert replaced.json()["error"]["details"]["field"] == "email"


async def test_bulk_update_non_string_text_reports_progress(api_client: AsyncClient):
	a = await _create(api_client, name="A")
	b = await _create(api_client, name="B")

	response = await api_client.patch(
		f"{USERS}/bulk",
		json=[{"id": a["id"], "name": "A2"}, {"id": b["id"], "name": {"first": "B"}}],
	)

	assert response.status_code == 422
	error = response.json()["error"]
	assert error["code"] == "VALIDATION_ERROR"
	assert error["details"]["failed_index"] == 1
	assert error["details"]["committed_ids"] == [a["id"]]
	assert (await api_client.get(f"{USERS}/{b['id']}")).json()["name"] == "B"


async def test_oversized_counter_defaults_to_zero(api_client: AsyncClient):
	body = await _create(api_client, likes="99999999999999999999999", reviews=3)
	assert body["likes"] == 0
	assert body["reviews"] == 3


async def test_failed_put_with_photo_leaves_no_file(api_client: AsyncClient, test_settings):
	response = await api_client.put(
		f"{USERS}/404",
		data={"name": "ghost"},
		files={"profilePhoto": ("ghost.png", PNG_BYTES, "image/png")},
	)
	assert response.status_code == 404
	assert list(Path(test_settings.UPLOAD_DIR).iterdir()) == []
