"""앨범 CRUD API 테스트.

Album CRUD API tests — Create, Read, Update, Delete album endpoints.
Tests ownership (owner only for mutations), validation, and edge cases.
"""

from httpx import AsyncClient

from tests.conftest import auth_header

URL = "/api/v1/albums"


class TestAlbumCreate:
    """앨범 생성 테스트."""

    async def test_create_album(self, client: AsyncClient, owner, owner_token):
        """앨범 생성 성공, 호출자가 소유자."""
        res = await client.post(URL, json={
            "name": "Family",
            "description": "Birthdays",
        }, headers=auth_header(owner_token))
        assert res.status_code == 201
        data = res.json()
        assert data["name"] == "Family"
        assert data["user_id"] == str(owner.id)

    async def test_create_album_empty_name(self, client: AsyncClient, owner_token):
        """빈 이름은 400."""
        res = await client.post(URL, json={"name": ""}, headers=auth_header(owner_token))
        assert res.status_code == 400

    async def test_create_album_no_auth(self, client: AsyncClient):
        """인증 없이 생성 시 거부."""
        res = await client.post(URL, json={"name": "X"})
        assert res.status_code in (401, 403)


class TestAlbumRead:
    """앨범 조회 테스트."""

    async def test_list_albums(self, client: AsyncClient, album):
        """앨범 목록 조회."""
        res = await client.get(URL)
        assert res.status_code == 200
        assert any(a["name"] == "Holidays" for a in res.json())

    async def test_get_album(self, client: AsyncClient, album):
        """앨범 단건 조회."""
        res = await client.get(f"{URL}/{album.id}")
        assert res.status_code == 200
        assert res.json()["description"] == "Summer trip"

    async def test_get_nonexistent_album(self, client: AsyncClient):
        """존재하지 않는 앨범 조회 시 404."""
        res = await client.get(f"{URL}/9999")
        assert res.status_code == 404
        assert res.json()["detail"] == "Album not found"

    async def test_get_album_photos(self, client: AsyncClient, album, photo):
        """앨범 사진 목록 조회."""
        res = await client.get(f"{URL}/{album.id}/photos")
        assert res.status_code == 200
        assert [p["id"] for p in res.json()] == [photo.id]


class TestAlbumUpdate:
    """앨범 수정 테스트."""

    async def test_update_album(self, client: AsyncClient, album, owner_token):
        """소유자 수정 성공."""
        res = await client.put(f"{URL}/{album.id}", json={
            "name": "Renamed",
        }, headers=auth_header(owner_token))
        assert res.status_code == 200
        assert res.json()["name"] == "Renamed"
        assert res.json()["description"] == "Summer trip"

    async def test_update_foreign_album(self, client: AsyncClient, album, other_token):
        """타인 앨범 수정 시 404, 변경 없음."""
        res = await client.put(f"{URL}/{album.id}", json={
            "name": "Hijacked",
        }, headers=auth_header(other_token))
        assert res.status_code == 404

        res2 = await client.get(f"{URL}/{album.id}")
        assert res2.json()["name"] == "Holidays"


class TestAlbumDelete:
    """앨범 삭제 테스트."""

    async def test_delete_album(self, client: AsyncClient, album, photo, owner_token):
        """앨범 삭제 시 사진도 삭제."""
        res = await client.delete(f"{URL}/{album.id}", headers=auth_header(owner_token))
        assert res.status_code == 204

        # 삭제 후 조회 시 404
        res2 = await client.get(f"{URL}/{album.id}")
        assert res2.status_code == 404
        res3 = await client.get(f"/api/v1/photos/{photo.id}")
        assert res3.status_code == 404

    async def test_delete_foreign_album(self, client: AsyncClient, album, other_token):
        """타인 앨범 삭제는 수행되지 않음."""
        res = await client.delete(f"{URL}/{album.id}", headers=auth_header(other_token))
        assert res.status_code == 404

        res2 = await client.get(f"{URL}/{album.id}")
        assert res2.status_code == 200

    async def test_delete_nonexistent_album(self, client: AsyncClient, owner_token):
        """존재하지 않는 앨범 삭제 시 404."""
        res = await client.delete(f"{URL}/9999", headers=auth_header(owner_token))
        assert res.status_code == 404
