"""
Album Client Lifecycle Component Tests (Mocked Transport)

Create -> list -> update -> delete against a mocked transport, for both
the current user and an explicit user id.

Usage:
    pytest tests/component/tdd/album_client/test_album_lifecycle.py -v
"""
import pytest

from album_client import (
    ME,
    AlbumClient,
    AlbumNotFoundError,
    AlbumPrivacyOption,
    AlbumSortOption,
    EditAlbumParameters,
    InvalidArgumentError,
    UserId,
)
from tests.fixtures import make_album_page_payload, make_album_payload, make_error_payload

pytestmark = [pytest.mark.component, pytest.mark.asyncio]

ALBUM_ID = 10303859
ORIGINAL_NAME = "Unit Test Album"
ORIGINAL_DESC = "This album was created via an automated test, and should be deleted momentarily..."
UPDATED_NAME = "Unit Test Album (Updated)"
CREATE_BODY = (
    "privacy=password"
    "&sort=newest"
    f"&name={ORIGINAL_NAME.replace(' ', '+')}"
    f"&description={ORIGINAL_DESC.replace(' ', '+').replace(',', '%2C')}"
    "&password=test"
)
UPDATE_BODY = "privacy=anybody&name=Unit+Test+Album+%28Updated%29"


def _create_params() -> EditAlbumParameters:
    return EditAlbumParameters(
        name=ORIGINAL_NAME,
        description=ORIGINAL_DESC,
        sort=AlbumSortOption.NEWEST,
        privacy=AlbumPrivacyOption.PASSWORD,
        password="test",
    )


def _mock_lifecycle(mock_transport, base_path: str):
    created = make_album_payload(
        album_id=ALBUM_ID, name=ORIGINAL_NAME, description=ORIGINAL_DESC,
        privacy="password", sort="newest",
    )
    patched = make_album_payload(
        album_id=ALBUM_ID, name=UPDATED_NAME, description=ORIGINAL_DESC,
        privacy="anybody", sort="newest",
    )
    mock_transport.set_response("POST", base_path, 201, created)
    mock_transport.set_response("GET", base_path, 200, make_album_page_payload([created], base_path=base_path))
    mock_transport.set_response("PATCH", f"{base_path}/{ALBUM_ID}", 200, patched)
    mock_transport.set_response("DELETE", f"{base_path}/{ALBUM_ID}", 204)


@pytest.mark.parametrize("scope, base_path", [
    (ME, "/me/albums"),
    (UserId(2433258), "/users/2433258/albums"),
])
class TestAlbumManagement:
    """Full album lifecycle"""

    async def test_album_lifecycle(self, album_client, mock_transport, scope, base_path):
        _mock_lifecycle(mock_transport, base_path)

        new_album = await album_client.create_album(scope, _create_params())

        assert new_album.name == ORIGINAL_NAME
        assert new_album.description == ORIGINAL_DESC
        assert new_album.album_id == ALBUM_ID
        assert mock_transport.get_last_request().body == CREATE_BODY

        albums = await album_client.list_albums(scope)
        assert albums.total > 0

        updated = await album_client.update_album(
            scope, new_album.album_id,
            EditAlbumParameters(name=UPDATED_NAME, privacy=AlbumPrivacyOption.ANYBODY),
        )

        assert updated.name == UPDATED_NAME
        assert updated.description == ORIGINAL_DESC
        assert updated.album_id == ALBUM_ID
        assert mock_transport.get_last_request().body == UPDATE_BODY

        assert await album_client.delete_album(scope, updated.album_id) is True
        mock_transport.assert_request_made("DELETE", f"{base_path}/{ALBUM_ID}")

    async def test_operations_after_delete_report_not_found(self, album_client, mock_transport, scope, base_path):
        _mock_lifecycle(mock_transport, base_path)
        assert await album_client.delete_album(scope, ALBUM_ID) is True

        mock_transport.set_response("DELETE", f"{base_path}/{ALBUM_ID}", 404, make_error_payload())
        mock_transport.set_response("PATCH", f"{base_path}/{ALBUM_ID}", 404, make_error_payload())

        with pytest.raises(AlbumNotFoundError):
            await album_client.delete_album(scope, ALBUM_ID)
        with pytest.raises(AlbumNotFoundError):
            await album_client.update_album(scope, ALBUM_ID, EditAlbumParameters(name="gone"))


class TestArgumentValidation:
    """Invalid input is rejected before any request is sent"""

    async def test_create_without_name(self, album_client, mock_transport):
        with pytest.raises(InvalidArgumentError):
            await album_client.create_album(ME, EditAlbumParameters(description="nameless"))

        mock_transport.assert_no_requests()

    async def test_invalid_album_id(self, album_client, mock_transport):
        with pytest.raises(InvalidArgumentError):
            await album_client.delete_album(ME, 0)

        mock_transport.assert_no_requests()

    async def test_password_privacy_without_password(self, album_client, mock_transport):
        with pytest.raises(InvalidArgumentError):
            await album_client.update_album(
                ME, ALBUM_ID, EditAlbumParameters(privacy=AlbumPrivacyOption.PASSWORD)
            )

        mock_transport.assert_no_requests()


class TestClientResources:

    async def test_injected_transport_is_not_closed(self, mock_transport):
        async with AlbumClient(transport=mock_transport):
            pass

        assert mock_transport.closed is False
