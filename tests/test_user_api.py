import pytest
from fastapi import status

from .factories import user_factory


async def _create_user(client, login, **overrides):
    data = user_factory.create_user_data(email=f"{login}@example.com", login=login, **overrides)
    response = await client.post("/users", json=data)
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


class TestUserAPI:
    """Integration tests for User API endpoints"""

    @pytest.mark.asyncio
    async def test_create_user_success(self, client):
        """Test successful user creation"""
        response = await client.post("/users", json=user_factory.create_user_data())

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data == {
            "id": 1,
            "email": "user@example.com",
            "login": "user",
            "name": "Test User",
            "birthday": "1990-01-01",
        }

    @pytest.mark.asyncio
    async def test_create_user_without_name_uses_login(self, client):
        data = await _create_user(client, "nameless", name=None)

        assert data["name"] == "nameless"

    @pytest.mark.asyncio
    async def test_create_user_blank_name_uses_login(self, client):
        data = await _create_user(client, "blank", name="  ")

        assert data["name"] == "blank"

    @pytest.mark.asyncio
    async def test_create_user_invalid_email(self, client):
        """Test creating user with invalid email"""
        response = await client.post("/users", json=user_factory.create_user_data(email="invalid-email"))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "email" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_create_user_login_with_space(self, client):
        response = await client.post("/users", json=user_factory.create_user_data(login="two words"))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "login" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_get_users(self, client):
        """Test retrieving all users"""
        await _create_user(client, "user1")
        await _create_user(client, "user2")

        response = await client.get("/users")

        assert response.status_code == status.HTTP_200_OK
        assert [user["login"] for user in response.json()] == ["user1", "user2"]

    @pytest.mark.asyncio
    async def test_get_user_not_found(self, client):
        response = await client.get("/users/999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"detail": "User with id 999 not found"}

    @pytest.mark.asyncio
    async def test_get_user_invalid_id(self, client):
        response = await client.get("/users/abc")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.asyncio
    async def test_partial_update(self, client):
        created = await _create_user(client, "neo")

        response = await client.put("/users", json={"id": created["id"], "login": "the_one"})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["login"] == "the_one"
        assert data["email"] == created["email"]
        assert data["name"] == created["name"]
        assert data["birthday"] == created["birthday"]

    @pytest.mark.asyncio
    async def test_update_unknown_user(self, client):
        response = await client.put("/users", json={"id": 10, "name": "Nobody"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert (await client.get("/users")).json() == []

    @pytest.mark.asyncio
    async def test_friend_request_and_confirmation(self, client):
        """Test that a request becomes mutual once answered"""
        # Arrange
        first = await _create_user(client, "first")
        second = await _create_user(client, "second")

        # Act
        request = await client.put(f"/users/{first['id']}/friends/{second['id']}")
        pending = await client.get(f"/users/{second['id']}/friends")
        answer = await client.put(f"/users/{second['id']}/friends/{first['id']}")

        # Assert
        assert request.status_code == status.HTTP_200_OK
        assert "request" in request.json()["message"]
        assert pending.json() == []
        assert answer.status_code == status.HTTP_200_OK
        assert "now friends" in answer.json()["message"]
        assert [user["id"] for user in (await client.get(f"/users/{second['id']}/friends")).json()] == [first["id"]]

    @pytest.mark.asyncio
    async def test_add_self_as_friend(self, client):
        """Test that self-friending is a 400 even for an unknown user"""
        existing = await _create_user(client, "lonely")

        response = await client.put(f"/users/{existing['id']}/friends/{existing['id']}")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert (await client.put("/users/50/friends/50")).status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.asyncio
    async def test_add_unknown_friend(self, client):
        user = await _create_user(client, "user1")

        response = await client.put(f"/users/{user['id']}/friends/9")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_remove_friend(self, client):
        first = await _create_user(client, "first")
        second = await _create_user(client, "second")
        await client.put(f"/users/{first['id']}/friends/{second['id']}")

        response = await client.delete(f"/users/{first['id']}/friends/{second['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert (await client.get(f"/users/{first['id']}/friends")).json() == []

    @pytest.mark.asyncio
    async def test_friends_of_unknown_user(self, client):
        response = await client.get("/users/3/friends")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_common_friends(self, client):
        users = [await _create_user(client, f"user{index}") for index in range(1, 7)]
        for friend in users[1:4]:
            await client.put(f"/users/{users[0]['id']}/friends/{friend['id']}")
        for friend in users[2:5]:
            await client.put(f"/users/{users[5]['id']}/friends/{friend['id']}")

        response = await client.get(f"/users/{users[0]['id']}/friends/common/{users[5]['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert [user["id"] for user in response.json()] == [3, 4]

    @pytest.mark.asyncio
    @pytest.mark.asyncio
    async def test_oversized_ids_are_rejected(self, client):
        user = await _create_user(client, "user1")

        responses = [
            await client.get(f"/users/{10**20}"),
            await client.put(f"/users/{user['id']}/friends/{10**20}"),
            await client.get(f"/users/{user['id']}/friends/common/{10**20}"),
            await client.put("/users", json={"id": 10**20, "name": "Big"}),
        ]

        assert [response.status_code for response in responses] == [status.HTTP_400_BAD_REQUEST] * 4

    @pytest.mark.asyncio
    async def test_create_user_login_too_long(self, client):
        response = await client.post("/users", json=user_factory.create_user_data(login="x" * 256))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "login" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_common_friends_with_unknown_user(self, client):
        user = await _create_user(client, "user1")

        response = await client.get(f"/users/{user['id']}/friends/common/8")

        assert response.status_code == status.HTTP_404_NOT_FOUND
