import pytest

SF = {"latitude": 37.7749295, "longitude": -122.4194155}


@pytest.mark.asyncio
async def test_unknown_user_has_empty_friend_list(api_client):
	response = await api_client.get("/users/unknown-user/friends")
	assert response.status_code == 200
	assert response.json() == {"success": True, "data": []}


@pytest.mark.asyncio
async def test_add_and_remove_friend(api_client):
	response = await api_client.post("/users/alice/friends", json={"friend_id": "bob"})
	assert response.json() == {"success": True, "data": {"added": True}}
	await api_client.post("/users/alice/friends", json={"user_id": "alice", "friend_id": "bob"})

	assert (await api_client.get("/users/alice/friends")).json()["data"] == ["bob", "bob"]
	assert (await api_client.get("/users/bob/friends")).json()["data"] == ["alice", "alice"]

	response = await api_client.delete("/users/bob/friends/alice")
	assert response.json() == {"success": True, "data": {"removed": True}}
	assert (await api_client.get("/users/alice/friends")).json()["data"] == []
	assert (await api_client.get("/users/bob/friends")).json()["data"] == []


@pytest.mark.asyncio
async def test_friend_location_applies_privacy_filter(api_client):
	await api_client.post("/users/alice/friends", json={"friend_id": "bob"})
	await api_client.post("/users/bob/location", json={"location": SF})

	hidden = (await api_client.get("/users/alice/friends/bob")).json()["data"]
	assert hidden["id"] == "bob"
	assert hidden["location"] is None
	assert hidden["lastUpdated"] is not None

	await api_client.post("/users/bob/sharing-level", json={"level": "city"})
	city = (await api_client.get("/users/alice/friends/bob")).json()["data"]
	assert (city["location"]["latitude"], city["location"]["longitude"]) == (37.77, -122.42)

	await api_client.post("/users/bob/sharing-level", json={"level": "realtime"})
	exact = (await api_client.get("/users/alice/friends/bob")).json()["data"]
	assert exact["location"]["latitude"] == 37.7749295


@pytest.mark.asyncio
async def test_non_friend_location_is_empty_profile(api_client):
	await api_client.post("/users/bob/location", json={"location": SF})
	await api_client.post("/users/bob/sharing-level", json={"level": "realtime"})

	data = (await api_client.get("/users/alice/friends/bob")).json()["data"]
	assert data == {"id": "bob", "userName": None, "sharingLevel": None, "location": None, "lastUpdated": None}


@pytest.mark.asyncio
async def test_bulk_friend_locations(api_client):
	await api_client.post("/users/alice/friends", json={"friend_id": "bob"})
	await api_client.post("/users/alice/friends", json={"friend_id": "carol"})
	await api_client.post("/users/bob/location", json={"location": SF})
	await api_client.post("/users/bob/sharing-level", json={"level": "city"})

	response = await api_client.get("/users/alice/friends/locations")
	assert response.status_code == 200
	data = response.json()["data"]
	# carol never wrote anything, so only bob is listed
	assert [friend["id"] for friend in data] == ["bob"]
	assert data[0]["location"]["latitude"] == 37.77
