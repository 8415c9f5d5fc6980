"""Tests for directed friend edges and the queries built on them."""

from __future__ import annotations

from tests.helpers import befriend, create_user, ids, user_payload


async def _users(client, count: int) -> None:
    for n in range(1, count + 1):
        await create_user(client, n)


async def test_friend_edges_are_directional(client):
    await _users(client, 2)
    assert await befriend(client, 1, 2) == {"ok": True, "created": True}

    r1 = await client.get("/users/1/friends")
    r2 = await client.get("/users/2/friends")
    assert ids(r1.json()) == [2]
    assert r1.json()[0]["acknowledged"] is False
    assert r2.json() == []


async def test_mutual_edges_are_acknowledged_for_both(client):
    await _users(client, 3)
    await befriend(client, 1, 2)
    await befriend(client, 2, 1)
    await befriend(client, 1, 3)

    ack1 = (await client.get("/users/1/friends/acknowledged")).json()
    ack2 = (await client.get("/users/2/friends/acknowledged")).json()
    assert ids(ack1) == [2]
    assert ids(ack2) == [1]

    friends = (await client.get("/users/1/friends")).json()
    assert [(f["id"], f["acknowledged"]) for f in friends] == \
        [(2, True), (3, False)]

    user = (await client.get("/users/1")).json()
    assert user["friends"] == {"2": True, "3": False}


async def test_add_friend_twice_is_not_an_error(client):
    await _users(client, 2)
    await befriend(client, 1, 2)
    assert await befriend(client, 1, 2) == {"ok": True, "created": False}
    assert ids((await client.get("/users/1/friends")).json()) == [2]


async def test_add_friend_with_unknown_user_returns_404(client):
    await _users(client, 1)
    await befriend(client, 1, 27, expected=404)
    await befriend(client, 27, 1, expected=404)


async def test_add_self_as_friend_returns_400(client):
    await _users(client, 1)
    await befriend(client, 1, 1, expected=400)


async def test_delete_friend_is_idempotent(client):
    await _users(client, 5)
    await befriend(client, 1, 5)

    r = await client.delete("/users/1/friends/5")
    assert r.status_code == 200 and r.json() == {"ok": True, "deleted": True}
    r = await client.delete("/users/1/friends/5")
    assert r.status_code == 200 and r.json() == {"ok": True, "deleted": False}
    assert (await client.get("/users/1/friends")).json() == []


async def test_delete_friend_keeps_reverse_edge(client):
    await _users(client, 2)
    await befriend(client, 1, 2)
    await befriend(client, 2, 1)
    await client.delete("/users/1/friends/2")

    friends_of_2 = (await client.get("/users/2/friends")).json()
    assert ids(friends_of_2) == [1]
    assert friends_of_2[0]["acknowledged"] is False


async def test_common_friends_is_intersection_without_endpoints(client):
    await _users(client, 6)
    for target in (2, 3, 4, 5):
        await befriend(client, 1, target)
    for target in (1, 3, 5, 6):
        await befriend(client, 2, target)

    r = await client.get("/users/1/friends/common/2")
    assert r.status_code == 200
    assert ids(r.json()) == [3, 5]

    r = await client.get("/users/2/friends/common/1")
    assert ids(r.json()) == [3, 5]


async def test_common_friends_with_unknown_user_returns_404(client):
    await _users(client, 1)
    r = await client.get("/users/1/friends/common/99")
    assert r.status_code == 404


async def test_friends_of_unknown_user_returns_404(client):
    r = await client.get("/users/3/friends")
    assert r.status_code == 404


async def test_delete_user_cascades_edges_both_ways(client):
    await _users(client, 3)
    await befriend(client, 1, 2)
    await befriend(client, 2, 1)
    await befriend(client, 3, 2)

    await client.delete("/users/2")

    assert (await client.get("/users/1/friends")).json() == []
    assert (await client.get("/users/3/friends")).json() == []


async def test_create_user_with_acknowledged_friend_map(client):
    await _users(client, 2)
    r = await client.post("/users", json=user_payload(
        3, friends={"1": True, "2": False}))
    assert r.status_code == 200
    assert r.json()["friends"] == {"1": True, "2": False}

    # acknowledged entry wrote the reverse edge as well
    assert ids((await client.get("/users/1/friends")).json()) == [3]
    assert (await client.get("/users/2/friends")).json() == []


async def test_update_user_rebuilds_friend_edges(client):
    await _users(client, 3)
    await befriend(client, 1, 2)
    await befriend(client, 3, 1)

    r = await client.put("/users", json=user_payload(1, id=1,
                                                     friends={"3": False}))
    assert r.status_code == 200
    assert r.json()["friends"] == {"3": False}
    # incoming edges are replaced too
    assert (await client.get("/users/3/friends")).json() == []


async def test_create_user_with_unknown_friend_returns_404(client):
    r = await client.post("/users", json=user_payload(1, friends={"5": True}))
    assert r.status_code == 404
    assert (await client.get("/users")).json() == []
