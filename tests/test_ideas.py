def test_created_idea_defaults_status_and_carries_owner(client, make_user):
    alice = make_user("alice")
    resp = client.post("/api/ideas", json={"title": "Foo"}, headers=alice.headers)
    assert resp.status_code == 201
    idea_id = resp.json()["id"]

    resp = client.get(f"/api/ideas/{idea_id}", headers=alice.headers)
    assert resp.status_code == 200
    idea = resp.json()
    assert idea["title"] == "Foo"
    assert idea["status"] == "New"
    assert idea["user_id"] == alice.id
    assert idea["username"] == "alice"
    assert idea["name"] == "Alice"
    assert idea["created_at"]


def test_create_keeps_optional_fields(client, make_user, make_idea):
    alice = make_user("alice")
    idea_id = make_idea(
        alice,
        description="Long text",
        short_description="Short",
        area="Facilities",
        status="Draft",
    )
    idea = client.get(f"/api/ideas/{idea_id}", headers=alice.headers).json()
    assert idea["description"] == "Long text"
    assert idea["short_description"] == "Short"
    assert idea["area"] == "Facilities"
    assert idea["status"] == "Draft"


def test_create_requires_title(client, make_user):
    alice = make_user("alice")
    resp = client.post("/api/ideas", json={"description": "no title"}, headers=alice.headers)
    assert resp.status_code == 400
    assert resp.json() == {"message": "Title required."}


def test_create_accepts_multipart_and_discards_file(client, make_user):
    alice = make_user("alice")
    resp = client.post(
        "/api/ideas",
        data={"title": "With attachment", "area": "IT"},
        files={"file": ("sketch.txt", b"not stored", "text/plain")},
        headers=alice.headers,
    )
    assert resp.status_code == 201
    idea = client.get(f"/api/ideas/{resp.json()['id']}", headers=alice.headers).json()
    assert idea["title"] == "With attachment"
    assert idea["area"] == "IT"
    assert "file" not in idea


def test_create_rejects_unparseable_body(client, make_user):
    alice = make_user("alice")
    headers = dict(alice.headers, **{"Content-Type": "application/json"})
    resp = client.post("/api/ideas", content=b"{not json", headers=headers)
    assert resp.status_code == 400


def test_create_requires_auth(client):
    resp = client.post("/api/ideas", json={"title": "Foo"})
    assert resp.status_code == 401


def test_list_all_is_newest_first_with_owner(client, make_user, make_idea):
    alice = make_user("alice")
    bob = make_user("bob")
    first = make_idea(alice, title="First")
    second = make_idea(bob, title="Second")

    resp = client.get("/api/ideas", headers=alice.headers)
    assert resp.status_code == 200
    ideas = resp.json()
    assert [i["id"] for i in ideas] == [second, first]
    assert ideas[0]["user_id"] == bob.id
    assert ideas[0]["username"] == "bob"
    assert ideas[1]["username"] == "alice"


def test_my_ideas_only_lists_requesters_ideas(client, make_user, make_idea):
    alice = make_user("alice")
    bob = make_user("bob")
    a1 = make_idea(alice, title="A1")
    make_idea(bob, title="B1")
    a2 = make_idea(alice, title="A2")

    ideas = client.get("/api/my-ideas", headers=alice.headers).json()
    assert [i["id"] for i in ideas] == [a2, a1]
    assert "username" not in ideas[0]


def test_get_missing_idea_is_not_found(client, make_user):
    alice = make_user("alice")
    resp = client.get("/api/ideas/12345", headers=alice.headers)
    assert resp.status_code == 404
    assert resp.json() == {"message": "Idea not found."}


def test_non_integer_id_is_bad_request(client, make_user):
    alice = make_user("alice")
    resp = client.get("/api/ideas/abc", headers=alice.headers)
    assert resp.status_code == 400


def test_patch_writes_only_provided_fields(client, make_user, make_idea):
    alice = make_user("alice")
    idea_id = make_idea(alice, description="Keep me", short_description="Old")

    resp = client.patch(f"/api/ideas/{idea_id}", json={"status": "Approved"}, headers=alice.headers)
    assert resp.status_code == 200
    row = resp.json()
    assert row["id"] == idea_id
    assert row["status"] == "Approved"
    assert row["description"] == "Keep me"
    assert row["short_description"] == "Old"
    assert row["user_id"] == alice.id


def test_patch_can_clear_a_field(client, make_user, make_idea):
    alice = make_user("alice")
    idea_id = make_idea(alice, description="Something")
    resp = client.patch(f"/api/ideas/{idea_id}", json={"description": ""}, headers=alice.headers)
    assert resp.status_code == 200
    assert resp.json()["description"] == ""


def test_patch_without_fields_is_bad_request(client, make_user, make_idea):
    alice = make_user("alice")
    idea_id = make_idea(alice)
    resp = client.patch(f"/api/ideas/{idea_id}", json={"title": "ignored"}, headers=alice.headers)
    assert resp.status_code == 400
    assert resp.json() == {"message": "No fields to update."}


def test_patch_missing_idea_is_not_found(client, make_user):
    alice = make_user("alice")
    resp = client.patch("/api/ideas/999", json={"status": "x"}, headers=alice.headers)
    assert resp.status_code == 404


def test_any_user_may_patch_by_default_and_last_write_wins(client, make_user, make_idea):
    alice = make_user("alice")
    bob = make_user("bob")
    idea_id = make_idea(alice)

    first = client.patch(f"/api/ideas/{idea_id}", json={"status": "In Review"}, headers=alice.headers)
    second = client.patch(f"/api/ideas/{idea_id}", json={"status": "Rejected"}, headers=bob.headers)
    assert first.status_code == 200
    assert second.status_code == 200

    idea = client.get(f"/api/ideas/{idea_id}", headers=alice.headers).json()
    assert idea["status"] == "Rejected"
    assert idea["user_id"] == alice.id


def test_patch_ownership_can_be_enforced(make_client, make_user, make_idea):
    alice = make_user("alice")
    bob = make_user("bob")
    idea_id = make_idea(alice)

    strict = make_client(ENFORCE_IDEA_OWNERSHIP=True)
    resp = strict.patch(f"/api/ideas/{idea_id}", json={"status": "Rejected"}, headers=bob.headers)
    assert resp.status_code == 403
    assert resp.json() == {"message": "Not your idea."}

    resp = strict.patch(f"/api/ideas/{idea_id}", json={"status": "Done"}, headers=alice.headers)
    assert resp.status_code == 200


def test_only_owner_may_delete(client, make_user, make_idea):
    alice = make_user("alice")
    bob = make_user("bob")
    idea_id = make_idea(alice)

    resp = client.delete(f"/api/ideas/{idea_id}", headers=bob.headers)
    assert resp.status_code == 403
    assert resp.json() == {"message": "Not your idea."}

    resp = client.delete(f"/api/ideas/{idea_id}", headers=alice.headers)
    assert resp.status_code == 200
    assert resp.json() == {"success": True}

    assert client.get("/api/ideas", headers=alice.headers).json() == []
    assert client.get("/api/my-ideas", headers=alice.headers).json() == []
    assert client.get(f"/api/ideas/{idea_id}", headers=alice.headers).status_code == 404


def test_delete_missing_idea_is_forbidden(client, make_user):
    alice = make_user("alice")
    resp = client.delete("/api/ideas/999", headers=alice.headers)
    assert resp.status_code == 403


def test_delete_removes_the_ideas_comments(client, make_user, make_idea):
    alice = make_user("alice")
    bob = make_user("bob")
    idea_id = make_idea(alice)
    top = client.post(f"/api/ideas/{idea_id}/comments", json={"comment": "top"}, headers=bob.headers).json()
    client.post(
        f"/api/ideas/{idea_id}/comments",
        json={"comment": "reply", "parentId": top["id"]},
        headers=alice.headers,
    )

    assert client.delete(f"/api/ideas/{idea_id}", headers=alice.headers).status_code == 200
    assert client.get(f"/api/ideas/{idea_id}/comments", headers=alice.headers).json() == []


def test_create_with_empty_body_reports_missing_title(client, make_user):
    alice = make_user("alice")
    resp = client.post("/api/ideas", headers=alice.headers)
    assert resp.status_code == 400
    assert resp.json() == {"message": "Title required."}
