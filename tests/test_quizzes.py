"""Quiz routes: optional category ownership, embedded questions, guarded access."""
from conftest import make_category, make_quiz, quiz_payload


class TestCreate:
    def test_create_with_category_resolves_display_fields(self, alice):
        math = make_category(alice, "Math", color="#00ff00", icon="calc")
        quiz = make_quiz(alice, category_id=math["id"], description="Warm-up", time_limit=60)

        assert quiz["owner_id"] == alice.id
        assert quiz["category_id"] == math["id"]
        assert quiz["category"] == {"id": math["id"], "name": "Math", "color": "#00ff00", "icon": "calc"}
        assert quiz["description"] == "Warm-up"
        assert quiz["time_limit"] == 60

    def test_create_without_category(self, alice):
        quiz = make_quiz(alice)
        assert quiz["category_id"] is None
        assert quiz["category"] is None
        assert quiz["time_limit"] == 0

    def test_questions_keep_order_and_defaults(self, alice):
        quiz = make_quiz(alice)
        assert [q["text"] for q in quiz["questions"]] == ["2+2?", "3*3?"]
        first, second = quiz["questions"]
        assert first["difficulty"] == "easy"
        assert second["difficulty"] == "medium"
        assert first["options"] == [{"text": "4", "is_correct": True}, {"text": "5", "is_correct": False}]

    def test_question_field_alias(self, alice):
        payload = {"title": "Legacy", "questions": [{"question": "Capital of France?", "options": [{"text": "Paris"}]}]}
        response = alice.post("/api/quizzes", json=payload)
        assert response.status_code == 200
        assert response.json()["questions"][0]["text"] == "Capital of France?"

    def test_other_users_category_is_invalid(self, alice, bob):
        math = make_category(alice, "Math")
        response = bob.post("/api/quizzes", json=quiz_payload(category_id=math["id"]))
        assert response.status_code == 403
        assert response.json()["detail"] == "Invalid category"
        assert bob.get("/api/quizzes").json() == []

    def test_missing_category_is_invalid(self, alice):
        response = alice.post("/api/quizzes", json=quiz_payload(category_id=999))
        assert response.status_code == 403
        assert response.json()["detail"] == "Invalid category"

    def test_validation(self, alice):
        assert alice.post("/api/quizzes", json=quiz_payload(questions=[])).status_code == 422
        assert alice.post("/api/quizzes", json={"title": "No questions"}).status_code == 422
        assert alice.post("/api/quizzes", json=quiz_payload(title="")).status_code == 422
        assert alice.post("/api/quizzes", json=quiz_payload(time_limit=-5)).status_code == 422


class TestRead:
    def test_list_is_scoped_newest_first_with_categories(self, alice, bob):
        math = make_category(alice, "Math")
        plain = make_quiz(alice, "Plain")
        tagged = make_quiz(alice, "Tagged", category_id=math["id"])
        make_quiz(bob, "Bob's")

        quizzes = alice.get("/api/quizzes").json()
        assert [q["id"] for q in quizzes] == [tagged["id"], plain["id"]]
        assert quizzes[0]["category"]["name"] == "Math"
        assert quizzes[1]["category"] is None
        assert [q["title"] for q in bob.get("/api/quizzes").json()] == ["Bob's"]

    def test_get_own(self, alice):
        quiz = make_quiz(alice)
        response = alice.get(f"/api/quizzes/{quiz['id']}")
        assert response.status_code == 200
        assert response.json() == quiz

    def test_get_other_users_quiz_is_unauthorized(self, alice, bob):
        quiz = make_quiz(alice)
        assert bob.get(f"/api/quizzes/{quiz['id']}").status_code == 403

    def test_get_missing(self, alice):
        response = alice.get("/api/quizzes/999")
        assert response.status_code == 404
        assert response.json()["detail"] == "Quiz not found"

    def test_list_by_category(self, alice):
        math = make_category(alice, "Math")
        art = make_category(alice, "Art")
        quiz = make_quiz(alice, category_id=math["id"])
        make_quiz(alice, category_id=art["id"])
        make_quiz(alice)

        response = alice.get(f"/api/quizzes/category/{math['id']}")
        assert response.status_code == 200
        assert [q["id"] for q in response.json()] == [quiz["id"]]

    def test_list_by_other_users_category_is_unauthorized(self, alice, bob):
        math = make_category(alice, "Math")
        assert bob.get(f"/api/quizzes/category/{math['id']}").status_code == 403

    def test_list_by_missing_category(self, alice):
        assert alice.get("/api/quizzes/category/999").status_code == 404


class TestUpdate:
    def test_partial_update(self, alice):
        quiz = make_quiz(alice, description="Warm-up", time_limit=30)
        response = alice.put(f"/api/quizzes/{quiz['id']}", json={"title": "Renamed"})
        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "Renamed"
        assert body["description"] == "Warm-up"
        assert body["time_limit"] == 30
        assert body["questions"] == quiz["questions"]

    def test_replace_questions_and_clear_limit(self, alice):
        quiz = make_quiz(alice, time_limit=30)
        body = alice.put(
            f"/api/quizzes/{quiz['id']}",
            json={"questions": [{"text": "New?", "options": [{"text": "Yes", "is_correct": True}]}], "time_limit": 0},
        ).json()
        assert [q["text"] for q in body["questions"]] == ["New?"]
        assert body["time_limit"] == 0

    def test_empty_questions_rejected(self, alice):
        quiz = make_quiz(alice)
        assert alice.put(f"/api/quizzes/{quiz['id']}", json={"questions": []}).status_code == 422

    def test_move_to_own_category(self, alice):
        math = make_category(alice, "Math")
        quiz = make_quiz(alice)
        body = alice.put(f"/api/quizzes/{quiz['id']}", json={"category_id": math["id"]}).json()
        assert body["category_id"] == math["id"]
        assert body["category"]["name"] == "Math"

    def test_move_to_other_users_category_is_invalid(self, alice, bob):
        own = make_category(alice, "Math")
        foreign = make_category(bob, "Bob's")
        quiz = make_quiz(alice, category_id=own["id"])

        response = alice.put(f"/api/quizzes/{quiz['id']}", json={"category_id": foreign["id"], "title": "Hijack"})
        assert response.status_code == 403
        assert response.json()["detail"] == "Invalid category"

        unchanged = alice.get(f"/api/quizzes/{quiz['id']}").json()
        assert unchanged["category_id"] == own["id"]
        assert unchanged["title"] == quiz["title"]

    def test_null_category_detaches(self, alice):
        math = make_category(alice, "Math")
        quiz = make_quiz(alice, category_id=math["id"])
        body = alice.put(f"/api/quizzes/{quiz['id']}", json={"category_id": None}).json()
        assert body["category_id"] is None
        assert body["category"] is None

    def test_other_user_cannot_update(self, alice, bob):
        quiz = make_quiz(alice)
        assert bob.put(f"/api/quizzes/{quiz['id']}", json={"title": "Mine"}).status_code == 403

    def test_update_missing(self, alice):
        assert alice.put("/api/quizzes/999", json={"title": "x"}).status_code == 404


class TestDelete:
    def test_delete(self, alice):
        math = make_category(alice, "Math")
        quiz = make_quiz(alice, category_id=math["id"])

        response = alice.delete(f"/api/quizzes/{quiz['id']}")
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Quiz removed"}
        assert alice.get("/api/quizzes").json() == []
        # the category is untouched
        assert [c["id"] for c in alice.get("/api/categories").json()] == [math["id"]]

    def test_other_user_cannot_delete(self, alice, bob):
        quiz = make_quiz(alice)
        assert bob.delete(f"/api/quizzes/{quiz['id']}").status_code == 403
        assert len(alice.get("/api/quizzes").json()) == 1

    def test_delete_missing(self, alice):
        assert alice.delete("/api/quizzes/999").status_code == 404
