from tests.helpers import ApiTestCase


class TestCourses(ApiTestCase):
    def create(self, code="DIT101", name="Introduction to Programming", faculty="FICT"):
        return self.client.post("/courses", json={"course_code": code, "course_name": name, "faculty": faculty})

    def test_create_and_get(self):
        created = self.create()
        self.assertEqual(created.status_code, 201)
        course_id = created.json()["course_id"]

        response = self.client.get(f"/courses/{course_id}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["course_code"], "DIT101")

    def test_list_newest_first(self):
        first = self.create(code="A1").json()["course_id"]
        second = self.create(code="B2").json()["course_id"]
        response = self.client.get("/courses")
        self.assertEqual([c["course_id"] for c in response.json()], [second, first])

    def test_update_is_partial(self):
        course_id = self.create().json()["course_id"]
        response = self.client.put(f"/courses/{course_id}", json={"faculty": "FABE"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["faculty"], "FABE")
        self.assertEqual(response.json()["course_code"], "DIT101")

    def test_delete_returns_removed_course(self):
        course_id = self.create().json()["course_id"]
        response = self.client.delete(f"/courses/{course_id}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "Course deleted successfully")
        self.assertEqual(response.json()["course"]["course_id"], course_id)
        self.assertEqual(self.client.get(f"/courses/{course_id}").status_code, 404)

    def test_missing_course(self):
        self.assertEqual(self.client.get("/courses/999").json(), {"error": "Course not found"})
        self.assertEqual(self.client.put("/courses/999", json={"faculty": "X"}).status_code, 404)
        self.assertEqual(self.client.delete("/courses/999").status_code, 404)

    def test_store_constraint_failure_is_a_500_without_driver_text(self):
        response = self.client.post("/courses", json={"course_code": "X1"})
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "Failed to create course"})
