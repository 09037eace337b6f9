import sys
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "py" / "src"))

from httpgolden import (  # noqa: E402
    Capture,
    Driver,
    GoldenStore,
    Request,
    RunConfig,
    capture_response,
    json,
    json_body,
    modify_json,
    new_request,
    no_content,
    pretty_json,
    text,
)


@dataclass
class User:
    id: int


def handler(request: Request):
    if request.path == "/v1/user" and request.method == "POST":
        return json(201, {"id": 1, "created_time": int(time.time())})
    if request.path == "/v1/user/1" and request.method == "GET":
        return json(200, {"name": "JoJo"})
    if request.path == "/v1/user/1" and request.method == "PUT":
        return no_content()
    return text(404, "404 page not found\n")


def scenario(driver: Driver) -> None:
    user = Capture(User)
    driver.run(
        "TestUserScenario/1_UserPost_registration",
        new_request("POST", "/v1/user", json_body({"name": "JoJo"})),
        201,
        capture_response(user),
        modify_json({"created_time": 1677136520}),
        pretty_json,
    )
    driver.run("TestUserScenario/2_UserGet_after_registration", new_request("GET", f"/v1/user/{user.value.id}"), 200, pretty_json)
    driver.run(
        "TestUserScenario/3_UserPut_update_user_name",
        new_request("PUT", f"/v1/user/{user.value.id}", json_body({"name": "Giorno Giovanna"})),
        204,
    )


def main() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        store = GoldenStore(tmp)
        scenario(Driver(handler, RunConfig(update_golden=True), store=store))
        scenario(Driver(handler, RunConfig(), store=store))

        golden = store.read("TestUserScenario/1_UserPost_registration")
        assert golden.endswith(b'{\n  "created_time": 1677136520,\n  "id": 1\n}')

    print("examples/scenario/py.py: PASS")


if __name__ == "__main__":
    main()
