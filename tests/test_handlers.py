from mangum import Mangum


def test_task_handler_routes():
    from auraboard.handlers import task_handler

    assert isinstance(task_handler.handler, Mangum)
    paths = {route.path for route in task_handler.app.routes}
    assert {"/tasks", "/profile"} <= paths


def test_reflection_handler_routes():
    from auraboard.handlers import reflection_handler

    assert isinstance(reflection_handler.handler, Mangum)
    assert "/reflection" in {route.path for route in reflection_handler.app.routes}
