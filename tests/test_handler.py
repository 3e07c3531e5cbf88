import asyncio

import pytest

from app.handlers.todo_handler import handler


@pytest.fixture
def event_loop_for_handler():
    # Mangum drives the app on the thread's current event loop
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    yield loop
    asyncio.set_event_loop(None)
    loop.close()


def http_api_event(method, path):
    return {
        "version": "2.0",
        "routeKey": "$default",
        "rawPath": path,
        "rawQueryString": "",
        "headers": {"host": "example.execute-api.us-east-1.amazonaws.com"},
        "requestContext": {
            "accountId": "123456789012",
            "apiId": "example",
            "domainName": "example.execute-api.us-east-1.amazonaws.com",
            "http": {
                "method": method,
                "path": path,
                "protocol": "HTTP/1.1",
                "sourceIp": "192.0.2.1",
                "userAgent": "pytest",
            },
            "requestId": "request-id",
            "routeKey": "$default",
            "stage": "$default",
        },
        "isBase64Encoded": False,
    }


def test_lambda_root_message(event_loop_for_handler):
    res = handler(http_api_event("GET", "/"), {})
    assert res["statusCode"] == 200
    assert res["body"] == "Send requests for todos to the /todos endpoint please!"
