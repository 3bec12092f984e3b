import os
import pytest

os.environ["DISABLE_SENTRY"] = "True"


@pytest.fixture
def headers_target():
    return {"Content-Type": "json", "X-Request-Id": "abc", "Accept": "*/*"}
