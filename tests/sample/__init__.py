"""Sample application and plugin models exercised by the test-suite.

Importing the package registers every model on :data:`db`.
"""

from __future__ import annotations

from tests.sample import models  # noqa: F401
from tests.sample.blog import models as blog_models  # noqa: F401
from tests.sample.extensions import db
from tests.sample.users import models as users_models  # noqa: F401

PLUGIN_MODULES = {
    "Blog": "tests.sample.blog",
    "Users": "tests.sample.users",
}

__all__ = ["PLUGIN_MODULES", "db"]
