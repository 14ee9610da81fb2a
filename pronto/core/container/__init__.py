"""Dependency Injection Container Module.

Usage:
------
    from pronto.core.config import settings
    from pronto.core.container import create_container

    container = create_container(settings)

    # In tests (construct directly with fakes)
    from pronto.core.container import Container
    test_container = Container(sdk=FakeAnalyticsSdk(), ...)

Module structure:
-----------------
    container/
    ├── __init__.py      # This file - exports public API
    ├── container.py     # Container dataclass (serves)
    └── factory.py       # create_container() (builds)
"""

from pronto.core.container.container import Container
from pronto.core.container.factory import create_container

__all__ = ["Container", "create_container"]
