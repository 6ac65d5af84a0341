from eventforge.testing.fixtures import (  # noqa: F401
    container,
    container_dispatcher,
    dispatcher,
    listeners,
)
