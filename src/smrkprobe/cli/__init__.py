"""SMRK Probe CLI package."""

from __future__ import annotations

from ._app import (
    app as app,  # noqa: F401
)
from ._app import (
    console as console,  # noqa: F401
)
from ._rich_output import (
    key_value_panel as key_value_panel,  # noqa: F401
)
from ._rich_output import (
    status_table as status_table,  # noqa: F401
)
from ._rich_output import (
    vector_table as vector_table,  # noqa: F401
)
from ._theme import (
    residual_status as residual_status,  # noqa: F401
)
from ._theme import (
    SMRK_THEME as SMRK_THEME,  # noqa: F401
)
from ._utils import (
    _load_vector_file as _load_vector_file,  # noqa: F401
)
from ._utils import (
    _parse_vector as _parse_vector,  # noqa: F401
)
from ._utils import (
    _resolve_project_config as _resolve_project_config,  # noqa: F401
)


def _register_commands() -> None:
    """Register command modules in desired help-panel order.

    The import order determines the panel order shown by
    ``smrkprobe --help``.
    """
    # isort: off
    from . import _matvec  # noqa: F401  Operator
    from . import _probe  # noqa: F401
    from . import _doctor  # noqa: F401  Utilities
    # isort: on


_register_commands()
