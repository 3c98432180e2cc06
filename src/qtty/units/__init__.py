# qtty/units/__init__.py
from typing import TYPE_CHECKING, Any

from qtty.units.angular import *  # noqa: F401,F403
from qtty.units.frequency import *  # noqa: F401,F403
from qtty.units.length import *  # noqa: F401,F403
from qtty.units.mass import *  # noqa: F401,F403
from qtty.units.power import *  # noqa: F401,F403
from qtty.units.time import *  # noqa: F401,F403
from qtty.units.velocity import *  # noqa: F401,F403

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from qtty.units.registry import UnitsRegistry


def _get_default_registry() -> "UnitsRegistry":
    # Import here so the catalog modules load before the registry reads them.
    from qtty.units.registry import DEFAULT_REGISTRY
    return DEFAULT_REGISTRY


def __getattr__(name: str) -> Any:
    if name == "u":
        return _get_default_registry().as_namespace()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + ["u"])
