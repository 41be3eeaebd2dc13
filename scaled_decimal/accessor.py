import logging
from typing import Any, Dict, Optional

from scaled_decimal.config import AccessorOptions
from scaled_decimal.constants import DEFAULT_PRECISION
from scaled_decimal.precision import Precision

logger = logging.getLogger(__name__)


class DecimalAsInteger:
    """
    Data descriptor presenting a float view of a scaled integer attribute.

    The descriptor owns no storage. Reads and writes go through the backing
    field (``<attribute>_as_integer`` unless ``source`` is given) on each
    access, scaled by ``10 ** precision``:

        class Lap:
            seconds = DecimalAsInteger(source="ten_thousandth_seconds", precision=4)

            def __init__(self):
                self.ten_thousandth_seconds = None

        lap = Lap()
        lap.seconds = 1.00005    # lap.ten_thousandth_seconds == 10001
        lap.seconds              # 1.0001

    Non-numeric values (None, "", True/False, ...) are stored as None and
    read back as None.
    """
    def __init__(self, source: Optional[str] = None, precision: Optional[int] = None):
        self.options = AccessorOptions(
            source=source,
            precision=DEFAULT_PRECISION if precision is None else precision,
        )
        self.precision = Precision(self.options.precision)
        self.name: Optional[str] = None
        self.source: Optional[str] = source

    def __set_name__(self, owner: type, name: str):
        source = self.options.resolve_source(name)
        if source == name:
            raise ValueError(f"Attribute {name!r} cannot be its own source.")
        self.name = name
        self.source = source

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return self.precision.from_int(getattr(instance, self._bound_source()))

    def __set__(self, instance: Any, value: Any):
        setattr(instance, self._bound_source(), self.precision.to_int(value))

    def __delete__(self, instance: Any):
        setattr(instance, self._bound_source(), None)

    def _bound_source(self) -> str:
        if self.source is None:
            raise AttributeError("DecimalAsInteger is not bound to an attribute")
        return self.source

    def __repr__(self) -> str:
        return (
            f"DecimalAsInteger(name={self.name!r}, source={self.source!r}, "
            f"precision={self.precision.decimals})"
        )


def bind_decimal_accessor(
    host_type: type,
    attribute: str,
    source: Optional[str] = None,
    precision: Optional[int] = None,
) -> DecimalAsInteger:
    """
    Installs a DecimalAsInteger descriptor named ``attribute`` on ``host_type``.

    Rebinding an attribute replaces its previous accessor; accessors bound
    under other names are untouched. The backing field is not checked here,
    a missing one fails with AttributeError on first access.
    """
    if not isinstance(attribute, str) or not attribute.isidentifier():
        raise ValueError(f"Attribute {attribute!r} must be a valid attribute name.")

    accessor = DecimalAsInteger(source=source, precision=precision)
    accessor.__set_name__(host_type, attribute)
    setattr(host_type, attribute, accessor)

    logger.debug(
        f"Bound {host_type.__name__}.{attribute} -> {accessor.source} "
        f"(precision={accessor.precision.decimals})"
    )
    return accessor


def decimal_accessors(host_type: type) -> Dict[str, DecimalAsInteger]:
    """All decimal accessors visible on host_type, subclass definitions winning."""
    found: Dict[str, DecimalAsInteger] = {}
    for klass in reversed(host_type.__mro__):
        for name, value in vars(klass).items():
            if isinstance(value, DecimalAsInteger):
                found[name] = value
            elif name in found:
                del found[name]
    return found


class DecimalAsIntegerMixin:
    """Adds the ``decimal_as_integer`` class helper to a host type."""

    @classmethod
    def decimal_as_integer(
        cls,
        attribute: str,
        *,
        source: Optional[str] = None,
        precision: Optional[int] = None,
    ) -> DecimalAsInteger:
        return bind_decimal_accessor(cls, attribute, source=source, precision=precision)
